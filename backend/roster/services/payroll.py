"""Salary, position and description for each employee variant."""

from __future__ import annotations

from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal

from roster.models.employee import Developer, Employee, Intern, Manager

CENTS = Decimal("0.01")

MANAGER_BONUS_RATE = Decimal("0.10")
DEVELOPER_PROJECT_BONUS = Decimal("500")


class UnknownEmployeeKindError(Exception):
    pass


def _manager_salary(employee: Manager) -> Decimal:
    return employee.base_salary + employee.base_salary * MANAGER_BONUS_RATE


def _developer_salary(employee: Developer) -> Decimal:
    return employee.base_salary + employee.projects_completed * DEVELOPER_PROJECT_BONUS


def _intern_salary(employee: Intern) -> Decimal:
    return employee.hourly_rate * employee.hours_worked


_SALARY_FORMULAS: dict[str, Callable[..., Decimal]] = {
    "manager": _manager_salary,
    "developer": _developer_salary,
    "intern": _intern_salary,
}

_POSITIONS: dict[str, str] = {
    "manager": "Manager",
    "developer": "Developer",
    "intern": "Intern",
}

_VARIANTS: dict[str, type] = {
    "manager": Manager,
    "developer": Developer,
    "intern": Intern,
}


def _kind_of(employee: Employee) -> str:
    kind = getattr(employee, "kind", None)
    if kind not in _VARIANTS or not isinstance(employee, _VARIANTS[kind]):
        raise UnknownEmployeeKindError(f"Not an employee variant: {type(employee).__name__}")
    return kind


def calculate_salary(employee: Employee) -> Decimal:
    """Return the variant's salary rounded to cents."""
    salary = _SALARY_FORMULAS[_kind_of(employee)](employee)
    return salary.quantize(CENTS, rounding=ROUND_HALF_UP)


def position_of(employee: Employee) -> str:
    return _POSITIONS[_kind_of(employee)]


def describe(employee: Employee) -> str:
    return (
        f"This is {employee.name}, who is {employee.age} years old "
        f"and works as a {position_of(employee)}."
    )


def format_salary_line(employee: Employee) -> str:
    return f"Salary of {employee.name} ({position_of(employee)}): ${calculate_salary(employee)}"
