from __future__ import annotations

from decimal import Decimal

import pytest

from roster.models.employee import Developer, Intern, Manager
from roster.models.user import UserProfile
from roster.services.payroll import (
    UnknownEmployeeKindError,
    calculate_salary,
    describe,
    format_salary_line,
    position_of,
)


def test_manager_salary_adds_ten_percent(manager):
    assert calculate_salary(manager) == Decimal("5500.00")


def test_developer_salary_adds_500_per_project(developer):
    assert calculate_salary(developer) == Decimal("5500.00")


def test_intern_salary_is_rate_times_hours(intern):
    assert calculate_salary(intern) == Decimal("1800.00")


def test_salary_is_rounded_to_cents():
    intern = Intern(name="Dan", age=20, hourly_rate=Decimal("10.555"), hours_worked=1)
    assert calculate_salary(intern) == Decimal("10.56")
    assert calculate_salary(intern).as_tuple().exponent == -2


def test_developer_without_projects_gets_base_salary():
    developer = Developer(name="Eve", age=30, base_salary=Decimal("4200"), projects_completed=0)
    assert calculate_salary(developer) == Decimal("4200.00")


def test_intern_without_hours_earns_nothing():
    intern = Intern(name="Fay", age=19, hourly_rate=Decimal("15"), hours_worked=0)
    assert calculate_salary(intern) == Decimal("0.00")


def test_salary_accepts_float_input():
    manager = Manager(name="Gus", age=50, base_salary=80000.0)
    assert calculate_salary(manager) == Decimal("88000.00")


def test_salary_is_idempotent(developer):
    assert calculate_salary(developer) == calculate_salary(developer)


@pytest.mark.parametrize(
    ("fixture_name", "expected"),
    [("manager", "Manager"), ("developer", "Developer"), ("intern", "Intern")],
)
def test_position_of(request, fixture_name, expected):
    assert position_of(request.getfixturevalue(fixture_name)) == expected


def test_describe(manager):
    assert describe(manager) == "This is Alice, who is 35 years old and works as a Manager."


def test_format_salary_line(intern):
    assert format_salary_line(intern) == "Salary of Charlie (Intern): $1800.00"


def test_non_employee_is_rejected():
    user = UserProfile(id="u1", username="john_doe")
    with pytest.raises(UnknownEmployeeKindError):
        calculate_salary(user)  # type: ignore[arg-type]
    with pytest.raises(UnknownEmployeeKindError):
        position_of(user)  # type: ignore[arg-type]


def test_largest_manager_salary_rounds_without_error():
    manager = Manager(name="Max", age=60, base_salary=Decimal("99999999999.9999"))
    assert calculate_salary(manager) == Decimal("109999999999.99")
