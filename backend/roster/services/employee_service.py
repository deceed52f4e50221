"""In-memory employee registry (read-only after initialization)."""

from __future__ import annotations

import logging

from roster.core.config import Settings
from roster.core.seed import seed_employees
from roster.models.employee import Employee, EmployeeDetail, EmployeeSummary
from roster.services.payroll import calculate_salary, describe, position_of

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self) -> None:
        self.employees: list[Employee] = []
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if settings.SEED_DEMO_DATA:
            self.employees = seed_employees()
        else:
            logger.warning("Demo data disabled; EmployeeService starts empty")

        self.initialized = True
        logger.info("EmployeeService initialized (employees=%d)", len(self.employees))

    async def close(self) -> None:
        self.employees = []
        self.initialized = False

    def load(self, employees: list[Employee]) -> None:
        self.employees = list(employees)
        self.initialized = True

    async def get_employee_by_name(self, name: str) -> EmployeeDetail | None:
        wanted = name.casefold()
        for employee in self.employees:
            if employee.name.casefold() == wanted:
                return self._to_detail(employee)
        return None

    async def get_employees(self, skip: int = 0, limit: int = 50) -> list[EmployeeSummary]:
        return [self._to_summary(e) for e in self.employees[skip : skip + limit]]

    def _to_summary(self, employee: Employee) -> EmployeeSummary:
        return EmployeeSummary(
            name=employee.name,
            age=employee.age,
            kind=employee.kind,
            position=position_of(employee),
        )

    def _to_detail(self, employee: Employee) -> EmployeeDetail:
        summary = self._to_summary(employee)
        return EmployeeDetail(
            **summary.model_dump(),
            salary=calculate_salary(employee),
            description=describe(employee),
        )


employee_service = EmployeeService()
