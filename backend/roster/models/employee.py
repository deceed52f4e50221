"""Employee records over the closed Manager / Developer / Intern variant set."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class EmployeeBase(BaseModel):
    """Fields shared by every variant. Only the variants are ever instantiated."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)

    def __init__(self, **data: Any) -> None:
        if type(self) is EmployeeBase:
            raise TypeError("EmployeeBase cannot be instantiated; use Manager, Developer or Intern")
        super().__init__(**data)


# Bounds keep every salary within the default 28-digit decimal context.
Money = Annotated[Decimal, Field(ge=0, max_digits=15, decimal_places=4)]
MAX_COUNT = 100_000


class Manager(EmployeeBase):
    kind: Literal["manager"] = "manager"
    base_salary: Money


class Developer(EmployeeBase):
    kind: Literal["developer"] = "developer"
    base_salary: Money
    projects_completed: int = Field(..., ge=0, le=MAX_COUNT)


class Intern(EmployeeBase):
    kind: Literal["intern"] = "intern"
    hourly_rate: Money
    hours_worked: int = Field(..., ge=0, le=MAX_COUNT)


Employee = Annotated[Union[Manager, Developer, Intern], Field(discriminator="kind")]


class EmployeeSummary(BaseModel):
    """Minimal employee info for lists."""

    name: str
    age: int
    kind: str
    position: str


class EmployeeDetail(EmployeeSummary):
    """Summary plus the derived salary and description."""

    salary: Decimal
    description: str


class SalaryRequest(BaseModel):
    """Request body for computing the salary of an arbitrary employee record."""

    employee: Employee


class SalaryResponse(BaseModel):
    position: str
    salary: Decimal
