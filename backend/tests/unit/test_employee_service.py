from __future__ import annotations

from decimal import Decimal

import pytest

from roster.core.config import Settings
from roster.models.employee import EmployeeDetail, EmployeeSummary
from roster.services.employee_service import EmployeeService


@pytest.mark.anyio
async def test_initialize_seeds_demo_roster():
    service = EmployeeService()
    await service.initialize(Settings())

    assert service.initialized is True
    assert [e.name for e in service.employees] == ["Alice", "Bob", "Charlie"]


@pytest.mark.anyio
async def test_initialize_without_demo_data_starts_empty():
    service = EmployeeService()
    await service.initialize(Settings(SEED_DEMO_DATA=False))

    assert service.initialized is True
    assert service.employees == []
    assert await service.get_employees() == []


@pytest.mark.anyio
async def test_initialize_is_idempotent():
    service = EmployeeService()
    await service.initialize(Settings())
    service.employees.pop()
    await service.initialize(Settings())

    assert len(service.employees) == 2


@pytest.mark.anyio
async def test_close_resets_state():
    service = EmployeeService()
    await service.initialize(Settings())
    await service.close()

    assert service.initialized is False
    assert service.employees == []


@pytest.mark.anyio
async def test_get_employees_returns_summaries(manager, developer, intern):
    service = EmployeeService()
    service.load([manager, developer, intern])

    results = await service.get_employees(skip=0, limit=10)

    assert len(results) == 3
    assert all(isinstance(r, EmployeeSummary) for r in results)
    assert [(r.kind, r.position) for r in results] == [
        ("manager", "Manager"),
        ("developer", "Developer"),
        ("intern", "Intern"),
    ]


@pytest.mark.anyio
async def test_get_employees_paginates(manager, developer, intern):
    service = EmployeeService()
    service.load([manager, developer, intern])

    results = await service.get_employees(skip=1, limit=1)

    assert [r.name for r in results] == ["Bob"]


@pytest.mark.anyio
async def test_get_employee_by_name_found(developer):
    service = EmployeeService()
    service.load([developer])

    result = await service.get_employee_by_name("bob")

    assert isinstance(result, EmployeeDetail)
    assert result.salary == Decimal("5500.00")
    assert result.description == "This is Bob, who is 28 years old and works as a Developer."


@pytest.mark.anyio
async def test_get_employee_by_name_not_found(developer):
    service = EmployeeService()
    service.load([developer])

    assert await service.get_employee_by_name("Nobody") is None


@pytest.mark.anyio
async def test_get_employee_by_name_not_initialized():
    service = EmployeeService()
    assert await service.get_employee_by_name("Alice") is None
