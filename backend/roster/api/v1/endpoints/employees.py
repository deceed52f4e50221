from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from roster.core.config import settings
from roster.models.employee import EmployeeDetail, EmployeeSummary, SalaryRequest, SalaryResponse
from roster.services.employee_service import employee_service
from roster.services.payroll import calculate_salary, position_of

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeSummary])
async def list_employees(
    skip: int = Query(0, ge=0),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
):
    try:
        return await employee_service.get_employees(skip=skip, limit=limit)
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err


@router.post("/salary", response_model=SalaryResponse)
async def compute_salary(request: SalaryRequest):
    employee = request.employee
    return SalaryResponse(position=position_of(employee), salary=calculate_salary(employee))


@router.get("/{name}", response_model=EmployeeDetail)
async def get_employee(name: str):
    try:
        employee = await employee_service.get_employee_by_name(name)
    except Exception as err:
        logger.exception("Failed to get employee %s", name)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employee",
        ) from err

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee '{name}' not found",
        )

    return employee
