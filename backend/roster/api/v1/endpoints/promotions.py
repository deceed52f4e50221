from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from roster.models.promotion import AllocationResponse, EligibilityResult
from roster.services.promotion_service import promotion_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/promotions", tags=["promotions"])


@router.get("/eligibility", response_model=list[EligibilityResult])
async def list_eligibility():
    try:
        return promotion_service.evaluate_all()
    except Exception as err:
        logger.exception("Failed to evaluate promotion eligibility")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to evaluate promotion eligibility",
        ) from err


@router.get("/allocations", response_model=AllocationResponse)
async def list_allocations():
    try:
        return promotion_service.run_allocation()
    except Exception as err:
        logger.exception("Failed to allocate promotion budget")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to allocate promotion budget",
        ) from err
