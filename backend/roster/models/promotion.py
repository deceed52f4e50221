"""Promotion candidates and evaluation results."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PromotionCandidate(BaseModel):
    """An employee under review for promotion."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    score: int = Field(..., ge=0, le=100)
    department: str
    years_of_service: int = Field(..., ge=0)


class EligibilityResult(BaseModel):
    name: str
    result: str
    weighted_score: float
    meets_combined_criteria: bool


class PromotionAllocation(BaseModel):
    """Amount granted to one candidate and the budget left afterwards."""

    name: str
    amount: Decimal
    remaining_budget: Decimal


class AllocationResponse(BaseModel):
    total_budget: Decimal
    allocations: list[PromotionAllocation]
