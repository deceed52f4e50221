from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from decimal import ROUND_HALF_UP, Decimal

from roster.core.config import Settings
from roster.core.config import settings as default_settings
from roster.core.seed import seed_promotion_candidates
from roster.models.promotion import (
    AllocationResponse,
    EligibilityResult,
    PromotionAllocation,
    PromotionCandidate,
)

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

MIN_YEARS_OF_SERVICE = 2
MIN_SCORE = 70
MIN_ENGINEERING_SCORE = 80
OUTSTANDING_SCORE = 90
SUBSTANTIAL_YEARS = 5

Predicate = Callable[[PromotionCandidate], bool]


def check_promotion_eligibility(candidate: PromotionCandidate) -> str:
    if candidate.years_of_service < MIN_YEARS_OF_SERVICE:
        return "Ineligible: Insufficient tenure (minimum 2 years required)"

    if candidate.score < MIN_SCORE:
        return "Ineligible: Performance below threshold (minimum score 70 required)"

    if candidate.department == "Engineering" and candidate.score < MIN_ENGINEERING_SCORE:
        return "Ineligible: Engineering requires higher performance (minimum score 80)"

    if candidate.score >= OUTSTANDING_SCORE:
        return "Eligible: Outstanding performance"

    if candidate.years_of_service >= SUBSTANTIAL_YEARS:
        return "Eligible: Substantial experience"

    return "Eligible: Meets standard criteria"


def find_first_eligible(
    candidates: Iterable[PromotionCandidate],
    predicate: Predicate,
) -> PromotionCandidate | None:
    for candidate in candidates:
        if predicate(candidate):
            return candidate
    return None


def director_pick(candidates: Iterable[PromotionCandidate]) -> PromotionCandidate | None:
    return find_first_eligible(candidates, lambda c: c.score > 85 or c.years_of_service > 5)


def experience_weighted_score(candidate: PromotionCandidate) -> float:
    return candidate.score * (1 + candidate.years_of_service * 0.1)


def meets_combined_criteria(candidate: PromotionCandidate) -> bool:
    if candidate.score >= 85 and candidate.years_of_service >= 4:
        return True
    return candidate.department == "Engineering" and candidate.score >= 75


def evaluate_candidate(candidate: PromotionCandidate, predicate: Predicate) -> str:
    if predicate(candidate):
        return f"{candidate.name} meets the criteria"
    return f"{candidate.name} does not meet the criteria"


def average_score(candidates: Iterable[PromotionCandidate]) -> Decimal:
    scores = [c.score for c in candidates]
    if not scores:
        return Decimal(0)
    return Decimal(sum(scores)) / len(scores)


class PromotionBudget:
    """Running promotion budget, drawn down one candidate at a time."""

    def __init__(self, total: Decimal, base_amount: Decimal, average: Decimal) -> None:
        self.total = total
        self.remaining = total
        self.base_amount = base_amount
        self.average = average

    def allocate(self, candidate: PromotionCandidate) -> Decimal:
        if self.remaining <= 0 or self.average <= 0:
            return Decimal("0.00")

        amount = (self.base_amount * candidate.score / self.average).quantize(CENTS, rounding=ROUND_HALF_UP)
        granted = min(amount, self.remaining)
        self.remaining -= granted
        return granted

    def allocate_all(self, candidates: Iterable[PromotionCandidate]) -> list[PromotionAllocation]:
        """Allocate in descending score order; ties keep their input order."""
        allocations: list[PromotionAllocation] = []
        for candidate in sorted(candidates, key=lambda c: c.score, reverse=True):
            amount = self.allocate(candidate)
            allocations.append(
                PromotionAllocation(
                    name=candidate.name,
                    amount=amount,
                    remaining_budget=self.remaining,
                )
            )
            logger.debug("Allocated %s to %s (remaining=%s)", amount, candidate.name, self.remaining)
        return allocations


class PromotionService:
    def __init__(self) -> None:
        self.candidates: list[PromotionCandidate] = []
        self.total_budget: Decimal = default_settings.PROMOTION_BUDGET
        self.base_amount: Decimal = default_settings.PROMOTION_BASE_AMOUNT
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        self.total_budget = settings.PROMOTION_BUDGET
        self.base_amount = settings.PROMOTION_BASE_AMOUNT
        if settings.SEED_DEMO_DATA:
            self.candidates = seed_promotion_candidates()
        else:
            logger.warning("Demo data disabled; PromotionService starts empty")

        self.initialized = True
        logger.info(
            "PromotionService initialized (candidates=%d, budget=%s)",
            len(self.candidates),
            self.total_budget,
        )

    async def close(self) -> None:
        self.candidates = []
        self.initialized = False

    def evaluate_all(self) -> list[EligibilityResult]:
        return [
            EligibilityResult(
                name=c.name,
                result=check_promotion_eligibility(c),
                weighted_score=experience_weighted_score(c),
                meets_combined_criteria=meets_combined_criteria(c),
            )
            for c in self.candidates
        ]

    def run_allocation(self) -> AllocationResponse:
        """Run a fresh budget over all candidates; repeated calls give the same result."""
        budget = PromotionBudget(self.total_budget, self.base_amount, average_score(self.candidates))
        return AllocationResponse(
            total_budget=self.total_budget,
            allocations=budget.allocate_all(self.candidates),
        )


promotion_service = PromotionService()
