#!/usr/bin/env python3
"""Console walkthrough of the roster domain.

Run via the ``roster-demo`` entry point or as a module:

    python3 -m roster.demo [--section employees|users|promotions|all] [--verbose]

Prints employee salaries, user profiles with their defaults, and the
promotion review over the demonstration roster.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Callable

from roster.core.config import Settings
from roster.core.seed import seed_users
from roster.models.user import PremiumUserProfile
from roster.services.employee_service import EmployeeService
from roster.services.payroll import describe, format_salary_line
from roster.services.profile_formatter import (
    SEPARATOR,
    can_access_mature_content,
    display_user_info,
    find_user_by_email,
    format_user_profile,
    payment_info,
)
from roster.services.promotion_service import (
    PromotionService,
    check_promotion_eligibility,
    director_pick,
    evaluate_candidate,
    experience_weighted_score,
    meets_combined_criteria,
)
from roster.services.user_service import NoActiveUserError, UserDirectory

logger = logging.getLogger(__name__)

SECTIONS = ("employees", "users", "promotions", "all")


def employees_section(service: EmployeeService) -> list[str]:
    lines = [describe(e) for e in service.employees]
    lines.extend(format_salary_line(e) for e in service.employees)
    return lines


def users_section(settings: Settings) -> list[str]:
    users = seed_users()
    regular = [u for u in users if not isinstance(u, PremiumUserProfile)]
    lines = ["USER INFORMATION:"]
    lines.extend(display_user_info(u, settings.PROFILE_PLACEHOLDER) for u in regular)

    lines.append("SEARCH RESULTS:")
    for email in ("jane@example.com", "nobody@example.com", None):
        found = find_user_by_email(regular, email)
        lines.append(f"Found user: {found.username if found else 'No user found'}")

    lines.append("")
    lines.append("FORMATTED PROFILES:")
    for user in regular:
        lines.append(format_user_profile(user))
        lines.append(SEPARATOR)

    lines.append("")
    lines.append("PREMIUM USER FEATURES:")
    for user in users:
        if isinstance(user, PremiumUserProfile):
            lines.append(format_user_profile(user))
            lines.append(f"Payment Info: {payment_info(user, settings.PROFILE_PLACEHOLDER)}")
            lines.append(f"Can access mature content: {can_access_mature_content(user)}")

    lines.append("")
    lines.append("USER MANAGER:")
    directory = UserDirectory()
    lines.append(f"Adding user before initialization: {directory.add_user(regular[0])}")
    directory.initialize(regular)
    lines.append(f"User email: {directory.get_user_email('u2')}")
    lines.append(f"Nonexistent user email: {directory.get_user_email('nobody')}")
    try:
        directory.get_active_user_or_raise()
    except NoActiveUserError as e:
        lines.append(f"Expected exception: {e}")

    lines.append("")
    lines.append("USER QUERIES:")
    for query in ("j", "z", ""):
        lines.append(f"Count of users matching '{query}': {directory.count_matching_users(query)}")
        lines.extend(directory.describe_matches(query))
    lines.append(f"Valid emails: {', '.join(directory.valid_emails())}")
    return lines


def promotions_section(service: PromotionService) -> list[str]:
    candidates = service.candidates
    pick = director_pick(candidates)
    lines = [f"Director's pick: {pick.name if pick else 'No eligible employee found'}"]

    lines.append("Experience-weighted scores:")
    lines.extend(f"{c.name}: {experience_weighted_score(c)}" for c in candidates)

    lines.append("Promotion Eligibility:")
    lines.extend(f"{c.name}: {check_promotion_eligibility(c)}" for c in candidates)

    lines.append("Promotion Amounts:")
    for allocation in service.run_allocation().allocations:
        lines.append(
            f"{allocation.name}: {allocation.amount:.2f} "
            f"(Remaining budget: {allocation.remaining_budget:.2f})"
        )

    lines.append("Employees Meeting Combined Criteria:")
    lines.extend(evaluate_candidate(c, meets_combined_criteria) for c in candidates)
    return lines


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the roster walkthrough to the console",
    )
    parser.add_argument(
        "--section",
        choices=SECTIONS,
        default="all",
        help="Which part of the walkthrough to print (default: all)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, output_fn: Callable[[str], None] = print) -> None:
    settings = Settings()
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    employee_service = EmployeeService()
    promotion_service = PromotionService()
    await employee_service.initialize(settings)
    await promotion_service.initialize(settings)

    try:
        if args.section in ("employees", "all"):
            for line in employees_section(employee_service):
                output_fn(line)
        if args.section in ("users", "all"):
            for line in users_section(settings):
                output_fn(line)
        if args.section in ("promotions", "all"):
            for line in promotions_section(promotion_service):
                output_fn(line)
    finally:
        await employee_service.close()
        await promotion_service.close()

    logger.debug("Walkthrough finished (section=%s)", args.section)


def main() -> None:
    args = parse_args()
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
