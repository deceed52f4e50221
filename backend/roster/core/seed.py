"""Demonstration roster loaded into the in-memory services."""

from __future__ import annotations

from decimal import Decimal

from roster.models.employee import Developer, Employee, Intern, Manager
from roster.models.promotion import PromotionCandidate
from roster.models.user import PremiumUserProfile, UserProfile


def seed_employees() -> list[Employee]:
    return [
        Manager(name="Alice", age=35, base_salary=Decimal("80000.0")),
        Developer(name="Bob", age=28, base_salary=Decimal("60000.0"), projects_completed=5),
        Intern(name="Charlie", age=22, hourly_rate=Decimal("20.0"), hours_worked=100),
    ]


def seed_users() -> list[UserProfile]:
    return [
        UserProfile(id="u1", username="john_doe", email="john@example.com"),
        UserProfile(
            id="u2",
            username="jane_smith",
            email="jane@example.com",
            bio="Software developer and hiking enthusiast",
            age=28,
            phone_number="555-123-4567",
        ),
        UserProfile(
            id="u3",
            username="bob_jenkins",
            email="bob@example.com",
            bio="Love photography and travel",
        ),
        PremiumUserProfile(
            id="p1",
            username="premium_alex",
            email="alex@example.com",
            bio="Premium user since 2022",
            age=25,
            member_since="2022-03-15",
            subscription_level="Gold",
        ),
    ]


def seed_promotion_candidates() -> list[PromotionCandidate]:
    return [
        PromotionCandidate(name="Alice", score=95, department="Engineering", years_of_service=5),
        PromotionCandidate(name="Bob", score=80, department="Marketing", years_of_service=3),
        PromotionCandidate(name="Charlie", score=65, department="Engineering", years_of_service=1),
        PromotionCandidate(name="Diana", score=90, department="Finance", years_of_service=7),
        PromotionCandidate(name="Eve", score=75, department="Marketing", years_of_service=2),
    ]
