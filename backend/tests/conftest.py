from __future__ import annotations

from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from roster.main import app
from roster.models.employee import Developer, Intern, Manager
from roster.models.promotion import PromotionCandidate
from roster.models.user import PremiumUserProfile, UserProfile


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def manager():
    return Manager(name="Alice", age=35, base_salary=Decimal("5000.0"))


@pytest.fixture
def developer():
    return Developer(name="Bob", age=28, base_salary=Decimal("4000.0"), projects_completed=3)


@pytest.fixture
def intern():
    return Intern(name="Charlie", age=22, hourly_rate=Decimal("15.0"), hours_worked=120)


@pytest.fixture
def minimal_user():
    return UserProfile(id="u1", username="john_doe", email="john@example.com")


@pytest.fixture
def complete_user():
    return UserProfile(
        id="u2",
        username="jane_smith",
        email="jane@example.com",
        bio="Software developer and hiking enthusiast",
        age=28,
        phone_number="555-123-4567",
    )


@pytest.fixture
def premium_user():
    return PremiumUserProfile(
        id="p1",
        username="premium_alex",
        email="alex@example.com",
        bio="Premium user since 2022",
        age=25,
        member_since="2022-03-15",
        subscription_level="Gold",
    )


@pytest.fixture
def candidates():
    return [
        PromotionCandidate(name="Alice", score=95, department="Engineering", years_of_service=5),
        PromotionCandidate(name="Bob", score=80, department="Marketing", years_of_service=3),
        PromotionCandidate(name="Charlie", score=65, department="Engineering", years_of_service=1),
        PromotionCandidate(name="Diana", score=90, department="Finance", years_of_service=7),
        PromotionCandidate(name="Eve", score=75, department="Marketing", years_of_service=2),
    ]
