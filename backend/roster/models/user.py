"""User profile models with optional fields."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserProfile(BaseModel):
    """A user profile. ``id`` and ``username`` are always present."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    email: str | None = None
    bio: str | None = None
    age: int | None = Field(default=None, ge=0)
    phone_number: str | None = None


class PremiumUserProfile(UserProfile):
    """Profile with subscription details."""

    member_since: str
    subscription_level: str
    payment_method: str | None = None


class ProfileCardResponse(BaseModel):
    profile: str


class UserEmailResponse(BaseModel):
    email: str


class UserMatchResponse(BaseModel):
    """Result of a username query; an empty query matches nothing."""

    count: int
    lines: list[str]
    emails: list[str]
