"""Rendering of user profiles whose optional fields may be absent."""

from __future__ import annotations

from collections.abc import Iterable

from roster.models.user import PremiumUserProfile, UserProfile

DEFAULT_PLACEHOLDER = "Not provided"
SEPARATOR = "-" * 23

# Display label -> attribute, in render order
_DISPLAY_FIELDS: list[tuple[str, str]] = [
    ("ID", "id"),
    ("Username", "username"),
    ("Email", "email"),
    ("Bio", "bio"),
    ("Age", "age"),
    ("Phone", "phone_number"),
]


def render_user_fields(user: UserProfile, placeholder: str = DEFAULT_PLACEHOLDER) -> dict[str, str]:
    """Map every display field to its value, or ``placeholder`` when absent.

    Keys always come back in the same order regardless of which fields are set.
    """
    rendered: dict[str, str] = {}
    for label, attr in _DISPLAY_FIELDS:
        value = getattr(user, attr)
        rendered[label] = placeholder if value is None else str(value)
    return rendered


def display_user_info(user: UserProfile, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    lines = [f"{label}: {value}" for label, value in render_user_fields(user, placeholder).items()]
    lines.append(SEPARATOR)
    return "\n".join(lines)


def format_user_profile(user: UserProfile) -> str:
    """Build the profile card.

    The email line is omitted entirely when there is no email; the other
    fields fall back to their own wording.
    """
    parts = [f"Profile for {user.username}:\n"]

    if user.email is not None:
        parts.append(f"Email: {user.email}\n")

    parts.append(f"Bio: {user.bio if user.bio is not None else 'No bio provided'}\n")
    parts.append(f"Age: {user.age if user.age is not None else 'Not specified'}\n")

    if user.phone_number is not None:
        parts.append(f"Phone: {user.phone_number}\n")
    else:
        parts.append("Phone: Not provided\n")

    return "".join(parts)


def find_user_by_email(users: Iterable[UserProfile], email: str | None) -> UserProfile | None:
    if email is None:
        return None
    return next((user for user in users if user.email == email), None)


def payment_info(user: PremiumUserProfile, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    payment = user.payment_method if user.payment_method is not None else placeholder
    return f"Level: {user.subscription_level}, Payment: {payment}"


def can_access_mature_content(user: UserProfile) -> bool:
    return user.age is not None and user.age >= 18
