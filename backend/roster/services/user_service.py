"""User directory: lookup, active user tracking and email retrieval."""

from __future__ import annotations

import logging

from roster.core.config import Settings
from roster.core.config import settings as default_settings
from roster.core.seed import seed_users
from roster.models.user import UserProfile
from roster.services.profile_formatter import find_user_by_email

logger = logging.getLogger(__name__)

EMAIL_NOT_AVAILABLE = "Email not available"
EMAIL_NOT_PROVIDED = "Email not provided"
PHONE_NOT_PROVIDED = "Phone not provided"


class UserDirectoryError(Exception):
    pass


class NoActiveUserError(UserDirectoryError):
    pass


class UserNotFoundError(UserDirectoryError):
    pass


class UserDirectory:
    """Holds users in memory. ``users`` stays ``None`` until initialized."""

    def __init__(self) -> None:
        self.users: list[UserProfile] | None = None
        self.active_user: UserProfile | None = None

    def initialize(self, initial_users: list[UserProfile] | None) -> None:
        self.users = list(initial_users) if initial_users is not None else None

    def add_user(self, user: UserProfile) -> bool:
        if self.users is None:
            self.users = [user]
            return True
        self.users.append(user)
        return True

    def get_user(self, user_id: str) -> UserProfile | None:
        if self.users is None:
            return None
        return next((u for u in self.users if u.id == user_id), None)

    def list_users(self, skip: int = 0, limit: int = 50) -> list[UserProfile]:
        if self.users is None:
            return []
        return self.users[skip : skip + limit]

    def find_by_email(self, email: str | None) -> UserProfile | None:
        return find_user_by_email(self.users or [], email)

    def set_active_user(self, user_id: str) -> UserProfile:
        user = self.get_user(user_id)
        if user is None:
            raise UserNotFoundError(f"No user with id '{user_id}'")
        self.active_user = user
        return user

    def get_active_user_or_raise(self) -> UserProfile:
        if self.active_user is None:
            raise NoActiveUserError("No active user set")
        return self.active_user

    def get_user_email(self, user_id: str) -> str:
        user = self.get_user(user_id)
        if user is None or user.email is None:
            return EMAIL_NOT_AVAILABLE
        return user.email

    def find_users(self, query: str) -> list[UserProfile] | None:
        """Users whose username contains ``query``, ignoring case.

        An empty query yields ``None`` (no result set at all) rather than an
        empty list.
        """
        if not query:
            return None
        needle = query.casefold()
        return [u for u in self.users or [] if needle in u.username.casefold()]

    def count_matching_users(self, query: str) -> int:
        matches = self.find_users(query)
        return len(matches) if matches is not None else 0

    def describe_matches(self, query: str) -> list[str]:
        matches = self.find_users(query)
        if matches is None:
            return [f"No data available for query: {query}"]
        if not matches:
            return [f"No users found matching: {query}"]

        lines = [f"Found {len(matches)} users:"]
        for user in matches:
            email = user.email if user.email is not None else EMAIL_NOT_PROVIDED
            phone = user.phone_number if user.phone_number is not None else PHONE_NOT_PROVIDED
            lines.append(f"{user.username}: {email}, {phone}")
        return lines

    def valid_emails(self) -> list[str]:
        return [u.email for u in self.users or [] if u.email is not None]

    def process_emails(self, query: str) -> list[str]:
        return [u.email for u in self.find_users(query) or [] if u.email is not None]


class UserService:
    def __init__(self) -> None:
        self.directory = UserDirectory()
        self.placeholder: str = default_settings.PROFILE_PLACEHOLDER
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        self.placeholder = settings.PROFILE_PLACEHOLDER
        if settings.SEED_DEMO_DATA:
            self.directory.initialize(seed_users())
        else:
            logger.warning("Demo data disabled; UserService starts empty")

        self.initialized = True
        logger.info("UserService initialized (users=%d)", len(self.directory.users or []))

    async def close(self) -> None:
        self.directory = UserDirectory()
        self.initialized = False


user_service = UserService()
