from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from roster.core.config import settings
from roster.models.user import ProfileCardResponse, UserEmailResponse, UserMatchResponse, UserProfile
from roster.services.profile_formatter import format_user_profile, render_user_fields
from roster.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _get_or_404(user_id: str) -> UserProfile:
    try:
        user = user_service.directory.get_user(user_id)
    except Exception as err:
        logger.exception("Failed to get user %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve user",
        ) from err

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{user_id}' not found",
        )
    return user


@router.get("", response_model=list[dict[str, str]])
async def list_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
):
    try:
        users = user_service.directory.list_users(skip=skip, limit=limit)
        return [render_user_fields(u, user_service.placeholder) for u in users]
    except Exception as err:
        logger.exception("Failed to list users")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve users",
        ) from err


@router.get("/search", response_model=dict[str, str])
async def search_user(email: str | None = None):
    try:
        user = user_service.directory.find_by_email(email)
    except Exception as err:
        logger.exception("Failed to search users by email")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search users",
        ) from err

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No user found",
        )
    return render_user_fields(user, user_service.placeholder)


@router.get("/matches", response_model=UserMatchResponse)
async def match_users(query: str = ""):
    directory = user_service.directory
    try:
        return UserMatchResponse(
            count=directory.count_matching_users(query),
            lines=directory.describe_matches(query),
            emails=directory.process_emails(query),
        )
    except Exception as err:
        logger.exception("Failed to match users for query %r", query)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to match users",
        ) from err


@router.get("/{user_id}", response_model=dict[str, str])
async def get_user(user_id: str):
    return render_user_fields(_get_or_404(user_id), user_service.placeholder)


@router.get("/{user_id}/profile", response_model=ProfileCardResponse)
async def get_user_profile(user_id: str):
    return ProfileCardResponse(profile=format_user_profile(_get_or_404(user_id)))


@router.get("/{user_id}/email", response_model=UserEmailResponse)
async def get_user_email(user_id: str):
    try:
        email = user_service.directory.get_user_email(user_id)
    except Exception as err:
        logger.exception("Failed to get email for user %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve user email",
        ) from err
    return UserEmailResponse(email=email)
