from __future__ import annotations

from fastapi import APIRouter

from roster.core.config import settings
from roster.services.employee_service import employee_service
from roster.services.promotion_service import promotion_service
from roster.services.user_service import user_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {
        "employees": "ok" if employee_service.initialized else "not_initialized",
        "users": "ok" if user_service.initialized else "not_initialized",
        "promotions": "ok" if promotion_service.initialized else "not_initialized",
    }

    all_ok = all(v == "ok" for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
