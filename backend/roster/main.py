from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.api.v1.router import api_router
from roster.core.config import settings
from roster.services.employee_service import employee_service
from roster.services.promotion_service import promotion_service
from roster.services.user_service import user_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await employee_service.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize EmployeeService, continuing without employees")
    try:
        await user_service.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize UserService, continuing without users")
    try:
        await promotion_service.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize PromotionService, continuing without promotions")
    yield
    await employee_service.close()
    await user_service.close()
    await promotion_service.close()


app = FastAPI(
    title="Roster API",
    description="Employee payroll, user profiles and promotion review",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Roster API"}
