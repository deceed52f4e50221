import sys
from decimal import Decimal

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    SEED_DEMO_DATA: bool = True
    PROFILE_PLACEHOLDER: str = "Not provided"

    PROMOTION_BUDGET: Decimal = Decimal("10000.00")
    PROMOTION_BASE_AMOUNT: Decimal = Decimal("1000.00")

    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 200

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
