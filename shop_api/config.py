"""
Runtime settings read from the environment (and a ``.env`` file if present).
"""
import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError


class Settings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    SERVICE_NAME: str = "Shop API"
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DATABASE_URL: str = "sqlite:///./shop.db"
    CREATE_TABLES: bool = False
    CORS_ORIGINS: str = "*"

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def should_create_tables(self) -> bool:
        # Only create tables automatically outside production unless asked to
        return self.CREATE_TABLES or self.ENV != "production"


def load_settings(load_env: bool = True) -> Settings:
    if load_env:
        load_dotenv()
    try:
        return Settings.model_validate(dict(os.environ))
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
