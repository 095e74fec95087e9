"""Configuration for the mail relay service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

DEFAULT_FROM_EMAIL = "michael.rybacki@smartsheet.com"
DEFAULT_MAX_REQUEST_BYTES = 50 * 1024 * 1024


def _split_csv(value: str) -> Tuple[str, ...]:
    items = tuple(item.strip() for item in value.split(",") if item.strip())
    return items or ("*",)


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup and never mutated."""

    PROJECT_NAME: str = "Pipeline Snapshot Mail Relay"
    ENVIRONMENT: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    SENDGRID_API_KEY: Optional[str] = None
    SENDGRID_API_URL: str = "https://api.sendgrid.com"
    SENDGRID_TIMEOUT: float = 30.0
    MAIL_FROM_EMAIL: str = DEFAULT_FROM_EMAIL

    MAX_REQUEST_BYTES: int = DEFAULT_MAX_REQUEST_BYTES
    CORS_ORIGINS: Tuple[str, ...] = ("*",)

    @property
    def sendgrid_configured(self) -> bool:
        return bool(self.SENDGRID_API_KEY)

    @classmethod
    def from_env(cls) -> "Settings":
        environment = os.getenv("ENVIRONMENT") or os.getenv("NODE_ENV") or "development"
        return cls(
            PROJECT_NAME=os.getenv("MAIL_RELAY_PROJECT_NAME", cls.PROJECT_NAME),
            ENVIRONMENT=environment,
            HOST=os.getenv("HOST", cls.HOST),
            PORT=int(os.getenv("PORT", str(cls.PORT))),
            LOG_LEVEL=os.getenv("LOG_LEVEL", cls.LOG_LEVEL).upper(),
            SENDGRID_API_KEY=os.getenv("SENDGRID_API_KEY") or None,
            SENDGRID_API_URL=os.getenv("SENDGRID_API_URL", cls.SENDGRID_API_URL),
            SENDGRID_TIMEOUT=float(os.getenv("SENDGRID_TIMEOUT", str(cls.SENDGRID_TIMEOUT))),
            MAIL_FROM_EMAIL=os.getenv("MAIL_FROM_EMAIL", cls.MAIL_FROM_EMAIL),
            MAX_REQUEST_BYTES=int(
                os.getenv("MAX_REQUEST_BYTES", str(DEFAULT_MAX_REQUEST_BYTES))
            ),
            CORS_ORIGINS=_split_csv(os.getenv("CORS_ORIGINS", "*")),
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()


__all__ = ["Settings", "get_settings", "DEFAULT_FROM_EMAIL", "DEFAULT_MAX_REQUEST_BYTES"]
