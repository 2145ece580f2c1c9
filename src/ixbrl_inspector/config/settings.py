# src/ixbrl_inspector/config/settings.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Inspector Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the inspector. Only the CLI and
    infrastructure read the process environment; use cases receive the
    values they need (label language, span tolerance) as arguments.

Design:
    - Pydantic v2 BaseSettings; unrelated variables in `.env` are ignored.
    - Every variable is prefixed with ``IXBRL_INSPECTOR_``.
    - Singleton accessor `get_settings()` with LRU cache.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ixbrl_inspector.adapters.locale.message_catalog import SUPPORTED_LOCALES

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Logical runtime environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    PRODUCTION = "production"


class InspectorSettings(BaseSettings):
    """Typed configuration for the inspector."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical runtime environment.",
        validation_alias="IXBRL_INSPECTOR_ENVIRONMENT",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Root log level for the CLI.",
        validation_alias="IXBRL_INSPECTOR_LOG_LEVEL",
    )

    label_language: str | None = Field(
        default=None,
        description="Preferred label language (e.g., 'en', 'fr'). English is the fallback.",
        validation_alias="IXBRL_INSPECTOR_LABEL_LANGUAGE",
    )

    message_locale: str = Field(
        default="en",
        description="Locale of the built-in message catalog.",
        validation_alias="IXBRL_INSPECTOR_MESSAGE_LOCALE",
    )

    period_span_tolerance: float = Field(
        default=0.1,
        gt=0.0,
        lt=1.0,
        description="Relative tolerance used when comparing duration lengths.",
        validation_alias="IXBRL_INSPECTOR_PERIOD_SPAN_TOLERANCE",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("message_locale")
    @classmethod
    def _supported_locale(cls, value: str) -> str:
        if value not in SUPPORTED_LOCALES:
            raise ValueError(
                f"Unsupported message locale {value!r}; expected one of {sorted(SUPPORTED_LOCALES)}"
            )
        return value

    @field_validator("label_language", mode="before")
    @classmethod
    def _blank_language_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache(maxsize=1)
def get_settings() -> InspectorSettings:
    """Return a cached singleton `InspectorSettings` instance.

    Returns:
        InspectorSettings: Validated settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = InspectorSettings()
        logger.info(
            "Settings initialized",
            extra={
                "extra": {
                    "environment": settings.environment.value,
                    "log_level": settings.log_level,
                    "label_language": settings.label_language,
                    "message_locale": settings.message_locale,
                    "period_span_tolerance": settings.period_span_tolerance,
                }
            },
        )
        return settings
    except ValidationError as exc:
        logger.exception("Invalid inspector configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
