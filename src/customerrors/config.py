from __future__ import annotations

"""customerrors.config
=====================
Global configuration layer built on **pydantic-settings**.  A single
:class:`CustomErrorsSettings` instance is created at import time and shared
across the process; :class:`~customerrors.core.block.Block` reads its
defaults from it whenever a constructor argument is left as ``None``.

Usage::

    from customerrors import settings
    print(settings.DEFAULT_BASE)

Every attribute can be overridden through ``CUSTOMERRORS_*`` environment
variables, and a bespoke instance is as simple as
``CustomErrorsSettings(LAZY=True)``.
"""

import logging
from typing import Final, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "CustomErrorsSettings",
    "configure_logging",
    "settings",
]

PACKAGE_LOGGER: Final[str] = "customerrors"


class CustomErrorsSettings(BaseSettings):
    """Project-wide configuration for customerrors.

    All attributes can be overridden via environment variables prefixed with
    ``CUSTOMERRORS_``.
    """

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    LOG_LEVEL: str = Field(
        default="NOTSET",
        description="Level of the `customerrors` logger (NOTSET defers to root).",
    )

    # ------------------------------------------------------------------
    # Block defaults
    # ------------------------------------------------------------------
    DEFAULT_BASE: str = Field(
        default="Base",
        min_length=1,
        description="Name of the abstract base type a block creates on demand.",
    )
    LAZY: bool = Field(
        default=False,
        description="Resolve block entries on first use instead of eagerly.",
    )
    DETECT_CYCLES: bool = Field(
        default=True,
        description="Raise CircularReference for looping parent names.",
    )

    model_config = SettingsConfigDict(
        env_prefix="CUSTOMERRORS_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_level(cls, v: str) -> str:  # noqa: N802
        upper = v.upper()
        if upper not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError("LOG_LEVEL must be a valid stdlib logging level")
        return upper


def configure_logging(cfg: Optional[CustomErrorsSettings] = None) -> logging.Logger:
    """Apply ``LOG_LEVEL`` to the package logger (never the root logger)."""
    cfg = cfg or settings
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(cfg.LOG_LEVEL)
    return logger


# ---------------------------------------------------------------------------
# Singleton – import-time settings instance usable across the entire package.
# ---------------------------------------------------------------------------
settings: Final[CustomErrorsSettings] = CustomErrorsSettings()
