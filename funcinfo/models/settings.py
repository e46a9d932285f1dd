"""Runtime settings model."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

DEFAULT_ATTRIBUTES = ["name", "fullname", "package", "address", "blessed"]


class FuncInfoSettings(BaseModel):
    """Effective configuration for the library and the CLI."""

    log_level: str = "WARNING"
    providers: dict[str, str] = Field(default_factory=dict)
    attributes: list[str] = Field(default_factory=lambda: list(DEFAULT_ATTRIBUTES))

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
