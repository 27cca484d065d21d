"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, datestr.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from datestr.domain.formatting import DEFAULT_SEPARATOR, DEFAULT_TEMPLATE


class FormatConfig(BaseModel):
    """[format] section."""

    model_config = {"frozen": True}

    template: str = DEFAULT_TEMPLATE
    separator: str = DEFAULT_SEPARATOR

    @field_validator("separator")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            msg = f"separator must be a single character, got {value!r}"
            raise ValueError(msg)
        return value
