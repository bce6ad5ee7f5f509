"""Settings and per-call context for form serialization."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SerializeSettings(BaseModel):
    """Knobs that change how a form is turned into a query string."""

    charset: str = Field(
        "UTF-8",
        description=(
            "Character encoding used for percent-encoding and reported by "
            "hidden `_charset_` fields."
        ),
    )
    foreign_trigger_uses_default_submitter: bool = Field(
        False,
        alias="foreignTriggerUsesDefaultSubmitter",
        description=(
            "When the triggering element is not a usable submit control, "
            "include the first submit control instead of no button at all."
        ),
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("charset")
    @classmethod
    def known_charset(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown charset: {value}") from exc
        return value


DEFAULT_SETTINGS = SerializeSettings()


@dataclass(frozen=True)
class SerializationContext:
    """Everything a single serialization call needs besides the form itself.

    ``execution_context`` is handed to the form model untouched; for
    BeautifulSoup trees it is unused.
    """

    execution_context: Any = None
    triggering_element: Any = None
    settings: SerializeSettings = field(default_factory=lambda: DEFAULT_SETTINGS)


__all__ = ["DEFAULT_SETTINGS", "SerializationContext", "SerializeSettings"]
