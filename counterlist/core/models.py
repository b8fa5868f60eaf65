"""
Counter model for counterlist.

A Counter is a named, colored integer tally that remembers the value it
started from:

- name: display label
- initial_value: baseline used by reset
- value: the current count
- color_name / color_hex: palette entry and its display color

On disk the fields use camelCase names (initialValue, colorName, colorHex);
in Python they are snake_case. Both spellings are accepted when loading.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from counterlist.core.palette import (
    DEFAULT_COLOR,
    DEFAULT_HEX,
    hex_for,
    is_known_color,
    normalize_color_name,
)


DEFAULT_NAME = "Counter"

_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def parse_initial_value(text: Optional[str]) -> int:
    """
    Parse user-entered initial value text.

    Accepts an optional sign and surrounding whitespace. Anything else,
    including values that do not fit a signed 64-bit integer, yields 0.
    """
    if text is None or not _INT_PATTERN.match(text):
        return 0
    value = int(text.strip())
    if value < _INT64_MIN or value > _INT64_MAX:
        return 0
    return value


def normalize_name(name: Optional[str]) -> str:
    """Trim a counter name; blank names become the default name."""
    if name is None or not name.strip():
        return DEFAULT_NAME
    return name.strip()


class Counter(BaseModel):
    """
    One tracked count.

    Counters are mutable and compared by field values; the store tracks
    them by identity, so two equal counters are still two entries.
    """

    name: str = Field(default=DEFAULT_NAME, description="Display label")
    initial_value: int = Field(
        default=0,
        alias="initialValue",
        description="Baseline restored by reset",
    )
    value: int = Field(default=0, description="Current count")
    color_name: str = Field(
        default=DEFAULT_COLOR,
        alias="colorName",
        description="Palette color name",
    )
    color_hex: str = Field(
        default=DEFAULT_HEX,
        alias="colorHex",
        description="Display color as #RRGGBB",
    )

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("name", mode="before")
    @classmethod
    def null_name_is_default(cls, v: Any) -> Any:
        return DEFAULT_NAME if v is None else v

    @field_validator("color_name", "color_hex", mode="before")
    @classmethod
    def null_color_is_blank(cls, v: Any) -> Any:
        """Treat null colors as blank; normalize_colors() fills them in."""
        return "" if v is None else v

    @classmethod
    def create(
        cls,
        name: Optional[str],
        initial_value_text: Optional[str],
        color_name: Optional[str],
    ) -> Counter:
        """Build a new counter from raw form input, applying all fallbacks."""
        initial = parse_initial_value(initial_value_text)
        color = normalize_color_name(color_name)
        return cls(
            name=normalize_name(name),
            initial_value=initial,
            value=initial,
            color_name=color,
            color_hex=hex_for(color),
        )

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Counter:
        """
        Deserialize a persisted record and normalize its colors.

        Blank or unknown color names collapse to Blue with Blue's hex. A
        known name with a blank hex gets its mapped hex; a non-blank hex is
        kept as stored.
        """
        counter = cls.model_validate(record)
        counter.normalize_colors()
        return counter

    def normalize_colors(self) -> None:
        if not is_known_color(self.color_name):
            self.color_name = DEFAULT_COLOR
            self.color_hex = DEFAULT_HEX
        elif not self.color_hex or not self.color_hex.strip():
            self.color_hex = hex_for(self.color_name)

    def to_record(self) -> dict[str, Any]:
        """Serialize with the on-disk field names."""
        return self.model_dump(by_alias=True)
