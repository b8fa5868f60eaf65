"""
Pending input for the "new counter" form.

The form keeps what the user has typed so far; submitting hands those
values to the store and clears the form back to its defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from counterlist.core.models import Counter
from counterlist.core.palette import DEFAULT_COLOR, available_colors

if TYPE_CHECKING:
    from counterlist.interface.store import CounterStore


DEFAULT_INITIAL_TEXT = "0"


@dataclass
class NewCounterForm:
    """Form state for creating a counter."""
    name: str = ""
    initial_value_text: str = DEFAULT_INITIAL_TEXT
    color_name: str = DEFAULT_COLOR

    @property
    def available_colors(self) -> list[str]:
        return available_colors()

    def submit(self, store: "CounterStore") -> Counter:
        """Add a counter from the current input, then clear the form."""
        counter = store.add(self.name, self.initial_value_text, self.color_name)
        self.reset()
        return counter

    def reset(self) -> None:
        self.name = ""
        self.initial_value_text = DEFAULT_INITIAL_TEXT
        self.color_name = DEFAULT_COLOR
