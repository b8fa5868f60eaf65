"""
Core domain for counterlist.

- Counter: the counter model
- palette: the ten named colors
- config: settings from the environment
"""

from counterlist.core.models import Counter, parse_initial_value
from counterlist.core.palette import COLOR_MAP, DEFAULT_COLOR, DEFAULT_HEX, available_colors

__all__ = [
    "Counter",
    "parse_initial_value",
    "COLOR_MAP",
    "DEFAULT_COLOR",
    "DEFAULT_HEX",
    "available_colors",
]
