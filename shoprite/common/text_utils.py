"""
Text Utilities

Lenient parsing for values that arrive as loosely formatted strings.
"""

import re
from typing import Any, Optional

LEADING_INT_PATTERN = re.compile(r'\s*([+-]?\d+)')


def parse_leading_int(value: Any, default: Optional[int] = 0) -> Optional[int]:
    """
    Read the integer at the start of a value, ignoring anything after it.

    "12" -> 12, " 3 of 10" -> 3, "10abc" -> 10, "cover" -> default.

    Args:
        value: String or number to parse
        default: Returned when no leading integer is found

    Returns:
        Parsed integer or default
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if value is None:
        return default

    match = LEADING_INT_PATTERN.match(str(value))
    if not match:
        return default
    return int(match.group(1))
