from __future__ import annotations
import math

from .constants import SIZE_RE, SIZE_UNITS
from .errors import SizeParseError


def parse_size(text: str) -> int:
    """Convert a human-readable size into a byte count.

    Args:
        text: Size such as "100MB", "500kb" or "1.5GB". Surrounding whitespace
            is ignored.

    Returns:
        Number of bytes, truncated toward zero. An empty string returns 0,
        which callers treat as "no size limit".

    Raises:
        SizeParseError: If the text is not digits (optionally with a decimal
            part) followed directly by B, KB, MB or GB, or if the number is
            too large to represent.
    """
    if text == "":
        return 0
    m = SIZE_RE.match(text.strip())
    if not m:
        raise SizeParseError(text)
    value = float(m.group(1)) * SIZE_UNITS[m.group(2).upper()]
    if math.isinf(value):
        raise SizeParseError(text)
    return int(value)


def format_size(n: int) -> str:
    return f"{n / (1024 * 1024):.2f} MB"
