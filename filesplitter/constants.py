"""Centralized constants for the filesplitter tool.

Buffer sizes, CLI defaults, the part filename timestamp format and the banner
live here so the engine and the CLI agree on them.
"""

import re


# ========== I/O ==========
BUF_SIZE: int = 128 * 1024
"""Buffer size in bytes used for both the input reader and part writers."""


# ========== Part naming defaults ==========
DEFAULT_PREFIX: str = "part"
"""Output filename prefix."""

DEFAULT_EXT: str = "txt"
"""Output filename extension (without the dot)."""

DEFAULT_PAD: int = 3
"""Zero-padding width of the part index."""

TIMESTAMP_FORMAT: str = "%Y%m%d_%H%M%S"
"""strftime format appended to part names when timestamps are enabled."""


# ========== Size parsing ==========
SIZE_UNITS: dict[str, int] = {
    "B": 1,
    "KB": 1024,
    "MB": 1024 ** 2,
    "GB": 1024 ** 3,
}
"""Multipliers for the size suffixes accepted by parse_size()."""

SIZE_RE: re.Pattern[str] = re.compile(r"^([0-9]+(?:\.[0-9]+)?)(KB|MB|GB|B)$", re.IGNORECASE)
"""Regex for a human-readable size such as 100MB or 1.5kb (ASCII digits only)."""


# ========== Environment ==========
LOG_ENV: str = "FILESPLITTER_LOG"
"""Path of the diagnostic log file; unset disables file logging."""

DEBUG_ENV: str = "FILESPLITTER_DEBUG"
"""When truthy, the log file records DEBUG entries (else INFO)."""


BANNER: str = (
    "📁 FileSplitter v1.0\n"
    "📦 Split massive files by lines, size, or pattern with style!"
)
