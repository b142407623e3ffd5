# ar_core/annotations/utils/timestamps.py
"""
Duration parsing and formatting for annotation data.

Formats:
- Colon: H:MM:SS(.fff), right-to-left seconds/minutes/hours/... of any depth.
  Used by legacy XML region timestamps ("0:05.2", "1:02:03").
- Letters: [<h>h][<m>m][<s>s], integer components.
  Used by URL fragments ("#t=1h2m3s").

All parsed values are seconds.
"""

from __future__ import annotations

import math
import re

from ...errors import FormatError

_COLON_SEGMENT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_LETTER_COMPONENTS = (
    (re.compile(r"(\d+)h"), 3600),
    (re.compile(r"(\d+)m"), 60),
    (re.compile(r"(\d+)s"), 1),
)


def parse_duration_colon(time_str: str) -> float:
    """
    Parse a colon-delimited duration to seconds.

    Segments are read right-to-left as seconds, minutes, hours and so on,
    each one worth 60 times the previous.

    Args:
        time_str: Duration string (e.g., "1:02:03", "0:05.5", "90")

    Returns:
        Time in float seconds

    Raises:
        FormatError: If any segment is not a decimal number
    """
    if time_str is None:
        raise FormatError("Duration is missing")

    total = 0.0
    multiplier = 1
    for segment in reversed(time_str.strip().split(":")):
        segment = segment.strip()
        if not _COLON_SEGMENT.fullmatch(segment):
            raise FormatError(f"Invalid duration segment {segment!r} in {time_str!r}")
        total += multiplier * float(segment)
        multiplier *= 60
    return total


def parse_duration_letters(time_str: str) -> int:
    """
    Parse an "XhYmZs" duration to seconds.

    Each component is picked out on its own and only counts when both its
    number and its letter are present. Text with no components is 0 seconds,
    so "90", "abc" and "" all give 0 and "1h30" gives 3600.

    Args:
        time_str: Duration string (e.g., "1h2m3s", "45s", "1m")

    Returns:
        Time in integer seconds
    """
    time_str = time_str or ""
    total = 0
    for pattern, scale in _LETTER_COMPONENTS:
        match = pattern.search(time_str)
        if match:
            total += int(match.group(1)) * scale
    return total


def format_duration_colon(seconds: float) -> str:
    """
    Format seconds as a colon duration.

    Uses H:MM:SS from one hour up and M:SS below it. Fractional seconds keep
    up to millisecond precision without trailing zeros.
    """
    if seconds < 0 or math.isnan(seconds):
        raise ValueError(f"Duration must be non-negative, got {seconds}")

    total_ms = int(round(seconds * 1000))
    ms = total_ms % 1000
    total_seconds = total_ms // 1000
    secs = total_seconds % 60
    total_minutes = total_seconds // 60
    minutes = total_minutes % 60
    hours = total_minutes // 60

    frac = f".{ms:03d}".rstrip("0") if ms else ""
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}{frac}"
    return f"{minutes}:{secs:02d}{frac}"


def format_duration_letters(seconds: float) -> str:
    """Format whole seconds as "XhYmZs", omitting zero components ("0s" for zero)."""
    if seconds < 0 or math.isnan(seconds):
        raise ValueError(f"Duration must be non-negative, got {seconds}")

    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs or not parts:
        parts.append(f"{secs}s")
    return "".join(parts)
