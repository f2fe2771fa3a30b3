"""Utility functions."""

import re

_DIGITS = re.compile(r"^\s*(\d+)")


def _leading_int(value: str) -> int | None:
    match = _DIGITS.match(value)
    return int(match.group(1)) if match else None


def parse_cue_timestamp(timestamp: str) -> float:
    """Parse a cue timestamp (HH:MM:SS.mmm) to seconds.

    Anything that is not three colon-separated parts resolves to 0.
    """
    value = timestamp.strip().split()[0] if timestamp.strip() else ""
    parts = value.split(":")
    if len(parts) != 3:
        return 0.0

    seconds_part, _, millis_part = parts[2].replace(",", ".").partition(".")
    hours = _leading_int(parts[0])
    minutes = _leading_int(parts[1])
    seconds = _leading_int(seconds_part)
    if hours is None or minutes is None or seconds is None:
        return 0.0
    millis = _leading_int(millis_part) or 0

    return hours * 3600 + minutes * 60 + seconds + millis / 1000


def parse_clock_timestamp(timestamp: str) -> float:
    """Parse a bracketed text timestamp (H:MM:SS) to whole seconds."""
    parts = timestamp.strip().split(":")
    if len(parts) != 3:
        return 0.0

    values = [_leading_int(p) for p in parts]
    if any(v is None for v in values):
        return 0.0
    hours, minutes, seconds = values
    return float(hours * 3600 + minutes * 60 + seconds)


def format_timestamp(seconds: float) -> str:
    """Format seconds to HH:MM:SS or MM:SS."""
    h = int(seconds // 3600)
    m = int((seconds % 3600) // 60)
    s = int(seconds % 60)
    if h > 0:
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m}:{s:02d}"
