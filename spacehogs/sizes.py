"""Byte-size parsing and human-readable formatting.

``parse_size`` accepts ``<number>[unit][B]`` with units ``B K M G T P``
(case-insensitive, powers of 1024). ``human_readable_size`` renders bytes
with binary prefixes and two decimals from 1 KiB upward.
"""

from __future__ import annotations

import math
import re

from .scan_model.types import SizeFormatError

_SIZE_RE = re.compile(r"^([0-9.]+)\s*([kmgtp]?b?)$", re.IGNORECASE)
_UNIT_MULTIPLIERS = {
    "": 1,
    "B": 1,
    "K": 1024,
    "M": 1024**2,
    "G": 1024**3,
    "T": 1024**4,
    "P": 1024**5,
}
_BINARY_PREFIXES = "KMGTPE"


def parse_size(text: str) -> int:
    """Convert a size expression such as ``"100M"`` or ``"1.5G"`` to bytes.

    Fractional byte counts are truncated toward zero. Raises
    ``SizeFormatError`` for anything outside the grammar, including negative
    numbers and malformed decimals like ``"1.2.3"``.
    """
    match = _SIZE_RE.match(text.strip())
    if match is None:
        raise SizeFormatError(f"invalid size format: {text}")

    number_text, unit_text = match.groups()
    try:
        number = float(number_text)
    except ValueError as exc:
        raise SizeFormatError(f"invalid size number: {number_text}") from exc

    unit = unit_text.upper()[:1]
    size = number * _UNIT_MULTIPLIERS[unit]
    if not math.isfinite(size):
        raise SizeFormatError(f"invalid size number: {number_text}")
    return int(size)


def human_readable_size(size: int) -> str:
    """Render ``size`` bytes as ``"N B"`` or ``"X.XX KiB"``-style text."""
    if size < 1024:
        return f"{size} B"
    divisor = 1024
    exponent = 0
    scaled = size // 1024
    while scaled >= 1024 and exponent < len(_BINARY_PREFIXES) - 1:
        divisor *= 1024
        exponent += 1
        scaled //= 1024
    return f"{size / divisor:.2f} {_BINARY_PREFIXES[exponent]}iB"


__all__ = [
    "parse_size",
    "human_readable_size",
]
