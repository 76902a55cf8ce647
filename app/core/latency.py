"""Latency Math — pure helpers for timing samples and summary statistics.

Invariants:
    - Latency samples are non-negative integer milliseconds
    - Rounding is half-up (2.5 -> 3), never banker's rounding
    - summarize([]) returns None: empty runs have no statistics

Design Decisions:
    - Numbers stay numeric until serialization; format_ms is applied only
      when building response payloads
    - parse_count mirrors a leading-integer parse ("25abc" -> 25, "0x1A" -> 26)
      so path segments with trailing junk still yield a count
"""

import math
import re
from dataclasses import dataclass

_LEADING_INT = re.compile(r"^\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|(\d+))")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 rounding towards +infinity."""
    return math.floor(value + 0.5)


def elapsed_ms(start: float, end: float) -> int:
    """Milliseconds between two perf_counter readings (seconds)."""
    return max(0, round_half_up((end - start) * 1000))


def format_ms(latency: int) -> str:
    return f"{latency}ms"


def average_ms(latencies: list[int]) -> int:
    """Rounded arithmetic mean. Caller guarantees a non-empty list."""
    return round_half_up(sum(latencies) / len(latencies))


@dataclass(frozen=True)
class LatencyStats:
    """Summary statistics over one run."""
    average: int
    min: int
    max: int

    def to_payload(self) -> dict[str, str]:
        return {
            "average": format_ms(self.average),
            "min": format_ms(self.min),
            "max": format_ms(self.max),
        }


def summarize(latencies: list[int]) -> LatencyStats | None:
    """Min/max/mean over a run, or None when the run is empty."""
    if not latencies:
        return None
    return LatencyStats(
        average=average_ms(latencies),
        min=min(latencies),
        max=max(latencies),
    )


def parse_count(raw: str | None, default: int) -> int:
    """Parse a stress-test count from a path segment.

    Missing and non-numeric segments fall back to ``default``, as do digit
    runs too long for int() to convert. A "0x" prefix reads hex digits.
    Zero and negative values are returned as-is; the caller treats them as
    an empty run.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    sign, hex_digits, digits = match.groups()
    if hex_digits == "":
        return default
    try:
        value = int(hex_digits, 16) if hex_digits else int(digits)
    except ValueError:
        return default
    return -value if sign == "-" else value
