from __future__ import annotations


def percent_of(value: float, percentage: float) -> float:
    """`percentage` percent of `value` (percentage=45 -> 45%)."""
    return value * (percentage / 100)
