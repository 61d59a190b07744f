"""
Position sizing — entry value, stop thresholds, Martingale and Soros ladders.
"""

from .calculator import (
    MartingaleLadder,
    SizingResult,
    SorosLadder,
    martingale_ladder,
    size_position,
    soros_ladder,
)

__all__ = [
    "MartingaleLadder",
    "SizingResult",
    "SorosLadder",
    "martingale_ladder",
    "size_position",
    "soros_ladder",
]
