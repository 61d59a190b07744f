"""
Run summary — totals, ROI and goal-month detection.
"""

from .metrics import SummaryMetrics, find_goal_month, summarize

__all__ = [
    "SummaryMetrics",
    "find_goal_month",
    "summarize",
]
