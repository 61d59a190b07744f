"""
Growth projection engine — deterministic monthly ledger math + tabular view.
"""

from .simulation import SimulationRow, project_month, simulate
from .frames import rows_to_frame

__all__ = [
    "SimulationRow",
    "project_month",
    "simulate",
    "rows_to_frame",
]
