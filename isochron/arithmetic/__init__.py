"""Arithmetic helpers shared by the temporal types.

Functions:
    add_period: Add a Period to a date-based temporal value.
    subtract_period: Subtract a Period from a date-based temporal value.
"""

from __future__ import annotations

from isochron.arithmetic.period_ops import add_period, subtract_period

__all__: list[str] = [
    "add_period",
    "subtract_period",
]
