"""
Combat package for scratchdamage.

Contains:
- The three-step damage pipeline (randomize, apply defense, add scratch damage).
- A configurable DamageCalculator with an optional strict validation mode.
- Damage forecasting over the variance interval.
"""

from .damage import (
    DamageBreakdown,
    DamageCalculator,
    DamageRoll,
    apply_defense,
    apply_scratch,
    compute_damage,
    randomize,
)
from .forecast import DamageForecast, forecast_damage

__all__ = [
    "DamageBreakdown",
    "DamageCalculator",
    "DamageRoll",
    "DamageForecast",
    "apply_defense",
    "apply_scratch",
    "compute_damage",
    "forecast_damage",
    "randomize",
]
