"""
scratchdamage core package.

Headless damage calculation for combat systems:
- compute_damage: randomize, mitigate by defense, then add 1 scratch damage
- DamageCalculator for configurable bounds and strict input validation
- Injectable randomness sources (seeded RNG, fixed values for tests)

Callers supply ratings and a randomness source; nothing here keeps state between calls.
"""
from .combat import (
    DamageBreakdown,
    DamageCalculator,
    DamageForecast,
    DamageRoll,
    compute_damage,
    forecast_damage,
)
from .config import DamageConfig
from .core.rng import RNG, FixedRandomness, RandomnessSource
from .errors import ConfigError, InvalidInput, ScratchDamageError

__all__ = [
    "DamageBreakdown",
    "DamageCalculator",
    "DamageForecast",
    "DamageRoll",
    "compute_damage",
    "forecast_damage",
    "DamageConfig",
    "RNG",
    "FixedRandomness",
    "RandomnessSource",
    "ConfigError",
    "InvalidInput",
    "ScratchDamageError",
]
