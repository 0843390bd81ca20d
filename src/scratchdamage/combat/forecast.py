"""
Damage forecasting for previews.

Evaluates the damage pipeline at the bounds of the variance interval so a UI can
show a range without drawing from any randomness source.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import DamageConfig
from .damage import apply_defense, apply_scratch, randomize


@dataclass(frozen=True)
class DamageForecast:
    minimum: float
    maximum: float
    average: float


def _evaluate(attack: float, defense: float, multiplier: float, cfg: DamageConfig) -> float:
    return apply_scratch(
        apply_defense(randomize(attack, multiplier), defense, cfg.defense_cap),
        cfg.scratch_damage,
    )


def forecast_damage(attack: float, defense: float, config: Optional[DamageConfig] = None) -> DamageForecast:
    """Return the min, max and midpoint damage for an attack.

    Args:
        attack: The attacker's rating.
        defense: The defender's rating.
        config: Optional tunables; defaults to the classic 0.9-1.0 / 256 formula.

    Returns:
        DamageForecast with ``minimum <= average <= maximum``.
    """
    cfg = config or DamageConfig.default()
    low = _evaluate(attack, defense, cfg.variance_low, cfg)
    high = _evaluate(attack, defense, cfg.variance_high, cfg)
    mid = _evaluate(attack, defense, (cfg.variance_low + cfg.variance_high) / 2.0, cfg)
    # Negative attack or over-cap defense flips the ordering
    return DamageForecast(minimum=min(low, high), maximum=max(low, high), average=mid)
