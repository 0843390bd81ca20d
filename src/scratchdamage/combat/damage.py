from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Optional

from ..config import DamageConfig
from ..core.rng import RNG, RandomnessSource
from ..errors import InvalidInput


logger = logging.getLogger(__name__)

_DEFAULTS = DamageConfig.default()
VARIANCE_LOW = _DEFAULTS.variance_low
VARIANCE_HIGH = _DEFAULTS.variance_high
DEFENSE_CAP = _DEFAULTS.defense_cap
SCRATCH_DAMAGE = _DEFAULTS.scratch_damage


def randomize(damage: float, multiplier: float) -> float:
    """Scale ``damage`` by a drawn variance multiplier."""
    return damage * multiplier


def apply_defense(damage: float, defense_rating: float, defense_cap: float = DEFENSE_CAP) -> float:
    """Mitigate linearly: no reduction at 0 defense, full reduction at ``defense_cap``.

    Defense is not clamped; ratings beyond the cap yield a negative term.
    """
    return damage * ((defense_cap - defense_rating) / defense_cap)


def apply_scratch(damage: float, scratch: float = SCRATCH_DAMAGE) -> float:
    return damage + scratch


def compute_damage(attack_rating: float, defense_rating: float, randomness: RandomnessSource) -> float:
    """Compute damage for one attack.

    Draws exactly once from ``randomness`` over [0.9, 1.0], mitigates by
    ``(256 - defense) / 256`` and adds 1 scratch damage. Never raises for
    numeric input.
    """
    multiplier = randomness.uniform(VARIANCE_LOW, VARIANCE_HIGH)
    damage = apply_scratch(apply_defense(randomize(attack_rating, multiplier), defense_rating))
    logger.debug(
        "Damage atk=%s def=%s multiplier=%.4f -> %.4f",
        attack_rating, defense_rating, multiplier, damage,
    )
    return damage


@dataclass(frozen=True)
class DamageRoll:
    """Immutable damage value that moves through the pipeline one step at a time.

    Each step returns a new roll; earlier rolls are left untouched::

        DamageRoll(100).randomize(rng).apply_defense(128).apply_scratch().value
    """

    value: float

    def randomize(
        self,
        randomness: RandomnessSource,
        low: float = VARIANCE_LOW,
        high: float = VARIANCE_HIGH,
    ) -> "DamageRoll":
        return DamageRoll(randomize(self.value, randomness.uniform(low, high)))

    def apply_defense(self, defense_rating: float, defense_cap: float = DEFENSE_CAP) -> "DamageRoll":
        return DamageRoll(apply_defense(self.value, defense_rating, defense_cap))

    def apply_scratch(self, scratch: float = SCRATCH_DAMAGE) -> "DamageRoll":
        return DamageRoll(apply_scratch(self.value, scratch))


@dataclass(frozen=True)
class DamageBreakdown:
    """Details of a computed damage roll.

    Attributes:
        attack: Attack rating fed into the pipeline.
        defense: Defense rating fed into the pipeline.
        multiplier: The drawn variance multiplier.
        randomized: attack * multiplier.
        defense_factor: (cap - defense) / cap.
        mitigated: randomized * defense_factor, before the scratch floor.
        final: mitigated + scratch damage.
    """

    attack: float
    defense: float
    multiplier: float
    randomized: float
    defense_factor: float
    mitigated: float
    final: float


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class DamageCalculator:
    """Compute damage with configurable bounds and an injectable randomness source.

    The formula is:
      multiplier ~ Uniform[variance_low, variance_high]
      damage = atk * multiplier * (cap - df) / cap + scratch

    Notes:
    - The scratch damage is always added, even when defense reaches the cap.
    - Ratings are only validated when ``config.strict`` is set; otherwise any
      number is accepted and propagates arithmetically.
    - If no randomness source is given per call or at construction, a fresh
      unseeded RNG is used for that call.
    """

    def __init__(
        self,
        config: Optional[DamageConfig] = None,
        randomness: Optional[RandomnessSource] = None,
    ) -> None:
        self.config = config or DamageConfig.default()
        self.randomness = randomness

    def compute_damage(
        self,
        attack: float,
        defense: float,
        randomness: Optional[RandomnessSource] = None,
    ) -> float:
        return self.compute_damage_with_breakdown(attack, defense, randomness).final

    def compute_damage_with_breakdown(
        self,
        attack: float,
        defense: float,
        randomness: Optional[RandomnessSource] = None,
    ) -> DamageBreakdown:
        """Compute damage and return every intermediate value."""
        cfg = self.config
        if cfg.strict:
            self.validate(attack, defense)

        source = randomness if randomness is not None else self.randomness
        if source is None:
            source = RNG()
        multiplier = source.uniform(cfg.variance_low, cfg.variance_high)
        randomized = randomize(attack, multiplier)
        defense_factor = (cfg.defense_cap - defense) / cfg.defense_cap
        mitigated = randomized * defense_factor
        final = apply_scratch(mitigated, cfg.scratch_damage)

        logger.debug(
            "Damage atk=%s def=%s multiplier=%.4f factor=%.4f -> %.4f",
            attack, defense, multiplier, defense_factor, final,
        )
        return DamageBreakdown(
            attack=attack,
            defense=defense,
            multiplier=multiplier,
            randomized=randomized,
            defense_factor=defense_factor,
            mitigated=mitigated,
            final=final,
        )

    def validate(self, attack, defense) -> None:
        """Raise InvalidInput unless both ratings are in their documented domains."""
        for name, value in (("attack", attack), ("defense", defense)):
            if not _is_real(value):
                raise InvalidInput(f"{name} rating must be a real number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidInput(f"{name} rating must be finite, got {value!r}")
        if attack < 0:
            raise InvalidInput(f"attack rating must be non-negative, got {attack!r}")
        if not 0 <= defense <= self.config.defense_cap:
            raise InvalidInput(
                f"defense rating must be within [0, {self.config.defense_cap}], got {defense!r}"
            )
