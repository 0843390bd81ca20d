import math

import pytest

from scratchdamage import (
    DamageCalculator,
    DamageConfig,
    FixedRandomness,
    InvalidInput,
    RNG,
    ScratchDamageError,
)
from scratchdamage.combat.damage import compute_damage


def test_default_calculator_matches_compute_damage():
    calc = DamageCalculator()
    assert calc.compute_damage(100, 128, FixedRandomness(0.95)) == pytest.approx(48.5)
    assert calc.compute_damage(73, 19, FixedRandomness(0.91)) == pytest.approx(
        compute_damage(73, 19, FixedRandomness(0.91))
    )


def test_breakdown_exposes_each_step():
    calc = DamageCalculator()
    b = calc.compute_damage_with_breakdown(100, 128, FixedRandomness(0.95))
    assert b.multiplier == pytest.approx(0.95)
    assert b.randomized == pytest.approx(95.0)
    assert b.defense_factor == pytest.approx(0.5)
    assert b.mitigated == pytest.approx(47.5)
    assert b.final == pytest.approx(48.5)


def test_full_mitigation_breakdown():
    b = DamageCalculator().compute_damage_with_breakdown(500, 256, FixedRandomness(1.0))
    assert b.mitigated == 0.0
    assert b.final == 1.0


def test_per_call_randomness_overrides_instance_default():
    instance_source = FixedRandomness(0.9)
    call_source = FixedRandomness(1.0)
    calc = DamageCalculator(randomness=instance_source)

    assert calc.compute_damage(10, 0) == pytest.approx(10.0)
    assert calc.compute_damage(10, 0, call_source) == pytest.approx(11.0)
    assert instance_source.calls == 1
    assert call_source.calls == 1


def test_falls_back_to_fresh_rng_within_bounds():
    calc = DamageCalculator()
    for _ in range(50):
        dmg = calc.compute_damage(100, 0)
        assert 91.0 <= dmg <= 101.0


def test_custom_config_bounds_and_scratch():
    cfg = DamageConfig(variance_low=0.5, variance_high=0.5, defense_cap=100.0, scratch_damage=2.0)
    calc = DamageCalculator(cfg)
    # 80 * 0.5 = 40; (100 - 25) / 100 = 0.75 -> 30 + 2
    assert calc.compute_damage(80, 25, RNG(seed=3)) == pytest.approx(32.0)


def test_non_strict_accepts_out_of_domain_inputs():
    calc = DamageCalculator()
    assert calc.compute_damage(-10, 300, FixedRandomness(1.0)) == pytest.approx(-10 * (-44 / 256) + 1)


@pytest.mark.parametrize(
    "attack, defense",
    [
        (-1, 0),
        (10, -0.5),
        (10, 256.01),
        (math.inf, 0),
        (10, math.nan),
        ("10", 0),
        (True, 0),
    ],
)
def test_strict_mode_rejects_out_of_domain(attack, defense):
    source = FixedRandomness(1.0)
    calc = DamageCalculator(DamageConfig(strict=True))
    with pytest.raises(InvalidInput):
        calc.compute_damage(attack, defense, source)
    # Validation happens before the draw
    assert source.calls == 0


def test_strict_mode_accepts_domain_edges():
    calc = DamageCalculator(DamageConfig(strict=True))
    assert calc.compute_damage(0, 0, FixedRandomness(1.0)) == pytest.approx(1.0)
    assert calc.compute_damage(100, 256, FixedRandomness(1.0)) == pytest.approx(1.0)


def test_invalid_input_is_a_value_error():
    assert issubclass(InvalidInput, ValueError)
    assert issubclass(InvalidInput, ScratchDamageError)
