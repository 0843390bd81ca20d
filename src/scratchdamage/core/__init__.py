from .rng import RNG, FixedRandomness, RandomnessSource

__all__ = ["RNG", "FixedRandomness", "RandomnessSource"]
