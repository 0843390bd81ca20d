import sys
from pathlib import Path

import pytest

# Make the src/ layout importable when the package is not installed
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def seeded_rng():
    from scratchdamage.core.rng import RNG

    return RNG(seed=1234)
