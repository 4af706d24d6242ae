import random

import pytest

from schnorr_nopk import random_schnorr_input


@pytest.fixture
def rng():
    """Seeded randomness so failures reproduce."""
    return random.Random(0x5EC9256B1)


@pytest.fixture
def valid_sig(rng):
    return random_schnorr_input(rng)
