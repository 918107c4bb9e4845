import random
from pathlib import Path

import pytest

from core.categories import Category

REPO_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


class ZeroRng:
    """randrange always picks 0; makes Fisher-Yates fully predictable."""

    def __init__(self):
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return 0


@pytest.fixture
def zero_rng():
    return ZeroRng()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def sample_pools():
    return {
        Category.LOCATION: ["Attic", "Beach", "Cockpit"],
        Category.RELATIONSHIP: ["Doctor/Nurse", "Twins", "King/Jester", "Exes", "Roommates"],
        Category.WORD: ["Cheese", "Volcano", "Zipper", "Honey"],
    }


@pytest.fixture
def repo_data_dir():
    return REPO_DATA_DIR
