from __future__ import annotations

import random

import pytest

from serpent.food import FoodSpawner
from serpent.world import World


@pytest.fixture
def world():
    return World()


@pytest.fixture
def duo_world():
    return World(mode="duo")


@pytest.fixture
def spawner():
    return FoodSpawner(random.Random(1234))
