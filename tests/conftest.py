import asyncio
import random

import pytest
from fastapi.testclient import TestClient

from case_opener.main import app, use_in_memory_repositories
from case_opener.models.skin import Skin


class SequenceRandom(random.Random):
    """Random whose ``random()`` replays scripted values before going random.

    ``getrandbits`` is redefined so ``choice`` keeps drawing from bits and
    does not consume the scripted values.
    """

    scripted = ()

    def random(self):
        if self.scripted:
            value, self.scripted = self.scripted[0], self.scripted[1:]
            return value
        return super().random()

    def getrandbits(self, k):
        return super().getrandbits(k)


def scripted_rng(*values, seed=0):
    rng = SequenceRandom(seed)
    rng.scripted = tuple(values)
    return rng


def make_skin(skin_id, rarity, **overrides):
    fields = {
        "id": skin_id,
        "name": f"Weapon | {skin_id}",
        "rarity": rarity,
        "is_special": rarity == "gold",
    }
    fields.update(overrides)
    return Skin(**fields)


@pytest.fixture
def tiered_pools():
    pool = [
        make_skin("red-1", "red"),
        make_skin("red-2", "red"),
        make_skin("pink-1", "pink"),
        make_skin("pink-2", "pink"),
        make_skin("purple-1", "purple"),
        make_skin("purple-2", "purple"),
        make_skin("blue-1", "blue"),
        make_skin("blue-2", "blue"),
    ]
    special = [make_skin("gold-1", "gold"), make_skin("gold-2", "gold")]
    return pool, special


@pytest.fixture
def client():
    asyncio.run(use_in_memory_repositories())
    yield TestClient(app)
    app.dependency_overrides.clear()
