import pytest
from pydantic import ValidationError

from case_opener.config import Settings
from case_opener.models.crate import Crate
from case_opener.services.opening import (
    get_rng,
    inventory_entry_for,
    open_crate,
    opening_cost,
)
from case_opener.services.reel import MYSTERY_SKIN

from conftest import make_skin

TABLE = {"gold": 10, "red": 20, "pink": 20, "purple": 20, "blue": 30}


@pytest.fixture
def crate(tiered_pools):
    pool, special = tiered_pools
    return Crate(id="crate-1", name="Test Case", price=2.49, contains=pool, special_items=special)


def test_opening_cost_adds_key_fee_when_enabled(crate):
    assert opening_cost(crate, Settings(charge_key_fee=True, key_price=75)) == pytest.approx(77.49)
    assert opening_cost(crate, Settings(charge_key_fee=False)) == pytest.approx(2.49)


def test_opening_cost_uses_default_price_for_unpriced_crate():
    crate = Crate(id="crate-2", name="No Price", contains=[make_skin("a", "blue")])
    config = Settings(charge_key_fee=False, default_crate_price=1.5)
    assert opening_cost(crate, config) == 1.5


def test_open_crate_builds_reel_around_award(crate):
    config = Settings(reel_length=20, reel_winner_index=15)
    result = open_crate(crate, TABLE, get_rng(42), config)

    assert result.award.skin in crate.contains + crate.special_items
    assert len(result.reel) == 20
    assert result.winner_index == 15
    expected = MYSTERY_SKIN if result.award.skin.is_special else result.award.skin
    assert result.reel[15] is expected


def test_open_crate_is_reproducible_with_seed(crate):
    first = open_crate(crate, TABLE, get_rng(7))
    second = open_crate(crate, TABLE, get_rng(7))

    assert first.award == second.award
    assert [skin.id for skin in first.reel] == [skin.id for skin in second.reel]


def test_open_crate_special_award_is_masked_in_reel(crate):
    table = {"gold": 100, "red": 0, "pink": 0, "purple": 0, "blue": 0}
    result = open_crate(crate, table, get_rng(1))

    assert result.award.tier == "gold"
    assert result.award.skin.rarity == "gold"
    assert result.reel[result.winner_index] is MYSTERY_SKIN


def test_inventory_entry_for_records_award(crate):
    result = open_crate(crate, TABLE, get_rng(3), Settings(charge_key_fee=False))
    entry = inventory_entry_for("alice", result)

    assert entry.user_id == "alice"
    assert entry.skin_id == result.award.skin.id
    assert entry.cost == pytest.approx(2.49)
    assert entry.wear == result.award.wear
    assert entry.price == result.award.price
    assert entry.acquired_at.tzinfo is not None


@pytest.mark.parametrize(
    "overrides",
    [
        {"reel_length": 20},
        {"reel_length": 10, "reel_winner_index": 10},
        {"reel_thresholds": [0.9, 0.97]},
        {"reel_thresholds": [0.95, 0.9, 0.99]},
        {"reel_thresholds": [0.5, 0.9, 1.0]},
        {"reel_thresholds": [0.0, 0.9, 0.99]},
    ],
)
def test_settings_reject_unusable_reel_layout(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_settings_accept_short_reel_with_matching_winner():
    config = Settings(reel_length=20, reel_winner_index=15, reel_thresholds=[0.9, 0.97, 0.99])
    assert config.reel_winner_index == 15
