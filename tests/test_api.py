import asyncio
from datetime import datetime

import pytest
from pydantic import TypeAdapter

from case_opener.config import Settings, get_settings
from case_opener.data.catalog_definitions import CRATE_DEFINITIONS
from case_opener.main import app
from case_opener.repositories import InMemoryCatalogRepository, InMemoryInventoryRepository
from case_opener.state import set_catalog_repository_provider, set_inventory_repository_provider

GOLD_ONLY = {"gold": 100, "red": 0, "pink": 0, "purple": 0, "blue": 0}


def crate_definition(crate_id):
    return next(entry for entry in CRATE_DEFINITIONS if entry["id"] == crate_id)


def test_healthcheck(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_crates_populates_skins(client):
    response = client.get("/api/crates")
    assert response.status_code == 200

    crates = response.json()
    assert [crate["name"] for crate in crates] == [
        "Kilowatt Case",
        "Revolution Case",
        "Starter Case",
    ]
    revolution = crates[1]
    assert [skin["id"] for skin in revolution["contains"]] == crate_definition(
        "crate-revolution"
    )["contains"]
    assert {skin["rarity"] for skin in revolution["special_items"]} == {"gold"}


@pytest.mark.parametrize("lookup", ["crate-kilowatt", "Kilowatt Case"])
def test_get_crate_by_id_or_name(client, lookup):
    response = client.get(f"/api/crates/{lookup}")
    assert response.status_code == 200
    assert response.json()["id"] == "crate-kilowatt"


def test_get_unknown_crate_returns_404(client):
    response = client.get("/api/crates/nope")
    assert response.status_code == 404


def test_open_crate_returns_award_and_reel(client):
    response = client.post("/api/open", json={"crate_id": "crate-revolution", "seed": 12})
    assert response.status_code == 200

    body = response.json()
    definition = crate_definition("crate-revolution")
    won = body["won_item"]
    assert won["id"] in definition["contains"] + definition["special_items"]
    assert won["min_float"] <= won["wear"] < won["max_float"]
    assert won["condition"] in {"FN", "MW", "FT", "WW", "BS"}
    assert won["price"] == (won["prices"].get(won["condition"]) or 0)
    assert body["cost"] == pytest.approx(2.49 + 75)
    assert len(body["spin_items"]) == 56
    assert body["winner_index"] == 50


def test_open_crate_with_same_seed_is_reproducible(client):
    payload = {"crate_id": "crate-kilowatt", "seed": 99}
    first = client.post("/api/open", json=payload).json()
    second = client.post("/api/open", json=payload).json()

    assert first["won_item"] == second["won_item"]
    assert first["spin_items"] == second["spin_items"]


def test_gold_roll_awards_special_item_behind_mystery_slot(client):
    response = client.post(
        "/api/open",
        json={"crate_id": "crate-revolution", "probabilities": GOLD_ONLY, "seed": 1},
    )
    body = response.json()

    assert body["won_item"]["tier"] == "gold"
    assert body["won_item"]["id"] in crate_definition("crate-revolution")["special_items"]
    assert body["spin_items"][body["winner_index"]]["id"] == "mystery"


def test_gold_roll_without_special_items_falls_back(client):
    # Starter Case has neither special items nor red skins.
    for seed in range(20):
        response = client.post(
            "/api/open",
            json={"crate_id": "Starter Case", "probabilities": GOLD_ONLY, "seed": seed},
        )
        body = response.json()
        assert body["won_item"]["tier"] == "red"
        assert body["won_item"]["id"] in crate_definition("crate-starter")["contains"]


def test_open_rejects_negative_probabilities(client):
    table = dict(GOLD_ONLY, red=-1)
    response = client.post(
        "/api/open", json={"crate_id": "crate-revolution", "probabilities": table}
    )
    assert response.status_code == 422


def test_open_unknown_crate_returns_404(client):
    response = client.post("/api/open", json={"crate_id": "missing"})
    assert response.status_code == 404


def test_open_empty_crate_returns_409(client):
    catalog = InMemoryCatalogRepository()
    asyncio.run(
        catalog.seed_if_empty(
            skins=[],
            crates=[{"id": "crate-empty", "name": "Empty", "contains": [], "special_items": []}],
        )
    )
    inventory = InMemoryInventoryRepository(catalog)
    set_catalog_repository_provider(lambda: catalog)
    set_inventory_repository_provider(lambda: inventory)

    response = client.post("/api/open", json={"crate_id": "crate-empty"})
    assert response.status_code == 409


def test_open_crate_with_only_gold_skins_returns_409(client):
    catalog = InMemoryCatalogRepository()
    asyncio.run(
        catalog.seed_if_empty(
            skins=[{"id": "gold-only", "name": "★ Karambit | Fade", "rarity": "gold"}],
            crates=[
                {
                    "id": "crate-gold",
                    "name": "Gold Case",
                    "contains": ["gold-only"],
                    "special_items": [],
                }
            ],
        )
    )
    inventory = InMemoryInventoryRepository(catalog)
    set_catalog_repository_provider(lambda: catalog)
    set_inventory_repository_provider(lambda: inventory)

    response = client.post("/api/open", json={"crate_id": "crate-gold", "seed": 1})

    assert response.status_code == 409
    assert asyncio.run(inventory.list_items("TEST_USER")) == []


def test_open_without_key_fee(client):
    app.dependency_overrides[get_settings] = lambda: Settings(charge_key_fee=False)

    response = client.post("/api/open", json={"crate_id": "crate-kilowatt", "seed": 5})

    assert response.json()["cost"] == pytest.approx(1.19)


def test_opened_skins_land_in_inventory(client):
    for seed in (1, 2):
        client.post(
            "/api/open",
            json={"crate_id": "crate-revolution", "user_id": "alice", "seed": seed},
        )
    client.post("/api/open", json={"crate_id": "crate-kilowatt", "user_id": "bob"})

    response = client.get("/api/inventory", params={"user_id": "alice"})
    assert response.status_code == 200

    items = response.json()
    assert len(items) == 2
    assert all(item["cost"] == pytest.approx(77.49) for item in items)
    assert {"inventory_id", "acquired_at", "wear", "price", "name"} <= set(items[0])
    acquired = [TypeAdapter(datetime).validate_python(item["acquired_at"]) for item in items]
    assert acquired == sorted(acquired, reverse=True)


def test_open_without_user_uses_default_user(client):
    client.post("/api/open", json={"crate_id": "crate-kilowatt"})

    items = client.get("/api/inventory", params={"user_id": "TEST_USER"}).json()
    assert len(items) == 1


def test_inventory_requires_user_id(client):
    assert client.get("/api/inventory").status_code == 400
    assert client.get("/api/inventory", params={"user_id": " "}).status_code == 400


def test_clear_inventory(client):
    client.post("/api/open", json={"crate_id": "crate-kilowatt", "user_id": "carol"})
    client.post("/api/open", json={"crate_id": "crate-kilowatt", "user_id": "dave"})

    response = client.request("DELETE", "/api/inventory", json={"user_id": "carol"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Inventory cleared", "deleted": 1}
    assert client.get("/api/inventory", params={"user_id": "carol"}).json() == []
    assert len(client.get("/api/inventory", params={"user_id": "dave"}).json()) == 1


def test_clear_inventory_requires_user_id(client):
    response = client.request("DELETE", "/api/inventory", json={"user_id": ""})
    assert response.status_code == 400
