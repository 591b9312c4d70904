"""Bundled sample catalog used to seed empty skin and crate stores."""

from __future__ import annotations

from typing import Any, Dict, List


def _skin(
    skin_id: str,
    weapon: str,
    skin_name: str,
    rarity: str,
    *,
    min_float: float = 0.0,
    max_float: float = 1.0,
    prices: Dict[str, float] | None = None,
    is_special: bool = False,
    phase: str | None = None,
) -> Dict[str, Any]:
    prefix = "★ " if is_special else ""
    return {
        "id": skin_id,
        "name": f"{prefix}{weapon} | {skin_name}",
        "weapon": weapon,
        "skin_name": skin_name,
        "rarity": rarity,
        "image_url": f"https://cdn.example.com/skins/{skin_id}.png",
        "phase": phase,
        "is_special": is_special,
        "min_float": min_float,
        "max_float": max_float,
        "prices": prices or {},
    }


SKIN_DEFINITIONS: List[Dict[str, Any]] = [
    # Revolution Case
    _skin("skin-rev-p90", "P90", "Neoqueen", "blue", max_float=0.8,
          prices={"FN": 0.52, "MW": 0.21, "FT": 0.12, "WW": 0.11, "BS": 0.10}),
    _skin("skin-rev-mac10", "MAC-10", "Sakkaku", "blue", max_float=0.7,
          prices={"FN": 0.48, "MW": 0.19, "FT": 0.11, "WW": 0.10, "BS": 0.09}),
    _skin("skin-rev-mp5", "MP5-SD", "Liquidation", "blue", max_float=0.6,
          prices={"FN": 0.41, "MW": 0.17, "FT": 0.10, "WW": 0.09}),
    _skin("skin-rev-sg553", "SG 553", "Cyberforce", "blue", min_float=0.02, max_float=0.8,
          prices={"FN": 0.55, "MW": 0.22, "FT": 0.12, "WW": 0.11, "BS": 0.10}),
    _skin("skin-rev-r8", "R8 Revolver", "Banana Cannon", "blue", max_float=0.65,
          prices={"FN": 0.47, "MW": 0.18, "FT": 0.11, "WW": 0.10, "BS": 0.09}),
    _skin("skin-rev-m4a1s", "M4A1-S", "Emphorosaur-S", "purple", max_float=0.6,
          prices={"FN": 3.10, "MW": 1.25, "FT": 0.78, "WW": 0.74, "BS": 0.71}),
    _skin("skin-rev-glock", "Glock-18", "Umbral Rabbit", "purple", max_float=0.55,
          prices={"FN": 2.80, "MW": 1.10, "FT": 0.70, "WW": 0.66}),
    _skin("skin-rev-p2000", "P2000", "Wicked Sick", "purple", max_float=0.85,
          prices={"FN": 2.40, "MW": 0.95, "FT": 0.62, "WW": 0.60, "BS": 0.58}),
    _skin("skin-rev-awp", "AWP", "Duality", "pink", max_float=0.7,
          prices={"FN": 14.80, "MW": 7.20, "FT": 5.10, "WW": 4.90, "BS": 4.75}),
    _skin("skin-rev-ump", "UMP-45", "Wild Child", "pink", max_float=0.75,
          prices={"FN": 9.30, "MW": 4.60, "FT": 3.20, "WW": 3.05, "BS": 2.95}),
    _skin("skin-rev-m4a4", "M4A4", "Temukau", "red", max_float=0.8,
          prices={"FN": 61.00, "MW": 34.50, "FT": 22.40, "WW": 21.10, "BS": 19.80}),
    _skin("skin-rev-ak47", "AK-47", "Head Shot", "red", max_float=1.0,
          prices={"FN": 42.00, "MW": 21.30, "FT": 12.70, "WW": 11.90, "BS": 10.80}),
    _skin("skin-rev-gloves-1", "Sport Gloves", "Nocts", "gold", min_float=0.06, max_float=0.8,
          prices={"MW": 812.00, "FT": 402.00, "WW": 315.00, "BS": 270.00}, is_special=True),
    _skin("skin-rev-gloves-2", "Driver Gloves", "Snow Leopard", "gold", min_float=0.06, max_float=0.8,
          prices={"MW": 640.00, "FT": 298.00, "WW": 233.00, "BS": 205.00}, is_special=True),
    # Kilowatt Case
    _skin("skin-kw-ssg", "SSG 08", "Dezastre", "blue", max_float=0.7,
          prices={"FN": 0.44, "MW": 0.18, "FT": 0.10, "WW": 0.09, "BS": 0.08}),
    _skin("skin-kw-nova", "Nova", "Dark Sigil", "blue", max_float=0.65,
          prices={"FN": 0.39, "MW": 0.16, "FT": 0.09, "WW": 0.08}),
    _skin("skin-kw-mp7", "MP7", "Just Smile", "purple", max_float=0.7,
          prices={"FN": 2.05, "MW": 0.91, "FT": 0.60, "WW": 0.57, "BS": 0.55}),
    _skin("skin-kw-zeus", "Zeus x27", "Olympus", "pink", max_float=0.6,
          prices={"FN": 11.40, "MW": 5.80, "FT": 4.10, "WW": 3.95}),
    _skin("skin-kw-ak47", "AK-47", "Inheritance", "red", max_float=0.8,
          prices={"FN": 78.00, "MW": 41.00, "FT": 27.50, "WW": 26.10, "BS": 24.90}),
    _skin("skin-kw-kukri", "Kukri Knife", "Fade", "gold", max_float=0.08,
          prices={"FN": 415.00, "MW": 398.00}, is_special=True),
    # Starter crate: no red skins and no special items.
    _skin("skin-st-famas", "FAMAS", "Meow 36", "blue", max_float=0.9,
          prices={"FN": 0.30, "MW": 0.12, "FT": 0.07, "WW": 0.06, "BS": 0.05}),
    _skin("skin-st-tec9", "Tec-9", "Rebel", "blue", max_float=0.9,
          prices={"FN": 0.28, "MW": 0.11, "FT": 0.06, "WW": 0.05, "BS": 0.05}),
    _skin("skin-st-deagle", "Desert Eagle", "Calligraffiti", "purple", max_float=0.9,
          prices={"FN": 1.80, "MW": 0.85, "FT": 0.55, "WW": 0.52, "BS": 0.50}),
    _skin("skin-st-mag7", "MAG-7", "Insomnia", "white", max_float=1.0),
]


CRATE_DEFINITIONS: List[Dict[str, Any]] = [
    {
        "id": "crate-revolution",
        "name": "Revolution Case",
        "price": 2.49,
        "image_url": "https://cdn.example.com/crates/revolution.png",
        "contains": [
            "skin-rev-p90",
            "skin-rev-mac10",
            "skin-rev-mp5",
            "skin-rev-sg553",
            "skin-rev-r8",
            "skin-rev-m4a1s",
            "skin-rev-glock",
            "skin-rev-p2000",
            "skin-rev-awp",
            "skin-rev-ump",
            "skin-rev-m4a4",
            "skin-rev-ak47",
        ],
        "special_items": ["skin-rev-gloves-1", "skin-rev-gloves-2"],
    },
    {
        "id": "crate-kilowatt",
        "name": "Kilowatt Case",
        "price": 1.19,
        "image_url": "https://cdn.example.com/crates/kilowatt.png",
        "contains": [
            "skin-kw-ssg",
            "skin-kw-nova",
            "skin-kw-mp7",
            "skin-kw-zeus",
            "skin-kw-ak47",
        ],
        "special_items": ["skin-kw-kukri"],
    },
    {
        "id": "crate-starter",
        "name": "Starter Case",
        "price": 0.5,
        "image_url": "https://cdn.example.com/crates/starter.png",
        "contains": [
            "skin-st-famas",
            "skin-st-tec9",
            "skin-st-deagle",
            "skin-st-mag7",
        ],
        "special_items": [],
    },
]
