"""Crate opening simulator: weighted rarity rolls, wear and price, spin reels."""
