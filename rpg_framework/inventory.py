"""Adding and removing items in a player's inventory."""

from __future__ import annotations

from rpg_framework.player import InventoryEntry, Item


def _find(entries: list[InventoryEntry], item: Item) -> InventoryEntry | None:
    return next((entry for entry in entries if entry.item_id == item.id), None)


def add_item_to_inventory(
    entries: list[InventoryEntry], player_id: int, item: Item, quantity: int
) -> list[InventoryEntry]:
    """Add a quantity of an item, stacking onto an existing entry if present."""
    existing = _find(entries, item)
    if existing is not None:
        existing.add_item(quantity)
    else:
        entries.append(
            InventoryEntry(
                player_id=player_id,
                item_id=item.id,
                quantity=quantity,
                durability=item.durability,
            )
        )
    return entries


def remove_item_from_inventory(
    entries: list[InventoryEntry], item: Item, quantity: int
) -> list[InventoryEntry]:
    """Remove a quantity of an item; entries left empty are dropped."""
    existing = _find(entries, item)
    if existing is not None:
        existing.remove_item(quantity)
        if existing.quantity == 0:
            entries.remove(existing)
    return entries