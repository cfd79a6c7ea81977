"""Players, items, inventory entries and quests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Item:
    """An item that a player can carry and use."""

    id: int
    name: str
    description: str
    item_type: str
    value: int
    durability: int | None = None
    is_magical: bool = False
    is_cursed: bool = False

    def use_item(self, player: Player) -> None:
        """Use the item on a player, wearing it down and applying its effect."""
        if self.durability is not None:
            if self.durability <= 0:
                print(f"The item {self.name} is broken and can no longer be used.")
                return
            self.durability -= 1
            print(f"Using item: {self.name}. Remaining durability: {self.durability}")

        if self.is_magical:
            print(f"The item {self.name} is magical! It grants special abilities!")
            if self.item_type == "Potion":
                player.heal(self.value * 2)

        match self.item_type:
            case "Potion":
                print(f"Using potion: {self.name}")
                player.heal(self.value)
            case "Weapon":
                print(f"Equipping weapon: {self.name}")
            case _:
                print(f"Using item: {self.name}")


def describe_item(item: Item) -> None:
    """Print a description of an item and its properties."""
    print(f"Item: {item.name}")
    print(f"Description: {item.description}")
    print(f"Type: {item.item_type}")
    print(f"Value: {item.value}")
    if item.durability is not None:
        print(f"Durability: {item.durability}")
    if item.is_magical:
        print("This item is magical!")
    if item.is_cursed:
        print("This item is cursed!")


@dataclass
class Player:
    """A player with health, level and experience."""

    id: int
    username: str
    level: int
    health: int
    max_health: int
    experience: int

    def level_up(self) -> None:
        self.level += 1
        self.max_health += 10
        self.health = self.max_health
        self.experience = 0

    def take_damage(self, amount: int) -> None:
        self.health = max(self.health - amount, 0)

    def heal(self, amount: int) -> None:
        self.health = min(self.health + amount, self.max_health)

    def add_item(self, item: Item, quantity: int) -> None:
        print(f"Adding {quantity} of item: {item.name}")

    def remove_item(self, item: Item, quantity: int) -> None:
        print(f"Removing {quantity} of item: {item.name}")


@dataclass
class InventoryEntry:
    """A stack of one item held by one player."""

    player_id: int
    item_id: int
    quantity: int
    durability: int | None = None

    def add_item(self, quantity: int, durability: int | None = None) -> None:
        self.quantity += quantity
        if durability is not None:
            self.durability = durability

    def remove_item(self, quantity: int) -> None:
        self.quantity = self.quantity - quantity if self.quantity >= quantity else 0


@dataclass
class Quest:
    """A quest that a player can complete."""

    id: int
    title: str
    description: str
    completed: bool = False

    def complete(self) -> None:
        self.completed = True