"""Combat and quest rules applied to players."""

from __future__ import annotations

from rpg_framework.player import Player, Quest

COMBAT_DAMAGE = 10
QUEST_EXPERIENCE = 100
LEVEL_UP_EXPERIENCE = 1000


def handle_combat(player: Player, monster_health: int) -> int:
    """Run one round of combat and return the monster's remaining health."""
    player.take_damage(COMBAT_DAMAGE)
    if player.health == 0:
        print("Player has died!")
    return monster_health - COMBAT_DAMAGE


def complete_quest(player: Player, quest: Quest) -> None:
    """Mark the quest done and reward the player, levelling up when due."""
    quest.complete()
    player.experience += QUEST_EXPERIENCE
    if player.experience >= LEVEL_UP_EXPERIENCE:
        player.level_up()