import copy

from rpg_framework.game_logic import complete_quest, handle_combat
from rpg_framework.player import Player, Quest


def make_player(**overrides):
    values = dict(id=1, username="hero", level=1, health=50, max_health=50, experience=0)
    values.update(overrides)
    return Player(**values)


def make_quest():
    return Quest(id=7, title="Rescue", description="Rescue the villager.")


def test_combat_reduces_monster_and_player_health():
    player = make_player()
    remaining = handle_combat(player, 100)
    assert remaining == 90
    assert player.health == 40


def test_combat_kills_weak_player(capsys):
    player = make_player(health=5)
    handle_combat(player, 100)
    assert player.health == 0
    assert "Player has died!" in capsys.readouterr().out


def test_combat_survivor_gets_no_death_message(capsys):
    player = make_player()
    handle_combat(player, 100)
    assert player.health > 0
    assert "Player has died!" not in capsys.readouterr().out


def test_complete_quest_marks_quest_done():
    player = make_player()
    quest = make_quest()
    complete_quest(player, quest)
    assert quest.completed is True


def test_quest_rewards_are_cumulative():
    player = make_player()
    complete_quest(player, make_quest())
    first = player.experience
    complete_quest(player, make_quest())
    assert first > 0
    assert player.experience == 2 * first
    assert player.level == 1


def test_quest_triggers_level_up_at_threshold():
    player = make_player(experience=900, health=20)
    expected = copy.deepcopy(player)
    expected.level_up()
    complete_quest(player, make_quest())
    assert player == expected
    assert player.health == player.max_health