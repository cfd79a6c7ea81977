import sqlite3
from unittest.mock import patch

import pytest

from rpg_framework.app import create_app, main
from rpg_framework.database import init_db, seed_items


@pytest.fixture
def connection():
    conn = init_db(":memory:")
    with conn:
        conn.executemany(
            "INSERT INTO players (id, username, email, level, health, max_health, experience) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)",
            [
                (1, "aria", "aria@example.com", 1, 100, 100, 0),
                (2, "bram", "bram@example.com", 3, 5, 120, 950),
            ],
        )
        conn.execute(
            "INSERT INTO quests (id, title, description, completed) VALUES (?, ?, ?, ?)",
            (1, "Find the relic", "Search the ruins.", 0),
        )
    seed_items(conn)
    yield conn
    conn.close()


@pytest.fixture
def client(connection):
    return create_app(connection).test_client()


def _player_row(connection, player_id):
    return connection.execute(
        "SELECT level, health, max_health, experience FROM players WHERE id = ?",
        (player_id,),
    ).fetchone()


def _inventory(connection, player_id):
    return connection.execute(
        "SELECT item_id, quantity FROM inventory WHERE player_id = ? ORDER BY item_id",
        (player_id,),
    ).fetchall()


def test_health_ok(client):
    assert client.get("/health").status_code == 200


def test_health_unavailable_when_closed():
    conn = init_db(":memory:")
    app_client = create_app(conn).test_client()
    conn.close()
    assert app_client.get("/health").status_code == 503


def test_get_player(client):
    response = client.get("/player/1")
    assert response.status_code == 200
    assert response.get_json() == {"id": 1, "username": "aria", "email": "aria@example.com"}


def test_get_player_missing(client):
    assert client.get("/player/99").status_code == 404


def test_get_players_with_pattern(client):
    response = client.get("/players", query_string={"username": "br%"})
    assert [player["username"] for player in response.get_json()] == ["bram"]


def test_get_players_without_filter_matches_empty_only(client):
    assert client.get("/players").get_json() == []


def test_combat_reduces_both_sides(client, connection):
    response = client.get("/combat/1/50")
    assert response.get_json() == 40
    assert _player_row(connection, 1)[1] == 90


def test_combat_health_never_negative(client, connection):
    client.get("/combat/2/30")
    assert _player_row(connection, 2)[1] == 0


def test_combat_unknown_player(client):
    assert client.get("/combat/42/50").status_code == 404


def test_complete_quest(client, connection):
    response = client.get("/quest/1/1")
    body = response.get_json()
    assert body["completed"] is True
    assert body["title"] == "Find the relic"
    assert _player_row(connection, 1)[3] == 100


def test_complete_quest_levels_up(client, connection):
    client.get("/quest/2/1")
    level, health, max_health, experience = _player_row(connection, 2)
    assert level == 4
    assert max_health == 130
    assert health == max_health
    assert experience == 0


def test_complete_quest_unknown(client):
    assert client.get("/quest/1/77").status_code == 404


def test_inventory_add_stacks(client, connection):
    first = client.get("/inventory/add/1", query_string={"item_id": 1, "quantity": 3})
    assert first.status_code == 200
    client.get("/inventory/add/1", query_string={"item_id": 1, "quantity": 2})
    assert _inventory(connection, 1) == [(1, 5)]


def test_inventory_remove_partial_and_all(client, connection):
    client.get("/inventory/add/1", query_string={"item_id": 2, "quantity": 4})
    client.get("/inventory/remove/1", query_string={"item_id": 2, "quantity": 1})
    assert _inventory(connection, 1) == [(2, 3)]
    client.get("/inventory/remove/1", query_string={"item_id": 2, "quantity": 10})
    assert _inventory(connection, 1) == []


def test_inventory_requires_quantity(client):
    response = client.get("/inventory/add/1", query_string={"item_id": 1})
    assert response.status_code == 400


def test_inventory_unknown_item(client):
    response = client.get("/inventory/add/1", query_string={"item_id": 999, "quantity": 1})
    assert response.status_code == 404


def test_main_seeds_and_serves(tmp_path):
    path = tmp_path / "served.db"
    with patch("flask.Flask.run") as run:
        result = main(
            ["--database-url", f"sqlite:///{path}", "--host", "127.0.0.1", "--port", "9000", "--seed"]
        )
    assert result == 0
    run.assert_called_once_with(host="127.0.0.1", port=9000)
    conn = sqlite3.connect(path)
    try:
        assert conn.execute("SELECT COUNT(*) FROM items").fetchone()[0] == 10
    finally:
        conn.close()