"""The HTTP application exposing players, combat, quests and inventory."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from dataclasses import asdict
from typing import Callable

from flask import Flask, abort, jsonify, request

from rpg_framework.database import check_db_health, init_db, load_env, seed_items
from rpg_framework.game_logic import complete_quest, handle_combat
from rpg_framework.inventory import add_item_to_inventory, remove_item_from_inventory
from rpg_framework.player import InventoryEntry, Item, Player, Quest


def _fetch_player(connection: sqlite3.Connection, player_id: int) -> Player | None:
    row = connection.execute(
        "SELECT id, username, level, health, max_health, experience "
        "FROM players WHERE id = ?",
        (player_id,),
    ).fetchone()
    return Player(*row) if row else None


def _save_player(connection: sqlite3.Connection, player: Player) -> None:
    with connection:
        connection.execute(
            "UPDATE players SET username = ?, level = ?, health = ?, "
            "max_health = ?, experience = ? WHERE id = ?",
            (
                player.username,
                player.level,
                player.health,
                player.max_health,
                player.experience,
                player.id,
            ),
        )


def _fetch_quest(connection: sqlite3.Connection, quest_id: int) -> Quest | None:
    row = connection.execute(
        "SELECT id, title, description, completed FROM quests WHERE id = ?",
        (quest_id,),
    ).fetchone()
    if row is None:
        return None
    quest_id, title, description, completed = row
    return Quest(id=quest_id, title=title, description=description, completed=bool(completed))


def _fetch_item(connection: sqlite3.Connection, item_id: int) -> Item | None:
    row = connection.execute(
        "SELECT id, name, description, item_type, value, durability, is_magical, "
        "is_cursed FROM items WHERE id = ?",
        (item_id,),
    ).fetchone()
    if row is None:
        return None
    *fields, is_magical, is_cursed = row
    return Item(*fields, is_magical=bool(is_magical), is_cursed=bool(is_cursed))


def _fetch_inventory(connection: sqlite3.Connection, player_id: int) -> list[InventoryEntry]:
    rows = connection.execute(
        "SELECT player_id, item_id, quantity, durability FROM inventory "
        "WHERE player_id = ? ORDER BY item_id",
        (player_id,),
    ).fetchall()
    return [InventoryEntry(*row) for row in rows]


def _store_inventory(
    connection: sqlite3.Connection, player_id: int, entries: list[InventoryEntry]
) -> None:
    with connection:
        connection.execute("DELETE FROM inventory WHERE player_id = ?", (player_id,))
        connection.executemany(
            "INSERT INTO inventory (player_id, item_id, quantity, durability) "
            "VALUES (?, ?, ?, ?)",
            (
                (entry.player_id, entry.item_id, entry.quantity, entry.durability)
                for entry in entries
                if entry.quantity > 0
            ),
        )


def create_app(connection: sqlite3.Connection) -> Flask:
    """Build the application around an open database connection."""
    app = Flask(__name__)

    @app.get("/health")
    def health():
        return ("", 200) if check_db_health(connection) else ("", 503)

    @app.get("/player/<int:player_id>")
    def get_player(player_id: int):
        row = connection.execute(
            "SELECT id, username, email FROM players WHERE id = ?", (player_id,)
        ).fetchone()
        if row is None:
            abort(404)
        return jsonify(dict(zip(("id", "username", "email"), row)))

    @app.get("/players")
    def get_players():
        pattern = request.args.get("username", "")
        rows = connection.execute(
            "SELECT id, username, email FROM players WHERE username LIKE ? ORDER BY id",
            (pattern,),
        ).fetchall()
        return jsonify([dict(zip(("id", "username", "email"), row)) for row in rows])

    @app.get("/combat/<int:player_id>/<int:monster_health>")
    def start_combat(player_id: int, monster_health: int):
        player = _fetch_player(connection, player_id)
        if player is None:
            abort(404)
        remaining = handle_combat(player, monster_health)
        _save_player(connection, player)
        return jsonify(remaining)

    @app.get("/quest/<int:player_id>/<int:quest_id>")
    def complete_quest_route(player_id: int, quest_id: int):
        player = _fetch_player(connection, player_id)
        quest = _fetch_quest(connection, quest_id)
        if player is None or quest is None:
            abort(404)
        complete_quest(player, quest)
        _save_player(connection, player)
        return jsonify(asdict(quest))

    def change_inventory(
        player_id: int, apply: Callable[[list[InventoryEntry], Item, int], object]
    ):
        item_id = request.args.get("item_id", type=int)
        quantity = request.args.get("quantity", type=int)
        if item_id is None or quantity is None:
            abort(400)
        item = _fetch_item(connection, item_id)
        if item is None:
            abort(404)
        entries = _fetch_inventory(connection, player_id)
        apply(entries, item, quantity)
        _store_inventory(connection, player_id, entries)
        return "", 200

    @app.get("/inventory/add/<int:player_id>")
    def add_item(player_id: int):
        return change_inventory(
            player_id,
            lambda entries, item, quantity: add_item_to_inventory(
                entries, player_id, item, quantity
            ),
        )

    @app.get("/inventory/remove/<int:player_id>")
    def remove_item(player_id: int):
        return change_inventory(player_id, remove_item_from_inventory)

    return app


def main(argv: list[str] | None = None) -> int:
    """Open the database and serve the application."""
    parser = argparse.ArgumentParser(prog="rpg-framework", description="Serve the RPG backend.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--database-url", help="defaults to DATABASE_URL")
    parser.add_argument("--seed", action="store_true", help="insert the sample items on start")
    args = parser.parse_args(argv)

    load_env()
    connection = init_db(args.database_url)
    print("Migrations applied successfully")

    if args.seed:
        try:
            seed_items(connection)
        except sqlite3.Error as exc:
            print(f"⚠️ Failed to seed items: {exc}", file=sys.stderr)

    app = create_app(connection)
    print(f"🚀 Server running at http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port)
    return 0