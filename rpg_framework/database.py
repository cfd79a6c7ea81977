"""Database configuration, schema set-up and seed data."""

from __future__ import annotations

import os
import sqlite3
from dataclasses import astuple, dataclass

from dotenv import find_dotenv, load_dotenv

_SCHEMA = """
CREATE TABLE IF NOT EXISTS players (
    id INTEGER PRIMARY KEY,
    username TEXT NOT NULL,
    email TEXT NOT NULL,
    level INTEGER NOT NULL DEFAULT 1,
    health INTEGER NOT NULL DEFAULT 100,
    max_health INTEGER NOT NULL DEFAULT 100,
    experience INTEGER NOT NULL DEFAULT 0
);
CREATE TABLE IF NOT EXISTS items (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL,
    durability INTEGER,
    is_magical INTEGER NOT NULL DEFAULT 0,
    is_cursed INTEGER NOT NULL DEFAULT 0,
    item_type TEXT NOT NULL,
    power INTEGER NOT NULL DEFAULT 0,
    value INTEGER NOT NULL DEFAULT 0
);
CREATE TABLE IF NOT EXISTS inventory (
    player_id INTEGER NOT NULL,
    item_id INTEGER NOT NULL,
    quantity INTEGER NOT NULL,
    durability INTEGER,
    PRIMARY KEY (player_id, item_id)
);
CREATE TABLE IF NOT EXISTS quests (
    id INTEGER PRIMARY KEY,
    title TEXT NOT NULL,
    description TEXT NOT NULL,
    completed INTEGER NOT NULL DEFAULT 0
);
CREATE TABLE IF NOT EXISTS skills (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL,
    skill_type TEXT NOT NULL,
    power INTEGER NOT NULL,
    cooldown INTEGER NOT NULL,
    mana_cost INTEGER NOT NULL,
    target_type TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS character_classes (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL UNIQUE,
    description TEXT NOT NULL
);
"""


@dataclass(frozen=True)
class _SeedItem:
    name: str
    description: str
    durability: int | None
    is_magical: bool
    is_cursed: bool
    item_type: str
    power: int
    value: int


SEED_ITEMS = (
    _SeedItem("Iron Sword", "A basic iron sword.", 100, False, False, "Weapon", 10, 50),
    _SeedItem("Healing Potion", "Restores a small amount of health.", None, False, False, "Consumable", 0, 20),
    _SeedItem("Staff of Fire", "A magical staff that casts fire.", 80, True, False, "Weapon", 25, 150),
    _SeedItem("Cursed Ring", "A ring that binds the soul.", None, True, True, "Accessory", 5, 5),
    _SeedItem("Leather Armor", "Basic leather protection.", 150, False, False, "Armor", 0, 75),
    _SeedItem("Pegasus Saddle", "Used to mount a pegasus.", 60, False, False, "MountAccessory", 0, 100),
    _SeedItem("Battlemech Chip", "Activates a battlemech.", None, False, False, "TechKey", 0, 250),
    _SeedItem("Elven Cloak", "A magical cloak that boosts agility.", 120, True, False, "Armor", 2, 90),
    _SeedItem("Necromancer Skull", "Used to summon undead minions.", None, True, True, "MagicItem", 30, 300),
    _SeedItem("Explorer's Compass", "Helps navigate hybrid worlds.", None, False, False, "Tool", 0, 40),
)

SEED_SKILLS = (
    ("Fireball", "Hurls a fiery ball that explodes on impact.", "Magic", 50, 3, 20, "Enemy"),
    ("Heal", "Restores a small amount of HP.", "Support", 30, 2, 10, "Ally"),
    ("Shadow Strike", "A quick strike from the shadows.", "Physical", 40, 1, 5, "Enemy"),
    ("Ice Lance", "Launches a sharp icicle that pierces armor.", "Magic", 45, 3, 18, "Enemy"),
    ("Battle Cry", "Increases allies' attack power for 3 turns.", "Buff", 0, 5, 15, "Ally"),
    ("Thunderclap", "Calls lightning to strike enemies in range.", "Magic", 60, 4, 25, "Enemy"),
    ("Smokescreen", "Reduces enemy accuracy.", "Debuff", 0, 3, 10, "Enemy"),
    ("Regeneration", "Gradually restores HP over time.", "Support", 0, 6, 20, "Self"),
    ("Power Slash", "A heavy physical attack with bonus damage.", "Physical", 55, 2, 10, "Enemy"),
    ("Charm", "Attempts to seduce the enemy into skipping a turn.", "Debuff", 0, 4, 15, "Enemy"),
)


def load_env() -> None:
    """Load variables from a .env file in the working directory or above."""
    load_dotenv(find_dotenv(usecwd=True))


def get_database_url() -> str:
    """Return DATABASE_URL from the environment."""
    try:
        return os.environ["DATABASE_URL"]
    except KeyError:
        raise RuntimeError("DATABASE_URL must be set") from None


def _database_path(database_url: str) -> str:
    for prefix in ("sqlite:///", "sqlite://"):
        if database_url.startswith(prefix):
            return database_url[len(prefix):] or ":memory:"
    if "://" in database_url:
        raise ValueError(f"unsupported database URL: {database_url}")
    return database_url


def init_db(database_url: str | None = None) -> sqlite3.Connection:
    """Open the database and create any tables that are missing."""
    if database_url is None:
        load_env()
        database_url = get_database_url()
    connection = sqlite3.connect(_database_path(database_url), check_same_thread=False)
    connection.executescript(_SCHEMA)
    connection.commit()
    print("✅ Database connected and migrations applied")
    return connection


def check_db_health(connection: sqlite3.Connection) -> bool:
    """Return whether a trivial query succeeds."""
    try:
        connection.execute("SELECT 1").fetchone()
    except sqlite3.Error:
        return False
    return True


def seed_data(connection: sqlite3.Connection) -> None:
    """Insert the default character class if it is not there yet."""
    with connection:
        connection.execute(
            "INSERT INTO character_classes (name, description) VALUES (?, ?) "
            "ON CONFLICT (name) DO NOTHING",
            ("Adventurer", "A brave soul starting their journey."),
        )
    print("🌱 Seed data inserted")


def seed_items(connection: sqlite3.Connection) -> None:
    """Insert the sample items."""
    with connection:
        connection.executemany(
            "INSERT INTO items (name, description, durability, is_magical, is_cursed, "
            "item_type, power, value) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            (astuple(item) for item in SEED_ITEMS),
        )
    print("✅ Seeded sample items.")


def seed_skills(connection: sqlite3.Connection) -> None:
    """Insert the sample skills."""
    with connection:
        connection.executemany(
            "INSERT INTO skills (name, description, skill_type, power, cooldown, "
            "mana_cost, target_type) VALUES (?, ?, ?, ?, ?, ?, ?)",
            SEED_SKILLS,
        )
    print("✅ Skills seeded successfully.")


def run_seeds(connection: sqlite3.Connection) -> None:
    """Seed items and skills."""
    seed_items(connection)
    seed_skills(connection)