"""Role-playing game framework: world regions and portals, players, items, quests, world generation, SQLite storage and a Flask web API."""

__version__ = "0.1.0"