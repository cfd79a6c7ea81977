# rpg-framework

A small framework for building role-playing games: a world of regions joined
by portals, players with items and quests, a SQLite game database and a Flask
web application on top of it.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is in the package

| Module | Contents |
| --- | --- |
| `rpg_framework.world` | `EnvironmentType`, `Portal`, `DungeonRegion`, `Environment`, `Region`, `RegionLink` |
| `rpg_framework.records` | `Artifact`, `ArtifactRecord`, `Character`, `CharacterClass` |
| `rpg_framework.player` | `Player`, `Item`, `describe_item`, `InventoryEntry`, `Quest` |
| `rpg_framework.game_logic` | `handle_combat`, `complete_quest` |
| `rpg_framework.inventory` | `add_item_to_inventory`, `remove_item_from_inventory` |
| `rpg_framework.map_graph` | `MapGraph` |
| `rpg_framework.worldgen` | `random_env`, `generate_region`, `save_region`, `GenerationConfig`, `generate_world` |
| `rpg_framework.loader` | `load_regions_from_dir`, `load_artifacts_from_dir` |
| `rpg_framework.database` | `load_env`, `get_database_url`, `init_db`, `check_db_health`, `seed_data`, `seed_items`, `seed_skills`, `run_seeds` |
| `rpg_framework.app` | `create_app`, `main` |

### World

`DungeonRegion` and `Portal` convert to and from plain dictionaries with
`to_dict()` and `from_dict()`. `from_dict()` raises `ValueError` for a missing
field, a field of the wrong type, an unknown environment or a
`required_level` outside 0 to 2³²−1. `Artifact` in `rpg_framework.records`
works the same way for its `power` field.

`MapGraph(regions)` indexes regions by id. `get_region(id)` and
`get_portals(id)` return `None` for an unknown id, and `validate_links()`
returns one message for every portal that leads to a region not in the graph.

### World generation and loading

```python
from rpg_framework.map_graph import MapGraph
from rpg_framework.worldgen import GenerationConfig, generate_world, save_region

regions = generate_world(GenerationConfig(seed=42, region_count=5))
graph = MapGraph(regions)

for problem in graph.validate_links():
    print(problem)

for region in regions:
    save_region(region, "regions")   # writes regions/<id>.toml, returns the path
```

`generate_world` builds a chain `proc_region_0`, `proc_region_1`, … in which
each region has one portal to the next; the last one leads to `nexus`, so
unless you add a region with that id `validate_links` reports it as broken.
The same seed always gives the same world.

`generate_region(existing_ids, rng=None)` creates a region named
`Mystery Zone N` with portals to up to two of the given ids. Pass a
`random.Random` to make it repeatable.

`load_regions_from_dir(path)` and `load_artifacts_from_dir(path)` read every
`.toml` file in a directory, in file-name order, and ignore other files.

### Players, items and quests

```python
from rpg_framework.game_logic import complete_quest, handle_combat
from rpg_framework.player import Player, Quest

player = Player(id=1, username="hero", level=1, health=100, max_health=100, experience=0)
quest = Quest(id=1, title="Rats", description="Clear the cellar.")

remaining = handle_combat(player, monster_health=50)  # 40; the player drops to 90 health
complete_quest(player, quest)                          # quest.completed is True, +100 experience
```

- `Player.take_damage` never goes below 0 health and `Player.heal` never above
  `max_health`. `level_up` raises the level by one, adds 10 to `max_health`,
  restores full health and resets experience.
- `complete_quest` levels the player up once experience reaches 1000.
- `Item.use_item(player)` wears down an item with durability (a broken item,
  durability 0 or less, does nothing), and potions heal the player by their
  value — magical potions heal a further twice their value. `describe_item`
  prints an item's properties.
- `add_item_to_inventory(entries, player_id, item, quantity)` stacks onto an
  existing `InventoryEntry` for the item or appends a new one carrying the
  item's durability. `remove_item_from_inventory(entries, item, quantity)`
  lowers the quantity, never below zero, and drops entries that reach zero.
  Both change the list in place and return it.

### Database

`init_db(database_url=None)` opens a SQLite database and creates the tables
for players, items, inventory, quests, skills and character classes if they
are missing. Without an argument it loads a `.env` file and reads
`DATABASE_URL`; `get_database_url()` raises `RuntimeError` when that is not
set. The URL may be a plain file path or a `sqlite:///path` URL; other schemes
raise `ValueError`.

`seed_items` and `seed_skills` (or `run_seeds` for both) insert ten sample
items and ten sample skills; `seed_data` adds the `Adventurer` character class
once.

## Running the server

```
DATABASE_URL=game.db rpg-framework
```

`DATABASE_URL` may also be placed in a `.env` file in the working directory.
Options:

- `--host` (default `0.0.0.0`) and `--port` (default `8080`)
- `--database-url` instead of `DATABASE_URL`
- `--seed` to insert the sample items on start

`create_app(connection)` builds the same application around an open
connection, for use in your own server or in tests. Routes, all `GET`:

| Route | Result |
| --- | --- |
| `/health` | 200, or 503 when the database does not answer |
| `/player/<id>` | `{"id", "username", "email"}`, or 404 |
| `/players?username=<pattern>` | players whose name matches the SQL `LIKE` pattern |
| `/combat/<player_id>/<monster_health>` | runs one combat round, saves the player, returns the monster's remaining health |
| `/quest/<player_id>/<quest_id>` | completes the quest for the player and returns the quest |
| `/inventory/add/<player_id>?item_id=&quantity=` | adds items; 400 without both parameters, 404 for an unknown item |
| `/inventory/remove/<player_id>?item_id=&quantity=` | removes items, with the same errors |

## What it does not do

- There is no login or other authentication; every route is open.
- No route creates players, quests or items, and a completed quest is not
  written back to the database. Add rows with your own SQL on the connection.
- Storage is SQLite only, and the schema is created directly by `init_db`;
  there are no versioned migrations.