"""Loading artifacts and dungeon regions from directories of TOML files."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Callable, Iterator, TypeVar

from rpg_framework.records import Artifact
from rpg_framework.world import DungeonRegion

T = TypeVar("T")


def _toml_files(dir_path: str | Path) -> Iterator[Path]:
    for path in sorted(Path(dir_path).iterdir()):
        if path.is_file() and path.suffix == ".toml":
            yield path


def _load_all(dir_path: str | Path, build: Callable[[dict], T]) -> list[T]:
    return [
        build(tomllib.loads(path.read_text(encoding="utf-8")))
        for path in _toml_files(dir_path)
    ]


def load_artifacts_from_dir(dir_path: str | Path) -> list[Artifact]:
    """Read every .toml file in the directory as an artifact."""
    return _load_all(dir_path, Artifact.from_dict)


def load_regions_from_dir(dir_path: str | Path) -> list[DungeonRegion]:
    """Read every .toml file in the directory as a dungeon region."""
    return _load_all(dir_path, DungeonRegion.from_dict)