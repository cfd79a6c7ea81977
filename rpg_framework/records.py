"""Artifacts, characters and character classes."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Mapping

_U32_MAX = 2**32 - 1


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"Artifact: missing field '{key}'") from None


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise ValueError(f"Artifact: field '{key}' must be a string")
    return value


@dataclass
class Artifact:
    """An artifact as described in a world data file."""

    id: str
    name: str
    description: str
    power: int
    rarity: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "power": self.power,
            "rarity": self.rarity,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Artifact:
        power = _require(data, "power")
        if isinstance(power, bool) or not isinstance(power, int):
            raise ValueError("Artifact: field 'power' must be an integer")
        if not 0 <= power <= _U32_MAX:
            raise ValueError(f"Artifact: field 'power' is out of range: {power}")
        return cls(
            id=_string(data, "id"),
            name=_string(data, "name"),
            description=_string(data, "description"),
            power=power,
            rarity=_string(data, "rarity"),
        )


@dataclass
class ArtifactRecord:
    """A stored artifact identified by a UUID."""

    id: uuid.UUID
    name: str
    description: str
    power: int
    magic_affinity: int | None = None


@dataclass
class Character:
    """A playable character."""

    id: int
    name: str
    class_: str
    level: int
    experience: int


@dataclass
class CharacterClass:
    """A character class with its base stats and starting artifacts."""

    id: uuid.UUID
    name: str
    description: str
    base_health: int
    base_mana: int
    starting_artifacts: list[uuid.UUID] = field(default_factory=list)