"""Dungeon regions, portals and the environments they belong to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

_U32_MAX = 2**32 - 1


def _require(data: Mapping[str, Any], key: str, owner: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"{owner}: missing field '{key}'") from None


def _string(data: Mapping[str, Any], key: str, owner: str) -> str:
    value = _require(data, key, owner)
    if not isinstance(value, str):
        raise ValueError(f"{owner}: field '{key}' must be a string")
    return value


def _unsigned(data: Mapping[str, Any], key: str, owner: str) -> int:
    value = _require(data, key, owner)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{owner}: field '{key}' must be an integer")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{owner}: field '{key}' is out of range: {value}")
    return value


class EnvironmentType(Enum):
    """The kind of world a dungeon region belongs to."""

    FANTASY = "Fantasy"
    TECHNOLOGY = "Technology"
    REAL_LIFE = "RealLife"
    HYBRID = "Hybrid"


class Environment(Enum):
    """The kind of world a plain region belongs to."""

    FANTASY = "Fantasy"
    TECHNOLOGY = "Technology"
    REALISTIC = "Realistic"
    HYBRID = "Hybrid"


@dataclass
class Portal:
    """An exit from one dungeon region into another."""

    id: str
    name: str
    leads_to: str
    required_level: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "leads_to": self.leads_to,
            "required_level": self.required_level,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Portal:
        owner = "Portal"
        return cls(
            id=_string(data, "id", owner),
            name=_string(data, "name", owner),
            leads_to=_string(data, "leads_to", owner),
            required_level=_unsigned(data, "required_level", owner),
        )


@dataclass
class DungeonRegion:
    """A region of the world map together with its outgoing portals."""

    id: str
    name: str
    description: str
    environment: EnvironmentType
    portals: list[Portal] = field(default_factory=list)
    anchor_point: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "environment": self.environment.value,
            "portals": [portal.to_dict() for portal in self.portals],
        }
        if self.anchor_point is not None:
            data["anchor_point"] = self.anchor_point
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DungeonRegion:
        owner = "DungeonRegion"
        raw_env = _string(data, "environment", owner)
        try:
            environment = EnvironmentType(raw_env)
        except ValueError:
            raise ValueError(f"{owner}: unknown environment '{raw_env}'") from None

        raw_portals = _require(data, "portals", owner)
        if not isinstance(raw_portals, list):
            raise ValueError(f"{owner}: field 'portals' must be a list")
        portals = []
        for entry in raw_portals:
            if not isinstance(entry, Mapping):
                raise ValueError(f"{owner}: each portal must be a table")
            portals.append(Portal.from_dict(entry))

        anchor_point = data.get("anchor_point")
        if anchor_point is not None and not isinstance(anchor_point, str):
            raise ValueError(f"{owner}: field 'anchor_point' must be a string")

        return cls(
            id=_string(data, "id", owner),
            name=_string(data, "name", owner),
            description=_string(data, "description", owner),
            environment=environment,
            portals=portals,
            anchor_point=anchor_point,
        )


@dataclass
class Region:
    """A named region of the world."""

    id: str
    name: str
    environment: Environment
    description: str


@dataclass
class RegionLink:
    """A portal described by the regions it joins."""

    name: str
    from_region: str
    leads_to: str
    required_level: int