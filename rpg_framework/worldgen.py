"""Random generation of dungeon regions and whole worlds."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import tomli_w

from rpg_framework.world import DungeonRegion, EnvironmentType, Portal

ENV_TYPES = (
    EnvironmentType.FANTASY,
    EnvironmentType.TECHNOLOGY,
    EnvironmentType.REAL_LIFE,
    EnvironmentType.HYBRID,
)

_WORLD_ENVS = (
    EnvironmentType.FANTASY,
    EnvironmentType.TECHNOLOGY,
    EnvironmentType.HYBRID,
)


def random_env(rng: random.Random | None = None) -> EnvironmentType:
    """Pick an environment type at random."""
    return (rng or random.Random()).choice(ENV_TYPES)


def generate_region(
    existing_region_ids: Sequence[str], rng: random.Random | None = None
) -> DungeonRegion:
    """Create a random region with portals to up to two existing regions."""
    rng = rng or random.Random()
    region_id = f"region_{rng.randrange(1000, 9999)}"
    name = f"Mystery Zone {rng.randrange(1, 100)}"
    environment = random_env(rng)

    targets = rng.sample(list(existing_region_ids), min(2, len(existing_region_ids)))
    portals = [
        Portal(
            id=f"portal_to_{target}",
            name=f"Portal to {target}",
            leads_to=target,
            required_level=rng.randrange(1, 10),
        )
        for target in targets
    ]

    return DungeonRegion(
        id=region_id,
        name=name,
        description="A procedurally generated zone of strangeness and wonder.",
        environment=environment,
        portals=portals,
        anchor_point=None,
    )


def save_region(region: DungeonRegion, directory: str | Path) -> Path:
    """Write the region as <id>.toml in the directory and return the path."""
    path = Path(directory) / f"{region.id}.toml"
    path.write_text(tomli_w.dumps(region.to_dict()), encoding="utf-8")
    return path


@dataclass
class GenerationConfig:
    """Settings for generating a world; a seed makes the result repeatable."""

    seed: int | None = None
    region_count: int = 0


def generate_world(config: GenerationConfig) -> list[DungeonRegion]:
    """Generate a chain of regions, the last one leading back to the nexus."""
    rng = random.Random(config.seed)
    regions = []
    for index in range(config.region_count):
        region_id = f"proc_region_{index}"
        environment = _WORLD_ENVS[rng.randrange(3)]
        leads_to = (
            f"proc_region_{index + 1}" if index + 1 < config.region_count else "nexus"
        )
        portal = Portal(
            id=f"portal_{index}_to_next",
            name=f"Portal from {region_id} to {region_id}",
            leads_to=leads_to,
            required_level=rng.randrange(1, 10),
        )
        regions.append(
            DungeonRegion(
                id=region_id,
                name=f"Procedural Region {index}",
                description="A dynamically generated region.",
                environment=environment,
                portals=[portal],
                anchor_point=None,
            )
        )
    return regions