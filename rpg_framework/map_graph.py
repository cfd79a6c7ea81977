"""A graph of dungeon regions joined by portals."""

from __future__ import annotations

from typing import Iterable

from rpg_framework.world import DungeonRegion, Portal


class MapGraph:
    """Regions keyed by id, with the portals leading out of each."""

    def __init__(self, regions: Iterable[DungeonRegion]) -> None:
        self.regions: dict[str, DungeonRegion] = {}
        self.connections: dict[str, list[Portal]] = {}
        for region in regions:
            self.connections[region.id] = list(region.portals)
            self.regions[region.id] = region

    def __repr__(self) -> str:
        return f"MapGraph(regions={list(self.regions)!r})"

    def get_portals(self, from_region: str) -> list[Portal] | None:
        """Return the portals leading out of a region, or None if unknown."""
        return self.connections.get(from_region)

    def get_region(self, region_id: str) -> DungeonRegion | None:
        """Return the region with the given id, or None if unknown."""
        return self.regions.get(region_id)

    def validate_links(self) -> list[str]:
        """Describe every portal that leads to a region not in the graph."""
        return [
            f"🔗 Broken portal from '{from_id}' to unknown region '{portal.leads_to}'"
            for from_id, portals in self.connections.items()
            for portal in portals
            if portal.leads_to not in self.regions
        ]