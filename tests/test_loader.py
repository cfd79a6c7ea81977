import tomllib

import pytest
import tomli_w

from rpg_framework.loader import load_artifacts_from_dir, load_regions_from_dir
from rpg_framework.records import Artifact
from rpg_framework.world import DungeonRegion, EnvironmentType, Portal


def write(path, data):
    path.write_text(tomli_w.dumps(data), encoding="utf-8")


def make_region(region_id, target):
    return DungeonRegion(
        id=region_id,
        name=f"Region {region_id}",
        description="A test region.",
        environment=EnvironmentType.TECHNOLOGY,
        portals=[Portal(id="p1", name="Gate", leads_to=target, required_level=3)],
    )


def test_load_artifacts_round_trip(tmp_path):
    artifacts = [
        Artifact(id="a1", name="Orb", description="Glows.", power=5, rarity="Rare"),
        Artifact(id="a2", name="Blade", description="Sharp.", power=9, rarity="Common"),
    ]
    for artifact in artifacts:
        write(tmp_path / f"{artifact.id}.toml", artifact.to_dict())
    loaded = load_artifacts_from_dir(tmp_path)
    assert sorted(loaded, key=lambda a: a.id) == artifacts


def test_load_regions_round_trip(tmp_path):
    regions = [make_region("forest", "cave"), make_region("cave", "forest")]
    for region in regions:
        write(tmp_path / f"{region.id}.toml", region.to_dict())
    loaded = load_regions_from_dir(tmp_path)
    assert sorted(loaded, key=lambda r: r.id) == sorted(regions, key=lambda r: r.id)


def test_non_toml_entries_are_ignored(tmp_path):
    region = make_region("forest", "cave")
    write(tmp_path / "forest.toml", region.to_dict())
    (tmp_path / "notes.txt").write_text("not a region", encoding="utf-8")
    (tmp_path / "nested.toml").mkdir()
    assert load_regions_from_dir(tmp_path) == [region]


def test_empty_directory_yields_nothing(tmp_path):
    assert load_artifacts_from_dir(tmp_path) == []


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_regions_from_dir(tmp_path / "missing")


def test_invalid_toml_raises(tmp_path):
    (tmp_path / "bad.toml").write_text("name = ", encoding="utf-8")
    with pytest.raises(tomllib.TOMLDecodeError):
        load_artifacts_from_dir(tmp_path)


def test_incomplete_artifact_raises(tmp_path):
    write(tmp_path / "orb.toml", {"id": "a1", "name": "Orb"})
    with pytest.raises(ValueError):
        load_artifacts_from_dir(tmp_path)


def test_unknown_environment_raises(tmp_path):
    data = make_region("forest", "cave").to_dict()
    data["environment"] = "Underwater"
    write(tmp_path / "forest.toml", data)
    with pytest.raises(ValueError):
        load_regions_from_dir(tmp_path)