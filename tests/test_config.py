import json

import pytest

from labyrinth.config import (
    CONFIG, build_exclusions, length_bounds, load_config, parse_cardinal_corner, validate_config,
)
from labyrinth.errors import ConfigurationError
from labyrinth.models import Quadrant


def test_load_config_defaults_are_a_copy():
    config = load_config()
    assert config == CONFIG
    config["exclusions"].append("x")
    assert CONFIG["exclusions"] == []


def test_load_config_overlays_file_and_overrides(tmp_path):
    path = tmp_path / "grid.json"
    path.write_text(json.dumps({"vertical_streets": ["A", "B"], "segment_tolerance": 2}))
    config = load_config(str(path), {"segment_tolerance": 3, "beam_width": None})
    assert config["vertical_streets"] == ["A", "B"]
    assert config["segment_tolerance"] == 3
    assert config["beam_width"] == CONFIG["beam_width"]


def test_load_config_rejects_bad_files(tmp_path):
    unknown = tmp_path / "unknown.json"
    unknown.write_text(json.dumps({"streets": []}))
    with pytest.raises(ConfigurationError):
        load_config(str(unknown))

    broken = tmp_path / "broken.json"
    broken.write_text("{")
    with pytest.raises(ConfigurationError):
        load_config(str(broken))

    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "missing.json"))


def test_parse_cardinal_corner(square):
    corner = parse_cardinal_corner(square, ["B", "Q", "southwest"])
    assert corner.quadrant is Quadrant.SOUTHWEST
    assert corner.corner == square.corner("B", "Q")
    with pytest.raises(ConfigurationError):
        parse_cardinal_corner(square, ["Z", "Q", "southwest"])
    with pytest.raises(ConfigurationError):
        parse_cardinal_corner(square, ["B", "Q"])


NORTH_SIDE_OF_P = [["A", "P", "northeast"], ["B", "P", "northwest"]]


def test_build_exclusions(square):
    exclusions = build_exclusions(square, [NORTH_SIDE_OF_P], expected_count=1)
    assert len(exclusions) == 1
    a = parse_cardinal_corner(square, NORTH_SIDE_OF_P[0])
    b = parse_cardinal_corner(square, NORTH_SIDE_OF_P[1])
    assert frozenset((a, b)) in exclusions


def test_exclusion_count_mismatch_is_fatal(square):
    with pytest.raises(ConfigurationError):
        build_exclusions(square, [NORTH_SIDE_OF_P], expected_count=2)
    # The same block side listed twice doesn't exclude twice
    with pytest.raises(ConfigurationError):
        build_exclusions(square, [NORTH_SIDE_OF_P, list(reversed(NORTH_SIDE_OF_P))])


def test_exclusion_must_be_a_block_side(square):
    with pytest.raises(ConfigurationError):
        build_exclusions(square, [[["A", "P", "northeast"], ["B", "Q", "northwest"]]])
    with pytest.raises(ConfigurationError):
        build_exclusions(square, [[["A", "P", "northeast"]]])


def test_length_bounds():
    assert length_bounds(34, 5) == (29, 39)
    assert length_bounds(3, 5) == (1, 8)
    with pytest.raises(ConfigurationError):
        length_bounds(10, -1)


@pytest.mark.parametrize("key, value", [
    ("beam_width", -3),
    ("beam_width", 0),
    ("beam_width", "wide"),
    ("segment_tolerance", -1),
    ("progress_interval", 0),
    ("shuffle_segments", "yes"),
    ("random_seed", 1.5),
    ("expected_exclusion_count", -2),
    ("vertical_streets", "A,B"),
    ("exclusions", {}),
])
def test_validate_config_rejects_bad_values(key, value):
    config = load_config()
    config[key] = value
    with pytest.raises(ConfigurationError):
        validate_config(config)


def test_validate_config_accepts_defaults_and_exhaustive_search():
    assert validate_config(load_config()) == CONFIG
    assert validate_config(load_config(overrides={"beam_width": 1}))["beam_width"] == 1
    config = load_config()
    config["beam_width"] = None
    assert validate_config(config)["beam_width"] is None
