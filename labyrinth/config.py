"""Configuration settings for Labyrinth."""

import copy
import json
from typing import Optional

from .errors import ConfigurationError
from .grid import SegmentIndex, StreetGrid
from .models import CardinalCorner, Quadrant

CONFIG = {
    "vertical_streets": ["15th", "16th", "17th", "18th"],  # west to east
    "horizontal_streets": ["Denny", "Howell", "Olive"],    # north to south
    "start_corner": ["17th", "Howell", "southeast"],       # vertical, horizontal, quadrant
    "segment_tolerance": 5,  # loops may be this many segments shorter/longer than the grid total
    # Blocked block sides: [[vertical, horizontal, quadrant], [vertical, horizontal, quadrant]]
    "exclusions": [],
    "expected_exclusion_count": None,  # when set, must match the number of exclusions
    "beam_width": 2000,  # paths kept per generation; None searches exhaustively
    "shuffle_segments": False,  # randomize segment order at each corner
    "random_seed": None,
    "output_dir": "output",
    "progress_interval": 1,  # generations between progress lines
}


def load_config(path: Optional[str] = None, overrides: Optional[dict] = None) -> dict:
    """Defaults, overlaid with a JSON grid file, overlaid with non-None overrides"""
    config = copy.deepcopy(CONFIG)
    if path:
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not read grid file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Grid file {path} must hold a JSON object")
        unknown = set(data) - set(CONFIG)
        if unknown:
            raise ConfigurationError(f"Unknown config keys in {path}: {sorted(unknown)}")
        config.update(data)
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value
    return config


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: dict) -> dict:
    """Check the scalar settings of a loaded config, raising ConfigurationError"""
    for key in ("vertical_streets", "horizontal_streets"):
        streets = config[key]
        if not isinstance(streets, list) or not all(isinstance(s, str) for s in streets):
            raise ConfigurationError(f"{key} must be a list of street names, got {streets!r}")
    if not isinstance(config["exclusions"], list):
        raise ConfigurationError(f"exclusions must be a list, got {config['exclusions']!r}")

    tolerance = config["segment_tolerance"]
    if not _is_int(tolerance) or tolerance < 0:
        raise ConfigurationError(f"segment_tolerance must be a non-negative integer, got {tolerance!r}")
    expected = config["expected_exclusion_count"]
    if expected is not None and (not _is_int(expected) or expected < 0):
        raise ConfigurationError(f"expected_exclusion_count must be a non-negative integer, got {expected!r}")
    beam_width = config["beam_width"]
    if beam_width is not None and (not _is_int(beam_width) or beam_width < 1):
        raise ConfigurationError(f"beam_width must be at least 1 or null, got {beam_width!r}")
    interval = config["progress_interval"]
    if not _is_int(interval) or interval < 1:
        raise ConfigurationError(f"progress_interval must be at least 1, got {interval!r}")
    if not isinstance(config["shuffle_segments"], bool):
        raise ConfigurationError(f"shuffle_segments must be true or false, got {config['shuffle_segments']!r}")
    seed = config["random_seed"]
    if seed is not None and (not _is_int(seed) or seed < 0):
        raise ConfigurationError(f"random_seed must be a non-negative integer, got {seed!r}")
    if not isinstance(config["output_dir"], str) or not config["output_dir"]:
        raise ConfigurationError(f"output_dir must be a directory path, got {config['output_dir']!r}")
    return config


def parse_cardinal_corner(grid: StreetGrid, entry) -> CardinalCorner:
    """[vertical, horizontal, quadrant] -> CardinalCorner"""
    if not isinstance(entry, (list, tuple)) or len(entry) != 3:
        raise ConfigurationError(f"Expected [vertical, horizontal, quadrant], got {entry!r}")
    vertical, horizontal, quadrant = entry
    return CardinalCorner(Quadrant.parse(quadrant), grid.corner(vertical, horizontal))


def build_exclusions(grid: StreetGrid, entries: list,
                     expected_count: Optional[int] = None) -> frozenset:
    """Turn configured corner pairs into directionless segment identities.

    Every pair must name one side of one block, and when an expected count
    is given the number of distinct exclusions must match it exactly.
    """
    unrestricted = SegmentIndex(grid)
    exclusions = set()
    for entry in entries:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ConfigurationError(f"Exclusion must be a pair of corners, got {entry!r}")
        a, b = (parse_cardinal_corner(grid, e) for e in entry)
        if unrestricted.find_segment(a, b) is None:
            raise ConfigurationError(f"Exclusion {a} / {b} isn't a side of a block")
        exclusions.add(frozenset((a, b)))

    if len(exclusions) != len(entries):
        raise ConfigurationError(
            f"Exclusion list has {len(entries)} entries but only {len(exclusions)} distinct segments")
    if expected_count is not None and len(exclusions) != expected_count:
        raise ConfigurationError(
            f"Expected {expected_count} exclusions, found {len(exclusions)}")
    return frozenset(exclusions)


def length_bounds(total_segments: int, tolerance: int) -> tuple[int, int]:
    """(min, max) loop length around a target segment count"""
    if tolerance < 0:
        raise ConfigurationError(f"Segment tolerance can't be negative, got {tolerance}")
    return max(1, total_segments - tolerance), total_segments + tolerance
