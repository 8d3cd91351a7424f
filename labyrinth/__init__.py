"""Labyrinth - Novel walking loops around a street grid."""

from .config import CONFIG, load_config, validate_config, build_exclusions, length_bounds, parse_cardinal_corner
from .errors import LabyrinthError, ConfigurationError, TopologyError
from .models import Quadrant, Heading, Turn, Street, Corner, CardinalCorner, Segment
from .logger import Logger
from .grid import StreetGrid, SegmentIndex
from .directions import cross_text, count_crossings, get_instruction_lines, render
from .scoring import score_path, score_breakdown, unique_segment_count, count_uturns
from .planner import LoopPlanner, LoopResult, SearchContext
from .results import ResultWriter
from .history import ResultsDB
from .app import LoopFinder
from .__main__ import main

__all__ = [
    "CONFIG",
    "load_config",
    "validate_config",
    "build_exclusions",
    "length_bounds",
    "parse_cardinal_corner",
    "LabyrinthError",
    "ConfigurationError",
    "TopologyError",
    "Quadrant",
    "Heading",
    "Turn",
    "Street",
    "Corner",
    "CardinalCorner",
    "Segment",
    "Logger",
    "StreetGrid",
    "SegmentIndex",
    "cross_text",
    "count_crossings",
    "get_instruction_lines",
    "render",
    "score_path",
    "score_breakdown",
    "unique_segment_count",
    "count_uturns",
    "LoopPlanner",
    "LoopResult",
    "SearchContext",
    "ResultWriter",
    "ResultsDB",
    "LoopFinder",
    "main",
]
