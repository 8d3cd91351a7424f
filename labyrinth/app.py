"""Main Labyrinth application."""

from typing import Optional

from .config import CONFIG, build_exclusions, length_bounds, parse_cardinal_corner, validate_config
from .grid import SegmentIndex, StreetGrid
from .history import ResultsDB
from .logger import Logger
from .planner import LoopPlanner, SearchContext
from .results import ResultWriter


class LoopFinder:
    """Main application: grid setup, search, output"""

    def __init__(self, config: Optional[dict] = None, log_path: Optional[str] = None,
                 db_path: Optional[str] = None, write_results: bool = True,
                 logger: Optional[Logger] = None):
        # Fatal configuration checks happen here, before any sink or search exists
        self.config = validate_config(config if config is not None else dict(CONFIG))
        self.logger = logger or Logger(log_path)
        self.write_results = write_results
        self.db_path = db_path

        self.grid = StreetGrid(self.config["vertical_streets"], self.config["horizontal_streets"])
        self.start = parse_cardinal_corner(self.grid, self.config["start_corner"])
        self.exclusions = build_exclusions(
            self.grid, self.config["exclusions"], self.config["expected_exclusion_count"])
        self.index = SegmentIndex(
            self.grid, self.exclusions,
            shuffle=self.config["shuffle_segments"],
            seed=self.config["random_seed"],
        )
        self.total_segments = self.index.reachable_segment_count(self.start.corner)
        self.min_length, self.max_length = length_bounds(
            self.total_segments, self.config["segment_tolerance"])

        self.logger.log("Grid built", {
            "vertical_streets": [s.name for s in self.grid.vertical],
            "horizontal_streets": [s.name for s in self.grid.horizontal],
            "grid_segments": self.grid.total_segments,
            "excluded_segments": len(self.exclusions),
            "reachable_segments": self.total_segments,
        })

    def run(self) -> SearchContext:
        sinks = []
        db = None
        if self.write_results:
            sinks.append(ResultWriter(self.config["output_dir"], logger=self.logger))
        if self.db_path:
            db = ResultsDB(self.db_path)
            db.start_run(str(self.start), self.min_length, self.max_length,
                         self.config["beam_width"])
            sinks.append(db)

        planner = LoopPlanner(self.index, logger=self.logger, sinks=sinks,
                              progress_interval=self.config["progress_interval"])
        try:
            ctx = planner.find_loops(self.start, self.min_length, self.max_length,
                                     beam_width=self.config["beam_width"])
            if db:
                db.end_run(ctx.high_score, ctx.loops_found)
        finally:
            if db:
                db.close()
        return ctx

    def display_best(self, ctx: SearchContext):
        """Print the best loop found as turn-by-turn directions"""
        best = ctx.best
        if best is None:
            print("No loop found")
            return

        print("\n" + "=" * 60)
        print("BEST LOOP")
        print("=" * 60)
        print(f"\nScore: {best.score}")
        print(f"Segments: {best.length} ({best.unique_segments} unique)")
        print(f"Street crossings: {best.crossings}")
        print(f"U-turns: {best.uturns}")
        print(f"Tied or improved high scores: {len(ctx.results)}")

        print("\n" + "-" * 60)
        print("TURN-BY-TURN DIRECTIONS")
        print("-" * 60)
        for i, line in enumerate(best.instructions, 1):
            print(f"{i:>4} | {line}")
        print("\n" + "=" * 60)

    def close(self):
        self.logger.close()
