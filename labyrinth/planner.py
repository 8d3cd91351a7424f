"""Loop search: length-bounded breadth-first enumeration with optional beam pruning."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .directions import get_instruction_lines
from .errors import ConfigurationError
from .grid import SegmentIndex
from .logger import Logger
from .models import CardinalCorner, Path
from .scoring import score_breakdown, score_path


@dataclass
class LoopResult:
    """A closed loop accepted as a new or tied high score"""
    score: int
    crossings: int
    uturns: int
    unique_segments: int
    path: Path
    instructions: list[str]

    @property
    def length(self) -> int:
        return len(self.path)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "crossings": self.crossings,
            "uturns": self.uturns,
            "unique_segments": self.unique_segments,
            "length": self.length,
            "instructions": self.instructions,
            "segments": [str(s) for s in self.path],
        }


@dataclass
class SearchContext:
    """State of one search run"""
    start: CardinalCorner
    min_length: int
    max_length: int
    beam_width: Optional[int] = None
    # None until the first closed loop, so a negative-scoring first loop is still kept
    high_score: Optional[int] = None
    generation: int = 0
    paths_explored: int = 0
    loops_found: int = 0
    paths_pruned: int = 0
    results: list[LoopResult] = field(default_factory=list)

    @property
    def best(self) -> Optional[LoopResult]:
        # Accepted scores never decrease, so the last one is a best one
        return self.results[-1] if self.results else None

    def accept(self, result: LoopResult) -> bool:
        """Keep result if it meets or beats the running high score"""
        if self.high_score is not None and result.score < self.high_score:
            return False
        self.high_score = result.score
        self.results.append(result)
        return True


class LoopPlanner:
    """Finds high-scoring closed loops from a start corner.

    Paths are grown one generation (one segment) at a time. When a beam
    width is set and a generation outgrows it, only the best-scoring paths
    survive; without one the search is exhaustive within the length bounds.

    Sinks are objects with a ``record(result)`` method, called for every
    accepted loop.
    """

    def __init__(self, index: SegmentIndex, logger: Optional[Logger] = None,
                 sinks: Iterable = (), progress_interval: int = 1):
        self.index = index
        self.logger = logger or Logger(echo=False)
        self.sinks = list(sinks)
        self.progress_interval = max(1, progress_interval)

    def find_loops(self, start: CardinalCorner, min_length: int, max_length: int,
                   beam_width: Optional[int] = None) -> SearchContext:
        if min_length < 1:
            raise ConfigurationError(f"Minimum loop length must be at least 1, got {min_length}")
        if max_length < min_length:
            raise ConfigurationError(f"Maximum loop length {max_length} is below minimum {min_length}")
        if beam_width is not None and beam_width < 1:
            raise ConfigurationError(f"Beam width must be at least 1, got {beam_width}")

        ctx = SearchContext(start=start, min_length=min_length, max_length=max_length,
                            beam_width=beam_width)
        self.logger.log("Search started", {
            "start": str(start),
            "min_length": min_length,
            "max_length": max_length,
            "beam_width": beam_width,
        })

        generation: list[Path] = [(s,) for s in self.index.segments_from(start.corner)]
        while generation:
            ctx.generation = len(generation[0])
            next_generation: list[Path] = []
            for path in generation:
                ctx.paths_explored += 1
                last = path[-1]
                if len(path) >= min_length and last.end == start:
                    self._evaluate(ctx, path)
                if len(path) < max_length:
                    for segment in self.index.segments_from(last.end.corner):
                        # No stepping straight back to the corner just left
                        if segment.end.corner != last.start.corner:
                            next_generation.append(path + (segment,))
            generation, scores = self._prune(ctx, next_generation)
            self._report_progress(ctx, generation, scores)

        self.logger.log("Search finished", {
            "generations": ctx.generation,
            "paths_explored": ctx.paths_explored,
            "loops_found": ctx.loops_found,
            "paths_pruned": ctx.paths_pruned,
            "high_score": ctx.high_score,
            "results": len(ctx.results),
        })
        return ctx

    def _evaluate(self, ctx: SearchContext, path: Path):
        """Score a closed loop and report it if it ties or beats the high score"""
        ctx.loops_found += 1
        breakdown = score_breakdown(path)
        if ctx.high_score is not None and breakdown["score"] < ctx.high_score:
            return
        instructions, _ = get_instruction_lines(path)
        result = LoopResult(
            score=breakdown["score"],
            crossings=breakdown["crossings"],
            uturns=breakdown["uturns"],
            unique_segments=breakdown["unique_segments"],
            path=path,
            instructions=instructions,
        )
        ctx.accept(result)
        self.logger.log("High score", breakdown)
        for sink in self.sinks:
            sink.record(result)

    def _prune(self, ctx: SearchContext, paths: list[Path]) -> tuple[list[Path], Optional[list[int]]]:
        """Keep the beam_width best paths of a generation (stable on ties)"""
        if ctx.beam_width is None or len(paths) <= ctx.beam_width:
            return paths, None
        scores = [score_path(p)[0] for p in paths]
        keep = sorted(range(len(paths)), key=lambda i: scores[i], reverse=True)[:ctx.beam_width]
        ctx.paths_pruned += len(paths) - len(keep)
        return [paths[i] for i in keep], [scores[i] for i in keep]

    def _report_progress(self, ctx: SearchContext, generation: list[Path],
                         scores: Optional[list[int]]):
        if not generation or ctx.generation % self.progress_interval:
            return
        if scores is None:
            scores = [score_path(p)[0] for p in generation]
        self.logger.progress(
            f"generation {ctx.generation + 1}: {len(generation)} paths, "
            f"best {max(scores)}, worst {min(scores)}, high score: {ctx.high_score}")
