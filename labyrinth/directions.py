"""Turn-by-turn directions for a walked loop."""

from typing import Iterator, Sequence

from .errors import TopologyError
from .models import CardinalCorner, Quadrant, Segment, Turn

NW, NE, SE, SW = Quadrant.NORTHWEST, Quadrant.NORTHEAST, Quadrant.SOUTHEAST, Quadrant.SOUTHWEST

DIAGONAL_PAIRS = {frozenset((NW, SE)), frozenset((NE, SW))}
VERTICAL_CROSSING_PAIRS = {frozenset((NW, NE)), frozenset((SW, SE))}

TURN_TEXT = {
    Turn.STRAIGHT: "continue straight",
    Turn.LEFT: "turn left",
    Turn.RIGHT: "turn right",
    Turn.UTURN: "head back the way you came",
}

DONE = "Done."


def cross_text(here: CardinalCorner, there: CardinalCorner) -> tuple[str, int]:
    """How to get between two quadrants of one corner, and how many streets that crosses"""
    if here.corner != there.corner:
        raise TopologyError(f"cross_text called for different corners: {here.corner} and {there.corner}")

    if here.quadrant == there.quadrant:
        return "don't cross", 0

    pair = frozenset((here.quadrant, there.quadrant))
    if pair in DIAGONAL_PAIRS:
        return "cross both streets", 2
    if pair in VERTICAL_CROSSING_PAIRS:
        return f"cross {here.vertical}", 1
    return f"cross {here.horizontal}", 1


def transitions(path: Sequence[Segment]) -> Iterator[tuple[Segment, Segment, str, int]]:
    """Yield (a, b, cross text, crossings) for each pair that needs an instruction.

    A pair that keeps both the start and end quadrant is a straight walk
    through the corner and is skipped entirely.
    """
    for a, b in zip(path, path[1:]):
        if a.start.quadrant == b.start.quadrant and a.end.quadrant == b.end.quadrant:
            continue
        text, crossings = cross_text(a.end, b.start)
        yield a, b, text, crossings


def count_crossings(path: Sequence[Segment]) -> int:
    return sum(crossings for _, _, _, crossings in transitions(path))


def get_instruction_lines(path: Sequence[Segment]) -> tuple[list[str], int]:
    """Render a path as instruction lines; also returns total crossings"""
    first = path[0]
    lines = [
        f"Start at the {first.start.quadrant} corner of {first.start.vertical} "
        f"and {first.start.horizontal} and head {first.heading} on {first.street}"
    ]
    total_crossings = 0
    for a, b, text, crossings in transitions(path):
        total_crossings += crossings
        lines.append(f"At {a.ending_street}, {text} and {TURN_TEXT[a.turn_to(b)]}")
    lines.append(DONE)
    return lines, total_crossings


def render(path: Sequence[Segment]) -> list[str]:
    lines, _ = get_instruction_lines(path)
    return lines
