import pytest

from labyrinth.grid import SegmentIndex, StreetGrid
from labyrinth.models import CardinalCorner, Quadrant, Segment


def seg(grid: StreetGrid, start: tuple[str, str, str], end: tuple[str, str, str]) -> Segment:
    """Segment from (vertical, horizontal, quadrant) triples"""
    a = CardinalCorner(Quadrant.parse(start[2]), grid.corner(start[0], start[1]))
    b = CardinalCorner(Quadrant.parse(end[2]), grid.corner(end[0], end[1]))
    return Segment(a, b)


@pytest.fixture
def square():
    """One block: A, B west to east; P, Q north to south"""
    return StreetGrid(["A", "B"], ["P", "Q"])


@pytest.fixture
def square_index(square):
    return SegmentIndex(square)


@pytest.fixture
def three_by_three():
    return StreetGrid(["A", "B", "C"], ["P", "Q", "R"])


@pytest.fixture
def clockwise_loop(square):
    """Smallest loop back to the northeast quadrant of A & P"""
    return (
        seg(square, ("A", "P", "southeast"), ("A", "Q", "northeast")),
        seg(square, ("A", "Q", "northeast"), ("B", "Q", "northwest")),
        seg(square, ("B", "Q", "northwest"), ("B", "P", "southwest")),
        seg(square, ("B", "P", "northwest"), ("A", "P", "northeast")),
    )
