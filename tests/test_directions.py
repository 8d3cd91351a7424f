import pytest

from labyrinth.directions import DONE, count_crossings, cross_text, get_instruction_lines, render
from labyrinth.errors import TopologyError
from labyrinth.grid import StreetGrid
from labyrinth.models import CardinalCorner, Quadrant

from conftest import seg


def at(grid, vertical, horizontal, quadrant):
    return CardinalCorner(Quadrant.parse(quadrant), grid.corner(vertical, horizontal))


def test_cross_text(square):
    nw = at(square, "A", "P", "northwest")
    assert cross_text(nw, nw) == ("don't cross", 0)
    assert cross_text(nw, at(square, "A", "P", "southeast")) == ("cross both streets", 2)
    assert cross_text(nw, at(square, "A", "P", "northeast")) == ("cross A", 1)
    assert cross_text(nw, at(square, "A", "P", "southwest")) == ("cross P", 1)
    assert cross_text(at(square, "A", "P", "southeast"), at(square, "A", "P", "southwest")) == ("cross A", 1)


def test_cross_text_needs_one_corner(square):
    with pytest.raises(TopologyError):
        cross_text(at(square, "A", "P", "northwest"), at(square, "B", "P", "northwest"))


def test_instruction_lines_for_smallest_loop(clockwise_loop):
    lines, crossings = get_instruction_lines(clockwise_loop)
    assert lines == [
        "Start at the southeast corner of A and P and head south on A",
        "At Q, don't cross and turn left",
        "At B, don't cross and turn left",
        "At P, cross P and turn left",
        DONE,
    ]
    assert crossings == 1


def test_straight_through_corner_is_silent():
    grid = StreetGrid(["A"], ["P", "Q", "R"])
    path = (
        seg(grid, ("A", "P", "southeast"), ("A", "Q", "northeast")),
        seg(grid, ("A", "Q", "southeast"), ("A", "R", "northeast")),
    )
    lines, crossings = get_instruction_lines(path)
    assert lines == ["Start at the southeast corner of A and P and head south on A", DONE]
    assert crossings == 0


def test_u_turn_instruction(square):
    east = seg(square, ("A", "Q", "northeast"), ("B", "Q", "northwest"))
    lines = render((east, east.reversed()))
    assert lines[1] == "At B, don't cross and head back the way you came"


def test_render_is_pure(clockwise_loop):
    assert render(clockwise_loop) == render(clockwise_loop)
    assert count_crossings(clockwise_loop) == get_instruction_lines(clockwise_loop)[1]
