"""Data classes for Labyrinth."""

from dataclasses import dataclass
from enum import Enum

from .errors import ConfigurationError, TopologyError


class Quadrant(Enum):
    """Side of an intersection a walker is standing on"""
    NORTHWEST = "northwest"
    NORTHEAST = "northeast"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "Quadrant":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ConfigurationError(f"Unknown quadrant: {name!r}") from None


class Heading(Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    def __str__(self) -> str:
        return self.value


class Turn(Enum):
    STRAIGHT = "straight"
    LEFT = "left"
    RIGHT = "right"
    UTURN = "u-turn"

    def __str__(self) -> str:
        return self.value


NW, NE, SE, SW = Quadrant.NORTHWEST, Quadrant.NORTHEAST, Quadrant.SOUTHEAST, Quadrant.SOUTHWEST
N, S, E, W = Heading.NORTH, Heading.SOUTH, Heading.EAST, Heading.WEST

# (start quadrant, end quadrant) -> heading walked
HEADINGS: dict[tuple[Quadrant, Quadrant], Heading] = {
    (NW, SW): N,
    (NE, SE): N,
    (NW, NE): W,
    (SW, SE): W,
    (NE, NW): E,
    (SE, SW): E,
    (SE, NE): S,
    (SW, NW): S,
}

# (previous heading, next heading) -> turn made
TURNS: dict[tuple[Heading, Heading], Turn] = {
    (N, N): Turn.STRAIGHT,
    (N, S): Turn.UTURN,
    (N, E): Turn.RIGHT,
    (N, W): Turn.LEFT,
    (S, N): Turn.UTURN,
    (S, S): Turn.STRAIGHT,
    (S, E): Turn.LEFT,
    (S, W): Turn.RIGHT,
    (E, N): Turn.LEFT,
    (E, S): Turn.RIGHT,
    (E, E): Turn.STRAIGHT,
    (E, W): Turn.UTURN,
    (W, N): Turn.RIGHT,
    (W, S): Turn.LEFT,
    (W, E): Turn.UTURN,
    (W, W): Turn.STRAIGHT,
}


@dataclass(frozen=True)
class Street:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Corner:
    """Intersection of one vertical and one horizontal street"""
    vertical: Street
    horizontal: Street

    def __str__(self) -> str:
        return f"{self.vertical} & {self.horizontal}"


@dataclass(frozen=True)
class CardinalCorner:
    """A corner plus the quadrant of it being occupied"""
    quadrant: Quadrant
    corner: Corner

    @property
    def vertical(self) -> Street:
        return self.corner.vertical

    @property
    def horizontal(self) -> Street:
        return self.corner.horizontal

    def __str__(self) -> str:
        return f"{self.quadrant} {self.corner}"


@dataclass(frozen=True)
class Segment:
    """One side of one block, walked from start to end.

    No street is crossed inside a segment; crossings happen between
    segments, at the corner they share.
    """
    start: CardinalCorner
    end: CardinalCorner

    @property
    def directionless(self) -> frozenset:
        """Identity of the block side regardless of walking direction"""
        return frozenset((self.start, self.end))

    @property
    def heading(self) -> Heading:
        heading = HEADINGS.get((self.start.quadrant, self.end.quadrant))
        if heading is None:
            raise TopologyError(f"Invalid segment, couldn't determine heading: {self}")
        return heading

    @property
    def street(self) -> Street:
        """Street this segment follows"""
        if self.start.horizontal == self.end.horizontal:
            return self.start.horizontal
        if self.start.vertical == self.end.vertical:
            return self.start.vertical
        raise TopologyError(f"Invalid segment, corners share no street: {self}")

    @property
    def ending_street(self) -> Street:
        """Cross street at the end corner, i.e. the one not walked along"""
        if self.end.horizontal == self.street:
            return self.end.vertical
        return self.end.horizontal

    def turn_to(self, other: "Segment") -> Turn:
        turn = TURNS.get((self.heading, other.heading))
        if turn is None:
            raise TopologyError(f"Invalid segments, couldn't determine turn: {self} -> {other}")
        return turn

    def reversed(self) -> "Segment":
        return Segment(start=self.end, end=self.start)

    def __str__(self) -> str:
        return f"{self.start} -> {self.end}"


Path = tuple[Segment, ...]
