"""Street grid topology and per-corner segment index."""

from typing import Iterable, Iterator, Optional

import networkx as nx
import numpy as np

from .errors import ConfigurationError, TopologyError
from .models import CardinalCorner, Corner, Quadrant, Segment, Street

NW, NE, SE, SW = Quadrant.NORTHWEST, Quadrant.NORTHEAST, Quadrant.SOUTHEAST, Quadrant.SOUTHWEST

# leaving quadrant -> arriving quadrant at the neighbor corner, per direction
LEAVING_NORTH = ((NW, SW), (NE, SE))
LEAVING_EAST = ((NE, NW), (SE, SW))
LEAVING_SOUTH = ((SE, NE), (SW, NW))
LEAVING_WEST = ((SW, SE), (NW, NE))


class StreetGrid:
    """Rectangular grid of vertical (west to east) and horizontal (north to south) streets"""

    def __init__(self, vertical_streets: Iterable[str], horizontal_streets: Iterable[str]):
        self.vertical: list[Street] = [Street(name) for name in vertical_streets]
        self.horizontal: list[Street] = [Street(name) for name in horizontal_streets]

        if not self.vertical or not self.horizontal:
            raise ConfigurationError("Grid needs at least one vertical and one horizontal street")
        for axis, streets in (("vertical", self.vertical), ("horizontal", self.horizontal)):
            if len(set(streets)) != len(streets):
                raise ConfigurationError(f"Duplicate {axis} street names: {[s.name for s in streets]}")
        shared = set(self.vertical) & set(self.horizontal)
        if shared:
            raise ConfigurationError(f"Streets on both axes: {sorted(s.name for s in shared)}")

        # Adjacency tables, built once from list positions
        self._east: dict[Street, Optional[Street]] = {}
        self._west: dict[Street, Optional[Street]] = {}
        self._north: dict[Street, Optional[Street]] = {}
        self._south: dict[Street, Optional[Street]] = {}
        for i, street in enumerate(self.vertical):
            self._west[street] = self.vertical[i - 1] if i > 0 else None
            self._east[street] = self.vertical[i + 1] if i + 1 < len(self.vertical) else None
        for i, street in enumerate(self.horizontal):
            self._north[street] = self.horizontal[i - 1] if i > 0 else None
            self._south[street] = self.horizontal[i + 1] if i + 1 < len(self.horizontal) else None

    def street_to_east(self, street: Street) -> Optional[Street]:
        if street not in self._east:
            raise TopologyError(f"street_to_east called on {street}, not a vertical street")
        return self._east[street]

    def street_to_west(self, street: Street) -> Optional[Street]:
        if street not in self._west:
            raise TopologyError(f"street_to_west called on {street}, not a vertical street")
        return self._west[street]

    def street_to_north(self, street: Street) -> Optional[Street]:
        if street not in self._north:
            raise TopologyError(f"street_to_north called on {street}, not a horizontal street")
        return self._north[street]

    def street_to_south(self, street: Street) -> Optional[Street]:
        if street not in self._south:
            raise TopologyError(f"street_to_south called on {street}, not a horizontal street")
        return self._south[street]

    def corner(self, vertical: str, horizontal: str) -> Corner:
        """Build a corner from street names, rejecting names not on the right axis"""
        v, h = Street(vertical), Street(horizontal)
        if v not in self._east:
            raise ConfigurationError(f"Vertical street {vertical!r} isn't in the vertical street list")
        if h not in self._north:
            raise ConfigurationError(f"Horizontal street {horizontal!r} isn't in the horizontal street list")
        return Corner(v, h)

    def corners(self) -> Iterator[Corner]:
        for h in self.horizontal:
            for v in self.vertical:
                yield Corner(v, h)

    @property
    def total_segments(self) -> int:
        """Distinct block sides in the grid, both sides of every block"""
        v, h = len(self.vertical), len(self.horizontal)
        return v * 2 * (h - 1) + h * 2 * (v - 1)


class SegmentIndex:
    """Segments leaving each corner of a grid, minus excluded blocks.

    The table is computed once for every corner at construction. With
    ``shuffle`` enabled each lookup returns the cached segments in a fresh
    random order drawn from ``rng`` (or a generator seeded with ``seed``),
    which varies which of several equal-scoring loops a search meets first.
    """

    def __init__(self, grid: StreetGrid, exclusions: Iterable[frozenset] = (),
                 shuffle: bool = False, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        self.grid = grid
        self.exclusions: frozenset = frozenset(exclusions)
        self.shuffle = shuffle
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._segments: dict[Corner, tuple[Segment, ...]] = {
            corner: tuple(s for s in self._generate(corner) if not self.is_excluded(s))
            for corner in grid.corners()
        }

    def _generate(self, corner: Corner) -> Iterator[Segment]:
        moves = (
            (self.grid.street_to_north(corner.horizontal), LEAVING_NORTH,
             lambda street: Corner(corner.vertical, street)),
            (self.grid.street_to_east(corner.vertical), LEAVING_EAST,
             lambda street: Corner(street, corner.horizontal)),
            (self.grid.street_to_south(corner.horizontal), LEAVING_SOUTH,
             lambda street: Corner(corner.vertical, street)),
            (self.grid.street_to_west(corner.vertical), LEAVING_WEST,
             lambda street: Corner(street, corner.horizontal)),
        )
        for neighbor_street, quadrants, make_corner in moves:
            if neighbor_street is None:
                continue  # Grid boundary
            neighbor = make_corner(neighbor_street)
            for leaving, arriving in quadrants:
                yield Segment(CardinalCorner(leaving, corner), CardinalCorner(arriving, neighbor))

    def is_excluded(self, segment: Segment) -> bool:
        return segment.directionless in self.exclusions

    def segments_from(self, corner: Corner) -> list[Segment]:
        """Segments leaving any quadrant of a corner"""
        try:
            segments = self._segments[corner]
        except KeyError:
            raise TopologyError(f"Corner {corner} isn't on the grid") from None
        if self.shuffle and len(segments) > 1:
            return [segments[i] for i in self.rng.permutation(len(segments))]
        return list(segments)

    def all_segments(self) -> Iterator[Segment]:
        for segments in self._segments.values():
            yield from segments

    @property
    def segment_count(self) -> int:
        """Distinct non-excluded block sides"""
        return len({s.directionless for s in self.all_segments()})

    def find_segment(self, a: CardinalCorner, b: CardinalCorner) -> Optional[Segment]:
        """Segment from a to b ignoring exclusions, or None if they aren't on one block side"""
        for segment in self._generate(a.corner):
            if segment.start == a and segment.end == b:
                return segment
        return None

    def to_graph(self) -> nx.Graph:
        """Corners joined by every block that still has a walkable side"""
        graph = nx.Graph()
        graph.add_nodes_from(self._segments)
        for segment in self.all_segments():
            u, v = segment.start.corner, segment.end.corner
            if graph.has_edge(u, v):
                graph[u][v]["sides"].add(segment.directionless)
            else:
                graph.add_edge(u, v, sides={segment.directionless})
        return graph

    def reachable_segment_count(self, corner: Corner) -> int:
        """Distinct block sides a walk starting at corner can reach"""
        graph = self.to_graph()
        component = nx.node_connected_component(graph, corner)
        sides = set()
        for u, v, data in graph.subgraph(component).edges(data=True):
            sides |= data["sides"]
        return len(sides)
