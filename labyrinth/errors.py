"""Exceptions raised by Labyrinth."""


class LabyrinthError(Exception):
    """Base class for Labyrinth errors."""


class ConfigurationError(LabyrinthError):
    """Invalid grid, start corner or exclusion configuration."""


class TopologyError(ConfigurationError):
    """A grid object was asked something that cannot be true of it.

    Always a construction bug (wrong-axis neighbor lookup, impossible
    quadrant pair, ...), never a runtime condition.
    """
