"""Life-like cellular automata on bounded 2D/3D grids."""

from .errors import InvalidSize, ShapeMismatch
from .grid import Grid
from .life import Game, format_rule, living_neighbor_count, parse_rule
from .presets import PRESETS, get_preset, list_presets

__all__ = [
    "Game",
    "Grid",
    "InvalidSize",
    "PRESETS",
    "ShapeMismatch",
    "format_rule",
    "get_preset",
    "list_presets",
    "living_neighbor_count",
    "parse_rule",
]
