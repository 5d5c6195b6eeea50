"""
Bounded N-dimensional cell storage for Life-like automata.

A Grid holds two same-shaped boolean buffers:
- cells: the committed (current) generation
- next_generation: scratch space the engine fills during a tick

commit() copies the scratch buffer over the current one in place, so the
`cells` array object lives as long as the grid does and read-only views
taken between ticks stay valid.
"""

import logging

import numpy as np

from .errors import InvalidSize, ShapeMismatch

logger = logging.getLogger(__name__)

DEFAULT_DIMENSIONS = 2


def resolve_shape(size, dimensions=None, max_size=None):
    """Turn an edge size or per-axis sizes into a grid shape tuple.

    Args:
        size: int edge length (cubic grid) or sequence of per-axis lengths
        dimensions: axis count for an int size (default 2); must agree
            with len(size) when size is a sequence
        max_size: optional upper bound on every axis length
    """
    if isinstance(size, (int, np.integer)) and not isinstance(size, bool):
        dims = DEFAULT_DIMENSIONS if dimensions is None else int(dimensions)
        if dims < 1:
            raise InvalidSize(f"Grid needs at least one axis, got {dims}")
        shape = (int(size),) * dims
    else:
        shape = tuple(int(s) for s in size)
        if not shape:
            raise InvalidSize("Grid needs at least one axis")
        if dimensions is not None and int(dimensions) != len(shape):
            raise InvalidSize(
                f"Size {shape} has {len(shape)} axes but dimensions={dimensions}")

    if any(s < 1 for s in shape):
        raise InvalidSize(f"Every axis must hold at least 1 cell, got {shape}")
    if max_size is not None and any(s > max_size for s in shape):
        raise InvalidSize(f"Every axis must hold at most {max_size} cells, got {shape}")
    return shape


def validate_shape(values, shape):
    """Convert `values` to a bool array, requiring it to match `shape` exactly.

    Raises ShapeMismatch for wrong axis counts, wrong axis lengths and
    ragged nested sequences. Nothing is written anywhere, so a rejected
    call leaves every buffer untouched.
    """
    try:
        arr = np.asarray(values, dtype=bool)
    except ValueError as err:
        # numpy refuses inhomogeneous (ragged) nested sequences
        raise ShapeMismatch(f"Values are not rectangular; expected shape {shape}") from err
    if arr.shape != tuple(shape):
        raise ShapeMismatch(f"Expected values of shape {tuple(shape)}, got {arr.shape}")
    return arr


class Grid:
    """Double-buffered boolean cell grid with a fixed shape."""

    def __init__(self, size, dimensions=None, seed=None, max_size=None):
        """
        Args:
            size: Edge length, or per-axis lengths (e.g. (4, 3))
            dimensions: Axis count when `size` is an int (default 2)
            seed: Seed for the random initial state (None = fresh entropy)
            max_size: Optional per-axis upper bound enforced by the host
        """
        self.shape = resolve_shape(size, dimensions, max_size)
        self.dimensions = len(self.shape)
        self.max_size = max_size

        rng = np.random.default_rng(seed)
        self.cells = rng.random(self.shape) < 0.5
        self.next_generation = np.zeros(self.shape, dtype=bool)

    @property
    def edge_size(self):
        """Edge length of a cubic grid, or None when the axes differ."""
        if len(set(self.shape)) == 1:
            return self.shape[0]
        return None

    @property
    def cell_count(self):
        return int(self.cells.size)

    @property
    def population(self):
        """Number of living cells in the committed generation."""
        return int(np.count_nonzero(self.cells))

    def set_living(self, values):
        """Overwrite every cell with `values` (same shape as the grid)."""
        arr = validate_shape(values, self.shape)
        self.next_generation[...] = arr
        self.commit()
        logger.debug("Injected %d living cells into %s grid",
                     self.population, "x".join(map(str, self.shape)))

    def fill(self, alive=False):
        """Set every cell to the same state."""
        self.set_living(np.full(self.shape, bool(alive)))

    def commit(self):
        """Make next_generation the current generation."""
        np.copyto(self.cells, self.next_generation)
