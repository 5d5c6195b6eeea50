"""
Life-like Engine - Threshold Rules on a Bounded N-Dimensional Grid

Each generation, every cell counts its living neighbours within
Chebyshev radius 1 (8 in 2D, 26 in 3D). Positions outside the grid are
not neighbours at all: edges are clamped, there is no wraparound.

- A living cell survives iff min_survive <= n <= max_survive
- A dead cell is born iff min_birth <= n <= max_birth

Rules can also be written in B/S notation:
- B3/S23: Conway's Game of Life (2D)
- B9-10/S6-10: the cubic 3D rule
- B5/S45: Bays' 3D Life 4555

A tick that changes nothing marks the game stable and is not committed,
so the generation counter stops advancing until the state or the rule
changes.
"""

import logging

import numpy as np
from scipy import ndimage

from .grid import Grid, validate_shape
from .presets import default_preset_for, get_preset

logger = logging.getLogger(__name__)

_KERNELS = {}


def _chebyshev_kernel(dimensions):
    """All-ones 3^D kernel with the centre zeroed."""
    kernel = _KERNELS.get(dimensions)
    if kernel is None:
        kernel = np.ones((3,) * dimensions, dtype=np.int32)
        kernel[(1,) * dimensions] = 0
        _KERNELS[dimensions] = kernel
    return kernel


def living_neighbor_count(cells):
    """Count living neighbours of every cell, treating off-grid positions as absent."""
    cells = np.asarray(cells)
    return ndimage.convolve(cells.astype(np.int32), _chebyshev_kernel(cells.ndim),
                            mode="constant", cval=0)


def _parse_counts(body):
    if not body:
        return set()
    if "-" in body:
        lo, hi = body.split("-", 1)
        return set(range(int(lo), int(hi) + 1))
    if "," in body:
        return {int(c) for c in body.split(",")}
    return {int(c) for c in body}


def parse_rule(rule_str):
    """Parse B/S notation into (min_survive, max_survive, min_birth, max_birth).

    Accepts single-digit lists ('B3/S23'), ranges ('B9-10/S6-10') and
    comma lists ('B9,10/S6,7,8,9,10'). Counts must form a contiguous
    range; an empty list ('B/S23') becomes the empty range (1, 0).
    """
    rule_str = rule_str.upper().replace(" ", "")
    birth = None
    survive = None
    for part in rule_str.split("/"):
        if part.startswith("B"):
            birth = _parse_counts(part[1:])
        elif part.startswith("S"):
            survive = _parse_counts(part[1:])
        else:
            raise ValueError(f"Bad rule segment {part!r} in {rule_str!r}")
    if birth is None or survive is None:
        raise ValueError(f"Rule {rule_str!r} needs both a B and an S segment")

    bounds = []
    for counts in (survive, birth):
        if not counts:
            bounds.extend((1, 0))
            continue
        lo, hi = min(counts), max(counts)
        if counts != set(range(lo, hi + 1)):
            raise ValueError(
                f"Rule {rule_str!r} is not a threshold rule: {sorted(counts)} "
                f"is not a contiguous range")
        bounds.extend((lo, hi))
    return tuple(bounds)


def _format_counts(lo, hi):
    if lo > hi:
        return ""
    if hi <= 9:
        return "".join(str(n) for n in range(lo, hi + 1))
    return f"{lo}-{hi}"


def format_rule(min_survive, max_survive, min_birth, max_birth):
    """Inverse of parse_rule, e.g. (2, 3, 3, 3) -> 'B3/S23'."""
    return (f"B{_format_counts(min_birth, max_birth)}"
            f"/S{_format_counts(min_survive, max_survive)}")


class Game:
    """Life-like automaton over a bounded 2D/3D/ND grid."""

    def __init__(self, size, min_survive=None, max_survive=None,
                 min_birth=None, max_birth=None, dimensions=None, seed=None,
                 max_size=None):
        """
        Args:
            size: Edge length, or per-axis lengths for a non-cubic grid
            min_survive, max_survive: Neighbour range keeping a live cell alive
            min_birth, max_birth: Neighbour range bringing a dead cell to life
            dimensions: Axis count when `size` is an int (default 2)
            seed: Seed for the random initial state
            max_size: Optional per-axis upper bound

        Thresholds left as None come from the default rule for the grid's
        dimensionality (B3/S23 in 2D, B9-10/S6-10 in 3D).
        """
        self.grid = Grid(size, dimensions=dimensions, seed=seed, max_size=max_size)
        self.generation = 1
        self.is_stable = False

        thresholds = [min_survive, max_survive, min_birth, max_birth]
        if any(t is None for t in thresholds):
            preset = default_preset_for(self.grid.dimensions)
            if preset is None:
                raise ValueError(
                    f"No default rule for {self.grid.dimensions}D grids; "
                    f"pass all four thresholds")
            defaults = parse_rule(preset["rule"])
            thresholds = [d if t is None else t for t, d in zip(thresholds, defaults)]
        self.min_survive, self.max_survive, self.min_birth, self.max_birth = thresholds

    @classmethod
    def from_preset(cls, name, size, seed=None, max_size=None):
        """Build a game using a named rule from presets.PRESETS."""
        preset = get_preset(name)
        if preset is None:
            raise ValueError(f"Unknown preset: {name!r}")
        return cls(size, *parse_rule(preset["rule"]),
                   dimensions=preset["dimensions"], seed=seed, max_size=max_size)

    def __repr__(self):
        return (f"Game(shape={self.grid.shape}, rule={self.rule!r}, "
                f"generation={self.generation}, is_stable={self.is_stable})")

    # ── State access ──────────────────────────────────────────────────────

    @property
    def shape(self):
        return self.grid.shape

    @property
    def dimensions(self):
        return self.grid.dimensions

    @property
    def max_neighbors(self):
        """Largest possible neighbour count, 3^D - 1."""
        return 3 ** self.grid.dimensions - 1

    @property
    def cells(self):
        """Read-only view of the committed generation."""
        view = self.grid.cells.view()
        view.flags.writeable = False
        return view

    def snapshot(self):
        """Independent copy of the committed generation."""
        return self.grid.cells.copy()

    def _position(self, position):
        position = tuple(int(p) for p in position)
        if len(position) != self.grid.dimensions or any(
                not 0 <= p < n for p, n in zip(position, self.grid.shape)):
            raise IndexError(f"Position {position} outside grid of shape {self.grid.shape}")
        return position

    def cell(self, position):
        """State of the cell at `position` (one index per axis)."""
        return bool(self.grid.cells[self._position(position)])

    def living_neighbors_of(self, position):
        """Living neighbours of one cell, counting only on-grid positions."""
        position = self._position(position)
        window = tuple(slice(max(p - 1, 0), min(p + 2, n))
                       for p, n in zip(position, self.grid.shape))
        cells = self.grid.cells
        return int(np.count_nonzero(cells[window])) - int(cells[position])

    # ── Evolution ─────────────────────────────────────────────────────────

    def set_living(self, values):
        """Replace the whole state. Does not tick or change the generation."""
        self.grid.set_living(validate_shape(values, self.grid.shape))

    def clear(self):
        """Kill every cell. Does not change the generation."""
        self.grid.fill(False)

    def tick(self):
        """Advance one generation. Returns the (read-only) committed state."""
        cells = self.grid.cells
        neighbors = living_neighbor_count(cells)

        survive = (neighbors >= self.min_survive) & (neighbors <= self.max_survive)
        birth = (neighbors >= self.min_birth) & (neighbors <= self.max_birth)

        next_generation = self.grid.next_generation
        np.copyto(next_generation, np.where(cells, survive, birth))

        was_stable = self.is_stable
        self.is_stable = bool(np.array_equal(next_generation, cells))
        if self.is_stable:
            if not was_stable:
                logger.debug("Stable at generation %d (%d living cells)",
                             self.generation, self.grid.population)
        else:
            self.grid.commit()
            self.generation += 1
        return self.cells

    def tick_n(self, n):
        """Advance up to n generations, stopping early once stable."""
        for _ in range(n):
            self.tick()
            if self.is_stable:
                break
        return self.cells

    def reset(self, seed=None):
        """Re-seed a fresh random grid of the same shape."""
        self.grid = Grid(self.grid.shape, seed=seed, max_size=self.grid.max_size)
        self.generation = 1
        self.is_stable = False
        logger.debug("Reset %s grid", "x".join(map(str, self.grid.shape)))

    # ── Rule parameters ───────────────────────────────────────────────────

    @property
    def rule(self):
        return format_rule(self.min_survive, self.max_survive,
                           self.min_birth, self.max_birth)

    def set_params(self, rule=None, min_survive=None, max_survive=None,
                   min_birth=None, max_birth=None, **_kw):
        """Change thresholds; explicit thresholds override a rule string."""
        if rule is not None:
            (self.min_survive, self.max_survive,
             self.min_birth, self.max_birth) = parse_rule(rule)
        if min_survive is not None:
            self.min_survive = min_survive
        if max_survive is not None:
            self.max_survive = max_survive
        if min_birth is not None:
            self.min_birth = min_birth
        if max_birth is not None:
            self.max_birth = max_birth

    def get_params(self):
        return {
            "rule": self.rule,
            "min_survive": self.min_survive,
            "max_survive": self.max_survive,
            "min_birth": self.min_birth,
            "max_birth": self.max_birth,
        }

    @property
    def stats(self):
        """Return current world statistics."""
        alive_count = self.grid.population
        return {
            "generation": self.generation,
            "population": alive_count,
            "alive_pct": alive_count / self.grid.cell_count * 100,
            "is_stable": self.is_stable,
        }
