#world.py

import numpy as np
from daisy import Daisy
import constants as C
import logger as log

def albedo_or_bare(daisy):
    """Albedo of an optional daisy; empty and off-grid cells count as bare ground."""
    return daisy.albedo if daisy is not None else C.BARE_GROUND_ALBEDO

def _new_daisy_opt(rng):
    r = rng.random()
    if r < C.SEED_BLACK_PROBABILITY:
        return Daisy.black()
    elif r < C.SEED_BLACK_PROBABILITY + C.SEED_WHITE_PROBABILITY:
        return Daisy.white()
    return None

class WorldGrid:
    """
    One generation of the daisy field.

    Cells are stored row-major in a flat list, index = row * width + col.
    Each cell holds a Daisy or None. Daisies are immutable, so copies of
    the grid share them freely.
    """
    def __init__(self, dimensions, death_rate=C.DEATH_RATE, cells=None, row_bleed=C.LEGACY_ROW_BLEED):
        width, height = dimensions
        if not isinstance(width, (int, np.integer)) or not isinstance(height, (int, np.integer)):
            raise ValueError(f"Grid dimensions must be integers, got {dimensions!r}")
        if width < 1 or height < 1:
            raise ValueError(f"Grid must have a positive area, got {width}x{height}")
        if not 0.0 <= death_rate <= 1.0:
            raise ValueError(f"Death rate must lie in [0, 1], got {death_rate}")

        self.width = int(width)
        self.height = int(height)
        self.death_rate = float(death_rate)
        self.row_bleed = bool(row_bleed)

        if cells is None:
            cells = [None] * self.size
        else:
            cells = list(cells)
            if len(cells) != self.size:
                raise ValueError(f"Expected {self.size} cells for a {self.width}x{self.height} grid, got {len(cells)}")
        self.cells = cells

    # --- Construction ---
    @classmethod
    def empty(cls, dimensions, death_rate=C.DEATH_RATE, row_bleed=C.LEGACY_ROW_BLEED):
        return cls(dimensions, death_rate, row_bleed=row_bleed)

    @classmethod
    def new_randomized(cls, dimensions, death_rate, rng, row_bleed=C.LEGACY_ROW_BLEED):
        """
        Seeds each cell independently from one draw, in index order:
        black below SEED_BLACK_PROBABILITY, white in the next band, empty otherwise.
        """
        grid = cls(dimensions, death_rate, row_bleed=row_bleed)
        grid.cells = [_new_daisy_opt(rng) for _ in range(grid.size)]
        log.log(f"Seeded a {grid.width}x{grid.height} world: {grid.dark_count()} dark, "
                f"{grid.light_count()} light, {grid.empty_count()} empty.")
        return grid

    def copy(self):
        return WorldGrid(self.dimensions, self.death_rate, self.cells, self.row_bleed)

    def copy_into(self, other):
        """Overwrites another buffer of the same shape with this grid's state."""
        if other.dimensions != self.dimensions:
            raise ValueError(f"Cannot copy a {self.dimensions} grid into a {other.dimensions} buffer")
        other.cells[:] = self.cells
        other.death_rate = self.death_rate
        other.row_bleed = self.row_bleed
        return other

    # --- Shape ---
    @property
    def dimensions(self):
        return (self.width, self.height)

    @property
    def size(self):
        return self.width * self.height

    def __len__(self):
        return self.size

    def __eq__(self, other):
        if not isinstance(other, WorldGrid):
            return NotImplemented
        return (self.dimensions == other.dimensions
                and self.death_rate == other.death_rate
                and self.row_bleed == other.row_bleed
                and self.cells == other.cells)

    def __repr__(self):
        return (f"WorldGrid({self.width}x{self.height}, death_rate={self.death_rate}, "
                f"occupied={self.occupied_count()})")

    # --- Neighbour lookups (never raise, absent is None) ---
    def at(self, i):
        if 0 <= i < self.size:
            return self.cells[i]
        return None

    def above(self, i):
        if self.width <= i < self.size:
            return self.at(i - self.width)
        return None

    def below(self, i):
        if 0 <= i < self.size - self.width:
            return self.at(i + self.width)
        return None

    def left_of(self, i):
        # A cell outside the grid has no neighbours.
        if not 0 <= i < self.size:
            return None
        if self.row_bleed:
            return self.at(i - 1) if i > 0 else None
        if i % self.width != 0:
            return self.at(i - 1)
        return None

    def right_of(self, i):
        if not 0 <= i < self.size:
            return None
        if self.row_bleed:
            return self.at(i + 1) if i < self.size - 1 else None
        if (i + 1) % self.width != 0:
            return self.at(i + 1)
        return None

    def neighbors(self, i):
        """The four orthogonal neighbours in reproduction order: above, right, below, left."""
        return (self.above(i), self.right_of(i), self.below(i), self.left_of(i))

    # --- Aggregates ---
    def occupied(self):
        """Yields (index, daisy) for every occupied cell in index order."""
        for i, daisy in enumerate(self.cells):
            if daisy is not None:
                yield i, daisy

    def albedo_array(self):
        """Per-cell albedo as a float64 array, bare ground for empty cells."""
        return np.fromiter((albedo_or_bare(d) for d in self.cells), dtype=np.float64, count=self.size)

    def mean_albedo(self):
        """Planetary albedo: mean over all cells, empty cells count as bare ground."""
        return sum(albedo_or_bare(d) for d in self.cells) / self.size

    def empty_count(self):
        return sum(1 for d in self.cells if d is None)

    def occupied_count(self):
        return self.size - self.empty_count()

    def dark_count(self):
        return sum(1 for _, d in self.occupied() if d.is_dark)

    def light_count(self):
        return sum(1 for _, d in self.occupied() if not d.is_dark)

    def is_extinct(self):
        return all(d is None for d in self.cells)
