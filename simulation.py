# simulation.py

import constants as C
import logger as log
from environment import Environment, temperature_field
from randomness import make_rng
from statistics_manager import StatisticsManager, format_report
from world import WorldGrid

def choose_neighbour(grid, i, r):
    """Maps one uniform draw onto a neighbour of cell i: above, right, below, left."""
    above_cut, right_cut, below_cut = C.NEIGHBOUR_CHOICE_THRESHOLDS
    if r < above_cut:
        return grid.above(i)
    elif r < right_cut:
        return grid.right_of(i)
    elif r < below_cut:
        return grid.below(i)
    return grid.left_of(i)

def reproduction_pass(old, new, temperatures, rng):
    """
    Pass 1: every cell that is empty in `old` may be seeded by one randomly
    chosen neighbour from `old`. Results are written into `new`, which must
    start as a copy of `old`.

    Draw order per empty cell: neighbour choice, acceptance, and one more
    for the offspring's mutation when a birth happens.
    Returns the number of births.
    """
    births = 0
    for i in range(old.size):
        if old.cells[i] is not None:
            continue

        neighbour = choose_neighbour(old, i, rng.random())
        if neighbour is None:
            prob = 0.0
        else:
            prob = neighbour.reproduce_prob(float(temperatures[i]))

        # The acceptance draw is taken even when prob is 0 to keep the stream aligned.
        if rng.random() < prob:
            new.cells[i] = neighbour.offspring(rng)
            births += 1
    return births

def death_pass(grid, death_rate, rng):
    """
    Pass 2: every occupied cell of `grid`, newborns included, dies with the
    global death rate. One draw per occupied cell, in index order.
    Returns the number of deaths.
    """
    deaths = 0
    for i in range(grid.size):
        if grid.cells[i] is not None and rng.random() < death_rate:
            grid.cells[i] = None
            deaths += 1
    return deaths

def step(grid, rng, environment=None, temperatures=None, out=None):
    """
    Produces the next generation from `grid` without modifying it.

    The temperature field is computed once from `grid` unless supplied.
    If `out` is given it is overwritten and returned, so two buffers can be
    swapped between generations instead of allocating a new grid each time.
    """
    if out is grid:
        raise ValueError("The output buffer must not be the input grid.")
    if temperatures is None:
        if environment is None:
            temperatures = temperature_field(grid)
        else:
            temperatures = environment.temperature_field(grid)
    if len(temperatures) != grid.size:
        raise ValueError(f"Temperature field has {len(temperatures)} values for {grid.size} cells")

    new = grid.copy() if out is None else grid.copy_into(out)
    reproduction_pass(grid, new, temperatures, rng)
    death_pass(new, grid.death_rate, rng)
    return new

class Simulation:
    """
    Runs the world generation by generation.

    Two grid buffers are kept and swapped each generation. `grid` is the
    current generation; a reference to it is overwritten two generations
    later, so callers who want to keep a snapshot should `copy()` it.

    A `grid` passed in takes precedence over `width`, `height`, `death_rate`
    and `row_bleed`, which only shape a freshly seeded world. Likewise an
    `rng` passed in takes precedence over `seed`.
    """
    def __init__(self, width=C.WORLD_WIDTH, height=C.WORLD_HEIGHT, death_rate=C.DEATH_RATE,
                 seed=C.RANDOM_SEED, rng=None, environment=None,
                 row_bleed=C.LEGACY_ROW_BLEED, grid=None):
        log.log("Creating a new Simulation...")
        self.generation = 0
        self.rng = rng if rng is not None else make_rng(seed)
        self.environment = environment if environment is not None else Environment()
        log.log(f"Environment: q={self.environment.diffusivity}, S={self.environment.insolation}, "
                f"L={self.environment.luminosity}")

        if grid is None:
            grid = WorldGrid.new_randomized((width, height), death_rate, self.rng, row_bleed=row_bleed)
        else:
            # The caller keeps their grid; our buffers get overwritten.
            grid = grid.copy()
        self.grid = grid
        self._back = WorldGrid.empty(grid.dimensions, grid.death_rate, row_bleed=grid.row_bleed)

        self.statistics = StatisticsManager()
        self.total_births = 0
        self.total_deaths = 0
        self.births_this_period = 0
        self.deaths_this_period = 0
        self.is_extinct = grid.is_extinct()
        log.log(f"Simulation created. {grid.width}x{grid.height} cells, death rate {grid.death_rate}.")

    def advance(self):
        """
        Steps one generation. Returns False once no daisies are left.
        """
        old = self.grid
        temperatures = self.environment.temperature_field(old)

        new = old.copy_into(self._back)
        births = reproduction_pass(old, new, temperatures, self.rng)
        deaths = death_pass(new, new.death_rate, self.rng)

        self._back, self.grid = old, new
        self.generation += 1

        self.total_births += births
        self.total_deaths += deaths
        self.births_this_period += births
        self.deaths_this_period += deaths
        self.statistics.add_data_point(self.generation, new, temperatures, births, deaths)

        if self.generation % C.LOG_SUMMARY_INTERVAL_GENERATIONS == 0:
            self._log_period_summary()

        extinct = new.is_extinct()
        if extinct and not self.is_extinct:
            log.log("Event: The last daisy has died. The world is bare.")
        self.is_extinct = extinct
        return not extinct

    def _log_period_summary(self):
        log.log(f"Summary: {self.births_this_period} births, {self.deaths_this_period} deaths "
                f"over the last {C.LOG_SUMMARY_INTERVAL_GENERATIONS} generations. "
                f"Planetary albedo {self.grid.mean_albedo():.4f}.")
        self.births_this_period = 0
        self.deaths_this_period = 0

    def run(self, generations=C.GENERATIONS, stop_when_extinct=False, report=False):
        """
        Advances up to `generations` times and returns the recorded history.
        With `report` on, the two-line statistics report is printed after each generation.
        """
        for _ in range(generations):
            alive = self.advance()
            if report:
                print(format_report(self.statistics.latest()))
            if stop_when_extinct and not alive:
                log.log("Stopping early: no daisies left.")
                break
        return self.statistics.as_rows()
