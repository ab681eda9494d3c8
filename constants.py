# constants.py

# =============================================================================
# --- SIMULATION & PERFORMANCE SETTINGS ---
# =============================================================================
WORLD_WIDTH = 20 # Cells per row
WORLD_HEIGHT = 20 # Rows
DEATH_RATE = 0.3 # Global per-generation death probability, unitless [0, 1]
GENERATIONS = 30
RANDOM_SEED = None # None draws fresh entropy from the OS
PROFILER_PRINT_LINE_COUNT = 20

# =============================================================================
# --- WORLD TOPOLOGY ---
# =============================================================================
# When True, the first cell of a row counts as the left neighbour of the last
# cell of the previous row (and vice versa). Off gives a bounded lattice.
LEGACY_ROW_BLEED = False

# =============================================================================
# --- PHYSICS (RADIATIVE BALANCE) ---
# =============================================================================
# Local temperature follows a gray-body balance:
#   T = (S * L / SB * (1 - local_albedo)) ** 0.25
# Units are Kelvin-like; absolute calibration is not the point.

# Solar insolation reaching the surface.
SOLAR_INSOLATION = 917.0

# Stellar luminosity multiplier. Classic Daisyworld runs sweep this value.
LUMINOSITY = 1.0

# Stefan-Boltzmann constant, W m^-2 K^-4
STEFAN_BOLTZMANN = 5.67e-8

# Weight of each of the four orthogonal neighbours in a cell's local albedo.
# The cell itself keeps (1 - 4 * DIFFUSIVITY).
DIFFUSIVITY = 0.125

# Albedo of an empty or off-grid cell.
BARE_GROUND_ALBEDO = 0.5

RADIATIVE_EXPONENT = 0.25

# =============================================================================
# --- DAISIES ---
# =============================================================================
# Reproduction probability is a downward parabola over temperature:
# 1.0 at the optimum, 0.0 at +/- tolerance and beyond.
DAISY_OPTIMAL_TEMPERATURE = 295.5
DAISY_TEMPERATURE_TOLERANCE = 17.5

# Canonical seed phenotypes
DAISY_BLACK_ALBEDO = 0.25
DAISY_WHITE_ALBEDO = 0.75
DAISY_VOLATILITY = 0.05 # Width of the uniform albedo mutation on reproduction

# Initial seeding, cumulative thresholds on one uniform draw per cell.
# [0, 0.1) black, [0.1, 0.2) white, otherwise empty.
SEED_BLACK_PROBABILITY = 0.1
SEED_WHITE_PROBABILITY = 0.1

# Neighbour choice for an empty cell, cumulative quartiles on one draw.
# Order matters: above, right, below, left.
NEIGHBOUR_CHOICE_THRESHOLDS = (0.25, 0.5, 0.75)

# =============================================================================
# --- LOGGING ---
# =============================================================================
LOG_SUMMARY_INTERVAL_GENERATIONS = 10
