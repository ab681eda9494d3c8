import numpy as np
import constants as C

class Environment:
    """
    The radiative climate of the world. Turns a grid's albedo field into a
    local temperature field, one value per cell.
    """
    def __init__(self, diffusivity=C.DIFFUSIVITY, insolation=C.SOLAR_INSOLATION,
                 luminosity=C.LUMINOSITY, stefan_boltzmann=C.STEFAN_BOLTZMANN):
        if not 0.0 <= diffusivity <= 0.25:
            raise ValueError(f"Diffusivity must lie in [0, 0.25], got {diffusivity}")
        if luminosity < 0.0 or insolation < 0.0:
            raise ValueError("Insolation and luminosity must be non-negative.")
        if stefan_boltzmann <= 0.0:
            raise ValueError(f"Stefan-Boltzmann constant must be positive, got {stefan_boltzmann}")
        self.diffusivity = diffusivity # q, unitless
        self.insolation = insolation # S
        self.luminosity = luminosity # L, multiplier on S
        self.stefan_boltzmann = stefan_boltzmann # SB

    def _shifted_neighbours(self, grid, albedos):
        """
        Returns (above, right, below, left) albedo arrays aligned with `albedos`.
        Cells with no neighbour in a direction get bare ground.
        """
        w = grid.width
        bare = C.BARE_GROUND_ALBEDO

        above = np.full_like(albedos, bare)
        above[w:] = albedos[:-w]
        below = np.full_like(albedos, bare)
        below[:-w] = albedos[w:]

        left = np.full_like(albedos, bare)
        left[1:] = albedos[:-1]
        right = np.full_like(albedos, bare)
        right[:-1] = albedos[1:]

        if not grid.row_bleed:
            # Column 0 has nothing to its left, the last column nothing to its right.
            left[::w] = bare
            right[w - 1::w] = bare

        return above, right, below, left

    def local_albedo_field(self, grid):
        """Each cell's albedo blended with its four orthogonal neighbours."""
        q = self.diffusivity
        albedos = grid.albedo_array()
        above, right, below, left = self._shifted_neighbours(grid, albedos)
        return (1.0 - 4.0 * q) * albedos + q * (above + right + left + below)

    def temperature_field(self, grid):
        """
        Local gray-body equilibrium temperature for every cell of `grid`.
        Always computed fresh from the grid as it is now.
        """
        local_albedo = self.local_albedo_field(grid)
        flux = self.insolation * self.luminosity / self.stefan_boltzmann * (1.0 - local_albedo)
        return flux ** C.RADIATIVE_EXPONENT

def temperature_field(grid):
    """Temperature field under the default physical constants."""
    return _DEFAULT_ENVIRONMENT.temperature_field(grid)

_DEFAULT_ENVIRONMENT = Environment()
