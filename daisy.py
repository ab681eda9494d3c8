# daisy.py

from dataclasses import dataclass

import constants as C

def clamp(value, low=0.0, high=1.0):
    return max(low, min(high, value))

@dataclass(frozen=True)
class Daisy:
    """A data container for the phenotype of a single daisy."""
    albedo: float # Surface reflectivity, unitless [0, 1]
    volatility: float = C.DAISY_VOLATILITY # Mutation width, inherited unchanged

    def __post_init__(self):
        if not 0.0 <= self.albedo <= 1.0:
            raise ValueError(f"Daisy albedo must lie in [0, 1], got {self.albedo}")
        if self.volatility < 0.0:
            raise ValueError(f"Daisy volatility must be >= 0, got {self.volatility}")

    @classmethod
    def black(cls):
        return cls(C.DAISY_BLACK_ALBEDO, C.DAISY_VOLATILITY)

    @classmethod
    def white(cls):
        return cls(C.DAISY_WHITE_ALBEDO, C.DAISY_VOLATILITY)

    @property
    def is_dark(self):
        """Darker than bare ground, so it warms its surroundings."""
        return self.albedo < C.BARE_GROUND_ALBEDO

    def reproduce_prob(self, temperature):
        """
        Probability of seeding a neighbouring cell at the given local temperature.
        A parabola peaking at 1.0 on the optimum, zero outside the tolerance band.
        """
        deviation = temperature - C.DAISY_OPTIMAL_TEMPERATURE
        if abs(deviation) >= C.DAISY_TEMPERATURE_TOLERANCE:
            return 0.0
        return 1.0 - (deviation / C.DAISY_TEMPERATURE_TOLERANCE) ** 2

    def offspring(self, rng):
        """
        Returns a child with a uniformly perturbed albedo.
        Consumes exactly one draw from rng.
        """
        new_albedo = self.albedo + self.volatility * (rng.random() - 0.5)
        return Daisy(clamp(new_albedo), self.volatility)
