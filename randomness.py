# randomness.py

# Every `rng` parameter in this project only needs a `random()` method that
# returns a uniform float in [0, 1). numpy.random.Generator, random.Random and
# ScriptedRandom all qualify.

import numpy as np
import constants as C

def make_rng(seed=C.RANDOM_SEED):
    """Returns a seeded NumPy generator. The same seed gives the same run."""
    return np.random.default_rng(seed)

class ScriptedRandom:
    """
    A random source that replays a fixed sequence of values.
    Used to drive the simulation through an exact, hand-picked path.
    """
    def __init__(self, values, repeat=False):
        self.values = [float(v) for v in values]
        if not self.values:
            raise ValueError("ScriptedRandom needs at least one value.")
        for v in self.values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Scripted value {v} is outside [0, 1).")
        self.repeat = repeat
        self.draws = 0 # Number of values handed out so far

    @classmethod
    def constant(cls, value):
        return cls([value], repeat=True)

    def random(self):
        if self.draws >= len(self.values) and not self.repeat:
            raise IndexError(f"ScriptedRandom exhausted after {self.draws} draws.")
        value = self.values[self.draws % len(self.values)]
        self.draws += 1
        return value
