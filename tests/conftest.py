import pytest

import logger
from randomness import ScriptedRandom

@pytest.fixture(autouse=True)
def reset_logger():
    logger.clear_simulation()
    yield
    logger.clear_simulation()

@pytest.fixture
def zero_rng():
    """A source that always returns 0.0: every draw picks 'above' and every check passes."""
    return ScriptedRandom.constant(0.0)
