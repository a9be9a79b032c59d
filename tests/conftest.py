import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from pulsecode import Scheme, clear_config  # noqa: E402


@pytest.fixture(autouse=True)
def clean_config():
    """Every test starts and ends without a global config."""
    clear_config()
    yield
    clear_config()


@pytest.fixture
def letter_a_bits():
    """Bits of "A" (code point 65)."""
    return np.array([0, 1, 0, 0, 0, 0, 0, 1], dtype=np.uint8)


@pytest.fixture
def random_bits():
    rng = np.random.default_rng(1234)
    return rng.integers(0, 2, size=64)


@pytest.fixture(params=list(Scheme), ids=lambda s: s.value)
def scheme(request):
    return request.param
