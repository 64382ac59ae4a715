import importlib
import os
import sys

import matplotlib
import pytest

matplotlib.use("Agg")

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

geomspace = importlib.import_module('numtools.core.sequences').geomspace


@pytest.fixture
def power_law():
    """y = x^-2 sampled on a decade grid."""
    x = geomspace(1.0, 1e4, 5)
    return x, x ** -2.0


@pytest.fixture
def signed_samples():
    """Ordinates of both signs, for the xlog method."""
    x = [1.0, 10.0, 100.0, 1000.0]
    y = [-3.0, 1.5, 0.0, 7.25]
    return x, y


@pytest.fixture
def clamped_samples():
    x = [1.0, 2.0, 3.0]
    y = [-1.0, 0.0, 1.0]
    return x, y
