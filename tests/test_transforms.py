import numpy as np
import pytest

from numtools import transforms
from numtools.errors import InvalidArgument


@pytest.mark.parametrize("name", ["loglog", "xlog", "ylog"])
def test_factory_returns_named_transform(name):
    t = transforms.get(name)
    assert isinstance(t, transforms.AbstractTransform)
    assert t.name == name


def test_factory_rejects_unknown_name():
    with pytest.raises(InvalidArgument, match="Unknown method: LogLog"):
        transforms.get("LogLog")


def test_positive_x_requirement():
    assert transforms.get("loglog").positive_x
    assert transforms.get("xlog").positive_x
    assert not transforms.get("ylog").positive_x


def test_default_extrapolation_levels():
    assert transforms.get("loglog").default_extrapolation == -np.inf
    assert transforms.get("ylog").default_extrapolation == -np.inf
    assert transforms.get("xlog").default_extrapolation == 0.0


def test_log_clamped():
    out = transforms.log_clamped(np.array([-2.0, 0.0, 1.0]))
    np.testing.assert_array_equal(out, [-np.inf, -np.inf, 0.0])


def test_exp_or_zero_suppresses_nan():
    out = transforms.exp_or_zero(np.array([np.nan, -np.inf, 0.0]))
    np.testing.assert_array_equal(out, [0.0, 0.0, 1.0])
