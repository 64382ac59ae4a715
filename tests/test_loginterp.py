import importlib
import logging
import math
import threading

import numpy as np
import pandas as pd
import pytest

loginterp = importlib.import_module('numtools.core.loginterp')
interpolation = importlib.import_module('numtools.core.interpolation')
errors = importlib.import_module('numtools.errors')

loginterpolator = loginterp.loginterpolator
Extrapolation = interpolation.Extrapolation

METHODS = ["loglog", "xlog", "ylog"]


@pytest.mark.parametrize("method", METHODS)
def test_round_trip_on_samples(power_law, method):
    x, y = power_law
    f = loginterpolator(x, y, method)
    for xi, yi in zip(x, y):
        assert f(xi) == pytest.approx(yi, rel=1e-12)


def test_xlog_round_trip_keeps_sign(signed_samples):
    x, y = signed_samples
    f = loginterpolator(x, y, "xlog")
    for xi, yi in zip(x, y):
        assert f(xi) == pytest.approx(yi, rel=1e-12, abs=1e-15)


def test_loglog_is_exact_for_power_laws(power_law):
    x, y = power_law
    f = loginterpolator(x, y)
    for xq in [2.0, 35.0, 777.0, 5000.0]:
        assert f(xq) == pytest.approx(xq ** -2.0, rel=1e-12)


def test_xlog_is_linear_in_log_x():
    f = loginterpolator([1.0, 100.0], [0.0, 2.0], "xlog")
    assert f(10.0) == pytest.approx(1.0, rel=1e-14)


def test_ylog_is_linear_in_log_y():
    f = loginterpolator([0.0, 2.0], [1.0, 100.0], "ylog")
    assert f(1.0) == pytest.approx(10.0, rel=1e-12)


def test_ylog_accepts_non_positive_queries():
    f = loginterpolator([-2.0, 0.0, 2.0], [1.0, 10.0, 100.0], "ylog")
    assert f(-1.0) == pytest.approx(math.sqrt(10.0), rel=1e-12)
    assert f(0.0) == pytest.approx(10.0, rel=1e-12)


def test_unknown_method():
    with pytest.raises(errors.InvalidArgument, match="Unknown method: spline"):
        loginterpolator([1.0, 2.0], [1.0, 2.0], "spline")


def test_mismatched_samples():
    with pytest.raises(errors.InvalidArgument):
        loginterpolator([1.0, 2.0, 3.0], [1.0, 2.0])


@pytest.mark.parametrize("method", ["loglog", "xlog"])
@pytest.mark.parametrize("xq", [0.0, -1.0])
def test_non_positive_query_warns_and_returns_zero(power_law, method, xq, caplog):
    x, y = power_law
    f = loginterpolator(x, y, method)
    with caplog.at_level(logging.WARNING, logger="numtools.core.loginterp"):
        assert f(xq) == 0.0
    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert method in record.getMessage()
    assert "non-positive" in record.getMessage()


def test_non_positive_query_goes_to_injected_logger(power_law, caplog):
    x, y = power_law
    sink = logging.getLogger("tests.sink")
    f = loginterpolator(x, y, logger=sink)
    with caplog.at_level(logging.WARNING, logger="tests.sink"):
        f(-3.0)
    assert [r.name for r in caplog.records] == ["tests.sink"]


def test_positive_query_does_not_warn(power_law, caplog):
    x, y = power_law
    f = loginterpolator(x, y)
    with caplog.at_level(logging.WARNING):
        f(10.0)
    assert caplog.records == []


@pytest.mark.parametrize("method", METHODS)
def test_throw_policy_raises_range_error(method):
    x = [1.0, 2.0, 4.0]
    y = [1.0, 3.0, 9.0]
    f = loginterpolator(x, y, method, Extrapolation.THROW)
    with pytest.raises(errors.RangeError):
        f(0.5)
    with pytest.raises(errors.RangeError):
        f(5.0)
    assert f(1.0) == pytest.approx(1.0)
    assert f(4.0) == pytest.approx(9.0)


def test_throw_policy_by_name():
    f = loginterpolator([1.0, 2.0], [1.0, 2.0], "ylog", "throw")
    assert f.extrapolation_bc is Extrapolation.THROW
    with pytest.raises(errors.RangeError):
        f(0.0)


@pytest.mark.parametrize("method", ["loglog", "ylog"])
def test_default_extrapolation_is_zero_for_log_y(power_law, method):
    x, y = power_law
    f = loginterpolator(x, y, method)
    assert f(0.5) == 0.0
    assert f(2e4) == 0.0


def test_default_extrapolation_of_xlog_is_zero(signed_samples):
    x, y = signed_samples
    f = loginterpolator(x, y, "xlog")
    assert f(0.5) == 0.0
    assert f(1e4) == 0.0


def test_numeric_extrapolation_level_xlog(signed_samples):
    x, y = signed_samples
    f = loginterpolator(x, y, "xlog", -5.0)
    assert f(0.5) == -5.0
    assert f(1e4) == -5.0


def test_numeric_extrapolation_is_in_log_space_for_loglog(power_law):
    x, y = power_law
    f = loginterpolator(x, y, "loglog", 0.0)
    assert f(2e4) == 1.0  # exp(0)


def test_minus_infinity_extrapolation_gives_zero_not_nan():
    x = [1.0, 2.0, 3.0, 4.0]
    y = [1.0, 0.0, 0.0, 1.0]
    f = loginterpolator(x, y, "loglog", -np.inf)
    value = f(2.5)
    assert value == 0.0
    assert not math.isnan(value)
    assert f(10.0) == 0.0


@pytest.mark.parametrize("method", ["loglog", "ylog"])
def test_negative_samples_are_clamped(clamped_samples, method):
    x, y = clamped_samples
    f = loginterpolator(x, y, method)
    assert f(1.0) == 0.0
    assert f(1.5) == 0.0
    assert f(2.0) == 0.0
    assert f(3.0) == pytest.approx(1.0)


def test_xlog_does_not_clamp(clamped_samples):
    x, y = clamped_samples
    f = loginterpolator(x, y, "xlog")
    assert f(1.0) == -1.0
    assert f(2.0) == 0.0


def test_array_queries(power_law, caplog):
    x, y = power_law
    f = loginterpolator(x, y)
    xq = np.array([-1.0, 0.0, 1.0, 100.0])
    with caplog.at_level(logging.WARNING, logger="numtools.core.loginterp"):
        out = f(xq)
    assert isinstance(out, np.ndarray)
    np.testing.assert_allclose(out, [0.0, 0.0, 1.0, 1e-4], rtol=1e-12)
    assert len(caplog.records) == 1


def test_introspection(power_law):
    x, y = power_law
    f = loginterpolator(x, y, "xlog")
    assert f.method == "xlog"
    assert f.extrapolation_bc == 0.0
    assert f.domain == (1.0, x[-1])
    assert "xlog" in repr(f)


def test_backend_is_injectable():
    calls = []

    def backend(xp, fp, extrapolation_bc):
        calls.append((list(xp), list(fp), extrapolation_bc))
        return lambda q: np.full(np.shape(q), 3.0)

    f = loginterpolator([1.0, 2.0], [5.0, 6.0], "xlog", backend=backend)
    assert f(1.5) == 3.0
    (xp, fp, bc), = calls
    assert xp == pytest.approx([0.0, math.log(2.0)])
    assert fp == [5.0, 6.0]
    assert bc == 0.0


def test_concurrent_calls_agree(power_law):
    x, y = power_law
    f = loginterpolator(x, y)
    queries = np.linspace(1.0, 1e4, 200)
    expected = f(queries)
    results = {}

    def worker(k):
        results[k] = f(queries)

    threads = [threading.Thread(target=worker, args=(k,)) for k in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    for out in results.values():
        np.testing.assert_array_equal(out, expected)


class Metres:
    """Tiny unit-carrying number: enough for the scale normalization."""

    def __init__(self, value):
        self.value = float(value)

    @property
    def units(self):
        return Metres(1.0)

    def __rmul__(self, factor):
        return Metres(factor * self.value)

    def __truediv__(self, other):
        if isinstance(other, Metres):
            return self.value / other.value
        return Metres(self.value / other)


def test_unit_carrying_values_are_normalized():
    x = [Metres(1.0), Metres(10.0), Metres(100.0)]
    y = [Metres(2.0), Metres(20.0), Metres(200.0)]
    f = loginterpolator(x, y)
    out = f(Metres(50.0))
    assert isinstance(out, Metres)
    assert out.value == pytest.approx(100.0, rel=1e-12)


def test_numeric_extrapolation_level_is_in_output_units():
    x = [Metres(1.0), Metres(10.0), Metres(100.0)]
    y = [Metres(-1.0), Metres(3.0), Metres(4.0)]
    f = loginterpolator(x, y, "xlog", Metres(5.0))
    assert f.extrapolation_bc == 5.0
    below, above = f(Metres(0.5)), f(Metres(1000.0))
    assert isinstance(above, Metres)
    assert below.value == 5.0
    assert above.value == 5.0


def test_numeric_extrapolation_level_with_units_applies_in_log_space():
    x = [Metres(1.0), Metres(10.0), Metres(100.0)]
    y = [Metres(2.0), Metres(20.0), Metres(200.0)]
    f = loginterpolator(x, y, "loglog", Metres(1.0))
    out = f(Metres(1000.0))
    assert isinstance(out, Metres)
    assert out.value == pytest.approx(math.e, rel=1e-15)


def test_series_with_shifted_index():
    df = pd.DataFrame({"x": [0.1, 0.5, 1.0, 10.0, 100.0], "y": [9.0, 9.0, 1.0, 1e-2, 1e-4]})
    sub = df[df.x >= 1.0]
    assert sub.index[0] == 2
    f = loginterpolator(sub["x"], sub["y"])
    assert f.domain == (1.0, 100.0)
    assert f(10.0) == pytest.approx(1e-2, rel=1e-12)
    assert f(0.5) == 0.0
