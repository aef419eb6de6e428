import numpy as np
import pytest

from core.errors import InvalidWindow
from core.series import SmoothedPoint
from core.smoothing import moving_average, smooth


def test_window_one_is_identity():
    values = [0.1, 0.2, 0.3, 7.5]
    out = moving_average(values, 1)
    assert np.array_equal(out, np.asarray(values))


def test_trailing_window():
    out = moving_average([1, 2, 3, 4, 5], 3)
    assert np.allclose(out, [1.0, 1.5, 2.0, 3.0, 4.0])


def test_window_longer_than_series():
    values = [1.0, 2.0, 3.0, 4.0]
    out = moving_average(values, 10)
    assert np.allclose(out, [1.0, 1.5, 2.0, 2.5])
    assert out[-1] == pytest.approx(sum(values) / len(values))


@pytest.mark.parametrize("n,window", [(1, 3), (10, 3), (50, 7), (7, 50)])
def test_length_preserved(n, window):
    assert len(moving_average(list(range(n)), window)) == n


def test_matches_loop_reference():
    rng = np.random.default_rng(3)
    values = rng.normal(100, 5, size=200)
    window = 12
    ref = [values[max(0, i - window + 1): i + 1].mean() for i in range(len(values))]
    assert np.allclose(moving_average(values, window), ref)


def test_empty_series():
    assert moving_average([], 5).size == 0


@pytest.mark.parametrize("window", [0, -1])
def test_bad_window(window):
    with pytest.raises(InvalidWindow):
        moving_average([1.0], window)


def test_smooth_points():
    pts = smooth([100, 200, 300], [2.0, 4.0, 6.0], 2)
    assert pts == [SmoothedPoint(100, 2.0), SmoothedPoint(200, 3.0), SmoothedPoint(300, 5.0)]


def test_smooth_length_mismatch():
    with pytest.raises(ValueError):
        smooth([1, 2], [1.0], 2)


def test_long_window_over_large_series():
    n = 200_000
    out = moving_average(np.ones(n), n)
    assert out.shape == (n,)
    assert np.allclose(out, 1.0)
    ramp = np.arange(1, 10_001, dtype=float)
    out = moving_average(ramp, 50_000)
    assert out[-1] == pytest.approx(ramp.mean())
    assert out[9] == pytest.approx(5.5)


def test_nan_propagates_only_inside_its_window():
    nan = float("nan")
    out = moving_average([1.0, nan, 3.0, 5.0], 2)
    assert out[0] == 1.0
    assert np.isnan(out[1])
    assert np.isnan(out[2])
    assert out[3] == 4.0
    assert np.isnan(moving_average([1.0, nan, 3.0], 1)[1])
