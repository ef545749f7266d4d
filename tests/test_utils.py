import math
import numpy as np
from particle_hsl.utils import normalize_hue, np_normalize_hue, clamp_unit
from samples import samples_hue, samples_unit


def test_normalize_hue_samples():
    for h, expected in samples_hue.items():
        assert normalize_hue(h) == expected, h


def test_normalize_hue_in_range():
    for h in [-1e6, -721.5, -360.0, -359.999, -0.5, -1e-20, 0.0, 0.5, 359.999, 360.0, 1e6]:
        result = normalize_hue(h)
        assert 0.0 <= result < 360.0, h


def test_normalize_hue_full_turn_invariant():
    for h in [-725.25, -360.0, -30.0, 0.0, 12.5, 180.0, 359.0, 1000.0]:
        assert normalize_hue(h) == normalize_hue(h + 360.0)


def test_normalize_hue_no_negative_zero():
    for h in [-0.0, -360.0, -720.0]:
        assert math.copysign(1.0, normalize_hue(h)) == 1.0


def test_normalize_hue_accepts_int():
    result = normalize_hue(-30)
    assert isinstance(result, float)
    assert result == 330.0


def test_normalize_hue_non_finite():
    assert math.isnan(normalize_hue(math.inf))
    assert math.isnan(normalize_hue(-math.inf))
    assert math.isnan(normalize_hue(math.nan))


def test_np_normalize_hue_matches_scalar():
    hues = np.array(list(samples_hue.keys()))
    expected = np.array(list(samples_hue.values()))
    result = np_normalize_hue(hues)
    assert result.dtype == np.float64
    assert np.allclose(result, expected)
    for h, r in zip(hues, result):
        assert r == normalize_hue(h)


def test_np_normalize_hue_range():
    hues = np.linspace(-2000.0, 2000.0, 4001)
    result = np_normalize_hue(hues)
    assert np.all(result >= 0.0)
    assert np.all(result < 360.0)


def test_clamp_unit_samples():
    for v, expected in samples_unit.items():
        result = clamp_unit(v)
        assert type(result) is float
        assert result == expected, v
