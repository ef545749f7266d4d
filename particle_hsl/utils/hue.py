"""
Channel normalization helpers.

Hue is circular and is wrapped into ``[0, 360)``; saturation and lightness are
linear and are clamped into ``[0, 1]``.
"""
from __future__ import annotations
import math
import numpy as np
from numpy import ndarray
from boundednumbers import UnitFloat
from ..types.color_types import HUE_360, Scalar


def normalize_hue(h: Scalar) -> float:
    """
    Wrap a hue in degrees into ``[0, 360)``.

    Negative hues are shifted up by whole turns, which is the same as adding
    360 until the value is non-negative. The remainder is taken with
    truncating division (``math.fmod``), not floor division.

    Non-finite input has no position on the circle and yields ``nan``.
    """
    h = float(h)
    if not math.isfinite(h):
        return math.nan
    wrapped = math.fmod(h, HUE_360)
    if wrapped < 0:
        wrapped += HUE_360
    # tiny negative remainders round up to a full turn
    if wrapped >= HUE_360:
        return 0.0
    return wrapped + 0.0  # drops the sign of -0.0


def np_normalize_hue(hue) -> ndarray:
    """Vectorized :func:`normalize_hue` for numpy arrays (float64 output)."""
    arr = np.asarray(hue, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        wrapped = np.fmod(arr, HUE_360)
    wrapped = np.where(wrapped < 0, wrapped + HUE_360, wrapped)
    wrapped = np.where(wrapped >= HUE_360, 0.0, wrapped)
    return wrapped + 0.0


def clamp_unit(value: Scalar) -> float:
    """Clamp a saturation/lightness value into ``[0, 1]``."""
    return float(UnitFloat(value))
