"""
Difference and interpolation for HSL colours.

Every result is built through the :class:`HslColor` constructor, so hue is
re-wrapped and saturation/lightness re-clamped. Importing this module also
installs ``-``, ``HslColor.difference`` and ``HslColor.lerp``.
"""
import numpy as np
from numpy import ndarray
from typing import Any, Union
from .hsl import HslColor
from ..errors import InvalidArgumentError
from ..types.color_types import HUE_360, UNIT_MIN, UNIT_MAX, Scalar
from ..utils.hue import np_normalize_hue


def _require_colors(**colors: Any) -> None:
    for name, color in colors.items():
        if not isinstance(color, HslColor):
            raise InvalidArgumentError(
                f"{name} must be an HslColor, got {type(color).__name__}"
            )


def difference(a: HslColor, b: HslColor) -> HslColor:
    """
    Channel-wise ``a - b``.

    Lossy: a negative hue wraps around and saturation/lightness clamp at 0,
    so ``difference(a, b)`` cannot be undone by adding ``b`` back.
    """
    _require_colors(a=a, b=b)
    return HslColor(
        a.hue - b.hue,
        a.saturation - b.saturation,
        a.lightness - b.lightness,
    )


def _forward_end_hue(h1: float, h2: float) -> float:
    # loop around if h2 < h1; always travels in increasing hue
    return h2 if h2 >= h1 else h2 + HUE_360


def lerp(c1: HslColor, c2: HslColor, t: Scalar) -> HslColor:
    """
    Interpolate from ``c1`` toward ``c2`` at ``t``.

    ``t`` is not clamped, so values outside ``[0, 1]`` extrapolate. Hue always
    moves in the increasing direction: 350 -> 10 passes through 360, never
    through 180. Lightness stays at ``c1.lightness``; its delta is taken as
    ``c2.lightness - c2.lightness``.
    """
    _require_colors(c1=c1, c2=c2)
    h2 = _forward_end_hue(c1.hue, c2.hue)
    return HslColor(
        c1.hue + t * (h2 - c1.hue),
        c1.saturation + t * (c2.saturation - c1.saturation),
        c1.lightness + t * (c2.lightness - c2.lightness),
    )


def np_lerp(c1: HslColor, c2: HslColor, t: Union[Scalar, ndarray]) -> ndarray:
    """
    Vectorized :func:`lerp` over an array of interpolation factors.

    Meant for particle batches where ``t`` holds each particle's lifetime
    fraction.

    Args:
        c1: Start colour.
        c2: End colour.
        t: Scalar or array of factors, not clamped.

    Returns:
        float64 array of shape ``t.shape + (3,)`` holding ``(h, s, l)`` rows,
        normalized the same way as the constructor.
    """
    _require_colors(c1=c1, c2=c2)
    t = np.asarray(t, dtype=np.float64)
    h2 = _forward_end_hue(c1.hue, c2.hue)

    hue = np_normalize_hue(c1.hue + t * (h2 - c1.hue))
    sat = np.clip(c1.saturation + t * (c2.saturation - c1.saturation), UNIT_MIN, UNIT_MAX)
    light = np.clip(c1.lightness + t * (c2.lightness - c2.lightness), UNIT_MIN, UNIT_MAX)
    return np.stack([hue, sat, light], axis=-1)


def _sub(self: HslColor, other: Any) -> HslColor:
    if not isinstance(other, HslColor):
        return NotImplemented
    return difference(self, other)


# Inject operators into HslColor
HslColor.__sub__ = _sub
HslColor.difference = staticmethod(difference)
HslColor.lerp = staticmethod(lerp)
