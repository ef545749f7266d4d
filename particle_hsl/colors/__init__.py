"""
HSL Colour Classes
==================

Immutable HSL colour values for particle colour animation.

Scalar Usage
------------
>>> from particle_hsl.colors import HslColor, lerp
>>> start = HslColor(350.0, 1.0, 0.5)
>>> end = HslColor(10.0, 0.5, 0.9)
>>> lerp(start, end, 0.25).value
(355.0, 0.875, 0.5)
>>> h, s, l = start

Array Usage
-----------
>>> import numpy as np
>>> from particle_hsl.colors import np_lerp
>>> np_lerp(start, end, np.array([0.0, 0.5])).shape
(2, 3)

Notes
-----
- Hue wraps into [0, 360); saturation and lightness clamp into [0, 1]
- Interpolated hue always travels in the increasing direction
- Interpolated lightness keeps the start colour's lightness
"""

from .color_base import ColorBase
from .hsl import HslColor
from .arithmetic import difference, lerp, np_lerp


__all__ = ['ColorBase', 'HslColor', 'difference', 'lerp', 'np_lerp']
