from __future__ import annotations
from typing import Callable, Literal, Tuple, TypeVar

Scalar = int | float
HslTuple = Tuple[float, float, float]
ColorSpace = Literal["hsl"]

T = TypeVar("T")
ChannelCallback = Callable[[float, float, float], None]
ChannelMapper = Callable[[float, float, float], T]

HUE_360 = 360.0
UNIT_MIN = 0.0
UNIT_MAX = 1.0

# Text form: "H°;S%;L%"
FIELD_SEPARATOR = ";"
DEGREE_SIGN = "°"
PERCENT_SIGN = "%"
TEXT_PRECISION = 1
