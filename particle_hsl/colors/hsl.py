from __future__ import annotations
from typing import ClassVar, Tuple
from .color_base import ColorBase
from ..conversions.text import format_hsl, parse_hsl_fields
from ..types.color_types import ColorSpace, Scalar, HUE_360, UNIT_MAX
from ..utils.hue import normalize_hue, clamp_unit


class HslColor(ColorBase):
    """
    Immutable HSL colour with float channels.

    ``hue`` is wrapped into ``[0, 360)``; ``saturation`` and ``lightness`` are
    clamped into ``[0, 1]``. Both happen once, in the constructor.

    >>> HslColor(-30, 2, -1)
    HslColor(hue=330.0, saturation=1.0, lightness=0.0)
    >>> str(HslColor(120, 0.5, 0.25))
    '120.0°;50.0%;25.0%'
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = "hsl"
    maxima:     ClassVar[Tuple[float, float, float]] = (HUE_360, UNIT_MAX, UNIT_MAX)
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)

    def __init__(self, hue: Scalar, saturation: Scalar, lightness: Scalar) -> None:
        self._freeze((
            normalize_hue(hue),
            clamp_unit(saturation),
            clamp_unit(lightness),
        ))

    @property
    def hue(self) -> float:
        return self._channels[0]

    @property
    def saturation(self) -> float:
        return self._channels[1]

    @property
    def lightness(self) -> float:
        return self._channels[2]

    @classmethod
    def parse(cls, text: str) -> HslColor:
        """
        Build a colour from ``H°;S%;L%`` text.

        The numbers are used as written, so percentage fields are not divided
        by 100 and are clamped like any other out-of-range input:
        ``HslColor.parse("120°;0.5;0.25")`` gives ``HslColor(120, 0.5, 0.25)``
        but ``HslColor.parse("120.0°;50.0%;25.0%")`` gives
        ``HslColor(120, 1, 1)``.

        Raises:
            ColorFormatError: see :func:`parse_hsl_fields`.
        """
        return cls(*parse_hsl_fields(text))

    def to_string(self) -> str:
        return format_hsl(*self._channels)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        h, s, l = self._channels
        return f"{self.__class__.__name__}(hue={h!r}, saturation={s!r}, lightness={l!r})"
