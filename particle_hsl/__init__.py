"""particle_hsl: immutable HSL colours for particle effects."""

from .colors import ColorBase, HslColor, difference, lerp, np_lerp
from .conversions import format_hsl, parse_hsl_fields
from .errors import InvalidArgumentError, ColorFormatError
from .utils import normalize_hue, np_normalize_hue, clamp_unit

__version__ = "1.0.0"

__all__ = [
    # colour type
    "ColorBase",
    "HslColor",
    # operations
    "difference",
    "lerp",
    "np_lerp",
    # text
    "format_hsl",
    "parse_hsl_fields",
    # errors
    "InvalidArgumentError",
    "ColorFormatError",
    # utilities
    "normalize_hue",
    "np_normalize_hue",
    "clamp_unit",
    "__version__",
]
