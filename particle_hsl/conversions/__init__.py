"""
Text conversions for HSL colours.

The text form is ``H°;S%;L%`` with one fraction digit per field, e.g.
``"120.0°;50.0%;25.0%"``. Parsing reads the numbers back as written and does
not rescale the percentage fields.
"""
from .text import format_hsl, parse_hsl_fields

__all__ = ["format_hsl", "parse_hsl_fields"]
