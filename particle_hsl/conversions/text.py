from __future__ import annotations
import logging
import math
from typing import List
from ..errors import ColorFormatError
from ..types.color_types import (
    HslTuple, Scalar,
    FIELD_SEPARATOR, DEGREE_SIGN, PERCENT_SIGN, TEXT_PRECISION,
)

logger = logging.getLogger(__name__)

CHANNEL_NAMES = ("hue", "saturation", "lightness")


def format_hsl(h: Scalar, s: Scalar, l: Scalar) -> str:
    """
    Format channels as ``H°;S%;L%``.

    Saturation and lightness are shown as percentages (multiplied by 100).
    Python's format mini-language ignores the locale, so the decimal point is
    always ``.``.
    """
    p = TEXT_PRECISION
    return (
        f"{h:.{p}f}{DEGREE_SIGN}{FIELD_SEPARATOR}"
        f"{100 * s:.{p}f}{PERCENT_SIGN}{FIELD_SEPARATOR}"
        f"{100 * l:.{p}f}{PERCENT_SIGN}"
    )


def _parse_field(field: str, channel: str, suffix: str, text: str) -> float:
    stripped = field.strip().rstrip(suffix)
    try:
        # float() also takes "1_0"; other readers of this format do not
        if "_" in stripped:
            raise ValueError(f"digit separators are not allowed: {stripped!r}")
        value = float(stripped)
        if not math.isfinite(value):
            raise ValueError(f"non-finite value: {stripped!r}")
    except ValueError as exc:
        logger.debug("Rejected %s field %r in %r", channel, field, text)
        raise ColorFormatError(
            f"Invalid {channel} value {field!r} in HSL text {text!r}", text
        ) from exc
    return value


def parse_hsl_fields(text: str) -> HslTuple:
    """
    Split ``H°;S%;L%`` text into three raw floats.

    The trailing degree sign on the hue and percent signs on the other fields
    are optional. Values are returned unscaled: ``"50.0%"`` reads as ``50.0``.
    Non-finite tokens such as ``nan`` or ``inf`` are rejected.
    Fields after the third are ignored.

    Raises:
        ColorFormatError: fewer than three fields, or a field is not a finite number.
    """
    if not isinstance(text, str):
        logger.debug("Rejected non-string HSL input of type %s", type(text).__name__)
        raise ColorFormatError(
            f"HSL text must be a string, got {type(text).__name__}", text
        )

    fields: List[str] = text.split(FIELD_SEPARATOR)
    if len(fields) < len(CHANNEL_NAMES):
        logger.debug("Rejected HSL text %r: %d field(s)", text, len(fields))
        raise ColorFormatError(
            f"HSL text {text!r} needs {len(CHANNEL_NAMES)} "
            f"'{FIELD_SEPARATOR}'-separated fields, got {len(fields)}",
            text,
        )

    h = _parse_field(fields[0], "hue", DEGREE_SIGN, text)
    s = _parse_field(fields[1], "saturation", PERCENT_SIGN, text)
    l = _parse_field(fields[2], "lightness", PERCENT_SIGN, text)
    return h, s, l
