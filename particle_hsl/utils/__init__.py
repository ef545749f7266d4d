from .hue import normalize_hue, np_normalize_hue, clamp_unit

__all__ = ["normalize_hue", "np_normalize_hue", "clamp_unit"]
