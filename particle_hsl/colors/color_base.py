from __future__ import annotations
from typing import Any, ClassVar, Iterator, Optional, Tuple
from ..errors import InvalidArgumentError
from ..types.color_types import (
    ColorSpace, HslTuple, ChannelCallback, ChannelMapper, T,
)


class ColorBase:
    """
    Frozen three-channel value.

    Subclasses normalize their channels in ``__init__`` and call
    :meth:`_freeze`; after that every attribute write raises.
    """
    __slots__ = ('_channels', '_is_frozen')  # no __dict__ → immutability

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    maxima:     ClassVar[Tuple[float, ...]]
    null_value: ClassVar[Tuple[float, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def _freeze(self, channels: HslTuple) -> None:
        self._channels = channels
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> HslTuple:
        return self._channels

    def destructure(self) -> HslTuple:
        """Return the channels as a tuple, without normalizing them again."""
        return self._channels

    to_tuple = destructure

    def __iter__(self) -> Iterator[float]:
        return iter(self._channels)

    def __len__(self) -> int:
        return self.num_channels

    def copy(self):
        """Return an equal, distinct instance."""
        return self.__class__(*self._channels)

    # ------------------ CHANNEL CONSUMERS ------------------
    def match(self, callback: Optional[ChannelCallback]) -> None:
        """
        Pass the channels to ``callback`` for side effects.

        Raises:
            InvalidArgumentError: ``callback`` is None or not callable.
        """
        _require_callable(callback, "callback")
        callback(*self._channels)

    def map(self, fn: Optional[ChannelMapper[T]]) -> T:
        """
        Pass the channels to ``fn`` and return what it returns.

        Raises:
            InvalidArgumentError: ``fn`` is None or not callable.
        """
        _require_callable(fn, "fn")
        return fn(*self._channels)

    # ------------------ EQUALITY ------------------
    def equals(self, other: Any) -> bool:
        """Exact channel-wise equality; no tolerance is applied."""
        if not isinstance(other, ColorBase) or other.mode != self.mode:
            return False
        return self._channels == other._channels

    def __eq__(self, other):
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._channels)

    def __reduce__(self):
        return (self.__class__, self._channels)


def _require_callable(fn: Any, name: str) -> None:
    if fn is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if not callable(fn):
        raise InvalidArgumentError(f"{name} must be callable, got {type(fn).__name__}")
