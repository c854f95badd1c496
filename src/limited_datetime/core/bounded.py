"""
limited_datetime.core.bounded
-----------------------------
Closed-range integer value types.

Every scalar in the library (Year, Month, Hour, Days, ...) is a ``BoundedInt``
subclass that only fixes the class-level bounds and text width. Construction,
parsing, canonical text and fixed-width narrowing are shared here.

Fixed-width integers are numpy scalar types (``np.int8`` .. ``np.uint64``);
``narrow`` is the single range-checked conversion into any of them.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Type, TypeVar

import numpy as np

from .errors import InvalidDigitError, InvalidFormatError, InvalidLengthError, OutOfRangeError

B = TypeVar("B", bound="BoundedInt")

FIXED_WIDTH_TYPES = (
    np.int8, np.int16, np.int32, np.int64,
    np.uint8, np.uint16, np.uint32, np.uint64,
)


def narrow(value: int, dtype: Any) -> np.integer:
    """Convert ``value`` to the numpy integer type ``dtype`` or raise OutOfRangeError."""
    info = np.iinfo(dtype)
    value = operator.index(value)
    if not (info.min <= value <= info.max):
        raise OutOfRangeError(f"{value} does not fit in {info.dtype.name}")
    return info.dtype.type(value)


def parse_digits(text: str, width: Optional[int], *, field: str) -> int:
    """
    Decode an unsigned decimal string.

    width=None accepts any non-empty run of digits; otherwise the text must be
    exactly ``width`` characters long.
    """
    if width is None:
        if not text:
            raise InvalidLengthError(f"empty {field}", field=field)
    elif len(text) != width:
        raise InvalidLengthError(
            f"{field} must be {width} characters, got {len(text)}: {text!r}", field=field
        )
    n = 0
    for c in text:
        if not ("0" <= c <= "9"):
            raise InvalidDigitError(f"invalid digit {c!r} in {field} {text!r}", field=field)
        n = n * 10 + (ord(c) - 48)
    return n


@dataclass(frozen=True, order=True)
class BoundedInt:
    """
    Immutable integer restricted to [MIN, MAX].

    Subclasses set MIN, MAX, WIDTH (canonical zero-padded text width, or None
    for unpadded decimal) and FIELD (name used in error reports).
    """
    value: int

    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 0
    WIDTH: ClassVar[Optional[int]] = None
    FIELD: ClassVar[str] = "value"

    def __post_init__(self) -> None:
        if isinstance(self.value, (bool, np.bool_)):
            raise TypeError(f"{type(self).__name__} requires an integer, got bool")
        v = operator.index(self.value)
        if not (self.MIN <= v <= self.MAX):
            raise OutOfRangeError(
                f"{self.FIELD} {v} not in [{self.MIN}, {self.MAX}]", field=self.FIELD
            )
        object.__setattr__(self, "value", v)

    @classmethod
    def min(cls: Type[B]) -> B:
        return cls(cls.MIN)

    @classmethod
    def max(cls: Type[B]) -> B:
        return cls(cls.MAX)

    @classmethod
    def parse(cls: Type[B], text: str) -> B:
        return cls(parse_digits(text, cls.WIDTH, field=cls.FIELD))

    def __str__(self) -> str:
        if self.WIDTH is None:
            return str(self.value)
        return f"{self.value:0{self.WIDTH}d}"

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def pred(self: B) -> Optional[B]:
        if self.value > self.MIN:
            return type(self)(self.value - 1)
        return None

    def succ(self: B) -> Optional[B]:
        if self.value < self.MAX:
            return type(self)(self.value + 1)
        return None

    def to_fixed(self, dtype: Any) -> np.integer:
        """Narrow to a fixed-width numpy integer, e.g. ``Year(2021).to_fixed(np.int16)``."""
        try:
            return narrow(self.value, dtype)
        except OutOfRangeError as e:
            raise OutOfRangeError(str(e), field=self.FIELD) from None


def check_length(text: str, n: int, what: str) -> None:
    if len(text) != n:
        raise InvalidLengthError(f"{what} must be {n} characters, got {len(text)}: {text!r}", field=what)


def check_separator(text: str, i: int, sep: str, what: str) -> None:
    if text[i] != sep:
        raise InvalidFormatError(f"expected {sep!r} at position {i} of {what} {text!r}", field=what)
