"""Parameter types for typed named parameters (``:id:int``).

Each ParamType answers one question: is this raw URL segment
syntactically valid for the type? The value is never retained in
converted form; the raw text is what gets bound.

Syntax is checked with precompiled ``google-re2`` patterns (linear-time,
no backtracking); numeric ranges are checked with Python ints/floats.
Whitespace, underscores and empty strings are rejected even where
``int()``/``float()`` would tolerate them.
"""

from __future__ import annotations

import math
import struct
import uuid
from enum import StrEnum
from functools import partial
from typing import TYPE_CHECKING

import re2

if TYPE_CHECKING:
    from collections.abc import Callable

_SIGNED_INT = re2.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re2.compile(r"\+?[0-9]+")
_FLOAT = re2.compile(
    r"(?i)[+-]?(?:[0-9]+\.?[0-9]*(?:e[+-]?[0-9]+)?|\.[0-9]+(?:e[+-]?[0-9]+)?|inf|infinity|nan)"
)
_NON_FINITE = re2.compile(r"(?i)[+-]?(?:inf|infinity|nan)")


class ParamType(StrEnum):
    """Built-in parameter type tags.

    >>> ParamType("int").accepts("42")
    True
    >>> ParamType.UBYTE.accepts("256")
    False
    """

    BYTE = "byte"
    UBYTE = "ubyte"
    SHORT = "short"
    USHORT = "ushort"
    INT = "int"
    UINT = "uint"
    LONG = "long"
    ULONG = "ulong"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"
    UUID = "uuid"

    def accepts(self, text: str) -> bool:
        """Return True if *text* parses as this type."""
        return _VALIDATORS[self](text)


# 2**64 has 20 decimal digits; longer magnitudes are out of range for every kind.
_MAX_INT_DIGITS = 20


def _int_value(pattern: re2.Pattern[str], text: str) -> int | None:
    if pattern.fullmatch(text) is None:
        return None
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_INT_DIGITS:
        return None
    # int() on the stripped digits only; leading zeros count toward its digit limit
    return -int(digits) if text.startswith("-") else int(digits)


def _accepts_signed(bits: int, text: str) -> bool:
    value = _int_value(_SIGNED_INT, text)
    if value is None:
        return False
    limit = 1 << (bits - 1)
    return -limit <= value < limit


def _accepts_unsigned(bits: int, text: str) -> bool:
    value = _int_value(_UNSIGNED_INT, text)
    return value is not None and value < (1 << bits)


def _accepts_double(text: str) -> bool:
    if _FLOAT.fullmatch(text) is None:
        return False
    # float() maps out-of-range literals to inf; only spelled-out infinities count
    return not math.isinf(float(text)) or _NON_FINITE.fullmatch(text) is not None


def _accepts_float(text: str) -> bool:
    if not _accepts_double(text):
        return False
    value = float(text)
    if not math.isfinite(value):
        return True
    try:
        struct.pack("<f", value)
    except OverflowError:
        return False
    return True


def _accepts_bool(text: str) -> bool:
    return text.isascii() and text.lower() in ("true", "false")


def _accepts_uuid(text: str) -> bool:
    try:
        uuid.UUID(text)
    except ValueError:
        return False
    return True


_VALIDATORS: dict[ParamType, Callable[[str], bool]] = {
    ParamType.BYTE: partial(_accepts_signed, 8),
    ParamType.UBYTE: partial(_accepts_unsigned, 8),
    ParamType.SHORT: partial(_accepts_signed, 16),
    ParamType.USHORT: partial(_accepts_unsigned, 16),
    ParamType.INT: partial(_accepts_signed, 32),
    ParamType.UINT: partial(_accepts_unsigned, 32),
    ParamType.LONG: partial(_accepts_signed, 64),
    ParamType.ULONG: partial(_accepts_unsigned, 64),
    ParamType.FLOAT: _accepts_float,
    ParamType.DOUBLE: _accepts_double,
    ParamType.BOOL: _accepts_bool,
    ParamType.UUID: _accepts_uuid,
}
