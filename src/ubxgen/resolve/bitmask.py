"""Bit index and bit range to mask conversion.

A bitfield member is located either by a single bit index (``"3"``) or by an
inclusive ``hi:lo`` range (``"7:4"``). All operations are pure.

By default malformed specifiers raise BitIndexError. With ``strict=False``
they are read leniently instead: a component that does not parse
reads as 0, one above 255 reads as 255, and the mask is truncated to 64
bits.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..exceptions import BitIndexError

MAX_BIT = 63
_MASK64 = (1 << 64) - 1


def _parse_index(text: str, spec: str, strict: bool) -> int:
    literal = text.strip()
    value: Optional[int] = None
    if literal.isascii() and literal[:1] not in ("+", "-"):
        try:
            value = int(literal, 0)
        except ValueError:
            pass
    if value is None:
        if strict:
            raise BitIndexError(f"invalid bit index {text!r} in {spec!r}")
        return 0

    if strict and not 0 <= value <= MAX_BIT:
        raise BitIndexError(f"bit index {value} in {spec!r} outside 0-{MAX_BIT}")
    # Lenient: indices are 8-bit and overflow saturates
    return min(value, 0xFF)


def bit_range(spec: str, *, strict: bool = True) -> Tuple[int, int]:
    """Split a bit specifier into its inclusive (hi, lo) bounds.

    Args:
        spec: Bit index ("3") or inclusive range ("7:4")
        strict: Raise on malformed specifiers instead of reading them as 0

    Returns:
        (hi, lo) tuple; a single index gives (i, i)

    Raises:
        BitIndexError: In strict mode, if a component is not an integer,
            lies outside 0-63, or the range is inverted
    """
    parts = spec.split(":")
    if len(parts) == 2:
        hi = _parse_index(parts[0], spec, strict)
        lo = _parse_index(parts[1], spec, strict)
        if strict and hi < lo:
            raise BitIndexError(f"inverted bit range {spec!r} (hi < lo)")
        return hi, lo

    if strict and len(parts) > 2:
        raise BitIndexError(f"invalid bit range {spec!r}")
    index = _parse_index(spec, spec, strict)
    return index, index


def bit_shift(spec: str, *, strict: bool = True) -> int:
    """Return the position of the lowest bit of a specifier."""
    return bit_range(spec, strict=strict)[1]


def mask_value(spec: str, *, strict: bool = True) -> int:
    """Compute the mask with exactly the specified bits set.

    Example:
        >>> mask_value("7:4")
        240
    """
    hi, lo = bit_range(spec, strict=strict)
    return (((1 << (hi + 1)) - 1) ^ ((1 << lo) - 1)) & _MASK64


def mask(spec: str, *, strict: bool = True) -> str:
    """Render the mask of a bit specifier as a hexadecimal literal.

    Example:
        >>> mask("3"), mask("7:4")
        ('0x8', '0xf0')
    """
    return f"0x{mask_value(spec, strict=strict):x}"
