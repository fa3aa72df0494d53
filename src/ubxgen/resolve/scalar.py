"""Scalar type resolution for UBX type codes.

A type code is a scalar code such as ``U4`` or ``R8``, optionally followed
by an array length: ``U1[6]``, ``CH[30]``. Resolution maps it to a
ScalarType describing the concrete fixed-width element type.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional

from ..exceptions import TypeResolutionError


class _Element(NamedTuple):
    name: str
    width: int
    signed: bool
    floating: bool
    struct_char: str


# Code -> element type. U1, CH and X1 share a layout; the code is the semantic tag.
SCALARS: Dict[str, _Element] = {
    "RU1_3": _Element("float8", 1, False, True, "B"),
    "R4": _Element("float32", 4, True, True, "f"),
    "R8": _Element("float64", 8, True, True, "d"),
    "I1": _Element("int8", 1, True, False, "b"),
    "U1": _Element("byte", 1, False, False, "B"),
    "CH": _Element("byte", 1, False, False, "c"),
    "X1": _Element("byte", 1, False, False, "B"),
    "I2": _Element("int16", 2, True, False, "h"),
    "U2": _Element("uint16", 2, False, False, "H"),
    "X2": _Element("uint16", 2, False, False, "H"),
    "I4": _Element("int32", 4, True, False, "i"),
    "U4": _Element("uint32", 4, False, False, "I"),
    "X4": _Element("uint32", 4, False, False, "I"),
    "I8": _Element("int64", 8, True, False, "q"),
    "U8": _Element("uint64", 8, False, False, "Q"),
}

_CTYPE = re.compile(r"([A-Z0-9_]+)(?:\[([0-9]+)\])?")
_SCALAR_PREFIX = re.compile(r"[A-Z0-9_]+")


@dataclass(frozen=True)
class ScalarType:
    """Concrete type of a scalar field.

    Attributes:
        code: Protocol type code without array suffix (semantic tag)
        name: Element type name, e.g. "uint32" or "float8"
        width: Element width in bytes
        signed: Whether the element is signed
        floating: Whether the element is a floating-point value
        array_len: Array length, or None for a plain scalar
    """

    code: str
    name: str
    width: int
    signed: bool
    floating: bool
    array_len: Optional[int] = None

    @property
    def is_array(self) -> bool:
        return self.array_len is not None

    @property
    def is_bitmask(self) -> bool:
        """Whether the code denotes a bit-packed field (X1, X2, X4)."""
        return self.code.startswith("X")

    @property
    def size(self) -> int:
        """Total size in bytes, including the array length."""
        return self.width * (self.array_len if self.array_len is not None else 1)

    @property
    def struct_format(self) -> str:
        """Python ``struct`` format for the field, without byte-order prefix.

        Character arrays map to ``Ns`` so they unpack as one bytes value.
        """
        char = SCALARS[self.code].struct_char
        if self.array_len is None:
            return char
        if self.code == "CH":
            return f"{self.array_len}s"
        return f"{self.array_len}{char}"

    def __str__(self) -> str:
        if self.array_len is None:
            return self.name
        return f"{self.name}[{self.array_len}]"


def resolve_type(ctype: str) -> ScalarType:
    """Resolve a type code to a ScalarType.

    Args:
        ctype: Type code, ``<SCALAR>`` or ``<SCALAR>[<N>]``; surrounding
            whitespace is ignored

    Returns:
        Resolved scalar type

    Raises:
        TypeResolutionError: If the code is unknown or malformed

    Example:
        >>> t = resolve_type("U4[12]")
        >>> t.name, t.array_len, t.size
        ('uint32', 12, 48)
    """
    text = ctype.strip()
    match = _CTYPE.fullmatch(text)

    if match is None:
        prefix = _SCALAR_PREFIX.match(text)
        if prefix is not None and prefix.group() in SCALARS:
            suffix = text[prefix.end() :]
            raise TypeResolutionError(
                f"Cannot parse {ctype!r} as ctype([arraylen]) (invalid array suffix {suffix!r})",
                text=ctype,
                part=suffix,
            )
        raise TypeResolutionError(f"Cannot parse {ctype!r} as ctype([arraylen])", text=ctype)

    code, length = match.group(1), match.group(2)
    element = SCALARS.get(code)
    if element is None:
        raise TypeResolutionError(
            f"Cannot parse {ctype!r} as a ctype (invalid scalar part {code!r})",
            text=ctype,
            part=code,
        )

    return ScalarType(
        code=code,
        name=element.name,
        width=element.width,
        signed=element.signed,
        floating=element.floating,
        array_len=int(length) if length is not None else None,
    )
