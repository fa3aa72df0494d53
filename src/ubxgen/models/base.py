"""Base model and shared field types for the schema graph.

Every node of the compiled schema (Definitions, Message, Block, BitDef) is
a frozen Pydantic model: once the document has been loaded and linked the
graph is only ever read.
"""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict

UINT64_MAX = (1 << 64) - 1

# Leading-zero literals are octal, as in a base-0 parse that predates "0o".
_LEGACY_OCTAL = re.compile(r"0[0-7_]+")


def parse_uint(value: Any) -> int:
    """Parse an unsigned 64-bit integer literal.

    Accepts decimal, ``0x`` hex, ``0o``/leading-zero octal and ``0b`` binary
    text, with optional ``_`` separators. Surrounding whitespace is ignored.

    Args:
        value: Literal text (ints are passed through after a range check)

    Returns:
        Parsed value

    Raises:
        ValueError: If the text is not a valid unsigned integer literal or
            the value does not fit in 64 bits

    Example:
        >>> parse_uint("0x01"), parse_uint("1")
        (1, 1)
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid unsigned integer literal {value!r}")

    if isinstance(value, int):
        result = value
    elif isinstance(value, str):
        literal = value.strip()
        if not literal.isascii() or literal[:1] in ("+", "-"):
            raise ValueError(f"invalid unsigned integer literal {value!r}")
        try:
            if _LEGACY_OCTAL.fullmatch(literal):
                result = int(literal, 8)
            else:
                result = int(literal, 0)
        except ValueError:
            raise ValueError(f"invalid unsigned integer literal {value!r}") from None
    else:
        raise ValueError(f"invalid unsigned integer literal {value!r}")

    if not 0 <= result <= UINT64_MAX:
        raise ValueError(f"value {value!r} out of range for an unsigned 64-bit integer")
    return result


# Unsigned 64-bit value given as decimal or 0x-hex text in the document
Hex = Annotated[int, BeforeValidator(parse_uint)]


class SchemaNode(BaseModel):
    """Base class for all nodes of the schema graph."""

    model_config = ConfigDict(
        # Graph is read-only after loading; links live in private attributes
        frozen=True,
        # Forbid keys the document mapping does not know about
        extra="forbid",
        strict=False,
    )
