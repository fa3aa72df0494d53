"""Exception hierarchy for ubxgen.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from UbxgenError so a caller can abort a compilation
on any ubxgen-specific failure with a single handler.
"""

from __future__ import annotations

from typing import Optional


class UbxgenError(Exception):
    """Base exception for all ubxgen errors."""

    pass


class SchemaError(UbxgenError):
    """Raised when the schema document does not have the expected shape.

    Examples:
        - Document is not well-formed XML
        - Message without <Name>, <Structure>/<Class> or <Structure>/<Id>
        - Class or id text that is not an unsigned integer literal
        - Unknown block cardinality
    """

    pass


class BitIndexError(SchemaError):
    """Raised when a bitfield index specifier cannot be turned into a mask.

    Examples:
        - Non-numeric index ("a:b")
        - Inverted range ("3:7")
        - Index beyond bit 63
    """

    pass


class TypeResolutionError(UbxgenError):
    """Raised when a scalar type code is unknown or malformed.

    Attributes:
        text: The type code text that failed to resolve
        part: The part of the text that failed, when the scalar part was
            recognized but the rest of the text was not
    """

    def __init__(self, message: str, *, text: str, part: Optional[str] = None) -> None:
        super().__init__(message)
        self.text = text
        self.part = part


class LinkError(UbxgenError):
    """Raised when a back-reference is requested from an unlinked entity."""

    pass


class RenderError(UbxgenError):
    """Raised when the template cannot be loaded or rendering fails.

    Examples:
        - Template file not found
        - Jinja2 syntax error in the template
        - Template refers to an undefined name
    """

    pass
