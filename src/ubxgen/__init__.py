"""ubxgen: UBX message schema compiler

Compiles an XML description of a UBX-style binary message family (class/id
framed messages with fixed and repeated fields, nested groups and packed
bitfields) into a linked, type-resolved model, and renders it through a
Jinja2 template to generate encode/decode code.

Key Features:
- Pydantic-based schema graph with arena-style back-references
- Scalar type resolution for UBX type codes (U4, R8, CH[30], ...)
- Bit index / bit range to mask conversion for bitfields
- Naming helpers for generated identifiers

Quick Start:
    >>> from ubxgen import Renderer, compile_definitions, resolve_type, mask
    >>>
    >>> definitions = compile_definitions("messages.xml")
    >>> resolve_type("U4[12]").size
    48
    >>> mask("7:4")
    '0xf0'
    >>> source = Renderer("python").render(definitions)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import GeneratorConfig
from .exceptions import (
    BitIndexError,
    LinkError,
    RenderError,
    SchemaError,
    TypeResolutionError,
    UbxgenError,
)
from .models import BitDef, Block, Cardinality, Definitions, Message, link, parse_uint
from .render import Renderer, generated_marker
from .resolve import ScalarType, bit_range, bit_shift, mask, mask_value, resolve_type
from .schema import compile_definitions, load_definitions, loads_definitions
from .utils import lower, msgtypename, notabs, title, upper

__all__ = [
    # Schema graph
    "Definitions",
    "Message",
    "Block",
    "BitDef",
    "Cardinality",
    "link",
    "parse_uint",
    # Loading
    "load_definitions",
    "loads_definitions",
    "compile_definitions",
    # Type resolution
    "ScalarType",
    "resolve_type",
    # Bit masks
    "bit_range",
    "bit_shift",
    "mask",
    "mask_value",
    # Naming
    "lower",
    "upper",
    "title",
    "notabs",
    "msgtypename",
    # Rendering
    "GeneratorConfig",
    "Renderer",
    "generated_marker",
    # Exceptions
    "UbxgenError",
    "SchemaError",
    "BitIndexError",
    "TypeResolutionError",
    "LinkError",
    "RenderError",
    # Version
    "__version__",
]
