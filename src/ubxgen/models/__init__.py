"""Pydantic schema graph for ubxgen.

This module provides the Definitions/Message/Block/BitDef models and the
linking pass that attaches blocks and bit definitions to their parents.
"""

from __future__ import annotations

from .base import Hex, SchemaNode, parse_uint
from .definitions import BitDef, Block, Cardinality, Definitions, Message, link

__all__ = [
    "BitDef",
    "Block",
    "Cardinality",
    "Definitions",
    "Hex",
    "Message",
    "SchemaNode",
    "link",
    "parse_uint",
]
