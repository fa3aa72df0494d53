"""Schema document loading for ubxgen.

This module turns the XML message schema into the linked Definitions graph.
"""

from __future__ import annotations

from .loader import compile_definitions, load_definitions, loads_definitions

__all__ = [
    "compile_definitions",
    "load_definitions",
    "loads_definitions",
]
