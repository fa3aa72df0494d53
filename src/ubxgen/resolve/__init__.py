"""Type and bit-mask resolution for ubxgen.

This module provides the pure functions templates use to turn scalar type
codes and bit specifiers into concrete layouts.
"""

from __future__ import annotations

from .bitmask import bit_range, bit_shift, mask, mask_value
from .scalar import SCALARS, ScalarType, resolve_type

__all__ = [
    # Scalar types
    "SCALARS",
    "ScalarType",
    "resolve_type",
    # Bit masks
    "bit_range",
    "bit_shift",
    "mask",
    "mask_value",
]
