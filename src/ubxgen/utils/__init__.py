"""Utility functions for ubxgen.

This module provides the naming helpers used when rendering templates.
"""

from __future__ import annotations

from .naming import lower, msgtypename, notabs, title, upper

__all__ = [
    "lower",
    "msgtypename",
    "notabs",
    "title",
    "upper",
]
