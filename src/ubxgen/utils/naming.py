"""Identifier helpers for generated code.

These turn raw schema strings into text that is safe to embed in generated
source: single-line comments, type names and constants.
"""

from __future__ import annotations

import re

_WHITESPACE = str.maketrans({"\t": " ", "\n": " "})
_WORD_START = re.compile(r"\b\w")


def notabs(text: str) -> str:
    """Replace each tab and newline with a space.

    Example:
        >>> notabs("Position\\tsolution\\nin LLH")
        'Position solution in LLH'
    """
    return text.translate(_WHITESPACE)


def title(text: str) -> str:
    """Upper-case the first letter of every word.

    Words are runs of letters, digits and underscores; the rest of each word
    is left untouched, so ``"sv_info 2d"`` becomes ``"Sv_info 2d"``.
    """
    return _WORD_START.sub(lambda m: m.group().upper(), text)


def msgtypename(name: str) -> str:
    """Derive a type name from a hyphenated message name.

    The name is lower-cased and split on ``-``; each segment is title-cased
    and all segments after the first (the message class) are joined.

    Example:
        >>> msgtypename("NAV-POSLLH")
        'Posllh'
        >>> msgtypename("MGA-GPS-EPH")
        'GpsEph'
    """
    parts = [title(part) for part in name.lower().split("-")]
    return "".join(parts[1:])


def lower(text: str) -> str:
    return text.lower()


def upper(text: str) -> str:
    return text.upper()
