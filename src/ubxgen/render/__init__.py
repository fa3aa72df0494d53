"""Template rendering for ubxgen.

This module renders the compiled schema through a Jinja2 template.
"""

from __future__ import annotations

from .engine import (
    BUILTIN_TEMPLATES,
    Renderer,
    generated_marker,
    render,
    resolve_template_path,
    template_functions,
)

__all__ = [
    "BUILTIN_TEMPLATES",
    "Renderer",
    "generated_marker",
    "render",
    "resolve_template_path",
    "template_functions",
]
