"""Jinja2 rendering of a compiled schema.

The template sees the linked Definitions graph as ``definitions`` (and its
messages as ``messages``) plus the naming and resolution helpers, which are
registered both as filters and as global functions::

    {% for m in messages %}
    type {{ m.name | msgtypename }} struct {
    {% for b in m.blocks %}
        {{ b.name | title }} {{ ctype(b.type) }}
    {% endfor %}
    }
    {% endfor %}

The output always starts with a generated-file marker line.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import jinja2

from ..config import GeneratorConfig
from ..exceptions import RenderError
from ..models.definitions import Definitions
from ..resolve.bitmask import bit_shift, mask
from ..resolve.scalar import resolve_type
from ..utils.naming import lower, msgtypename, notabs, title, upper

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

# Templates shipped with the package, by short name
BUILTIN_TEMPLATES: Dict[str, str] = {
    "python": "python.py.j2",
}


def template_functions(config: GeneratorConfig) -> Dict[str, Callable[..., Any]]:
    """Build the helper functions exposed to templates.

    Args:
        config: Generator configuration (controls mask strictness)

    Returns:
        Mapping of template name to callable
    """
    return {
        "lower": lower,
        "upper": upper,
        "title": title,
        "notabs": notabs,
        "msgtypename": msgtypename,
        "ctype": resolve_type,
        "mask": functools.partial(mask, strict=config.strict_masks),
        "bitshift": functools.partial(bit_shift, strict=config.strict_masks),
    }


def generated_marker(template_name: str, config: GeneratorConfig) -> str:
    """Return the first line of every generated file."""
    return (
        f"{config.comment_prefix} Code generated by {config.tool_name} "
        f"from {template_name}; DO NOT EDIT."
    )


def resolve_template_path(template: Union[str, Path]) -> Path:
    """Map a bundled template name or a file path to a template file."""
    if isinstance(template, str) and template in BUILTIN_TEMPLATES:
        return TEMPLATE_DIR / BUILTIN_TEMPLATES[template]
    return Path(template)


class Renderer:
    """Renders a linked Definitions graph through a Jinja2 template.

    Example:
        >>> renderer = Renderer("python")
        >>> source = renderer.render(compile_definitions("messages.xml"))
        >>> source.splitlines()[0]
        '# Code generated by ubxgen from python.py.j2; DO NOT EDIT.'
    """

    def __init__(
        self, template: Union[str, Path], config: Optional[GeneratorConfig] = None
    ) -> None:
        """Load and compile a template.

        Args:
            template: Template file path, or the name of a bundled template
            config: Generator configuration (defaults to GeneratorConfig())

        Raises:
            RenderError: If the template does not exist or does not compile
        """
        self.config = config if config is not None else GeneratorConfig()
        path = resolve_template_path(template)
        if not path.is_file():
            raise RenderError(f"template not found: {path}")
        self.template_name = path.name

        self.environment = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(path.parent)),
            undefined=jinja2.StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )
        functions = template_functions(self.config)
        self.environment.filters.update(functions)
        self.environment.globals.update(functions)

        try:
            self.template = self.environment.get_template(path.name)
        except jinja2.TemplateSyntaxError as e:
            raise RenderError(f"{path}:{e.lineno}: {e.message}") from e
        except jinja2.TemplateError as e:
            raise RenderError(f"cannot load template {path}: {e}") from e

        logger.info("template file: %s", path)

    def render(self, definitions: Definitions) -> str:
        """Render the graph, marker line first.

        Errors raised by the helpers (TypeResolutionError, BitIndexError,
        LinkError) propagate unchanged; other template failures are
        reported as RenderError.

        Raises:
            RenderError: If the template fails while rendering
        """
        try:
            body = self.template.render(
                definitions=definitions,
                messages=definitions.messages,
                template=self.template_name,
            )
        except jinja2.TemplateError as e:
            raise RenderError(f"{self.template_name}: {e}") from e
        except RecursionError as e:
            raise RenderError(f"{self.template_name}: recursion too deep while rendering") from e

        return f"{generated_marker(self.template_name, self.config)}\n{body}"


def render(
    definitions: Definitions,
    template: Union[str, Path],
    config: Optional[GeneratorConfig] = None,
) -> str:
    """Render a linked graph through a template in one call."""
    return Renderer(template, config).render(definitions)
