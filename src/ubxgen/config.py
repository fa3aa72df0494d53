"""Configuration for code generation.

This module provides the settings shared by the renderer and the command
line: how the generated-file marker is written and how strictly bit
specifiers are checked.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GeneratorConfig:
    """Settings for rendering a compiled schema.

    Attributes:
        comment_prefix: Line-comment token of the target language, used for
            the generated-file marker (default "#").
            Typical values:
            - Python, shell: "#"
            - C, C++, Go, Rust: "//"

        strict_masks: Raise on malformed bit specifiers (default True). When
            False, unparsable bit indices read as 0 and masks are truncated
            to 64 bits.

        tool_name: Name written into the generated-file marker (default "ubxgen")

    Examples:
        ```python
        from ubxgen import GeneratorConfig, Renderer

        # Generate Go source with lenient bit masks
        config = GeneratorConfig(comment_prefix="//", strict_masks=False)
        renderer = Renderer("messages.go.j2", config)
        ```
    """

    comment_prefix: str = "#"
    strict_masks: bool = True
    tool_name: str = "ubxgen"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not self.comment_prefix.strip():
            raise ValueError(f"comment_prefix must not be blank, got {self.comment_prefix!r}")

        if "\n" in self.comment_prefix:
            raise ValueError("comment_prefix must be a single line")

        if not self.tool_name.strip():
            raise ValueError(f"tool_name must not be blank, got {self.tool_name!r}")
