"""Unit tests for generator configuration."""

from __future__ import annotations

import pytest

from ubxgen import GeneratorConfig


class TestGeneratorConfig:
    def test_defaults(self) -> None:
        config = GeneratorConfig()

        assert config.comment_prefix == "#"
        assert config.strict_masks is True
        assert config.tool_name == "ubxgen"

    def test_custom(self) -> None:
        config = GeneratorConfig(comment_prefix="//", strict_masks=False, tool_name="msggen")

        assert config.comment_prefix == "//"
        assert config.strict_masks is False

    @pytest.mark.parametrize("prefix", ["", "  ", "#\n"])
    def test_invalid_prefix(self, prefix: str) -> None:
        with pytest.raises(ValueError, match="comment_prefix"):
            GeneratorConfig(comment_prefix=prefix)

    def test_invalid_tool_name(self) -> None:
        with pytest.raises(ValueError, match="tool_name"):
            GeneratorConfig(tool_name="")
