"""Unit tests for batch configuration."""

from __future__ import annotations

import pytest

from msgbin.config import BatchConfig


class TestBatchConfig:
    """Test BatchConfig defaults and validation."""

    def test_defaults(self) -> None:
        config = BatchConfig()

        assert config.document_format == "xml"
        assert config.binary_extension == ".bin"
        assert config.document_extension == ".xml"

    def test_json_format(self) -> None:
        config = BatchConfig(document_format="json")
        assert config.document_extension == ".json"
        assert config.format.name == "json"

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unknown document format"):
            BatchConfig(document_format="csv")

    def test_extension_without_dot(self) -> None:
        with pytest.raises(ValueError, match="binary_extension must start with"):
            BatchConfig(binary_extension="bin")

    def test_bare_dot_extension(self) -> None:
        with pytest.raises(ValueError, match="binary_extension must start with"):
            BatchConfig(binary_extension=".")
