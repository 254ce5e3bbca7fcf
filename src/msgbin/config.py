"""Configuration for batch extraction and packing.

This module provides the configuration dataclass shared by the batch layer
and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass

from .documents import DocumentFormat, get_format


@dataclass
class BatchConfig:
    """Configuration for converting files between binary and document form.

    Attributes:
        document_format: Name of the document format (default "xml").
            Available formats:
            - "xml": <Entries Count="n"><Entry Index="i">text</Entry></Entries>
            - "json": {"Count": n, "Entries": [{"Index": i, "Text": "text"}]}

        binary_extension: Suffix of binary string tables (default ".bin").
            Matched case-insensitively when scanning a directory, and used
            for files written by pack.

    Examples:
        ```python
        from msgbin.config import BatchConfig

        config = BatchConfig()                          # .bin <-> .xml
        config = BatchConfig(document_format="json")    # .bin <-> .json
        config = BatchConfig(binary_extension=".msg")   # .msg <-> .xml
        ```
    """

    document_format: str = "xml"
    binary_extension: str = ".bin"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        get_format(self.document_format)

        if not self.binary_extension.startswith(".") or len(self.binary_extension) < 2:
            raise ValueError(
                f"binary_extension must start with '.', got {self.binary_extension!r}"
            )

    @property
    def format(self) -> DocumentFormat:
        return get_format(self.document_format)

    @property
    def document_extension(self) -> str:
        return self.format.extension
