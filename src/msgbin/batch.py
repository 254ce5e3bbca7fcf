"""File and directory processing.

Extract turns binary string tables into documents; pack turns documents back
into binary string tables. A directory input is scanned (non-recursively)
for files with the matching extension. Processing stops at the first file
that fails.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .codec import decode, encode
from .config import BatchConfig
from .exceptions import FileProcessingError, MsgbinError, UsageError

log = logging.getLogger(__name__)

FileHandler = Callable[[Path, Path, BatchConfig], Path]


def collect_inputs(path: Path, extension: str) -> list[Path]:
    """List the files to process for an input path.

    A file is returned as-is regardless of its suffix. A directory yields its
    direct children whose suffix matches ``extension`` case-insensitively,
    sorted by name.

    Raises:
        UsageError: If the path is neither a file nor a directory
    """
    if path.is_file():
        return [path]
    if path.is_dir():
        wanted = extension.lower()
        return sorted(
            child for child in path.iterdir() if child.is_file() and child.suffix.lower() == wanted
        )
    raise UsageError(f"Input not found: {path}")


def extract_file(path: Path, out_dir: Path, config: BatchConfig) -> Path:
    """Decode one binary file and write it as a document in ``out_dir``."""
    data = path.read_bytes()
    table = decode(data)
    output = out_dir / f"{path.stem}{config.document_extension}"
    output.write_bytes(config.format.serialize(table))
    log.debug("Wrote %d entries from %d bytes to %s", table.count, len(data), output)
    return output


def pack_file(path: Path, out_dir: Path, config: BatchConfig) -> Path:
    """Read one document and write it as a binary file in ``out_dir``."""
    table = config.format.deserialize(path.read_bytes())
    data = encode(table)
    output = out_dir / f"{path.stem}{config.binary_extension}"
    output.write_bytes(data)
    log.debug("Wrote %d entries as %d bytes to %s", table.count, len(data), output)
    return output


def extract(path: Path, out_dir: Path, config: BatchConfig | None = None) -> list[Path]:
    """Extract a binary file, or every binary file in a directory.

    Returns:
        Paths of the documents written

    Raises:
        UsageError: If the input path does not exist
        FileProcessingError: On the first file that fails
    """
    config = config or BatchConfig()
    inputs = collect_inputs(path, config.binary_extension)
    return _run("extracting from", inputs, out_dir, config, extract_file)


def pack(path: Path, out_dir: Path, config: BatchConfig | None = None) -> list[Path]:
    """Pack a document, or every document in a directory.

    Returns:
        Paths of the binary files written

    Raises:
        UsageError: If the input path does not exist
        FileProcessingError: On the first file that fails
    """
    config = config or BatchConfig()
    inputs = collect_inputs(path, config.document_extension)
    return _run("packing from", inputs, out_dir, config, pack_file)


def _run(
    action: str,
    inputs: list[Path],
    out_dir: Path,
    config: BatchConfig,
    handler: FileHandler,
) -> list[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)

    outputs = []
    for path in inputs:
        log.info("%s...", path.stem)
        try:
            outputs.append(handler(path, out_dir, config))
        except (MsgbinError, OSError) as e:
            raise FileProcessingError(action, path, e) from e

    return outputs
