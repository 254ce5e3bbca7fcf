"""JSON document format.

Document structure:
```json
{
  "Count": 2,
  "Entries": [
    {"Index": 0, "Text": "Hello"},
    {"Index": 1, "Text": "World"}
  ]
}
```

Unlike XML, JSON keeps every code point as written, carriage returns and
control characters included.
"""

from __future__ import annotations

import json

from ..exceptions import MalformedInputError
from ..models import Table
from .base import (
    COUNT_NAME,
    INDEX_NAME,
    ROOT_NAME,
    DocumentFormat,
    build_table,
    parse_count,
    register_format,
)

TEXT_NAME = "Text"


def table_to_json(table: Table) -> bytes:
    """Serialize a Table to an indented UTF-8 JSON document."""
    document = {
        COUNT_NAME: table.count,
        ROOT_NAME: [{INDEX_NAME: entry.index, TEXT_NAME: entry.text} for entry in table.ordered()],
    }
    return (json.dumps(document, ensure_ascii=False, indent=2) + "\n").encode("utf-8")


def table_from_json(content: bytes) -> Table:
    """Deserialize a JSON document to a Table.

    Raises:
        MalformedInputError: If the JSON is invalid or does not describe a dense table
    """
    try:
        document = json.loads(content.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedInputError(f"Invalid JSON: {e}") from e

    if not isinstance(document, dict):
        raise MalformedInputError("JSON document must be an object")

    count = parse_count(document.get(COUNT_NAME), COUNT_NAME)

    raw_entries = document.get(ROOT_NAME, [])
    if not isinstance(raw_entries, list):
        raise MalformedInputError(f"{ROOT_NAME} must be a list")

    items = []
    for position, raw in enumerate(raw_entries):
        if not isinstance(raw, dict):
            raise MalformedInputError(f"Entry at position {position} must be an object")
        index = parse_count(raw.get(INDEX_NAME), f"{INDEX_NAME} of entry at position {position}")
        text = raw.get(TEXT_NAME, "")
        if not isinstance(text, str):
            raise MalformedInputError(f"{TEXT_NAME} of entry {index} must be a string")
        items.append((index, text))

    return build_table(count, items)


JSON_FORMAT = register_format(
    DocumentFormat(
        name="json",
        extension=".json",
        serialize=table_to_json,
        deserialize=table_from_json,
    )
)
