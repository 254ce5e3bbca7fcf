"""XML document format.

Document structure:
```xml
<?xml version='1.0' encoding='utf-8'?>
<Entries Count="2">
  <Entry Index="0">Hello</Entry>
  <Entry Index="1">World</Entry>
</Entries>
```

XML parsers normalize carriage returns to line feeds, so text containing
``\\r`` does not survive a round trip through this format.
"""

from __future__ import annotations

import re
from xml.etree import ElementTree as ET

from ..exceptions import MalformedInputError
from ..models import Table
from .base import (
    COUNT_NAME,
    ENTRY_NAME,
    INDEX_NAME,
    ROOT_NAME,
    DocumentFormat,
    build_table,
    parse_count,
    register_format,
)

# Anything outside the XML 1.0 Char production
_INVALID_XML_CHAR = re.compile(
    "[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def table_to_xml(table: Table) -> bytes:
    """Serialize a Table to an indented UTF-8 XML document.

    Entries are written in index order.

    Raises:
        MalformedInputError: If an entry contains a character XML cannot carry
    """
    root = ET.Element(ROOT_NAME, {COUNT_NAME: str(table.count)})
    for entry in table.ordered():
        match = _INVALID_XML_CHAR.search(entry.text)
        if match is not None:
            raise MalformedInputError(
                f"Entry {entry.index} contains U+{ord(match.group()):04X}, which XML cannot represent"
            )
        element = ET.SubElement(root, ENTRY_NAME, {INDEX_NAME: str(entry.index)})
        element.text = entry.text

    ET.indent(root, space="  ")
    return ET.tostring(root, encoding="utf-8", xml_declaration=True) + b"\n"


def table_from_xml(content: bytes) -> Table:
    """Deserialize an XML document to a Table.

    Children of the root other than ``Entry`` are ignored. An entry's text is
    all of its text content, including text nested in child elements.

    Raises:
        MalformedInputError: If the XML is invalid or does not describe a dense table
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise MalformedInputError(f"Invalid XML: {e}") from e

    if root.tag != ROOT_NAME:
        raise MalformedInputError(f"Root element must be <{ROOT_NAME}>, got <{root.tag}>")

    count = parse_count(root.get(COUNT_NAME), COUNT_NAME)

    items = []
    for element in root:
        if element.tag != ENTRY_NAME:
            continue
        index = parse_count(element.get(INDEX_NAME), f"{INDEX_NAME} of <{ENTRY_NAME}>")
        items.append((index, "".join(element.itertext())))

    return build_table(count, items)


XML_FORMAT = register_format(
    DocumentFormat(
        name="xml",
        extension=".xml",
        serialize=table_to_xml,
        deserialize=table_from_xml,
    )
)
