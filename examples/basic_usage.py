#!/usr/bin/env python3
"""Basic usage example for msgbin.

This example demonstrates:
1. Building a string table
2. Encoding it to the binary layout
3. Converting it to an editable XML document
4. Packing an edited document back to binary
"""

from __future__ import annotations

from msgbin import Table, decode, encode, encoded_size, table_from_xml, table_to_xml


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("msgbin Basic Usage Example")
    print("=" * 60)
    print()

    # Build a table
    print("1. Building a string table...")
    table = Table.from_texts(["New Game", "Continue", "Options", "Quit"])
    for entry in table.ordered():
        print(f"   [{entry.index}] {entry.text}")
    print()

    # Encode
    print("2. Encoding to binary...")
    data = encode(table)
    print(f"   Predicted size: {encoded_size(table)} bytes")
    print(f"   Encoded size:   {len(data)} bytes")
    print(f"   Header:         {data[: table.count * 4].hex(' ')}")
    print()

    # Convert to XML
    print("3. Converting to XML...")
    document = table_to_xml(decode(data))
    print(document.decode("utf-8"))

    # Edit and pack
    print("4. Translating and packing...")
    edited = document.replace(b">Quit<", b">Beenden<")
    repacked = encode(table_from_xml(edited))
    print(f"   Texts: {decode(repacked).texts}")
    print(f"   Size:  {len(repacked)} bytes")


if __name__ == "__main__":
    main()
