"""Property-based tests using hypothesis."""

from __future__ import annotations

import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from msgbin import (
    Entry,
    MalformedInputError,
    Table,
    decode,
    encode,
    encoded_size,
    table_from_json,
    table_from_xml,
    table_to_json,
    table_to_xml,
)

# XML 1.0 character range; carriage returns are normalized by XML parsers
xml_text = st.text(
    alphabet=st.one_of(
        st.characters(min_codepoint=0x20, max_codepoint=0xD7FF),
        st.sampled_from("\n\t"),
    ),
    max_size=40,
)


@st.composite
def shuffled_entries(draw: st.DrawFn) -> tuple[list[str], list[tuple[int, str]]]:
    """Texts together with their (index, text) pairs in a random order."""
    texts = draw(st.lists(st.text(max_size=10), max_size=10))
    items = draw(st.permutations(list(enumerate(texts))))
    return texts, items


class TestCodecProperties:
    """Property-based tests for codec."""

    @given(texts=st.lists(st.text(max_size=40), max_size=20))
    def test_encode_decode_roundtrip(self, texts: list[str]) -> None:
        """Test encode/decode is invertible and byte-stable."""
        table = Table.from_texts(texts)
        data = encode(table)
        decoded = decode(data)

        assert decoded.count == len(texts)
        assert decoded.texts == texts
        assert encode(decoded) == data

    @given(texts=st.lists(st.text(max_size=20), min_size=1, max_size=20))
    def test_first_offset_is_header_size(self, texts: list[str]) -> None:
        """Test the first offset always equals the offset table size."""
        data = encode(Table.from_texts(texts))
        assert struct.unpack_from("<I", data)[0] == 4 * len(texts)

    @given(texts=st.lists(st.text(max_size=40), max_size=20))
    def test_encoded_size(self, texts: list[str]) -> None:
        """Test the predicted size matches the encoding."""
        table = Table.from_texts(texts)
        assert encoded_size(table) == len(encode(table))

    @given(data=shuffled_entries())
    def test_entry_order_irrelevant(self, data: tuple[list[str], list[tuple[int, str]]]) -> None:
        """Test permuted entries encode like ascending entries."""
        texts, items = data
        permuted = Table(
            count=len(items),
            entries=tuple(Entry(index=index, text=text) for index, text in items),
        )
        assert encode(permuted) == encode(Table.from_texts(texts))

    @given(data=st.binary(max_size=64))
    def test_decode_arbitrary_bytes(self, data: bytes) -> None:
        """Test arbitrary input either decodes or raises MalformedInputError."""
        try:
            table = decode(data)
        except MalformedInputError:
            return
        assert table.count == struct.unpack_from("<I", data)[0] // 4


class TestDocumentProperties:
    """Property-based tests for document formats."""

    @given(texts=st.lists(xml_text, max_size=10))
    def test_xml_roundtrip(self, texts: list[str]) -> None:
        """Test XML serialization round-trip."""
        table = Table.from_texts(texts)
        assert table_from_xml(table_to_xml(table)) == table

    @given(
        prefix=xml_text,
        bad=st.one_of(
            st.characters(max_codepoint=0x1F).filter(lambda c: c not in "\t\n\r"),
            st.sampled_from("\ufffe\uffff"),
        ),
        suffix=xml_text,
    )
    def test_xml_rejects_unrepresentable_characters(self, prefix: str, bad: str, suffix: str) -> None:
        """Test characters outside the XML range fail serialization."""
        table = Table.from_texts(["ok", prefix + bad + suffix])

        with pytest.raises(MalformedInputError, match="Entry 1 contains"):
            table_to_xml(table)

    @given(texts=st.lists(st.text(max_size=40), max_size=10))
    def test_json_roundtrip(self, texts: list[str]) -> None:
        """Test JSON serialization round-trip."""
        table = Table.from_texts(texts)
        assert table_from_json(table_to_json(table)) == table
