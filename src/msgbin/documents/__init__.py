"""Editable document formats for msgbin.

This module provides conversion between Table models and text documents
(XML and JSON) that can be edited by hand or by translation tools.
"""

from __future__ import annotations

from .base import DocumentFormat, format_names, get_format, register_format
from .json_document import JSON_FORMAT, table_from_json, table_to_json
from .xml_document import XML_FORMAT, table_from_xml, table_to_xml

__all__ = [
    "DocumentFormat",
    "get_format",
    "format_names",
    "register_format",
    "XML_FORMAT",
    "JSON_FORMAT",
    "table_to_xml",
    "table_from_xml",
    "table_to_json",
    "table_from_json",
]
