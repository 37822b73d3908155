"""
tagflow parsing components.

This package turns XML documents into instruction trees.
"""

from tagflow.parsing.parser import (
    INSTRUCTION_TAGS,
    DocumentParser,
    parse_children,
    parse_document,
    parse_file,
)

__all__ = [
    "INSTRUCTION_TAGS",
    "DocumentParser",
    "parse_children",
    "parse_document",
    "parse_file",
]
