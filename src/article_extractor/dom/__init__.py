"""Document tree helpers for article_extractor."""

from .cleaner import clean_document
from .tree import (
    count_whitespace,
    count_words,
    describe,
    is_element,
    is_text,
    node_text,
    parse_document,
    tag_name,
)

__all__ = [
    "clean_document",
    "count_whitespace",
    "count_words",
    "describe",
    "is_element",
    "is_text",
    "node_text",
    "parse_document",
    "tag_name",
]
