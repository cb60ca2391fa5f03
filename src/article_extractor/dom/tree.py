"""Document tree building and node helpers on top of BeautifulSoup."""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString

from ..exceptions import MalformedInputError

logger = logging.getLogger(__name__)

# A word starts with a letter and may go on with letters, apostrophes and hyphens
_WORD_RE = re.compile(r"[^\W\d_](?:[^\W\d_]|['\-])*")


def parse_document(
    html: Union[str, bytes],
    parser: str = "html.parser",
    strip_whitespace_nodes: bool = True,
) -> BeautifulSoup:
    """
    Parse HTML source into a document tree.

    Args:
        html: HTML source text (bytes are decoded by BeautifulSoup)
        parser: BeautifulSoup tree builder name
        strip_whitespace_nodes: Drop text nodes that only hold whitespace

    Returns:
        The parsed document; its root is never a content candidate

    Raises:
        MalformedInputError: If no tree can be built from the input
    """
    if not isinstance(html, (str, bytes)):
        raise MalformedInputError(f"Expected HTML source as str or bytes, got {type(html).__name__}")

    try:
        soup = BeautifulSoup(html, parser)
    except ParserRejectedMarkup as e:
        raise MalformedInputError(f"Parser rejected markup: {e}") from e

    if strip_whitespace_nodes:
        # Materialize first: extracting while walking breaks the iteration
        for string in list(soup.find_all(string=True)):
            if is_text(string) and not string.strip():
                string.extract()

    return soup


def is_text(node: Optional[PageElement]) -> bool:
    """Check if a node is a plain text node (not a comment, doctype or CDATA)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_element(node: Optional[PageElement]) -> bool:
    """Check if a node is an element."""
    return isinstance(node, Tag)


def tag_name(node: Optional[PageElement]) -> Optional[str]:
    """Return the tag name of an element, None for anything else."""
    if isinstance(node, Tag):
        return node.name
    return None


def node_text(node: PageElement) -> str:
    """
    Render the full text of a node, descendants included.

    Only plain text nodes are joined, the same strings the serializer keeps,
    so CDATA or comments never add words that are missing from the output.
    """
    if isinstance(node, Tag):
        return "".join(str(string) for string in node.descendants if is_text(string))
    if is_text(node):
        return str(node)
    return ""


def count_words(text: str) -> int:
    """Count words in text."""
    return sum(1 for _ in _WORD_RE.finditer(text))


def count_whitespace(text: str) -> int:
    """Count space characters in text."""
    return text.count(" ")


def describe(node: PageElement) -> str:
    """Short label for a node in log messages, e.g. ``div.article-body``."""
    if not isinstance(node, Tag):
        return "#text"
    classes = node.get("class")
    if classes:
        return f"{node.name}.{'.'.join(classes)}"
    return node.name
