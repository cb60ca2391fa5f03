"""Extraction through the readability-lxml library."""

import html as html_lib
import logging
from typing import Optional

from bs4 import BeautifulSoup
from lxml.etree import ParserError
from readability import Document
from readability.readability import Unparseable

from ..models.results import StrategyResult

logger = logging.getLogger(__name__)

# Placeholder readability returns for documents without a title
_NO_TITLE = "[no-title]"


class ReadabilityStrategy:
    """
    Delegates to readability-lxml and flattens its article HTML to text.

    Example:
        result = ReadabilityStrategy().extract(html_string)
        print(result.title, result.text)
    """

    name = "readability"

    def _title(self, document: Document) -> Optional[str]:
        title = document.short_title()
        if not title or title == _NO_TITLE:
            return None
        return title

    def extract(self, html: str) -> StrategyResult:
        """Run readability and strip the tags from its summary."""
        if not html.strip():
            return StrategyResult()

        try:
            document = Document(html)
            title = self._title(document)
            summary = document.summary(html_partial=True)
        except (Unparseable, ParserError) as e:
            logger.debug(f"Readability could not process document: {e}")
            return StrategyResult()

        text = BeautifulSoup(summary, "html.parser").get_text()
        text = html_lib.unescape(text)
        if not text.strip():
            return StrategyResult(title=title)
        return StrategyResult(title=title, text=text)
