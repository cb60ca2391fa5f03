"""Protocol definitions for text extraction strategies."""

from typing import Protocol

from ..models.results import StrategyResult


class TextExtractor(Protocol):
    """
    Protocol for turning an HTML document into article text.

    Implementations return a StrategyResult whose text is empty or None when
    they cannot find the article. That is not an error: the next strategy
    gets a chance.
    """

    name: str

    def extract(self, html: str) -> StrategyResult:
        """
        Extract the article title and text from HTML.

        Args:
            html: Decoded HTML source

        Returns:
            StrategyResult with title and text (either may be None)
        """
        ...
