"""Result and metric types shared across the extraction stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from bs4 import Tag


@dataclass(frozen=True)
class CandidateMetrics:
    """
    Word statistics for one candidate node.

    Attributes:
        node: The candidate element
        word_count: Words in the full rendered text, descendants included
        whitespace_count: Space characters in that same text
        ratio: whitespace_count / word_count, None when word_count is 0
        children_word_count: Words held by direct children with a root tag
        contributing_children: Number of those children
        contribution: word_count minus children_word_count
    """

    node: Tag
    word_count: int
    whitespace_count: int
    ratio: Optional[float]
    children_word_count: int
    contributing_children: int

    @property
    def contribution(self) -> int:
        return self.word_count - self.children_word_count


@dataclass(frozen=True)
class BestState:
    """Running best selection threaded through the scoring pass."""

    node: Optional[Tag] = None
    contribution: int = 0
    ratio: Optional[float] = None

    def accepts(self, metrics: CandidateMetrics, improvement_ratio: float) -> bool:
        """
        Check whether a candidate should replace the current best.

        The candidate must strictly beat the best contribution, and then either
        nothing is selected yet, the gain is large enough, or its whitespace
        ratio is no worse than the best one. An undefined ratio never compares.
        """
        if metrics.contribution <= self.contribution:
            return False
        if self.contribution == 0:
            return True
        if metrics.contribution / self.contribution >= improvement_ratio:
            return True
        return metrics.ratio is not None and self.ratio is not None and metrics.ratio <= self.ratio

    def consider(self, metrics: CandidateMetrics, improvement_ratio: float) -> BestState:
        """Return the state after looking at one more candidate."""
        if self.accepts(metrics, improvement_ratio):
            return BestState(node=metrics.node, contribution=metrics.contribution, ratio=metrics.ratio)
        return self


@dataclass(frozen=True)
class StrategyResult:
    """Output of a single extraction strategy."""

    title: Optional[str] = None
    text: Optional[str] = None

    @property
    def found(self) -> bool:
        return bool(self.text)


@dataclass
class ArticleResult:
    """
    Final result of processing one HTML document.

    Attributes:
        title: Title of the article, if any strategy found one
        text: Human readable article text, None when extraction is unavailable
        parse_method: Strategy that produced the text ("readability", "custom")
        language: ISO 639-1 code of the text language
        language_method: How the language was found ("html", "detector")
        url: Source URL, informational only
    """

    title: Optional[str] = None
    text: Optional[str] = None
    parse_method: Optional[str] = None
    language: Optional[str] = None
    language_method: Optional[str] = None
    url: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.text is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to a dictionary for serialization."""
        return {
            "title": self.title,
            "text": self.text,
            "parse_method": self.parse_method,
            "language": self.language,
            "language_method": self.language_method,
            "url": self.url,
        }
