"""Custom heuristic extraction of article text."""

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup

from ..dom.cleaner import clean_document
from ..dom.tree import describe, parse_document
from ..models.config import HeuristicsConfig
from ..models.events import EventEmitter, EventType, ExtractionEvent
from .candidates import collect_candidates
from .peers import analyze_peers
from .scorer import select_best
from .serializer import serialize_text

logger = logging.getLogger(__name__)


class CustomExtractor:
    """
    Extracts article text by scoring the word counts of container nodes.

    Finds the container with the best word count to whitespace ratio,
    excluding nested containers from each container's own score, then looks
    at its siblings to decide whether the parent holds the article instead.

    Example:
        extractor = CustomExtractor()
        text = extractor.extract(html_string)
        if text is None:
            print("No candidate found")
    """

    def __init__(
        self,
        config: Optional[HeuristicsConfig] = None,
        emit: Optional[EventEmitter] = None,
    ):
        """
        Initialize the custom extractor.

        Args:
            config: Heuristic settings (uses defaults if None)
            emit: Optional callback for trace events
        """
        self._config = config or HeuristicsConfig()
        self._emit = emit

    @property
    def config(self) -> HeuristicsConfig:
        return self._config

    def parse(self, html: Union[str, bytes]) -> BeautifulSoup:
        """Build the document tree with the configured parser settings."""
        return parse_document(
            html,
            parser=self._config.parser,
            strip_whitespace_nodes=self._config.strip_whitespace_nodes,
        )

    def extract_document(self, soup: BeautifulSoup) -> Optional[str]:
        """
        Extract article text from a parsed document.

        The document is cleaned in place.

        Args:
            soup: Parsed document owned by the caller

        Returns:
            Article text, or None if no candidate was found
        """
        config = self._config

        clean_document(soup, config.removable_tags)

        candidates = collect_candidates(soup, config.valid_root_tags)
        logger.debug(f"Candidate node count: {len(candidates)}")
        if self._emit:
            self._emit(ExtractionEvent(type=EventType.CANDIDATES_COLLECTED, count=len(candidates)))

        best = select_best(
            candidates,
            valid_root_tags=config.valid_root_tags,
            improvement_ratio=config.improvement_ratio,
            emit=self._emit,
        )
        if best is None:
            logger.debug("No candidate with a positive word count contribution")
            if self._emit:
                self._emit(ExtractionEvent(type=EventType.NO_CANDIDATE, count=len(candidates)))
            return None

        logger.debug(f"Peer analysis on {describe(best)}")
        chosen = analyze_peers(
            best,
            peer_range=config.peer_range,
            min_close_peers=config.min_close_peers,
            emit=self._emit,
        )
        return serialize_text(chosen, config.space_tags)

    def extract(self, html: Union[str, bytes]) -> Optional[str]:
        """
        Extract article text from HTML source.

        Args:
            html: HTML source text

        Returns:
            Article text, or None if no candidate was found

        Raises:
            MalformedInputError: If the source cannot be parsed into a tree
        """
        return self.extract_document(self.parse(html))


def extract_custom(
    html_source: Union[str, bytes],
    config: Optional[HeuristicsConfig] = None,
    emit: Optional[EventEmitter] = None,
) -> Optional[str]:
    """
    Extract article text from HTML source with the custom heuristic.

    Args:
        html_source: HTML source text
        config: Heuristic settings (uses defaults if None)
        emit: Optional callback for trace events

    Returns:
        Article text, or None if no suitable candidate was found

    Raises:
        MalformedInputError: If the source cannot be parsed into a tree
    """
    return CustomExtractor(config, emit).extract(html_source)
