"""Extraction through the custom word-count heuristic."""

import logging
from typing import Optional

from bs4 import BeautifulSoup

from ..heuristics.extractor import CustomExtractor
from ..models.config import HeuristicsConfig
from ..models.events import EventEmitter
from ..models.results import StrategyResult

logger = logging.getLogger(__name__)


class CustomStrategy:
    """Runs the CustomExtractor and takes the title from the title tag."""

    name = "custom"

    def __init__(
        self,
        config: Optional[HeuristicsConfig] = None,
        emit: Optional[EventEmitter] = None,
    ):
        self._extractor = CustomExtractor(config, emit)

    def _title(self, soup: BeautifulSoup) -> Optional[str]:
        if soup.title is None:
            return None
        title = soup.title.get_text().strip()
        return title or None

    def extract(self, html: str) -> StrategyResult:
        soup = self._extractor.parse(html)
        title = self._title(soup)
        return StrategyResult(title=title, text=self._extractor.extract_document(soup))
