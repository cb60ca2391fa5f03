"""Orchestration of extraction strategies and language detection."""

import logging
from typing import Optional, Union

from .encoding import decode_html, normalize_text
from .language import METHOD_DETECTOR, METHOD_HTML, detect_language, language_from_html
from .models.config import ExtractorConfig
from .models.events import EventEmitter, EventType, ExtractionEvent
from .models.results import ArticleResult, StrategyResult
from .strategies import TextExtractor, build_strategies

logger = logging.getLogger(__name__)


class ArticleExtractor:
    """
    Produces the best guess of the human readable part of an HTML page.

    Strategies are tried in the configured order (readability first, then
    the custom heuristic by default); the first one that yields text wins.
    The language is then taken from the page's own hints, or detected from
    the text.

    Example:
        extractor = ArticleExtractor()
        result = extractor.process_html(html_bytes, url="https://example.com/post")
        if result.found:
            print(result.parse_method, result.language)
            print(result.text)
    """

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        emit: Optional[EventEmitter] = None,
        strategies: Optional[list[TextExtractor]] = None,
    ):
        """
        Initialize the extractor.

        Args:
            config: Extractor configuration (uses defaults if None)
            emit: Optional callback for trace events
            strategies: Strategy instances overriding config.strategies
        """
        self._config = config or ExtractorConfig()
        self._emit = emit
        if strategies is None:
            strategies = build_strategies(self._config.strategies, self._config.heuristics, emit)
        self._strategies = strategies

    @property
    def config(self) -> ExtractorConfig:
        return self._config

    def _run_strategies(self, html: str) -> tuple[Optional[str], StrategyResult]:
        """Return the name and result of the first strategy that finds text."""
        title: Optional[str] = None

        for strategy in self._strategies:
            logger.debug(f"Parsing via: {strategy.name} method")
            if self._emit:
                self._emit(ExtractionEvent(type=EventType.STRATEGY_STARTED, strategy=strategy.name))

            result = strategy.extract(html)
            title = title or result.title

            if result.found:
                if self._emit:
                    self._emit(
                        ExtractionEvent(
                            type=EventType.STRATEGY_SUCCEEDED,
                            strategy=strategy.name,
                            message=f"Extracted {len(result.text or '')} characters",
                        )
                    )
                return strategy.name, StrategyResult(title=title, text=result.text)

            logger.debug(f"No text from {strategy.name} method")
            if self._emit:
                self._emit(
                    ExtractionEvent(
                        type=EventType.STRATEGY_FAILED,
                        strategy=strategy.name,
                        error="No text extracted",
                    )
                )

        return None, StrategyResult(title=title)

    def _language(self, html: str, text: str) -> tuple[Optional[str], Optional[str]]:
        language = language_from_html(html)
        if language:
            return language, METHOD_HTML

        if self._config.detect_language:
            language = detect_language(text, self._config.language_sample_chars)
            if language:
                return language, METHOD_DETECTOR
        else:
            logger.debug("Skipping language detection")

        return None, None

    def process_html(self, html: Union[str, bytes], url: Optional[str] = None) -> ArticleResult:
        """
        Extract the article from an HTML document.

        Args:
            html: HTML source, bytes are decoded with encoding detection
            url: Source URL, only recorded on the result and in logs

        Returns:
            ArticleResult; its text is None when every strategy failed

        Raises:
            MalformedInputError: If the custom heuristic cannot parse the source
        """
        if isinstance(html, bytes):
            html = decode_html(html)

        source = url or "<document>"
        method, extracted = self._run_strategies(html)
        title = normalize_text(extracted.title)

        if method is None or extracted.text is None:
            logger.warning(f"No content extracted from {source}")
            return ArticleResult(title=title, url=url)

        text = normalize_text(extracted.text)
        language, language_method = self._language(html, text)
        if language and self._emit:
            self._emit(
                ExtractionEvent(
                    type=EventType.LANGUAGE_DETECTED,
                    language=language,
                    message=f"Language found via {language_method}",
                )
            )

        logger.debug(
            f"Extracted {source}: parse_method={method} language={language} language_method={language_method}"
        )
        return ArticleResult(
            title=title,
            text=text,
            parse_method=method,
            language=language,
            language_method=language_method,
            url=url,
        )
