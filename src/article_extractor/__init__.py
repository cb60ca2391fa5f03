"""
article_extractor - Find the main article text of an HTML page.

Usage:
    from article_extractor import ArticleExtractor, extract_custom

    # Last-resort heuristic on its own
    text = extract_custom(html_source)

    # Readability first, heuristic as fallback, plus language detection
    result = ArticleExtractor().process_html(html_bytes)
    print(result.parse_method, result.language, result.text)
"""

__version__ = "1.0.0"

from .exceptions import ExtractionError, MalformedInputError, StrategyUnavailableError
from .heuristics import CustomExtractor, extract_custom
from .models.config import ExtractorConfig, HeuristicsConfig
from .models.events import EventEmitter, EventType, ExtractionEvent
from .models.results import ArticleResult
from .orchestrator import ArticleExtractor

__all__ = [
    "__version__",
    # Core
    "extract_custom",
    "CustomExtractor",
    "ArticleExtractor",
    # Config
    "ExtractorConfig",
    "HeuristicsConfig",
    # Results and events
    "ArticleResult",
    "EventEmitter",
    "EventType",
    "ExtractionEvent",
    # Errors
    "ExtractionError",
    "MalformedInputError",
    "StrategyUnavailableError",
]
