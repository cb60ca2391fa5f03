"""Data models for article_extractor."""

from .config import (
    REMOVABLE_TAGS,
    SPACE_TAGS,
    VALID_ROOT_TAGS,
    ExtractorConfig,
    HeuristicsConfig,
)
from .events import EventEmitter, EventType, ExtractionEvent
from .results import ArticleResult, BestState, CandidateMetrics, StrategyResult

__all__ = [
    # Config
    "ExtractorConfig",
    "HeuristicsConfig",
    "VALID_ROOT_TAGS",
    "SPACE_TAGS",
    "REMOVABLE_TAGS",
    # Events
    "EventEmitter",
    "EventType",
    "ExtractionEvent",
    # Results
    "ArticleResult",
    "BestState",
    "CandidateMetrics",
    "StrategyResult",
]
