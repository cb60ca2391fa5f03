"""Trace events emitted while extracting article text."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional


class EventType(str, Enum):
    """Types of events emitted during extraction."""

    # Custom heuristic
    CANDIDATES_COLLECTED = "candidates_collected"
    CANDIDATE_SCORED = "candidate_scored"
    BEST_UPDATED = "best_updated"
    NO_CANDIDATE = "no_candidate"
    PEER_FOUND = "peer_found"
    NODE_PROMOTED = "node_promoted"
    PROMOTION_SKIPPED = "promotion_skipped"

    # Orchestration
    STRATEGY_STARTED = "strategy_started"
    STRATEGY_SUCCEEDED = "strategy_succeeded"
    STRATEGY_FAILED = "strategy_failed"
    LANGUAGE_DETECTED = "language_detected"


@dataclass
class ExtractionEvent:
    """
    Event emitted at a trace point of the extraction.

    Carries typed fields for the per-candidate metrics instead of a generic
    dict, so observers can filter on them directly.

    Example:
        def observer(event: ExtractionEvent) -> None:
            if event.type == EventType.BEST_UPDATED:
                print(f"New best: <{event.tag}> {event.contribution} words")

        extract_custom(html, emit=observer)
    """

    type: EventType

    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # Common fields
    message: Optional[str] = None
    error: Optional[str] = None
    strategy: Optional[str] = None

    # Node identification
    tag: Optional[str] = None
    css_class: Optional[str] = None

    # Candidate metrics
    word_count: Optional[int] = None
    whitespace_count: Optional[int] = None
    ratio: Optional[float] = None
    contribution: Optional[int] = None
    children_word_count: Optional[int] = None
    best_contribution: Optional[int] = None
    best_ratio: Optional[float] = None

    # Peer analysis
    count: Optional[int] = None
    language: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """Check if this is an error event."""
        return self.type == EventType.STRATEGY_FAILED


# Type alias for event emitter function
EventEmitter = Callable[[ExtractionEvent], None]
