"""Word count and whitespace ratio scoring of candidate nodes."""

import logging
from collections.abc import Collection, Iterable
from typing import Optional

from bs4 import Tag

from ..dom.tree import count_whitespace, count_words, describe, is_element, node_text
from ..models.config import VALID_ROOT_TAGS
from ..models.events import EventEmitter, EventType, ExtractionEvent
from ..models.results import BestState, CandidateMetrics

logger = logging.getLogger(__name__)


def measure_candidate(node: Tag, valid_root_tags: Collection[str] = VALID_ROOT_TAGS) -> CandidateMetrics:
    """
    Compute the word statistics of a candidate.

    Words held by direct children that are candidates themselves are
    subtracted to get the node's own contribution.
    """
    text = node_text(node)
    word_count = count_words(text)
    whitespace_count = count_whitespace(text)
    ratio = whitespace_count / word_count if word_count else None

    children_word_count = 0
    contributing_children = 0
    for child in node.children:
        if is_element(child) and child.name in valid_root_tags:
            contributing_children += 1
            children_word_count += count_words(node_text(child))

    return CandidateMetrics(
        node=node,
        word_count=word_count,
        whitespace_count=whitespace_count,
        ratio=ratio,
        children_word_count=children_word_count,
        contributing_children=contributing_children,
    )


def _format_ratio(ratio: Optional[float]) -> str:
    return "n/a" if ratio is None else f"{ratio:.2f}"


def select_best(
    candidates: Iterable[Tag],
    valid_root_tags: Collection[str] = VALID_ROOT_TAGS,
    improvement_ratio: float = 1.10,
    emit: Optional[EventEmitter] = None,
) -> Optional[Tag]:
    """
    Pick the best content node in a single forward pass.

    This is a greedy fold over the candidates in collector order, not a
    global maximum: a later candidate only wins by a strictly larger
    contribution that is either a big enough jump or comes with a whitespace
    ratio no worse than the current best. Ties keep the earlier candidate.

    Args:
        candidates: Candidates in collector (post-)order
        valid_root_tags: Tag names whose direct children are subtracted
        improvement_ratio: Contribution gain accepted regardless of ratio
        emit: Optional callback for trace events

    Returns:
        The selected node, or None when no candidate has a positive contribution
    """
    state = BestState()

    for node in candidates:
        metrics = measure_candidate(node, valid_root_tags)

        logger.debug(
            f"Element: {describe(node)} total wc: {metrics.word_count} "
            f"white: {metrics.whitespace_count} ratio: {_format_ratio(metrics.ratio)} "
            f"element wc: {metrics.contribution} children wc: {metrics.children_word_count} "
            f"child contributors: {metrics.contributing_children} "
            f"best wc: {state.contribution} best ratio: {_format_ratio(state.ratio)}"
        )
        if emit:
            emit(
                ExtractionEvent(
                    type=EventType.CANDIDATE_SCORED,
                    tag=node.name,
                    css_class=" ".join(node.get("class") or []) or None,
                    word_count=metrics.word_count,
                    whitespace_count=metrics.whitespace_count,
                    ratio=metrics.ratio,
                    contribution=metrics.contribution,
                    children_word_count=metrics.children_word_count,
                    best_contribution=state.contribution,
                    best_ratio=state.ratio,
                )
            )

        new_state = state.consider(metrics, improvement_ratio)
        if new_state is not state:
            logger.debug(f"New best element: {describe(node)}")
            if emit:
                emit(
                    ExtractionEvent(
                        type=EventType.BEST_UPDATED,
                        tag=node.name,
                        contribution=new_state.contribution,
                        ratio=new_state.ratio,
                        best_contribution=state.contribution,
                        best_ratio=state.ratio,
                    )
                )
        state = new_state

    return state.node
