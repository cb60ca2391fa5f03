"""Custom word-count heuristic for article text extraction."""

from .candidates import collect_candidates
from .extractor import CustomExtractor, extract_custom
from .peers import analyze_peers, count_close_peers
from .scorer import measure_candidate, select_best
from .serializer import serialize_text

__all__ = [
    "CustomExtractor",
    "analyze_peers",
    "collect_candidates",
    "count_close_peers",
    "extract_custom",
    "measure_candidate",
    "select_best",
    "serialize_text",
]
