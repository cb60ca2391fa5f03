"""Text extraction strategies tried by the ArticleExtractor."""

from collections.abc import Iterable
from typing import Optional

from ..exceptions import StrategyUnavailableError
from ..models.config import HeuristicsConfig
from ..models.events import EventEmitter
from .custom import CustomStrategy
from .protocols import TextExtractor
from .readability import ReadabilityStrategy


def build_strategies(
    names: Iterable[str],
    heuristics: Optional[HeuristicsConfig] = None,
    emit: Optional[EventEmitter] = None,
) -> list[TextExtractor]:
    """
    Instantiate strategies by name, keeping their order.

    Raises:
        StrategyUnavailableError: If a name is not a known strategy
    """
    strategies: list[TextExtractor] = []
    for name in names:
        if name == ReadabilityStrategy.name:
            strategies.append(ReadabilityStrategy())
        elif name == CustomStrategy.name:
            strategies.append(CustomStrategy(heuristics, emit))
        else:
            raise StrategyUnavailableError(name)
    return strategies


__all__ = [
    "CustomStrategy",
    "ReadabilityStrategy",
    "TextExtractor",
    "build_strategies",
]
