"""Exception types raised by article_extractor."""


class ExtractionError(Exception):
    """Base class for all extraction errors."""


class MalformedInputError(ExtractionError):
    """Raised when the HTML source cannot be turned into a document tree."""


class StrategyUnavailableError(ExtractionError):
    """Raised when an unknown extraction strategy is requested."""

    def __init__(self, name: str):
        super().__init__(f"Unknown extraction strategy: {name}")
        self.name = name
