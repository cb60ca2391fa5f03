"""Pydantic configuration models for article_extractor."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

# Tags whose elements may be chosen as the content root
VALID_ROOT_TAGS = frozenset(
    {
        "body",
        "form",
        "main",
        "div",
        "ul",
        "li",
        "table",
        "span",
        "section",
        "article",
    }
)

# Block tags that get a leading space when flattened to text
SPACE_TAGS = frozenset({"p", "li"})

# Tags removed with their whole subtree before analysis
REMOVABLE_TAGS = frozenset(
    {
        "script",
        "style",
        "header",
        "footer",
        "input",
        "button",
        "aside",
        "meta",
        "link",
        "form",
    }
)

StrategyName = Literal["readability", "custom"]


class HeuristicsConfig(BaseModel):
    """Configuration for the custom word-count heuristic."""

    valid_root_tags: frozenset[str] = Field(
        VALID_ROOT_TAGS,
        description="Tags eligible as content candidates",
    )
    space_tags: frozenset[str] = Field(
        SPACE_TAGS,
        description="Tags preceded by a space when serialized to text",
    )
    removable_tags: frozenset[str] = Field(
        REMOVABLE_TAGS,
        description="Tags deleted with their subtree before analysis",
    )
    improvement_ratio: float = Field(
        1.10,
        gt=1.0,
        description="Contribution gain that replaces the best candidate regardless of ratio",
    )
    peer_range: float = Field(
        0.5,
        gt=0.0,
        lt=1.0,
        description="Relative word count window for a sibling to count as a close peer",
    )
    min_close_peers: int = Field(
        2,
        ge=0,
        description="Promote to the parent when close peers exceed this number",
    )
    strip_whitespace_nodes: bool = Field(
        True,
        description="Drop whitespace-only text nodes when building the tree",
    )
    parser: str = Field("html.parser", description="BeautifulSoup tree builder")

    model_config = {"extra": "forbid"}

    @field_validator("valid_root_tags", "space_tags", "removable_tags")
    @classmethod
    def _lowercase_tags(cls, value: frozenset[str]) -> frozenset[str]:
        return frozenset(tag.strip().lower() for tag in value if tag.strip())


class ExtractorConfig(BaseModel):
    """
    Root configuration model for article_extractor.

    Example:
        config = ExtractorConfig(
            strategies=["custom"],
            heuristics=HeuristicsConfig(peer_range=0.3),
        )

    YAML format:
        strategies:
          - readability
          - custom
        detect_language: false
        heuristics:
          improvement_ratio: 1.2
          removable_tags: [script, style, nav]
    """

    heuristics: HeuristicsConfig = Field(default_factory=HeuristicsConfig)
    strategies: list[StrategyName] = Field(
        default_factory=lambda: ["readability", "custom"],
        min_length=1,
        description="Extraction strategies, tried in order until one yields text",
    )
    detect_language: bool = Field(
        True,
        description="Detect the language from the text when the HTML has no hint",
    )
    language_sample_chars: int = Field(
        100,
        ge=1,
        description="Characters of text used for language detection",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        data = self.model_dump(mode="json", exclude_none=True)
        for key in ("valid_root_tags", "space_tags", "removable_tags"):
            data["heuristics"][key] = sorted(data["heuristics"][key])
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ExtractorConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "ExtractorConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text())
