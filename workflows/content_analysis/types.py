"""Data model for placeholder analysis.

Wire names are camelCase (``suggestedPrompt``, ``aspectRatio``); Python code
uses the snake_case attributes. Both spellings are accepted on input.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ContentKind = Literal["webpage", "article", "document"]


class PlaceholderPosition(BaseModel):
    """Locator for re-finding a placeholder in its source document.

    Markup analysis fills ``selector``; text analysis fills ``line``.
    """

    model_config = ConfigDict(frozen=True)

    selector: str | None = None
    line: int | None = None
    section: str | None = None


class ImageSize(BaseModel):
    """Optional size hint, passed through untouched."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    width: int | None = None
    height: int | None = None
    aspect_ratio: str | None = Field(default=None, alias="aspectRatio")


class ImagePlaceholder(BaseModel):
    """A located candidate slot for an illustrative image."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    context: str
    suggested_prompt: str = Field(alias="suggestedPrompt")
    position: PlaceholderPosition = Field(default_factory=PlaceholderPosition)
    size: ImageSize | None = None
    alt: str | None = None

    def to_wire(self) -> dict:
        """JSON-ready dict with camelCase keys and unset hints omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AnalysisResult(BaseModel):
    """Output of one analysis pass."""

    kind: ContentKind
    placeholders: list[ImagePlaceholder] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
