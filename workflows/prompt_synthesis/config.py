"""Configuration for prompt synthesis."""

from pydantic import BaseModel, ConfigDict, Field

STYLES = ("realistic", "illustration", "cartoon", "artistic")
QUALITIES = ("standard", "high", "ultra")
LANGUAGES = ("auto", "chinese", "english")


class PromptConfig(BaseModel):
    """Options for turning placeholders into prompts.

    ``style`` and ``quality`` are free strings: values outside STYLES and
    QUALITIES fall back to the defaults when the prompt is built instead of
    failing validation. ``language`` is accepted for compatibility; prompts
    are always English.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    style: str = Field(default="illustration", description=f"One of {', '.join(STYLES)}")
    quality: str = Field(default="high", description=f"One of {', '.join(QUALITIES)}")
    include_style: bool = Field(default=True, alias="includeStyle")
    language: str = Field(default="auto", description=f"One of {', '.join(LANGUAGES)}")


class WebpageFillConfig(PromptConfig):
    """Prompt options plus the cap on images generated per page."""

    max_images: int = Field(default=10, ge=1, alias="maxImages")


def coerce_config(config: PromptConfig | dict | None) -> PromptConfig:
    """Accept a PromptConfig, a (camelCase or snake_case) dict, or None."""
    if config is None:
        return PromptConfig()
    if isinstance(config, PromptConfig):
        return config
    return PromptConfig.model_validate(config)
