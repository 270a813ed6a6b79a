"""Result types for the webpage fill workflow."""

from pydantic import BaseModel, ConfigDict, Field

from workflows.content_analysis.types import ImagePlaceholder


class FilledImage(BaseModel):
    """A placeholder that received a generated image."""

    model_config = ConfigDict(populate_by_name=True)

    placeholder: ImagePlaceholder
    image_url: str = Field(alias="imageUrl")
    prompt: str


class WebpageFillResult(BaseModel):
    """Original and modified HTML plus the images that were spliced in."""

    model_config = ConfigDict(populate_by_name=True)

    original_content: str = Field(alias="originalContent")
    modified_content: str = Field(alias="modifiedContent")
    generated_images: list[FilledImage] = Field(default_factory=list, alias="generatedImages")
    message: str | None = None

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
