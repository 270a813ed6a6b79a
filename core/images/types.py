"""Type definitions for the image generation client."""

from pydantic import BaseModel, ConfigDict, Field


class ImageGenerationRequest(BaseModel):
    """One text-to-image request."""

    prompt: str
    model: str | None = Field(default=None, description="Overrides the configured model")


class GeneratedImage(BaseModel):
    """Image entry in the API response body."""

    url: str
    revised_prompt: str | None = None


class ImageGenerationResponse(BaseModel):
    """API response body."""

    images: list[GeneratedImage] = Field(default_factory=list)


class ImageGenerationResult(BaseModel):
    """Settled outcome of one request in a batch.

    ``image_url`` is empty and ``error`` set when the request failed.
    """

    model_config = ConfigDict(populate_by_name=True)

    prompt: str
    image_url: str = Field(default="", alias="imageUrl")
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return bool(self.image_url) and not self.error


class ImageConfigStatus(BaseModel):
    """Snapshot of the client configuration (the key itself is never exposed)."""

    model_config = ConfigDict(populate_by_name=True)

    has_api_key: bool = Field(alias="hasApiKey")
    model: str
    base_url: str = Field(alias="baseUrl")
