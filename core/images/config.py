"""Configuration for the image generation client."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL = "MusePublic/489_ckpt_FLUX_1"
DEFAULT_BASE_URL = "https://api-inference.modelscope.cn/v1/images/generations"


def _env_api_key() -> str | None:
    return os.environ.get("AIPIC_API_KEY") or os.environ.get("MODELSCOPE_API_KEY")


@dataclass
class ImageGenConfig:
    """Configuration for the text-to-image API.

    Environment Variables:
        AIPIC_API_KEY: Bearer token for the API (falls back to MODELSCOPE_API_KEY)
        AIPIC_MODEL_ID: Model id sent with each request
        AIPIC_BASE_URL: Generation endpoint URL
        AIPIC_IMAGE_TIMEOUT: Request timeout in seconds (default: 60)
        AIPIC_BATCH_SIZE: Max concurrent requests per batch (default: 5)
    """

    api_key: str | None = field(default_factory=_env_api_key)
    model_id: str = field(
        default_factory=lambda: os.environ.get("AIPIC_MODEL_ID") or DEFAULT_MODEL
    )
    base_url: str = field(
        default_factory=lambda: os.environ.get("AIPIC_BASE_URL") or DEFAULT_BASE_URL
    )
    timeout: float = field(
        default_factory=lambda: float(os.environ.get("AIPIC_IMAGE_TIMEOUT", "60"))
    )
    batch_size: int = field(
        default_factory=lambda: int(os.environ.get("AIPIC_BATCH_SIZE", "5"))
    )

    @property
    def has_api_key(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.api_key)


def get_image_config() -> ImageGenConfig:
    """Build an ImageGenConfig from the current environment."""
    return ImageGenConfig()
