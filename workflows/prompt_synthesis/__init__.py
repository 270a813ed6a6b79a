"""Prompt synthesis: placeholders to English text-to-image prompts.

Deterministic and table-driven. Chinese context is mapped to English terms
through a fixed keyword table; style, quality and composition phrases are
appended and the result is capped at 300 characters.

Example:
    from workflows.prompt_synthesis import PromptConfig, generate_prompts

    for placeholder, prompt in generate_prompts(result.placeholders, PromptConfig(style="cartoon")):
        print(placeholder.id, prompt)
"""

from .config import PromptConfig, WebpageFillConfig, coerce_config
from .synthesis import (
    PromptResult,
    adjust_for_image_type,
    extract_core_content,
    generate_prompt,
    generate_prompts,
    is_english,
    optimize_prompt,
    quality_phrase,
    sample_prompts,
    style_phrase,
    topic_phrase,
)

__all__ = [
    # Main functions
    "generate_prompt",
    "generate_prompts",
    "optimize_prompt",
    "adjust_for_image_type",
    "sample_prompts",
    # Building blocks
    "extract_core_content",
    "topic_phrase",
    "is_english",
    "style_phrase",
    "quality_phrase",
    # Types / config
    "PromptResult",
    "PromptConfig",
    "WebpageFillConfig",
    "coerce_config",
]
