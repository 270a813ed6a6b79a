"""Rule-based synthesis of English image prompts from placeholders."""

import logging
import re
from typing import NamedTuple

from workflows.content_analysis.types import ImagePlaceholder
from workflows.shared.text_utils import english_ratio, truncate_text

from .config import PromptConfig, coerce_config
from .tables import (
    CLOSING_PHRASE,
    COMPOSITION_FILLER,
    COMPOSITION_TERMS,
    DEFAULT_QUALITY,
    DEFAULT_STYLE,
    ENGLISH_RATIO_THRESHOLD,
    GENERIC_INTERFACE_PHRASE,
    IMAGE_TYPE_SUFFIXES,
    KEYWORD_MAP,
    MAX_PROMPT_LENGTH,
    MAX_TRANSLATED_TERMS,
    QUALITY_FILLER,
    QUALITY_PHRASES,
    QUALITY_TERMS,
    SAMPLE_PROMPTS,
    STYLE_PHRASES,
    TOPIC_RULES,
    TRUNCATION_MARKER,
)

logger = logging.getLogger(__name__)

_SEGMENT_SPLIT = re.compile(r",\s*")


class PromptResult(NamedTuple):
    placeholder: ImagePlaceholder
    prompt: str


def is_english(text: str) -> bool:
    """Whether ASCII letters and whitespace make up more than 70% of ``text``."""
    return english_ratio(text) > ENGLISH_RATIO_THRESHOLD


def style_phrase(style: str) -> str:
    return STYLE_PHRASES.get(style, STYLE_PHRASES[DEFAULT_STYLE])


def quality_phrase(quality: str) -> str:
    return QUALITY_PHRASES.get(quality, QUALITY_PHRASES[DEFAULT_QUALITY])


def extract_core_content(context: str, suggested_prompt: str) -> str:
    """Base description for a prompt.

    An English suggested prompt is used as is. Otherwise known Chinese terms
    in the context are translated (first three, table order); failing that
    the context is matched against interface topics.
    """
    if suggested_prompt and is_english(suggested_prompt):
        return suggested_prompt

    translated = [english for chinese, english in KEYWORD_MAP if chinese in context]
    if translated:
        return ", ".join(translated[:MAX_TRANSLATED_TERMS])

    return topic_phrase(context)


def topic_phrase(context: str) -> str:
    """Phrase of the first interface topic mentioned in ``context``."""
    for rule in TOPIC_RULES:
        if any(pattern in context for pattern in rule.patterns):
            return rule.phrase
    return GENERIC_INTERFACE_PHRASE


def generate_prompt(
    placeholder: ImagePlaceholder,
    config: PromptConfig | dict | None = None,
) -> str:
    """Build the English prompt for one placeholder.

    Base content, then the style phrase (unless disabled), the quality
    phrase and a composition/lighting phrase. Never longer than 300
    characters.
    """
    config = coerce_config(config)

    parts = [extract_core_content(placeholder.context, placeholder.suggested_prompt)]
    if config.include_style:
        parts.append(style_phrase(config.style))
    parts.append(quality_phrase(config.quality))
    parts.append(CLOSING_PHRASE)

    prompt = truncate_text(
        ", ".join(parts),
        MAX_PROMPT_LENGTH,
        marker=TRUNCATION_MARKER,
        keep_marker_in_limit=True,
    )
    return prompt.strip()


def generate_prompts(
    placeholders: list[ImagePlaceholder],
    config: PromptConfig | dict | None = None,
) -> list[PromptResult]:
    """Prompts for a batch, index-aligned with ``placeholders``."""
    config = coerce_config(config)
    results = [PromptResult(p, generate_prompt(p, config)) for p in placeholders]
    logger.debug(f"Generated {len(results)} prompts (style={config.style}, quality={config.quality})")
    return results


def optimize_prompt(prompt: str, config: PromptConfig | dict | None = None) -> str:
    """Deduplicate comma-separated terms and guarantee quality and composition terms.

    Terms are compared and emitted lowercased; the first occurrence keeps
    its position. Applying this twice gives the same result as once.
    """
    seen: dict[str, None] = {}
    for segment in _SEGMENT_SPLIT.split(prompt):
        seen.setdefault(segment.strip().lower(), None)
    optimized = ", ".join(seen)

    if not any(term in optimized for term in QUALITY_TERMS):
        optimized += f", {QUALITY_FILLER}"
    if not any(term in optimized for term in COMPOSITION_TERMS):
        optimized += f", {COMPOSITION_FILLER}"

    return optimized


def adjust_for_image_type(prompt: str, image_type: str) -> str:
    """Append the phrase for hero/icon/illustration/photo images.

    Unknown image types return the prompt unchanged.
    """
    suffix = IMAGE_TYPE_SUFFIXES.get(image_type)
    if suffix is None:
        return prompt
    return f"{prompt}, {suffix}"


def sample_prompts() -> list[str]:
    """Example prompts in the shape this module produces."""
    return list(SAMPLE_PROMPTS)
