"""Content analysis: where does a document need images?

Scans HTML or plain text with a weighted-keyword heuristic and returns
ordered image placeholders plus advisory suggestions. Pure functions, no I/O.

Example:
    from workflows.content_analysis import analyze_webpage

    result = analyze_webpage("<section><p>...</p></section>")
    for placeholder in result.placeholders:
        print(placeholder.id, placeholder.position.selector)
"""

from .article import analyze_article, analyze_document, is_heading
from .keywords import CATEGORY_RULES, FALLBACK_PHRASE, CategoryRule
from .markup import analyze_webpage, css_locator, element_context
from .scoring import ImageNeed, score_text
from .types import (
    AnalysisResult,
    ContentKind,
    ImagePlaceholder,
    ImageSize,
    PlaceholderPosition,
)

__all__ = [
    # Entry points
    "analyze_webpage",
    "analyze_article",
    "analyze_document",
    # Scoring
    "score_text",
    "ImageNeed",
    "CATEGORY_RULES",
    "CategoryRule",
    "FALLBACK_PHRASE",
    # Helpers
    "css_locator",
    "element_context",
    "is_heading",
    # Types
    "AnalysisResult",
    "ContentKind",
    "ImagePlaceholder",
    "ImageSize",
    "PlaceholderPosition",
]
