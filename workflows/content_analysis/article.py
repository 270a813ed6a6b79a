"""Find image placeholders in plain-text or markdown articles."""

import logging
import re

from .keywords import ARTICLE_MIN_LINE_LENGTH, ARTICLE_SCORE_THRESHOLD
from .scoring import score_text
from .types import AnalysisResult, ContentKind, ImagePlaceholder, PlaceholderPosition

logger = logging.getLogger(__name__)

# Markdown headings, Chinese chapter/section titles or lines ending in a
# full-width colon, English chapter/section titles and numbered items
HEADING_PATTERNS = (
    re.compile(r"^#+\s"),
    re.compile(r"^第.+章|^第.+节|^.+：$"),
    re.compile(r"^Chapter|^Section|^\d+\."),
)
_HEADING_MARKER = re.compile(r"^#+\s*")


def is_heading(line: str) -> bool:
    """Whether a stripped line starts a new section."""
    return any(pattern.search(line) for pattern in HEADING_PATTERNS)


def analyze_article(text: str) -> AnalysisResult:
    """Analyze an article line by line and return placeholders.

    Lines longer than the minimum length are scored; high scorers become
    placeholders addressed by 1-based line number and the section heading
    in effect at that line.
    """
    return _analyze_lines(text, kind="article")


def analyze_document(text: str) -> AnalysisResult:
    """Same rules as analyze_article, reported as a generic document."""
    return _analyze_lines(text, kind="document")


def _analyze_lines(text: str, kind: ContentKind) -> AnalysisResult:
    placeholders = []
    current_section = ""

    for index, line in enumerate(text.split("\n")):
        stripped = line.strip()

        if is_heading(stripped):
            current_section = _HEADING_MARKER.sub("", stripped, count=1)

        if len(stripped) <= ARTICLE_MIN_LINE_LENGTH:
            continue

        need = score_text(stripped)
        if need.score <= ARTICLE_SCORE_THRESHOLD:
            continue

        context = f"{current_section}: {stripped}" if current_section else stripped
        placeholders.append(
            ImagePlaceholder(
                id=f"line-{index}",
                context=context,
                suggested_prompt=need.phrase,
                position=PlaceholderPosition(line=index + 1, section=current_section or None),
            )
        )

    logger.debug(f"{kind.capitalize()} analysis found {len(placeholders)} placeholders")

    return AnalysisResult(
        kind=kind,
        placeholders=placeholders,
        suggestions=[
            f"Images are suggested at {len(placeholders)} locations in the {kind}",
            "Diagrams for key concepts and steps make the text easier to follow",
            "Consider a title image at the start of each major section",
        ],
    )
