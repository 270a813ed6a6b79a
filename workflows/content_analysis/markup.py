"""Find image placeholders in HTML.

Two passes over the parsed document:

1. Existing ``<img>`` elements whose source is missing or a stand-in
   (placeholder services, example.com) become placeholders.
2. Content-bearing elements (headings, paragraphs, sections, hero/banner/
   feature/card blocks) whose text scores above the markup threshold become
   placeholders.

All image placeholders come before all content placeholders; within each
pass the order is document order and the index in the id is the element's
position in that pass.
"""

import logging

from bs4 import BeautifulSoup, Tag

from workflows.shared.text_utils import truncate_text

from .keywords import (
    ALT_PROMPT_SUFFIX,
    CONTENT_SELECTORS,
    CONTEXT_MAX_LENGTH,
    MARKUP_MIN_TEXT_LENGTH,
    MARKUP_SCORE_THRESHOLD,
    PLACEHOLDER_SRC_MARKERS,
)
from .scoring import score_text
from .types import AnalysisResult, ImagePlaceholder, PlaceholderPosition

logger = logging.getLogger(__name__)


def analyze_webpage(markup: str) -> AnalysisResult:
    """Analyze HTML and return placeholders for spots that need images.

    Any string is accepted; markup that is not HTML simply yields no
    placeholders.
    """
    soup = BeautifulSoup(markup, "lxml")

    placeholders = _image_placeholders(soup)
    placeholders.extend(_content_placeholders(soup))

    logger.debug(f"Webpage analysis found {len(placeholders)} placeholders")

    return AnalysisResult(
        kind="webpage",
        placeholders=placeholders,
        suggestions=[
            f"Analyzed the webpage and found {len(placeholders)} locations that may need images",
            "Adding illustrations to the main content areas improves the reading experience",
            "Product introductions and feature sections benefit from matching images",
        ],
    )


def _image_placeholders(soup: BeautifulSoup) -> list[ImagePlaceholder]:
    placeholders = []

    for index, img in enumerate(soup.find_all("img")):
        src = img.get("src")
        if src and not any(marker in src for marker in PLACEHOLDER_SRC_MARKERS):
            continue

        alt = img.get("alt") or ""
        selector = css_locator(img)
        context = element_context(img) or f"image slot {selector}"

        if alt:
            suggested = f"{alt}, {ALT_PROMPT_SUFFIX}"
        else:
            suggested = score_text(context).phrase

        placeholders.append(
            ImagePlaceholder(
                id=f"img-{index}",
                context=context,
                suggested_prompt=suggested,
                position=PlaceholderPosition(selector=selector),
                alt=alt or None,
            )
        )

    return placeholders


def _content_placeholders(soup: BeautifulSoup) -> list[ImagePlaceholder]:
    placeholders = []

    for index, element in enumerate(soup.select(", ".join(CONTENT_SELECTORS))):
        text = element.get_text().strip()
        if len(text) <= MARKUP_MIN_TEXT_LENGTH:
            continue

        need = score_text(text)
        if need.score <= MARKUP_SCORE_THRESHOLD:
            continue

        placeholders.append(
            ImagePlaceholder(
                id=f"section-{index}",
                context=truncate_text(text, CONTEXT_MAX_LENGTH),
                suggested_prompt=need.phrase,
                position=PlaceholderPosition(
                    selector=css_locator(element),
                    section=element.name.lower(),
                ),
            )
        )

    return placeholders


def element_context(element: Tag) -> str:
    """Text around an element: parent text, sibling text, then alt text.

    Empty pieces are dropped; the rest are joined by single spaces and cut
    to the context length limit.
    """
    parent = element.parent
    parent_text = parent.get_text().strip() if parent is not None else ""

    siblings = []
    if parent is not None:
        siblings = [
            child for child in parent.children
            if isinstance(child, Tag) and child is not element
        ]
    sibling_text = "".join(sibling.get_text() for sibling in siblings).strip()

    alt_text = element.get("alt") or ""

    pieces = [piece for piece in (parent_text, sibling_text, alt_text) if piece]
    return " ".join(pieces)[:CONTEXT_MAX_LENGTH]


def css_locator(element: Tag) -> str:
    """Selector for re-finding ``element``.

    ``#id`` when the element has an id, ``tag.class`` (first class) when it
    has a class, otherwise ``parent tag:nth-child(n)`` where n counts only
    the parent's children with the same tag.
    """
    element_id = element.get("id")
    if element_id:
        return f"#{element_id}"

    classes = element.get("class")
    if classes:
        return f"{element.name}.{classes[0]}"

    parent = element.parent
    if parent is None or isinstance(parent, BeautifulSoup):
        return element.name

    same_tag = parent.find_all(element.name, recursive=False)
    position = next(i for i, child in enumerate(same_tag) if child is element)
    return f"{parent.name} {element.name}:nth-child({position + 1})"
