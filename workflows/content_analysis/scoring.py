"""Weighted-keyword scoring of how much a piece of text needs an image."""

from typing import NamedTuple

from .keywords import CATEGORY_RULES, FALLBACK_PHRASE, CategoryRule


class ImageNeed(NamedTuple):
    score: float
    phrase: str


def score_text(text: str, rules: tuple[CategoryRule, ...] = CATEGORY_RULES) -> ImageNeed:
    """Score ``text`` against the category table.

    Each category scores ``weight * matched / len(keywords)``; the result is
    the best category score and its phrase. Equal scores go to the later
    category. Text matching nothing scores 0.0 with the generic phrase.
    """
    best_score = 0.0
    phrase = ""

    for rule in rules:
        matches = sum(1 for keyword in rule.keywords if keyword in text)
        if not matches:
            continue
        candidate = rule.weight * (matches / len(rule.keywords))
        if candidate >= best_score:
            best_score = candidate
            phrase = rule.phrase

    return ImageNeed(best_score, phrase or FALLBACK_PHRASE)
