from seo_inspector.config import (
    GRADE_THRESHOLDS,
    SCORE_DESCRIPTION_INNER,
    SCORE_DESCRIPTION_OUTER,
    SCORE_OG_IMAGE_BONUS,
    SCORE_PENALTIES,
    SCORE_TITLE_INNER,
    SCORE_TITLE_OUTER,
)
from seo_inspector.extractor import PageMetadata


def _outside(length: int, band: tuple[int, int]) -> bool:
    low, high = band
    return length < low or length > high


def compute_seo_score(meta: PageMetadata) -> int:
    """Start at 100, apply every matching deduction, clamp to [0, 100]."""
    score = 100

    # Title
    if not meta.title:
        score -= SCORE_PENALTIES["title_missing"]
    elif _outside(len(meta.title), SCORE_TITLE_OUTER):
        score -= SCORE_PENALTIES["title_major"]
    elif _outside(len(meta.title), SCORE_TITLE_INNER):
        score -= SCORE_PENALTIES["title_minor"]

    # Meta description
    if not meta.description:
        score -= SCORE_PENALTIES["description_missing"]
    elif _outside(len(meta.description), SCORE_DESCRIPTION_OUTER):
        score -= SCORE_PENALTIES["description_major"]
    elif _outside(len(meta.description), SCORE_DESCRIPTION_INNER):
        score -= SCORE_PENALTIES["description_minor"]

    if not meta.canonical:
        score -= SCORE_PENALTIES["canonical_missing"]

    # Headings
    if not meta.h1:
        score -= SCORE_PENALTIES["h1_missing"]
    elif len(meta.h1) > 1:
        score -= SCORE_PENALTIES["h1_multiple"]

    # Open Graph
    missing_og = sum(1 for value in (meta.og_title, meta.og_description, meta.og_image) if not value)
    if missing_og == 3:
        score -= SCORE_PENALTIES["og_all_missing"]
    elif missing_og:
        score -= SCORE_PENALTIES["og_per_missing"] * missing_og
    if meta.og_image:
        score += SCORE_OG_IMAGE_BONUS

    # Twitter
    if not meta.twitter_card or not meta.twitter_title:
        score -= SCORE_PENALTIES["twitter_missing"]

    return max(0, min(100, score))


def score_grade(score: int) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return "F"
