"""Rule-based advice derived from the extracted metadata.

Rules run in a fixed order and each emits at most one item. Thresholds
are kept separately from the scorer's on purpose.
"""

from seo_inspector.config import (
    REC_DESCRIPTION_MAX_LENGTH,
    REC_DESCRIPTION_MIN_LENGTH,
    REC_TITLE_MAX_LENGTH,
    REC_TITLE_MIN_LENGTH,
)
from seo_inspector.extractor import PageMetadata
from seo_inspector.models import Recommendation


def _title(meta: PageMetadata) -> Recommendation | None:
    if not meta.title:
        return Recommendation(
            type="error",
            title="Add a title tag",
            description="Every page needs a unique, descriptive title tag optimized for search.",
        )
    if len(meta.title) < REC_TITLE_MIN_LENGTH:
        return Recommendation(
            type="warning",
            title="Title tag is too short",
            description="Your title should be between 50-60 characters for optimal display in search results.",
        )
    if len(meta.title) > REC_TITLE_MAX_LENGTH:
        return Recommendation(
            type="warning",
            title="Title tag is too long",
            description="Search engines typically display only the first 50-60 characters of a title.",
        )
    return None


def _description(meta: PageMetadata) -> Recommendation | None:
    if not meta.description:
        return Recommendation(
            type="error",
            title="Add a meta description",
            description="Meta descriptions help search engines understand the content of your page.",
        )
    if len(meta.description) < REC_DESCRIPTION_MIN_LENGTH:
        return Recommendation(
            type="warning",
            title="Extend your meta description",
            description="Add more descriptive content to reach the ideal length of 150-160 characters.",
        )
    if len(meta.description) > REC_DESCRIPTION_MAX_LENGTH:
        return Recommendation(
            type="warning",
            title="Shorten your meta description",
            description="Descriptions longer than 160 characters might get truncated in search results.",
        )
    return None


def _h1(meta: PageMetadata) -> Recommendation | None:
    if not meta.h1:
        return Recommendation(
            type="error",
            title="Add an H1 heading",
            description="Every page should have exactly one H1 heading that describes the page content.",
        )
    if len(meta.h1) > 1:
        return Recommendation(
            type="warning",
            title="Too many H1 headings",
            description="Best practice is to have only one H1 heading per page.",
        )
    return None


def _open_graph(meta: PageMetadata) -> Recommendation | None:
    if not (meta.og_title and meta.og_description and meta.og_image):
        return Recommendation(
            type="warning",
            title="Complete Open Graph meta tags",
            description="Adding Open Graph tags will improve how your content appears when shared on Facebook and other platforms.",
        )
    return None


def _og_image(meta: PageMetadata) -> Recommendation | None:
    if not meta.og_image:
        return Recommendation(
            type="warning",
            title="Add og:image for Instagram sharing",
            description="Instagram and other visual platforms use og:image as the preview picture when your link is shared.",
        )
    return None


def _twitter(meta: PageMetadata) -> Recommendation | None:
    if not (meta.twitter_card and meta.twitter_title):
        return Recommendation(
            type="warning",
            title="Add Twitter Card meta tags",
            description="Implement Twitter Card tags to improve visibility when your content is shared on Twitter.",
        )
    return None


def _canonical(meta: PageMetadata) -> Recommendation | None:
    if not meta.canonical:
        return Recommendation(
            type="warning",
            title="Add a canonical URL",
            description="A canonical tag helps prevent duplicate content issues by specifying the preferred version of a page.",
        )
    return None


def _heading_structure(meta: PageMetadata) -> Recommendation | None:
    if len(meta.h1) == 1 and len(meta.h2) > 0:
        return Recommendation(
            type="success",
            title="Good heading structure",
            description="Your page has a clear H1 tag and a logical heading hierarchy, which helps with SEO ranking.",
        )
    return None


def _social_complete(meta: PageMetadata) -> Recommendation | None:
    if all((meta.og_title, meta.og_description, meta.og_image, meta.twitter_card, meta.twitter_title)):
        return Recommendation(
            type="success",
            title="Excellent social media optimization",
            description="Your page has complete Open Graph and Twitter Card tags, so it will look great when shared on social platforms.",
        )
    return None


RULES = [
    _title,
    _description,
    _h1,
    _open_graph,
    _og_image,
    _twitter,
    _canonical,
    _heading_structure,
    _social_complete,
]


def generate_recommendations(meta: PageMetadata) -> list[Recommendation]:
    recommendations: list[Recommendation] = []
    for rule in RULES:
        rec = rule(meta)
        if rec is not None:
            recommendations.append(rec)
    return recommendations
