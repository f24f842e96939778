from seo_inspector.config import (
    STATUS_DESCRIPTION_MAX_LENGTH,
    STATUS_DESCRIPTION_MIN_LENGTH,
    STATUS_TITLE_MAX_LENGTH,
    STATUS_TITLE_MIN_LENGTH,
)
from seo_inspector.extractor import PageMetadata
from seo_inspector.models import StatusCheck


def check_title(meta: PageMetadata) -> StatusCheck:
    if not meta.title:
        return StatusCheck(status="error", message="Missing title tag")
    length = len(meta.title)
    if length < STATUS_TITLE_MIN_LENGTH:
        return StatusCheck(status="warning", message="Title too short")
    if length > STATUS_TITLE_MAX_LENGTH:
        return StatusCheck(status="warning", message="Title too long")
    return StatusCheck(status="good", message=f"Good length ({length} chars)")


def check_description(meta: PageMetadata) -> StatusCheck:
    if not meta.description:
        return StatusCheck(status="error", message="Missing meta description")
    length = len(meta.description)
    if length < STATUS_DESCRIPTION_MIN_LENGTH:
        return StatusCheck(status="warning", message=f"Too short ({length}/{STATUS_DESCRIPTION_MAX_LENGTH} chars)")
    if length > STATUS_DESCRIPTION_MAX_LENGTH:
        return StatusCheck(status="warning", message=f"Too long ({length}/{STATUS_DESCRIPTION_MAX_LENGTH} chars)")
    return StatusCheck(status="good", message=f"Good length ({length} chars)")


def check_canonical(meta: PageMetadata) -> StatusCheck:
    if not meta.canonical:
        return StatusCheck(status="warning", message="Missing canonical URL")
    return StatusCheck(status="good", message="Properly implemented")


def check_social(meta: PageMetadata) -> StatusCheck:
    # Image tags are deliberately not part of this gate.
    has_og = bool(meta.og_title and meta.og_description)
    has_twitter = bool(meta.twitter_card and meta.twitter_title)

    if has_og and has_twitter:
        return StatusCheck(status="good", message="All social tags present")
    if has_og:
        return StatusCheck(status="warning", message="Missing Twitter cards")
    if has_twitter:
        return StatusCheck(status="warning", message="Missing Open Graph tags")
    return StatusCheck(status="error", message="Missing all social tags")


def evaluate_status_checks(meta: PageMetadata) -> dict[str, StatusCheck]:
    return {
        "title": check_title(meta),
        "description": check_description(meta),
        "canonical": check_canonical(meta),
        "social": check_social(meta),
    }
