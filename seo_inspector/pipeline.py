"""Fetch -> extract -> derive -> assemble."""

import logging
from dataclasses import asdict

from seo_inspector.analyzers import evaluate_status_checks, generate_recommendations
from seo_inspector.extractor import extract_metadata
from seo_inspector.fetcher import fetch_page, normalize_url
from seo_inspector.models import SEOReport, validate_report
from seo_inspector.scoring import compute_seo_score, score_grade

logger = logging.getLogger(__name__)


def build_report(html: str, url: str) -> SEOReport:
    """Derive the full report from already-fetched HTML. No I/O."""
    meta = extract_metadata(html, url)

    # The three derivations only read ``meta``.
    status_checks = evaluate_status_checks(meta)
    score = compute_seo_score(meta)
    recommendations = generate_recommendations(meta)

    data = asdict(meta)
    data.update(
        score=score,
        grade=score_grade(score),
        status_checks={name: check.model_dump() for name, check in status_checks.items()},
        recommendations=[rec.model_dump() for rec in recommendations],
    )
    return validate_report(data)


def analyze(url: str) -> SEOReport:
    url = normalize_url(url)
    logger.info("Analyzing %s", url)
    page = fetch_page(url)
    logger.debug("Fetched %s (final %s) in %d ms", page.url, page.final_url, page.elapsed_ms)
    report = build_report(page.html, page.url)
    logger.info("Analysis of %s finished: score %d (%s)", url, report.score, report.grade)
    return report
