"""HTML -> flat metadata record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from seo_inspector.errors import ParseError

FAVICON_SELECTORS = (
    'link[rel="icon"]',
    'link[rel="shortcut icon"]',
    'link[rel="apple-touch-icon"]',
)

# field name -> (selector, attribute)
ATTRIBUTE_FIELDS = {
    "description": ('meta[name="description"]', "content"),
    "canonical": ('link[rel="canonical"]', "href"),
    "og_title": ('meta[property="og:title"]', "content"),
    "og_description": ('meta[property="og:description"]', "content"),
    "og_image": ('meta[property="og:image"]', "content"),
    "og_url": ('meta[property="og:url"]', "content"),
    "og_type": ('meta[property="og:type"]', "content"),
    "og_site_name": ('meta[property="og:site_name"]', "content"),
    "twitter_card": ('meta[name="twitter:card"]', "content"),
    "twitter_site": ('meta[name="twitter:site"]', "content"),
    "twitter_title": ('meta[name="twitter:title"]', "content"),
    "twitter_description": ('meta[name="twitter:description"]', "content"),
    "twitter_image": ('meta[name="twitter:image"]', "content"),
    "robots": ('meta[name="robots"]', "content"),
    "keywords": ('meta[name="keywords"]', "content"),
    "language": ("html", "lang"),
}


@dataclass
class PageMetadata:
    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    canonical: Optional[str] = None
    h1: list[str] = field(default_factory=list)
    h2: list[str] = field(default_factory=list)
    h3: list[str] = field(default_factory=list)
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    og_url: Optional[str] = None
    og_type: Optional[str] = None
    og_site_name: Optional[str] = None
    twitter_card: Optional[str] = None
    twitter_site: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image: Optional[str] = None
    robots: Optional[str] = None
    keywords: Optional[str] = None
    language: Optional[str] = None
    favicon: Optional[str] = None
    content_length: Optional[int] = None


def _attr(soup: BeautifulSoup, selector: str, attribute: str) -> Optional[str]:
    tag = soup.select_one(selector)
    if tag is None:
        return None
    value = tag.get(attribute)
    if isinstance(value, list):
        value = " ".join(value)
    return value or None


def _origin(url: str) -> Optional[str]:
    """``scheme://host[:port]`` of *url*, or None if it cannot be parsed."""
    try:
        parsed = urlparse(url)
        host = parsed.hostname
        port = parsed.port
    except ValueError:
        return None
    if not parsed.scheme or not host:
        return None
    if ":" in host:
        host = f"[{host}]"
    return f"{parsed.scheme}://{host}:{port}" if port else f"{parsed.scheme}://{host}"


def extract_favicon(soup: BeautifulSoup, base_url: str) -> str:
    href = None
    for selector in FAVICON_SELECTORS:
        href = _attr(soup, selector, "href")
        if href:
            break

    origin = _origin(base_url)
    if href:
        if href.startswith("/") and origin:
            return f"{origin}{href}"
        return href
    return f"{origin}/favicon.ico" if origin else "/favicon.ico"


def parse_html(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "lxml")
    except (ParserRejectedMarkup, TypeError) as e:
        raise ParseError(f"Could not parse HTML: {e}") from e


def extract_metadata(html: str, url: str) -> PageMetadata:
    soup = parse_html(html)

    title_tag = soup.find("title")
    title = title_tag.get_text().strip() if title_tag else ""

    meta = PageMetadata(
        url=url,
        title=title or None,
        h1=[tag.get_text().strip() for tag in soup.find_all("h1")],
        h2=[tag.get_text().strip() for tag in soup.find_all("h2")],
        h3=[tag.get_text().strip() for tag in soup.find_all("h3")],
        favicon=extract_favicon(soup, url),
        content_length=len(html),
    )
    for name, (selector, attribute) in ATTRIBUTE_FIELDS.items():
        setattr(meta, name, _attr(soup, selector, attribute))
    return meta
