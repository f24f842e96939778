import logging
from urllib.parse import urlparse

import requests
from bs4 import UnicodeDammit

from seo_inspector.config import MAX_REDIRECTS, REQUEST_TIMEOUT, USER_AGENT
from seo_inspector.errors import FetchError, NetworkError, ValidationError

logger = logging.getLogger(__name__)


class FetchResult:
    def __init__(self, url: str, response: requests.Response):
        self.url = url
        self.final_url = response.url or url
        self.status_code = response.status_code
        self.html = decode_body(response)
        self.elapsed_ms = int(response.elapsed.total_seconds() * 1000)


def decode_body(response: requests.Response) -> str:
    """Body text, honouring an in-document charset when the header has none."""
    if "charset" in response.headers.get("Content-Type", "").lower():
        return response.text
    dammit = UnicodeDammit(response.content, is_html=True)
    if dammit.unicode_markup is None:
        return response.text
    return dammit.unicode_markup


def normalize_url(url: object) -> str:
    """Prefix ``https://`` unless the URL already names http or https."""
    if url is not None and not isinstance(url, str):
        raise ValidationError("URL must be a string")
    url = (url or "").strip()
    if not url:
        raise ValidationError("URL is required")
    if not url.startswith("http://") and not url.startswith("https://"):
        url = f"https://{url}"
    try:
        host = urlparse(url).hostname
    except ValueError:
        host = None
    if not host:
        raise ValidationError(f"Invalid URL: {url}")
    return url


def fetch_page(url: str) -> FetchResult:
    url = normalize_url(url)
    headers = {"User-Agent": USER_AGENT}
    logger.debug("GET %s", url)
    with requests.Session() as session:
        session.max_redirects = MAX_REDIRECTS
        try:
            resp = session.get(url, headers=headers, timeout=REQUEST_TIMEOUT, allow_redirects=True)
        except (requests.exceptions.InvalidURL, requests.exceptions.InvalidSchema) as e:
            raise ValidationError(f"Invalid URL: {url}") from e
        except requests.RequestException as e:
            logger.warning("Network failure fetching %s: %s", url, e)
            raise NetworkError(f"Could not reach {url}: {e}") from e

    if not resp.ok:
        logger.warning("Fetching %s returned HTTP %s", url, resp.status_code)
        raise FetchError(resp.status_code, resp.reason or "")
    return FetchResult(url=url, response=resp)
