import pytest


def make_html(
    title: str | None = "t" * 45,
    description: str | None = "d" * 150,
    canonical: str | None = "https://example.com/page",
    h1: list[str] | None = None,
    h2: list[str] | None = None,
    og: dict[str, str] | None = None,
    twitter: dict[str, str] | None = None,
    extra_head: str = "",
    lang: str | None = "en",
) -> str:
    """Build a page; defaults describe a fully optimized document."""
    h1 = ["Main heading"] if h1 is None else h1
    h2 = ["Section"] if h2 is None else h2
    og = {"title": "OG title", "description": "OG description", "image": "https://example.com/og.png"} if og is None else og
    twitter = {"card": "summary_large_image", "title": "Twitter title"} if twitter is None else twitter

    head = []
    if title is not None:
        head.append(f"<title>{title}</title>")
    if description is not None:
        head.append(f'<meta name="description" content="{description}">')
    if canonical is not None:
        head.append(f'<link rel="canonical" href="{canonical}">')
    for key, value in og.items():
        head.append(f'<meta property="og:{key}" content="{value}">')
    for key, value in twitter.items():
        head.append(f'<meta name="twitter:{key}" content="{value}">')
    head.append(extra_head)

    body = [f"<h1>{text}</h1>" for text in h1] + [f"<h2>{text}</h2>" for text in h2]
    lang_attr = f' lang="{lang}"' if lang else ""
    return f"<!DOCTYPE html><html{lang_attr}><head>{''.join(head)}</head><body>{''.join(body)}</body></html>"


EMPTY_HTML = "<html><head></head><body><p>nothing here</p></body></html>"


@pytest.fixture
def perfect_html() -> str:
    return make_html()


@pytest.fixture
def build_html():
    return make_html


@pytest.fixture
def empty_html() -> str:
    return EMPTY_HTML
