import pytest

HTTPS_URL = "https://example.com/page"
HTTP_URL = "http://example.com/page"


def make_page(head: str = "", body: str = "<p>Hello</p>", lang: str | None = "en") -> str:
    lang_attr = f' lang="{lang}"' if lang is not None else ""
    return f"<!DOCTYPE html><html{lang_attr}><head>{head}</head><body>{body}</body></html>"


COMPLETE_HEAD = (
    '<meta charset="utf-8">'
    f"<title>{'T' * 55}</title>"
    f'<meta name="description" content="{"d" * 150}">'
    '<link rel="canonical" href="https://example.com/page">'
    '<meta name="viewport" content="width=device-width, initial-scale=1">'
    '<link rel="icon" href="/favicon.ico">'
    '<meta property="og:title" content="Social title">'
    '<meta property="og:description" content="Social description">'
    '<meta property="og:image" content="https://example.com/og.png">'
    '<meta property="og:type" content="website">'
    '<meta name="twitter:card" content="summary_large_image">'
    '<meta name="twitter:image" content="https://example.com/tw.png">'
)


@pytest.fixture
def complete_html():
    return make_page(COMPLETE_HEAD)
