from seolens.document import HtmlDocument, extract_domain


def test_text_returns_first_match_stripped():
    doc = HtmlDocument("<title>  First  </title><title>Second</title>", "https://example.com")
    assert doc.text("title") == "First"


def test_missing_element_is_none_not_empty():
    doc = HtmlDocument("<html><head></head></html>", "https://example.com")
    assert doc.text("title") is None
    assert doc.attr('meta[name="description"]', "content") is None


def test_empty_attribute_is_distinct_from_missing():
    doc = HtmlDocument('<meta name="description" content="">', "https://example.com")
    assert doc.attr('meta[name="description"]', "content") == ""


def test_element_without_attribute_yields_none():
    doc = HtmlDocument('<meta name="viewport">', "https://example.com")
    assert doc.attr('meta[name="viewport"]', "content") is None


def test_multi_valued_attributes_are_joined():
    doc = HtmlDocument('<link rel="shortcut icon" href="/f.ico">', "https://example.com")
    assert doc.attr('link[rel="shortcut icon"]', "rel") == "shortcut icon"
    assert doc.attr('link[rel="shortcut icon"]', "href") == "/f.ico"


def test_malformed_html_does_not_raise():
    doc = HtmlDocument("<html><head><title>Unclosed<meta name=robots content=noindex><div><p>", "http://example.com")
    assert doc.url == "http://example.com"
    assert doc.text("nonexistent") is None


def test_domain_is_host_name():
    assert HtmlDocument("", "https://www.example.com:8443/a?b=1").domain == "www.example.com"
    assert extract_domain("example.org/path") == "example.org"
