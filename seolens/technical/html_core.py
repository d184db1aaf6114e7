from ..document import HtmlDocument
from ..meta_tags.head_links import read_viewport
from ..models import Finding, STATUS_ERROR, STATUS_SUCCESS, STATUS_WARNING

LANGUAGE = "Language"
CHARSET = "Charset"
FAVICON = "Favicon"
MOBILE_FRIENDLY = "Mobile Friendly"

RESPONSIVE_DIRECTIVE = "width=device-width"


def check_language(document: HtmlDocument) -> Finding:
    lang_attr = document.attr("html", "lang")
    if lang_attr is None:
        return Finding(name=LANGUAGE, status=STATUS_ERROR, message="Missing language attribute")
    return Finding(name=LANGUAGE, value=lang_attr, status=STATUS_SUCCESS)


def read_charset(document: HtmlDocument) -> str | None:
    charset = document.attr("meta[charset]", "charset")
    if charset is not None:
        return charset
    # http-equiv values are matched case-insensitively, as browsers do
    content = document.attr('meta[http-equiv="Content-Type" i]', "content")
    if content is None:
        return None
    marker = content.lower().find("charset=")
    if marker == -1:
        return content
    return content[marker + len("charset="):]


def check_character_encoding(document: HtmlDocument) -> Finding:
    charset = read_charset(document)
    if charset is None:
        return Finding(name=CHARSET, status=STATUS_ERROR, message="Missing charset declaration")
    return Finding(name=CHARSET, value=charset, status=STATUS_SUCCESS)


def check_favicon(document: HtmlDocument) -> Finding:
    href = document.attr('link[rel="icon"], link[rel="shortcut icon"]', "href")
    if href is None:
        return Finding(name=FAVICON, status=STATUS_WARNING, message="Missing favicon")
    return Finding(name=FAVICON, value="Present", status=STATUS_SUCCESS)


def check_mobile_friendliness(document: HtmlDocument) -> Finding:
    viewport = read_viewport(document)
    if viewport is not None and RESPONSIVE_DIRECTIVE in viewport:
        return Finding(name=MOBILE_FRIENDLY, value="Yes", status=STATUS_SUCCESS)
    return Finding(
        name=MOBILE_FRIENDLY,
        value="No",
        status=STATUS_ERROR,
        message="Site appears not to be mobile friendly",
    )
