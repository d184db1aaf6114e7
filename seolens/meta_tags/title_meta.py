from ..document import HtmlDocument
from ..models import Finding, STATUS_ERROR, STATUS_SUCCESS, STATUS_WARNING

TITLE = "Title"
DESCRIPTION = "Description"

# Advisory targets quoted in messages; the pass/fail window comes from config
TITLE_TARGET = "50-60"
DESCRIPTION_TARGET = "150-160"


def _length_finding(name: str, text: str, min_len: int, max_len: int, target: str) -> Finding:
    length = len(text)
    if min_len <= length <= max_len:
        return Finding(name=name, value=text, status=STATUS_SUCCESS)
    verdict = "too short" if length < min_len else "too long"
    return Finding(
        name=name,
        value=text,
        status=STATUS_WARNING,
        message=f"{name} is {verdict} (optimal: {target} characters)",
    )


def check_title(document: HtmlDocument, title_min_len: int, title_max_len: int) -> Finding:
    title_text = document.text("title")
    if title_text is None:
        return Finding(name=TITLE, status=STATUS_ERROR, message="Missing title tag")
    return _length_finding(TITLE, title_text, title_min_len, title_max_len, TITLE_TARGET)


def check_meta_description(document: HtmlDocument, desc_min_len: int, desc_max_len: int) -> Finding:
    meta_desc_text = document.attr('meta[name="description"]', "content")
    if meta_desc_text is None:
        return Finding(name=DESCRIPTION, status=STATUS_ERROR, message="Missing meta description")
    return _length_finding(DESCRIPTION, meta_desc_text, desc_min_len, desc_max_len, DESCRIPTION_TARGET)
