from conftest import make_page, COMPLETE_HEAD
from seolens.document import HtmlDocument
from seolens.previews import PreviewSynthesizer


def _previews(head: str, url: str = "https://www.example.com/about"):
    return PreviewSynthesizer().build(HtmlDocument(make_page(head), url))


def test_google_preview_fallbacks():
    previews = _previews("")
    google = previews.google
    assert google.title == "No Title"
    assert google.description == "No description provided."
    assert google.url == "www.example.com"
    assert google.title_length == len("No Title")
    assert google.is_title_length_optimal is False
    assert google.is_description_length_optimal is False


def test_social_preview_falls_back_to_google_values():
    previews = _previews('<title>Page title</title><meta name="description" content="Page description">')
    social = previews.social
    assert social.title == "Page title"
    assert social.description == "Page description"
    assert social.image is None
    assert social.is_open_graph_complete is False
    assert social.is_twitter_card_complete is False
    assert "image" not in social.to_dict()


def test_complete_page_previews():
    previews = _previews(COMPLETE_HEAD)
    assert previews.google.title_length == 55
    assert previews.google.description_length == 150
    assert previews.google.is_title_length_optimal
    assert previews.google.is_description_length_optimal
    assert previews.social.title == "Social title"
    assert previews.social.image == "https://example.com/og.png"
    assert previews.social.is_open_graph_complete
    assert previews.social.is_twitter_card_complete


def test_twitter_card_complete_with_og_image_only():
    previews = _previews(
        '<meta name="twitter:card" content="summary">'
        '<meta property="og:image" content="https://example.com/og.png">'
    )
    assert previews.social.is_twitter_card_complete


def test_wire_shape():
    data = _previews("<title>x</title>").to_dict()
    assert set(data["google"]) == {
        "title", "url", "description", "titleLength", "descriptionLength",
        "isTitleLengthOptimal", "isDescriptionLengthOptimal",
    }
    assert set(data["social"]) == {"title", "description", "isOpenGraphComplete", "isTwitterCardComplete"}
