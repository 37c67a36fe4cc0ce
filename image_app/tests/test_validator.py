import pytest

from image_app.services.validator import ImageValidator


@pytest.fixture()
def validator():
    return ImageValidator()


def test_regular_url_passes_unchanged(validator):
    url = "https://cdn.pharmcdn.net/tylenol.jpg"
    assert validator.validate(url) == url


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/tylenol.jpg",
        "https://images.example.org/a.png",
        "http://cdn.example.net/a.png",
        "https://www.test.com/a.png",
        "http://localhost:8000/a.png",
    ],
)
def test_test_and_placeholder_domains_are_rejected(validator, url):
    assert validator.validate(url) is None


def test_small_inline_image_is_rejected(validator):
    assert validator.validate("data:image/png;base64," + "A" * 100) is None


def test_large_inline_image_passes(validator):
    data_url = "data:image/jpeg;base64," + "A" * 400
    assert validator.validate(data_url) == data_url


@pytest.mark.parametrize("url", ["http://[::1", "https://", "http:///path/only.jpg"])
def test_unparseable_url_is_rejected(validator, url):
    assert validator.validate(url) is None


def test_non_http_candidate_is_returned_as_is(validator):
    assert validator.validate("/relative/path.jpg") == "/relative/path.jpg"


def test_empty_candidate(validator):
    assert validator.validate(None) is None
    assert validator.validate("") is None
