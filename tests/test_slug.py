import pytest

from utils.slug import SlugError, slugify


@pytest.mark.parametrize("text, expected", [
    ("Electronics", "Electronics"),
    ("Home & Garden", "Home-Garden"),
    ("  Kids   Toys ", "Kids-Toys"),
    ("Café Crème", "Cafe-Creme"),
    ("T-Shirts--Men", "T-Shirts-Men"),
])
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_slugify_is_deterministic():
    assert slugify("Books & Media") == slugify("Books & Media")


@pytest.mark.parametrize("value", [None, 42])
def test_slugify_rejects_non_strings(value):
    with pytest.raises(SlugError):
        slugify(value)
