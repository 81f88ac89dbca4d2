"""Tests for label and caption normalization."""

from fridge_chef.services.normalizer import contains_phrase, normalize, same_word


def test_normalize_lowercases_and_drops_stop_words() -> None:
    tokens = list(normalize("A photo of the Fridge, showing MILK and eggs!"))

    assert tokens == ["fridge", "milk", "eggs"]


def test_normalize_drops_short_tokens_and_possessives() -> None:
    tokens = list(normalize("Trader Joe's OJ in a jar"))

    assert tokens == ["trader", "joe", "jar"]


def test_normalize_splits_imagenet_style_labels() -> None:
    tokens = list(normalize("pop bottle, soda bottle"))

    assert tokens == ["pop", "bottle", "soda", "bottle"]


def test_normalize_handles_empty_input() -> None:
    assert list(normalize(None)) == []
    assert list(normalize("")) == []
    assert list(normalize("?! ... ,,")) == []


def test_normalize_is_lazy() -> None:
    tokens = normalize("milk eggs")

    assert next(tokens) == "milk"
    assert next(tokens) == "eggs"


def test_same_word_tolerates_plurals() -> None:
    assert same_word("orange", "oranges")
    assert same_word("tomatoes", "tomato")
    assert same_word("bottles", "bottle")
    assert not same_word("milkshake", "milk")


def test_contains_phrase_matches_contiguous_tokens() -> None:
    tokens = ["bottle", "gold", "peak", "tea"]

    assert contains_phrase(tokens, "gold peak")
    assert not contains_phrase(tokens, "peak gold")
    assert not contains_phrase(tokens, "")
