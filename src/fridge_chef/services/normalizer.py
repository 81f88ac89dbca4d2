"""Tokenization helpers for detection labels and captions."""

import re
import string
from collections.abc import Iterator, Sequence

_SPLIT_PATTERN = re.compile(r"[\s,]+")
_MIN_TOKEN_LENGTH = 3
_STOP_WORDS = frozenset(
    {
        "a",
        "an",
        "the",
        "and",
        "with",
        "contains",
        "made",
        "of",
        "from",
        "in",
        "on",
        "at",
        "to",
        "for",
        "is",
        "are",
        "there",
        "food",
        "dish",
        "meal",
        "recipe",
        "picture",
        "image",
        "photo",
        "shows",
        "showing",
        "displayed",
        "multiple",
        "various",
        "several",
        "many",
        "some",
        "full",
        "inside",
        "open",
    }
)
_PLURAL_SUFFIXES = ("s", "es")


def normalize(text: str | None) -> Iterator[str]:
    """Yield lower-cased candidate tokens from a label or caption."""
    if not text:
        return
    for raw in _SPLIT_PATTERN.split(text.lower()):
        token = raw.strip(string.punctuation)
        if token.endswith("'s"):
            token = token[:-2]
        if len(token) < _MIN_TOKEN_LENGTH or token in _STOP_WORDS:
            continue
        yield token


def same_word(token: str, term: str) -> bool:
    """Compare two words, tolerating a simple plural suffix on either side."""
    if token == term:
        return True
    return any(
        token == term + suffix or term == token + suffix for suffix in _PLURAL_SUFFIXES
    )


def contains_phrase(tokens: Sequence[str], phrase: str) -> bool:
    """Return True when the phrase appears as a contiguous run of tokens."""
    words = phrase.lower().split()
    if not words:
        return False
    width = len(words)
    return any(
        list(tokens[start : start + width]) == words
        for start in range(len(tokens) - width + 1)
    )

