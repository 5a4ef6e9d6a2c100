"""Turn raw tokens into index keywords."""

from collections.abc import Iterable
import re

# Only these are stripped, and only as a trailing run ("end?!" -> "end").
PUNCTUATION = ".,?:;!"

_KEYWORD_RE = re.compile(r"[a-z]+")


def _strip_trailing(token: str) -> str:
    return token.rstrip(PUNCTUATION).lower()


def load_noise_words(words: Iterable[str]) -> frozenset[str]:
    """Case-fold raw noise words the same way tokens are; blanks are dropped."""
    return frozenset(w for w in (_strip_trailing(word.strip()) for word in words) if w)


def normalize(token: str, noise_words: frozenset[str] = frozenset()) -> str | None:
    """Return the keyword for token, or None if it is not one.

    A keyword is what remains after stripping trailing punctuation and
    lowercasing, provided it is made of letters only and is not a noise word.
    Embedded or leading punctuation rejects the token outright.
    """
    word = _strip_trailing(token)
    if not _KEYWORD_RE.fullmatch(word):
        return None
    if word in noise_words:
        return None
    return word
