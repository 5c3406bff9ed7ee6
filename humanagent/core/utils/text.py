"""Text normalization shared by knowledge entries and the matching engine."""

import re

# Anything that is not a letter or digit separates words; "_" counts as a word
# character for ``\w`` so it is listed explicitly.
_SEPARATOR_RE = re.compile(r"[\W_]+")


def normalize(text: str | None) -> str:
    """Lowercase, turn punctuation into spaces and collapse whitespace.

    Diacritics are kept, so "Gefäße" becomes "gefäße".

    Args:
        text: Raw text (``None`` is treated as empty)

    Returns:
        Normalized text, possibly empty
    """
    if not text:
        return ""
    return " ".join(_SEPARATOR_RE.sub(" ", text.lower()).split())


def tokenize(normalized: str) -> frozenset[str]:
    """Split already-normalized text into its set of words."""
    return frozenset(normalized.split())
