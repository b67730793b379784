"""
Text normalization for lexical matching.
Turns free text into lowercase, accent-free, punctuation-free tokens.
"""

import re
import unicodedata

_COMBINING_MARKS_RE = re.compile("[\u0300-\u036f]")
_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """
    Canonicalize text for comparison.

    Steps:
        1. Lowercase
        2. NFD-decompose and drop combining diacritics ("ção" -> "cao")
        3. Replace anything that is not a word character or whitespace with a space
        4. Collapse whitespace runs and trim
    """
    text = text.lower()
    text = unicodedata.normalize("NFD", text)
    text = _COMBINING_MARKS_RE.sub("", text)
    text = _NON_WORD_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()
