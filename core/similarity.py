"""
Word-overlap similarity between two texts.
"""

from config import MIN_TOKEN_LENGTH, SUBSTRING_BONUS
from core.normalizer import normalize


def score(text1: str, text2: str) -> float:
    """
    Score how well text1 is covered by text2.

    Counts the tokens of text1 (at least MIN_TOKEN_LENGTH chars) that also
    appear in text2, adds SUBSTRING_BONUS when either normalized text contains
    the other, and divides by the longer token count. The result is not
    symmetric and can exceed 1 for short texts.
    """
    normalized1 = normalize(text1)
    normalized2 = normalize(text2)

    # "".split(" ") == [""], so total_words is never zero
    words1 = normalized1.split(" ")
    words2 = normalized2.split(" ")
    total_words = max(len(words1), len(words2))

    matches = 0
    for word in words1:
        if len(word) >= MIN_TOKEN_LENGTH and word in words2:
            matches += 1

    if normalized1 in normalized2 or normalized2 in normalized1:
        matches += SUBSTRING_BONUS

    return matches / total_words
