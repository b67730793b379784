"""
Best-match selection over the process knowledge base.
Used as the always-available fallback when no LLM answer is produced.
"""

from typing import Optional, Sequence

from config import MIN_SCORE, QUESTION_WEIGHT, TAGS_WEIGHT, TITLE_WEIGHT
from core.knowledge_base import ProcessRecord
from core.similarity import score


def score_record(query: str, record: ProcessRecord) -> float:
    """Return the best weighted score of the query against a record's question, tags and title."""
    question_score = score(query, record.question) * QUESTION_WEIGHT
    tags_score = score(query, " ".join(record.tags)) * TAGS_WEIGHT
    title_score = score(query, record.title) * TITLE_WEIGHT
    return max(question_score, tags_score, title_score)


def find_best_match(
    query: str,
    corpus: Sequence[ProcessRecord],
    min_score: float = MIN_SCORE,
) -> Optional[ProcessRecord]:
    """
    Return the highest scoring record, or None if no record scores above min_score.
    Records are scanned in corpus order; on a tie the earlier record wins.
    """
    best_match: Optional[ProcessRecord] = None
    best_score = 0.0

    for record in corpus:
        final_score = score_record(query, record)
        if final_score > best_score and final_score > min_score:
            best_score = final_score
            best_match = record

    return best_match
