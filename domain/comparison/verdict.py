"""Classify a guess against the correct locale tag."""

from enum import Enum

from domain.comparison.scoring import EXACT_MATCH_SCORE, SAME_NODE_SCORE
from domain.schemas import ComparisonOutcome
from domain.taxonomy.resolver import same_base_language


class GuessVerdict(str, Enum):
    CORRECT = "correct"
    BASE_MATCH = "base_match"  # right language, wrong region
    WRONG = "wrong"


def classify_guess(guess_tag: str, correct_tag: str) -> GuessVerdict:
    if guess_tag == correct_tag:
        return GuessVerdict.CORRECT
    if same_base_language(guess_tag, correct_tag):
        return GuessVerdict.BASE_MATCH
    return GuessVerdict.WRONG


def guess_similarity(verdict: GuessVerdict, outcome: ComparisonOutcome | None = None) -> int | None:
    """
    Similarity shown for a guess.

    Returns None for a wrong guess whose family comparison is unavailable, so a
    missing taxonomy is never reported as "unrelated".
    """
    if verdict is GuessVerdict.CORRECT:
        return EXACT_MATCH_SCORE
    if verdict is GuessVerdict.BASE_MATCH:
        return SAME_NODE_SCORE
    if outcome is None or not outcome.ok:
        return None
    return outcome.result.distance_score
