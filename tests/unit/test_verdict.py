from domain.comparison.verdict import GuessVerdict, classify_guess, guess_similarity
from domain.schemas import ComparisonOutcome, FamilyComparisonResult


def test_classify_guess() -> None:
    assert classify_guess("de-DE", "de-DE") is GuessVerdict.CORRECT
    assert classify_guess("de-AT", "de-DE") is GuessVerdict.BASE_MATCH
    assert classify_guess("nl-NL", "de-DE") is GuessVerdict.WRONG


def test_similarity_never_reports_unavailable_as_zero() -> None:
    assert guess_similarity(GuessVerdict.CORRECT) == 100
    assert guess_similarity(GuessVerdict.BASE_MATCH, ComparisonOutcome.not_ready()) == 99
    assert guess_similarity(GuessVerdict.WRONG, ComparisonOutcome.not_ready()) is None
    assert guess_similarity(GuessVerdict.WRONG, ComparisonOutcome.unresolvable("xx")) is None
    assert guess_similarity(GuessVerdict.WRONG) is None

    unrelated = ComparisonOutcome.ready(FamilyComparisonResult(distance_score=0))
    assert guess_similarity(GuessVerdict.WRONG, unrelated) == 0
