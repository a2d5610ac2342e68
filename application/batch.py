"""Score a table of guess/correct locale pairs."""

import logging
from collections import Counter
from typing import Any

import pandas as pd

from application.constants import (
    COMMON_ANCESTOR_KEY,
    CORRECT_BRANCH_KEY,
    CORRECT_COL,
    CYCLE_DETECTED_STATUS,
    GUESS_BRANCH_KEY,
    GUESS_COL,
    SCORE_KEY,
    SHARED_PREFIX_KEY,
    SIBLINGS_KEY,
    STATUS_KEY,
    UNRESOLVED_KEY,
    VERDICT_KEY,
)
from application.engine import LanguageFamilyEngine
from domain.comparison import GuessVerdict, classify_guess, guess_similarity
from domain.errors import CycleDetectedError
from domain.schemas import AncestryDiff

logger = logging.getLogger(__name__)


def score_pair(engine: LanguageFamilyEngine, guess: str, correct: str) -> dict[str, Any]:
    """
    One report record for a guess.

    `score` is None when the comparison is unavailable (not ready / unresolvable
    / cyclic ancestry) and the guess is not an exact or base-language match.
    """
    verdict = classify_guess(guess, correct)
    try:
        outcome = engine.resolve_and_compare(guess, correct)
    except CycleDetectedError as exc:
        logger.warning("Skipping %s vs %s: parent cycle at node %s", guess, correct, exc.node_id)
        return _record(guess, correct, verdict, CYCLE_DETECTED_STATUS, guess_similarity(verdict))

    diff = engine.diff_outcome(outcome)
    return _record(
        guess,
        correct,
        verdict,
        outcome.status.value,
        guess_similarity(verdict, outcome),
        common_ancestor=outcome.result.common_ancestor_name,
        diff=diff,
        siblings=engine.are_siblings(outcome),
        unresolved=list(outcome.unresolved_tags),
    )


def _record(
    guess: str,
    correct: str,
    verdict: GuessVerdict,
    status: str,
    score: int | None,
    *,
    common_ancestor: str | None = None,
    diff: AncestryDiff | None = None,
    siblings: bool = False,
    unresolved: list[str] | None = None,
) -> dict[str, Any]:
    return {
        GUESS_COL: guess,
        CORRECT_COL: correct,
        VERDICT_KEY: verdict.value,
        STATUS_KEY: status,
        SCORE_KEY: score,
        COMMON_ANCESTOR_KEY: common_ancestor,
        SHARED_PREFIX_KEY: list(diff.shared_prefix) if diff else [],
        GUESS_BRANCH_KEY: list(diff.guess_branch) if diff else [],
        CORRECT_BRANCH_KEY: list(diff.correct_branch) if diff else [],
        SIBLINGS_KEY: siblings,
        UNRESOLVED_KEY: unresolved or [],
    }


def score_pairs(
    engine: LanguageFamilyEngine,
    df: pd.DataFrame,
    guess_col: str = GUESS_COL,
    correct_col: str = CORRECT_COL,
) -> pd.DataFrame:
    """
    Score every row of `df` and return one report row per input row.

    Raises:
        KeyError: If a configured column is missing
    """
    for col in (guess_col, correct_col):
        if col not in df.columns:
            raise KeyError(f"Column '{col}' not found in pairs table columns: {list(df.columns)}")

    records = [
        score_pair(engine, str(row[guess_col]).strip(), str(row[correct_col]).strip())
        for _, row in df.iterrows()
    ]
    out = pd.DataFrame.from_records(
        records,
        columns=[
            GUESS_COL,
            CORRECT_COL,
            VERDICT_KEY,
            STATUS_KEY,
            SCORE_KEY,
            COMMON_ANCESTOR_KEY,
            SHARED_PREFIX_KEY,
            GUESS_BRANCH_KEY,
            CORRECT_BRANCH_KEY,
            SIBLINGS_KEY,
            UNRESOLVED_KEY,
        ],
    )

    counts = Counter(out[STATUS_KEY])
    logger.info(
        "Scored %d pair(s): ready=%d not_ready=%d unresolvable=%d cycle_detected=%d",
        len(out),
        counts.get("ready", 0),
        counts.get("not_ready", 0),
        counts.get("unresolvable", 0),
        counts.get(CYCLE_DETECTED_STATUS, 0),
    )
    return out


def report_records(report_df: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert a score_pairs frame to JSON-ready records (NaN scores become None)."""
    records = report_df.to_dict(orient="records")
    for record in records:
        score = record.get(SCORE_KEY)
        record[SCORE_KEY] = None if score is None or pd.isna(score) else int(score)
    return records
