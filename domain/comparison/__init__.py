"""
Comparison of two taxonomy nodes.

Provides:
- Distance scoring via the lowest common ancestor
- Ancestry diff (shared trunk vs divergent branches)
- Guess verdicts (exact, base-language match, wrong)

All functions are pure and operate on already-loaded taxonomy data.
"""

from domain.comparison.diff import ancestry_diff, are_siblings, diff_result
from domain.comparison.scoring import compare_nodes, depth_score, find_common_ancestor
from domain.comparison.verdict import GuessVerdict, classify_guess, guess_similarity

__all__ = [
    "compare_nodes",
    "depth_score",
    "find_common_ancestor",
    "ancestry_diff",
    "diff_result",
    "are_siblings",
    "GuessVerdict",
    "classify_guess",
    "guess_similarity",
]
