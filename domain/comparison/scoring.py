"""
Distance scoring between two taxonomy nodes.

Score semantics (0-100):
- 100: identical input tags
- 99: different tags resolving to the same node (e.g. other region of one language)
- otherwise: how close the lowest common ancestor sits to both languages;
  0 when the two chains share no ancestor name

Ancestors are matched by name, not id: two unrelated nodes sharing a name are
treated as a common ancestor.
"""

from collections.abc import Mapping, Sequence

from domain.schemas import FamilyComparisonResult, TaxonomyNode
from domain.taxonomy.ancestry import DEFAULT_MAX_DEPTH, walk_ancestry

EXACT_MATCH_SCORE = 100
SAME_NODE_SCORE = 99
NO_RELATION_SCORE = 0


def find_common_ancestor(
    guess_ancestry: Sequence[str],
    correct_ancestry: Sequence[str],
) -> tuple[str | None, int, int]:
    """
    Return (name, guess_depth, correct_depth) of the nearest shared ancestor.

    The correct chain is scanned leaf-first; the first name also present in the
    guess chain wins. Depths are zero-based positions in each chain, or -1 when
    there is no common ancestor.
    """
    guess_names = set(guess_ancestry)
    for correct_depth, name in enumerate(correct_ancestry):
        if name in guess_names:
            return name, list(guess_ancestry).index(name), correct_depth
    return None, -1, -1


def depth_score(guess_depth: int, correct_depth: int, guess_len: int, correct_len: int) -> int:
    """
    Normalised closeness for a common ancestor at the given depths.

    max_steps is the distance if the chains only met at their last element; a
    degenerate max_steps of 0 (both inputs are the shared node) counts as closest.
    """
    total_steps = guess_depth + correct_depth
    max_steps = guess_len + correct_len - 2
    if max_steps <= 0:
        return EXACT_MATCH_SCORE
    # round half up, in integer arithmetic
    return (200 * (max_steps - total_steps) + max_steps) // (2 * max_steps)


def clamp_score(score: int) -> int:
    return max(NO_RELATION_SCORE, min(EXACT_MATCH_SCORE, score))


def compare_nodes(
    nodes: Mapping[str, TaxonomyNode],
    guess_id: str,
    correct_id: str,
    *,
    exact_tag_match: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> FamilyComparisonResult:
    """
    Compare two resolved nodes.

    Args:
        nodes: Node mapping of a loaded taxonomy
        guess_id: Node id of the guessed language
        correct_id: Node id of the correct language
        exact_tag_match: True when the raw input tags were identical strings
        max_depth: Safety bound for ancestry walks

    Raises:
        CycleDetectedError: If either ancestry walk does not terminate
    """
    guess_ancestry = walk_ancestry(nodes, guess_id, max_depth)
    correct_ancestry = walk_ancestry(nodes, correct_id, max_depth)

    common, guess_depth, correct_depth = find_common_ancestor(guess_ancestry, correct_ancestry)

    if exact_tag_match:
        score = EXACT_MATCH_SCORE
    elif guess_id == correct_id:
        score = SAME_NODE_SCORE
    elif common is None:
        score = NO_RELATION_SCORE
    else:
        score = depth_score(guess_depth, correct_depth, len(guess_ancestry), len(correct_ancestry))

    return FamilyComparisonResult(
        common_ancestor_name=common,
        distance_score=clamp_score(score),
        guess_ancestry=tuple(guess_ancestry),
        correct_ancestry=tuple(correct_ancestry),
    )
