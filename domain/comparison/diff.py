"""Split two ancestry chains into a shared trunk and two divergent branches."""

from collections.abc import Sequence

from domain.schemas import AncestryDiff, FamilyComparisonResult


def ancestry_diff(guess_chain: Sequence[str], correct_chain: Sequence[str]) -> AncestryDiff:
    """
    Build the branching view of two leaf-first ancestry chains.

    Both chains are reversed to read root-first. The shared prefix is the longest
    run of positionally equal names; what follows on each side is that side's
    branch, still in root-to-leaf order.

    Examples:
        >>> d = ancestry_diff(["English", "Germanic", "Indo-European"],
        ...                   ["German", "Germanic", "Indo-European"])
        >>> d.shared_prefix, d.guess_branch, d.correct_branch
        (('Indo-European', 'Germanic'), ('English',), ('German',))
    """
    guess_rev = tuple(reversed(guess_chain))
    correct_rev = tuple(reversed(correct_chain))

    shared = 0
    for g, c in zip(guess_rev, correct_rev):
        if g != c:
            break
        shared += 1

    return AncestryDiff(
        shared_prefix=guess_rev[:shared],
        guess_branch=guess_rev[shared:],
        correct_branch=correct_rev[shared:],
    )


def diff_result(result: FamilyComparisonResult) -> AncestryDiff:
    return ancestry_diff(result.guess_ancestry, result.correct_ancestry)


def are_siblings(diff: AncestryDiff, distance_score: int) -> bool:
    """Same lineage on both sides but not an exact match."""
    return not diff.guess_branch and not diff.correct_branch and distance_score < 100
