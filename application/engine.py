"""Query interface over a loaded taxonomy: readiness, comparison, diffs, display names."""

import logging
from collections.abc import Sequence

import httpx

from application.loading import load_taxonomy
from domain.comparison import ancestry_diff, are_siblings, compare_nodes, diff_result
from domain.errors import TaxonomyNotReadyError, UnresolvableIdentifierError
from domain.schemas import AncestryDiff, ComparisonOutcome, DisplayEntry
from domain.taxonomy import IdentifierResolver, TaxonomyStore, merge_fallbacks
from domain.taxonomy.store import ReadyListener, StoreState
from infrastructure.config.models import EngineConfig

logger = logging.getLogger(__name__)


class LanguageFamilyEngine:
    """
    Scoring engine for language guesses.

    Construction does no I/O. Call `await engine.load()` once; until it succeeds,
    `resolve_and_compare` returns NOT_READY outcomes. A failed load is permanent
    for the instance, so retrying means building a new engine.
    """

    def __init__(self, cfg: EngineConfig | None = None, store: TaxonomyStore | None = None) -> None:
        self.cfg = cfg or EngineConfig()
        self.store = store or TaxonomyStore()
        self.resolver = IdentifierResolver(self.store, merge_fallbacks(self.cfg.extra_fallbacks))

    @classmethod
    def from_text(cls, *blocks: str, cfg: EngineConfig | None = None) -> "LanguageFamilyEngine":
        """Build a ready engine from in-memory taxonomy text (each block with its header)."""
        engine = cls(cfg)
        engine.store.load_blocks(blocks)
        return engine

    async def load(self, *, client: httpx.AsyncClient | None = None) -> bool:
        return await load_taxonomy(self.store, self.cfg, client=client)

    def is_ready(self) -> bool:
        return self.store.is_ready()

    @property
    def state(self) -> StoreState:
        return self.store.state

    def subscribe(self, listener: ReadyListener) -> None:
        self.store.subscribe(listener)

    def resolve_and_compare(self, guess_tag: str, correct_tag: str) -> ComparisonOutcome:
        """
        Compare a guessed locale tag with the correct one.

        Returns a NOT_READY outcome before the taxonomy is loaded and an
        UNRESOLVABLE outcome when either tag has no taxonomy node. Both carry the
        empty result; only READY outcomes carry a meaningful score.

        Raises:
            CycleDetectedError: If the taxonomy contains a parent cycle on either path
        """
        if not self.is_ready():
            return ComparisonOutcome.not_ready()

        unresolved: list[str] = []
        ids: list[str] = []
        for tag in (guess_tag, correct_tag):
            try:
                ids.append(self.resolver.resolve(tag))
            except UnresolvableIdentifierError:
                unresolved.append(tag)
            except TaxonomyNotReadyError:
                return ComparisonOutcome.not_ready()

        if unresolved:
            logger.debug("Comparison unavailable; unresolved tag(s): %s", unresolved)
            return ComparisonOutcome.unresolvable(*unresolved)

        guess_id, correct_id = ids
        result = compare_nodes(
            self.store.nodes,
            guess_id,
            correct_id,
            exact_tag_match=guess_tag == correct_tag,
            max_depth=self.cfg.max_ancestry_depth,
        )
        logger.debug(
            "Compared %s vs %s: ancestor=%s score=%d",
            guess_tag,
            correct_tag,
            result.common_ancestor_name,
            result.distance_score,
        )
        return ComparisonOutcome.ready(result)

    def ancestry_diff(self, guess_chain: Sequence[str], correct_chain: Sequence[str]) -> AncestryDiff:
        return ancestry_diff(guess_chain, correct_chain)

    def diff_outcome(self, outcome: ComparisonOutcome) -> AncestryDiff | None:
        """Diff of a READY outcome's chains, or None for unavailable outcomes."""
        return diff_result(outcome.result) if outcome.ok else None

    def are_siblings(self, outcome: ComparisonOutcome) -> bool:
        diff = self.diff_outcome(outcome)
        return diff is not None and are_siblings(diff, outcome.result.distance_score)

    def get_display_entry(self, external_code: str) -> DisplayEntry | None:
        """
        Display name for an external language code (macrolanguage fallback applies).

        Raises:
            TaxonomyNotReadyError: If the taxonomy is not loaded
        """
        code = external_code.strip().lower()
        node_id = self.resolver.lookup_code(code)
        if node_id is None:
            return None
        node = self.store.node_by_id(node_id)
        if node is None:
            return None
        return DisplayEntry(name=node.name, external_code=code, node_id=node.id)
