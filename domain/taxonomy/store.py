"""In-memory taxonomy store with an external-code index and a readiness state."""

import logging
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from types import MappingProxyType

from domain.errors import TaxonomyLoadError, TaxonomyNotReadyError
from domain.schemas import TaxonomyNode
from domain.taxonomy.ancestry import find_cyclic_nodes
from domain.taxonomy.parser import ParseReport, parse_taxonomy_blocks

logger = logging.getLogger(__name__)


class StoreState(str, Enum):
    PENDING = "pending"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


ReadyListener = Callable[[StoreState], None]


class TaxonomyStore:
    """
    Write-once store of taxonomy nodes.

    The store starts PENDING, moves to LOADING when a load begins, and ends in
    READY or FAILED. Both end states are permanent for the instance; callers that
    want to retry a failed load create a new store.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, TaxonomyNode] = {}
        self._by_code: dict[str, str] = {}
        self._state = StoreState.PENDING
        self._listeners: list[ReadyListener] = []
        self.last_report: ParseReport | None = None

    @property
    def state(self) -> StoreState:
        return self._state

    def is_ready(self) -> bool:
        return self._state is StoreState.READY

    def subscribe(self, listener: ReadyListener) -> None:
        """Call `listener` once with the end state (immediately if already settled)."""
        if self._state in (StoreState.READY, StoreState.FAILED):
            _notify(listener, self._state)
            return
        self._listeners.append(listener)

    def begin_load(self) -> None:
        if self._state is not StoreState.PENDING:
            raise TaxonomyLoadError(f"Taxonomy store already {self._state.value}; create a new store to reload")
        self._state = StoreState.LOADING

    def load_blocks(self, blocks: Iterable[str]) -> ParseReport:
        """
        Parse text blocks and publish the resulting node graph.

        May be called directly on a PENDING store (synchronous load) or after
        begin_load(). Any exception leaves the store FAILED.
        """
        if self._state is StoreState.PENDING:
            self.begin_load()
        elif self._state is not StoreState.LOADING:
            raise TaxonomyLoadError(f"Taxonomy store already {self._state.value}; create a new store to reload")

        try:
            report = parse_taxonomy_blocks(blocks)
            nodes, by_code, duplicates = _index_nodes(report.nodes)
        except Exception:
            self.mark_failed()
            raise

        if duplicates:
            logger.warning("Taxonomy defines %d duplicate node id(s); last definition wins", duplicates)

        cyclic = find_cyclic_nodes(nodes)
        if cyclic:
            logger.warning(
                "Taxonomy has %d node(s) whose parent chain never reaches a root: %s",
                len(cyclic),
                ", ".join(sorted(cyclic)[:10]),
            )

        self._nodes = nodes
        self._by_code = by_code
        self.last_report = report
        self._settle(StoreState.READY)
        logger.info(
            "Taxonomy loaded: %d nodes, %d external codes, %d block(s), %d row(s) skipped",
            len(nodes),
            len(by_code),
            report.blocks,
            len(report.skipped),
        )
        return report

    def mark_failed(self) -> None:
        """Settle a PENDING or LOADING store as FAILED; a READY store is left untouched."""
        if self._state is StoreState.READY:
            logger.warning("Ignoring mark_failed on a ready taxonomy store")
            return
        self._nodes = {}
        self._by_code = {}
        self._settle(StoreState.FAILED)

    def _settle(self, state: StoreState) -> None:
        self._state = state
        listeners, self._listeners = self._listeners, []
        for listener in listeners:
            _notify(listener, state)

    def _require_ready(self) -> None:
        if not self.is_ready():
            raise TaxonomyNotReadyError(f"Taxonomy is not available (state={self._state.value})")

    # ---- Read-only lookups ----

    def node_by_id(self, node_id: str) -> TaxonomyNode | None:
        self._require_ready()
        return self._nodes.get(node_id)

    def node_by_external_code(self, code: str) -> TaxonomyNode | None:
        self._require_ready()
        node_id = self._by_code.get(code)
        return self._nodes.get(node_id) if node_id is not None else None

    def id_for_external_code(self, code: str) -> str | None:
        self._require_ready()
        return self._by_code.get(code)

    @property
    def nodes(self) -> Mapping[str, TaxonomyNode]:
        self._require_ready()
        return MappingProxyType(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)


def _index_nodes(records: list[TaxonomyNode]) -> tuple[dict[str, TaxonomyNode], dict[str, str], int]:
    nodes: dict[str, TaxonomyNode] = {}
    by_code: dict[str, str] = {}
    duplicates = 0

    for node in records:
        previous = nodes.get(node.id)
        if previous is not None:
            duplicates += 1
            # drop the stale code entry unless another node has claimed it since
            if previous.external_code and by_code.get(previous.external_code) == node.id:
                del by_code[previous.external_code]
        nodes[node.id] = node
        if node.external_code:
            by_code[node.external_code] = node.id

    return nodes, by_code, duplicates


def _notify(listener: ReadyListener, state: StoreState) -> None:
    try:
        listener(state)
    except Exception:
        logger.exception("Readiness listener %r raised on state=%s", listener, state.value)
