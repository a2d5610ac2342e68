"""Walk parent links from a taxonomy node up to its root."""

from collections.abc import Mapping

from domain.errors import CycleDetectedError
from domain.schemas import TaxonomyNode

DEFAULT_MAX_DEPTH = 256


def walk_ancestry(
    nodes: Mapping[str, TaxonomyNode],
    node_id: str,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[str]:
    """
    Return ancestor names from the node itself up to its root (leaf first).

    The walk stops at a node without a parent or whose parent id is unknown.
    An unknown starting id yields an empty list.

    Raises:
        CycleDetectedError: If a node is revisited or the chain exceeds max_depth
    """
    ancestry: list[str] = []
    seen: set[str] = set()
    current = nodes.get(node_id)

    while current is not None:
        if current.id in seen or len(ancestry) >= max_depth:
            raise CycleDetectedError(node_id, len(ancestry))
        seen.add(current.id)
        ancestry.append(current.name)
        if current.parent_id is None:
            break
        current = nodes.get(current.parent_id)

    return ancestry


def find_cyclic_nodes(nodes: Mapping[str, TaxonomyNode]) -> set[str]:
    """Return ids of every node whose parent chain never reaches a root."""
    # 0 = unvisited, 1 = on current path, 2 = terminates
    status: dict[str, int] = {}
    cyclic: set[str] = set()

    for start in nodes:
        if status.get(start):
            continue
        path: list[str] = []
        current: str | None = start
        while current is not None and current in nodes and not status.get(current):
            status[current] = 1
            path.append(current)
            current = nodes[current].parent_id

        # reached a node already on this path, or one already known to loop
        loops = current is not None and (status.get(current) == 1 or current in cyclic)
        for nid in path:
            status[nid] = 2
            if loops:
                cyclic.add(nid)

    return cyclic
