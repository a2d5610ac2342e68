import pytest

from domain.errors import CycleDetectedError
from domain.schemas import TaxonomyNode
from domain.taxonomy.ancestry import find_cyclic_nodes, walk_ancestry


def _nodes(*rows: tuple[str, str, str | None]) -> dict[str, TaxonomyNode]:
    return {nid: TaxonomyNode(id=nid, name=name, parent_id=parent) for nid, name, parent in rows}


GERMANIC = _nodes(
    ("eng", "English", "germ"),
    ("germ", "Germanic", "indo"),
    ("indo", "Indo-European", None),
)


def test_walk_is_leaf_first() -> None:
    assert walk_ancestry(GERMANIC, "eng") == ["English", "Germanic", "Indo-European"]


def test_walk_from_root_and_unknown_id() -> None:
    assert walk_ancestry(GERMANIC, "indo") == ["Indo-European"]
    assert walk_ancestry(GERMANIC, "nope") == []


def test_walk_stops_at_dangling_parent() -> None:
    nodes = _nodes(("a", "A", "ghost"))
    assert walk_ancestry(nodes, "a") == ["A"]


def test_walk_detects_cycle() -> None:
    nodes = _nodes(("a", "A", "b"), ("b", "B", "a"))
    with pytest.raises(CycleDetectedError) as exc_info:
        walk_ancestry(nodes, "a")
    assert exc_info.value.node_id == "a"


def test_walk_respects_depth_bound() -> None:
    with pytest.raises(CycleDetectedError):
        walk_ancestry(GERMANIC, "eng", max_depth=2)


def test_find_cyclic_nodes_includes_nodes_leading_into_cycle() -> None:
    nodes = _nodes(
        ("a", "A", "b"),
        ("b", "B", "c"),
        ("c", "C", "b"),
        ("d", "D", "a"),
        ("r", "Root", None),
        ("x", "X", "r"),
    )
    assert find_cyclic_nodes(nodes) == {"a", "b", "c", "d"}


def test_every_node_of_a_forest_reaches_a_root() -> None:
    assert find_cyclic_nodes(GERMANIC) == set()
    for node_id in GERMANIC:
        chain = walk_ancestry(GERMANIC, node_id)
        assert chain[-1] == "Indo-European"
