import pytest

from domain.errors import TaxonomyLoadError, TaxonomyNotReadyError
from domain.taxonomy.store import StoreState, TaxonomyStore

HEADER = "ID,Name,ISO639P3code,Level,Parent_ID"


def test_lookups_before_load_signal_not_ready() -> None:
    store = TaxonomyStore()
    assert store.state is StoreState.PENDING
    assert not store.is_ready()
    with pytest.raises(TaxonomyNotReadyError):
        store.node_by_id("eng1234")
    with pytest.raises(TaxonomyNotReadyError):
        store.node_by_external_code("eng")


def test_load_builds_nodes_and_code_index() -> None:
    store = TaxonomyStore()
    store.load_blocks([f"{HEADER}\neng1234,English,eng,language,germ1234\ngerm1234,Germanic,,family,\n"])

    assert store.is_ready()
    assert len(store) == 2
    assert store.node_by_external_code("eng").id == "eng1234"
    assert store.node_by_id("germ1234").is_root
    assert store.node_by_id("missing") is None
    assert store.node_by_external_code("zzz") is None


def test_later_block_overrides_duplicate_id() -> None:
    store = TaxonomyStore()
    store.load_blocks(
        [
            f"{HEADER}\nx1,Old Name,old,language,\n",
            f"{HEADER}\nx1,New Name,new,language,\n",
        ]
    )
    assert store.node_by_id("x1").name == "New Name"
    assert store.node_by_external_code("new").id == "x1"
    # stale code no longer points at the overwritten node
    assert store.node_by_external_code("old") is None


def test_ready_is_permanent_and_reload_is_rejected() -> None:
    store = TaxonomyStore()
    store.load_blocks([f"{HEADER}\nx1,Name,,,\n"])
    with pytest.raises(TaxonomyLoadError):
        store.load_blocks([f"{HEADER}\nx2,Other,,,\n"])
    assert store.is_ready()
    assert store.node_by_id("x2") is None


def test_failed_store_stays_not_ready() -> None:
    store = TaxonomyStore()
    store.begin_load()
    store.mark_failed()
    assert store.state is StoreState.FAILED
    with pytest.raises(TaxonomyLoadError):
        store.begin_load()
    with pytest.raises(TaxonomyNotReadyError):
        store.node_by_id("x1")


def test_subscribers_are_notified_once_on_settle() -> None:
    store = TaxonomyStore()
    seen: list[StoreState] = []
    store.subscribe(seen.append)
    assert seen == []

    store.load_blocks([f"{HEADER}\nx1,Name,,,\n"])
    assert seen == [StoreState.READY]

    # late subscribers are called immediately
    late: list[StoreState] = []
    store.subscribe(late.append)
    assert late == [StoreState.READY]
    assert seen == [StoreState.READY]


def test_cyclic_taxonomy_still_loads(caplog: pytest.LogCaptureFixture) -> None:
    store = TaxonomyStore()
    with caplog.at_level("WARNING"):
        store.load_blocks([f"{HEADER}\na1,A,aaa,language,b1\nb1,B,,family,a1\nc1,C,ccc,language,\n"])
    assert store.is_ready()
    assert "never reaches a root" in caplog.text


def test_raising_listener_does_not_undo_ready(caplog: pytest.LogCaptureFixture) -> None:
    store = TaxonomyStore()

    def broken(state: StoreState) -> None:
        raise RuntimeError("listener failure")

    seen: list[StoreState] = []
    store.subscribe(broken)
    store.subscribe(seen.append)

    with caplog.at_level("ERROR"):
        store.load_blocks([f"{HEADER}\nx1,Name,,,\n"])

    assert store.is_ready()
    assert seen == [StoreState.READY]
    assert "Readiness listener" in caplog.text
    assert store.node_by_id("x1").name == "Name"


def test_mark_failed_leaves_ready_store_alone() -> None:
    store = TaxonomyStore()
    store.load_blocks([f"{HEADER}\nx1,Name,,,\n"])
    store.mark_failed()
    assert store.state is StoreState.READY
    assert store.node_by_id("x1") is not None
