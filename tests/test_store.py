import re
import threading

import pytest

from string_analyzer.errors import DuplicateValueError, ErrorKind, NotFoundError
from string_analyzer.services.analyzer import analyze
from string_analyzer.services.filters import FilterSet


def test_insert_returns_analyzed_record(store):
    record = store.insert("hello world")

    assert record.value == "hello world"
    assert record.id == record.properties.sha256_hash
    assert record.properties == analyze("hello world")
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", record.created_at)
    assert len(store) == 1
    assert "hello world" in store


def test_duplicate_insert_is_rejected(store):
    first = store.insert("racecar")

    with pytest.raises(DuplicateValueError) as exc_info:
        store.insert("racecar")

    assert exc_info.value.kind is ErrorKind.DUPLICATE_VALUE
    assert len(store) == 1
    assert store.get("racecar") is first


def test_values_differing_only_in_case_are_distinct(store):
    store.insert("Noon")
    store.insert("noon")

    assert len(store) == 2


def test_get_round_trip(store):
    store.insert("A man, a plan, a canal: Panama")

    record = store.get("A man, a plan, a canal: Panama")

    assert record.properties == analyze("A man, a plan, a canal: Panama")


def test_get_missing_value(store):
    with pytest.raises(NotFoundError):
        store.get("missing")


def test_delete_then_get_and_delete_again(store):
    store.insert("pizza")

    store.delete("pizza")

    with pytest.raises(NotFoundError):
        store.get("pizza")
    with pytest.raises(NotFoundError):
        store.delete("pizza")
    assert len(store) == 0


def test_list_all_preserves_insertion_order(store):
    for value in ("b", "a", "c"):
        store.insert(value)
    store.delete("a")
    store.insert("a")

    assert [record.value for record in store.list_all()] == ["b", "c", "a"]


def test_list_all_returns_snapshot(store):
    store.insert("one")
    snapshot = store.list_all()
    store.insert("two")

    assert [record.value for record in snapshot] == ["one"]


def test_filter_uses_filter_engine(seeded_store):
    result = seeded_store.filter(FilterSet(contains_character="z"))

    assert [record.value for record in result] == ["pizza"]


def test_clear(seeded_store):
    seeded_store.clear()

    assert seeded_store.list_all() == []


def test_concurrent_inserts_of_same_value(store):
    outcomes = []
    outcomes_lock = threading.Lock()
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        try:
            store.insert("contended")
            outcome = "ok"
        except DuplicateValueError:
            outcome = "duplicate"
        with outcomes_lock:
            outcomes.append(outcome)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count("ok") == 1
    assert outcomes.count("duplicate") == 7
    assert len(store) == 1


def test_store_module_has_no_web_framework_dependency():
    import string_analyzer.store as store_module

    modules = {getattr(obj, "__module__", "") or "" for obj in vars(store_module).values()}
    assert not any(name.startswith(("fastapi", "starlette")) for name in modules)
    assert not hasattr(store_module, "get_store")
