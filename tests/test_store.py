# tests/test_store.py
import logging

import pytest

from aios_brain.config import Config
from aios_brain.store import KnowledgeStore, QueryResult, QueryStatus


def test_seeded_identity(brain):
    assert brain.query("system.name") == "AIOS-Android"
    assert brain.query("system.version") == "4.0.1-AIOS"
    assert brain.query("system.type") == "AI Operating System"
    assert brain.query("system.layer") == "Base OS Layer"
    assert brain.knowledge_count == 4


def test_seed_follows_config():
    Config.brain.SYSTEM_NAME = "TestOS"
    assert KnowledgeStore().query("system.name") == "TestOS"


def test_seed_can_be_overwritten(brain):
    brain.store("system.name", "Renamed")
    assert brain.query("system.name") == "Renamed"
    assert brain.knowledge_count == 4


def test_store_then_query(brain):
    pairs = {"color": "blue", "": "empty key", "blank": "", "multi word key": "x y z"}
    for key, value in pairs.items():
        brain.store(key, value)
    for key, value in pairs.items():
        assert brain.query(key) == value


def test_last_write_wins(brain):
    brain.store("k", "first")
    brain.store("k", "second")
    assert brain.query("k") == "second"


def test_question_contains_key():
    brain = KnowledgeStore()
    brain.store("foo", "bar-value")
    # "foobar" only contains the stored key "foo"
    assert brain.query("foobar") == "bar-value"


def test_key_contains_question():
    brain = KnowledgeStore()
    brain.store("foobar", "long-value")
    assert brain.query("foo") == "long-value"


def test_multiple_candidates_returns_one_of_them(brain):
    brain.store("alpha", "1")
    brain.store("alphabet", "2")
    # Both keys contain "alph"; either answer is valid
    assert brain.query("alph") in {"1", "2"}


def test_substring_matches_seed_keys(brain):
    # "system.na" is only contained in "system.name"
    assert brain.query("system.na") == "AIOS-Android"


def test_not_found(brain):
    assert brain.query("zzz") == "Knowledge not found: zzz"


def test_resolve_tags_outcomes(brain):
    found = brain.resolve("system.name")
    assert found == QueryResult(QueryStatus.FOUND, "system.name", "AIOS-Android")

    missing = brain.resolve("zzz")
    assert missing.status is QueryStatus.NOT_FOUND
    assert missing.value is None

    brain.shutdown()
    assert brain.resolve("system.name").status is QueryStatus.INACTIVE


def test_status_active(brain):
    assert brain.get_status() == "ACTIVE - Thoughts: 0, Knowledge: 4"
    brain.submit("hello")
    brain.store("a", "b")
    assert brain.get_status() == "ACTIVE - Thoughts: 1, Knowledge: 5"


def test_shutdown_is_terminal(brain):
    assert brain.is_active
    brain.shutdown()
    brain.shutdown()
    assert not brain.is_active
    assert brain.get_status() == "INACTIVE"


def test_inactive_operations_are_inert(brain):
    brain.shutdown()
    brain.store("x", "y")
    brain.submit("p = q")

    assert brain.query("x") == "AIosBrain is not active"
    assert brain.query("system.name") == "AIosBrain is not active"
    assert "x" not in brain.snapshot()
    assert "p" not in brain.snapshot()
    assert brain.thought_count == 0


def test_inactive_writes_warn(brain, caplog):
    brain.shutdown()
    with caplog.at_level(logging.WARNING, logger="aios_brain.store"):
        brain.store("x", "y")
        brain.submit("thought")
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2


def test_snapshot_is_a_copy(brain):
    snap = brain.snapshot()
    snap["injected"] = "value"
    assert brain.query("injected") == "Knowledge not found: injected"


def test_invalid_capacity():
    with pytest.raises(ValueError):
        KnowledgeStore(thought_capacity=0)
