"""Tests for dafny_export/state.py — the symbol store and import merging."""

import logging

import pytest

from dafny_export.errors import ImportCycle, UnknownModule
from dafny_export.expr import DeclId
from dafny_export.state import (
    EMPTY_STATE,
    AddDecl,
    ToExport,
    UnitLog,
    import_closure,
    merge_from_imports,
    replay,
)

D = DeclId


class TestTranslationState:
    def test_find_missing(self) -> None:
        assert EMPTY_STATE.find(D("foo")) is None

    def test_insert_then_find(self) -> None:
        state = EMPTY_STATE.insert(D("foo"), "bla")
        assert state.find(D("foo")) == "bla"

    def test_insert_is_pure(self) -> None:
        state = EMPTY_STATE.insert(D("foo"), "bla")
        state.insert(D("bar"), "baz")
        assert EMPTY_STATE.find(D("foo")) is None
        assert state.find(D("bar")) is None

    def test_symbols_keep_insertion_order(self) -> None:
        state = EMPTY_STATE.insert(D("b"), "B").insert(D("a"), "A")
        assert list(state.symbols) == ["b", "a"]

    def test_reinsert_last_write_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="dafny_export.state"):
            state = EMPTY_STATE.insert(D("foo"), "one").insert(D("foo"), "two")
        assert state.find(D("foo")) == "two"
        assert "Rebinding" in caplog.text

    def test_export_is_a_stack(self) -> None:
        state = EMPTY_STATE.export("s1").export("s2").export("s3")
        assert state.exported == ("s3", "s2", "s1")
        assert state.exports() == ("s1", "s2", "s3")

    def test_add_entry(self) -> None:
        state = EMPTY_STATE.add_entry(AddDecl(D("foo"), "bla")).add_entry(ToExport("x"))
        assert state.find(D("foo")) == "bla"
        assert state.exports() == ("x",)

    def test_add_entry_rejects_unknown(self) -> None:
        with pytest.raises(TypeError):
            EMPTY_STATE.add_entry("not an entry")  # type: ignore[arg-type]

    def test_freeze_has_no_observable_effect(self) -> None:
        state = EMPTY_STATE.insert(D("foo"), "bla").export("x")
        assert state.freeze() == state


def test_replay_preserves_order() -> None:
    entries = (ToExport("s1"), AddDecl(D("a"), "A"), ToExport("s2"), ToExport("s3"))
    state = replay(entries)
    assert state.exports() == ("s1", "s2", "s3")
    assert state.find(D("a")) == "A"


# ===========================================================================
# Merging
# ===========================================================================


U1 = UnitLog("U1", (), (AddDecl(D("a"), "A"), ToExport("from U1")))
U2 = UnitLog("U2", ("U1",), (AddDecl(D("b"), "B"), ToExport("from U2")))


class TestMergeFromImports:
    def test_empty(self) -> None:
        assert merge_from_imports(()) == EMPTY_STATE

    def test_exposes_bindings_of_every_unit(self) -> None:
        state = merge_from_imports((U1, U2))
        assert state.find(D("a")) == "A"
        assert state.find(D("b")) == "B"
        assert state.exports() == ("from U1", "from U2")

    def test_associative(self) -> None:
        u3 = UnitLog("U3", (), (ToExport("from U3"), AddDecl(D("a"), "A3")))
        whole = merge_from_imports((U1, U2, u3))
        assert whole == replay(u3.entries, merge_from_imports((U1, U2)))
        assert whole == replay(U2.entries + u3.entries, merge_from_imports((U1,)))

    def test_duplicate_key_last_replayed_wins(self) -> None:
        other = UnitLog("Other", (), (AddDecl(D("a"), "Other"),))
        assert merge_from_imports((U1, other)).find(D("a")) == "Other"
        assert merge_from_imports((other, U1)).find(D("a")) == "A"


class TestImportClosure:
    @staticmethod
    def _resolver(*logs: UnitLog):
        table = {log.module: log for log in logs}

        def resolve(name: str) -> UnitLog:
            if name not in table:
                raise UnknownModule(name)
            return table[name]

        return resolve

    def test_transitive_dependencies_first(self) -> None:
        closure = import_closure(("U2",), self._resolver(U1, U2))
        assert [log.module for log in closure] == ["U1", "U2"]

    def test_each_unit_once(self) -> None:
        left = UnitLog("Left", ("U1",), ())
        right = UnitLog("Right", ("U1",), ())
        closure = import_closure(("Left", "Right"), self._resolver(U1, left, right))
        assert [log.module for log in closure] == ["U1", "Left", "Right"]

    def test_import_order_is_kept(self) -> None:
        a = UnitLog("A", (), ())
        b = UnitLog("B", (), ())
        resolve = self._resolver(a, b)
        assert [log.module for log in import_closure(("B", "A"), resolve)] == ["B", "A"]

    def test_unknown_module(self) -> None:
        with pytest.raises(UnknownModule):
            import_closure(("Missing",), self._resolver(U1))

    def test_cycle(self) -> None:
        a = UnitLog("A", ("B",), ())
        b = UnitLog("B", ("A",), ())
        with pytest.raises(ImportCycle) as info:
            import_closure(("A",), self._resolver(a, b))
        assert info.value.path == ("A", "B", "A")
