"""The symbol store: host-to-Dafny name mappings plus the export log.

State lives in two phases:

  - UnitLog: the frozen history of one finished compilation unit, as an
    ordered sequence of Entry values. This is what gets persisted.
  - TranslationState: the accumulator a unit works against. It is rebuilt
    at the start of every unit by replaying the logs of everything the unit
    imports (merge_from_imports), then grows as the unit's own annotations
    fire.

TranslationState is immutable; every update returns a new state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from functools import reduce
from types import MappingProxyType

from .errors import ImportCycle
from .expr import DeclId

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddDecl:
    """Bind a host declaration to a Dafny identifier."""

    decl: DeclId
    name: str


@dataclass(frozen=True)
class ToExport:
    """Record a rendered Dafny declaration for the export dump."""

    decl: str


Entry = AddDecl | ToExport


@dataclass(frozen=True)
class UnitLog:
    """The frozen history of one compilation unit.

    `imports` lists the unit's direct imports, in import order. `entries`
    holds only the unit's own entries, in recording order; imported entries
    are reached through the imported units' logs.
    """

    module: str
    imports: tuple[str, ...]
    entries: tuple[Entry, ...]


# ---------------------------------------------------------------------------
# Translation state
# ---------------------------------------------------------------------------

_EMPTY_SYMBOLS: Mapping[DeclId, str] = MappingProxyType({})


@dataclass(frozen=True)
class TranslationState:
    """Symbol mapping plus export log.

    `exported` is a stack: the most recent export comes first. Use
    :meth:`exports` to read it in recording order.
    """

    symbols: Mapping[DeclId, str] = field(default_factory=lambda: _EMPTY_SYMBOLS)
    exported: tuple[str, ...] = ()

    def insert(self, key: DeclId, value: str) -> TranslationState:
        previous = self.symbols.get(key)
        if previous is not None and previous != value:
            logger.warning(
                "Rebinding %r: %r replaces %r", key, value, previous
            )
        symbols = dict(self.symbols)
        symbols[key] = value
        return TranslationState(MappingProxyType(symbols), self.exported)

    def find(self, key: DeclId) -> str | None:
        return self.symbols.get(key)

    def export(self, decl: str) -> TranslationState:
        return TranslationState(self.symbols, (decl,) + self.exported)

    def add_entry(self, entry: Entry) -> TranslationState:
        match entry:
            case AddDecl(decl, name):
                return self.insert(decl, name)
            case ToExport(decl):
                return self.export(decl)
            case _:
                raise TypeError(f"Unknown entry type: {type(entry).__name__}")

    def exports(self) -> tuple[str, ...]:
        return tuple(reversed(self.exported))

    def freeze(self) -> TranslationState:
        """Mark the end of local updates. Has no observable effect."""
        return self


EMPTY_STATE = TranslationState()


def replay(
    entries: Iterable[Entry], state: TranslationState = EMPTY_STATE
) -> TranslationState:
    """Apply entries to `state` in order."""
    return reduce(TranslationState.add_entry, entries, state)


def merge_from_imports(units: Sequence[UnitLog]) -> TranslationState:
    """Rebuild the state visible at the start of a unit.

    Every unit's entries are replayed in the unit's own order, units in the
    order given. Callers pass the full transitive import closure with
    dependencies ahead of their dependants. Duplicate keys across units are
    not rejected; the last replayed binding wins.
    """
    state = EMPTY_STATE
    for unit in units:
        logger.debug(
            "Replaying %d entries from %r", len(unit.entries), unit.module
        )
        state = replay(unit.entries, state)
    return state


def import_closure(
    imports: Sequence[str], resolve: Callable[[str], UnitLog]
) -> tuple[UnitLog, ...]:
    """Collect the transitive imports of a unit, dependencies first.

    Depth-first over `imports` in order; each unit appears once, after
    everything it imports. `resolve` raises UnknownModule for names it
    cannot find.
    """
    done: dict[str, UnitLog] = {}
    visiting: list[str] = []

    def visit(module: str) -> None:
        if module in done:
            return
        if module in visiting:
            raise ImportCycle(tuple(visiting[visiting.index(module):]) + (module,))
        visiting.append(module)
        log = resolve(module)
        for dep in log.imports:
            visit(dep)
        visiting.pop()
        done[module] = log

    for module in imports:
        visit(module)
    return tuple(done.values())
