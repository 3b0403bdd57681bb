"""Compilation units and projects: the host side of the pipeline.

A Project holds the frozen logs of finished units. Starting a new unit
replays the logs of its transitive imports into a fresh TranslationState;
the unit then owns that state exclusively while its declarations are
processed, one at a time, in order.

Declaration lifecycle inside a unit:

    declared ──► triggered ──► translated   (entries recorded)
                          └──► rejected     (diagnostic recorded, nothing else)

A rejected annotation never un-declares the declaration.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TextIO

from .attributes import AttributeContext, HandlerResult, get_attribute
from .declarations import Attribute, Declaration, TypeClassifier
from .errors import (
    AnnotationError,
    DafnyExportError,
    DuplicateDeclaration,
    UnknownModule,
)
from .export import write_exports
from .expr import DeclId, Expr
from .result import Err, Ok, Result
from .serialization import dumps
from .state import (
    Entry,
    TranslationState,
    UnitLog,
    import_closure,
    merge_from_imports,
)

logger = logging.getLogger(__name__)


class Severity(Enum):
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """A message attached to one declaration's annotation."""

    decl: DeclId
    attribute: str
    severity: Severity
    message: str
    error: DafnyExportError


# ---------------------------------------------------------------------------
# Compilation unit
# ---------------------------------------------------------------------------


@dataclass
class CompilationUnit:
    name: str
    imports: tuple[str, ...]
    state: TranslationState
    classifier: TypeClassifier = field(default_factory=TypeClassifier)
    entries: list[Entry] = field(default_factory=list)
    declarations: dict[DeclId, Declaration] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    imported_types: Mapping[DeclId, Expr] = field(default_factory=dict)
    _log: UnitLog | None = None

    @property
    def finished(self) -> bool:
        return self._log is not None

    def _check_open(self) -> None:
        if self._log is not None:
            raise RuntimeError(f"unit '{self.name}' is already finished")

    def record(self, entry: Entry) -> None:
        self._check_open()
        self.entries.append(entry)
        self.state = self.state.add_entry(entry)

    def declare(self, decl: Declaration) -> tuple[Diagnostic, ...]:
        """Accept a declaration, then fire its annotations in order.

        Returns the diagnostics raised by this declaration's annotations.
        """
        self._check_open()
        if decl.name in self.declarations:
            raise DuplicateDeclaration(decl.name)
        self.declarations[decl.name] = decl
        logger.debug("Declared %r in %r", decl.name, self.name)

        raised: list[Diagnostic] = []
        for attr in decl.attributes:
            match self._trigger(decl, attr):
                case Ok(entries):
                    for entry in entries:
                        self.record(entry)
                case Err(error):
                    raised.append(self._reject(decl.name, attr.name, error))
        return tuple(raised)

    def _trigger(self, decl: Declaration, attr: Attribute) -> HandlerResult:
        match get_attribute(attr.name):
            case Ok(handler):
                ctx = AttributeContext(self.state, self.classifier, self.decl_types)
                return handler.apply(decl, attr, ctx)
            case Err() as err:
                return err

    def remove_attribute(
        self, decl_name: DeclId, attr_name: str
    ) -> Result[None, AnnotationError]:
        match get_attribute(attr_name):
            case Ok(handler):
                err: Err[AnnotationError] = handler.erase(decl_name)
            case Err() as unknown:
                err = unknown
        self._reject(decl_name, attr_name, err.error)
        return err

    def _reject(
        self, decl: DeclId, attribute: str, error: DafnyExportError
    ) -> Diagnostic:
        logger.warning("[%s] %s on %r: %s", self.name, attribute, decl, error)
        diag = Diagnostic(decl, attribute, Severity.ERROR, str(error), error)
        self.diagnostics.append(diag)
        return diag

    @property
    def decl_types(self) -> Mapping[DeclId, Expr]:
        """Types of every declaration visible here, own ones last."""
        types = dict(self.imported_types)
        types.update((name, d.type) for name, d in self.declarations.items())
        return types

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.ERROR)

    def exports(self) -> tuple[str, ...]:
        return self.state.exports()

    def print_exports(self, out: TextIO | None = None) -> None:
        """The export command: every accumulated export, one per line."""
        write_exports(self.state, out if out is not None else sys.stdout)

    def finish(self) -> UnitLog:
        if self._log is None:
            self.state = self.state.freeze()
            self._log = UnitLog(self.name, self.imports, tuple(self.entries))
            logger.debug(
                "Finished %r with %d entries", self.name, len(self._log.entries)
            )
        return self._log


# ---------------------------------------------------------------------------
# Project
# ---------------------------------------------------------------------------


class Project:
    """The finished units of one build, keyed by module name."""

    def __init__(
        self,
        logs: tuple[UnitLog, ...] = (),
        classifier: TypeClassifier | None = None,
    ) -> None:
        self._logs: dict[str, UnitLog] = {log.module: log for log in logs}
        # Only units finished in this process contribute declaration types;
        # persisted logs carry entries alone.
        self._types: dict[str, Mapping[DeclId, Expr]] = {}
        self.classifier = classifier or TypeClassifier()

    def __contains__(self, module: str) -> bool:
        return module in self._logs

    @property
    def logs(self) -> tuple[UnitLog, ...]:
        return tuple(self._logs.values())

    def get(self, module: str) -> UnitLog:
        log = self._logs.get(module)
        if log is None:
            raise UnknownModule(module)
        return log

    def import_closure(self, imports: tuple[str, ...]) -> tuple[UnitLog, ...]:
        return import_closure(imports, self.get)

    def begin_unit(self, name: str, imports: tuple[str, ...] = ()) -> CompilationUnit:
        closure = self.import_closure(imports)
        logger.debug(
            "Starting %r with imports %s", name, [log.module for log in closure]
        )
        imported_types: dict[DeclId, Expr] = {}
        for log in closure:
            imported_types.update(self._types.get(log.module, {}))
        return CompilationUnit(
            name=name,
            imports=tuple(imports),
            state=merge_from_imports(closure),
            classifier=self.classifier,
            imported_types=imported_types,
        )

    def finish(self, unit: CompilationUnit) -> UnitLog:
        log = unit.finish()
        self._logs[log.module] = log
        self._types[log.module] = {
            name: d.type for name, d in unit.declarations.items()
        }
        return log

    def save(self, directory: str | Path) -> list[Path]:
        """Write each unit's log to <directory>/<module>.json."""
        out_dir = Path(directory)
        out_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for log in self.logs:
            path = out_dir / f"{log.module}.json"
            path.write_text(dumps(log))
            written.append(path)
        logger.info("Saved %d unit log(s) to %s", len(written), out_dir)
        return written
