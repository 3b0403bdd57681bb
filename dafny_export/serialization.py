"""JSON serialization for persisted unit logs.

Every value serializes to a dict with a "type" discriminator field. The
per-unit log is the wire format for cross-module state, so its layout is
versioned and must stay stable:

    {"type": "unit_log", "version": 1, "module": "Main", "imports": ["Basic"],
     "entries": [{"type": "add_decl", "decl": "foo", "name": "bla"},
                 {"type": "to_export", "decl": "axiom t : 2 == bla(1)"}]}

Round-trip: unit_log_from_json(unit_log_to_json(x)) == x for all x.
"""

from __future__ import annotations

import json
from typing import Any

from .expr import DeclId
from .state import AddDecl, Entry, ToExport, UnitLog

FORMAT_VERSION = 1


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------


def entry_to_json(e: Entry) -> dict[str, Any]:
    if isinstance(e, AddDecl):
        return {"type": "add_decl", "decl": e.decl, "name": e.name}
    elif isinstance(e, ToExport):
        return {"type": "to_export", "decl": e.decl}
    raise TypeError(f"Unknown entry type: {type(e)}")


def entry_from_json(d: dict[str, Any]) -> Entry:
    t = d["type"]
    if t == "add_decl":
        return AddDecl(decl=DeclId(d["decl"]), name=d["name"])
    elif t == "to_export":
        return ToExport(decl=d["decl"])
    raise ValueError(f"Unknown entry type: {t}")


# ---------------------------------------------------------------------------
# Unit logs
# ---------------------------------------------------------------------------


def unit_log_to_json(log: UnitLog) -> dict[str, Any]:
    return {
        "type": "unit_log",
        "version": FORMAT_VERSION,
        "module": log.module,
        "imports": list(log.imports),
        "entries": [entry_to_json(e) for e in log.entries],
    }


def unit_log_from_json(d: dict[str, Any]) -> UnitLog:
    if d.get("type") != "unit_log":
        raise ValueError(f"Expected a unit_log, got {d.get('type')!r}")
    if d.get("version") != FORMAT_VERSION:
        raise ValueError(f"Unsupported unit_log version: {d.get('version')!r}")
    return UnitLog(
        module=d["module"],
        imports=tuple(d["imports"]),
        entries=tuple(entry_from_json(e) for e in d["entries"]),
    )


# ---------------------------------------------------------------------------
# Convenience: dump / load entire logs as JSON strings
# ---------------------------------------------------------------------------


def dumps(log: UnitLog) -> str:
    return json.dumps(unit_log_to_json(log), indent=2)


def loads(s: str) -> UnitLog:
    return unit_log_from_json(json.loads(s))
