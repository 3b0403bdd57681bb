from __future__ import annotations

import json
import re
from pathlib import Path

from dafny_export.errors import DafnyExportError, UnknownModule
from dafny_export.serialization import loads
from dafny_export.state import UnitLog, import_closure

# Dotted identifiers such as `Basic` or `Data.List`.
_MODULE_NAME = re.compile(r"\w+(?:\.\w+)*")


def load_unit_log(path: str | Path) -> UnitLog | str:
    """Read one persisted unit log.

    Returns the :class:`~dafny_export.state.UnitLog` on success, or an error
    string on any failure.
    """
    try:
        source = Path(path).read_text()
    except OSError as e:
        return f"Could not read file: {e}"

    try:
        return loads(source)
    except json.JSONDecodeError as e:
        return f"Invalid JSON in {path}: {e}"
    except (KeyError, TypeError, ValueError) as e:
        return f"Malformed unit log in {path}: {e}"


def load_closure(state_dir: str | Path, module: str) -> tuple[UnitLog, ...] | str:
    """Load a module's log and everything it imports, dependencies first.

    The module itself comes last, so replaying the result in order
    reconstructs the module's final state.
    """
    directory = Path(state_dir)

    def resolve(name: str) -> UnitLog:
        if not _MODULE_NAME.fullmatch(name):
            raise ValueError(f"invalid module name '{name}'")
        path = directory / f"{name}.json"
        if not path.exists():
            raise UnknownModule(name)
        match load_unit_log(path):
            case str(err):
                raise ValueError(err)
            case log:
                if log.module != name:
                    raise ValueError(
                        f"{path} holds module '{log.module}', expected '{name}'"
                    )
                return log

    try:
        return import_closure((module,), resolve)
    except (DafnyExportError, ValueError) as e:
        return str(e)
