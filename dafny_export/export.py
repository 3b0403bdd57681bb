"""Export dump: read the accumulated declarations back out of a state."""

from __future__ import annotations

import os
from typing import Any, TextIO

import jinja2

from .state import TranslationState

_TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(_TEMPLATE_DIR),
    autoescape=False,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def export_lines(state: TranslationState) -> tuple[str, ...]:
    """Every exported declaration, in the order it was recorded."""
    return state.exports()


def write_exports(state: TranslationState, out: TextIO) -> None:
    for line in export_lines(state):
        out.write(line + "\n")


def render(template_name: str, **kwargs: Any) -> str:
    return _ENV.get_template(template_name).render(**kwargs)


def render_module(module: str, state: TranslationState) -> str:
    """Wrap the exports in a Dafny module named after the unit."""
    return render(
        "module.dfy.j2",
        module=module.replace(".", "_"),
        source=module,
        decls=export_lines(state),
    )
