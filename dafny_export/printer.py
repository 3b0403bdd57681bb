"""Render target terms and formulas as Dafny source text.

No parenthesisation is performed. The only binary forms are `+`, `==`
and `&&`, and the translator never nests an equation inside a term, so
the flat rendering reads back with Dafny's own precedence.
"""

from __future__ import annotations

from .terms import Add, And, App, Eq, Formula, Num, Term


def render_term(t: Term) -> str:
    match t:
        case Num(value):
            return str(value)
        case Add(lhs, rhs):
            return f"{render_term(lhs)} + {render_term(rhs)}"
        case App(fn_name, args):
            return f"{fn_name}({', '.join(render_term(a) for a in args)})"
        case _:
            raise TypeError(f"render_term: unexpected node type {type(t).__name__}")


def render_formula(f: Formula) -> str:
    match f:
        case Eq(lhs, rhs):
            return f"{render_term(lhs)} == {render_term(rhs)}"
        case And(lhs, rhs):
            return f"{render_formula(lhs)} && {render_formula(rhs)}"
        case _:
            raise TypeError(
                f"render_formula: unexpected node type {type(f).__name__}"
            )


def render_axiom(name: str, f: Formula) -> str:
    """Render a named axiom declaration.

    Example: axiom simple1D : 2 == bla(1)
    """
    return f"axiom {name} : {render_formula(f)}"
