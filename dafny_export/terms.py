"""Terms and formulas of the Dafny target algebra.

A term is a value expression built from:
  - Numerals (non-negative integers)
  - Binary addition
  - Applications of a named Dafny function to arguments

A formula is an equation between two terms, or a conjunction of formulas.

These are pure values: they carry Dafny names, never host declarations,
and hold no reference to the symbol store they were translated against.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Term AST
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Num:
    """A natural-number numeral.

    Example: 42 — Num(42)
    """

    value: int


@dataclass(frozen=True)
class Add:
    """Addition of two terms.

    Example: x + 1 — Add(x, Num(1))
    """

    lhs: Term
    rhs: Term


@dataclass(frozen=True)
class App:
    """Application of a Dafny function to arguments.

    Example: bla(1)    — App("bla", (Num(1),))
    Example: c()       — App("c", ())
    """

    fn_name: str
    args: tuple[Term, ...]


# Union of all term forms
Term = Num | Add | App


# ---------------------------------------------------------------------------
# Formulas
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Eq:
    """An equation between two terms.

    Example: 2 == bla(1)
    """

    lhs: Term
    rhs: Term


@dataclass(frozen=True)
class And:
    """Logical AND of two formulas.

    Example: 3 == 2 + 1 && 1 == bla(0)
    """

    lhs: Formula
    rhs: Formula


# Union of all formula forms
Formula = Eq | And
