"""Elaborated host expressions, as seen by the translator.

The host's expression type is far richer than what the translator handles.
This module exposes a capability-limited view of it:

  - literals (NatLit, StrLit)
  - constants (Const), referring to a declaration by its DeclId
  - applications (Apply), with a head and an argument tuple
  - metadata wrappers (MData), which carry no logical content
  - everything else the translator must refuse (BVar, Lam, Pi, Sort)

Translation matches on these shapes and fails on anything it does not
recognise; it never guesses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

# ---------------------------------------------------------------------------
# Declaration identifiers
# ---------------------------------------------------------------------------

DeclId = NewType("DeclId", str)


# ---------------------------------------------------------------------------
# Expression AST
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NatLit:
    """A raw natural-number literal.

    Example: the `2` inside `OfNat.ofNat Nat 2 inst`
    """

    value: int


@dataclass(frozen=True)
class StrLit:
    """A raw string literal. Never translatable."""

    value: str


@dataclass(frozen=True)
class Const:
    """A reference to a declared constant.

    Example: Nat.zero — Const(DeclId("Nat.zero"))
    """

    name: DeclId


@dataclass(frozen=True)
class Apply:
    """Application of a head expression to arguments.

    Example: Nat.succ n — Apply(Const("Nat.succ"), (n,))

    The host may nest applications (``Apply(Apply(f, (a,)), (b,))``);
    :meth:`head_and_args` flattens them.
    """

    fn: Expr
    args: tuple[Expr, ...]

    def head_and_args(self) -> tuple[Expr, tuple[Expr, ...]]:
        head: Expr = self.fn
        args = self.args
        while isinstance(head, Apply):
            args = head.args + args
            head = head.fn
        return head, args


@dataclass(frozen=True)
class MData:
    """Host metadata attached to an expression (positions, elaboration hints)."""

    inner: Expr
    data: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class BVar:
    """A bound variable (de Bruijn index)."""

    index: int


@dataclass(frozen=True)
class Lam:
    """A lambda abstraction."""

    binder: str
    binder_type: Expr
    body: Expr


@dataclass(frozen=True)
class Pi:
    """A dependent function type (∀ / →)."""

    binder: str
    binder_type: Expr
    body: Expr


@dataclass(frozen=True)
class Sort:
    """A universe. Sort(0) is Prop, Sort(1) is Type."""

    level: int


# Union of all expression forms
Expr = NatLit | StrLit | Const | Apply | MData | BVar | Lam | Pi | Sort


# ---------------------------------------------------------------------------
# Host operator shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AppShape:
    """The fully elaborated application shape of one host operator.

    Instance-resolved operators are applied to their implicit type and
    instance arguments before their operands, so the operand positions are
    fixed by the host's elaboration, not by the surface syntax.

    Example: `a + b` on Nat elaborates to
        HAdd.hAdd Nat Nat Nat (instHAdd Nat instAddNat) a b
    — 6 arguments, operands at positions 4 and 5.
    """

    name: DeclId
    arity: int
    operands: tuple[int, ...]

    def matches(self, name: str, args: tuple[Expr, ...]) -> bool:
        return name == self.name and len(args) == self.arity

    def pick(self, args: tuple[Expr, ...]) -> tuple[Expr, ...]:
        return tuple(args[i] for i in self.operands)


NAT_ZERO = DeclId("Nat.zero")
NAT_TYPE = DeclId("Nat")

# These positions track one host version's elaboration output and are not
# validated against it. Keep them in this table only.
HADD = AppShape(DeclId("HAdd.hAdd"), arity=6, operands=(4, 5))
NAT_SUCC = AppShape(DeclId("Nat.succ"), arity=1, operands=(0,))
OF_NAT = AppShape(DeclId("OfNat.ofNat"), arity=3, operands=(1,))
EQ = AppShape(DeclId("Eq"), arity=3, operands=(1, 2))
AND = AppShape(DeclId("And"), arity=2, operands=(0, 1))
