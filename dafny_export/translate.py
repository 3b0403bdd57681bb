"""Translate elaborated host expressions into target terms and formulas.

Both translators are partial recursive-descent matchers over the host
expression view in :mod:`dafny_export.expr`:

  - total over the supported fragment (numerals, Nat.zero, Nat.succ,
    addition, numeral coercion, mapped constants, equality, conjunction);
  - every other shape returns an Err carrying the offending expression.

Design principles:
- Fail loud, never guess. There is no "best effort" rendering.
- The symbol store is consulted before the built-in rules, so an aligned
  declaration always wins over the fallback for the same constant.
- Arguments are translated left to right; the first failure is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from .errors import (
    TranslationError,
    UnsupportedApplication,
    UnsupportedConstantApplication,
    UnsupportedExpression,
)
from .expr import (
    AND,
    EQ,
    HADD,
    NAT_SUCC,
    NAT_ZERO,
    OF_NAT,
    Apply,
    Const,
    DeclId,
    Expr,
    MData,
    NatLit,
)
from .result import Err, Ok, Result, collect
from .state import TranslationState
from .terms import Add, And, App, Eq, Formula, Num, Term

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------


def translate_term(
    expr: Expr, state: TranslationState
) -> Result[Term, TranslationError]:
    """Translate an arithmetic expression into a target Term."""
    match expr:
        case NatLit(value):
            return Ok(Num(value))
        case MData(inner, _):
            return translate_term(inner, state)
        case Const(name) if name == NAT_ZERO:
            return Ok(Num(0))
        case Apply():
            head, args = expr.head_and_args()
            match head:
                case Const(name):
                    return _translate_const_app(expr, name, args, state)
                case _:
                    return Err(UnsupportedApplication(expr))
        case _:
            return Err(UnsupportedExpression(expr))


def _translate_const_app(
    expr: Expr,
    name: DeclId,
    args: tuple[Expr, ...],
    state: TranslationState,
) -> Result[Term, TranslationError]:
    def term(e: Expr) -> Result[Term, TranslationError]:
        return translate_term(e, state)

    mapped = state.find(name)
    if mapped is not None:
        logger.debug("Constant %r is mapped to %r", name, mapped)
        match collect(args, term):
            case Ok(terms):
                return Ok(App(mapped, terms))
            case Err() as err:
                return err

    if HADD.matches(name, args):
        lhs, rhs = HADD.pick(args)
        return _binary(Add, term(lhs), lambda: term(rhs))

    if NAT_SUCC.matches(name, args):
        (operand,) = NAT_SUCC.pick(args)
        return _binary(Add, term(operand), lambda: Ok(Num(1)))

    if OF_NAT.matches(name, args):
        (literal,) = OF_NAT.pick(args)
        return term(literal)

    logger.debug("No rule for constant %r applied to %d args", name, len(args))
    return Err(UnsupportedConstantApplication(expr))


A = TypeVar("A")
B = TypeVar("B")


def _binary(
    ctor: Callable[[A, A], B],
    lhs: Result[A, TranslationError],
    rhs: Callable[[], Result[A, TranslationError]],
) -> Result[B, TranslationError]:
    """Combine two operands; `rhs` is only translated once `lhs` succeeds."""
    match lhs:
        case Err() as err:
            return err
        case Ok(left):
            match rhs():
                case Ok(right):
                    return Ok(ctor(left, right))
                case Err() as err:
                    return err
    raise TypeError(f"_binary: expected Ok/Err, got {lhs!r}")


# ---------------------------------------------------------------------------
# Formulas
# ---------------------------------------------------------------------------


def translate_formula(
    expr: Expr, state: TranslationState
) -> Result[Formula, TranslationError]:
    """Translate a proposition built from = and ∧ into a target Formula."""
    match expr:
        case Apply():
            head, args = expr.head_and_args()
            match head:
                case Const(name) if EQ.matches(name, args):
                    lhs, rhs = EQ.pick(args)
                    return _binary(
                        Eq,
                        translate_term(lhs, state),
                        lambda: translate_term(rhs, state),
                    )
                case Const(name) if AND.matches(name, args):
                    lhs, rhs = AND.pick(args)
                    return _binary(
                        And,
                        translate_formula(lhs, state),
                        lambda: translate_formula(rhs, state),
                    )
                case Const(_):
                    return Err(UnsupportedConstantApplication(expr))
                case _:
                    return Err(UnsupportedApplication(expr))
        case _:
            return Err(UnsupportedExpression(expr))
