"""Builder helpers for constructing elaborated host expressions.

The host elaborator hands the translator fully elaborated trees, with every
implicit type and instance argument filled in. These helpers produce the
same shapes, so tests and examples can write `add(nat(2), nat(1))` instead
of spelling out the six-argument HAdd.hAdd application by hand.
"""

from dafny_export.expr import (
    AND,
    EQ,
    HADD,
    NAT_SUCC,
    NAT_TYPE,
    NAT_ZERO,
    OF_NAT,
    Apply,
    BVar,
    Const,
    DeclId,
    Expr,
    MData,
    NatLit,
    Pi,
    Sort,
)

D = DeclId

NAT = Const(NAT_TYPE)
PROP = Sort(0)


def const(name: str) -> Const:
    return Const(name=D(name))


def app(fn: str | Expr, *args: Expr) -> Apply:
    head = const(fn) if isinstance(fn, str) else fn
    return Apply(fn=head, args=tuple(args))


def lit(n: int) -> NatLit:
    return NatLit(value=n)


def zero() -> Const:
    return Const(NAT_ZERO)


def nat(n: int) -> Apply:
    """A numeral as the host elaborates it: OfNat.ofNat Nat n (instOfNatNat n)."""
    return app(OF_NAT.name, NAT, lit(n), app("instOfNatNat", lit(n)))


def succ(n: Expr) -> Apply:
    return app(NAT_SUCC.name, n)


def add(lhs: Expr, rhs: Expr) -> Apply:
    """Nat addition: HAdd.hAdd Nat Nat Nat (instHAdd Nat instAddNat) lhs rhs."""
    inst = app("instHAdd", NAT, const("instAddNat"))
    return app(HADD.name, NAT, NAT, NAT, inst, lhs, rhs)


def eq(lhs: Expr, rhs: Expr, ty: Expr = NAT) -> Apply:
    """Equality: @Eq ty lhs rhs."""
    return app(EQ.name, ty, lhs, rhs)


def and_(lhs: Expr, rhs: Expr) -> Apply:
    return app(AND.name, lhs, rhs)


def mdata(inner: Expr, **data: str) -> MData:
    return MData(inner=inner, data=tuple(sorted(data.items())))


def var(index: int) -> BVar:
    return BVar(index=index)


def arrow(dom: Expr, cod: Expr, binder: str = "x") -> Pi:
    return Pi(binder=binder, binder_type=dom, body=cod)
