"""Host declarations, annotation syntax, and the host's type classifier.

A Declaration is what the host hands over once it has type-checked and
accepted a definition or theorem: its name, its statement (type), an
optional value, and the annotations written on it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .expr import Apply, Const, DeclId, Expr, MData, Pi, Sort

# ---------------------------------------------------------------------------
# Annotation syntax
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StrArg:
    """A string-literal annotation argument: "bla"."""

    value: str


@dataclass(frozen=True)
class IdentArg:
    """An identifier annotation argument: bla."""

    name: str


@dataclass(frozen=True)
class NumArg:
    """A numeric annotation argument: 42."""

    value: int


AttrArg = StrArg | IdentArg | NumArg


@dataclass(frozen=True)
class Attribute:
    """An annotation as written on a declaration.

    Example: @[export_dafny "simple1D"] — Attribute("export_dafny", StrArg("simple1D"))
    """

    name: str
    arg: AttrArg


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Declaration:
    """An accepted host declaration.

    Example:
        theorem simple1 : 2 = foo 1
        Declaration("simple1", eq(nat(2), app("foo", nat(1))),
                    attributes=(Attribute("export_dafny", StrArg("simple1D")),))
    """

    name: DeclId
    type: Expr
    value: Expr | None = None
    attributes: tuple[Attribute, ...] = ()


# ---------------------------------------------------------------------------
# Type classifier
# ---------------------------------------------------------------------------

PROP_FORMERS: frozenset[str] = frozenset(
    {
        "Eq", "HEq", "Ne", "And", "Or", "Not", "Iff", "Exists",
        "LE.le", "LT.lt", "GE.ge", "GT.gt",
    }
)
PROP_CONSTANTS: frozenset[str] = frozenset({"True", "False"})

_NO_DECLS: Mapping[DeclId, Expr] = MappingProxyType({})


def _returns_prop(ty: Expr) -> bool:
    """True for Prop itself and for function types that end in Prop."""
    match ty:
        case Sort(level):
            return level == 0
        case Pi(_, _, body):
            return _returns_prop(body)
        case MData(inner, _):
            return _returns_prop(inner)
        case _:
            return False


@dataclass(frozen=True)
class TypeClassifier:
    """Decides whether a declaration's statement is a proposition.

    Stands in for the host's "is the type of this type Prop" check. A type
    counts as a proposition when it is built by a known proposition former,
    is a known proposition constant, names or applies a declaration whose
    own type ends in Prop, is a ∀ over a proposition, or is metadata around
    one of these.
    """

    formers: frozenset[str] = PROP_FORMERS
    constants: frozenset[str] = PROP_CONSTANTS

    def is_proposition(
        self, ty: Expr, decls: Mapping[DeclId, Expr] = _NO_DECLS
    ) -> bool:
        """`decls` maps declared names to their types."""
        match ty:
            case MData(inner, _):
                return self.is_proposition(inner, decls)
            case Const(name):
                return name in self.constants or self._declared_prop(name, decls)
            case Apply():
                head, _ = ty.head_and_args()
                match head:
                    case Const(name):
                        return name in self.formers or self._declared_prop(name, decls)
                    case _:
                        return False
            case Pi(_, _, body):
                return self.is_proposition(body, decls)
            case _:
                return False

    @staticmethod
    def _declared_prop(name: DeclId, decls: Mapping[DeclId, Expr]) -> bool:
        declared = decls.get(name)
        return declared is not None and _returns_prop(declared)
