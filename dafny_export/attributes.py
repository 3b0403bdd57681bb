"""The `align_dafny` and `export_dafny` annotation handlers.

Each handler runs once the host has accepted a declaration. It does not
touch the store itself: it returns the Entry values to record, and the
compilation unit appends them. A handler that fails returns Err and
records nothing; the declaration stays accepted.

Neither annotation can be removed once applied.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

from .declarations import Attribute, AttrArg, Declaration, StrArg, TypeClassifier
from .errors import (
    AnnotationError,
    AttributeCannotBeRemoved,
    InvalidAttributeParameter,
    OnlyPropositionsSupported,
    TranslationError,
    UnknownAttribute,
)
from .expr import DeclId, Expr
from .printer import render_axiom
from .result import Err, Ok, Result
from .state import AddDecl, Entry, ToExport, TranslationState
from .translate import translate_formula

logger = logging.getLogger(__name__)

HandlerResult: TypeAlias = Result[tuple[Entry, ...], AnnotationError | TranslationError]


@dataclass(frozen=True)
class AttributeContext:
    """What a handler may read while it runs."""

    state: TranslationState
    classifier: TypeClassifier = field(default_factory=TypeClassifier)
    decl_types: Mapping[DeclId, Expr] = field(default_factory=dict)


def parse_attr_param(
    attribute: str, arg: AttrArg
) -> Result[str, InvalidAttributeParameter]:
    match arg:
        case StrArg(value):
            return Ok(value)
        case _:
            return Err(InvalidAttributeParameter(attribute, arg))


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


class DafnyAttribute:
    """Base handler: parse the argument, then add; removal always fails."""

    name: str = ""

    def apply(
        self, decl: Declaration, attr: Attribute, ctx: AttributeContext
    ) -> HandlerResult:
        match parse_attr_param(self.name, attr.arg):
            case Ok(target):
                return self.add(decl, target, ctx)
            case Err() as err:
                return err

    def add(
        self, decl: Declaration, target: str, ctx: AttributeContext
    ) -> HandlerResult:
        raise NotImplementedError

    def erase(self, decl: DeclId) -> Err[AttributeCannotBeRemoved]:
        logger.debug("Refusing to remove %r from %r", self.name, decl)
        return Err(AttributeCannotBeRemoved(self.name))


class AlignDafny(DafnyAttribute):
    name = "align_dafny"

    def add(
        self, decl: Declaration, target: str, ctx: AttributeContext
    ) -> HandlerResult:
        logger.debug("Aligning %r with Dafny symbol %r", decl.name, target)
        return Ok((AddDecl(decl.name, target),))


class ExportDafny(DafnyAttribute):
    name = "export_dafny"

    def add(
        self, decl: Declaration, target: str, ctx: AttributeContext
    ) -> HandlerResult:
        if not ctx.classifier.is_proposition(decl.type, ctx.decl_types):
            return Err(OnlyPropositionsSupported(decl.name))

        match translate_formula(decl.type, ctx.state):
            case Ok(formula):
                axiom = render_axiom(target, formula)
                logger.debug("Exporting %r as %r", decl.name, axiom)
                return Ok((ToExport(axiom), AddDecl(decl.name, target)))
            case Err() as err:
                return err


ATTRIBUTES: Mapping[str, DafnyAttribute] = MappingProxyType(
    {h.name: h for h in (AlignDafny(), ExportDafny())}
)


def get_attribute(name: str) -> Result[DafnyAttribute, UnknownAttribute]:
    handler = ATTRIBUTES.get(name)
    if handler is None:
        return Err(UnknownAttribute(name))
    return Ok(handler)
