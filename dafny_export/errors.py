"""Errors raised or returned while translating and recording declarations.

Translation errors carry the offending host expression so the diagnostic
can show exactly which subterm was not understood.
"""

from __future__ import annotations

from .expr import DeclId, Expr


class DafnyExportError(Exception):
    """Base class for every error this package produces."""


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------


class TranslationError(DafnyExportError):
    """An expression outside the supported fragment."""

    reason = "unsupported expression"

    def __init__(self, expr: Expr) -> None:
        super().__init__(f"{self.reason}: {expr!r}")
        self.expr = expr


class UnsupportedExpression(TranslationError):
    reason = "unsupported expression"


class UnsupportedApplication(TranslationError):
    reason = "unsupported application (head is not a constant)"


class UnsupportedConstantApplication(TranslationError):
    reason = "unsupported constant application"


# ---------------------------------------------------------------------------
# Annotations
# ---------------------------------------------------------------------------


class AnnotationError(DafnyExportError):
    """An annotation could not be applied to (or removed from) a declaration."""


class InvalidAttributeParameter(AnnotationError):
    def __init__(self, attribute: str, arg: object) -> None:
        super().__init__(
            f"attribute '{attribute}' expects a string literal argument, got {arg!r}"
        )
        self.attribute = attribute
        self.arg = arg


class OnlyPropositionsSupported(AnnotationError):
    def __init__(self, decl: DeclId) -> None:
        super().__init__(
            f"cannot export '{decl}': only propositions are supported"
        )
        self.decl = decl


class AttributeCannotBeRemoved(AnnotationError):
    def __init__(self, attribute: str) -> None:
        super().__init__(f"attribute '{attribute}' cannot be removed")
        self.attribute = attribute


class UnknownAttribute(AnnotationError):
    def __init__(self, attribute: str) -> None:
        super().__init__(f"unknown attribute '{attribute}'")
        self.attribute = attribute


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------


class UnknownModule(DafnyExportError):
    def __init__(self, module: str) -> None:
        super().__init__(f"unknown module '{module}'")
        self.module = module


class ImportCycle(DafnyExportError):
    def __init__(self, path: tuple[str, ...]) -> None:
        super().__init__(f"import cycle: {' -> '.join(path)}")
        self.path = path


class DuplicateDeclaration(DafnyExportError):
    def __init__(self, decl: DeclId) -> None:
        super().__init__(f"'{decl}' has already been declared")
        self.decl = decl
