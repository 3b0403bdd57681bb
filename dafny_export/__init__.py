"""dafny_export: Translate annotated host propositions into Dafny declarations."""

from .expr import (
    Apply,
    BVar,
    Const,
    DeclId,
    Expr,
    Lam,
    MData,
    NatLit,
    Pi,
    Sort,
    StrLit,
)
from .terms import Add, And, App, Eq, Formula, Num, Term
from .errors import (
    AnnotationError,
    AttributeCannotBeRemoved,
    DafnyExportError,
    InvalidAttributeParameter,
    OnlyPropositionsSupported,
    TranslationError,
    UnknownAttribute,
    UnknownModule,
    UnsupportedApplication,
    UnsupportedConstantApplication,
    UnsupportedExpression,
)
from .state import (
    AddDecl,
    EMPTY_STATE,
    Entry,
    ToExport,
    TranslationState,
    UnitLog,
    merge_from_imports,
    replay,
)
from .translate import translate_formula, translate_term
from .printer import render_axiom, render_formula, render_term
from .declarations import Attribute, Declaration, IdentArg, NumArg, StrArg, TypeClassifier
from .attributes import ATTRIBUTES, AlignDafny, ExportDafny
from .environment import CompilationUnit, Diagnostic, Project, Severity
from .export import export_lines, render_module, write_exports
from .serialization import dumps, loads
from .result import Ok, Err, Result

__all__ = [
    # Host expressions
    "Apply", "BVar", "Const", "DeclId", "Expr", "Lam", "MData", "NatLit",
    "Pi", "Sort", "StrLit",
    # Target algebra
    "Add", "And", "App", "Eq", "Formula", "Num", "Term",
    # Errors
    "AnnotationError", "AttributeCannotBeRemoved", "DafnyExportError",
    "InvalidAttributeParameter", "OnlyPropositionsSupported",
    "TranslationError", "UnknownAttribute", "UnknownModule",
    "UnsupportedApplication", "UnsupportedConstantApplication",
    "UnsupportedExpression",
    # Symbol store
    "AddDecl", "EMPTY_STATE", "Entry", "ToExport", "TranslationState",
    "UnitLog", "merge_from_imports", "replay",
    # Translation and printing
    "translate_formula", "translate_term",
    "render_axiom", "render_formula", "render_term",
    # Declarations and annotations
    "Attribute", "Declaration", "IdentArg", "NumArg", "StrArg", "TypeClassifier",
    "ATTRIBUTES", "AlignDafny", "ExportDafny",
    # Units
    "CompilationUnit", "Diagnostic", "Project", "Severity",
    # Export
    "export_lines", "render_module", "write_exports",
    # Serialization
    "dumps", "loads",
    # Result
    "Ok", "Err", "Result",
]
