from dafny_export.printer import render_axiom, render_formula, render_term
from dafny_export.terms import Add, And, App, Eq, Num


def test_numeral() -> None:
    assert render_term(Num(0)) == "0"
    assert render_term(Num(12345678901234567890)) == "12345678901234567890"


def test_addition() -> None:
    assert render_term(Add(Num(1), Num(2))) == "1 + 2"


def test_addition_is_not_parenthesised() -> None:
    assert render_term(Add(Num(1), Add(Num(2), Num(3)))) == "1 + 2 + 3"
    assert render_term(Add(Add(Num(1), Num(2)), Num(3))) == "1 + 2 + 3"


def test_application() -> None:
    assert render_term(App("bla", (Num(1),))) == "bla(1)"
    assert render_term(App("f", (Num(1), App("g", (Add(Num(2), Num(3)),))))) == "f(1, g(2 + 3))"


def test_application_without_arguments() -> None:
    assert render_term(App("c", ())) == "c()"


def test_equation_and_conjunction() -> None:
    f = And(Eq(Num(3), Add(Num(2), Num(1))), Eq(Num(1), App("bla", (Num(0),))))
    assert render_formula(Eq(Num(2), Num(2))) == "2 == 2"
    assert render_formula(f) == "3 == 2 + 1 && 1 == bla(0)"


def test_axiom() -> None:
    f = Eq(Num(2), App("bla", (Num(1),)))
    assert render_axiom("simple1D", f) == "axiom simple1D : 2 == bla(1)"
