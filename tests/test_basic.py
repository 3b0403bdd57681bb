from dafny_export import EMPTY_STATE, render_term, translate_term
from dafny_export.helpers import nat
from dafny_export.result import Ok


def test_numeral() -> None:
    result = translate_term(nat(7), EMPTY_STATE)
    assert isinstance(result, Ok)
    assert render_term(result.value) == "7"


if __name__ == "__main__":
    test_numeral()
    print("Basic test passed!")
