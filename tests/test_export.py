from dafny_export.export import export_lines, render_module
from dafny_export.state import EMPTY_STATE


def test_export_lines_in_recording_order() -> None:
    state = EMPTY_STATE.export("s1").export("s2").export("s3")
    assert export_lines(state) == ("s1", "s2", "s3")


def test_render_module() -> None:
    state = EMPTY_STATE.export("axiom a : 1 == 1").export("axiom b : 2 == 1 + 1")
    assert render_module("Demo.Main", state) == (
        "// Exported from Demo.Main. Do not edit.\n"
        "module Demo_Main {\n"
        "  axiom a : 1 == 1\n"
        "  axiom b : 2 == 1 + 1\n"
        "}\n"
    )


def test_render_empty_module() -> None:
    assert render_module("Empty", EMPTY_STATE) == (
        "// Exported from Empty. Do not edit.\n"
        "module Empty {\n"
        "}\n"
    )
