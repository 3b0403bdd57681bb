"""Worked export examples.

Builds two units the way a host compiler would process them:

    -- Basic
    @[align_dafny "bla"]
    def foo (x : Nat) : Nat := x + 1

    -- Main (imports Basic)
    @[export_dafny "simple1D"]
    theorem simple1 : 2 = foo 1

    @[export_dafny "simple2D"]
    theorem simple2 : 3 = 2 + 1 ∧ 1 = foo 0

Run this file to see the exported Dafny declarations. Pass a directory to
also save the unit logs there, for use with `dafny-export dump Main`.
"""

import sys

from dafny_export import Attribute, Declaration, DeclId, Lam, Project, StrArg, render_module
from dafny_export.helpers import NAT, add, and_, app, arrow, eq, nat, var

# ===================================================================
# Helpers — short aliases to reduce noise in declaration construction
# ===================================================================

D = DeclId


def align(name: str) -> Attribute:
    return Attribute("align_dafny", StrArg(name))


def export(name: str) -> Attribute:
    return Attribute("export_dafny", StrArg(name))


# ===================================================================
# Units
# ===================================================================


def basic_unit(project: Project) -> None:
    unit = project.begin_unit("Basic")
    unit.declare(
        Declaration(
            D("foo"),
            type=arrow(NAT, NAT),
            value=Lam("x", NAT, add(var(0), nat(1))),
            attributes=(align("bla"),),
        )
    )
    project.finish(unit)


def main_unit(project: Project) -> None:
    unit = project.begin_unit("Main", ("Basic",))
    unit.declare(
        Declaration(
            D("simple1"),
            type=eq(nat(2), app("foo", nat(1))),
            attributes=(export("simple1D"),),
        )
    )
    unit.declare(
        Declaration(
            D("simple2"),
            type=and_(eq(nat(3), add(nat(2), nat(1))), eq(nat(1), app("foo", nat(0)))),
            attributes=(export("simple2D"),),
        )
    )
    # Not a proposition: rejected with a diagnostic, nothing exported.
    unit.declare(Declaration(D("three"), type=NAT, value=nat(3), attributes=(export("three"),)))

    for diag in unit.diagnostics:
        print(f"{diag.severity.value}: {diag.decl}: {diag.message}", file=sys.stderr)

    unit.print_exports()
    print()
    print(render_module(unit.name, unit.state))
    project.finish(unit)


if __name__ == "__main__":
    project = Project()
    basic_unit(project)
    main_unit(project)
    if len(sys.argv) > 1:
        for path in project.save(sys.argv[1]):
            print(f"wrote {path}", file=sys.stderr)
