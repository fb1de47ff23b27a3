"""Checker that requires suite methods instead of package assertions inside suites."""

from __future__ import annotations

from testifylint.checker import CallMeta, Diagnostic, Pass, RegularChecker, SuggestedFix, TextEdit, new_diagnostic
from testifylint.syntax import CallExpr, Ident, SelectorExpr
from testifylint.testify import SUITE_PKG_PATH
from testifylint.typesys import implements, object_of


def implements_testify_suite_iface(pass_: Pass, rcv) -> bool:
    """Tell whether the type of rcv implements suite.TestingSuite."""
    if pass_.pkg is None:
        return False
    suite_iface = object_of(pass_.pkg, SUITE_PKG_PATH, "TestingSuite")
    if suite_iface is None or suite_iface.type is None:
        return False
    return implements(pass_.types_info.type_of(rcv), suite_iface.type.underlying())


class SuiteDontUsePkg(RegularChecker):
    """Requires s.Equal(...) instead of assert.Equal(s.T(), ...) in suite methods."""

    name = "suite-dont-use-pkg"

    def check(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        if not call.is_pkg:
            return None
        args = call.args_raw
        if len(args) < 2:
            return None
        t = args[0]

        if not isinstance(t, CallExpr):
            return None
        se = t.fun
        if not isinstance(se, SelectorExpr):
            return None
        if se.x is None or not implements_testify_suite_iface(pass_, se.x):
            return None
        if se.sel is None or se.sel.name != "T":
            return None
        rcv = se.x
        if not isinstance(rcv, Ident):
            return None

        new_selector = rcv.name
        if not call.is_assert:
            new_selector += ".Require()"

        fix = SuggestedFix(
            f"Replace `{call.selector_x_str}` with `{new_selector}`",
            [
                TextEdit(call.selector.x.pos, call.selector.x.end, new_selector.encode()),
                TextEdit(t.pos, args[1].pos, b""),
            ],
        )
        return new_diagnostic(self.name, call, f"use {new_selector}.{call.fn.name}", fix)