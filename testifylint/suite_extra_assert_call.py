"""Checker that removes or requires the explicit Assert() call on suites."""

from __future__ import annotations

from enum import IntEnum

from testifylint.checker import CallMeta, Diagnostic, Pass, RegularChecker, SuggestedFix, TextEdit, new_diagnostic
from testifylint.suite_dont_use_pkg import implements_testify_suite_iface
from testifylint.syntax import CallExpr, Ident, SelectorExpr, node_string


class SuiteExtraAssertCallMode(IntEnum):
    REMOVE = 0
    REQUIRE = 1


DEFAULT_SUITE_EXTRA_ASSERT_CALL_MODE = SuiteExtraAssertCallMode.REMOVE


class SuiteExtraAssertCall(RegularChecker):
    """Requires s.Equal(...) instead of s.Assert().Equal(...), or the reverse."""

    name = "suite-extra-assert-call"

    def __init__(self, mode: SuiteExtraAssertCallMode = DEFAULT_SUITE_EXTRA_ASSERT_CALL_MODE) -> None:
        self.mode = mode

    def set_mode(self, mode: SuiteExtraAssertCallMode) -> SuiteExtraAssertCall:
        self.mode = mode
        return self

    def check(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        if call.is_pkg:
            return None
        if self.mode is SuiteExtraAssertCallMode.REQUIRE:
            return self._require(pass_, call)
        if self.mode is SuiteExtraAssertCallMode.REMOVE:
            return self._remove(pass_, call)
        return None

    def _require(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        x = call.selector.x
        if not isinstance(x, Ident) or not implements_testify_suite_iface(pass_, x):
            return None
        msg = f"use an explicit {node_string(x)}.Assert().{call.fn.name}"
        fix = SuggestedFix("Add `Assert()` call", [TextEdit(x.end, x.end, b".Assert()")])
        return new_diagnostic(self.name, call, msg, fix)

    def _remove(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        x = call.selector.x
        if not isinstance(x, CallExpr):
            return None
        se = x.fun
        if not isinstance(se, SelectorExpr) or not implements_testify_suite_iface(pass_, se.x):
            return None
        if se.sel is None or se.sel.name != "Assert":
            return None
        msg = f"need to simplify the assertion to {node_string(se.x)}.{call.fn.name}"
        # One past the call's end also removes the dot before the assertion.
        fix = SuggestedFix("Remove `Assert()` call", [TextEdit(se.sel.pos, x.end + 1, b"")])
        return new_diagnostic(self.name, call, msg, fix)