"""Checker that requires error assertions to stop the test."""

from __future__ import annotations

from testifylint.checker import CallMeta, Diagnostic, Pass, RegularChecker, new_diagnostic

_ERROR_FNS = frozenset(
    {
        "Error", "ErrorIs", "ErrorAs", "EqualError", "ErrorContains", "NoError", "NotErrorIs",
        "Errorf", "ErrorIsf", "ErrorAsf", "EqualErrorf", "ErrorContainsf", "NoErrorf", "NotErrorIsf",
    }
)


class RequireError(RegularChecker):
    """Requires require (not assert) for error assertions."""

    name = "require-error"

    def check(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        if not call.is_assert:
            return None
        if call.fn.name in _ERROR_FNS:
            return new_diagnostic(self.name, call, "for error assertions use require", None)
        return None