"""Checker that requires assert.ErrorIs/ErrorAs/NotErrorIs for sentinel errors."""

from __future__ import annotations

from testifylint.checker import (
    CallMeta,
    Diagnostic,
    Pass,
    RegularChecker,
    TextEdit,
    new_diagnostic,
    new_suggested_func_replacement,
    new_use_function_diagnostic,
)
from testifylint.compares import format_as_call_args
from testifylint.error_nil import is_error
from testifylint.syntax import CallExpr, SelectorExpr
from testifylint.typesys import is_obj, object_of


def _is_errors_pkg_fn_call(pass_: Pass, ce: CallExpr, fn: str) -> bool:
    se = ce.fun
    if not isinstance(se, SelectorExpr):
        return False
    if pass_.pkg is None:
        return False
    obj = object_of(pass_.pkg, "errors", fn)
    if obj is None:
        return False
    return is_obj(pass_.types_info, se.sel, obj)


def _errors_call_arg(call: CallMeta) -> CallExpr | None:
    if not call.args:
        return None
    ce = call.args[0]
    if not isinstance(ce, CallExpr) or len(ce.args) != 2:
        return None
    return ce


class ErrorIsAs(RegularChecker):
    """Requires assert.ErrorIs, assert.NotErrorIs and assert.ErrorAs for error matching."""

    name = "error-is-as"

    def _misuse(self, call: CallMeta, used: str, proposed: str) -> Diagnostic:
        sel = call.selector_x_str
        msg = f"invalid usage of {sel}.{used}, use {sel}.{proposed} instead"
        return new_diagnostic(self.name, call, msg, new_suggested_func_replacement(call, proposed))

    def _use(self, pass_: Pass, call: CallMeta, ce: CallExpr, proposed: str) -> Diagnostic:
        edit = TextEdit(ce.pos, ce.end, format_as_call_args(ce.args[0], ce.args[1]))
        return new_use_function_diagnostic(
            self.name, call, proposed, new_suggested_func_replacement(call, proposed, edit)
        )

    def check(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        fn = call.fn.name

        if fn in ("Error", "Errorf"):
            if len(call.args) >= 2 and is_error(pass_, call.args[1]):
                return self._misuse(call, "Error", "ErrorIs")
            return None

        if fn in ("NoError", "NoErrorf"):
            if len(call.args) >= 2 and is_error(pass_, call.args[1]):
                return self._misuse(call, "NoError", "NotErrorIs")
            return None

        if fn in ("True", "Truef"):
            ce = _errors_call_arg(call)
            if ce is None:
                return None
            if _is_errors_pkg_fn_call(pass_, ce, "Is"):
                return self._use(pass_, call, ce, "ErrorIs")
            if _is_errors_pkg_fn_call(pass_, ce, "As"):
                return self._use(pass_, call, ce, "ErrorAs")
            return None

        if fn in ("False", "Falsef"):
            ce = _errors_call_arg(call)
            if ce is None:
                return None
            if _is_errors_pkg_fn_call(pass_, ce, "Is"):
                return self._use(pass_, call, ce, "NotErrorIs")
        return None