"""Checker that requires assert.Len for length comparisons."""

from __future__ import annotations

from testifylint.bool_compare import xor
from testifylint.checker import (
    CallMeta,
    Diagnostic,
    Pass,
    RegularChecker,
    TextEdit,
    new_suggested_func_replacement,
    new_use_function_diagnostic,
)
from testifylint.compares import format_as_call_args
from testifylint.empty import is_builtin_len_call
from testifylint.syntax import BinaryExpr, Token


def _xor_len_call(pass_: Pass, a, b):
    arg1, ok1 = is_builtin_len_call(pass_, a)
    arg2, ok2 = is_builtin_len_call(pass_, b)
    if xor(ok1, ok2):
        return (arg1, b, True) if ok1 else (arg2, a, True)
    return None, None, False


def _len_equality(pass_: Pass, e):
    if not isinstance(e, BinaryExpr) or e.op != Token.EQL:
        return None, None, False
    return _xor_len_call(pass_, e.x, e.y)


class Len(RegularChecker):
    """Requires assert.Len instead of comparing len(x) with a number."""

    name = "len"

    def check(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        proposed = "Len"
        fn = call.fn.name

        if fn in ("Equal", "Equalf"):
            if len(call.args) < 2:
                return None
            a, b = call.args[0], call.args[1]
            len_arg, expected, ok = _xor_len_call(pass_, a, b)
            start, end = a.pos, b.end
        elif fn in ("True", "Truef"):
            if not call.args:
                return None
            expr = call.args[0]
            len_arg, expected, ok = _len_equality(pass_, expr)
            start, end = expr.pos, expr.end
        else:
            return None

        if not ok:
            return None
        edit = TextEdit(start, end, format_as_call_args(len_arg, expected))
        return new_use_function_diagnostic(
            self.name, call, proposed, new_suggested_func_replacement(call, proposed, edit)
        )