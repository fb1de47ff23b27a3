"""Checker that requires assert.Empty and assert.NotEmpty for length checks."""

from __future__ import annotations

from testifylint.bool_compare import any_val
from testifylint.checker import (
    CallMeta,
    Diagnostic,
    Pass,
    RegularChecker,
    TextEdit,
    new_suggested_func_replacement,
    new_use_function_diagnostic,
)
from testifylint.syntax import BasicLit, CallExpr, Token, node_bytes
from testifylint.typesys import is_obj, universe_lookup

_LEN = universe_lookup("len")


def is_builtin_len_call(pass_: Pass, expr):
    """Return (argument, True) if expr is a call of the builtin len, else (None, False)."""
    if not isinstance(expr, CallExpr):
        return None, False
    if is_obj(pass_.types_info, expr.fun, _LEN) and len(expr.args) == 1:
        return expr.args[0], True
    return None, False


def _len_call_and_zero(pass_: Pass, a, b):
    arg, ok = is_builtin_len_call(pass_, a)
    return arg, ok and is_zero(b)


def _is_int_number(expr, value: int) -> bool:
    return isinstance(expr, BasicLit) and expr.kind == Token.INT and expr.value == str(value)


def is_zero(expr) -> bool:
    return _is_int_number(expr, 0)


def is_one(expr) -> bool:
    return _is_int_number(expr, 1)


class Empty(RegularChecker):
    """Requires assert.Empty/NotEmpty instead of comparing a length with 0 or 1."""

    name = "empty"

    def check(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        d = self._check_empty(pass_, call)
        if d is not None:
            return d
        return self._check_not_empty(pass_, call)

    def _use(self, call: CallMeta, proposed: str, replace_with) -> Diagnostic:
        a, b = call.args[0], call.args[1]
        edit = TextEdit(a.pos, b.end, node_bytes(replace_with))
        return new_use_function_diagnostic(
            self.name, call, proposed, new_suggested_func_replacement(call, proposed, edit)
        )

    def _check_empty(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        if len(call.args) < 2:
            return None
        a, b = call.args[0], call.args[1]
        fn = call.fn.name

        if fn in ("Len", "Lenf"):
            if is_zero(b):
                return self._use(call, "Empty", a)
        elif fn in ("Equal", "Equalf"):
            arg1, ok1 = _len_call_and_zero(pass_, a, b)
            arg2, ok2 = _len_call_and_zero(pass_, b, a)
            len_arg, ok = any_val([ok1, ok2], arg1, arg2)
            if ok:
                return self._use(call, "Empty", len_arg)
        elif fn in ("LessOrEqual", "LessOrEqualf"):
            len_arg, ok = is_builtin_len_call(pass_, a)
            if ok and is_zero(b):
                return self._use(call, "Empty", len_arg)
        elif fn in ("GreaterOrEqual", "GreaterOrEqualf"):
            len_arg, ok = is_builtin_len_call(pass_, b)
            if ok and is_zero(a):
                return self._use(call, "Empty", len_arg)
        elif fn in ("Less", "Lessf"):
            len_arg, ok = is_builtin_len_call(pass_, a)
            if ok and is_one(b):
                return self._use(call, "Empty", len_arg)
        elif fn in ("Greater", "Greaterf"):
            len_arg, ok = is_builtin_len_call(pass_, b)
            if ok and is_one(a):
                return self._use(call, "Empty", len_arg)
        return None

    def _check_not_empty(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        if len(call.args) < 2:
            return None
        a, b = call.args[0], call.args[1]
        fn = call.fn.name

        if fn in ("NotEqual", "NotEqualf"):
            arg1, ok1 = _len_call_and_zero(pass_, a, b)
            arg2, ok2 = _len_call_and_zero(pass_, b, a)
            len_arg, ok = any_val([ok1, ok2], arg1, arg2)
            if ok:
                return self._use(call, "NotEmpty", len_arg)
        elif fn in ("Greater", "Greaterf"):
            len_arg, ok = is_builtin_len_call(pass_, a)
            if (ok and is_zero(b)) or is_one(b):
                return self._use(call, "NotEmpty", len_arg)
        elif fn in ("Less", "Lessf"):
            len_arg, ok = is_builtin_len_call(pass_, b)
            if (ok and is_zero(a)) or is_one(a):
                return self._use(call, "NotEmpty", len_arg)
        elif fn in ("GreaterOrEqual", "GreaterOrEqualf"):
            len_arg, ok = is_builtin_len_call(pass_, a)
            if ok and is_one(b):
                return self._use(call, "NotEmpty", len_arg)
        elif fn in ("LessOrEqual", "LessOrEqualf"):
            len_arg, ok = is_builtin_len_call(pass_, b)
            if ok and is_one(a):
                return self._use(call, "NotEmpty", len_arg)
        return None