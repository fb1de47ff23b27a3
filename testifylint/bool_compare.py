"""Checker that simplifies comparisons with boolean literals."""

from __future__ import annotations

from testifylint.checker import (
    CallMeta,
    Diagnostic,
    Pass,
    RegularChecker,
    SuggestedFix,
    TextEdit,
    new_diagnostic,
    new_suggested_func_replacement,
    new_use_function_diagnostic,
)
from testifylint.syntax import BinaryExpr, Token, UnaryExpr, node_bytes
from testifylint.typesys import is_obj, universe_lookup

_TRUE = universe_lookup("true")
_FALSE = universe_lookup("false")


def xor(a: bool, b: bool) -> bool:
    return a != b


def any_val(bools, *vals):
    """Return (vals[i], True) for the first true bools[i], else (None, False)."""
    if len(bools) != len(vals):
        raise ValueError("inconsistent usage of any_val")
    for flag, val in zip(bools, vals):
        if flag:
            return val, True
    return None, False


def _is_true(pass_: Pass, e) -> bool:
    return is_obj(pass_.types_info, e, _TRUE)


def _is_false(pass_: Pass, e) -> bool:
    return is_obj(pass_.types_info, e, _FALSE)


def _comparison_with(pass_: Pass, e, predicate, op: Token):
    if not isinstance(e, BinaryExpr) or e.op != op:
        return None, False
    t1, t2 = predicate(pass_, e.x), predicate(pass_, e.y)
    if xor(t1, t2):
        return (e.y if t1 else e.x), True
    return None, False


def _negation(e):
    if not isinstance(e, UnaryExpr):
        return None, False
    return e.x, e.op == Token.NOT


class BoolCompare(RegularChecker):
    """Requires assert.True/False instead of comparisons with true and false."""

    name = "bool-compare"

    def check(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        fn = call.fn.name

        def use_fn(proposed, surviving, start, end):
            edit = TextEdit(start, end, node_bytes(surviving))
            return new_use_function_diagnostic(
                self.name, call, proposed, new_suggested_func_replacement(call, proposed, edit)
            )

        def simplify(surviving, start, end):
            fix = SuggestedFix("Simplify the assertion", [TextEdit(start, end, node_bytes(surviving))])
            return new_diagnostic(self.name, call, "need to simplify the assertion", fix)

        if fn in ("Equal", "Equalf", "NotEqual", "NotEqualf"):
            if len(call.args) < 2:
                return None
            arg1, arg2 = call.args[0], call.args[1]
            equal = fn.startswith("Equal")
            t1, t2 = _is_true(pass_, arg1), _is_true(pass_, arg2)
            f1, f2 = _is_false(pass_, arg1), _is_false(pass_, arg2)
            if xor(t1, t2):
                surviving, _ = any_val([t1, t2], arg2, arg1)
                return use_fn("True" if equal else "False", surviving, arg1.pos, arg2.end)
            if xor(f1, f2):
                surviving, _ = any_val([f1, f2], arg2, arg1)
                return use_fn("False" if equal else "True", surviving, arg1.pos, arg2.end)
            return None

        if fn in ("True", "Truef", "False", "Falsef"):
            if not call.args:
                return None
            expr = call.args[0]

            a1, ok1 = _comparison_with(pass_, expr, _is_true, Token.EQL)
            a2, ok2 = _comparison_with(pass_, expr, _is_false, Token.NEQ)
            surviving, ok = any_val([ok1, ok2], a1, a2)
            if ok:
                return simplify(surviving, expr.pos, expr.end)

            a1, ok1 = _comparison_with(pass_, expr, _is_true, Token.NEQ)
            a2, ok2 = _comparison_with(pass_, expr, _is_false, Token.EQL)
            a3, ok3 = _negation(expr)
            surviving, ok = any_val([ok1, ok2, ok3], a1, a2, a3)
            if ok:
                proposed = "False" if fn.startswith("True") else "True"
                return use_fn(proposed, surviving, expr.pos, expr.end)
        return None