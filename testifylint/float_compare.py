"""Checker that flags exact comparisons of floating point values."""

from __future__ import annotations

from testifylint.checker import CallMeta, Diagnostic, Pass, RegularChecker, new_use_function_diagnostic
from testifylint.syntax import BinaryExpr, Token
from testifylint.typesys import Basic


def _is_float(pass_: Pass, expr) -> bool:
    t = pass_.types_info.type_of(expr)
    if t is None:
        return False
    bt = t.underlying()
    return isinstance(bt, Basic) and bt.kind.is_float


def _is_float_compare(pass_: Pass, e, op: Token) -> bool:
    if not isinstance(e, BinaryExpr):
        return False
    return e.op == op and (_is_float(pass_, e.x) or _is_float(pass_, e.y))


class FloatCompare(RegularChecker):
    """Requires assert.InEpsilon or assert.InDelta for floating point equality."""

    name = "float-compare"

    def check(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        fn = call.fn.name
        args = call.args
        if fn in ("Equal", "Equalf"):
            invalid = len(args) > 1 and _is_float(pass_, args[0]) and _is_float(pass_, args[1])
        elif fn in ("True", "Truef"):
            invalid = len(args) > 0 and _is_float_compare(pass_, args[0], Token.EQL)
        elif fn in ("False", "Falsef"):
            invalid = len(args) > 0 and _is_float_compare(pass_, args[0], Token.NEQ)
        else:
            invalid = False

        if invalid:
            return new_use_function_diagnostic(self.name, call, "InEpsilon (or InDelta)", None)
        return None