"""Checker that turns boolean comparisons into dedicated comparison assertions."""

from __future__ import annotations

from testifylint.checker import (
    CallMeta,
    Diagnostic,
    Pass,
    RegularChecker,
    TextEdit,
    new_suggested_func_replacement,
    new_use_function_diagnostic,
)
from testifylint.syntax import BinaryExpr, Token, node_bytes

_INSTEAD_OF_TRUE = {
    Token.EQL: "Equal",
    Token.NEQ: "NotEqual",
    Token.GTR: "Greater",
    Token.GEQ: "GreaterOrEqual",
    Token.LSS: "Less",
    Token.LEQ: "LessOrEqual",
}

_INSTEAD_OF_FALSE = {
    Token.EQL: "NotEqual",
    Token.NEQ: "Equal",
    Token.GTR: "LessOrEqual",
    Token.GEQ: "Less",
    Token.LSS: "GreaterOrEqual",
    Token.LEQ: "Greater",
}


def format_as_call_args(a, b) -> bytes:
    """Source text of a and b joined as call arguments, like `a, b`."""
    return b", ".join([node_bytes(a) or b"", node_bytes(b) or b""])


class Compares(RegularChecker):
    """Requires assert.Equal, assert.Less and friends instead of assert.True(t, a < b)."""

    name = "compares"

    def check(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        if not call.args:
            return None
        be = call.args[0]
        if not isinstance(be, BinaryExpr):
            return None

        if call.fn.name in ("True", "Truef"):
            mapping = _INSTEAD_OF_TRUE
        elif call.fn.name in ("False", "Falsef"):
            mapping = _INSTEAD_OF_FALSE
        else:
            return None

        proposed = mapping.get(be.op)
        if proposed is None:
            return None
        edit = TextEdit(be.x.pos, be.y.end, format_as_call_args(be.x, be.y))
        return new_use_function_diagnostic(
            self.name, call, proposed, new_suggested_func_replacement(call, proposed, edit)
        )