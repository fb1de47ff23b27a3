"""Checker that requires assert.Error/NoError for error values compared with nil."""

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
from testifylint.syntax import node_bytes
from testifylint.typesys import Basic, BasicKind, Interface, implements, universe_lookup

_ERR_IFACE = universe_lookup("error").type.underlying()

_ERROR_FN = "Error"
_NO_ERROR_FN = "NoError"


def is_error(pass_: Pass, expr) -> bool:
    """Tell whether expr has an interface type that implements error."""
    t = pass_.types_info.type_of(expr)
    if t is None:
        return False
    return isinstance(t.underlying(), Interface) and implements(t, _ERR_IFACE)


def is_nil(pass_: Pass, expr) -> bool:
    """Tell whether expr is the untyped nil."""
    t = pass_.types_info.type_of(expr)
    return isinstance(t, Basic) and t.kind is BasicKind.UNTYPED_NIL


class ErrorNil(RegularChecker):
    """Requires assert.Error/NoError instead of nil checks of errors."""

    name = "error-nil"

    def _proposal(self, pass_: Pass, call: CallMeta):
        fn = call.fn.name
        args = call.args

        if fn in ("NotNil", "NotNilf", "Nil", "Nilf"):
            if args and is_error(pass_, args[0]):
                proposed = _ERROR_FN if fn.startswith("Not") else _NO_ERROR_FN
                return proposed, args[0], args[0].end
            return None

        if fn in ("Equal", "Equalf", "NotEqual", "NotEqualf"):
            if len(args) < 2:
                return None
            a, b = args[0], args[1]
            proposed = _ERROR_FN if fn.startswith("Not") else _NO_ERROR_FN
            if is_error(pass_, a) and is_nil(pass_, b):
                return proposed, a, b.end
            if is_nil(pass_, a) and is_error(pass_, b):
                return proposed, b, b.end
        return None

    def check(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        proposal = self._proposal(pass_, call)
        if proposal is None:
            return None
        proposed, surviving, end = proposal
        edit = TextEdit(call.args[0].pos, end, node_bytes(surviving))
        return new_use_function_diagnostic(
            self.name, call, proposed, new_suggested_func_replacement(call, proposed, edit)
        )