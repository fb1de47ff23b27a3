"""Checker that requires the expected value to come before the actual one."""

from __future__ import annotations

import re

from testifylint.checker import CallMeta, Diagnostic, Pass, RegularChecker, SuggestedFix, TextEdit, new_diagnostic
from testifylint.compares import format_as_call_args
from testifylint.syntax import BasicLit, CallExpr, CompositeLit, Ident, SelectorExpr
from testifylint.typesys import Basic

DEFAULT_EXPECTED_VAR_PATTERN = re.compile(
    r"(^(exp(ected)?|want(ed)?)([A-Z]\w*)?$)|(^(\w*[a-z])?(Exp(ected)?|Want(ed)?)$)",
    re.ASCII,
)

_CHECKED_FNS = frozenset(
    {"Equal", "Equalf", "NotEqual", "NotEqualf", "JSONEq", "JSONEqf", "YAMLEq", "YAMLEqf"}
)

_CASTS = frozenset(
    {
        "uint", "uint8", "uint16", "uint32", "uint64",
        "int", "int8", "int16", "int32", "int64",
        "float32", "float64",
        "rune", "string",
    }
)


def _is_basic_lit(e) -> bool:
    return isinstance(e, BasicLit)


def _is_ident_named_as_expected(pattern: re.Pattern, e) -> bool:
    return isinstance(e, Ident) and pattern.search(e.name) is not None


def _is_struct_field_named_as_expected(pattern: re.Pattern, e) -> bool:
    return isinstance(e, SelectorExpr) and _is_ident_named_as_expected(pattern, e.sel)


def _is_casted_basic_lit_or_expected_value(ce: CallExpr, pattern: re.Pattern) -> bool:
    if len(ce.args) != 1 or not isinstance(ce.fun, Ident):
        return False
    name = ce.fun.name
    if name in ("complex64", "complex128"):
        return True
    if name in _CASTS:
        return _is_basic_lit(ce.args[0]) or _is_ident_named_as_expected(pattern, ce.args[0])
    return False


def _is_expected_value_factory(ce: CallExpr, pattern: re.Pattern) -> bool:
    if ce.args:
        return False
    fn = ce.fun
    if isinstance(fn, Ident):
        return pattern.search(fn.name) is not None
    if isinstance(fn, SelectorExpr):
        return pattern.search(fn.sel.name) is not None
    return False


def _is_untyped_const(pass_: Pass, e) -> bool:
    t = pass_.types_info.type_of(e)
    return isinstance(t, Basic) and t.kind.is_untyped


def _is_typed_const(pass_: Pass, e) -> bool:
    tv = pass_.types_info.types.get(e)
    return tv is not None and tv.is_value and tv.value is not None


class ExpectedActual(RegularChecker):
    """Requires assert.Equal(t, expected, actual) rather than the reverse order."""

    name = "expected-actual"

    def __init__(self, pattern: re.Pattern | None = None) -> None:
        self.exp_var_pattern = pattern if pattern is not None else DEFAULT_EXPECTED_VAR_PATTERN

    def set_exp_var_pattern(self, pattern: re.Pattern | None) -> ExpectedActual:
        """Use pattern to recognise expected variables; None keeps the current one."""
        if pattern is not None:
            self.exp_var_pattern = pattern
        return self

    def check(self, pass_: Pass, call: CallMeta) -> Diagnostic | None:
        if call.fn.name not in _CHECKED_FNS or len(call.args) < 2:
            return None
        first, second = call.args[0], call.args[1]

        if not self._is_wrong_order(pass_, first, second):
            return None
        fix = SuggestedFix(
            "Reverse actual and expected values",
            [TextEdit(first.pos, second.end, format_as_call_args(second, first))],
        )
        return new_diagnostic(self.name, call, "need to reverse actual and expected values", fix)

    def _is_wrong_order(self, pass_: Pass, first, second) -> bool:
        return self._is_expected_candidate(pass_, second) and not self._is_expected_candidate(pass_, first)

    def _is_expected_candidate(self, pass_: Pass, expr) -> bool:
        pattern = self.exp_var_pattern
        if isinstance(expr, CompositeLit):
            return True
        if isinstance(expr, CallExpr):
            return _is_casted_basic_lit_or_expected_value(expr, pattern) or _is_expected_value_factory(
                expr, pattern
            )
        return (
            _is_basic_lit(expr)
            or _is_untyped_const(pass_, expr)
            or _is_typed_const(pass_, expr)
            or _is_ident_named_as_expected(pattern, expr)
            or _is_struct_field_named_as_expected(pattern, expr)
        )