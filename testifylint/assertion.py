"""Generic assertions expanded into lines of test code with expected diagnostics."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

_VERB = re.compile(r"%(?:\[(\d+)\])?(\.(\d*))?([a-zA-Z%])")
_REGEXP_META = frozenset("\\.+*?()|[]{}^$")
_SHORT_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}


def _go_type_name(value) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float64"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def _go_str(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _go_quote(text: str) -> str:
    parts = ['"']
    for ch in text:
        if ch in _SHORT_ESCAPES:
            parts.append(_SHORT_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x80:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    parts.append('"')
    return "".join(parts)


def _format_verb(verb: str, value, precision: int | None) -> str:
    if verb in ("s", "v"):
        text = _go_str(value)
        return text if precision is None else text[:precision]
    if verb == "d":
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return f"%!d({_go_type_name(value)}={_go_str(value)})"
    if verb == "q":
        text = _go_str(value)
        return _go_quote(text if precision is None else text[:precision])
    return f"%!{verb}({_go_type_name(value)}={_go_str(value)})"


def _sprintf(template: str, *args) -> str:
    """Format like the printf family: %s, %d, %v, %q, %%, precision and [n] indexes."""
    out: list[str] = []
    pos = 0
    arg_num = 0
    reordered = False
    for m in _VERB.finditer(template):
        out.append(template[pos:m.start()])
        pos = m.end()
        index, prec_part, prec, verb = m.groups()
        if verb == "%" and index is None and prec_part is None:
            out.append("%")
            continue
        if index is not None:
            reordered = True
            n = int(index)
            if n < 1 or n > len(args):
                out.append(f"%!{verb}(BADINDEX)")
                continue
            arg_num = n - 1
        if arg_num >= len(args):
            out.append(f"%!{verb}(MISSING)")
            continue
        value = args[arg_num]
        arg_num += 1
        precision = int(prec or 0) if prec_part is not None else None
        out.append(_format_verb(verb, value, precision))
    out.append(template[pos:])
    if not reordered and arg_num < len(args):
        extras = ", ".join(f"{_go_type_name(a)}={_go_str(a)}" for a in args[arg_num:])
        out.append(f"%!(EXTRA {extras})")
    return "".join(out)


def _quote_meta(text: str) -> str:
    return "".join("\\" + ch if ch in _REGEXP_META else ch for ch in text)


def quote_report(msg: str) -> str:
    """Regexp-escape msg and quote it as a double-quoted string literal."""
    return _go_quote(_quote_meta(msg))


def _or(a: str, b: str) -> str:
    return a if a else b


def _with_suffix_f(s: str) -> str:
    return s + "f" if s else s


@dataclass(frozen=True)
class Assertion:
    """A generic view of an assertion, e.g. Equal with arguments "%s, %s"."""

    fn: str
    argsf: str
    report_msgf: str = ""
    proposed_selector: str = ""
    proposed_fn: str = ""
    proposed_argsf: str = ""

    def without_report(self) -> Assertion:
        """The same assertion with no expected diagnostic."""
        return Assertion(fn=self.fn, argsf=self.argsf)


class _ExpandMode(Enum):
    FULL = auto()
    NOT_FMT_SET = auto()
    FMT_SET = auto()
    NOT_FMT_SINGLE = auto()
    FMT_SINGLE = auto()
    EXTREME = auto()


def _build_assertion(selector, fn, args, reported_msgf, proposed_sel, proposed_fn) -> str:
    line = f"{selector}.{fn}({args})"
    if reported_msgf:
        if _or(proposed_sel, proposed_fn):
            reported_msgf = _sprintf(reported_msgf, _or(proposed_sel, selector), _or(proposed_fn, fn))
        line += " // want " + quote_report(reported_msgf)
    return line


def _build_fmt_assertion(selector, fn, args, reported_msgf, proposed_sel, proposed_fn) -> str:
    return _build_assertion(
        selector, _with_suffix_f(fn), args, reported_msgf, proposed_sel, _with_suffix_f(proposed_fn)
    )


_EXTRA_ARGS = (
    ', "msg"',
    ', "msg with arg %d", 42',
    ', "msg with args %d %s", 42, "42"',
)


class AssertionExpander:
    """Expands an Assertion into one or several lines of assertion calls."""

    def __init__(self) -> None:
        self._mode = _ExpandMode.EXTREME
        self._as_golden = False

    def as_golden(self) -> AssertionExpander:
        """Build assertions from the proposed selector, function and arguments."""
        self._as_golden = True
        return self

    def full_mode(self) -> AssertionExpander:
        self._mode = _ExpandMode.FULL
        return self

    def not_fmt_set_mode(self) -> AssertionExpander:
        self._mode = _ExpandMode.NOT_FMT_SET
        return self

    def not_fmt_single_mode(self) -> AssertionExpander:
        self._mode = _ExpandMode.NOT_FMT_SINGLE
        return self

    def expand(self, assrn: Assertion, selector: str, testing_t_param: str, arg_values=None) -> str:
        """Lines of assertion calls for assrn, joined by newlines, chosen by the current mode."""
        fn, args = assrn.fn, assrn.argsf
        if self._as_golden:
            selector = _or(assrn.proposed_selector, selector)
            fn = _or(assrn.proposed_fn, fn)
            args = _or(assrn.proposed_argsf, args)

        if testing_t_param:
            args = f"{testing_t_param}, {args}"
        if arg_values:
            args = _sprintf(args, *arg_values)

        report = (assrn.report_msgf, assrn.proposed_selector, assrn.proposed_fn)
        not_fmt_set = [_build_assertion(selector, fn, args, *report)]
        fmt_set = []
        for extra in _EXTRA_ARGS:
            not_fmt_set.append(_build_assertion(selector, fn, args + extra, *report))
            fmt_set.append(_build_fmt_assertion(selector, fn, args + extra, *report))

        sets = {
            _ExpandMode.NOT_FMT_SET: not_fmt_set,
            _ExpandMode.FMT_SET: fmt_set,
            _ExpandMode.FULL: not_fmt_set + fmt_set,
            _ExpandMode.NOT_FMT_SINGLE: not_fmt_set[:1],
            _ExpandMode.FMT_SINGLE: fmt_set[-1:],
            _ExpandMode.EXTREME: not_fmt_set[:1] + fmt_set[-1:],
        }
        lines = sets.get(self._mode)
        if lines is None:
            raise ValueError(f"unsupported expand mode: {self._mode}")
        return "\n".join(lines)