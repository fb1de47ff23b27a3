"""Diagnostics, assertion call metadata and checker interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from testifylint.syntax import SelectorExpr
from testifylint.typesys import Package, TypesInfo


@dataclass
class TextEdit:
    pos: int
    end: int
    new_text: bytes | None


@dataclass
class SuggestedFix:
    message: str
    text_edits: list = field(default_factory=list)


@dataclass
class Diagnostic:
    pos: int
    end: int
    category: str
    message: str
    suggested_fixes: list = field(default_factory=list)


@dataclass
class Pass:
    """What a checker knows about the package being analysed."""

    types_info: TypesInfo
    pkg: Package | None = None


@dataclass
class FnMeta:
    """The assertion function itself, e.g. "Equal"."""

    name: str
    pos: int = 0
    end: int = 0
    is_fmt: bool = False


@dataclass(kw_only=True)
class CallMeta:
    """An assertion call such as assert.Equal(t, 42, result, "comment")."""

    pos: int = 0
    end: int = 0
    is_pkg: bool = False
    is_assert: bool = False
    selector: SelectorExpr
    selector_x_str: str
    fn: FnMeta
    args: list = field(default_factory=list)
    args_raw: list = field(default_factory=list)


class Checker(ABC):
    """A named checker."""

    name: str = ""


class RegularChecker(Checker):
    """Checks one assertion call."""

    @abstractmethod
    def check(self, pass_: Pass, call: CallMeta) -> Diagnostic | None: ...


class AdvancedChecker(Checker):
    """Checks whole files."""

    @abstractmethod
    def check(self, pass_: Pass, files: list) -> list: ...


def new_diagnostic(checker: str, rng, msg: str, fix: SuggestedFix | None) -> Diagnostic:
    d = Diagnostic(pos=rng.pos, end=rng.end, category=checker, message=f"{checker}: {msg}")
    if fix is not None:
        d.suggested_fixes = [fix]
    return d


def new_use_function_diagnostic(
    checker: str, call: CallMeta, proposed_fn: str, fix: SuggestedFix | None
) -> Diagnostic:
    f = proposed_fn + ("f" if call.fn.is_fmt else "")
    return new_diagnostic(checker, call, f"use {call.selector_x_str}.{f}", fix)


def new_suggested_func_replacement(call: CallMeta, proposed_fn: str, *additional_edits: TextEdit) -> SuggestedFix:
    if call.fn.is_fmt:
        proposed_fn += "f"
    return SuggestedFix(
        message=f"Replace `{call.fn.name}` with `{proposed_fn}`",
        text_edits=[TextEdit(call.fn.pos, call.fn.end, proposed_fn.encode()), *additional_edits],
    )