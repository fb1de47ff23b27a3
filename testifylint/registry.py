"""All known checkers in priority order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from testifylint.bool_compare import BoolCompare
from testifylint.checker import Checker
from testifylint.compares import Compares
from testifylint.empty import Empty
from testifylint.error_is_as import ErrorIsAs
from testifylint.error_nil import ErrorNil
from testifylint.expected_actual import ExpectedActual
from testifylint.float_compare import FloatCompare
from testifylint.length import Len
from testifylint.require_error import RequireError
from testifylint.suite_dont_use_pkg import SuiteDontUsePkg
from testifylint.suite_extra_assert_call import SuiteExtraAssertCall
from testifylint.suite_thelper import SuiteTHelper


@dataclass(frozen=True)
class _Entry:
    factory: Callable[[], Checker]
    enabled_by_default: bool

    @property
    def name(self) -> str:
        return self.factory().name


_REGISTRY = (
    # Regular checkers.
    _Entry(FloatCompare, True),
    _Entry(BoolCompare, True),
    _Entry(Empty, True),
    _Entry(Len, True),
    _Entry(Compares, True),
    _Entry(ErrorNil, True),
    _Entry(ErrorIsAs, True),
    _Entry(RequireError, True),
    _Entry(ExpectedActual, True),
    _Entry(SuiteExtraAssertCall, True),
    _Entry(SuiteDontUsePkg, True),
    # Advanced checkers.
    _Entry(SuiteTHelper, False),
)


def _find(name: str) -> tuple[int, _Entry] | None:
    for priority, entry in enumerate(_REGISTRY):
        if entry.name == name:
            return priority, entry
    return None


def all_checkers() -> list[str]:
    """Names of all checkers in priority order."""
    return [entry.name for entry in _REGISTRY]


def enabled_by_default() -> list[str]:
    """Names of the checkers enabled by default, in priority order."""
    return [entry.name for entry in _REGISTRY if entry.enabled_by_default]


def get(name: str) -> Checker | None:
    """A new instance of the named checker, or None if there is none."""
    found = _find(name)
    return found[1].factory() if found is not None else None


def is_known(name: str) -> bool:
    return _find(name) is not None


def is_enabled_by_default(name: str) -> bool:
    """Tell whether the checker is enabled by default; False for unknown names."""
    found = _find(name)
    return found is not None and found[1].enabled_by_default


def sort_by_priority(checkers: list[str]) -> None:
    """Sort the names in place by checker priority; unknown names rank first."""

    def priority(name: str) -> int:
        found = _find(name)
        return found[0] if found is not None else 0

    checkers.sort(key=priority)