"""Name transformations of checker names such as "suite-extra-assert-call"."""

from __future__ import annotations


def _title(word: str) -> str:
    if not word:
        raise ValueError("empty word in checker name")
    first = word[0]
    if "a" <= first <= "z":
        return first.upper() + word[1:]
    return word


class CheckerName(str):
    """A checker name with helpers for derived identifiers."""

    def as_pkg_name(self) -> str:
        """"suite-extra-assert-call" becomes "suiteextraassertcall"."""
        return self.replace("-", "")

    def as_test_name(self) -> str:
        """"suite-extra-assert-call" becomes "TestSuiteExtraAssertCallChecker"."""
        return f"Test{self._camel_case()}Checker"

    def as_suite_name(self) -> str:
        """"suite-extra-assert-call" becomes "SuiteExtraAssertCallCheckerSuite"."""
        return f"{self._camel_case()}CheckerSuite"

    def _camel_case(self) -> str:
        return "".join(_title(word) for word in self.split("-"))