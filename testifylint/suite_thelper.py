"""Checker that requires s.T().Helper() at the start of suite helper methods."""

from __future__ import annotations

from testifylint.checker import AdvancedChecker, Diagnostic, Pass, SuggestedFix, TextEdit, new_diagnostic
from testifylint.suite_dont_use_pkg import implements_testify_suite_iface
from testifylint.syntax import CallExpr, ExprStmt, FuncDecl, SelectorExpr, node_string
from testifylint.testify import ASSERT_PKG_NAME, ASSERT_PKG_PATH, REQUIRE_PKG_NAME, REQUIRE_PKG_PATH
from testifylint.typesys import is_pkg

_SERVICE_METHODS = frozenset(
    {
        "T", "SetT", "SetS", "SetupSuite", "SetupTest", "TearDownSuite", "TearDownTest",
        "BeforeTest", "AfterTest", "HandleStats", "SetupSubTest", "TearDownSubTest",
    }
)


def _is_testify_suite_method(pass_: Pass, fd: FuncDecl) -> bool:
    if fd.recv is None or len(fd.recv) != 1:
        return False
    return implements_testify_suite_iface(pass_, fd.recv[0].type)


def _is_test_method(name: str) -> bool:
    return name.startswith("Test")


def _is_service_method(name: str) -> bool:
    return name in _SERVICE_METHODS


def _is_suite_assertion(pass_: Pass, stmt) -> bool:
    if not isinstance(stmt, ExprStmt):
        return False
    ce = stmt.x
    if not isinstance(ce, CallExpr):
        return False
    se = ce.fun
    if not isinstance(se, SelectorExpr) or se.sel is None:
        return False
    selected = pass_.types_info.selections.get(se)
    if selected is None or selected.pkg is None:
        return False
    pkg = selected.pkg
    return is_pkg(pkg, ASSERT_PKG_NAME, ASSERT_PKG_PATH) or is_pkg(pkg, REQUIRE_PKG_NAME, REQUIRE_PKG_PATH)


def _contains_suite_assertions(pass_: Pass, fd: FuncDecl) -> bool:
    if fd.body is None:
        return False
    return any(_is_suite_assertion(pass_, stmt) for stmt in fd.body.list)


class SuiteTHelper(AdvancedChecker):
    """Requires suite helper methods that assert to start with s.T().Helper()."""

    name = "suite-thelper"

    def check(self, pass_: Pass, files: list) -> list:
        diagnostics: list[Diagnostic] = []
        for file in files:
            for decl in file.decls:
                if isinstance(decl, FuncDecl):
                    d = self._check_func(pass_, decl)
                    if d is not None:
                        diagnostics.append(d)
        return diagnostics

    def _check_func(self, pass_: Pass, fd: FuncDecl) -> Diagnostic | None:
        if not _is_testify_suite_method(pass_, fd):
            return None
        ident = fd.name
        if ident is None or _is_test_method(ident.name) or _is_service_method(ident.name):
            return None
        if not _contains_suite_assertions(pass_, fd):
            return None

        rcv = fd.recv[0]
        if len(rcv.names) != 1 or rcv.names[0] is None:
            return None
        helper_call = f"{rcv.names[0].name}.T().Helper()"

        first_stmt = fd.body.list[0]
        if node_string(first_stmt) == helper_call:
            return None

        fix = SuggestedFix(
            f"Insert `{helper_call}`",
            [TextEdit(first_stmt.pos, first_stmt.pos, (helper_call + "\n\n").encode())],
        )
        return new_diagnostic(self.name, fd, f"suite helper method must start with {helper_call}", fix)