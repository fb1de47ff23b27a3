import pytest

from testifylint.assertion import Assertion, AssertionExpander, quote_report

CASES = [
    pytest.param(
        "s.Require()", "", None,
        Assertion(fn="Equal", argsf="42.42, result"),
        r"s.Require().Equal(42.42, result)",
        r"s.Require().Equal(42.42, result)",
        id="no report without t param",
    ),
    pytest.param(
        "assert", "t", None,
        Assertion(fn="Equal", argsf="42.42, result"),
        r"assert.Equal(t, 42.42, result)",
        r"assert.Equal(t, 42.42, result)",
        id="no report with t param",
    ),
    pytest.param(
        "assert", "s.T()", None,
        Assertion(fn="Equal", argsf="42.42, result"),
        r"assert.Equal(s.T(), 42.42, result)",
        r"assert.Equal(s.T(), 42.42, result)",
        id="no report with suite T param",
    ),
    pytest.param(
        "s", "", ["expected", "actual"],
        Assertion(fn="Equal", argsf="%s, %s"),
        r"s.Equal(expected, actual)",
        r"s.Equal(expected, actual)",
        id="no report args formatting",
    ),
    pytest.param(
        "s", "", ["predicate"],
        Assertion(
            fn="True", argsf="%s == true",
            report_msgf="need to simplify the assertion", proposed_argsf="%s",
        ),
        r's.True(predicate == true) // want "need to simplify the assertion"',
        r's.True(predicate) // want "need to simplify the assertion"',
        id="proposed args only 1",
    ),
    pytest.param(
        "assert", "", ['"expected string"'],
        Assertion(
            fn="Equal", argsf="result, %s",
            report_msgf="need to reverse actual and expected values", proposed_argsf="%s, result",
        ),
        r'assert.Equal(result, "expected string") // want "need to reverse actual and expected values"',
        r'assert.Equal("expected string", result) // want "need to reverse actual and expected values"',
        id="proposed args only 2",
    ),
    pytest.param(
        "s.Assert()", "", None,
        Assertion(
            fn="Equal", argsf="a, b",
            report_msgf="need to simplify the assertion%.s%.s", proposed_selector="s",
        ),
        r's.Assert().Equal(a, b) // want "need to simplify the assertion"',
        r's.Equal(a, b) // want "need to simplify the assertion"',
        id="proposed selector only without formatting",
    ),
    pytest.param(
        "assert", "s.T()", None,
        Assertion(fn="True", argsf="b", report_msgf="use suite API instead of package"),
        r'assert.True(s.T(), b) // want "use suite API instead of package"',
        r'assert.True(s.T(), b) // want "use suite API instead of package"',
        id="without proposals",
    ),
    pytest.param(
        "s", "", None,
        Assertion(
            fn="NoError", argsf="err",
            report_msgf="use %s.NoError%.s", proposed_selector="s.Require()",
        ),
        r's.NoError(err) // want "use s\\.Require\\(\\)\\.NoError"',
        r's.Require().NoError(err) // want "use s\\.Require\\(\\)\\.NoError"',
        id="proposed selector only with formatting",
    ),
    pytest.param(
        "require", "t", ["42.42", "result"],
        Assertion(
            fn="Equal", argsf="%s, %s", report_msgf="use %s.%s",
            proposed_fn="InEpsilon", proposed_argsf="%s, %s, 0.0001",
        ),
        r'require.Equal(t, 42.42, result) // want "use require\\.InEpsilon"',
        r'require.InEpsilon(t, 42.42, result, 0.0001) // want "use require\\.InEpsilon"',
        id="proposed fn and args",
    ),
    pytest.param(
        "require", "t", None,
        Assertion(
            fn="Error", argsf="err, errSentinel",
            report_msgf="invalid usage of %[1]s.Error, use %[1]s.%[2]s instead", proposed_fn="ErrorIs",
        ),
        r'require.Error(t, err, errSentinel) // want "invalid usage of require\\.Error, use require\\.ErrorIs instead"',
        r'require.ErrorIs(t, err, errSentinel) // want "invalid usage of require\\.Error, use require\\.ErrorIs instead"',
        id="positional formatting",
    ),
    pytest.param(
        "suiteObj", "", ["arr"],
        Assertion(
            fn="Equal", argsf="3, len(%s)", report_msgf="use %s.%s",
            proposed_selector="suiteObj.Require()", proposed_argsf="%s, 3", proposed_fn="Len",
        ),
        r'suiteObj.Equal(3, len(arr)) // want "use suiteObj\\.Require\\(\\)\\.Len"',
        r'suiteObj.Require().Len(arr, 3) // want "use suiteObj\\.Require\\(\\)\\.Len"',
        id="assertion with report",
    ),
    pytest.param(
        "suiteObj", "", ["arr"],
        Assertion(
            fn="Equal", argsf="3, len(%s)", report_msgf="use %s.%s",
            proposed_selector="suiteObj.Require()", proposed_argsf="%s, 3", proposed_fn="Len",
        ).without_report(),
        r"suiteObj.Equal(3, len(arr))",
        r"suiteObj.Equal(3, len(arr))",
        id="assertion without report",
    ),
]


@pytest.mark.parametrize("selector, t_param, args, assrn, expected, expected_golden", CASES)
def test_expand_errored(selector, t_param, args, assrn, expected, expected_golden):
    got = AssertionExpander().not_fmt_single_mode().expand(assrn, selector, t_param, args)
    assert got == expected


@pytest.mark.parametrize("selector, t_param, args, assrn, expected, expected_golden", CASES)
def test_expand_golden(selector, t_param, args, assrn, expected, expected_golden):
    got = AssertionExpander().not_fmt_single_mode().as_golden().expand(assrn, selector, t_param, args)
    assert got == expected_golden


MODES_ASSERTION = Assertion(
    fn="Len", argsf="arr, 0", report_msgf="use %s.%s", proposed_fn="Empty", proposed_argsf="arr"
)

MODE_CASES = [
    pytest.param(
        None,
        [
            r'assert.Len(t, arr, 0) // want "use assert\\.Empty"',
            r'assert.Lenf(t, arr, 0, "msg with args %d %s", 42, "42") // want "use assert\\.Emptyf"',
        ],
        [
            r'assert.Empty(t, arr) // want "use assert\\.Empty"',
            r'assert.Emptyf(t, arr, "msg with args %d %s", 42, "42") // want "use assert\\.Emptyf"',
        ],
        id="default extreme mode",
    ),
    pytest.param(
        AssertionExpander.full_mode,
        [
            r'assert.Len(t, arr, 0) // want "use assert\\.Empty"',
            r'assert.Len(t, arr, 0, "msg") // want "use assert\\.Empty"',
            r'assert.Len(t, arr, 0, "msg with arg %d", 42) // want "use assert\\.Empty"',
            r'assert.Len(t, arr, 0, "msg with args %d %s", 42, "42") // want "use assert\\.Empty"',
            r'assert.Lenf(t, arr, 0, "msg") // want "use assert\\.Emptyf"',
            r'assert.Lenf(t, arr, 0, "msg with arg %d", 42) // want "use assert\\.Emptyf"',
            r'assert.Lenf(t, arr, 0, "msg with args %d %s", 42, "42") // want "use assert\\.Emptyf"',
        ],
        [
            r'assert.Empty(t, arr) // want "use assert\\.Empty"',
            r'assert.Empty(t, arr, "msg") // want "use assert\\.Empty"',
            r'assert.Empty(t, arr, "msg with arg %d", 42) // want "use assert\\.Empty"',
            r'assert.Empty(t, arr, "msg with args %d %s", 42, "42") // want "use assert\\.Empty"',
            r'assert.Emptyf(t, arr, "msg") // want "use assert\\.Emptyf"',
            r'assert.Emptyf(t, arr, "msg with arg %d", 42) // want "use assert\\.Emptyf"',
            r'assert.Emptyf(t, arr, "msg with args %d %s", 42, "42") // want "use assert\\.Emptyf"',
        ],
        id="full mode",
    ),
    pytest.param(
        AssertionExpander.not_fmt_set_mode,
        [
            r'assert.Len(t, arr, 0) // want "use assert\\.Empty"',
            r'assert.Len(t, arr, 0, "msg") // want "use assert\\.Empty"',
            r'assert.Len(t, arr, 0, "msg with arg %d", 42) // want "use assert\\.Empty"',
            r'assert.Len(t, arr, 0, "msg with args %d %s", 42, "42") // want "use assert\\.Empty"',
        ],
        [
            r'assert.Empty(t, arr) // want "use assert\\.Empty"',
            r'assert.Empty(t, arr, "msg") // want "use assert\\.Empty"',
            r'assert.Empty(t, arr, "msg with arg %d", 42) // want "use assert\\.Empty"',
            r'assert.Empty(t, arr, "msg with args %d %s", 42, "42") // want "use assert\\.Empty"',
        ],
        id="not fmt set mode",
    ),
    pytest.param(
        AssertionExpander.not_fmt_single_mode,
        [r'assert.Len(t, arr, 0) // want "use assert\\.Empty"'],
        [r'assert.Empty(t, arr) // want "use assert\\.Empty"'],
        id="not fmt single mode",
    ),
]


def _expander(mode):
    expander = AssertionExpander()
    return mode(expander) if mode is not None else expander


@pytest.mark.parametrize("mode, expected, expected_golden", MODE_CASES)
def test_modes_errored(mode, expected, expected_golden):
    got = _expander(mode).expand(MODES_ASSERTION, "assert", "t", None)
    assert got == "\n".join(expected)


@pytest.mark.parametrize("mode, expected, expected_golden", MODE_CASES)
def test_modes_golden(mode, expected, expected_golden):
    got = _expander(mode).as_golden().expand(MODES_ASSERTION, "assert", "t", None)
    assert got == "\n".join(expected_golden)


def test_without_report_keeps_only_fn_and_args():
    assrn = Assertion(
        fn="Equal", argsf="a, b", report_msgf="use %s.%s",
        proposed_selector="s", proposed_fn="Len", proposed_argsf="b",
    )
    assert assrn.without_report() == Assertion(fn="Equal", argsf="a, b")


def test_quote_report_escapes_regexp_meta_and_quotes():
    assert quote_report("use s.Require()") == r'"use s\\.Require\\(\\)"'


def test_quote_report_plain_message():
    assert quote_report("need to simplify") == '"need to simplify"'


def test_builder_methods_return_same_expander():
    expander = AssertionExpander()
    assert expander.full_mode().as_golden() is expander