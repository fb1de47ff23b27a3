import pytest

from testifylint.checker import CallMeta, FnMeta, Pass
from testifylint.empty import Empty, is_builtin_len_call, is_one, is_zero
from testifylint.syntax import BasicLit, CallExpr, Ident, SelectorExpr, Token
from testifylint.typesys import TypesInfo, universe_lookup


@pytest.fixture
def info():
    return TypesInfo()


def len_call(info, name="elems"):
    fn = Ident("len")
    info.uses[fn] = universe_lookup("len")
    return CallExpr(fn, [Ident(name)], pos=10, end=20)


def num(value, kind=Token.INT):
    return BasicLit(kind, value, pos=30, end=31)


def make_call(fn, *args):
    return CallMeta(
        selector=SelectorExpr(Ident("assert"), Ident(fn)),
        selector_x_str="assert",
        fn=FnMeta(fn, 7, 7 + len(fn)),
        args=list(args),
    )


def build(info, spec):
    return num(spec) if spec in ("0", "1", "2") else len_call(info)


EMPTY_CASES = [
    ("Equal", "len", "0"),
    ("Equal", "0", "len"),
    ("LessOrEqual", "len", "0"),
    ("GreaterOrEqual", "0", "len"),
    ("Less", "len", "1"),
    ("Greater", "1", "len"),
]

NOT_EMPTY_CASES = [
    ("NotEqual", "len", "0"),
    ("NotEqual", "0", "len"),
    ("Greater", "len", "0"),
    ("Less", "0", "len"),
    ("Greater", "len", "1"),
    ("Less", "1", "len"),
    ("GreaterOrEqual", "len", "1"),
    ("LessOrEqual", "1", "len"),
]

IGNORED_CASES = [
    ("Equal", "len", "len"),
    ("Equal", "len", "1"),
    ("Equal", "1", "len"),
    ("NotEqual", "len", "len"),
    ("NotEqual", "len", "1"),
    ("NotEqual", "1", "len"),
    ("Greater", "len", "len"),
    ("Greater", "len", "2"),
    ("Greater", "2", "len"),
    ("GreaterOrEqual", "len", "len"),
    ("GreaterOrEqual", "len", "0"),
    ("GreaterOrEqual", "len", "2"),
    ("GreaterOrEqual", "2", "len"),
    ("Less", "len", "len"),
    ("Less", "len", "0"),
    ("Less", "len", "2"),
    ("Less", "2", "len"),
    ("LessOrEqual", "len", "len"),
    ("LessOrEqual", "0", "len"),
    ("LessOrEqual", "len", "2"),
    ("LessOrEqual", "2", "len"),
]


def test_len_zero(info):
    elems = Ident("elems", pos=12, end=17)
    d = Empty().check(Pass(info), make_call("Len", elems, num("0")))
    assert d.message == "empty: use assert.Empty"
    edit = d.suggested_fixes[0].text_edits[1]
    assert (edit.pos, edit.end, edit.new_text) == (12, 31, b"elems")


@pytest.mark.parametrize("fn,a,b", EMPTY_CASES)
def test_empty_cases(info, fn, a, b):
    d = Empty().check(Pass(info), make_call(fn, build(info, a), build(info, b)))
    assert d.message == "empty: use assert.Empty"
    assert d.suggested_fixes[0].text_edits[1].new_text == b"elems"


@pytest.mark.parametrize("fn,a,b", NOT_EMPTY_CASES)
def test_not_empty_cases(info, fn, a, b):
    d = Empty().check(Pass(info), make_call(fn, build(info, a), build(info, b)))
    assert d.message == "empty: use assert.NotEmpty"
    assert d.suggested_fixes[0].message == "Replace `" + fn + "` with `NotEmpty`"
    assert d.suggested_fixes[0].text_edits[1].new_text == b"elems"


@pytest.mark.parametrize("fn,a,b", IGNORED_CASES)
def test_ignored_cases(info, fn, a, b):
    assert Empty().check(Pass(info), make_call(fn, build(info, a), build(info, b))) is None


def test_len_with_length_ignored(info):
    call = make_call("Len", Ident("elems"), len_call(info))
    assert Empty().check(Pass(info), call) is None


def test_shadowed_len_is_not_builtin(info):
    call = make_call("Equal", CallExpr(Ident("len"), [Ident("elems")]), num("0"))
    assert Empty().check(Pass(info), call) is None


def test_greater_than_one_without_len_quirk(info):
    d = Empty().check(Pass(info), make_call("Greater", Ident("n"), num("1")))
    assert d.message == "empty: use assert.NotEmpty"
    assert d.suggested_fixes[0].text_edits[1].new_text is None


def test_too_few_args(info):
    assert Empty().check(Pass(info), make_call("Len", Ident("elems"))) is None


def test_is_builtin_len_call(info):
    call = len_call(info)
    arg, ok = is_builtin_len_call(Pass(info), call)
    assert ok and arg is call.args[0]
    call.args.append(Ident("extra"))
    assert is_builtin_len_call(Pass(info), call) == (None, False)
    assert is_builtin_len_call(Pass(info), Ident("elems")) == (None, False)


def test_is_zero_and_one():
    assert is_zero(num("0")) and not is_zero(num("1"))
    assert is_one(num("1")) and not is_one(num("0"))
    assert not is_zero(num("0", Token.FLOAT))
    assert not is_zero(num("00"))
    assert not is_one(Ident("one"))