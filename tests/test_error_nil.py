import pytest

from testifylint.checker import CallMeta, FnMeta, Pass
from testifylint.error_nil import ErrorNil, is_error, is_nil
from testifylint.syntax import Ident, SelectorExpr
from testifylint.typesys import (
    Basic,
    BasicKind,
    Interface,
    Named,
    Object,
    Pointer,
    TypesInfo,
    universe_lookup,
)

ERROR_TYPE = universe_lookup("error").type


@pytest.fixture
def info():
    return TypesInfo()


def err(info, pos=10, end=13, t=ERROR_TYPE, name="err"):
    ident = Ident(name, pos=pos, end=end)
    info.uses[ident] = Object(name, None, t)
    return ident


def nil(info, pos=15, end=18):
    ident = Ident("nil", pos=pos, end=end)
    info.uses[ident] = universe_lookup("nil")
    return ident


def make_call(fn, *args):
    return CallMeta(
        selector=SelectorExpr(Ident("assert"), Ident(fn)),
        selector_x_str="assert",
        fn=FnMeta(fn, 7, 7 + len(fn)),
        args=list(args),
    )


@pytest.mark.parametrize("fn,proposed", [("Nil", "NoError"), ("NotNil", "Error")])
def test_nil_checks(info, fn, proposed):
    d = ErrorNil().check(Pass(info), make_call(fn, err(info)))
    assert d.message == f"error-nil: use assert.{proposed}"
    edit = d.suggested_fixes[0].text_edits[1]
    assert (edit.pos, edit.end, edit.new_text) == (10, 13, b"err")


@pytest.mark.parametrize("fn,proposed", [("Equal", "NoError"), ("NotEqual", "Error")])
def test_error_then_nil(info, fn, proposed):
    d = ErrorNil().check(Pass(info), make_call(fn, err(info), nil(info)))
    assert d.message == f"error-nil: use assert.{proposed}"
    edit = d.suggested_fixes[0].text_edits[1]
    assert (edit.pos, edit.end, edit.new_text) == (10, 18, b"err")


@pytest.mark.parametrize("fn,proposed", [("Equal", "NoError"), ("NotEqual", "Error")])
def test_nil_then_error(info, fn, proposed):
    call = make_call(fn, nil(info, 10, 13), err(info, 15, 18))
    d = ErrorNil().check(Pass(info), call)
    assert d.suggested_fixes[0].message == f"Replace `{fn}` with `{proposed}`"
    edit = d.suggested_fixes[0].text_edits[1]
    assert (edit.pos, edit.end, edit.new_text) == (10, 18, b"err")


def test_ignored(info):
    checker = ErrorNil()
    assert checker.check(Pass(info), make_call("Nil", nil(info))) is None
    assert checker.check(Pass(info), make_call("NotNil", nil(info))) is None
    assert checker.check(Pass(info), make_call("Equal", err(info), err(info))) is None
    assert checker.check(Pass(info), make_call("Equal", nil(info), nil(info))) is None
    assert checker.check(Pass(info), make_call("NotEqual", err(info), err(info))) is None
    assert checker.check(Pass(info), make_call("NoError", err(info))) is None


def test_valid_nils(info):
    ptr = err(info, t=Pointer(Basic(BasicKind.INT, "int")), name="ptr")
    iface = err(info, t=Interface(), name="iface")
    assert ErrorNil().check(Pass(info), make_call("Nil", ptr)) is None
    assert ErrorNil().check(Pass(info), make_call("NotNil", iface)) is None


def test_too_few_args(info):
    assert ErrorNil().check(Pass(info), make_call("Equal", err(info))) is None
    assert ErrorNil().check(Pass(info), make_call("Nil")) is None


def test_is_error(info):
    custom = Named("MyErr", Interface(frozenset({"Error", "Code"})))
    concrete = Named("myErr", Basic(BasicKind.INT, "int"), methods=frozenset({"Error"}))
    assert is_error(Pass(info), err(info))
    assert is_error(Pass(info), err(info, t=custom, name="e"))
    assert not is_error(Pass(info), err(info, t=concrete, name="e"))
    assert not is_error(Pass(info), Ident("unknown"))


def test_is_nil(info):
    assert is_nil(Pass(info), nil(info))
    assert not is_nil(Pass(info), err(info))
    assert not is_nil(Pass(info), Ident("unknown"))