"""A small model of the type checker's results: types, objects, scopes and packages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from testifylint.syntax import Ident


class BasicKind(Enum):
    INVALID = auto()
    BOOL = auto()
    INT = auto()
    INT8 = auto()
    INT16 = auto()
    INT32 = auto()
    INT64 = auto()
    UINT = auto()
    UINT8 = auto()
    UINT16 = auto()
    UINT32 = auto()
    UINT64 = auto()
    UINTPTR = auto()
    FLOAT32 = auto()
    FLOAT64 = auto()
    COMPLEX64 = auto()
    COMPLEX128 = auto()
    STRING = auto()
    UNSAFE_POINTER = auto()
    UNTYPED_BOOL = auto()
    UNTYPED_INT = auto()
    UNTYPED_RUNE = auto()
    UNTYPED_FLOAT = auto()
    UNTYPED_COMPLEX = auto()
    UNTYPED_STRING = auto()
    UNTYPED_NIL = auto()

    @property
    def is_untyped(self) -> bool:
        return self.name.startswith("UNTYPED_")

    @property
    def is_float(self) -> bool:
        return self in (BasicKind.FLOAT32, BasicKind.FLOAT64, BasicKind.UNTYPED_FLOAT)


class Type:
    """Base of all types."""

    def underlying(self) -> Type:
        return self

    def method_set(self) -> frozenset:
        return frozenset()


@dataclass(eq=False)
class Basic(Type):
    kind: BasicKind
    name: str


@dataclass(eq=False)
class Interface(Type):
    methods: frozenset = frozenset()

    def method_set(self) -> frozenset:
        return frozenset(self.methods)


@dataclass(eq=False)
class Named(Type):
    name: str
    underlying_type: Type
    methods: frozenset = frozenset()
    pointer_methods: frozenset = frozenset()

    def underlying(self) -> Type:
        return self.underlying_type.underlying()

    def method_set(self) -> frozenset:
        return frozenset(self.methods) | self.underlying().method_set()


@dataclass(eq=False)
class Pointer(Type):
    elem: Type

    def method_set(self) -> frozenset:
        if isinstance(self.elem, Named):
            return self.elem.method_set() | frozenset(self.elem.pointer_methods)
        return frozenset()


def implements(t: Type | None, iface: Interface) -> bool:
    """Tell whether the method set of t covers the interface."""
    if t is None:
        return False
    return frozenset(iface.methods) <= t.method_set()


@dataclass(eq=False)
class Object:
    name: str
    pkg: Package | None = None
    type: Type | None = None

    @property
    def id(self) -> str:
        """Unique identifier: exported and universe names are global, others are package-qualified."""
        if self.pkg is None or self.name[:1].isupper():
            return self.name
        return f"{self.pkg.path}.{self.name}"


@dataclass
class Scope:
    objects: dict = field(default_factory=dict)

    def lookup(self, name: str) -> Object | None:
        return self.objects.get(name)

    def insert(self, obj: Object) -> Object | None:
        """Insert obj; return an existing object of the same name instead, if any."""
        existing = self.objects.get(obj.name)
        if existing is not None:
            return existing
        self.objects[obj.name] = obj
        return None


@dataclass(eq=False)
class Package:
    path: str
    name: str
    scope: Scope = field(default_factory=Scope)
    imports: list = field(default_factory=list)


@dataclass
class TypeAndValue:
    type: Type | None
    value: object = None
    is_value: bool = True


@dataclass
class TypesInfo:
    types: dict = field(default_factory=dict)
    defs: dict = field(default_factory=dict)
    uses: dict = field(default_factory=dict)
    selections: dict = field(default_factory=dict)

    def object_of(self, ident: Ident) -> Object | None:
        obj = self.uses.get(ident)
        return obj if obj is not None else self.defs.get(ident)

    def type_of(self, expr) -> Type | None:
        tv = self.types.get(expr)
        if tv is not None:
            return tv.type
        if isinstance(expr, Ident):
            obj = self.object_of(expr)
            if obj is not None:
                return obj.type
        return None


_UNTYPED_BOOL = Basic(BasicKind.UNTYPED_BOOL, "untyped bool")
_UNTYPED_NIL = Basic(BasicKind.UNTYPED_NIL, "untyped nil")

_UNIVERSE = {
    "true": Object("true", None, _UNTYPED_BOOL),
    "false": Object("false", None, _UNTYPED_BOOL),
    "nil": Object("nil", None, _UNTYPED_NIL),
    "len": Object("len"),
    "error": Object("error", None, Named("error", Interface(frozenset({"Error"})))),
}


def universe_lookup(name: str) -> Object | None:
    """Predeclared object of the given name."""
    return _UNIVERSE.get(name)


def _trim_vendor(path: str) -> str:
    return path.removeprefix("vendor/")


def object_of(pkg: Package, obj_pkg: str, obj_name: str) -> Object | None:
    """Find obj_name in pkg itself or in one of its imports."""
    if pkg.path == obj_pkg:
        return pkg.scope.lookup(obj_name)
    for imported in pkg.imports:
        if _trim_vendor(imported.path) == obj_pkg:
            return imported.scope.lookup(obj_name)
    return None


def is_obj(types_info: TypesInfo, expr, expected: Object) -> bool:
    """Tell whether expr is an identifier denoting the expected object."""
    if not isinstance(expr, Ident):
        return False
    obj = types_info.object_of(expr)
    return obj is not None and obj.id == expected.id


def is_pkg(pkg: Package, name: str, path: str) -> bool:
    """Tell whether the package has the given name and (possibly vendored) path."""
    return pkg.name == name and _trim_vendor(pkg.path) == path