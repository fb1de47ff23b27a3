"""A small syntax tree of the analysed code, with source formatting and import lookup."""

from __future__ import annotations

import ast as _pyast
from dataclasses import dataclass, field
from enum import Enum


class Token(str, Enum):
    """Operators and literal kinds of the analysed language."""

    ILLEGAL = "ILLEGAL"
    INT = "INT"
    FLOAT = "FLOAT"
    IMAG = "IMAG"
    CHAR = "CHAR"
    STRING = "STRING"

    ADD = "+"
    SUB = "-"
    MUL = "*"
    QUO = "/"
    REM = "%"
    AND = "&"
    OR = "|"
    XOR = "^"
    LAND = "&&"
    LOR = "||"
    EQL = "=="
    NEQ = "!="
    LSS = "<"
    GTR = ">"
    LEQ = "<="
    GEQ = ">="
    NOT = "!"
    ARROW = "<-"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False, kw_only=True)
class Node:
    """Base of all syntax nodes; pos and end delimit the node in the source."""

    pos: int = 0
    end: int = 0


@dataclass(eq=False)
class Ident(Node):
    name: str


@dataclass(eq=False)
class BasicLit(Node):
    kind: Token
    value: str


@dataclass(eq=False)
class BinaryExpr(Node):
    x: Node
    op: Token
    y: Node


@dataclass(eq=False)
class UnaryExpr(Node):
    op: Token
    x: Node


@dataclass(eq=False)
class ParenExpr(Node):
    x: Node


@dataclass(eq=False)
class StarExpr(Node):
    x: Node


@dataclass(eq=False)
class CallExpr(Node):
    fun: Node
    args: list = field(default_factory=list)


@dataclass(eq=False)
class SelectorExpr(Node):
    x: Node
    sel: Ident


@dataclass(eq=False)
class CompositeLit(Node):
    type: Node | None = None
    elts: list = field(default_factory=list)


@dataclass(eq=False)
class ExprStmt(Node):
    x: Node


@dataclass(eq=False)
class BlockStmt(Node):
    list: list = field(default_factory=list)


@dataclass(eq=False)
class Field(Node):
    names: list
    type: Node


@dataclass(eq=False)
class FuncDecl(Node):
    name: Ident
    recv: list | None = None
    body: BlockStmt | None = None


@dataclass(eq=False)
class ImportSpec(Node):
    path: BasicLit | None = None
    name: Ident | None = None


@dataclass(eq=False)
class File(Node):
    name: str
    imports: list = field(default_factory=list)
    decls: list = field(default_factory=list)


def _format(node: Node) -> str:
    if isinstance(node, Ident):
        return node.name
    if isinstance(node, BasicLit):
        return node.value
    if isinstance(node, BinaryExpr):
        return f"{_format(node.x)} {node.op.value} {_format(node.y)}"
    if isinstance(node, UnaryExpr):
        return f"{node.op.value}{_format(node.x)}"
    if isinstance(node, ParenExpr):
        return f"({_format(node.x)})"
    if isinstance(node, StarExpr):
        return f"*{_format(node.x)}"
    if isinstance(node, CallExpr):
        return f"{_format(node.fun)}({', '.join(_format(a) for a in node.args)})"
    if isinstance(node, SelectorExpr):
        return f"{_format(node.x)}.{_format(node.sel)}"
    if isinstance(node, CompositeLit):
        prefix = _format(node.type) if node.type is not None else ""
        return f"{prefix}{{{', '.join(_format(e) for e in node.elts)}}}"
    if isinstance(node, ExprStmt):
        return _format(node.x)
    if isinstance(node, BlockStmt):
        body = "".join(f"\t{_format(s)}\n" for s in node.list)
        return "{\n" + body + "}"
    if isinstance(node, Field):
        names = ", ".join(_format(n) for n in node.names)
        return f"{names} {_format(node.type)}" if names else _format(node.type)
    if isinstance(node, FuncDecl):
        recv = ""
        if node.recv is not None:
            recv = "(" + ", ".join(_format(f) for f in node.recv) + ") "
        body = " " + _format(node.body) if node.body is not None else ""
        return f"func {recv}{_format(node.name)}(){body}"
    if isinstance(node, ImportSpec):
        if node.path is None:
            raise TypeError("import without path")
        return f"{_format(node.name)} {node.path.value}" if node.name else node.path.value
    if isinstance(node, File):
        parts = [f"package {node.name}"]
        parts += [f"import {_format(i)}" for i in node.imports]
        parts += [_format(d) for d in node.decls]
        return "\n\n".join(parts)
    raise TypeError(f"cannot format {node!r}")


def node_string(node) -> str:
    """Source text of the node, or an empty string if the node is invalid."""
    data = node_bytes(node)
    return data.decode() if data is not None else ""


def node_bytes(node) -> bytes | None:
    """Source text of the node as bytes, or None if the node is invalid."""
    try:
        return _format(node).encode()
    except TypeError:
        return None


def _unquote(value: str) -> str | None:
    if len(value) >= 2 and value[0] == value[-1] == "`":
        return value[1:-1]
    if len(value) >= 2 and value[0] == value[-1] == '"':
        try:
            result = _pyast.literal_eval(value)
        except (ValueError, SyntaxError):
            return None
        return result if isinstance(result, str) else None
    return None


def imports(file: File, *pkgs: str) -> bool:
    """Tell whether the file imports at least one of the packages."""
    for spec in file.imports:
        if spec.path is None:
            continue
        path = _unquote(spec.path.value)
        if path is not None and path in pkgs:
            return True
    return False