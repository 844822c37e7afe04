"""Abstract syntax tree nodes and the helpers that build them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

__all__ = [
    "AstOperator",
    "BasicType",
    "AstNode",
    "leaf_id",
    "leaf_int",
    "leaf_type",
    "contain_node",
    "func_def",
    "func_call",
]


class AstOperator(enum.Enum):
    """The kind of an abstract syntax tree node."""

    LEAF_LITERAL_UINT = enum.auto()
    LEAF_VAR_ID = enum.auto()
    LEAF_TYPE = enum.auto()
    COMPILE_UNIT = enum.auto()
    FUNC_DEF = enum.auto()
    FUNC_FORMAL_PARAMS = enum.auto()
    FUNC_CALL = enum.auto()
    FUNC_REAL_PARAMS = enum.auto()
    BLOCK = enum.auto()
    RETURN = enum.auto()
    ASSIGN = enum.auto()
    ADD = enum.auto()
    SUB = enum.auto()
    DECL_STMT = enum.auto()
    VAR_DECL = enum.auto()


class BasicType(enum.Enum):
    """Basic value types of the language."""

    VOID = "void"
    INT = "int"


@dataclass
class AstNode:
    """A node of the abstract syntax tree.

    Leaves carry ``name`` (identifiers), ``value`` (integer literals) or
    ``basic_type`` (type names); ``line`` is the source line, -1 if unknown.
    """

    op: AstOperator
    children: List["AstNode"] = field(default_factory=list)
    line: int = -1
    name: Optional[str] = None
    value: Optional[int] = None
    basic_type: Optional[BasicType] = None

    def add(self, child: Optional["AstNode"]) -> Optional["AstNode"]:
        """Append a child; ``None`` (an empty statement) is ignored."""
        if child is not None:
            self.children.append(child)
        return child

    def walk(self) -> Iterator["AstNode"]:
        """Yield this node and all its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def leaf_id(name: str, line: int = -1) -> AstNode:
    """Create an identifier leaf."""
    return AstNode(AstOperator.LEAF_VAR_ID, line=line, name=name)


def leaf_int(value: int, line: int = -1) -> AstNode:
    """Create an unsigned integer literal leaf."""
    return AstNode(AstOperator.LEAF_LITERAL_UINT, line=line, value=value)


def leaf_type(basic_type: BasicType, line: int = -1) -> AstNode:
    """Create a type leaf."""
    return AstNode(AstOperator.LEAF_TYPE, line=line, basic_type=basic_type)


def contain_node(op: AstOperator, *args: Optional[AstNode]) -> AstNode:
    """Create an inner node whose children are the non-None arguments."""
    node = AstNode(op)
    for child in args:
        node.add(child)
    return node


def func_def(
    return_type: BasicType,
    return_line: int,
    name: str,
    name_line: int,
    body: AstNode,
    params: Optional[AstNode] = None,
) -> AstNode:
    """Create a function definition node.

    Its children are the return type, the name, the formal parameters
    (an empty parameter list when ``params`` is None) and the body.
    """
    if params is None:
        params = AstNode(AstOperator.FUNC_FORMAL_PARAMS)
    return AstNode(
        AstOperator.FUNC_DEF,
        children=[
            leaf_type(return_type, return_line),
            leaf_id(name, name_line),
            params,
            body,
        ],
        line=name_line,
        name=name,
    )


def func_call(name_node: AstNode, params: Optional[AstNode] = None) -> AstNode:
    """Create a call node; a missing argument list becomes an empty one."""
    if params is None:
        params = AstNode(AstOperator.FUNC_REAL_PARAMS)
    return AstNode(
        AstOperator.FUNC_CALL,
        children=[name_node, params],
        line=name_node.line,
        name=name_node.name,
    )