"""Concrete syntax tree for MiniC and a visitor that walks it.

Each node mirrors one rule of the grammar.  A ``Visitor`` dispatches on the
node class to a ``visit_<rule>`` method.  When a subclass does not define
that method, the visitor falls back to ``visit_children``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Iterator, List, Optional, Union

from .lexer import Token

__all__ = [
    "CompileUnit",
    "FuncDef",
    "Block",
    "VarDecl",
    "VarDef",
    "ReturnStatement",
    "AssignStatement",
    "BlockStatement",
    "ExpressionStatement",
    "AddExp",
    "CallExp",
    "ParenExp",
    "DigitExp",
    "LVal",
    "Visitor",
]


class _Node:
    """Base of all syntax tree nodes."""

    _method = "visit_children"

    def children(self) -> Iterator["_Node"]:
        """Yield the child nodes in source order; tokens are not children."""
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if isinstance(value, _Node):
                yield value
            elif isinstance(value, list):
                yield from (item for item in value if isinstance(item, _Node))


@dataclass
class LVal(_Node):
    """A variable reference: ``lVal : T_ID``."""

    _method = "visit_lval"

    name_token: Token

    @property
    def name(self) -> str:
        return self.name_token.text

    @property
    def line(self) -> int:
        return self.name_token.line


@dataclass
class DigitExp(_Node):
    """An unsigned integer literal: ``primaryExp : T_DIGIT``."""

    _method = "visit_digit_exp"

    digit: Token

    @property
    def value(self) -> int:
        return int(self.digit.text)

    @property
    def line(self) -> int:
        return self.digit.line


@dataclass
class ParenExp(_Node):
    """A parenthesised expression: ``primaryExp : '(' expr ')'``."""

    _method = "visit_paren_exp"

    expr: "AddExp"


@dataclass
class CallExp(_Node):
    """A function call: ``unaryExp : T_ID '(' realParamList? ')'``."""

    _method = "visit_call_exp"

    name_token: Token
    args: List["AddExp"] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.name_token.text

    @property
    def line(self) -> int:
        return self.name_token.line


UnaryExp = Union[CallExp, ParenExp, DigitExp, LVal]


@dataclass
class AddExp(_Node):
    """``addExp : unaryExp (addOp unaryExp)*``.

    ``operators`` holds the ``+``/``-`` tokens; there is always exactly one
    fewer operator than operands.
    """

    _method = "visit_add_exp"

    operands: List[UnaryExp]
    operators: List[Token] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.operands:
            raise ValueError("an additive expression needs at least one operand")
        if len(self.operators) != len(self.operands) - 1:
            raise ValueError(
                "an additive expression needs one operator fewer than operands"
            )


@dataclass
class VarDef(_Node):
    """``varDef : T_ID``."""

    _method = "visit_var_def"

    name_token: Token

    @property
    def name(self) -> str:
        return self.name_token.text

    @property
    def line(self) -> int:
        return self.name_token.line


@dataclass
class VarDecl(_Node):
    """``varDecl : basicType varDef (',' varDef)* ';'``."""

    _method = "visit_var_decl"

    basic_type: Token
    var_defs: List[VarDef]


@dataclass
class ReturnStatement(_Node):
    """``statement : 'return' expr ';'``."""

    _method = "visit_return_statement"

    expr: AddExp


@dataclass
class AssignStatement(_Node):
    """``statement : lVal '=' expr ';'``."""

    _method = "visit_assign_statement"

    target: LVal
    expr: AddExp


@dataclass
class ExpressionStatement(_Node):
    """``statement : expr? ';'``; ``expr`` is None for an empty statement."""

    _method = "visit_expression_statement"

    expr: Optional[AddExp] = None


@dataclass
class Block(_Node):
    """``block : '{' blockItemList? '}'``, with its items flattened."""

    _method = "visit_block"

    items: List[Union["Statement", VarDecl]] = field(default_factory=list)


@dataclass
class BlockStatement(_Node):
    """``statement : block``."""

    _method = "visit_block_statement"

    block: Block


Statement = Union[ReturnStatement, AssignStatement, BlockStatement, ExpressionStatement]


@dataclass
class FuncDef(_Node):
    """``funcDef : T_INT T_ID '(' ')' block``."""

    _method = "visit_func_def"

    return_type: Token
    name_token: Token
    block: Block

    @property
    def name(self) -> str:
        return self.name_token.text


@dataclass
class CompileUnit(_Node):
    """``compileUnit : (funcDef | varDecl)* EOF``, items in source order."""

    _method = "visit_compile_unit"

    items: List[Union[FuncDef, VarDecl]] = field(default_factory=list)

    @property
    def func_defs(self) -> List[FuncDef]:
        return [item for item in self.items if isinstance(item, FuncDef)]

    @property
    def var_decls(self) -> List[VarDecl]:
        return [item for item in self.items if isinstance(item, VarDecl)]


class Visitor:
    """Walks a syntax tree, dispatching on node type.

    Subclasses define methods such as ``visit_add_exp(self, node)``; any node
    without a matching method is handled by ``visit_children``.
    """

    def visit(self, node: Optional[_Node]) -> Any:
        """Visit one node and return what its handler returns."""
        if node is None:
            return None
        if not isinstance(node, _Node):
            raise TypeError(f"cannot visit {type(node).__name__!r}")
        handler = getattr(self, node._method, None)
        if handler is None:
            return self.visit_children(node)
        return handler(node)

    def visit_children(self, node: _Node) -> Any:
        """Visit every child in order and return the last child's result."""
        result = None
        for child in node.children():
            result = self.visit(child)
        return result