"""Recursive-descent parsing of MiniC expressions into syntax tree nodes."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Union

from .cst import AddExp, CallExp, DigitExp, LVal, ParenExp
from .lexer import Token, TokenType, tokenize

__all__ = ["ParseError", "TokenStream", "ExpressionParser", "parse_expression"]

# Token kinds that can start an expression.
_EXPR_START = frozenset({TokenType.T_L_PAREN, TokenType.T_ID, TokenType.T_DIGIT})
_ADD_OPS = frozenset({TokenType.T_ADD, TokenType.T_SUB})


def _describe(kind: TokenType) -> str:
    literal = kind.literal
    if literal is not None:
        return f"'{literal}'"
    if kind is TokenType.EOF:
        return "<EOF>"
    return kind.name


class ParseError(ValueError):
    """Raised when the token sequence does not match the grammar."""

    def __init__(self, message: str, token: Token) -> None:
        super().__init__(f"line {token.line}:{token.column} {message}")
        self.token = token
        self.line = token.line
        self.column = token.column

    @classmethod
    def mismatched(cls, token: Token, expected: Iterable[TokenType]) -> "ParseError":
        names = sorted(_describe(kind) for kind in expected)
        wanted = names[0] if len(names) == 1 else "{" + ", ".join(names) + "}"
        return cls(f"mismatched input '{token.text}' expecting {wanted}", token)

    @classmethod
    def no_viable_alternative(cls, token: Token) -> "ParseError":
        return cls(f"no viable alternative at input '{token.text}'", token)


class TokenStream:
    """A cursor over a list of tokens that always ends with an EOF token."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        items: List[Token] = list(tokens)
        if not items or items[-1].kind is not TokenType.EOF:
            last = items[-1] if items else None
            line = last.line if last else 1
            column = last.column + len(last.text) if last else 0
            items.append(Token(TokenType.EOF, "<EOF>", line, column))
        self._tokens = items
        self._pos = 0

    @property
    def position(self) -> int:
        """Index of the current token."""
        return self._pos

    def peek(self, offset: int = 0) -> Token:
        """Return the token ``offset`` places ahead without consuming it.

        Looking past the end yields the final EOF token.
        """
        if offset < 0:
            raise ValueError("offset must not be negative")
        index = min(self._pos + offset, len(self._tokens) - 1)
        return self._tokens[index]

    def advance(self) -> Token:
        """Consume and return the current token; EOF is never passed."""
        token = self._tokens[self._pos]
        if token.kind is not TokenType.EOF:
            self._pos += 1
        return token

    def expect(self, kind: TokenType) -> Token:
        """Consume the current token if it has the given kind, else raise."""
        token = self.peek()
        if token.kind is not kind:
            raise ParseError.mismatched(token, [kind])
        return self.advance()

    def at(self, *kinds: TokenType) -> bool:
        """Tell whether the current token has one of the given kinds."""
        return self.peek().kind in kinds


class ExpressionParser:
    """Parses the expression rules of the grammar.

    expr          : addExp
    addExp        : unaryExp (addOp unaryExp)*
    unaryExp      : primaryExp | T_ID '(' realParamList? ')'
    primaryExp    : '(' expr ')' | T_DIGIT | lVal
    realParamList : expr (',' expr)*
    lVal          : T_ID
    """

    def __init__(self, tokens: Union[TokenStream, Sequence[Token]]) -> None:
        self.tokens = tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)

    def parse_expr(self) -> AddExp:
        """Parse ``expr``, which is an additive expression."""
        return self.parse_add_exp()

    def parse_add_exp(self) -> AddExp:
        """Parse a left-to-right chain of ``+`` and ``-``."""
        operands = [self.parse_unary_exp()]
        operators: List[Token] = []
        while self.tokens.peek().kind in _ADD_OPS:
            operators.append(self.tokens.advance())
            operands.append(self.parse_unary_exp())
        return AddExp(operands, operators)

    def parse_unary_exp(self) -> Union[CallExp, ParenExp, DigitExp, LVal]:
        """Parse a function call or a primary expression."""
        if (
            self.tokens.peek().kind is TokenType.T_ID
            and self.tokens.peek(1).kind is TokenType.T_L_PAREN
        ):
            name = self.tokens.expect(TokenType.T_ID)
            self.tokens.expect(TokenType.T_L_PAREN)
            args: List[AddExp] = []
            if self.tokens.peek().kind in _EXPR_START:
                args = self.parse_real_params()
            self.tokens.expect(TokenType.T_R_PAREN)
            return CallExp(name, args)
        return self.parse_primary_exp()

    def parse_primary_exp(self) -> Union[ParenExp, DigitExp, LVal]:
        """Parse a parenthesised expression, a literal or a variable."""
        token = self.tokens.peek()
        if token.kind is TokenType.T_L_PAREN:
            self.tokens.advance()
            inner = self.parse_expr()
            self.tokens.expect(TokenType.T_R_PAREN)
            return ParenExp(inner)
        if token.kind is TokenType.T_DIGIT:
            return DigitExp(self.tokens.advance())
        if token.kind is TokenType.T_ID:
            return self.parse_lval()
        raise ParseError.no_viable_alternative(token)

    def parse_real_params(self) -> List[AddExp]:
        """Parse one or more comma-separated argument expressions."""
        params = [self.parse_expr()]
        while self.tokens.peek().kind is TokenType.T_COMMA:
            self.tokens.advance()
            params.append(self.parse_expr())
        return params

    def parse_lval(self) -> LVal:
        """Parse a variable reference."""
        return LVal(self.tokens.expect(TokenType.T_ID))


def parse_expression(text: str) -> AddExp:
    """Parse text that holds exactly one expression."""
    parser = ExpressionParser(tokenize(text))
    result = parser.parse_expr()
    parser.tokens.expect(TokenType.EOF)
    return result


def _optional_token(stream: TokenStream, kind: TokenType) -> Optional[Token]:
    return stream.advance() if stream.peek().kind is kind else None