# minicfront

`minicfront` holds building blocks for the front end of a compiler for MiniC,
a small C-like language. It has four modules:

- a tokenizer for MiniC source text;
- classes for the concrete syntax tree, with a visitor to walk them;
- a recursive-descent parser for MiniC expressions;
- abstract syntax tree nodes, with helper functions that build them.

The package uses only the Python standard library. It needs Python 3.10 or
newer.

## The language

A MiniC compile unit holds global variable declarations (`int a, b;`) and
function definitions (`int main() { ... }`). A block may hold declarations,
assignments, `return` statements, nested blocks and expression statements,
including the empty statement `;`.

Expressions are made of the following, joined by `+` and `-`:

- decimal integer literals (`0`, or digits that do not start with `0`);
- variable names;
- function calls such as `f(a, 2)`;
- parenthesised sub-expressions.

Whitespace is skipped. It may be spaces, tabs, carriage returns or newlines.

## Tokenizing — `minicfront.lexer`

```python
from minicfront.lexer import TokenType, tokenize

tokens = tokenize("int main() { return 1 + x; }")
print([t.kind.name for t in tokens])
# ['T_INT', 'T_ID', 'T_L_PAREN', 'T_R_PAREN', 'T_L_BRACE', 'T_RETURN',
#  'T_DIGIT', 'T_ADD', 'T_ID', 'T_SEMICOLON', 'T_R_BRACE', 'EOF']
```

`tokenize(text)` returns a list of `Token` values. Each token has `kind`,
`text`, `line` and `column` fields. Lines start at 1 and columns start at 0.
Whitespace produces no tokens, and the list always ends with one
`TokenType.EOF` token.

The keywords `return`, `int` and `void` get their own kinds. Other names become
`T_ID`. For kinds with a fixed spelling, `TokenType.literal` gives that
spelling, such as `"+"` or `"return"`. For other kinds it gives `None`.

A character that cannot start any token raises `LexError`, a subclass of
`ValueError`. The error has `char`, `line` and `column` attributes. Its message
reads like `line 1:4 token recognition error at: '*'`.

## Parsing expressions — `minicfront.expressions`

```python
from minicfront.expressions import parse_expression

expr = parse_expression("f(a, 1) - (b + 2)")
print(len(expr.operands), [op.text for op in expr.operators])   # 2 ['-']
```

`parse_expression(text)` parses text that holds exactly one expression and
returns a `minicfront.cst.AddExp`. Anything left over after the expression is
an error.

For finer control, use the pieces it is built from:

- **`TokenStream(tokens)`** is a cursor over a token list. It appends an EOF
  token if the list does not end with one. Its members are:
  - `peek(offset=0)`: look ahead; looking past the end returns EOF;
  - `advance()`: consume the current token; it never moves past EOF;
  - `expect(kind)`: consume a token of the given kind, or raise;
  - `at(*kinds)`: test the current token's kind;
  - `position`: the current index.
- **`ExpressionParser(tokens)`** takes a `TokenStream` or a plain token
  sequence. It has one method per grammar rule: `parse_expr`,
  `parse_add_exp`, `parse_unary_exp`, `parse_primary_exp`,
  `parse_real_params` and `parse_lval`.

A token sequence that does not match the grammar raises `ParseError`, a
subclass of `ValueError`. The error carries the offending `token`, with its
`line` and `column`. Its message looks like one of these:

- `line 1:3 mismatched input ';' expecting ')'`
- `line 1:0 no viable alternative at input '+'`

## Concrete syntax tree — `minicfront.cst`

The classes are dataclasses, one per grammar rule:

- `CompileUnit(items)`, with `func_defs` and `var_decls` views of its items;
- `FuncDef(return_type, name_token, block)`;
- `Block(items)`;
- `VarDecl(basic_type, var_defs)` and `VarDef(name_token)`;
- `ReturnStatement(expr)`, `AssignStatement(target, expr)`,
  `BlockStatement(block)` and `ExpressionStatement(expr=None)`;
- `AddExp(operands, operators)`;
- `CallExp(name_token, args)`, `ParenExp(expr)`, `DigitExp(digit)` and
  `LVal(name_token)`.

`AddExp` checks its shape when created. It needs at least one operand, and
exactly one fewer operator than operands; otherwise it raises `ValueError`.

Subclass `Visitor` to walk a tree. `visit(node)` calls the subclass method
named after the node:

`visit_compile_unit`, `visit_func_def`, `visit_block`, `visit_var_decl`,
`visit_var_def`, `visit_return_statement`, `visit_assign_statement`,
`visit_block_statement`, `visit_expression_statement`, `visit_add_exp`,
`visit_call_exp`, `visit_paren_exp`, `visit_digit_exp`, `visit_lval`.

If the subclass has no such method, `visit` falls back to `visit_children`.
That method visits the child nodes in order and returns the last result.
Visiting `None` returns `None`. Visiting anything that is not a node raises
`TypeError`.

```python
from minicfront.cst import Visitor
from minicfront.expressions import parse_expression

class Names(Visitor):
    def __init__(self):
        self.found = []

    def visit_lval(self, node):
        self.found.append(node.name)

    def visit_call_exp(self, node):
        self.found.append(node.name + "()")
        self.visit_children(node)

names = Names()
names.visit(parse_expression("f(a, 1) - (b + 2)"))
print(names.found)   # ['f()', 'a', 'b']
```

## Abstract syntax tree — `minicfront.syntax_tree`

`AstNode` has these fields:

- `op`, an `AstOperator`;
- `children`;
- `line`, which is -1 when unknown;
- `name`, `value` and `basic_type`, set on the leaves that need them.

`add(child)` appends a child and ignores `None`. `walk()` yields the node and
all its descendants in pre-order.

These helpers build nodes:

- `leaf_id(name, line)`, `leaf_int(value, line)` and
  `leaf_type(basic_type, line)` make leaves.
- `contain_node(op, *children)` makes an inner node. It skips `None`
  children.
- `func_def(return_type, return_line, name, name_line, body, params)` makes a
  function definition. Its children are the type leaf, the name leaf, the
  formal parameters and the body. A missing parameter list becomes an empty
  `FUNC_FORMAL_PARAMS` node.
- `func_call(name_node, params)` makes a call. A missing argument list becomes
  an empty `FUNC_REAL_PARAMS` node.

```python
from minicfront.syntax_tree import (
    AstOperator, BasicType, contain_node, func_def, leaf_int,
)

body = contain_node(
    AstOperator.BLOCK,
    contain_node(AstOperator.RETURN,
                 contain_node(AstOperator.ADD, leaf_int(1, 1), leaf_int(2, 1))),
)
root = contain_node(AstOperator.COMPILE_UNIT,
                    func_def(BasicType.INT, 1, "main", 1, body))
print([node.op.name for node in root.walk()])
```

## What the package does not do

- It parses expressions only. There is no function that reads a whole compile
  unit, a function definition, a declaration or a statement from text. The
  `minicfront.cst` classes for those can be built by hand.
- It does not turn a concrete syntax tree into an abstract syntax tree.
  `AstNode` trees are built with the helpers above.
- It does not read source files and has no command-line program.