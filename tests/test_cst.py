import pytest

from minicfront.cst import (
    AddExp,
    AssignStatement,
    Block,
    BlockStatement,
    CallExp,
    CompileUnit,
    DigitExp,
    ExpressionStatement,
    FuncDef,
    LVal,
    ParenExp,
    ReturnStatement,
    VarDecl,
    VarDef,
    Visitor,
)
from minicfront.lexer import Token, TokenType


def tok(kind, text, line=1, column=0):
    return Token(kind, text, line, column)


def ident(name, line=1):
    return tok(TokenType.T_ID, name, line)


def digit(text, line=1):
    return tok(TokenType.T_DIGIT, text, line)


def plus():
    return tok(TokenType.T_ADD, "+")


def minus():
    return tok(TokenType.T_SUB, "-")


def single(operand):
    return AddExp([operand])


def sample_unit():
    # int g; int main() { int a, b; a = g + (b - 3); f(a, 1); ; { return a; } }
    global_decl = VarDecl(tok(TokenType.T_INT, "int"), [VarDef(ident("g"))])
    local_decl = VarDecl(
        tok(TokenType.T_INT, "int", 2),
        [VarDef(ident("a", 2)), VarDef(ident("b", 2))],
    )
    inner = AddExp([LVal(ident("b", 3)), DigitExp(digit("3", 3))], [minus()])
    assign = AssignStatement(
        LVal(ident("a", 3)),
        AddExp([LVal(ident("g", 3)), ParenExp(inner)], [plus()]),
    )
    call = ExpressionStatement(
        single(CallExp(ident("f", 4), [single(LVal(ident("a", 4))), single(DigitExp(digit("1", 4)))]))
    )
    empty = ExpressionStatement()
    nested = BlockStatement(Block([ReturnStatement(single(LVal(ident("a", 5))))]))
    body = Block([local_decl, assign, call, empty, nested])
    func = FuncDef(tok(TokenType.T_INT, "int"), ident("main"), body)
    return CompileUnit([global_decl, func])


class NameCollector(Visitor):
    def __init__(self):
        self.names = []

    def visit_lval(self, node):
        self.names.append(node.name)
        return node.name

    def visit_call_exp(self, node):
        self.names.append(node.name + "()")
        return self.visit_children(node)


class Evaluator(Visitor):
    def __init__(self, env):
        self.env = env

    def visit_digit_exp(self, node):
        return node.value

    def visit_lval(self, node):
        return self.env[node.name]

    def visit_paren_exp(self, node):
        return self.visit(node.expr)

    def visit_add_exp(self, node):
        total = self.visit(node.operands[0])
        for op, operand in zip(node.operators, node.operands[1:]):
            value = self.visit(operand)
            total = total + value if op.kind is TokenType.T_ADD else total - value
        return total


def test_compile_unit_filters_keep_source_order():
    unit = sample_unit()
    assert unit.var_decls == [unit.items[0]]
    assert unit.func_defs == [unit.items[1]]
    assert unit.func_defs[0].name == "main"


def test_children_skip_tokens_and_none():
    assert list(ExpressionStatement().children()) == []
    lval = LVal(ident("x"))
    assert list(lval.children()) == []
    decl = VarDecl(tok(TokenType.T_INT, "int"), [VarDef(ident("p")), VarDef(ident("q"))])
    assert [child.name for child in decl.children()] == ["p", "q"]


def test_call_children_are_arguments():
    args = [single(DigitExp(digit("7"))), single(LVal(ident("y")))]
    call = CallExp(ident("h"), args)
    assert list(call.children()) == args
    assert CallExp(ident("h")).args == []


def test_visitor_walks_tree_in_source_order():
    collector = NameCollector()
    collector.visit(sample_unit())
    assert collector.names == ["a", "g", "b", "f()", "a", "a"]


def test_default_visit_children_returns_last_result():
    collector = NameCollector()
    expr = AddExp([LVal(ident("first")), LVal(ident("last"))], [plus()])
    assert collector.visit(expr) == "last"


def test_visit_children_of_leaf_is_none():
    assert Visitor().visit(DigitExp(digit("5"))) is None


def test_evaluator_uses_dispatch():
    expr = AddExp(
        [LVal(ident("x")), ParenExp(AddExp([DigitExp(digit("10")), LVal(ident("y"))], [minus()]))],
        [plus()],
    )
    assert Evaluator({"x": 1, "y": 4}).visit(expr) == 1 + (10 - 4)


def test_digit_value_and_line():
    node = DigitExp(digit("42", line=3))
    assert node.value == 42
    assert node.line == 3


def test_visit_none_and_bad_input():
    assert Visitor().visit(None) is None
    with pytest.raises(TypeError):
        Visitor().visit("not a node")


def test_add_exp_requires_matching_operators():
    with pytest.raises(ValueError):
        AddExp([])
    with pytest.raises(ValueError):
        AddExp([LVal(ident("a")), LVal(ident("b"))])


@pytest.mark.parametrize(
    "node, method",
    [
        (CompileUnit(), "visit_compile_unit"),
        (FuncDef(tok(TokenType.T_INT, "int"), ident("m"), Block()), "visit_func_def"),
        (Block(), "visit_block"),
        (VarDecl(tok(TokenType.T_INT, "int"), [VarDef(ident("v"))]), "visit_var_decl"),
        (VarDef(ident("v")), "visit_var_def"),
        (ReturnStatement(single(DigitExp(digit("0")))), "visit_return_statement"),
        (AssignStatement(LVal(ident("v")), single(DigitExp(digit("0")))), "visit_assign_statement"),
        (BlockStatement(Block()), "visit_block_statement"),
        (ExpressionStatement(), "visit_expression_statement"),
        (single(DigitExp(digit("0"))), "visit_add_exp"),
        (CallExp(ident("f")), "visit_call_exp"),
        (ParenExp(single(DigitExp(digit("0")))), "visit_paren_exp"),
        (DigitExp(digit("0")), "visit_digit_exp"),
        (LVal(ident("v")), "visit_lval"),
    ],
)
def test_each_node_dispatches_to_its_method(node, method):
    class Recorder(Visitor):
        pass

    setattr(Recorder, method, lambda self, n: ("seen", method, n))
    assert Recorder().visit(node) == ("seen", method, node)