import pytest

from risp.errors import ErrorKind, RispNameError, RispTypeError, RispValueError
from risp.evaluation.evaluator import evaluate, quoted
from risp.interpreter import Interpreter
from risp.reader.nodes import ExprNode, IntNode, NameNode, OperatorNode
from risp.reader.parser import parse
from risp.types.null import Null
from risp.types.operator import Op
from risp.types.symbol import Symbol
from risp.types.values import Bool, Float, Int, List, NativeFunction, Operator, SpecialForm, Str

# -----------------------------------------------------
# Literals and names
# -----------------------------------------------------


def test_self_evaluating_literals(run):
    assert run("1") == Int(1)
    assert run("3.5") == Float(3.5)
    assert run('"hello"') == Str("hello")
    assert run("true") == Bool(True)
    assert run("false") == Bool(False)


def test_name_lookup(interp):
    interp.set_name("x", Int(42))
    assert interp.eval(NameNode("x")) == Int(42)
    assert interp.get_name("x") == Int(42)


def test_unbound_name_is_a_name_error(run):
    with pytest.raises(RispNameError) as excinfo:
        run("undefined_thing")
    assert excinfo.value.kind is ErrorKind.NAME_ERROR
    assert str(excinfo.value) == "NameError: undefined_thing is not defined"


def test_unbound_head_is_a_name_error(run):
    with pytest.raises(RispNameError):
        run("(nope 1 2)")


def test_builtins_and_special_forms_are_values(run):
    assert isinstance(run("print"), NativeFunction)
    assert run("print").repr() == "<function print>"
    form = run("if")
    assert isinstance(form, SpecialForm)
    assert form.repr() == "<special form if>"


def test_operator_as_value(run):
    assert run("+") == Operator(Op.PLUS)
    run("(set add +)")
    assert run("(add 1 2)") == Int(3)


def test_special_form_can_be_rebound(run):
    run("(set when if)")
    assert run("(when true 1 2)") == Int(1)


# -----------------------------------------------------
# Application errors
# -----------------------------------------------------


@pytest.mark.parametrize(
    "source,message",
    [
        ("(1 2)", "int is not callable"),
        ('("a")', "str is not callable"),
        ("(true)", "bool is not callable"),
        ("((list 1))", "list is not callable"),
        ("('a)", "symbol is not callable"),
    ],
)
def test_non_callable_head(run, source, message):
    with pytest.raises(RispTypeError) as excinfo:
        run(source)
    assert excinfo.value.message == message


def test_empty_expression_is_a_value_error(run):
    with pytest.raises(RispValueError, match="expression is empty"):
        run("()")


def test_arguments_are_evaluated_before_the_type_check(run):
    # the unbound argument is reported, not the non-callable head
    with pytest.raises(RispNameError):
        run("(1 missing)")


# -----------------------------------------------------
# Quoting
# -----------------------------------------------------


def test_quoted_name_is_a_symbol(run):
    assert run("'a") == Symbol("a")
    assert run("'a").repr() == "'a"


def test_quoted_list_is_not_evaluated(run):
    assert run("'(1 (a \"s\") 2.5)") == List(
        [Int(1), List([Symbol("a"), Str("s")]), Float(2.5)]
    )
    # would raise NameError / TypeError if evaluated
    assert run("'(undefined (1 2))") == List([Symbol("undefined"), List([Int(1), Int(2)])])


def test_quoted_operator_stays_an_operator(run):
    assert run("'(+ 1)") == List([Operator(Op.PLUS), Int(1)])


def test_quoted_helper_on_raw_nodes():
    node = ExprNode((OperatorNode(Op.STAR), NameNode("x"), IntNode(2)))
    assert quoted(node) == List([Operator(Op.STAR), Symbol("x"), Int(2)])


# -----------------------------------------------------
# Interpreter facade
# -----------------------------------------------------


def test_bindings_persist_across_evaluations(interp):
    interp.eval_source("(set x 10)")
    assert interp.eval_source("(+ x 1)") == Int(11)


def test_interpreters_are_isolated():
    first, second = Interpreter(), Interpreter()
    first.eval_source("(set x 1)")
    with pytest.raises(RispNameError):
        second.eval_source("x")


def test_eval_source_result_shapes(interp):
    assert interp.eval_source("") is Null
    assert interp.eval_source("(+ 1 1)") == Int(2)
    assert interp.eval_source("1 2.0 \"three\"") == List([Int(1), Float(2.0), Str("three")])


def test_eval_single_form(interp):
    (node,) = parse("(* 6 7)")
    assert interp.eval(node) == Int(42)
    assert evaluate(node, interp) == Int(42)


def test_error_does_not_undo_earlier_bindings(interp):
    with pytest.raises(RispTypeError):
        interp.eval_source('(set x 5) (+ x "a")')
    assert interp.get_name("x") == Int(5)


def test_runtime_error_strings():
    assert str(RispTypeError("bad")) == "TypeError: bad"
    assert str(RispValueError("bad")) == "ValueError: bad"


def test_deep_nesting_is_a_value_error(interp):
    node = IntNode(1)
    for _ in range(5000):
        node = ExprNode((OperatorNode(Op.PLUS), node))
    with pytest.raises(RispValueError, match="nested too deeply"):
        interp.eval(node)
