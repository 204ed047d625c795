import pytest

from risp.errors import RispNameError, RispTypeError, RispValueError
from risp.types.null import Null
from risp.types.values import Bool, Float, Int, List, Str

# -----------------------------------------------------
# set
# -----------------------------------------------------


def test_set_binds_and_returns_value(run, interp):
    assert run("(set x (+ 1 2))") == Int(3)
    assert interp.get_name("x") == Int(3)


def test_set_rebinds(run):
    run("(set x 1)")
    run("(set x (+ x 1))")
    assert run("x") == Int(2)


@pytest.mark.parametrize(
    "source,message",
    [
        ("(set)", "set expects 2 arguments, found 0"),
        ("(set x)", "set expects 2 arguments, found 1"),
        ("(set x 1 2)", "set expects 2 arguments, found 3"),
        ("(set 5 1)", "set first argument must be a name"),
        ("(set 'x 1)", "set first argument must be a name"),
        ("(set (x) 1)", "set first argument must be a name"),
    ],
)
def test_set_errors(run, source, message):
    with pytest.raises(RispValueError) as excinfo:
        run(source)
    assert message in excinfo.value.message


def test_set_does_not_bind_when_value_fails(run, interp):
    with pytest.raises(RispNameError):
        run("(set x missing)")
    assert "x" not in interp.env


# -----------------------------------------------------
# list / block
# -----------------------------------------------------


def test_list_evaluates_each_argument(run):
    assert run("(list 1 (+ 1 1) \"three\" 4.0)") == List([Int(1), Int(2), Str("three"), Float(4.0)])
    assert run("(list)") == List([])


def test_list_evaluates_in_order(run):
    assert run("(list (set x 1) (set x (+ x 1)) x)") == List([Int(1), Int(2), Int(2)])


def test_block_returns_last_value(run):
    assert run("(block (set a 1) (set b 2) (+ a b))") == Int(3)


def test_empty_block_is_null(run):
    assert run("(block)") is Null


# -----------------------------------------------------
# if
# -----------------------------------------------------


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if true 1 2)", Int(1)),
        ("(if false 1 2)", Int(2)),
        ("(if (< 1 2) \"yes\" \"no\")", Str("yes")),
        ("(if (= 1 2) \"yes\")", Null),
        ("(if true 1)", Int(1)),
    ],
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_only_evaluates_the_taken_branch(run):
    assert run("(if true 1 missing)") == Int(1)
    assert run("(if false missing 2)") == Int(2)


@pytest.mark.parametrize("source", ["(if)", "(if true)", "(if true 1 2 3)"])
def test_if_arity(run, source):
    with pytest.raises(RispValueError, match="if expects 2 or 3 arguments"):
        run(source)


@pytest.mark.parametrize("condition", ["1", "0", '""', "(list)", "'a"])
def test_if_condition_must_be_bool(run, condition):
    with pytest.raises(RispTypeError, match="if condition must be a bool"):
        run(f"(if {condition} 1 2)")


# -----------------------------------------------------
# while
# -----------------------------------------------------


def test_while_counts(run):
    run("(set i 0)")
    run("(set total 0)")
    run("(while (< i 5) (set total (+ total i)) (set i (+ i 1)))")
    assert run("i") == Int(5)
    assert run("total") == Int(10)


def test_while_returns_value_of_last_iteration(run):
    run("(set i 0)")
    assert run("(while (< i 3) (set i (+ i 1)))") == Int(3)


def test_while_that_never_runs_is_null(run):
    assert run("(while false missing)") is Null


def test_while_condition_is_part_of_the_block(run):
    # each passing test runs the condition a second time as part of the body
    run("(set n 0)")
    run("(while (< (set n (+ n 1)) 3))")
    assert run("n") == Int(3)


def test_while_requires_condition(run):
    with pytest.raises(RispValueError, match="while expects at least 1 argument"):
        run("(while)")


def test_while_condition_must_be_bool(run):
    with pytest.raises(RispTypeError, match="while condition must be a bool"):
        run("(while 1 2)")


def test_while_with_only_true_condition_as_block(run):
    # the body result is the last form of the final iteration
    run("(set go true)")
    assert run("(while go (set go false))") == Bool(False)
