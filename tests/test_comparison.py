import pytest

from risp.errors import RispTypeError
from risp.evaluation.apply import call_operator, compare
from risp.types import operations
from risp.types.operator import Op
from risp.types.values import Bool, Float, Int, List, Str

TRUE = Bool(True)
FALSE = Bool(False)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2 3)", TRUE),
        ("(< 1 3 2)", FALSE),
        ("(< 3 1 2)", FALSE),
        ("(> 3 2 1)", TRUE),
        ("(> 3 2 2)", FALSE),
        ("(= 2 2 2)", TRUE),
        ("(= 2 2 3)", FALSE),
        ("(< 1 1.5 2)", TRUE),
        ("(> 2.5 2)", TRUE),
        ("(< 2 2.5)", TRUE),
        ("(= 1 1.0)", TRUE),
        ("(= 1.0 1)", TRUE),
        ("(= true 1)", TRUE),
        ("(= 1 true)", TRUE),
        ("(< false true)", TRUE),
        ("(> 1 false)", TRUE),
        ('(= "a" "a")', TRUE),
        ('(= "a" "b")', FALSE),
        ("(= (list 1 2) (list 1 2))", TRUE),
        ("(= (list 1 2) (list 1 2 3))", FALSE),
        ("(= (list 1 (list 2)) (list 1.0 (list 2)))", TRUE),
        ("(= 5)", TRUE),
        ("(<)", TRUE),
    ],
)
def test_relational_chaining(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,message",
    [
        ('(< 1 "a")', "invalid operand types for <: int and str"),
        ('(> "a" "b")', "invalid operand types for >: str and str"),
        ('(= "1" 1)', "invalid operand types for =: str and int"),
        ("(= (list 1) 1)", "invalid operand types for =: list and int"),
        ('(< 2 1 "a")', "invalid operand types for <: int and str"),
        ('(= 1 2 (list))', "invalid operand types for =: int and list"),
    ],
)
def test_comparison_type_errors(run, source, message):
    with pytest.raises(RispTypeError) as excinfo:
        run(source)
    assert excinfo.value.message == message


def test_alternate_comparison_swaps_operands():
    # Int does not own Float comparisons; `1 < 1.5` is answered as `1.5 > 1`
    assert operations.lt(Int(1), Float(1.5)) is NotImplemented
    assert operations.gt(Float(1.5), Int(1)) is True
    assert compare(Op.LESS, Int(1), Float(1.5)) is True
    assert compare(Op.GREATER, Int(1), Float(1.5)) is False


def test_reflected_arithmetic_is_owned_by_one_side():
    assert operations.add(Int(1), Float(0.5)) is NotImplemented
    assert operations.radd(Float(0.5), Int(1)) == Float(1.5)
    assert operations.rsub(Float(0.5), Int(1)) == Float(0.5)
    assert operations.mul(Int(2), Str("x")) is NotImplemented
    assert operations.rmul(Str("x"), Int(2)) == Str("xx")


def test_call_operator_directly():
    assert call_operator(Op.PLUS, [Int(1), Int(2)]) == Int(3)
    assert call_operator(Op.LESS, [Int(1), Int(2)]) == TRUE
    assert call_operator(Op.PLUS, [List([Int(1)])]) == List([Int(1)])


def test_values_equal_handles_unowned_pairings():
    assert operations.values_equal(Int(1), Float(1.0))
    assert not operations.values_equal(Str("1"), Int(1))
