import pytest

from patternlab.decorator import (
    BracketsDecorator,
    FormulaDecorator,
    HeadDecorator,
    JoinDecorator,
    Operand,
    Operator,
    OperatorType,
    SpacesDecorator,
    TailDecorator,
    run,
)


@pytest.mark.parametrize(
    "operator_type, symbol",
    [
        (OperatorType.ADD, "+"),
        (OperatorType.SUB, "-"),
        (OperatorType.MUL, "*"),
        (OperatorType.DIV, "/"),
        (OperatorType.EQUALS, "="),
    ],
)
def test_operator_symbols(operator_type, symbol):
    assert Operator(operator_type).render() == symbol


def test_operand_renders_value():
    assert Operand(5).render() == "5"
    assert Operand(-3).render() == "-3"


def test_plain_decorator_is_transparent():
    assert FormulaDecorator(Operand(7)).render() == Operand(7).render()


def test_spaces_and_brackets():
    assert SpacesDecorator(Operator(OperatorType.ADD)).render() == " + "
    assert BracketsDecorator(Operand(-3)).render() == "(-3)"


def test_decorators_nest():
    inner = BracketsDecorator(Operand(1))
    assert SpacesDecorator(inner).render() == " " + inner.render() + " "


def test_head_and_tail_joins():
    five = Operand(5)
    plus = Operator(OperatorType.ADD)
    assert HeadDecorator(five, plus).render() == plus.render() + five.render()
    assert TailDecorator(five, plus).render() == five.render() + plus.render()


def test_join_decorator_is_abstract():
    with pytest.raises(TypeError):
        JoinDecorator(Operand(1), Operand(2))


def test_draw_prints_without_newline(capsys):
    BracketsDecorator(Operand(4)).draw()
    assert capsys.readouterr().out == "(4)"


def test_run_output(capsys):
    run()
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["5+6=11", "5 + 6 = 11", "5 + 3 + (-3) = 5"]