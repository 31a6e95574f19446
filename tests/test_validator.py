import pytest

from exprcalc.validator import is_allowed_char, is_valid


def test_empty_and_blank_are_invalid():
    assert not is_valid('')
    assert not is_valid('   ')


def test_simple_expression_is_valid():
    assert is_valid('1+2')
    assert is_valid('(1.5 + 2) * 3')


def test_minus_is_exempt_from_adjacency():
    assert is_valid('5*-2')
    assert is_valid('5--2')


@pytest.mark.parametrize('expr', ['5**2', '5+*2', '5//2', '5%%', '1+%2'])
def test_repeated_operators_are_invalid(expr):
    assert not is_valid(expr)


def test_foreign_characters_are_invalid():
    assert not is_valid('2^3')
    assert not is_valid('abs(1)')
    assert not is_valid('1e5')


def test_structure_is_not_checked():
    # 파서에서 걸러질 수식
    assert is_valid('3+')
    assert is_valid('(3')
    assert is_valid('()')


def test_is_allowed_char():
    assert is_allowed_char('7')
    assert is_allowed_char('%')
    assert is_allowed_char(' ')
    assert not is_allowed_char('x')
    assert not is_allowed_char('12')
    assert not is_allowed_char('')
