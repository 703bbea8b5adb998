import pytest

from liblisp.expression import (
    AtomExpr,
    ExpressionConversionError,
    IntExpr,
    InvalidTokenError,
    ListExpr,
    VarExpr,
    parse,
)
from liblisp.util import LinkedList


def test_int():
    assert parse("12345") == IntExpr(12345)


def test_atoms():
    assert parse("atom") == AtomExpr("atom")
    assert parse("atom123") == AtomExpr("atom123")


def test_digit_then_letters_is_invalid():
    with pytest.raises(InvalidTokenError):
        parse("123atom")


def test_empty_list():
    assert parse("( )") == ListExpr(LinkedList())


def test_nested_empty_list():
    assert parse("( ( ) )") == ListExpr(LinkedList.from_iterable([ListExpr(LinkedList())]))


def test_atom_and_empty_list():
    expected = ListExpr(LinkedList.from_iterable([AtomExpr("atom"), ListExpr(LinkedList())]))
    assert parse("(atom ( ) )") == expected


def test_var():
    assert parse("*abcdefg*") == VarExpr("*abcdefg*")


def test_two_atoms_at_top_level_is_invalid():
    with pytest.raises(InvalidTokenError):
        parse("abc def")


def test_trailing_list_is_invalid():
    with pytest.raises(InvalidTokenError):
        parse("(abc def) ()")


def test_accepts_bytes():
    assert parse(b"(add 1 2)") == ListExpr(
        LinkedList.from_iterable([AtomExpr("add"), IntExpr(1), IntExpr(2)])
    )


def test_newlines_separate_elements():
    assert parse("(a\n1\n*v*)") == ListExpr(
        LinkedList.from_iterable([AtomExpr("a"), IntExpr(1), VarExpr("*v*")])
    )


def test_nested_calls():
    inner = ListExpr(LinkedList.from_iterable([AtomExpr("sub"), IntExpr(1), IntExpr(2)]))
    assert parse("(add (sub 1 2) 3)") == ListExpr(
        LinkedList.from_iterable([AtomExpr("add"), inner, IntExpr(3)])
    )


@pytest.mark.parametrize(
    "text",
    ["*abc", "*1*", "**", "*", "*ab*c*", "a*b", "+", " a", "1(2)", "(1(2))"],
)
def test_invalid_tokens(text):
    with pytest.raises(InvalidTokenError):
        parse(text)


@pytest.mark.parametrize("text", ["", "(a", "(a (b)"])
def test_incomplete_input(text):
    with pytest.raises(ExpressionConversionError):
        parse(text)


def test_integer_out_of_range():
    assert parse("2147483647") == IntExpr(2147483647)
    with pytest.raises(ExpressionConversionError):
        parse("2147483648")


def test_expression_equality():
    assert AtomExpr("abc") == AtomExpr("abc")
    assert AtomExpr("abc") != AtomExpr("ab")