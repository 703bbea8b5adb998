"""Expression tree and the reader that builds it from text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .util import LinkedList

_I32_MAX = 2**31 - 1
_DIGITS = "0123456789"
_TERMINATORS = ") \n"
_SEPARATORS = " \n"


@dataclass(frozen=True)
class IntExpr:
    """An integer literal."""

    value: int


@dataclass(frozen=True)
class AtomExpr:
    """An atom: a letter followed by letters and digits."""

    name: str


@dataclass(frozen=True)
class VarExpr:
    """A variable reference written as ``*name*``; the name keeps its asterisks."""

    name: str


@dataclass(frozen=True)
class ListExpr:
    """A parenthesised list of expressions."""

    items: LinkedList = field(default_factory=LinkedList)


Expression = Union[IntExpr, AtomExpr, VarExpr, ListExpr]


class ExpressionConversionError(Exception):
    """Text could not be read as an expression."""


class InvalidTokenError(ExpressionConversionError):
    """The text holds a malformed token or trailing input."""


def parse(text: str | bytes) -> Expression:
    """Read exactly one expression from ``text``."""
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ExpressionConversionError(str(exc)) from exc
    reader = _Reader(text)
    expression = reader.expression()
    if reader.pos != len(text):
        raise InvalidTokenError(f"unexpected input at position {reader.pos}")
    return expression


def _is_word_char(ch: str) -> bool:
    return ch in _DIGITS or ch.isalpha()


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _at_end(self) -> bool:
        return self.pos >= len(self.text)

    def _check_terminator(self) -> None:
        ch = self.text[self.pos]
        if ch not in _TERMINATORS:
            raise InvalidTokenError(f"unexpected character {ch!r} at position {self.pos}")

    def expression(self) -> Expression:
        if self._at_end():
            raise ExpressionConversionError("unexpected end of input")
        ch = self.text[self.pos]
        if ch == "(":
            return self._list()
        if ch in _DIGITS:
            return self._int()
        if ch.isalpha():
            return self._atom()
        if ch == "*":
            return self._var()
        raise InvalidTokenError(f"unexpected character {ch!r} at position {self.pos}")

    def _list(self) -> ListExpr:
        self.pos += 1
        items: list[Expression] = []
        while True:
            while not self._at_end() and self.text[self.pos] in _SEPARATORS:
                self.pos += 1
            if self._at_end():
                raise ExpressionConversionError("unterminated list")
            if self.text[self.pos] == ")":
                self.pos += 1
                return ListExpr(LinkedList.from_iterable(items))
            items.append(self.expression())

    def _int(self) -> IntExpr:
        start = self.pos
        while not self._at_end():
            if self.text[self.pos] not in _DIGITS:
                self._check_terminator()
                break
            self.pos += 1
        value = int(self.text[start:self.pos])
        if value > _I32_MAX:
            raise ExpressionConversionError(f"integer literal {value} out of range")
        return IntExpr(value)

    def _atom(self) -> AtomExpr:
        start = self.pos
        while not self._at_end():
            if not _is_word_char(self.text[self.pos]):
                self._check_terminator()
                break
            self.pos += 1
        return AtomExpr(self.text[start:self.pos])

    def _var(self) -> VarExpr:
        start = self.pos
        self.pos += 1
        if self._at_end() or not self.text[self.pos].isalpha():
            raise InvalidTokenError(f"malformed variable at position {start}")
        asterisks = 1
        while not self._at_end():
            ch = self.text[self.pos]
            if ch == "*":
                asterisks += 1
            elif not _is_word_char(ch):
                self._check_terminator()
                break
            self.pos += 1
        name = self.text[start:self.pos]
        if asterisks != 2 or not name.endswith("*"):
            raise InvalidTokenError(f"malformed variable {name!r}")
        return VarExpr(name)