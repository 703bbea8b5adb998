"""Evaluation of expression trees into values."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass, field
from typing import Callable

from .expression import AtomExpr, Expression, IntExpr, ListExpr, VarExpr
from .types import AtomValue, IntValue, ListValue, Value, Void
from .util import LinkedList

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class EvalErrorKind(enum.Enum):
    """The reasons evaluation can fail."""

    UNEXPECTED = "unexpected"
    TYPE_MISMATCH = "type mismatch"
    BAD_ARITY = "bad arity"
    NOT_IMPLEMENTATION = "not implemented"
    NOT_FOUND_FUNCTION_NAME = "function name not found"
    DO_HEAD_FOR_NIL = "head of an empty list"
    UNDEFINED_VARIABLE_REFERENCE = "undefined variable reference"
    EVALUATING_NON_ATOM_HEAD_LIST = "list head is not an atom"


class EvalError(Exception):
    """Evaluation failed; ``kind`` says why."""

    def __init__(self, kind: EvalErrorKind, detail: str = "") -> None:
        message = kind.value if not detail else f"{kind.value}: {detail}"
        super().__init__(message)
        self.kind = kind


@dataclass
class Context:
    """State carried between evaluations, such as variable bindings."""

    variables: dict[str, Value] = field(default_factory=dict)


def evaluate(exp: Expression) -> Value:
    """Evaluate ``exp`` in a fresh context."""
    return eval_with_context(exp, Context())


def eval_with_context(exp: Expression, context: Context) -> Value:
    """Evaluate ``exp``, reading and updating the bindings in ``context``."""
    if isinstance(exp, IntExpr):
        return IntValue(exp.value)
    if isinstance(exp, AtomExpr):
        return AtomValue(exp.name)
    if isinstance(exp, VarExpr):
        try:
            return context.variables[exp.name]
        except KeyError:
            raise EvalError(EvalErrorKind.UNDEFINED_VARIABLE_REFERENCE, exp.name) from None
    if isinstance(exp, ListExpr):
        return _apply(exp.items, context)
    raise EvalError(EvalErrorKind.UNEXPECTED, repr(exp))


def _apply(items: LinkedList, context: Context) -> Value:
    if not items:
        raise EvalError(EvalErrorKind.UNEXPECTED, "empty list")
    head = items.head()
    if not isinstance(head, AtomExpr):
        raise EvalError(EvalErrorKind.EVALUATING_NON_ATOM_HEAD_LIST)
    args = items.tail()
    special = _SPECIAL_FORMS.get(head.name)
    if special is not None:
        return special(args, context)
    builtin = _BUILTINS.get(head.name)
    if builtin is None:
        raise EvalError(EvalErrorKind.NOT_FOUND_FUNCTION_NAME, head.name)
    values = [eval_with_context(arg, context) for arg in args]
    return builtin(values)


def _require_arity(args, count: int) -> None:
    if len(args) != count:
        raise EvalError(EvalErrorKind.BAD_ARITY, f"expected {count}, got {len(args)}")


# Special forms: their arguments are evaluated (or not) by the form itself.

def _while(args: LinkedList, context: Context) -> Value:
    _require_arity(args, 2)
    condition, body = args
    while True:
        result = eval_with_context(condition, context)
        if not isinstance(result, IntValue):
            raise EvalError(EvalErrorKind.TYPE_MISMATCH, "loop condition must be an integer")
        if result.value == 0:
            return Void()
        eval_with_context(body, context)


def _progn(args: LinkedList, context: Context) -> Value:
    if not args:
        raise EvalError(EvalErrorKind.BAD_ARITY, "progn needs at least one form")
    result: Value = Void()
    for form in args:
        result = eval_with_context(form, context)
    return result


def _set(args: LinkedList, context: Context) -> Value:
    _require_arity(args, 2)
    target, value_expr = args
    value = eval_with_context(value_expr, context)
    if not isinstance(target, VarExpr):
        raise EvalError(EvalErrorKind.TYPE_MISMATCH, "set target must be a variable")
    context.variables[target.name] = value
    return value


def _cond(args: LinkedList, context: Context) -> Value:
    _require_arity(args, 3)
    condition, if_true, if_false = args
    result = eval_with_context(condition, context)
    if not isinstance(result, IntValue):
        raise EvalError(EvalErrorKind.TYPE_MISMATCH, "condition must be an integer")
    return eval_with_context(if_true if result.value != 0 else if_false, context)


_SPECIAL_FORMS: dict[str, Callable[[LinkedList, Context], Value]] = {
    "cond": _cond,
    "set": _set,
    "progn": _progn,
    "while": _while,
}


# Builtins: their arguments are evaluated before the call.

def _list(values: list[Value]) -> Value:
    return ListValue(LinkedList.from_iterable(values))


def _list_argument(values: list[Value]) -> LinkedList:
    _require_arity(values, 1)
    (arg,) = values
    if not isinstance(arg, ListValue):
        raise EvalError(EvalErrorKind.TYPE_MISMATCH, "expected a list")
    return arg.items


def _head(values: list[Value]) -> Value:
    items = _list_argument(values)
    if not items:
        raise EvalError(EvalErrorKind.DO_HEAD_FOR_NIL)
    return items.head()


def _tail(values: list[Value]) -> Value:
    return ListValue(_list_argument(values).tail())


def _int_pair(values: list[Value]) -> tuple[int, int]:
    _require_arity(values, 2)
    a, b = values
    if not (isinstance(a, IntValue) and isinstance(b, IntValue)):
        raise EvalError(EvalErrorKind.TYPE_MISMATCH, "expected two integers")
    return a.value, b.value


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _arithmetic(op: Callable[[int, int], int]) -> Callable[[list[Value]], Value]:
    def apply(values: list[Value]) -> Value:
        a, b = _int_pair(values)
        result = op(a, b)
        if not _I32_MIN <= result <= _I32_MAX:
            raise OverflowError(f"integer result {result} out of range")
        return IntValue(result)

    return apply


def _comparison(op: Callable[[object, object], bool]) -> Callable[[list[Value]], Value]:
    def apply(values: list[Value]) -> Value:
        _require_arity(values, 2)
        a, b = values
        if isinstance(a, IntValue) and isinstance(b, IntValue):
            return IntValue(int(op(a.value, b.value)))
        if isinstance(a, AtomValue) and isinstance(b, AtomValue):
            return IntValue(int(op(a.name, b.name)))
        raise EvalError(EvalErrorKind.TYPE_MISMATCH, "expected two integers or two atoms")

    return apply


_BUILTINS: dict[str, Callable[[list[Value]], Value]] = {
    "add": _arithmetic(operator.add),
    "sub": _arithmetic(operator.sub),
    "mul": _arithmetic(operator.mul),
    "div": _arithmetic(_truncating_div),
    "list": _list,
    "head": _head,
    "tail": _tail,
    "gt": _comparison(operator.gt),
    "lt": _comparison(operator.lt),
    "eq": _comparison(operator.eq),
}