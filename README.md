# liblisp

A small Lisp reader and evaluator. `liblisp.expression.parse` turns program
text into an expression tree, and `liblisp.eval.evaluate` evaluates that tree
to a value.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The language

The reader accepts exactly one expression, built from four kinds:

- integers: non-negative decimal literals such as `0` or `42`, up to
  2147483647 (there is no minus sign; use `sub` to get negative values)
- atoms: a letter followed by letters and digits, for example `abc` or `x1`
- variables: a name between two asterisks, for example `*count*`; the name
  starts with a letter and the asterisks are kept as part of it
- lists: expressions in parentheses, separated by spaces or newlines

A token must be followed by `)`, a space, a newline or the end of the text.

Integers evaluate to `IntValue`, atoms to `AtomValue`, and variables to the
value last assigned to them. A list is evaluated by treating its first
element, which must be an atom, as the name of a built-in:

| Form | Meaning |
|------|---------|
| `(add a b)`, `(sub a b)`, `(mul a b)`, `(div a b)` | arithmetic on two integers; `div` truncates toward zero |
| `(gt a b)`, `(lt a b)`, `(eq a b)` | compares two integers, or two atoms by name; gives `1` or `0` |
| `(list x ...)` | builds a `ListValue` from the evaluated arguments |
| `(head l)`, `(tail l)` | first element, and the rest, of a list |
| `(cond c then else)` | evaluates only `then` if `c` is non-zero, otherwise only `else` |
| `(set *v* x)` | assigns the value of `x` to the variable `*v*` and returns it |
| `(progn e ...)` | evaluates each expression in turn and returns the last value |
| `(while c body)` | repeats `body` while `c` is non-zero; returns `Void()` |

Values are the frozen dataclasses `IntValue`, `AtomValue`, `ListValue` and
`Void` in `liblisp.types`. Lists of expressions and of values are held in
`liblisp.util.LinkedList`, an immutable linked list with `cons`, `head`,
`tail`, `reverse`, `len()` and iteration.

## Usage

```python
from liblisp.expression import parse
from liblisp.eval import evaluate
from liblisp.types import IntValue

program = parse(
    "(progn (set *i* 0) (set *a* 0)"
    " (while (lt *i* 10) (progn (set *a* (add *i* *a*)) (set *i* (add *i* 1))))"
    " *a*)"
)
assert evaluate(program) == IntValue(45)
```

`evaluate` starts from an empty `Context`. To carry variables from one
evaluation to the next, pass a shared `Context` to `eval_with_context`; its
`variables` dictionary maps each variable name (with asterisks) to its value:

```python
from liblisp.eval import Context, eval_with_context
from liblisp.expression import parse

context = Context()
eval_with_context(parse("(set *x* 10)"), context)
result = eval_with_context(parse("(mul *x* 3)"), context)  # IntValue(30)
```

## Errors

`parse` raises `ExpressionConversionError` when the text is not a single
well-formed expression. Malformed tokens and trailing input raise its
subclass `InvalidTokenError`; empty input, an unclosed list, an integer
literal out of range, or bytes that are not UTF-8 raise
`ExpressionConversionError` itself.

`evaluate` and `eval_with_context` raise `EvalError`. Its `kind` attribute is
an `EvalErrorKind`: `BAD_ARITY` for a wrong number of arguments,
`TYPE_MISMATCH` for arguments of the wrong type, `NOT_FOUND_FUNCTION_NAME` for
an unknown name, `UNDEFINED_VARIABLE_REFERENCE` for a variable never set,
`DO_HEAD_FOR_NIL` for the head of an empty list,
`EVALUATING_NON_ATOM_HEAD_LIST` for a list whose first element is not an atom,
and `UNEXPECTED` for evaluating the empty list `()`.

Arithmetic whose result leaves the signed 32-bit range raises
`OverflowError`, and `div` by zero raises `ZeroDivisionError`.

## What it does not do

The package is a library only: it has no command-line program or interactive
prompt. Programs cannot define their own functions; only the built-ins listed
above can be called, and any other name raises `EvalError` with kind
`NOT_FOUND_FUNCTION_NAME`.