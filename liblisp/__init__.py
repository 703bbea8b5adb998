"""A tiny Lisp reader and evaluator: parse text into expressions and evaluate them."""

__version__ = "0.1.0"
__all__ = ["eval", "expression", "types", "util"]