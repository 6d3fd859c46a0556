"""Literal patterns shared by atoms, formal parameters and the reader."""

import re

# A letter (any alphabet, so `λ` qualifies) followed by letters or digits.
SYMBOL_RE = re.compile(r"[^\W\d_][^\W_]*")

# Optionally signed decimal integer.
INTEGER_RE = re.compile(r"[+-]?[0-9]+")

RESERVED_LAMBDA_NAMES = ("lambda", "λ")


def is_symbol_literal(text: str) -> bool:
    return SYMBOL_RE.fullmatch(text) is not None


def is_integer_literal(text: str) -> bool:
    return INTEGER_RE.fullmatch(text) is not None


def is_lambda_name(text: str) -> bool:
    return text.lower() in RESERVED_LAMBDA_NAMES
