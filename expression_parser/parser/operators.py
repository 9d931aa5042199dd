"""
Operator table for the expression parser.

A single read-only table shared by every parser: it maps each binary
operator character to its precedence level. Equal levels group left to
right; a higher level binds tighter.

Author: xwest
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class Precedence(IntEnum):
    """Operator precedence levels."""
    ADDITIVE = 0        # +, -
    MULTIPLICATIVE = 1  # *


OPERATORS: Mapping[str, Precedence] = MappingProxyType({
    "+": Precedence.ADDITIVE,
    "-": Precedence.ADDITIVE,
    "*": Precedence.MULTIPLICATIVE,
})


def is_operator(char: str) -> bool:
    """Check whether a character is a known binary operator."""
    return char in OPERATORS


def precedence(operator: str) -> Precedence:
    """
    Get the precedence level of an operator.

    Raises:
        KeyError: If the operator is not in the table
    """
    return OPERATORS[operator]
