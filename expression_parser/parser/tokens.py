"""
Token definitions for the expression parser.

Every token is a single character. This module defines the token categories
understood by the parser:
- Operands (decimal digits and single-letter identifiers)
- Binary operators (looked up in the operator table)
- Grouping parentheses

Author: xwest
"""

from enum import Enum, auto

from .operators import is_operator


LEFT_PAREN = "("
RIGHT_PAREN = ")"


class TokenType(Enum):
    """Enumeration of all single-character token categories."""

    DIGIT = auto()          # 0-9
    LETTER = auto()         # a, b, x, θ
    OPERATOR = auto()       # +, -, *
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    INVALID = auto()        # anything else, whitespace included

    @property
    def is_operand(self) -> bool:
        return self in (TokenType.DIGIT, TokenType.LETTER)


def classify(char: str) -> TokenType:
    """
    Classify a single input character.

    Digits are decimal digits only, so superscripts such as '²' are invalid
    even though str.isdigit() accepts them.
    """
    if len(char) != 1:
        return TokenType.INVALID
    if char.isdecimal():
        return TokenType.DIGIT
    if char.isalpha():
        return TokenType.LETTER
    if is_operator(char):
        return TokenType.OPERATOR
    if char == LEFT_PAREN:
        return TokenType.LEFT_PAREN
    if char == RIGHT_PAREN:
        return TokenType.RIGHT_PAREN
    return TokenType.INVALID
