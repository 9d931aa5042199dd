"""
Shunting-yard conversion from infix to postfix.

Converts a string of single-character tokens into postfix (reverse Polish)
order. Operators of equal precedence are emitted left to right. A successful
conversion always yields well-formed postfix: every operator has two
operands and exactly one expression remains at the end, so the assembler can
build a tree from it without further checks.

Author: xwest
"""

import logging
from typing import List

from .operators import is_operator, precedence
from .tokens import TokenType, LEFT_PAREN, classify
from .errors import (
    ParseResult, create_unrecognized_character_failure,
    create_unmatched_open_paren_failure, create_unmatched_close_paren_failure,
    create_empty_input_failure, create_missing_operand_failure,
    create_missing_operator_failure,
)

logger = logging.getLogger(__name__)


class ShuntingYardConverter:
    """
    Infix to postfix converter.

    Precedence comes from the shared operator table and all working state is
    local to convert(), so one instance can be shared between threads.
    """

    def convert(self, source: str) -> ParseResult[str]:
        """
        Convert an infix expression to postfix.

        Args:
            source: Infix expression, one character per token

        Returns:
            ParseResult holding the postfix string, or the reason the input
            was rejected
        """
        output: List[str] = []
        stack: List[str] = []
        expect_operand = True

        for char in source:
            token_type = classify(char)

            if token_type is TokenType.INVALID:
                return self._reject(source, create_unrecognized_character_failure(char))

            if token_type.is_operand:
                if not expect_operand:
                    return self._reject(source, create_missing_operator_failure(char))
                output.append(char)
                expect_operand = False

            elif token_type is TokenType.OPERATOR:
                if expect_operand:
                    return self._reject(source, create_missing_operand_failure(char))
                while (stack and
                       is_operator(stack[-1]) and
                       precedence(stack[-1]) >= precedence(char)):
                    output.append(stack.pop())
                stack.append(char)
                expect_operand = True

            elif token_type is TokenType.LEFT_PAREN:
                if not expect_operand:
                    return self._reject(source, create_missing_operator_failure(char))
                stack.append(char)

            else:
                while stack and stack[-1] != LEFT_PAREN:
                    output.append(stack.pop())
                if not stack:
                    return self._reject(source, create_unmatched_close_paren_failure())
                stack.pop()
                if expect_operand:
                    return self._reject(source, create_missing_operand_failure(char))

        while stack:
            top = stack.pop()
            if not is_operator(top):
                return self._reject(source, create_unmatched_open_paren_failure())
            output.append(top)

        if not output:
            return self._reject(source, create_empty_input_failure())
        if expect_operand:
            return self._reject(source, create_missing_operand_failure())

        postfix = "".join(output)
        logger.debug("Converted %r to postfix %r", source, postfix)
        return ParseResult.success(postfix)

    def _reject(self, source: str, failure) -> ParseResult[str]:
        logger.debug("Rejected %r: %s", source, failure.message)
        return ParseResult.fail(failure)


_default_converter = ShuntingYardConverter()


def convert(source: str) -> ParseResult[str]:
    """Convert an infix expression to postfix with the shared operator table."""
    return _default_converter.convert(source)
