"""
Postfix to expression tree assembly.

Author: xwest
"""

import logging
from typing import List

from .ast_nodes import Expression, Literal, Variable, BinaryExpression
from .tokens import TokenType, classify
from .errors import InvariantViolation

logger = logging.getLogger(__name__)


class PostfixAssembler:
    """
    Builds an expression tree from a postfix token string.

    Input is expected to come from a successful conversion. Anything that
    could not have come from one raises InvariantViolation instead of being
    reported as a parse failure.
    """

    def assemble(self, postfix: str) -> Expression:
        """
        Assemble a postfix token string into an expression tree.

        Args:
            postfix: Postfix token string

        Returns:
            Root of the expression tree

        Raises:
            InvariantViolation: If the postfix string is malformed
        """
        stack: List[Expression] = []

        for token in postfix:
            token_type = classify(token)

            if token_type is TokenType.DIGIT:
                stack.append(Literal(token))
            elif token_type is TokenType.LETTER:
                stack.append(Variable(token))
            elif token_type is TokenType.OPERATOR:
                if len(stack) < 2:
                    self._fail(f"Operator {token!r} needs two operands, found {len(stack)}", postfix)
                right = stack.pop()
                left = stack.pop()
                stack.append(BinaryExpression(left, right, token))
            else:
                self._fail(f"Unexpected token {token!r} in postfix input", postfix)

        if len(stack) != 1:
            self._fail(f"Postfix input left {len(stack)} expressions, expected exactly one", postfix)

        logger.debug("Assembled tree from postfix %r", postfix)
        return stack[0]

    def _fail(self, message: str, postfix: str):
        logger.error("Invariant violation while assembling: %s", message)
        raise InvariantViolation(message, postfix)


_default_assembler = PostfixAssembler()


def assemble(postfix: str) -> Expression:
    """Assemble a postfix token string into an expression tree."""
    return _default_assembler.assemble(postfix)
