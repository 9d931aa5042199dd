"""
Expression parser façade.

Composes the shunting-yard converter and the postfix assembler into a single
entry point. Malformed input comes back as a failed ParseResult; parse()
never raises for user input.

Author: xwest
"""

import logging

from .ast_nodes import Expression
from .converter import ShuntingYardConverter
from .assembler import PostfixAssembler
from .errors import ParseResult

logger = logging.getLogger(__name__)


class Parser:
    """
    Arithmetic expression parser.

    Stateless between calls; a single instance may be shared freely.
    """

    def __init__(self):
        self.converter = ShuntingYardConverter()
        self.assembler = PostfixAssembler()

    def parse(self, source: str) -> ParseResult[Expression]:
        """
        Parse an infix expression into a tree.

        Args:
            source: Infix expression, one character per token

        Returns:
            ParseResult holding the tree root, or the reason the input was
            rejected
        """
        postfix = self.converter.convert(source)
        if not postfix.ok:
            return ParseResult.fail(postfix.failure)

        tree = self.assembler.assemble(postfix.value)
        logger.debug("Parsed %r", source)
        return ParseResult.success(tree)

    def to_postfix(self, source: str) -> ParseResult[str]:
        """Convert an infix expression to postfix (diagnostic entry point)."""
        return self.converter.convert(source)


_default_parser = Parser()


def parse(source: str) -> ParseResult[Expression]:
    """
    Convenience function to parse an expression string.

    Args:
        source: Infix expression

    Returns:
        ParseResult holding the tree root or a ParseFailure
    """
    return _default_parser.parse(source)


def to_postfix(source: str) -> ParseResult[str]:
    """Convenience function to convert an expression string to postfix."""
    return _default_parser.to_postfix(source)
