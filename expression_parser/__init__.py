"""
Simple Expression Parser Package

Turns strings such as "1*(2+x)" into expression trees.

Architecture:
    expression_parser/
    └── parser/          # Operator table, conversion, assembly and AST

Pipeline:
    source -> ShuntingYardConverter -> postfix -> PostfixAssembler -> tree

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .parser import (
    Parser, parse, to_postfix, dump,
    Expression, ExpressionVisitor, Literal, Variable,
    BinaryExpression, ParenExpression,
    ParseResult, ParseFailure, FailureReason, ParseError, InvariantViolation,
)

__all__ = [
    # Core entry points
    "Parser",
    "parse",
    "to_postfix",
    "dump",

    # Tree
    "Expression",
    "ExpressionVisitor",
    "Literal",
    "Variable",
    "BinaryExpression",
    "ParenExpression",

    # Results
    "ParseResult",
    "ParseFailure",
    "FailureReason",
    "ParseError",
    "InvariantViolation",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
