"""
Expression Parser Package

Parses single-character arithmetic expressions into Abstract Syntax Trees
using the shunting-yard algorithm.

Key Features:
- Infix to postfix conversion with precedence and left associativity
- Postfix to tree assembly
- Immutable, tagged expression nodes with a visitor interface
- Explicit parse results instead of exceptions for malformed input

Author: xwest
"""

from .ast_nodes import *
from .operators import OPERATORS, Precedence, is_operator, precedence
from .tokens import TokenType, classify
from .converter import ShuntingYardConverter, convert
from .assembler import PostfixAssembler, assemble
from .parser import Parser, parse, to_postfix
from .visitors import RenderingVisitor, DumpVisitor, PostfixVisitor, dump, to_postfix_string
from .errors import (
    ParseResult, ParseFailure, FailureReason, ParseError,
    InvariantViolation, PARSER_ERROR_CODES,
)

__all__ = [
    # Core parser
    "Parser", "parse", "to_postfix",
    "ShuntingYardConverter", "convert",
    "PostfixAssembler", "assemble",

    # Operator table and tokens
    "OPERATORS", "Precedence", "is_operator", "precedence",
    "TokenType", "classify",

    # AST nodes
    "Expression", "ExpressionKind", "ExpressionVisitor",
    "Literal", "Variable", "BinaryExpression", "ParenExpression",

    # Visitors
    "RenderingVisitor", "DumpVisitor", "PostfixVisitor", "dump", "to_postfix_string",

    # Error handling
    "ParseResult", "ParseFailure", "FailureReason", "ParseError",
    "InvariantViolation", "PARSER_ERROR_CODES",
]
