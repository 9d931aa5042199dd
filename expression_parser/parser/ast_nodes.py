"""
Abstract Syntax Tree node definitions for arithmetic expressions.

The node set is closed: Literal, Variable, BinaryExpression and
ParenExpression. Every node carries an ExpressionKind tag, is immutable once
built, and supports the visitor pattern through accept().

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Generic, Tuple, TypeVar
from dataclasses import dataclass
from enum import Enum

from .operators import is_operator
from .tokens import TokenType, classify


__all__ = [
    "ExpressionKind", "ExpressionVisitor", "Expression",
    "Literal", "Variable", "BinaryExpression", "ParenExpression",
]

R = TypeVar("R")


class ExpressionKind(Enum):
    """Tag identifying each expression variant."""
    LITERAL = "Literal"
    VARIABLE = "Variable"
    BINARY = "Binary"
    PAREN = "Paren"


class ExpressionVisitor(ABC, Generic[R]):
    """
    Abstract visitor over the expression variants.

    Subclasses implement one handler per variant. visit() selects the handler
    from the node's kind tag.
    """

    _HANDLERS: ClassVar[Dict[ExpressionKind, str]] = {
        ExpressionKind.LITERAL: "visit_literal",
        ExpressionKind.VARIABLE: "visit_variable",
        ExpressionKind.BINARY: "visit_binary",
        ExpressionKind.PAREN: "visit_paren",
    }

    def visit(self, node: "Expression") -> R:
        """Visit any expression node."""
        return getattr(self, self._HANDLERS[node.kind])(node)

    @abstractmethod
    def visit_literal(self, node: "Literal") -> R:
        pass

    @abstractmethod
    def visit_variable(self, node: "Variable") -> R:
        pass

    @abstractmethod
    def visit_binary(self, node: "BinaryExpression") -> R:
        pass

    @abstractmethod
    def visit_paren(self, node: "ParenExpression") -> R:
        pass


class Expression(ABC):
    """Base class for all expression nodes."""

    kind: ClassVar[ExpressionKind]

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> Tuple["Expression", ...]:
        """Get all child nodes in structural order."""
        pass


def _require_expression(value: Any, role: str):
    if not isinstance(value, Expression):
        raise TypeError(f"{role} must be an Expression, got {type(value).__name__}")


# ============================================================================
# Leaves
# ============================================================================

@dataclass(frozen=True)
class Literal(Expression):
    """Single-digit literal."""
    value: str

    kind: ClassVar[ExpressionKind] = ExpressionKind.LITERAL

    def __post_init__(self):
        if not isinstance(self.value, str) or classify(self.value) is not TokenType.DIGIT:
            raise ValueError(f"Literal value must be a single digit, got {self.value!r}")

    def children(self) -> Tuple[Expression, ...]:
        return ()


@dataclass(frozen=True)
class Variable(Expression):
    """Single-letter variable reference."""
    name: str

    kind: ClassVar[ExpressionKind] = ExpressionKind.VARIABLE

    def __post_init__(self):
        if not isinstance(self.name, str) or classify(self.name) is not TokenType.LETTER:
            raise ValueError(f"Variable name must be a single letter, got {self.name!r}")

    def children(self) -> Tuple[Expression, ...]:
        return ()


# ============================================================================
# Internal nodes
# ============================================================================

@dataclass(frozen=True)
class BinaryExpression(Expression):
    """Binary operation with exactly two operands."""
    left: Expression
    right: Expression
    operator: str

    kind: ClassVar[ExpressionKind] = ExpressionKind.BINARY

    def __post_init__(self):
        _require_expression(self.left, "left operand")
        _require_expression(self.right, "right operand")
        if not is_operator(self.operator):
            raise ValueError(f"Unknown operator: {self.operator!r}")

    def children(self) -> Tuple[Expression, ...]:
        return (self.left, self.right)


@dataclass(frozen=True)
class ParenExpression(Expression):
    """
    Parenthesized sub-expression.

    The parser never produces this node: parentheses only steer grouping
    during conversion. It exists for trees built by hand.
    """
    operand: Expression

    kind: ClassVar[ExpressionKind] = ExpressionKind.PAREN

    def __post_init__(self):
        _require_expression(self.operand, "operand")

    def children(self) -> Tuple[Expression, ...]:
        return (self.operand,)
