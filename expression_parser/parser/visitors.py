"""
Reference visitors for expression trees.

DumpVisitor renders the canonical structural form used to compare trees,
e.g. Binary(Literal(1)+Variable(x)). PostfixVisitor renders a tree back into
postfix token order.

Both renderers walk the tree with an explicit stack and append to a single
output buffer, so tree depth is bounded only by memory.

Author: xwest
"""

from typing import List, Tuple, Union

from .ast_nodes import (
    Expression, ExpressionVisitor, Literal, Variable,
    BinaryExpression, ParenExpression,
)


# Text to emit, or a subtree still to be expanded, in output order
Fragment = Union[str, Expression]


class RenderingVisitor(ExpressionVisitor[str]):
    """
    Base class for visitors that render a tree to text.

    Handlers return the fragments of their node in output order instead of
    rendering children themselves; visit() folds those fragments into one
    buffer without recursion.
    """

    def visit(self, node: Expression) -> str:
        buffer: List[str] = []
        pending: List[Fragment] = [node]

        while pending:
            item = pending.pop()
            if isinstance(item, str):
                buffer.append(item)
            else:
                fragments = getattr(self, self._HANDLERS[item.kind])(item)
                pending.extend(reversed(fragments))

        return "".join(buffer)


class DumpVisitor(RenderingVisitor):
    """Render an expression in canonical structural form."""

    def visit_literal(self, node: Literal) -> Tuple[Fragment, ...]:
        return (f"Literal({node.value})",)

    def visit_variable(self, node: Variable) -> Tuple[Fragment, ...]:
        return (f"Variable({node.name})",)

    def visit_binary(self, node: BinaryExpression) -> Tuple[Fragment, ...]:
        return ("Binary(", node.left, node.operator, node.right, ")")

    def visit_paren(self, node: ParenExpression) -> Tuple[Fragment, ...]:
        return ("Paren(", node.operand, ")")


class PostfixVisitor(RenderingVisitor):
    """Render an expression as a postfix token string."""

    def visit_literal(self, node: Literal) -> Tuple[Fragment, ...]:
        return (node.value,)

    def visit_variable(self, node: Variable) -> Tuple[Fragment, ...]:
        return (node.name,)

    def visit_binary(self, node: BinaryExpression) -> Tuple[Fragment, ...]:
        return (node.left, node.right, node.operator)

    def visit_paren(self, node: ParenExpression) -> Tuple[Fragment, ...]:
        # Postfix order needs no grouping
        return (node.operand,)


def dump(expr: Expression) -> str:
    """Render an expression in canonical structural form."""
    return expr.accept(DumpVisitor())


def to_postfix_string(expr: Expression) -> str:
    """Render an expression as a postfix token string."""
    return expr.accept(PostfixVisitor())
