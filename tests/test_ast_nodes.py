"""
Tests for expression nodes and visitors.

Tests cover:
- Node construction and validation
- Immutability and structural equality
- Visitor dispatch and the reference renderers

Author: xwest
"""

import unittest
import dataclasses
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from expression_parser.parser.ast_nodes import (
    ExpressionKind, ExpressionVisitor, Literal, Variable,
    BinaryExpression, ParenExpression,
)
from expression_parser.parser.visitors import (
    DumpVisitor, PostfixVisitor, dump, to_postfix_string,
)


class DepthVisitor(ExpressionVisitor[int]):
    """Computes tree height."""

    def visit_literal(self, node):
        return 1

    def visit_variable(self, node):
        return 1

    def visit_binary(self, node):
        return 1 + max(self.visit(node.left), self.visit(node.right))

    def visit_paren(self, node):
        return 1 + self.visit(node.operand)


class EvaluateVisitor(ExpressionVisitor[int]):
    """Integer evaluation with variable bindings."""

    def __init__(self, bindings):
        self.bindings = bindings

    def visit_literal(self, node):
        return int(node.value)

    def visit_variable(self, node):
        return self.bindings[node.name]

    def visit_binary(self, node):
        left = self.visit(node.left)
        right = self.visit(node.right)
        if node.operator == "+":
            return left + right
        if node.operator == "-":
            return left - right
        return left * right

    def visit_paren(self, node):
        return self.visit(node.operand)


class TestExpressionNodes(unittest.TestCase):
    """Test cases for node construction."""

    def test_kinds(self):
        one = Literal("1")
        self.assertEqual(one.kind, ExpressionKind.LITERAL)
        self.assertEqual(Variable("x").kind, ExpressionKind.VARIABLE)
        self.assertEqual(BinaryExpression(one, one, "+").kind, ExpressionKind.BINARY)
        self.assertEqual(ParenExpression(one).kind, ExpressionKind.PAREN)

    def test_children(self):
        left, right = Literal("1"), Variable("y")
        binary = BinaryExpression(left, right, "*")
        self.assertEqual(left.children(), ())
        self.assertEqual(binary.children(), (left, right))
        self.assertEqual(ParenExpression(binary).children(), (binary,))

    def test_invalid_literal(self):
        for value in ("12", "a", "", "+", 1):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    Literal(value)

    def test_invalid_variable(self):
        for name in ("xy", "1", "", "("):
            with self.subTest(name=name):
                with self.assertRaises(ValueError):
                    Variable(name)

    def test_unknown_operator(self):
        with self.assertRaises(ValueError):
            BinaryExpression(Literal("1"), Literal("2"), "/")

    def test_children_must_be_expressions(self):
        with self.assertRaises(TypeError):
            BinaryExpression("1", Literal("2"), "+")
        with self.assertRaises(TypeError):
            ParenExpression(None)

    def test_nodes_are_immutable(self):
        node = BinaryExpression(Literal("1"), Literal("2"), "+")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            node.operator = "*"

    def test_structural_equality(self):
        a = BinaryExpression(Literal("1"), Variable("x"), "-")
        b = BinaryExpression(Literal("1"), Variable("x"), "-")
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, BinaryExpression(Variable("x"), Literal("1"), "-"))


class TestVisitors(unittest.TestCase):
    """Test cases for visitor dispatch and rendering."""

    def setUp(self):
        """Set up test fixtures."""
        # (1+x)*2 built by hand, keeping the parentheses
        self.tree = BinaryExpression(
            ParenExpression(BinaryExpression(Literal("1"), Variable("x"), "+")),
            Literal("2"),
            "*",
        )

    def test_dump(self):
        self.assertEqual(
            dump(self.tree),
            "Binary(Paren(Binary(Literal(1)+Variable(x)))*Literal(2))",
        )

    def test_accept_returns_handler_result(self):
        self.assertEqual(self.tree.accept(DumpVisitor()), dump(self.tree))
        self.assertEqual(self.tree.accept(DepthVisitor()), 4)

    def test_dump_is_repeatable(self):
        visitor = DumpVisitor()
        self.assertEqual(self.tree.accept(visitor), self.tree.accept(visitor))

    def test_postfix_rendering_drops_parentheses(self):
        self.assertEqual(to_postfix_string(self.tree), "1x+2*")
        self.assertEqual(self.tree.accept(PostfixVisitor()), "1x+2*")

    def test_custom_visitor(self):
        self.assertEqual(self.tree.accept(EvaluateVisitor({"x": 4})), 10)

    def test_deep_hand_built_tree(self):
        depth = 5000
        tree = Literal("1")
        for _ in range(depth):
            tree = ParenExpression(tree)
        self.assertEqual(dump(tree), "Paren(" * depth + "Literal(1)" + ")" * depth)
        self.assertEqual(to_postfix_string(tree), "1")

    def test_package_exports_only_public_names(self):
        import expression_parser.parser as package

        for helper in ("R", "ABC", "Any", "dataclass", "abstractmethod"):
            with self.subTest(name=helper):
                self.assertFalse(hasattr(package, helper))
        self.assertTrue(hasattr(package, "ExpressionKind"))
        self.assertTrue(hasattr(package, "ParenExpression"))

    def test_incomplete_visitor_cannot_be_instantiated(self):
        class LeavesOnly(ExpressionVisitor):
            def visit_literal(self, node):
                return node.value

            def visit_variable(self, node):
                return node.name

        with self.assertRaises(TypeError):
            LeavesOnly()


if __name__ == '__main__':
    unittest.main()
