"""Tests for the bottom-up rewrite rules."""

import logging

import pytest
from simple_expr import (
    ConstantNode, VariableNode, BinaryOpNode, OpType,
    ExpressionSimplifier, ExpressionValidator,
    LogLevel, configure_logging,
)


def add(left, right):
    return BinaryOpNode('+', left, right)


def sub(left, right):
    return BinaryOpNode('-', left, right)


def mul(left, right):
    return BinaryOpNode('*', left, right)


a = VariableNode("a")
b = VariableNode("b")
x = VariableNode("x")


def C(value):
    return ConstantNode(value)


class TestLeaves:
    """Leaves are already minimal."""

    def test_constant_returns_itself(self):
        node = C(7)
        assert node.simplify() is node

    def test_variable_returns_itself(self):
        assert a.simplify() is a


class TestAddRules:
    """Tests for the addition identity rules."""

    def test_zero_left(self):
        assert add(C(0), a).simplify().format() == "a"

    def test_zero_right(self):
        assert add(a, C(0)).simplify().format() == "a"

    def test_zero_plus_zero(self):
        assert add(C(0), C(0)).simplify().format() == "0"

    def test_no_constant_folding(self):
        """Two non-zero constants are left alone."""
        assert add(C(3), C(4)).simplify().format() == "(3+4)"

    def test_distinct_operands_unchanged(self):
        assert add(a, b).simplify().format() == "(a+b)"

    def test_returns_simplified_operand(self):
        """The surviving operand is the simplified child."""
        result = add(C(0), mul(a, C(1))).simplify()
        assert result == a


class TestSubtractRules:
    """Tests for the subtraction rules."""

    def test_zero_right(self):
        assert sub(a, C(0)).simplify().format() == "a"

    def test_zero_left_not_rewritten(self):
        assert sub(C(0), a).simplify().format() == "(0-a)"

    def test_self_cancellation(self):
        assert sub(a, a).simplify().format() == "0"

    def test_self_cancellation_of_subtrees(self):
        tree = sub(mul(a, b), mul(a, b))
        assert tree.simplify().format() == "0"

    def test_self_cancellation_after_children_simplify(self):
        """Children are simplified before their text is compared."""
        tree = sub(add(a, C(0)), mul(C(1), a))
        assert tree.simplify().format() == "0"

    def test_no_false_cancellation(self):
        """Textually different but equal operands are not cancelled."""
        tree = sub(add(C(1), C(1)), C(2))
        assert tree.simplify().format() == "((1+1)-2)"

    def test_commuted_operands_not_cancelled(self):
        tree = sub(add(a, b), add(b, a))
        assert tree.simplify().format() == "((a+b)-(b+a))"

    def test_zero_minus_zero(self):
        """The zero rule fires first and returns the left operand."""
        result = sub(C(0), C(0)).simplify()
        assert result.format() == "0"


class TestMultiplyRules:
    """Tests for the multiplication rules."""

    def test_one_right(self):
        assert mul(a, C(1)).simplify().format() == "a"

    def test_one_left(self):
        assert mul(C(1), a).simplify().format() == "a"

    def test_zero_left(self):
        assert mul(C(0), b).simplify().format() == "0"

    def test_zero_right(self):
        assert mul(b, C(0)).simplify().format() == "0"

    def test_one_rule_beats_zero_rule(self):
        """x * 1 is tried before x * 0, so 0 * 1 keeps the left zero."""
        result = mul(C(0), C(1)).simplify()
        assert isinstance(result, ConstantNode) and result.value == 0

    def test_zero_absorbs_subtree(self):
        tree = mul(add(a, b), C(0))
        assert tree.simplify().format() == "0"

    def test_other_constants_untouched(self):
        assert mul(C(2), C(3)).simplify().format() == "(2*3)"


class TestRecursion:
    """Tests for the single bottom-up pass."""

    def test_nested_zero_rules(self):
        tree = add(add(C(0), x), C(0))
        assert tree.simplify().format() == "x"

    def test_parent_sees_rewritten_child(self):
        """(a-a)*b: the inner subtraction becomes 0 before the
        multiplication rules look at it."""
        tree = mul(sub(a, a), b)
        assert tree.simplify().format() == "0"

    def test_cancellation_after_nested_rewrites(self):
        tree = sub(add(a, C(0)), add(C(0), add(a, C(0))))
        assert tree.simplify().format() == "0"

    def test_unmatched_node_is_fresh(self):
        tree = add(a, b)
        result = tree.simplify()
        assert result is not tree
        assert result == tree

    def test_original_untouched(self):
        tree = add(C(0), mul(a, C(1)))
        tree.simplify()
        assert tree.format() == "(0+(a*1))"

    def test_deep_chain(self):
        tree = a
        for _ in range(50):
            tree = mul(add(tree, C(0)), C(1))
        assert tree.simplify().format() == "a"

    def test_deep_left_spine(self):
        """Trees a few hundred levels deep stay within the recursion limit."""
        tree = a
        for _ in range(300):
            tree = add(tree, C(0))
        assert tree.simplify() is a


class TestSemantics:
    """Simplification preserves values and never grows the tree."""

    TREES = [
        add(C(0), a),
        sub(a, a),
        mul(C(0), b),
        sub(add(C(1), C(1)), C(2)),
        add(mul(sub(C(10), C(3)), C(5)), C(2)),
        mul(add(mul(a, C(1)), sub(b, b)), add(C(0), x)),
        sub(mul(a, b), add(mul(a, b), C(0))),
    ]

    @pytest.mark.parametrize("tree", TREES, ids=lambda t: t.format())
    def test_equivalent_on_samples(self, tree):
        assert ExpressionValidator.is_equivalent(tree, tree.simplify(), seed=7)

    @pytest.mark.parametrize("tree", TREES, ids=lambda t: t.format())
    def test_not_more_complex(self, tree):
        assert tree.simplify().complexity() <= tree.complexity()


class TestApplyRules:
    """Tests for the single-node rule table."""

    def test_no_match_returns_none(self):
        assert ExpressionSimplifier.apply_rules(OpType.ADD, a, b) is None

    def test_match_returns_result(self):
        assert ExpressionSimplifier.apply_rules(OpType.MUL, a, C(1)) is a

    def test_rule_logged_when_verbose(self, caplog):
        configure_logging(LogLevel.VERBOSE)
        try:
            with caplog.at_level(logging.DEBUG, logger="simple_expr"):
                add(C(0), a).simplify()
            assert "RULE add-zero-left: (0+a) => a" in caplog.text
        finally:
            configure_logging(LogLevel.SILENT)

    def test_rule_not_logged_by_default(self, caplog):
        configure_logging(LogLevel.MINIMAL)
        try:
            with caplog.at_level(logging.DEBUG, logger="simple_expr"):
                add(C(0), a).simplify()
            assert "RULE" not in caplog.text
        finally:
            configure_logging(LogLevel.SILENT)
