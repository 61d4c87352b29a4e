from typing import Optional, Tuple
from ..core.node import Node, ConstantNode, BinaryOpNode
from ..core.operators import OpType, OP_SYMBOLS
from ...logging_system import get_logger, log_rule, LogLevel


def _is_constant(node: Node, value: int) -> bool:
  return isinstance(node, ConstantNode) and node.value == value


class ExpressionSimplifier:
  """Rewrites identity-element and self-cancellation patterns bottom-up.

  Children are simplified first and the rules for the parent's operator are
  tried once against the simplified children; whatever a rule returns is not
  simplified again. Constants are never folded together.
  """

  @staticmethod
  def simplify_expression(node: Node) -> Node:
    if not isinstance(node, BinaryOpNode):
      return node

    left = ExpressionSimplifier.simplify_expression(node.left)
    right = ExpressionSimplifier.simplify_expression(node.right)

    rewritten = ExpressionSimplifier.apply_rules(node.operator, left, right)
    if rewritten is not None:
      return rewritten
    return BinaryOpNode(node.operator, left, right)

  @staticmethod
  def apply_rules(operator: OpType, left: Node, right: Node) -> Optional[Node]:
    """Apply the first matching rule for ``operator`` to already simplified
    operands, or return None if nothing matches."""
    matched = ExpressionSimplifier._match_rule(operator, left, right)
    if matched is None:
      return None

    rule_name, result = matched
    if get_logger().should_log(LogLevel.VERBOSE):
      before = f"({left.format()}{OP_SYMBOLS[operator]}{right.format()})"
      log_rule(rule_name, before, result.format())
    return result

  @staticmethod
  def _match_rule(operator: OpType, left: Node, right: Node) -> Optional[Tuple[str, Node]]:
    if operator == OpType.ADD:
      if _is_constant(left, 0):
        return 'add-zero-left', right  # 0 + x = x
      if _is_constant(right, 0):
        return 'add-zero-right', left  # x + 0 = x

    elif operator == OpType.SUB:
      if _is_constant(right, 0):
        return 'sub-zero', left  # x - 0 = x
      # Compares rendered text, so (1+1) and 2 are not treated as equal
      if left.format() == right.format():
        return 'sub-self', ConstantNode(0)  # x - x = 0

    elif operator == OpType.MUL:
      if _is_constant(right, 1):
        return 'mul-one-right', left  # x * 1 = x
      if _is_constant(left, 1):
        return 'mul-one-left', right  # 1 * x = x
      if _is_constant(right, 0) or _is_constant(left, 0):
        return 'mul-zero', ConstantNode(0)  # x * 0 = 0

    return None
