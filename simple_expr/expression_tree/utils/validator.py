import numpy as np
from typing import Optional, Dict
from ..core.node import Node, ConstantNode, BinaryOpNode, VariableNode
from ..core.operators import OpType
from .tree_utils import get_variables, get_constants
from ...logging_system import log_info, LogLevel

_INT64 = np.iinfo(np.int64)


def _fits_int64(node: Node) -> bool:
  return all(_INT64.min <= value <= _INT64.max for value in get_constants(node))


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Node) -> bool:
    """Check that every node in the tree is well formed"""
    if isinstance(node, ConstantNode):
      return isinstance(node.value, int) and not isinstance(node.value, bool)

    elif isinstance(node, VariableNode):
      return isinstance(node.name, str) and len(node.name) > 0

    elif isinstance(node, BinaryOpNode):
      if not isinstance(node.operator, OpType):
        return False
      return (ExpressionValidator.is_valid_expression(node.left) and
              ExpressionValidator.is_valid_expression(node.right))

    return False

  @staticmethod
  def is_equivalent(first: Node, second: Node, n_samples: int = 32,
                    low: int = -1000, high: int = 1000,
                    seed: Optional[int] = None) -> bool:
    """Compare two trees on randomly sampled integer bindings.

    Both trees are evaluated over the same ``n_samples`` bindings drawn for
    the union of their free variables. Values lie in ``[low, high)`` so the
    int64 batch path does not overflow for shallow trees. Trees holding a
    constant outside the int64 range are compared with scalar ``evaluate``
    on the same bindings instead.
    """
    rng = np.random.default_rng(seed)
    names = sorted(set(get_variables(first)) | set(get_variables(second)))
    columns = {name: rng.integers(low, high, size=n_samples, dtype=np.int64) for name in names}

    if _fits_int64(first) and _fits_int64(second):
      first_val = first.evaluate_batch(columns, n_samples)
      second_val = second.evaluate_batch(columns, n_samples)
      return bool(np.array_equal(first_val, second_val))

    log_info("Constant outside int64 range, comparing with scalar evaluation", LogLevel.DETAILED)
    for i in range(n_samples):
      env: Dict[str, int] = {name: int(values[i]) for name, values in columns.items()}
      if first.evaluate(env) != second.evaluate(env):
        return False
    return True
