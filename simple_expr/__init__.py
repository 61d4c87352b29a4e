# Python

"""simple_expr

Arithmetic expression trees over integer constants, named variables and the
binary operators +, - and *.
"""

from .expression_tree import (
  Expression, Node, ConstantNode, VariableNode, BinaryOpNode,
  NodeType, OpType, UnboundVariableError,
  ExpressionSimplifier, ExpressionValidator
)
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "ConstantNode", "VariableNode", "BinaryOpNode",
  "NodeType", "OpType", "UnboundVariableError",
  "ExpressionSimplifier", "ExpressionValidator",
  "LogLevel", "get_logger", "set_log_level", "configure_logging",
]
