"""Core expression tree components."""

from .node import Node, ConstantNode, VariableNode, BinaryOpNode, COMPLEXITY_WEIGHTS
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, OP_SYMBOLS, to_op_type,
    evaluate_binary_op, evaluate_binary_op_fast
)
from .errors import UnboundVariableError

__all__ = [
    'Node', 'ConstantNode', 'VariableNode', 'BinaryOpNode', 'COMPLEXITY_WEIGHTS',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'OP_SYMBOLS', 'to_op_type',
    'evaluate_binary_op', 'evaluate_binary_op_fast',
    'UnboundVariableError'
]
