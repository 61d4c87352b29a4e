"""Expression Tree Module

Arithmetic expression trees: evaluation, formatting and simplification.
"""

from .expression import Expression
from .core.node import (
    Node,
    ConstantNode,
    VariableNode,
    BinaryOpNode,
    COMPLEXITY_WEIGHTS
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    OP_SYMBOLS
)
from .core.errors import UnboundVariableError
from .utils import ExpressionSimplifier, ExpressionValidator

__all__ = [
    "Expression",
    "Node", "ConstantNode", "VariableNode", "BinaryOpNode", "COMPLEXITY_WEIGHTS",
    "NodeType", "OpType", "BINARY_OP_MAP", "OP_SYMBOLS",
    "UnboundVariableError",
    "ExpressionSimplifier", "ExpressionValidator"
]
