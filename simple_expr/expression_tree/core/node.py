import numbers
import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Dict, Mapping
from .operators import (
  NodeType, OpType, OP_SYMBOLS, to_op_type, lookup_variable,
  evaluate_binary_op, evaluate_variable_batch, evaluate_constant_batch,
  evaluate_binary_op_fast
)

# Weights for the complexity score; all positive so removing a node never
# increases the score
COMPLEXITY_WEIGHTS: Dict[str, float] = {
  '+': 1.0,
  '-': 1.0,
  '*': 1.1,  # Slightly more expensive than addition

  # Terminal nodes
  'variable': 1.0,
  'constant': 1.0,
}


class Node(ABC):
  """Base node class with cached hash, size and complexity"""

  __slots__ = ('_hash_cache', '_size_cache', '_complexity_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._complexity_cache: Optional[float] = None

  @abstractmethod
  def evaluate(self, env: Mapping[str, int]) -> int:
    pass

  @abstractmethod
  def evaluate_batch(self, columns: Mapping[str, np.ndarray], n_samples: int) -> np.ndarray:
    pass

  @abstractmethod
  def format(self) -> str:
    pass

  @abstractmethod
  def format_substituted(self, env: Mapping[str, int]) -> str:
    pass

  @abstractmethod
  def simplify(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  def complexity(self) -> float:
    """Weighted complexity score"""
    if self._complexity_cache is None:
      self._complexity_cache = self._compute_complexity()
    return self._complexity_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  @abstractmethod
  def _compute_complexity(self) -> float:
    pass

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  @abstractmethod
  def _same_structure(self, other: 'Node') -> bool:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if type(self) is not type(other):
      return NotImplemented if not isinstance(other, Node) else False
    if hash(self) != hash(other):
      return False
    return self._same_structure(other)

  def __str__(self) -> str:
    return self.format()


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: int):
    super().__init__()
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
      raise TypeError(f"Constant value must be an integer, got {type(value).__name__}")
    self.value = int(value)

  def evaluate(self, env: Mapping[str, int]) -> int:
    return self.value

  def evaluate_batch(self, columns: Mapping[str, np.ndarray], n_samples: int) -> np.ndarray:
    return evaluate_constant_batch(n_samples, self.value)

  def format(self) -> str:
    return str(self.value)

  def format_substituted(self, env: Mapping[str, int]) -> str:
    return str(self.value)

  def simplify(self) -> 'ConstantNode':
    return self

  def to_sympy(self) -> sp.Expr:
    return sp.Integer(self.value)

  def _compute_size(self) -> int:
    return 1

  def _compute_complexity(self) -> float:
    return COMPLEXITY_WEIGHTS['constant']

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value))

  def _same_structure(self, other: 'ConstantNode') -> bool:
    return self.value == other.value

  def __repr__(self) -> str:
    return f"ConstantNode({self.value})"


class VariableNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    super().__init__()
    if not isinstance(name, str):
      raise TypeError(f"Variable name must be a string, got {type(name).__name__}")
    self.name = name

  def evaluate(self, env: Mapping[str, int]) -> int:
    return lookup_variable(env, self.name)

  def evaluate_batch(self, columns: Mapping[str, np.ndarray], n_samples: int) -> np.ndarray:
    return evaluate_variable_batch(columns, self.name)

  def format(self) -> str:
    return self.name

  def format_substituted(self, env: Mapping[str, int]) -> str:
    return str(lookup_variable(env, self.name))

  def simplify(self) -> 'VariableNode':
    return self

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name, integer=True)

  def _compute_size(self) -> int:
    return 1

  def _compute_complexity(self) -> float:
    return COMPLEXITY_WEIGHTS['variable']

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def _same_structure(self, other: 'VariableNode') -> bool:
    return self.name == other.name

  def __repr__(self) -> str:
    return f"VariableNode({self.name!r})"


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator, left: Node, right: Node):
    super().__init__()
    if not isinstance(left, Node) or not isinstance(right, Node):
      raise TypeError("BinaryOpNode operands must be Node instances")
    self.operator = to_op_type(operator)
    self.left = left
    self.right = right

  @property
  def symbol(self) -> str:
    return OP_SYMBOLS[self.operator]

  def evaluate(self, env: Mapping[str, int]) -> int:
    left_val = self.left.evaluate(env)
    right_val = self.right.evaluate(env)
    return evaluate_binary_op(left_val, right_val, self.operator)

  def evaluate_batch(self, columns: Mapping[str, np.ndarray], n_samples: int) -> np.ndarray:
    left_val = self.left.evaluate_batch(columns, n_samples)
    right_val = self.right.evaluate_batch(columns, n_samples)
    return evaluate_binary_op_fast(left_val, right_val, int(self.operator))

  def format(self) -> str:
    return f"({self.left.format()}{self.symbol}{self.right.format()})"

  def format_substituted(self, env: Mapping[str, int]) -> str:
    return f"({self.left.format_substituted(env)}{self.symbol}{self.right.format_substituted(env)})"

  def simplify(self) -> Node:
    from ..utils.simplifier import ExpressionSimplifier
    return ExpressionSimplifier.simplify_expression(self)

  def to_sympy(self) -> sp.Expr:
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if self.operator == OpType.ADD:
      return sp.Add(left, right)
    elif self.operator == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    return sp.Mul(left, right)

  def _compute_size(self) -> int:
    return 1 + self.left.size() + self.right.size()

  def _compute_complexity(self) -> float:
    return COMPLEXITY_WEIGHTS[self.symbol] + self.left.complexity() + self.right.complexity()

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, hash(self.left), hash(self.right)))

  def _same_structure(self, other: 'BinaryOpNode') -> bool:
    return (self.operator == other.operator and
            self.left == other.left and
            self.right == other.right)

  def __repr__(self) -> str:
    return f"BinaryOpNode({self.symbol!r}, {self.left!r}, {self.right!r})"
