import numpy as np
import sympy as sp
from typing import Optional, Mapping, List
from .core.node import Node
from .utils.tree_utils import calculate_tree_depth, get_variables


class Expression:
  """Expression wrapper around a root node with a cached string form"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self, env: Mapping[str, int]) -> int:
    return self.root.evaluate(env)

  def evaluate_batch(self, columns: Mapping[str, np.ndarray]) -> np.ndarray:
    """Evaluate over many bindings; each column holds one variable's values"""
    lengths = {len(values) for values in columns.values()}
    if len(lengths) > 1:
      raise ValueError(f"Columns have different lengths: {sorted(lengths)}")
    n_samples = lengths.pop() if lengths else 1
    return self.root.evaluate_batch(columns, n_samples)

  def format(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.format()
    return self._string_cache

  def format_substituted(self, env: Mapping[str, int]) -> str:
    return self.root.format_substituted(env)

  def simplify(self) -> 'Expression':
    return Expression(self.root.simplify())

  def copy(self) -> 'Expression':
    # Nodes are immutable; the root is shared
    return Expression(self.root)

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def complexity(self) -> float:
    """Weighted complexity score"""
    return self.root.complexity()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> List[str]:
    return get_variables(self.root)

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def __str__(self) -> str:
    return self.format()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root
