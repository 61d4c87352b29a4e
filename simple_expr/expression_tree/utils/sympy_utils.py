import sympy as sp
from ..core.node import Node


def to_sympy_expression(node: Node) -> sp.Expr:
  """Convert a tree to a SymPy expression over integer symbols"""
  return node.to_sympy()


def symbolically_equivalent(first: Node, second: Node) -> bool:
  """True when SymPy proves both trees equal for every binding"""
  difference = sp.simplify(first.to_sympy() - second.to_sympy())
  return difference == 0


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the expression"""
  return sp.latex(node.to_sympy())
