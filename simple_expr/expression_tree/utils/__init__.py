"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier
from .validator import ExpressionValidator
from .sympy_utils import to_sympy_expression, symbolically_equivalent, latex_representation
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, get_variables, get_constants,
    find_nodes_by_operator
)

__all__ = [
    'ExpressionSimplifier', 'ExpressionValidator',
    'to_sympy_expression', 'symbolically_equivalent', 'latex_representation',
    'get_all_nodes', 'calculate_tree_depth', 'get_variables', 'get_constants',
    'find_nodes_by_operator'
]
