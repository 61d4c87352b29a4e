"""
Tree Utility Functions

Traversal and inspection helpers for expression trees.
"""

from typing import List

from ..core.node import Node, BinaryOpNode, ConstantNode, VariableNode
from ..core.operators import to_op_type


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)

        if isinstance(current_node, BinaryOpNode):
            nodes_to_visit.append(current_node.left)
            nodes_to_visit.append(current_node.right)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]

    if isinstance(node, BinaryOpNode):
        nodes.extend(_depth_first_traversal(node.left))
        nodes.extend(_depth_first_traversal(node.right))

    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    if isinstance(node, BinaryOpNode):
        return 1 + max(calculate_tree_depth(node.left), calculate_tree_depth(node.right))
    return 1


def get_variables(node: Node) -> List[str]:
    """Sorted unique names of all variables in the tree"""
    return sorted({n.name for n in _depth_first_traversal(node) if isinstance(n, VariableNode)})


def get_constants(node: Node) -> List[int]:
    """Constant values in pre-order"""
    return [n.value for n in _depth_first_traversal(node) if isinstance(n, ConstantNode)]


def find_nodes_by_operator(node: Node, operator) -> List[BinaryOpNode]:
    """Find all binary nodes using ``operator`` (symbol or OpType)"""
    op_type = to_op_type(operator)
    return [n for n in _depth_first_traversal(node)
            if isinstance(n, BinaryOpNode) and n.operator == op_type]
