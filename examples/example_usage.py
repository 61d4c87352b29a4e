import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from simple_expr import Expression, ConstantNode, VariableNode, BinaryOpNode


def main():
  e1 = Expression(ConstantNode(17))
  e2 = Expression(BinaryOpNode('+', ConstantNode(3), VariableNode('a')))
  e3 = Expression(BinaryOpNode('+', BinaryOpNode('*', VariableNode('b'), ConstantNode(9)),
                               VariableNode('a')))
  e4 = Expression(BinaryOpNode('*', BinaryOpNode('+', ConstantNode(10), ConstantNode(5)),
                               ConstantNode(2)))
  e5 = Expression(BinaryOpNode('-', BinaryOpNode('+', ConstantNode(10), ConstantNode(5)),
                               ConstantNode(2)))
  e6 = Expression(BinaryOpNode('+', BinaryOpNode('*', BinaryOpNode('-', ConstantNode(10), ConstantNode(3)),
                                                 ConstantNode(5)),
                               ConstantNode(2)))
  e7 = Expression(BinaryOpNode('+', ConstantNode(0), VariableNode('a')))

  env = {'a': 3, 'c': 78, 'baf': 666, 'b': 111}
  print(f"Env: {env}")

  for label, expr in [('E1', e1), ('E2', e2), ('E3', e3), ('E4', e4), ('E5', e5), ('E6', e6)]:
    print(f"{label}:")
    print(f"{expr.format()} = {expr.format_substituted(env)} = {expr.evaluate(env)}")

  print("E7:")
  print(f"{e7.format()} = {e7.simplify().format()}")


if __name__ == "__main__":
  main()
