import numpy as np
import numba
from enum import IntEnum

from .errors import UnboundVariableError

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2

class OpType(IntEnum):
  ADD = 0
  SUB = 1
  MUL = 2

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL}
OP_SYMBOLS = {op_type: symbol for symbol, op_type in BINARY_OP_MAP.items()}

# Plain ints so numba folds them as compile-time constants
_ADD = int(OpType.ADD)
_SUB = int(OpType.SUB)
_MUL = int(OpType.MUL)


def to_op_type(operator) -> OpType:
  """Normalize an operator symbol or OpType member to OpType"""
  if isinstance(operator, OpType):
    return operator
  if isinstance(operator, str) and operator in BINARY_OP_MAP:
    return BINARY_OP_MAP[operator]
  raise ValueError(f"Unknown binary operator: {operator!r}")


def lookup_variable(env, name: str):
  try:
    return env[name]
  except KeyError:
    raise UnboundVariableError(name) from None


def evaluate_binary_op(left_val: int, right_val: int, op_type: OpType) -> int:
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  else:
    return left_val * right_val


def evaluate_variable_batch(columns, name: str) -> np.ndarray:
  return np.asarray(lookup_variable(columns, name), dtype=np.int64)


def evaluate_constant_batch(n_samples: int, value: int) -> np.ndarray:
  return np.full(n_samples, value, dtype=np.int64)


@numba.njit(cache=True)
def evaluate_binary_op_fast(left_val, right_val, op_code):
  if op_code == _ADD:
    return left_val + right_val
  elif op_code == _SUB:
    return left_val - right_val
  return left_val * right_val
