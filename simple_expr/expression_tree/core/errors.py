class UnboundVariableError(KeyError):
  """Raised when a variable has no entry in the supplied binding"""

  def __init__(self, name: str):
    super().__init__(name)
    self.name = name

  def __str__(self) -> str:
    return f"Unbound variable: {self.name!r}"
