# Core type aliases for Sigma's data model.
# Runtime values are plain Python objects: float for numbers, bool for
# booleans and the Nil singleton (sigma.types.nil) for side-effecting forms.
# There is no syntax tree: source text is read and evaluated in one pass.

from typing import Any, Callable

# Runtime value alias
RuntimeValue = Any

# Evaluator function type: the recursive evaluator handed to special forms
EvaluatorFn = Callable[..., RuntimeValue]
