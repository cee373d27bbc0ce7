# Core type aliases for Lumen's data model.
# Runtime values are plain Python objects: int/float for numbers, str for strings,
# bool for booleans, and any Python callable (including Closure) for functions.
# False doubles as the "no value" result; there is no separate nil type.
#
# Naming guidance:
# - LumenValue:  Use in evaluator/runtime code to denote evaluated values.
# - EvaluatorFn: The signature of `evaluate`, passed into special forms.

from typing import Any, Callable

LumenValue = Any

EvaluatorFn = Callable[..., LumenValue]
