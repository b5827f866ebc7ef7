# Core type aliases for the scm data model.
# Plain Python types represent both code (forms) and runtime values:
# float for numbers, bool for booleans, list for lists, Symbol for symbols,
# plus the Closure and Primitive procedure kinds. There is no Cons type.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable, since syntax and data share
# one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
