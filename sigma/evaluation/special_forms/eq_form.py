from sigma import EvaluatorFn, RuntimeValue
from sigma.errors import SigmaArityError, SigmaTypeError
from sigma.runtime_context import RuntimeContext
from sigma.types.scope import Scope
from sigma.types.values import kind_of


def _operand(ctx: RuntimeContext, scope: Scope, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    cursor = ctx.cursor
    cursor.skip_spaces()
    if cursor.at_end() or cursor.peek() == ")":
        raise SigmaArityError("eq requires exactly 2 arguments: (eq a b)")
    return evaluate_fn(ctx, scope)


def eq_form(
    ctx: RuntimeContext,
    parent: Scope,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    # Operands are evaluated in a child scope, same as let; nothing binds there.
    scope = parent.child()
    a = _operand(ctx, scope, evaluate_fn)
    b = _operand(ctx, scope, evaluate_fn)

    kind_a, kind_b = kind_of(a), kind_of(b)
    if kind_a is not kind_b:
        raise SigmaTypeError(
            f"expected a and b to have the same kind (got '{kind_a}' and '{kind_b}')"
        )
    return a == b
