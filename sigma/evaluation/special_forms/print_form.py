from sigma import EvaluatorFn, RuntimeValue
from sigma.runtime_context import RuntimeContext
from sigma.types.nil import Nil
from sigma.types.scope import Scope
from sigma.types.values import format_value


def print_form(
    ctx: RuntimeContext,
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    # The closing ')' is left for the caller to consume.
    value = evaluate_fn(ctx, scope)
    print(format_value(value), file=ctx.sink)
    return Nil
