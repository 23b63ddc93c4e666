import logging

from sigma import EvaluatorFn, RuntimeValue
from sigma.runtime_context import RuntimeContext
from sigma.types.scope import Scope

logger = logging.getLogger(__name__)


def let_form(
    ctx: RuntimeContext,
    parent: Scope,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    """(let name expr ... body)

    Bindings are read until the next token is not an identifier, or is an
    identifier directly followed by ')'. In the latter case that identifier is
    the body, so it is left unread. Binding values are evaluated in the new
    scope, so later bindings can refer to earlier ones.
    """
    cursor = ctx.cursor
    scope = parent.child()
    logger.debug("let: new scope at depth %d", scope.depth())

    while True:
        cursor.skip_spaces()
        end = cursor.identifier_end()
        if end == cursor.pos:
            break
        if cursor.source[end:end + 1] == ")":
            break
        name = cursor.read_identifier()
        scope.define(name, evaluate_fn(ctx, scope))

    return evaluate_fn(ctx, scope)
