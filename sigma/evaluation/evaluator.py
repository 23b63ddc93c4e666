"""Core evaluator for the Sigma interpreter.

Reading and evaluation are fused: each call consumes exactly one expression
from the context's cursor and returns its value. Parenthesized forms are
dispatched by literal prefix match against the special-form table; the form
handler reads its operands, and the closing ')' is consumed here.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from sigma import RuntimeValue
from sigma import config
from sigma.errors import SigmaDepthError, SigmaSyntaxError
from sigma.reader.cursor import Cursor, is_alpha, is_num
from sigma.runtime_context import RuntimeContext
from sigma.types.scope import Scope
from sigma.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(
    source: str,
    scope: Optional[Scope] = None,
    sink: Optional[TextIO] = None,
    max_depth: Optional[int] = None,
) -> RuntimeValue:
    """
    Evaluate the single top-level expression in `source`.

    A fresh cursor is created for every call. Without an explicit `scope`
    the expression is evaluated in a new root scope.
    """
    ctx = RuntimeContext(
        cursor=Cursor(source),
        sink=sink if sink is not None else config.get_diagnostic_stream(),
        max_depth=max_depth if max_depth is not None else config.get_max_depth(),
    )
    if scope is None:
        scope = Scope()
    try:
        return evaluate_expr(ctx, scope)
    except RecursionError:
        # the configured depth can exceed what the Python stack allows
        raise SigmaDepthError(
            f"expression nested too deeply for the interpreter stack (depth {ctx.max_depth} allowed)"
        ) from None


def evaluate_expr(ctx: RuntimeContext, scope: Scope) -> RuntimeValue:
    """Read and evaluate exactly one expression at the cursor."""
    cursor = ctx.cursor
    ctx.enter()
    try:
        cursor.skip_spaces()

        if cursor.at_end():
            raise SigmaSyntaxError("tried to evaluate an empty expression")

        c = cursor.peek()

        if c == "(":
            cursor.advance()
            for head, form in SPECIAL_FORMS.items():
                if cursor.startswith(head):
                    cursor.advance(len(head))
                    logger.debug("dispatch %s at %d", head, cursor.pos)
                    result = form(ctx, scope, evaluate_expr)
                    cursor.skip_spaces()
                    cursor.expect(")")
                    return result
            raise SigmaSyntaxError(f"expected the name of a callable: {cursor.rest()}")

        if c == "-" or is_num(c):
            return cursor.read_number()

        if is_alpha(c):
            return scope.resolve(cursor.read_identifier())

        raise SigmaSyntaxError(f"unexpected char {c!r}")
    finally:
        ctx.leave()
