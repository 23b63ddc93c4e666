"""Numeric forms: n-ary add/mult reductions and binary div."""

from __future__ import annotations

import math
import operator
from typing import Callable

from sigma import EvaluatorFn, RuntimeValue
from sigma.errors import SigmaArityError, SigmaTypeError
from sigma.runtime_context import RuntimeContext
from sigma.types.scope import Scope
from sigma.types.values import ValueKind, kind_of


def expect_number(value: RuntimeValue, form: str) -> float:
    kind = kind_of(value)
    if kind is not ValueKind.NUMBER:
        raise SigmaTypeError(f"{form} expected a number, got {kind}")
    return value


def reduce_numbers(
    ctx: RuntimeContext,
    scope: Scope,
    evaluate_fn: EvaluatorFn,
    form: str,
    initial: float,
    combine: Callable[[float, float], float],
) -> float:
    """Fold every operand up to the closing ')' into `initial`."""
    cursor = ctx.cursor
    result = initial
    while True:
        cursor.skip_spaces()
        if cursor.peek() == ")":
            return result
        result = combine(result, expect_number(evaluate_fn(ctx, scope), form))


def add_form(ctx: RuntimeContext, scope: Scope, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    return reduce_numbers(ctx, scope, evaluate_fn, "add", 0.0, operator.add)


def mult_form(ctx: RuntimeContext, scope: Scope, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    return reduce_numbers(ctx, scope, evaluate_fn, "mult", 1.0, operator.mul)


def ieee_divide(n: float, m: float) -> float:
    """n / m with IEEE-754 results for a zero divisor instead of ZeroDivisionError."""
    try:
        return n / m
    except ZeroDivisionError:
        if n == 0 or math.isnan(n):
            return math.nan
        return math.copysign(math.inf, n) * math.copysign(1.0, m)


def _binary_operand(ctx: RuntimeContext, scope: Scope, evaluate_fn: EvaluatorFn, form: str) -> float:
    cursor = ctx.cursor
    cursor.skip_spaces()
    if cursor.at_end() or cursor.peek() == ")":
        raise SigmaArityError("not enough arguments for binary op")
    return expect_number(evaluate_fn(ctx, scope), form)


def div_form(ctx: RuntimeContext, scope: Scope, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    n = _binary_operand(ctx, scope, evaluate_fn, "div")
    m = _binary_operand(ctx, scope, evaluate_fn, "div")

    cursor = ctx.cursor
    cursor.skip_spaces()
    if not cursor.at_end() and cursor.peek() != ")":
        raise SigmaArityError("too many arguments for binary op")
    return ieee_divide(n, m)
