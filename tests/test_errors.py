import pytest

from sigma.evaluation.evaluator import evaluate
from sigma.interpreter import Interpreter
from sigma.errors import (
    SigmaError,
    SigmaSyntaxError,
    SigmaUnboundSymbol,
    SigmaDepthError,
)


@pytest.mark.parametrize(
    "source,message",
    [
        ("", "empty expression"),
        ("   ", "empty expression"),
        ("(add 1 2", "empty expression"),
        ("(sub 1 2)", "expected the name of a callable"),
        ("( add 1 2)", "expected the name of a callable"),
        ("()", "expected the name of a callable"),
        (")", "unexpected char"),
        ("\t1", "unexpected char"),
        ("(let x 1 x )", "unexpected char"),
        ("(print 1 2)", "expected '\\)'"),
        ("(eq 1 2 3)", "expected '\\)'"),
        ("(let x 1 y)", "unbound reference: y"),
        ("-", "expected digits"),
    ]
)
def test_syntax_errors(source, message):
    with pytest.raises(SigmaError, match=message):
        evaluate(source)


def test_unterminated_let_binding():
    with pytest.raises(SigmaSyntaxError, match="empty expression"):
        evaluate("(let x 1 x")


def test_unbound_reference():
    with pytest.raises(SigmaUnboundSymbol, match="unbound reference: nope"):
        evaluate("(add 1 nope)")


def test_all_errors_share_a_base_class():
    for source in ["(foo)", "(div 1)", "(add (eq 1 1))", "zz"]:
        with pytest.raises(SigmaError):
            evaluate(source)


def test_depth_limit():
    source = "(add " * 50 + "1" + ")" * 50
    assert evaluate(source, max_depth=100) == 1
    with pytest.raises(SigmaDepthError):
        evaluate(source, max_depth=20)


def test_deep_nesting_never_leaks_recursion_error():
    source = "(add " * 5000 + "1" + ")" * 5000
    with pytest.raises(SigmaDepthError):
        evaluate(source)


def test_configured_depth_beyond_python_stack(monkeypatch):
    monkeypatch.setenv("SIGMA_MAX_DEPTH", "5000")
    source = "(let x 1 " * 1000 + "x" + ")" * 1000
    with pytest.raises(SigmaDepthError, match="too deeply"):
        evaluate(source)


def test_run_reports_depth_failure(monkeypatch, sink):
    monkeypatch.setenv("SIGMA_MAX_DEPTH", "5000")
    source = "(let x 1 " * 1000 + "x" + ")" * 1000
    assert Interpreter(sink=sink).run(source) == 1
    assert sink.getvalue().startswith("error: expression nested too deeply")


def test_space_before_closing_paren_of_let_and_eq():
    assert evaluate("(let 5   )") == 5
    assert evaluate("(eq 1 1 )") is True


def test_evaluations_do_not_share_state(sink):
    assert evaluate("(let x 1 x)") == 1
    # a second evaluation starts from the beginning of its own source
    assert evaluate("(mult 2 3)") == 6
    with pytest.raises(SigmaUnboundSymbol):
        evaluate("x")
