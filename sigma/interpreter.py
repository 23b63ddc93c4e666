from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from sigma import RuntimeValue
from sigma import config
from sigma.errors import SigmaError
from sigma.evaluation.evaluator import evaluate
from sigma.types.scope import Scope
from sigma.types.values import format_value

logger = logging.getLogger(__name__)

EXAMPLE_SOURCE = "(let a 1 b 1 (print (eq a b)))"


class Interpreter:
    """
    Evaluates Sigma source strings.
    Every call starts from a fresh root scope and a fresh cursor, so nothing
    carries over between evaluations.
    """

    def __init__(self, sink: Optional[TextIO] = None, max_depth: Optional[int] = None):
        self._sink = sink
        self.max_depth: int = max_depth if max_depth is not None else config.get_max_depth()

    @property
    def sink(self) -> TextIO:
        # resolved lazily so a captured/redirected stream is picked up
        return self._sink if self._sink is not None else config.get_diagnostic_stream()

    def eval(self, code: str) -> RuntimeValue:
        """Evaluate the top-level expression in `code`, raising SigmaError on failure."""
        logger.debug("evaluating %r", code)
        return evaluate(code, Scope(), sink=self.sink, max_depth=self.max_depth)

    def run(self, code: str) -> int:
        """Evaluate `code` and report `<source> => <result>` to the sink.

        Returns a process exit status: 0 on success, 1 when evaluation failed.
        """
        sink = self.sink
        try:
            result = self.eval(code)
        except SigmaError as e:
            logger.info("evaluation of %r failed: %s", code, e)
            print(f"error: {e}", file=sink)
            return 1
        print(f"{code} => {format_value(result)}", file=sink)
        return 0


def main() -> int:
    logging.basicConfig(level=config.get_log_level())
    return Interpreter().run(EXAMPLE_SOURCE)


#  Example use-age:
if __name__ == "__main__":
    sys.exit(main())
