from __future__ import annotations
from dataclasses import dataclass
from typing import TextIO

from sigma.errors import SigmaDepthError
from sigma.reader.cursor import Cursor


# One context per top-level evaluation. The cursor lives here rather than in
# a module global so that evaluations never share reading position.
@dataclass
class RuntimeContext:
    cursor: Cursor
    sink: TextIO
    max_depth: int
    depth: int = 0

    def enter(self) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise SigmaDepthError(
                f"expression nested deeper than {self.max_depth} levels: {self.cursor.rest()}"
            )

    def leave(self) -> None:
        self.depth -= 1
