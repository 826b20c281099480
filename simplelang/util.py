from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Span:
    ln: Tuple[int, int]
    col: Tuple[int, int]

    @property
    def start_ln(self) -> int:
        return self.ln[0]

    @property
    def end_ln(self) -> int:
        return self.ln[1]

    @property
    def start_col(self) -> int:
        return self.col[0]

    @property
    def end_col(self) -> int:
        return self.col[1]

    @property
    def multiline(self) -> bool:
        return self.start_ln != self.end_ln

    @property
    def lines_str(self) -> str:
        if self.multiline:
            return f"lines [{self.start_ln}-{self.end_ln}]"
        return f"line [{self.start_ln}]"

    @classmethod
    def default(cls):
        return cls(-1, (0, -1))

    def __init__(self, line_no: int | Tuple[int, int], span: Tuple[int, int]) -> None:
        if isinstance(line_no, int):
            self.ln = (line_no, line_no)
        else:
            self.ln = line_no
        self.col = span

    def __and__(self, other: Span) -> Span:
        # The columns follow whichever span starts (or ends) on the outer line
        if self.start_ln < other.start_ln:
            start_col = self.start_col
        elif self.start_ln > other.start_ln:
            start_col = other.start_col
        else:
            start_col = min(self.start_col, other.start_col)

        if self.end_ln > other.end_ln:
            end_col = self.end_col
        elif self.end_ln < other.end_ln:
            end_col = other.end_col
        else:
            end_col = max(self.end_col, other.end_col)

        return Span(
            line_no=(
                min(self.start_ln, other.start_ln),
                max(self.end_ln, other.end_ln),
            ),
            span=(start_col, end_col),
        )


class Colors:
    RED = "\033[31m"
    ENDC = "\033[m"
