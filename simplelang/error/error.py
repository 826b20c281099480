from dataclasses import dataclass, field
from typing import ClassVar, Type

from simplelang.error.communicator import Communicator, ErrorRaiser
from simplelang.util import Span


# Python exceptions to differentiate the stage in which errors are thrown
class CompilerException(Exception):
    pass


@dataclass
class CompilerError:
    program: str
    span: Span
    n_before: int = field(init=False, default=1)
    n_after: int = field(init=False, default=1)

    # Call __post_init__ using dataclass, to automatically add errors to the list
    def __post_init__(self) -> None:
        ErrorRaiser.ERRORS.append(self)

    def create_error(
        self, before: str = "", after: str = "", class_name="CompilerError"
    ):
        return Communicator.create_message(
            self.program,
            self.span,
            class_name,
            before,
            after,
            self.n_before,
            self.n_after,
        )

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        # Only "\n" starts a new line for the lexer
        lines = self.program.split("\n")
        if not 0 < self.span.start_ln <= len(lines):
            return ""
        error_line = lines[self.span.start_ln - 1]
        return error_line[self.span.start_col : self.span.end_col]


class UnrecoverableError(CompilerError):
    stage: ClassVar[Type[CompilerException]] = CompilerException

    # Add the error to the list, and immediately raise it
    def __post_init__(self) -> None:
        ErrorRaiser.ERRORS.append(self)
        Communicator.communicate(self.stage)
