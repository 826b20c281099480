from dataclasses import dataclass

from simplelang.error.error import CompilerException, UnrecoverableError
from simplelang.token import Token
from simplelang.type import Type


class ParserException(CompilerException):
    pass


@dataclass
class ParseError(UnrecoverableError):
    nt: str
    got: Token

    stage = ParserException

    def create_error(self, before: str):
        if self.got.type == Type.END_OF_FILE:
            after = "Reached the end of the program instead."
        else:
            after = f"Got {self.got.text!r} ({self.got.type.article_str()}) instead."
        return super().create_error(before, after, class_name="SyntaxError")

    @property
    def str_nt(self) -> str:
        match self.nt:
            case "Declaration":
                return "variable declaration"
            case "Assignment":
                return "assignment"
            case "Conditional":
                return "condition"
            case "Expression":
                return "expression"
            case _:
                raise Exception(
                    f"Attempted to print out {self.nt!r} as extended string, but no such format exists."
                )


class DeclarationNameError(ParseError):
    def __str__(self) -> str:
        return self.create_error(
            f"Expected variable name after 'int' on {self.span.lines_str}."
        )


class AssignmentNameError(ParseError):
    def __str__(self) -> str:
        return self.create_error(
            f"Expected variable name for assignment on {self.span.lines_str}."
        )


class MissingSemicolonError(ParseError):
    def __str__(self) -> str:
        return self.create_error(
            f"Expected ';' after {self.str_nt} on {self.span.lines_str}."
        )


class MissingAssignError(ParseError):
    def __str__(self) -> str:
        return self.create_error(
            f"Expected '=' in assignment on {self.span.lines_str}."
        )


class MissingNumberError(ParseError):
    def __str__(self) -> str:
        return self.create_error(
            f"Expected a number in expression on {self.span.lines_str}."
        )


class MissingThenError(ParseError):
    def __str__(self) -> str:
        return self.create_error(
            f"Expected 'then' after {self.str_nt} on {self.span.lines_str}."
        )
