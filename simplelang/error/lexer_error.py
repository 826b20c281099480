from simplelang.error.error import CompilerException, UnrecoverableError


class LexerException(CompilerException):
    pass


class LexicalError(UnrecoverableError):
    stage = LexerException

    def create_error(self, before: str, after=""):
        return super().create_error(before, class_name="LexicalError", after=after)


class UnknownTokenError(LexicalError):
    def __str__(self) -> str:
        return self.create_error(
            f"Unknown token {self.error_chars!r} on {self.span.lines_str}."
        )
