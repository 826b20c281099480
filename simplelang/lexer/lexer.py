from typing import List

from simplelang.error.lexer_error import UnknownTokenError
from simplelang.token import Token
from simplelang.util import Span

from simplelang.type import (  # isort:skip
    ALPHANUMERICS,
    DIGITS,
    KEYWORDS,
    LETTERS,
    OPERATORS,
    SYMBOLS,
    WHITESPACE,
    Type,
)

# Returned by `peek` and `advance` once the cursor is past the end of the program
END = ""


class Lexer:
    def __init__(self, program: str) -> None:
        self.og_program = program
        self.pos = 0
        # Position of the cursor for spans: 1-based lines, 0-based columns
        self.line_no = 1
        self.col = 0

    def peek(self) -> str:
        return self.og_program[self.pos] if self.pos < len(self.og_program) else END

    def advance(self) -> str:
        if self.pos >= len(self.og_program):
            return END
        char = self.og_program[self.pos]
        self.pos += 1
        if char == "\n":
            self.line_no += 1
            self.col = 0
        else:
            self.col += 1
        return char

    def next_token(self) -> Token:
        """Scan the next token, starting from the current cursor position.

        Whitespace in front of the token is skipped. Once the end of the program is reached,
        every call returns an END_OF_FILE token with empty text.

        Raises:
            LexerException: If the current character does not start any token.

        Returns:
            Token: The next token in the program.
        """
        while self.peek() in WHITESPACE:
            self.advance()

        start_ln, start_col = self.line_no, self.col
        char = self.peek()

        if char in LETTERS:
            text = ""
            while self.peek() in ALPHANUMERICS:
                text += self.advance()
            return self.token(text, KEYWORDS.get(text, Type.IDENTIFIER), start_col)

        if char in DIGITS:
            text = ""
            while self.peek() in DIGITS:
                text += self.advance()
            return self.token(text, Type.NUMBER, start_col)

        if char in OPERATORS:
            text = self.advance()
            # "==" is the only operator longer than one character
            if text == "=" and self.peek() == "=":
                text += self.advance()
            return self.token(text, OPERATORS[text], start_col)

        if char in SYMBOLS:
            return self.token(self.advance(), Type.SYMBOL, start_col)

        if char == END:
            return self.token("", Type.END_OF_FILE, start_col)

        UnknownTokenError(self.og_program, Span(start_ln, (start_col, start_col + 1)))

    def token(self, text: str, type: Type, start_col: int) -> Token:
        return Token(text, type, Span(self.line_no, (start_col, self.col)))

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the program passed to `Lexer(program)`.

        The END_OF_FILE token that ends the scan is not included in the list.

        Raises:
            LexerException: On the first character that does not start any token.

        Returns:
            List[Token]: A list of Token instances
        """
        tokens = []
        token = self.next_token()
        while token.type != Type.END_OF_FILE:
            tokens.append(token)
            token = self.next_token()
        return tokens
