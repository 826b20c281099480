from enum import Enum, auto
from string import ascii_letters, digits
from types import MappingProxyType


class Type(Enum):
    KEYWORD = auto()
    IDENTIFIER = auto()
    NUMBER = auto()
    OPERATOR = auto()
    SYMBOL = auto()
    END_OF_FILE = auto()

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        match self:
            case Type.IDENTIFIER:
                return "variable name"
            case Type.END_OF_FILE:
                return "end of file"
        return self.name.lower()

    def article_str(self) -> str:
        match self:
            case Type.OPERATOR | Type.END_OF_FILE:
                return f"an {self}"
            case _:
                return f"a {self}"


KEYWORDS = MappingProxyType(
    {
        "int": Type.KEYWORD,
        "if": Type.KEYWORD,
        "then": Type.KEYWORD,
        "else": Type.KEYWORD,
    }
)

OPERATORS = MappingProxyType(
    {
        "+": Type.OPERATOR,
        "-": Type.OPERATOR,
        "=": Type.OPERATOR,
        "==": Type.OPERATOR,
    }
)

# Not table-driven in the lexer, listed for the printer and the tests
SYMBOLS = frozenset(";()")

# ASCII only, the end-of-input sentinel "" is in none of these
LETTERS = frozenset(ascii_letters)
DIGITS = frozenset(digits)
ALPHANUMERICS = LETTERS | DIGITS
WHITESPACE = frozenset(" \t\n\r\v\f")
