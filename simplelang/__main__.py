import argparse
import sys
from pprint import pprint
from typing import List, Optional

from icecream import ic

from simplelang import Lexer, Parser
from simplelang.error.error import CompilerException


def open_file(filename: str) -> str:
    with open(filename, "r", encoding="utf8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="simplelang",
        description="Scan and parse a SimpleLang program, and print it back out.",
    )
    parser.add_argument("file", help="path to the SimpleLang program")
    parser.add_argument(
        "--tokens", action="store_true", help="dump the scanned tokens to stderr"
    )
    parser.add_argument(
        "--tree", action="store_true", help="pretty-print the AST nodes"
    )
    args = parser.parse_args(argv)

    program = open_file(args.file)
    try:
        # Perform scanning on the input program
        lexer = Lexer(program)
        tokens = lexer.scan()
        if args.tokens:
            ic(tokens)

        # Perform parsing on the scanned tokens
        tree = Parser(program).parse(tokens)
    except CompilerException as e:
        print(str(e).strip(), file=sys.stderr)
        return 1

    if args.tree:
        pprint(tree)
    else:
        print(tree)
    return 0


if __name__ == "__main__":
    sys.exit(main())
