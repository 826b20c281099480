import sys

from simplelang.lexer.lexer import Lexer
from simplelang.parser.parser import Parser
from simplelang.token import Token
from simplelang.tree.tree import NodeType, ProgramNode
from simplelang.type import Type

# Default is 1000
sys.setrecursionlimit(5000)
