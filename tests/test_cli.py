from simplelang.__main__ import main
from tests.test_util import data_path


def test_prints_program(capsys):
    assert main([data_path("valid", "declarations.sl")]) == 0
    out = capsys.readouterr().out
    assert out == "int x;\nint y;\nint counter2;\n"


def test_tree(capsys):
    assert main([data_path("valid", "declarations.sl"), "--tree"]) == 0
    out = capsys.readouterr().out
    assert "ProgramNode(" in out and "DeclarationNode(value='counter2'" in out


def test_tokens(capsys):
    assert main([data_path("valid", "declarations.sl"), "--tokens"]) == 0
    captured = capsys.readouterr()
    assert "counter2" in captured.err
    assert captured.out.startswith("int x;")


def test_lexer_error(capsys):
    assert main([data_path("lexer_error", "unknown_character.sl")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "LexicalError" in captured.err and "'*'" in captured.err


def test_parser_error(capsys):
    assert main([data_path("parser_error", "missing_then.sl")]) == 1
    err = capsys.readouterr().err
    assert "SyntaxError" in err and "Expected 'then' after condition" in err
