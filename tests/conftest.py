from glob import glob
from typing import List

import pytest

from tests.test_util import data_path, open_file


@pytest.fixture(scope="session")
def assignments_program() -> str:
    return open_file(data_path("valid", "assignments.sl"))


@pytest.fixture(scope="session")
def nested_program() -> str:
    return open_file(data_path("valid", "nested.sl"))


def valid_files() -> List[str]:
    return sorted(glob(data_path("valid", "*.sl")))


def lexer_error_files() -> List[str]:
    return sorted(glob(data_path("lexer_error", "*.sl")))


def parser_error_files() -> List[str]:
    return sorted(glob(data_path("parser_error", "*.sl")))


@pytest.fixture(scope="session", params=valid_files())
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=lexer_error_files())
def lexer_error(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=parser_error_files())
def parser_error(request) -> str:
    return request.param
