import os
from glob import glob
from typing import List

import pytest

from tests.test_util import ROOT, open_file


@pytest.fixture(scope="session")
def factorial_program() -> str:
    return open_file("data/valid/test2.fl")


@pytest.fixture(scope="session")
def prog_program() -> str:
    return open_file("data/valid/test4.fl")


def valid_files() -> List[str]:
    return sorted(
        os.path.relpath(file, ROOT) for file in glob(os.path.join(ROOT, "data/valid/*.fl"))
    )


def invalid_files() -> List[str]:
    return sorted(
        os.path.relpath(file, ROOT)
        for file in glob(os.path.join(ROOT, "data/invalid/*.fl"))
    )


@pytest.fixture(scope="session", params=valid_files())
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=invalid_files())
def invalid_file(request) -> str:
    return request.param
