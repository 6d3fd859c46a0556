import io

import pytest

from lispreter.interpreter import Interpreter
from lispreter.types.environment import Environment


@pytest.fixture
def env():
    """A fresh environment with the default primitive handler."""
    return Environment()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def interp(output):
    """An interpreter whose PRINT output is captured in `output`."""
    return Interpreter(output=output)
