import pytest

from synan.builtin.env_builtin import build_global_environment, default_primitives
from synan.interpreter import Interpreter


@pytest.fixture
def output():
    """Lines written by the display primitive."""
    return []


@pytest.fixture
def interp(output):
    return Interpreter(display=output.append)


@pytest.fixture
def global_env(output):
    return build_global_environment(default_primitives(output.append))
