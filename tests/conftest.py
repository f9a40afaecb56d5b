import pytest

from schemer.interpreter import Interpreter
from schemer.printer import to_source
from schemer.types.environment import Environment


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source text and return the printed result."""
    def _run(source: str) -> str:
        return to_source(interp.eval(source))
    return _run


@pytest.fixture
def env():
    return Environment.empty()


@pytest.fixture
def narrow_numbers(monkeypatch):
    # 8-bit numbers make the overflow boundary easy to reach
    monkeypatch.setenv("SCHEMER_NUMBER_BITS", "8")
    return 255
