import pytest

from lumen.types.environment import Environment
from lumen.reader.parser import parse
from lumen.evaluation.evaluator import evaluate


@pytest.fixture
def env():
    """Fresh global environment with no builtins."""
    return Environment()


@pytest.fixture
def run(env):
    """Parse and evaluate source text against the `env` fixture."""
    def _run(source: str):
        return evaluate(parse(source), env)
    return _run
