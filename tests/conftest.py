import pytest

from adhoc.types.environment import Environment
from adhoc.builtin import env_builtin


@pytest.fixture(autouse=True)
def _default_config(monkeypatch):
    # Tests start from the built-in defaults regardless of the caller's shell
    for var in ("ADHOC_ODD_PAIRS", "ADHOC_REST_MARKERS", "ADHOC_TYPE_KEY"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def env():
    env = Environment()
    env_builtin.register(env)
    return env
