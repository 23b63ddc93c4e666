import io

import pytest


# Configuration is read from the environment; make sure a developer's shell
# settings never leak into the test run.
@pytest.fixture(autouse=True)
def _clean_sigma_env(monkeypatch):
    for var in ("SIGMA_DIAGNOSTIC_STREAM", "SIGMA_MAX_DEPTH", "SIGMA_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sink():
    """In-memory diagnostic stream for print forms."""
    return io.StringIO()
