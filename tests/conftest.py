import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any logging configuration a test (e.g. a CLI run) applied."""
    yield
    structlog.reset_defaults()
