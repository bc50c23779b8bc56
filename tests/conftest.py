import pytest
from rowbridge.statement import register_sqlite_adapters


@pytest.fixture(scope='session', autouse=True)
def sqlite_adapters():
    """Register sqlite3 parameter adapters once for the whole session."""
    register_sqlite_adapters()


pytest_plugins = [
    'tests.fixtures.mocks',
    'tests.fixtures.sqlite',
]
