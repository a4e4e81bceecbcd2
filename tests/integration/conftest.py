import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from indenture.config.settings import Settings
from indenture.database.connection import close_pool, conninfo_from, get_connection, init_pool
from indenture.database.schema import ensure_schema

TEST_USER_PREFIX = "itest-"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "indenture_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        psycopg.connect(conninfo_from(test_settings), connect_timeout=3).close()
    except psycopg.Error as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    init_pool(test_settings)
    try:
        ensure_schema()
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def owner_id(integration_pool: None, request: pytest.FixtureRequest) -> Generator[str, None, None]:
    """A per-test owner whose rows are removed afterwards."""
    user_id = f"{TEST_USER_PREFIX}{request.node.name}"[:100]
    yield user_id
    with get_connection() as conn:
        conn.execute("DELETE FROM summaries WHERE user_id = %s", (user_id,))
        conn.execute("DELETE FROM documents WHERE user_id = %s", (user_id,))
        conn.commit()
