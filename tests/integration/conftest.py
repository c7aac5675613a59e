import os
from collections.abc import Generator
from pathlib import Path

import pytest

from mediacapture.config.settings import Settings
from mediacapture.database.connection import close_pool, get_connection, init_pool
from mediacapture.database.repositories.upload_repository import PostgresUploadRepository
from mediacapture.storage.file_storage import FileStorage


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "mediacapture_test")
    return Settings(record_store="postgres")


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        PostgresUploadRepository().create_schema()
    except Exception as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def pg_repo(integration_pool: None) -> Generator[PostgresUploadRepository, None, None]:
    repo = PostgresUploadRepository()
    with get_connection() as conn:
        conn.execute("TRUNCATE uploads RESTART IDENTITY")
        conn.commit()
    yield repo
    with get_connection() as conn:
        conn.execute("TRUNCATE uploads RESTART IDENTITY")
        conn.commit()


@pytest.fixture
def disk_storage(tmp_path: Path) -> FileStorage:
    return FileStorage(tmp_path / "uploads")
