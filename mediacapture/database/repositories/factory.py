from mediacapture.config.settings import Settings
from mediacapture.database.connection import init_pool, pool_initialized
from mediacapture.database.repositories.base import BaseUploadRepository
from mediacapture.database.repositories.memory_upload_repository import (
    InMemoryUploadRepository,
)
from mediacapture.database.repositories.upload_repository import PostgresUploadRepository


class UploadRepositoryFactory:
    """Creates the configured upload record store."""

    STORES = ("memory", "postgres")

    @classmethod
    def create(cls, settings: Settings) -> BaseUploadRepository:
        store = settings.record_store.lower()
        if store == "memory":
            return InMemoryUploadRepository()
        if store == "postgres":
            if not pool_initialized():
                init_pool(settings)
            repo = PostgresUploadRepository()
            repo.create_schema()
            return repo
        raise ValueError(
            f"Unknown record store '{store}'. Choose from: {list(cls.STORES)}"
        )
