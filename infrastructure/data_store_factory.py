from __future__ import annotations

import logging
from typing import Optional

from config import Settings
from domain.repositories import AccountDataStore
from infrastructure.db.account_data_store_postgres import PostgresAccountDataStore
from infrastructure.db.account_data_store_sqlite import SqliteAccountDataStore

logger = logging.getLogger(__name__)

BACKUP_DATA_STORE_TYPE = "Backup"


def get_data_store(data_store_type: Optional[str], settings: Settings) -> AccountDataStore:
    """
    Build the account data store selected by `data_store_type`.

    Only the exact value "Backup" selects the SQLite backup store; any other
    value, including None, selects the Postgres primary store.
    """

    if data_store_type == BACKUP_DATA_STORE_TYPE:
        logger.info("Using backup account data store at %s", settings.backup_db_path)
        return SqliteAccountDataStore(settings.backup_db_path)

    logger.info("Using primary account data store")
    return PostgresAccountDataStore(settings.postgres_params())
