from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Settings:
    """Runtime configuration read from the environment (and `.env`)."""

    data_store_type: Optional[str] = None
    backup_db_path: str = "accounts_backup.db"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "payments"
    postgres_user: str = "postgres"
    postgres_password: str = ""
    log_level: str = "INFO"

    def postgres_params(self) -> dict:
        """Keyword arguments for `psycopg2.connect`."""

        return {
            "host": self.postgres_host,
            "port": self.postgres_port,
            "dbname": self.postgres_db,
            "user": self.postgres_user,
            "password": self.postgres_password,
        }


def load_settings() -> Settings:
    load_dotenv()

    return Settings(
        data_store_type=os.environ.get("DATA_STORE_TYPE"),
        backup_db_path=os.environ.get("BACKUP_DB_PATH", "accounts_backup.db"),
        postgres_host=os.environ.get("POSTGRES_HOST", "localhost"),
        postgres_port=int(os.environ.get("POSTGRES_PORT", "5432")),
        postgres_db=os.environ.get("POSTGRES_DB", "payments"),
        postgres_user=os.environ.get("POSTGRES_USER", "postgres"),
        postgres_password=os.environ.get("POSTGRES_PASSWORD", ""),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
