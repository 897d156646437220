from __future__ import annotations

import logging
import sqlite3
from decimal import Decimal
from typing import Optional

from domain.models import Account, AccountStatus
from domain.repositories import AccountDataStore
from infrastructure.db.account_rows import decode_payment_schemes, encode_payment_schemes

logger = logging.getLogger(__name__)


class SqliteAccountDataStore(AccountDataStore):
    """
    SQLite-backed implementation of `AccountDataStore`, used as the
    backup store.

    Balances are stored as TEXT so that decimal amounts round-trip
    without any floating point conversion.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._ensure_table()

    def _get_connection(self) -> sqlite3.Connection:
        return sqlite3.connect(self._db_path)

    def _ensure_table(self) -> None:
        with self._get_connection() as conn:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS accounts (
                    account_number TEXT PRIMARY KEY,
                    balance TEXT NOT NULL,
                    status TEXT NOT NULL,
                    allowed_payment_schemes TEXT NOT NULL DEFAULT ''
                )
                """
            )
            conn.commit()
        logger.debug("Ensured accounts table in %s", self._db_path)

    @staticmethod
    def _to_domain(row: sqlite3.Row) -> Account:
        return Account(
            account_number=str(row[0]),
            balance=Decimal(row[1]),
            status=AccountStatus(row[2]),
            allowed_payment_schemes=decode_payment_schemes(row[3]),
        )

    def get_account(self, account_number: str) -> Optional[Account]:
        with self._get_connection() as conn:
            cur = conn.cursor()
            cur.execute(
                """
                SELECT account_number, balance, status, allowed_payment_schemes
                FROM accounts
                WHERE account_number = ?
                """,
                (account_number,),
            )
            row = cur.fetchone()
            if not row:
                return None
            return self._to_domain(row)

    def add_account(self, account: Account) -> None:
        with self._get_connection() as conn:
            cur = conn.cursor()
            cur.execute(
                """
                INSERT OR IGNORE INTO accounts
                    (account_number, balance, status, allowed_payment_schemes)
                VALUES (?, ?, ?, ?)
                """,
                (
                    account.account_number,
                    str(account.balance),
                    account.status.value,
                    encode_payment_schemes(account.allowed_payment_schemes),
                ),
            )
            conn.commit()

    def update_account(self, account: Account) -> None:
        with self._get_connection() as conn:
            cur = conn.cursor()
            cur.execute(
                """
                INSERT INTO accounts
                    (account_number, balance, status, allowed_payment_schemes)
                VALUES (?, ?, ?, ?)
                ON CONFLICT (account_number)
                DO UPDATE SET
                    balance = excluded.balance,
                    status = excluded.status,
                    allowed_payment_schemes = excluded.allowed_payment_schemes
                """,
                (
                    account.account_number,
                    str(account.balance),
                    account.status.value,
                    encode_payment_schemes(account.allowed_payment_schemes),
                ),
            )
            conn.commit()
