from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

import psycopg2

from domain.models import Account, AccountStatus
from domain.repositories import AccountDataStore
from infrastructure.db.account_rows import decode_payment_schemes, encode_payment_schemes

logger = logging.getLogger(__name__)


class PostgresAccountDataStore(AccountDataStore):
    """
    Postgres-backed implementation of `AccountDataStore`, used as the
    primary store.

    It owns the `accounts` table. Balances are NUMERIC, which psycopg2
    returns as `Decimal`.
    """

    def __init__(self, db_params: dict) -> None:
        self._db_params = db_params
        self._ensure_table()

    def _get_connection(self):
        return psycopg2.connect(**self._db_params)

    def _ensure_table(self) -> None:
        with self._get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    CREATE TABLE IF NOT EXISTS accounts (
                        account_number TEXT PRIMARY KEY,
                        balance NUMERIC NOT NULL,
                        status TEXT NOT NULL,
                        allowed_payment_schemes TEXT NOT NULL DEFAULT ''
                    )
                    """
                )
                conn.commit()
        logger.debug("Ensured accounts table in database %s", self._db_params.get("dbname"))

    @staticmethod
    def _to_domain(row: tuple) -> Account:
        return Account(
            account_number=str(row[0]),
            balance=Decimal(row[1]),
            status=AccountStatus(row[2]),
            allowed_payment_schemes=decode_payment_schemes(row[3]),
        )

    def get_account(self, account_number: str) -> Optional[Account]:
        with self._get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    SELECT account_number, balance, status, allowed_payment_schemes
                    FROM accounts
                    WHERE account_number = %s
                    """,
                    (account_number,),
                )
                row = cur.fetchone()
                if not row:
                    return None
                return self._to_domain(row)

    def add_account(self, account: Account) -> None:
        with self._get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO accounts
                        (account_number, balance, status, allowed_payment_schemes)
                    VALUES (%s, %s, %s, %s)
                    ON CONFLICT (account_number) DO NOTHING
                    """,
                    (
                        account.account_number,
                        account.balance,
                        account.status.value,
                        encode_payment_schemes(account.allowed_payment_schemes),
                    ),
                )
                conn.commit()

    def update_account(self, account: Account) -> None:
        with self._get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO accounts
                        (account_number, balance, status, allowed_payment_schemes)
                    VALUES (%s, %s, %s, %s)
                    ON CONFLICT (account_number)
                    DO UPDATE SET
                        balance = EXCLUDED.balance,
                        status = EXCLUDED.status,
                        allowed_payment_schemes = EXCLUDED.allowed_payment_schemes
                    """,
                    (
                        account.account_number,
                        account.balance,
                        account.status.value,
                        encode_payment_schemes(account.allowed_payment_schemes),
                    ),
                )
                conn.commit()
