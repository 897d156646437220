from __future__ import annotations

from typing import Optional, Protocol

from .models import Account


class AccountDataStore(Protocol):
    """
    Where accounts live between payments, looked up by account number.

    A store hands back complete `Account` values: decimal balance, status
    and the set of allowed schemes, exactly as last written. The primary
    (Postgres) and backup (SQLite) stores both satisfy this contract, and
    the payment service cannot tell which one it was given.
    """

    def get_account(self, account_number: str) -> Optional[Account]:
        """Return the account with the given number, or None if not found."""

        ...

    def update_account(self, account: Account) -> None:
        """
        Persist the full account record keyed by its account number,
        overwriting any prior state.

        The write must be visible to a subsequent `get_account` call on
        the same store instance.
        """

        ...
