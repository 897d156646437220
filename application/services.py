from __future__ import annotations

import logging
from decimal import MAX_PREC, Decimal, localcontext

from domain.models import MakePaymentRequest, MakePaymentResult
from domain.payment_rules import validate_account
from domain.repositories import AccountDataStore

logger = logging.getLogger(__name__)


def _debit(balance: Decimal, amount: Decimal) -> Decimal:
    # Exact subtraction regardless of how many digits the balance carries.
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        return balance - amount


class PaymentService:
    """
    Authorizes and applies single debits against accounts.

    The service holds one account data store for its lifetime and no other
    state, so one instance can be shared between callers. It does not lock
    around the read-modify-write of an account: two overlapping payments
    against the same account can both pass validation against the same
    balance.
    """

    def __init__(self, data_store: AccountDataStore) -> None:
        self._data_store = data_store

    def make_payment(self, request: MakePaymentRequest) -> MakePaymentResult:
        """
        Handle a payment request:
        - Load the debtor account.
        - Reject if it is missing, the scheme is not allowed, or the
          scheme-specific rule fails. Nothing is written in that case.
        - Otherwise debit the amount, persist the account and return it
          as re-read from the store.
        """

        account = self._data_store.get_account(request.debtor_account_number)

        error = validate_account(account, request)
        if error:
            logger.info(
                "Rejected %s payment of %s from account %s: %s",
                request.payment_scheme,
                request.amount,
                request.debtor_account_number,
                error,
            )
            return MakePaymentResult(success=False, error_message=error)

        account.balance = _debit(account.balance, request.amount)
        self._data_store.update_account(account)

        updated_account = self._data_store.get_account(request.debtor_account_number)
        logger.info(
            "Accepted %s payment of %s from account %s, new balance %s",
            request.payment_scheme,
            request.amount,
            request.debtor_account_number,
            updated_account.balance if updated_account else None,
        )

        return MakePaymentResult(success=True, updated_account=updated_account)
