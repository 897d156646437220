from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import FrozenSet, Optional


class AccountStatus(str, Enum):
    Live = "Live"
    Disabled = "Disabled"
    InboundPaymentsOnly = "InboundPaymentsOnly"


class PaymentScheme(str, Enum):
    """Outbound payment rail requested for a single debit."""

    Bacs = "Bacs"
    FasterPayments = "FasterPayments"
    Chaps = "Chaps"


@dataclass
class Account:
    """
    Debit-eligible account as held by an account data store.

    `allowed_payment_schemes` is a set: an account may allow several
    schemes at once, and eligibility is decided by membership.
    The balance may be negative (overdrawn).
    """

    account_number: str
    balance: Decimal
    status: AccountStatus
    allowed_payment_schemes: FrozenSet[PaymentScheme] = frozenset()


@dataclass
class MakePaymentRequest:
    """
    A requested debit against `debtor_account_number`.

    The creditor and payment date travel with the request but are not
    evaluated when authorizing the debit.
    """

    debtor_account_number: str
    amount: Decimal
    payment_scheme: PaymentScheme
    creditor_account_number: Optional[str] = None
    payment_date: datetime = field(default_factory=datetime.now)


@dataclass
class MakePaymentResult:
    """Outcome of a payment; `updated_account` is only set on success."""

    success: bool
    updated_account: Optional[Account] = None
    error_message: Optional[str] = None
