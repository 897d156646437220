from __future__ import annotations

from typing import Callable, Mapping, Optional

from .models import Account, AccountStatus, MakePaymentRequest, PaymentScheme


SchemeRule = Callable[[Account, MakePaymentRequest], bool]


def is_scheme_allowed(account: Account, request: MakePaymentRequest) -> bool:
    return request.payment_scheme in account.allowed_payment_schemes


def _bacs_rule(account: Account, request: MakePaymentRequest) -> bool:
    # Bacs only requires the scheme to be allowed on the account.
    return True


def _faster_payments_rule(account: Account, request: MakePaymentRequest) -> bool:
    # Funds check only; account status is not considered.
    return account.balance >= request.amount


def _chaps_rule(account: Account, request: MakePaymentRequest) -> bool:
    # Status check only; the balance may go negative.
    return account.status == AccountStatus.Live


SCHEME_RULES: Mapping[PaymentScheme, SchemeRule] = {
    PaymentScheme.Bacs: _bacs_rule,
    PaymentScheme.FasterPayments: _faster_payments_rule,
    PaymentScheme.Chaps: _chaps_rule,
}

_SCHEME_RULE_FAILURES: Mapping[PaymentScheme, str] = {
    PaymentScheme.FasterPayments: "Insufficient funds for a Faster Payments debit.",
    PaymentScheme.Chaps: "Account must be live to make a CHAPS payment.",
}


def validate_account(
    account: Optional[Account],
    request: MakePaymentRequest,
) -> Optional[str]:
    """
    Decide whether `account` may be debited for `request`.

    Returns None when the debit is permitted, otherwise a short reason:
    - The account does not exist.
    - The requested scheme is not in the account's allowed schemes.
    - The scheme-specific rule rejects the account.

    A scheme with no entry in `SCHEME_RULES` is rejected.
    """

    if account is None:
        return "Account not found."

    if not is_scheme_allowed(account, request):
        return f"Payment scheme {request.payment_scheme.value} is not allowed for this account."

    rule = SCHEME_RULES.get(request.payment_scheme)
    if rule is None:
        return f"No rule is defined for payment scheme {request.payment_scheme.value}."

    if not rule(account, request):
        return _SCHEME_RULE_FAILURES.get(
            request.payment_scheme,
            f"Account is not eligible for a {request.payment_scheme.value} payment.",
        )

    return None
