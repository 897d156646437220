from __future__ import annotations

from typing import FrozenSet, Iterable

from domain.models import PaymentScheme


def encode_payment_schemes(schemes: Iterable[PaymentScheme]) -> str:
    """
    Encode an allowed-schemes set for storage.

    Format: comma-separated scheme names in declaration order,
    e.g. "Bacs,Chaps". An empty set is stored as "".
    """

    allowed = set(schemes)
    return ",".join(s.value for s in PaymentScheme if s in allowed)


def decode_payment_schemes(data: str) -> FrozenSet[PaymentScheme]:
    if not data:
        return frozenset()
    # Unknown names raise ValueError from the enum lookup.
    return frozenset(PaymentScheme(name.strip()) for name in data.split(",") if name.strip())
