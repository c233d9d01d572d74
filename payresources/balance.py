"""Status and fee type values for balance transactions."""

from __future__ import annotations

from enum import StrEnum


class BalanceTransactionStatus(StrEnum):
    """The possible values of a balance transaction's ``status`` field."""

    AVAILABLE = "available"
    PENDING = "pending"

    @classmethod
    def default(cls) -> BalanceTransactionStatus:
        """The status used when none is given."""
        return cls.PENDING


class FeeType(StrEnum):
    """The possible values of a fee's ``type`` field."""

    APPLICATION_FEE = "application_fee"
    STRIPE_FEE = "stripe_fee"
    TAX = "tax"

    @classmethod
    def default(cls) -> FeeType:
        """The fee type used when none is given."""
        return cls.APPLICATION_FEE