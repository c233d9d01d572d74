"""Card brands and card funding types."""

from __future__ import annotations

from enum import StrEnum


class CardBrand(StrEnum):
    """The brand of a card, as the API names it."""

    AMERICAN_EXPRESS = "American Express"
    DINERS_CLUB = "Diners Club"
    DISCOVER = "Discover"
    JCB = "JCB"
    VISA = "Visa"
    MASTER_CARD = "MasterCard"
    UNION_PAY = "UnionPay"
    # Also stands for any brand not listed here.
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: str) -> CardBrand:
        """Return the brand for ``value``, or UNKNOWN if it is not recognised."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def default(cls) -> CardBrand:
        """The brand used when none is given."""
        return cls.UNKNOWN


class CardType(StrEnum):
    """How a card is funded."""

    CREDIT = "credit"
    DEBIT = "debit"
    PREPAID = "prepaid"
    # Also stands for any type not listed here.
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> CardType:
        """Return the type for ``value``, or UNKNOWN if it is not recognised."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def default(cls) -> CardType:
        """The type used when none is given."""
        return cls.UNKNOWN