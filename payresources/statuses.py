"""Status and type values for tokens, webhook endpoints, orders and reviews."""

from __future__ import annotations

from enum import StrEnum


class TokenType(StrEnum):
    """The possible values of a token's ``type`` field."""

    ACCOUNT = "account"
    BANK_ACCOUNT = "bank_account"
    CARD = "card"
    PII = "pii"

    @classmethod
    def default(cls) -> TokenType:
        """The type used when none is given."""
        return cls.ACCOUNT


class WebhookEndpointStatus(StrEnum):
    """The possible values of a webhook endpoint's ``status`` field."""

    DISABLED = "disabled"
    ENABLED = "enabled"


class OrderStatusFilter(StrEnum):
    """The order statuses a listing can be filtered by."""

    CREATED = "created"
    FULFILLED = "fulfilled"
    PAID = "paid"
    REFUNDED = "refunded"


class ReviewReason(StrEnum):
    """The possible values of a review's ``reason`` field."""

    APPROVED = "approved"
    DISPUTED = "disputed"
    MANUAL = "manual"
    REFUNDED = "refunded"
    REFUNDED_AS_FRAUD = "refunded_as_fraud"
    RULE = "rule"

    @classmethod
    def default(cls) -> ReviewReason:
        """The reason used when none is given."""
        return cls.APPROVED