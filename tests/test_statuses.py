import pytest

from payresources.statuses import (
    OrderStatusFilter,
    ReviewReason,
    TokenType,
    WebhookEndpointStatus,
)


def test_token_type_strings():
    assert str(TokenType.BANK_ACCOUNT) == "bank_account"
    assert TokenType("pii") is TokenType.PII


def test_token_type_default():
    assert TokenType.default() is TokenType.ACCOUNT


def test_webhook_endpoint_status():
    assert str(WebhookEndpointStatus.ENABLED) == "enabled"
    assert WebhookEndpointStatus("disabled") is WebhookEndpointStatus.DISABLED


def test_order_status_filter():
    assert str(OrderStatusFilter.FULFILLED) == "fulfilled"
    assert OrderStatusFilter("refunded") is OrderStatusFilter.REFUNDED


def test_review_reason():
    assert str(ReviewReason.REFUNDED_AS_FRAUD) == "refunded_as_fraud"
    assert ReviewReason.default() is ReviewReason.APPROVED


@pytest.mark.parametrize(
    "enum_cls", [TokenType, WebhookEndpointStatus, OrderStatusFilter, ReviewReason]
)
def test_round_trip_and_snake_case(enum_cls):
    for member in enum_cls:
        assert enum_cls(str(member)) is member
        assert member.value == member.name.lower()


@pytest.mark.parametrize(
    "enum_cls, bad",
    [
        (TokenType, "Account"),
        (WebhookEndpointStatus, "paused"),
        (OrderStatusFilter, "shipped"),
        (ReviewReason, "unknown"),
    ],
)
def test_unknown_value_rejected(enum_cls, bad):
    with pytest.raises(ValueError):
        enum_cls(bad)