"""Parameters for upcoming invoices and invoice line items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from payresources.currency import Currency

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1


def _check_int(value: Any, name: str, low: int, high: int) -> None:
    if value is None:
        return
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} out of range: {value}")


def _check_bool(value: Any, name: str) -> None:
    if value is not None and not isinstance(value, bool):
        raise TypeError(f"{name} must be a bool, not {value!r}")


@dataclass
class SubscriptionItemFilter:
    """A subscription item to preview on an upcoming invoice."""

    id: str | None = None
    deleted: bool | None = None
    metadata: Mapping[str, str] | None = None
    plan: str | None = None
    quantity: int | None = None

    def __post_init__(self) -> None:
        _check_bool(self.deleted, "deleted")
        _check_int(self.quantity, "quantity", 0, _U64_MAX)

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; unset fields are left out."""
        params: dict[str, Any] = {}
        if self.id is not None:
            params["id"] = self.id
        if self.deleted is not None:
            params["deleted"] = self.deleted
        if self.metadata is not None:
            params["metadata"] = dict(self.metadata)
        if self.plan is not None:
            params["plan"] = self.plan
        if self.quantity is not None:
            params["quantity"] = self.quantity
        return params


@dataclass
class RetrieveUpcomingInvoice:
    """Parameters for previewing a customer's upcoming invoice."""

    customer: str
    coupon: str | None = None
    subscription: str | None = None
    subscription_items: SubscriptionItemFilter | None = None
    subscription_prorate: bool | None = None
    subscription_proration_date: int | None = None
    subscription_tax_percent: float | None = None
    subscription_trial_end: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.customer, str) or not self.customer:
            raise ValueError("customer is required")
        _check_bool(self.subscription_prorate, "subscription_prorate")
        _check_int(self.subscription_proration_date, "subscription_proration_date", _I64_MIN, _I64_MAX)
        _check_int(self.subscription_trial_end, "subscription_trial_end", _I64_MIN, _I64_MAX)
        if self.subscription_tax_percent is not None:
            if isinstance(self.subscription_tax_percent, bool) or not isinstance(
                self.subscription_tax_percent, (int, float)
            ):
                raise TypeError(
                    f"subscription_tax_percent must be a number, not {self.subscription_tax_percent!r}"
                )
            self.subscription_tax_percent = float(self.subscription_tax_percent)

    def to_params(self) -> dict[str, Any]:
        """The query parameters; unset optional fields are left out."""
        params: dict[str, Any] = {"customer": self.customer}
        if self.coupon is not None:
            params["coupon"] = self.coupon
        if self.subscription is not None:
            params["subscription"] = self.subscription
        if self.subscription_items is not None:
            params["subscription_items"] = self.subscription_items.to_params()
        for name in (
            "subscription_prorate",
            "subscription_proration_date",
            "subscription_tax_percent",
            "subscription_trial_end",
        ):
            value = getattr(self, name)
            if value is not None:
                params[name] = value
        return params


@dataclass
class CreateInvoiceLineItem:
    """Parameters for creating an invoice line item."""

    amount: int | None = None
    currency: Currency | None = None
    customer: str | None = None
    description: str | None = None
    discountable: bool | None = None
    invoice: str | None = None
    subscription: bool | None = None

    def __post_init__(self) -> None:
        _check_int(self.amount, "amount", _I64_MIN, _I64_MAX)
        if self.currency is not None:
            self.currency = Currency.parse(str(self.currency))
        _check_bool(self.discountable, "discountable")
        _check_bool(self.subscription, "subscription")

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; unset fields are left out."""
        params: dict[str, Any] = {}
        for name in (
            "amount",
            "currency",
            "customer",
            "description",
            "discountable",
            "invoice",
            "subscription",
        ):
            value = getattr(self, name)
            if value is None:
                continue
            params[name] = str(value) if isinstance(value, Currency) else value
        return params