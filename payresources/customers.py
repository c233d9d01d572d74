"""Parameters for customer payment sources, payment methods and balance transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Mapping, Sequence

from payresources.currency import Currency

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
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


def _expand_list(expand: Sequence[str]) -> list[str]:
    if isinstance(expand, str):
        raise TypeError("expand must be a sequence of field names, not a single string")
    return list(expand)


class CustomerPaymentMethodRetrievalType(StrEnum):
    """The payment method types a customer's payment methods can be listed by."""

    ACSS_DEBIT = "acss_debit"
    AFTERPAY_CLEARPAY = "afterpay_clearpay"
    ALIPAY = "alipay"
    AU_BECS_DEBIT = "au_becs_debit"
    BACS_DEBIT = "bacs_debit"
    BANCONTACT = "bancontact"
    BOLETO = "boleto"
    CARD = "card"
    EPS = "eps"
    FPX = "fpx"
    GIROPAY = "giropay"
    GRABPAY = "grabpay"
    IDEAL = "ideal"
    KLARNA = "klarna"
    OXXO = "oxxo"
    P24 = "p24"
    SEPA_DEBIT = "sepa_debit"
    SOFORT = "sofort"
    WECHAT_PAY = "wechat_pay"


@dataclass
class CustomerPaymentMethodRetrieval:
    """Parameters for listing a customer's payment methods of one type."""

    type_: CustomerPaymentMethodRetrievalType
    ending_before: str | None = None
    expand: Sequence[str] = field(default_factory=list)
    limit: int | None = None
    starting_after: str | None = None

    def __post_init__(self) -> None:
        self.type_ = CustomerPaymentMethodRetrievalType(self.type_)
        self.expand = _expand_list(self.expand)
        _check_int(self.limit, "limit", _I32_MIN, _I32_MAX)

    def to_params(self) -> dict[str, Any]:
        """The query parameters; unset fields and an empty expand are left out."""
        params: dict[str, Any] = {}
        if self.ending_before is not None:
            params["ending_before"] = self.ending_before
        if self.expand:
            params["expand"] = list(self.expand)
        if self.limit is not None:
            params["limit"] = self.limit
        if self.starting_after is not None:
            params["starting_after"] = self.starting_after
        params["type"] = str(self.type_)
        return params


@dataclass
class VerifyBankAccount:
    """Parameters for verifying a customer's bank account."""

    amounts: Sequence[int] | None = None
    verification_method: str | None = None

    def __post_init__(self) -> None:
        if self.amounts is not None:
            self.amounts = list(self.amounts)
            for amount in self.amounts:
                _check_int(amount, "amount", _I64_MIN, _I64_MAX)

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; unset fields are left out."""
        params: dict[str, Any] = {}
        if self.amounts is not None:
            params["amounts"] = list(self.amounts)
        if self.verification_method is not None:
            params["verification_method"] = self.verification_method
        return params


@dataclass
class ListCustomerBalanceTransactions:
    """Parameters for listing a customer's balance transactions."""

    expand: Sequence[str] = field(default_factory=list)
    ending_before: str | None = None
    limit: int | None = None
    starting_after: str | None = None

    def __post_init__(self) -> None:
        self.expand = _expand_list(self.expand)
        _check_int(self.limit, "limit", 0, _U64_MAX)

    def set_last(self, item_id: str) -> None:
        """Continue the listing after the transaction with id ``item_id``."""
        self.starting_after = item_id

    def to_params(self) -> dict[str, Any]:
        """The query parameters; unset fields and an empty expand are left out."""
        params: dict[str, Any] = {}
        if self.expand:
            params["expand"] = list(self.expand)
        if self.ending_before is not None:
            params["ending_before"] = self.ending_before
        if self.limit is not None:
            params["limit"] = self.limit
        if self.starting_after is not None:
            params["starting_after"] = self.starting_after
        return params


@dataclass
class CreateCustomerBalanceTransaction:
    """Parameters for creating a customer balance transaction."""

    amount: int
    currency: Currency
    description: str | None = None
    metadata: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        if self.amount is None:
            raise TypeError("amount is required")
        _check_int(self.amount, "amount", _I64_MIN, _I64_MAX)
        self.currency = Currency.parse(str(self.currency))

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; unset optional fields are left out."""
        params: dict[str, Any] = {"amount": self.amount, "currency": str(self.currency)}
        if self.description is not None:
            params["description"] = self.description
        if self.metadata is not None:
            params["metadata"] = dict(self.metadata)
        return params


@dataclass
class UpdateCustomerBalanceTransaction:
    """Parameters for updating a customer balance transaction.

    Only the description and metadata can be changed.
    """

    description: str | None = None
    metadata: Mapping[str, str] | None = None

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; unset fields are left out."""
        params: dict[str, Any] = {}
        if self.description is not None:
            params["description"] = self.description
        if self.metadata is not None:
            params["metadata"] = dict(self.metadata)
        return params