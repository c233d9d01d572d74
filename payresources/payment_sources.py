"""Parameters for payment sources and for attaching payment methods to customers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from payresources.currency import Currency


def _check_required_str(value: Any, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, not {value!r}")
    if not value:
        raise ValueError(f"{name} must not be empty")


def _check_optional_str(value: Any, name: str) -> None:
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{name} must be a string, not {value!r}")


class PaymentSourceKind(StrEnum):
    """What the id in a PaymentSourceParams refers to."""

    TOKEN = "token"
    SOURCE = "source"


@dataclass(frozen=True)
class PaymentSourceParams:
    """A payment source given by id when creating a customer or attaching a source.

    Either a token, typically from a client-side form, or an existing source.
    On the wire it is the bare id.
    """

    kind: PaymentSourceKind
    id: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", PaymentSourceKind(self.kind))
        _check_required_str(self.id, "id")

    @classmethod
    def token(cls, token_id: str) -> PaymentSourceParams:
        """A payment method to be created from a token."""
        return cls(PaymentSourceKind.TOKEN, token_id)

    @classmethod
    def source(cls, source_id: str) -> PaymentSourceParams:
        """An existing source."""
        return cls(PaymentSourceKind.SOURCE, source_id)

    def to_json(self) -> str:
        """The value as it appears in a request: the id itself."""
        return self.id


@dataclass
class BankAccountParams:
    """Bank account details for creating a bank account payment source."""

    country: str = ""
    currency: Currency = Currency.USD
    account_holder_name: str | None = None
    account_holder_type: str | None = None
    routing_number: str | None = None
    account_number: str = ""

    def __post_init__(self) -> None:
        _check_optional_str(self.country, "country")
        _check_optional_str(self.account_number, "account_number")
        _check_optional_str(self.account_holder_name, "account_holder_name")
        _check_optional_str(self.account_holder_type, "account_holder_type")
        _check_optional_str(self.routing_number, "routing_number")
        self.currency = Currency.parse(str(self.currency))

    def to_params(self) -> dict[str, Any]:
        """The parameters to send, tagged with ``object``.

        Optional fields are always present, as None when unset; the account
        holder type is not sent.
        """
        return {
            "object": "bank_account",
            "country": self.country,
            "currency": str(self.currency),
            "account_holder_name": self.account_holder_name,
            "routing_number": self.routing_number,
            "account_number": self.account_number,
        }


@dataclass
class CardParams:
    """Card details for creating a card payment source."""

    exp_month: str = ""
    exp_year: str = ""
    number: str = ""
    name: str | None = None
    cvc: str | None = None

    def __post_init__(self) -> None:
        for name in ("exp_month", "exp_year", "number", "name", "cvc"):
            _check_optional_str(getattr(self, name), name)

    def to_params(self) -> dict[str, Any]:
        """The parameters to send, tagged with ``object``.

        Optional fields are always present, as None when unset.
        """
        return {
            "object": "card",
            "exp_month": self.exp_month,
            "exp_year": self.exp_year,
            "number": self.number,
            "name": self.name,
            "cvc": self.cvc,
        }


@dataclass
class AttachPaymentMethod:
    """Parameters for attaching a payment method to a customer."""

    customer: str

    def __post_init__(self) -> None:
        _check_required_str(self.customer, "customer")

    def to_params(self) -> dict[str, Any]:
        """The parameters to send."""
        return {"customer": self.customer}