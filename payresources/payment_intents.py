"""Payment intent value types and the parameters for confirming, capturing and canceling."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Any, Mapping

from payresources.currency import Currency

_U64_MAX = 2**64 - 1


def _parse_open(cls: type[StrEnum], value: str) -> Any:
    """Return the member of ``cls`` for ``value``, or its OTHER member."""
    try:
        return cls(value)
    except ValueError:
        return cls["OTHER"]


def _wire(value: StrEnum) -> str:
    if value.name == "OTHER":
        raise ValueError(f"{type(value).__name__}.OTHER cannot be sent in a request")
    return str(value)


class PaymentErrorType(StrEnum):
    """The kind of error that stopped a payment."""

    API = "api_error"
    CONNECTION = "api_connection_error"
    AUTHENTICATION = "authentication_error"
    CARD = "card_error"
    IDEMPOTENCY = "idempotency_error"
    INVALID_REQUEST = "invalid_request_error"
    RATE_LIMIT = "rate_limit_error"
    # A value not listed here; it is an error to send it.
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> PaymentErrorType:
        """Return the member for ``value``, or OTHER if it is not recognised."""
        return _parse_open(cls, value)


class PaymentIntentMethodType(StrEnum):
    """How a payment intent is to be fulfilled."""

    CARD = "card"
    IDEAL = "ideal"
    SEPA_DEBIT = "sepa_debit"


class CaptureMethod(StrEnum):
    """Whether funds are captured automatically or by hand."""

    AUTOMATIC = "automatic"
    MANUAL = "manual"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> CaptureMethod:
        """Return the member for ``value``, or OTHER if it is not recognised."""
        return _parse_open(cls, value)


class ConfirmationMethod(StrEnum):
    """Which key may confirm a payment intent."""

    SECRET = "secret"
    PUBLISHABLE = "publishable"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> ConfirmationMethod:
        """Return the member for ``value``, or OTHER if it is not recognised."""
        return _parse_open(cls, value)


class PaymentIntentNextActionType(StrEnum):
    """What the customer must do next to complete a payment."""

    REDIRECT_TO_URL = "redirect_to_url"
    USE_STRIPE_SDK = "use_stripe_sdk"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> PaymentIntentNextActionType:
        """Return the member for ``value``, or OTHER if it is not recognised."""
        return _parse_open(cls, value)


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, not {value!r}")
    return value


def _check_amount(value: Any, name: str) -> None:
    if value is None:
        return
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {value!r}")
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"{name} out of range: {value}")


def _param_value(value: Any) -> Any:
    if isinstance(value, StrEnum):
        return _wire(value)
    if isinstance(value, Mapping):
        return dict(value)
    return value


def _present(obj: Any) -> dict[str, Any]:
    return {
        f.name: _param_value(getattr(obj, f.name))
        for f in fields(obj)
        if getattr(obj, f.name) is not None
    }


@dataclass
class PaymentError:
    """The last error seen while trying to pay a payment intent."""

    payment_error_type: PaymentErrorType
    charge: str | None = None
    code: str | None = None
    decline_code: str | None = None
    doc_url: str | None = None
    message: str | None = None
    param: str | None = None
    source: str | Mapping[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PaymentError:
        """Build an error from a decoded JSON mapping; ``type`` is required."""
        if "type" not in data:
            raise ValueError("missing field: type")
        kind = data["type"]
        if not isinstance(kind, str):
            raise ValueError(f"field 'type' must be a string, not {kind!r}")
        source = data.get("source")
        if source is not None and not isinstance(source, (str, Mapping)):
            raise ValueError(f"field 'source' must be an id or an object, not {source!r}")
        return cls(
            payment_error_type=PaymentErrorType.parse(kind),
            charge=_optional_str(data, "charge"),
            code=_optional_str(data, "code"),
            decline_code=_optional_str(data, "decline_code"),
            doc_url=_optional_str(data, "doc_url"),
            message=_optional_str(data, "message"),
            param=_optional_str(data, "param"),
            source=dict(source) if isinstance(source, Mapping) else source,
        )

    def to_dict(self) -> dict[str, Any]:
        """The error as a JSON-ready mapping; unset fields appear as None."""
        result: dict[str, Any] = {"type": _wire(self.payment_error_type)}
        for name in ("charge", "code", "decline_code", "doc_url", "message", "param"):
            result[name] = getattr(self, name)
        result["source"] = dict(self.source) if isinstance(self.source, Mapping) else self.source
        return result


@dataclass
class PaymentIntentUpdateParams:
    """Parameters for updating a payment intent."""

    amount: int | None = None
    application_fee_amount: int | None = None
    currency: Currency | None = None
    customer: str | None = None
    description: str | None = None
    metadata: Mapping[str, str] | None = None
    receipt_email: str | None = None
    save_source_to_customer: bool | None = None
    shipping: Mapping[str, Any] | None = None
    source: str | None = None
    transfer_group: str | None = None

    def __post_init__(self) -> None:
        _check_amount(self.amount, "amount")
        _check_amount(self.application_fee_amount, "application_fee_amount")
        if self.currency is not None:
            self.currency = Currency.parse(str(self.currency))

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; unset fields are left out."""
        return _present(self)


@dataclass
class PaymentIntentConfirmParams:
    """Parameters for confirming a payment intent."""

    receipt_email: str | None = None
    return_url: str | None = None
    save_source_to_customer: bool | None = None
    shipping: Mapping[str, Any] | None = None
    source: str | None = None

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; unset fields are left out."""
        return _present(self)


@dataclass
class CapturePaymentIntent:
    """Parameters for capturing an uncaptured payment intent."""

    amount_to_capture: int | None = None
    application_fee_amount: int | None = None

    def __post_init__(self) -> None:
        _check_amount(self.amount_to_capture, "amount_to_capture")
        _check_amount(self.application_fee_amount, "application_fee_amount")

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; unset fields are left out."""
        return _present(self)


@dataclass
class CancelPaymentIntent:
    """Parameters for canceling a payment intent."""

    cancellation_reason: str | None = None

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; an unset reason is left out."""
        if self.cancellation_reason is None:
            return {}
        return {"cancellation_reason": str(self.cancellation_reason)}