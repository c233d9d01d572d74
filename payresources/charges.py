"""Parameters for capturing a charge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_U64_MAX = 2**64 - 1


def _check_amount(value: Any, name: str) -> None:
    if value is None:
        return
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {value!r}")
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"{name} out of range: {value}")


@dataclass
class CaptureCharge:
    """Parameters for capturing a charge created with capture set to false."""

    amount: int | None = None
    application_fee: int | None = None
    receipt_email: str | None = None
    statement_descriptor: str | None = None

    def __post_init__(self) -> None:
        _check_amount(self.amount, "amount")
        _check_amount(self.application_fee, "application_fee")

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; unset fields are left out."""
        params: dict[str, Any] = {}
        for name in ("amount", "application_fee", "receipt_email", "statement_descriptor"):
            value = getattr(self, name)
            if value is not None:
                params[name] = value
        return params


def capture_path(charge_id: str) -> str:
    """The request path that captures the charge ``charge_id``."""
    if not charge_id:
        raise ValueError("charge id must not be empty")
    return f"/charges/{charge_id}/capture"