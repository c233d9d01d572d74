"""Parameters for canceling subscriptions and recording metered usage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _check_int(value: Any, name: str, low: int, high: int) -> None:
    if value is None:
        return
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} out of range: {value}")


@dataclass
class CancelSubscription:
    """Parameters for canceling a subscription."""

    at_period_end: bool | None = None

    def __post_init__(self) -> None:
        if self.at_period_end is not None and not isinstance(self.at_period_end, bool):
            raise TypeError(f"at_period_end must be a bool, not {self.at_period_end!r}")

    def to_params(self) -> dict[str, Any]:
        """The query parameters; an unset flag is left out."""
        if self.at_period_end is None:
            return {}
        return {"at_period_end": self.at_period_end}


class UsageRecordAction(StrEnum):
    """How a usage quantity combines with what is already recorded."""

    INCREMENT = "increment"
    SET = "set"


@dataclass
class CreateUsageRecord:
    """Parameters for recording usage on a subscription item.

    Without an action the API increments; without a timestamp it uses now.
    """

    quantity: int = 0
    action: UsageRecordAction | None = None
    timestamp: int | None = None

    def __post_init__(self) -> None:
        _check_int(self.quantity, "quantity", 0, _U64_MAX)
        if self.quantity is None:
            raise TypeError("quantity is required")
        if self.action is not None:
            self.action = UsageRecordAction(self.action)
        _check_int(self.timestamp, "timestamp", _I64_MIN, _I64_MAX)

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; unset optional fields are left out."""
        params: dict[str, Any] = {"quantity": self.quantity}
        if self.action is not None:
            params["action"] = str(self.action)
        if self.timestamp is not None:
            params["timestamp"] = self.timestamp
        return params