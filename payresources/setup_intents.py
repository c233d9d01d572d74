"""Parameters for confirming and canceling setup intents."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


def _check_optional_str(value: Any, name: str) -> None:
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{name} must be a string, not {value!r}")


@dataclass
class ConfirmSetupIntent:
    """Parameters for confirming a setup intent."""

    client_secret: str | None = None
    payment_method: str | None = None
    redirect_url: str | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_optional_str(getattr(self, f.name), f.name)

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; unset fields are left out."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class CancelSetupIntent:
    """Parameters for canceling a setup intent."""

    cancellation_reason: str | None = None

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; an unset reason is left out."""
        if self.cancellation_reason is None:
            return {}
        return {"cancellation_reason": str(self.cancellation_reason)}