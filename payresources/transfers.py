"""Parameters for transfer reversals and connected-account login links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

_U64_MAX = 2**64 - 1


@dataclass
class CreateTransferReversal:
    """Parameters for reversing all or part of a transfer."""

    amount: int | None = None
    description: str | None = None
    metadata: Mapping[str, str] | None = None
    refund_application_fee: bool | None = None

    def __post_init__(self) -> None:
        if self.amount is not None:
            if not isinstance(self.amount, int) or isinstance(self.amount, bool):
                raise TypeError(f"amount must be an int, not {self.amount!r}")
            if not 0 <= self.amount <= _U64_MAX:
                raise ValueError(f"amount out of range: {self.amount}")
        if self.refund_application_fee is not None and not isinstance(
            self.refund_application_fee, bool
        ):
            raise TypeError(
                f"refund_application_fee must be a bool, not {self.refund_application_fee!r}"
            )

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; unset fields are left out."""
        params: dict[str, Any] = {}
        if self.amount is not None:
            params["amount"] = self.amount
        if self.description is not None:
            params["description"] = self.description
        if self.metadata is not None:
            params["metadata"] = dict(self.metadata)
        if self.refund_application_fee is not None:
            params["refund_application_fee"] = self.refund_application_fee
        return params


@dataclass
class CreateLoginLink:
    """Parameters for creating a dashboard login link for a connected account."""

    expand: Sequence[str] = field(default_factory=list)
    redirect_url: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.expand, str):
            raise TypeError("expand must be a sequence of field names, not a single string")
        self.expand = list(self.expand)

    def to_params(self) -> dict[str, Any]:
        """The parameters to send; an empty expand and an unset URL are left out."""
        params: dict[str, Any] = {}
        if self.expand:
            params["expand"] = list(self.expand)
        if self.redirect_url is not None:
            params["redirect_url"] = self.redirect_url
        return params