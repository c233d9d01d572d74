"""Status, usage and redirect-flow values for payment sources."""

from __future__ import annotations

from enum import StrEnum


class SourceStatus(StrEnum):
    """The possible values of a source's ``status`` field."""

    CANCELED = "canceled"
    CHARGEABLE = "chargeable"
    CONSUMED = "consumed"
    FAILED = "failed"
    PENDING = "pending"

    @classmethod
    def default(cls) -> SourceStatus:
        """The status used when none is given."""
        return cls.PENDING


class SourceUsage(StrEnum):
    """Whether a source can be used more than once."""

    REUSABLE = "reusable"
    SINGLE_USE = "single_use"


class SourceRedirectFlowFailureReason(StrEnum):
    """Why a source's redirect flow failed."""

    DECLINED = "declined"
    PROCESSING_ERROR = "processing_error"
    USER_ABORT = "user_abort"

    @classmethod
    def default(cls) -> SourceRedirectFlowFailureReason:
        """The failure reason used when none is given."""
        return cls.DECLINED


class SourceRedirectFlowStatus(StrEnum):
    """The possible values of a redirect flow's ``status`` field."""

    FAILED = "failed"
    NOT_REQUIRED = "not_required"
    PENDING = "pending"
    SUCCEEDED = "succeeded"

    @classmethod
    def default(cls) -> SourceRedirectFlowStatus:
        """The status used when none is given."""
        return cls.PENDING