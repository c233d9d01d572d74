"""Bank account status values."""

from __future__ import annotations

from enum import StrEnum


class BankAccountStatus(StrEnum):
    """The possible values of a bank account's ``status`` field."""

    ERRORED = "errored"
    NEW = "new"
    VALIDATED = "validated"
    VERIFICATION_FAILED = "verification_failed"
    VERIFIED = "verified"