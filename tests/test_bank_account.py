import pytest

from payresources.bank_account import BankAccountStatus


def test_wire_values():
    assert BankAccountStatus("verification_failed") is BankAccountStatus.VERIFICATION_FAILED
    assert str(BankAccountStatus("verification_failed")) == "verification_failed"
    assert str(BankAccountStatus("new")) == "new"


def test_lookup_by_value():
    assert BankAccountStatus("verified") is BankAccountStatus.VERIFIED
    assert BankAccountStatus("errored") is BankAccountStatus.ERRORED


@pytest.mark.parametrize("status", list(BankAccountStatus))
def test_round_trip(status):
    assert BankAccountStatus(str(status)) is status


@pytest.mark.parametrize("status", list(BankAccountStatus))
def test_value_is_snake_case_of_name(status):
    assert BankAccountStatus(status.name.lower()) is status


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        BankAccountStatus("Verified")