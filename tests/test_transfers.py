import pytest

from payresources.transfers import CreateLoginLink, CreateTransferReversal


def test_reversal_default_is_empty():
    assert CreateTransferReversal().to_params() == {}


def test_reversal_full():
    params = CreateTransferReversal(
        amount=500,
        description="partial",
        metadata={"order": "42"},
        refund_application_fee=True,
    ).to_params()
    assert params == {
        "amount": 500,
        "description": "partial",
        "metadata": {"order": "42"},
        "refund_application_fee": True,
    }


def test_reversal_metadata_is_copied():
    meta = {"k": "v"}
    params = CreateTransferReversal(metadata=meta).to_params()
    params["metadata"]["k"] = "changed"
    assert meta == {"k": "v"}


def test_reversal_rejects_negative_amount():
    with pytest.raises(ValueError):
        CreateTransferReversal(amount=-5)


def test_login_link_default_is_empty():
    assert CreateLoginLink().to_params() == {}


def test_login_link_with_redirect():
    params = CreateLoginLink(redirect_url="https://example.com/back").to_params()
    assert params == {"redirect_url": "https://example.com/back"}


def test_login_link_with_expand():
    params = CreateLoginLink(expand=("account",)).to_params()
    assert params == {"expand": ["account"]}


def test_login_link_rejects_string_expand():
    with pytest.raises(TypeError):
        CreateLoginLink(expand="account")