import pytest

from payresources.setup_intents import CancelSetupIntent, ConfirmSetupIntent


def test_confirm_empty_when_nothing_set():
    assert ConfirmSetupIntent().to_params() == {}


def test_confirm_includes_only_set_fields():
    params = ConfirmSetupIntent(client_secret="secret", payment_method="pm_1").to_params()
    assert params == {"client_secret": "secret", "payment_method": "pm_1"}


def test_confirm_all_fields():
    params = ConfirmSetupIntent(
        client_secret="secret", payment_method="pm_1", redirect_url="https://example.com/done"
    ).to_params()
    assert params["redirect_url"] == "https://example.com/done"
    assert len(params) == 3


def test_confirm_rejects_non_string():
    with pytest.raises(TypeError):
        ConfirmSetupIntent(payment_method=5)


def test_cancel_without_reason():
    assert CancelSetupIntent().to_params() == {}


def test_cancel_with_reason():
    params = CancelSetupIntent(cancellation_reason="abandoned").to_params()
    assert params == {"cancellation_reason": "abandoned"}