import pytest

from payresources.currency import Currency
from payresources.payment_intents import (
    CancelPaymentIntent,
    CaptureMethod,
    CapturePaymentIntent,
    ConfirmationMethod,
    PaymentError,
    PaymentErrorType,
    PaymentIntentConfirmParams,
    PaymentIntentMethodType,
    PaymentIntentNextActionType,
    PaymentIntentUpdateParams,
)


def test_error_type_wire_names():
    assert PaymentErrorType.parse("api_error") is PaymentErrorType.API
    assert PaymentErrorType.parse("api_connection_error") is PaymentErrorType.CONNECTION
    assert PaymentErrorType.parse("card_error") is PaymentErrorType.CARD
    assert PaymentErrorType.parse("rate_limit_error") is PaymentErrorType.RATE_LIMIT


def test_error_type_unknown_falls_back_to_other():
    assert PaymentErrorType.parse("brand_new_error") is PaymentErrorType.OTHER


@pytest.mark.parametrize(
    "enum_cls", [CaptureMethod, ConfirmationMethod, PaymentIntentNextActionType]
)
def test_open_enums_round_trip_and_fallback(enum_cls):
    for member in enum_cls:
        assert enum_cls.parse(member.value) is member
    assert enum_cls.parse("not-a-real-value") is enum_cls.OTHER


def test_capture_method_values():
    assert CaptureMethod.parse("manual") is CaptureMethod.MANUAL
    assert PaymentIntentNextActionType.parse("use_stripe_sdk") is (
        PaymentIntentNextActionType.USE_STRIPE_SDK
    )


def test_method_type_is_closed():
    assert PaymentIntentMethodType("sepa_debit") is PaymentIntentMethodType.SEPA_DEBIT
    with pytest.raises(ValueError):
        PaymentIntentMethodType("other")


def test_payment_error_round_trip():
    data = {
        "type": "card_error",
        "charge": "ch_1",
        "code": "card_declined",
        "decline_code": "generic_decline",
        "doc_url": None,
        "message": "Your card was declined.",
        "param": None,
        "source": "card_1",
    }
    error = PaymentError.from_dict(data)
    assert error.payment_error_type is PaymentErrorType.CARD
    assert error.code == "card_declined"
    assert error.to_dict() == data


def test_payment_error_missing_optionals_become_none():
    error = PaymentError.from_dict({"type": "api_error"})
    assert error.to_dict()["message"] is None
    assert error.source is None


def test_payment_error_source_object_kept():
    error = PaymentError.from_dict({"type": "api_error", "source": {"id": "src_1"}})
    assert error.to_dict()["source"] == {"id": "src_1"}


def test_payment_error_requires_type():
    with pytest.raises(ValueError):
        PaymentError.from_dict({"message": "x"})


def test_payment_error_other_cannot_be_sent():
    error = PaymentError.from_dict({"type": "mystery_error"})
    assert error.payment_error_type is PaymentErrorType.OTHER
    with pytest.raises(ValueError):
        error.to_dict()


def test_update_params_skip_unset():
    params = PaymentIntentUpdateParams(
        amount=2000, currency=Currency.EUR, metadata={"order": "42"}
    )
    assert params.to_params() == {
        "amount": 2000,
        "currency": "eur",
        "metadata": {"order": "42"},
    }


def test_update_params_empty():
    assert PaymentIntentUpdateParams().to_params() == {}


def test_update_params_reject_bad_currency_and_amount():
    with pytest.raises(ValueError):
        PaymentIntentUpdateParams(currency="xyz")
    with pytest.raises(ValueError):
        PaymentIntentUpdateParams(amount=-1)


def test_confirm_params():
    params = PaymentIntentConfirmParams(
        receipt_email="buyer@example.com", save_source_to_customer=False
    )
    assert params.to_params() == {
        "receipt_email": "buyer@example.com",
        "save_source_to_customer": False,
    }


def test_capture_params():
    assert CapturePaymentIntent().to_params() == {}
    assert CapturePaymentIntent(amount_to_capture=500).to_params() == {"amount_to_capture": 500}
    with pytest.raises(TypeError):
        CapturePaymentIntent(application_fee_amount="10")


def test_cancel_params():
    assert CancelPaymentIntent().to_params() == {}
    assert CancelPaymentIntent("duplicate").to_params() == {"cancellation_reason": "duplicate"}