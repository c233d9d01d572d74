import pytest

from payresources.currency import Currency, ParseCurrencyError
from payresources.payment_sources import (
    AttachPaymentMethod,
    BankAccountParams,
    CardParams,
    PaymentSourceKind,
    PaymentSourceParams,
)


def test_token_serialises_as_bare_id():
    params = PaymentSourceParams.token("tok_abc")
    assert params.kind is PaymentSourceKind.TOKEN
    assert params.to_json() == "tok_abc"


def test_source_serialises_as_bare_id():
    params = PaymentSourceParams.source("src_abc")
    assert params.kind is PaymentSourceKind.SOURCE
    assert params.to_json() == "src_abc"


def test_token_and_source_with_same_id_differ():
    assert PaymentSourceParams.token("x1") != PaymentSourceParams.source("x1")


def test_empty_source_id_rejected():
    with pytest.raises(ValueError):
        PaymentSourceParams.token("")


def test_bank_account_params_fields_and_tag():
    params = BankAccountParams(
        country="US",
        currency=Currency.USD,
        account_holder_name="Jane Doe",
        account_holder_type="individual",
        routing_number="ROUTING",
        account_number="ACCOUNT-NUMBER",
    ).to_params()
    assert params == {
        "object": "bank_account",
        "country": "US",
        "currency": "usd",
        "account_holder_name": "Jane Doe",
        "routing_number": "ROUTING",
        "account_number": "ACCOUNT-NUMBER",
    }


def test_bank_account_params_keeps_unset_optionals_as_none():
    params = BankAccountParams(country="GB", currency="gbp", account_number="ACCOUNT-NUMBER").to_params()
    assert params["account_holder_name"] is None
    assert params["routing_number"] is None
    assert "account_holder_type" not in params
    assert params["currency"] == "gbp"


def test_bank_account_params_rejects_unknown_currency():
    with pytest.raises(ParseCurrencyError):
        BankAccountParams(currency="zzz")


def test_card_params_fields_and_tag():
    params = CardParams(exp_month="12", exp_year="2017", number="0000", name="Jane Doe", cvc="000").to_params()
    assert params == {
        "object": "card",
        "exp_month": "12",
        "exp_year": "2017",
        "number": "0000",
        "name": "Jane Doe",
        "cvc": "000",
    }


def test_card_params_unset_optionals_are_none():
    params = CardParams(exp_month="1", exp_year="17", number="0000").to_params()
    assert params["name"] is None
    assert params["cvc"] is None
    assert list(params) == ["object", "exp_month", "exp_year", "number", "name", "cvc"]


def test_attach_payment_method_params():
    assert AttachPaymentMethod(customer="cus_123").to_params() == {"customer": "cus_123"}


def test_attach_payment_method_requires_customer():
    with pytest.raises(ValueError):
        AttachPaymentMethod(customer="")