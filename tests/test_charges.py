import pytest

from payresources.charges import CaptureCharge, capture_path


def test_capture_path():
    assert capture_path("ch_123") == "/charges/ch_123/capture"


def test_capture_path_rejects_empty_id():
    with pytest.raises(ValueError):
        capture_path("")


def test_empty_capture_has_no_params():
    assert CaptureCharge().to_params() == {}


def test_capture_with_all_fields():
    params = CaptureCharge(
        amount=1000,
        application_fee=50,
        receipt_email="buyer@example.com",
        statement_descriptor="SHOP",
    )
    assert params.to_params() == {
        "amount": 1000,
        "application_fee": 50,
        "receipt_email": "buyer@example.com",
        "statement_descriptor": "SHOP",
    }


def test_capture_leaves_out_unset_fields():
    result = CaptureCharge(amount=7).to_params()
    assert result == {"amount": 7}
    assert "receipt_email" not in result


def test_capture_rejects_negative_amount():
    with pytest.raises(ValueError):
        CaptureCharge(amount=-1)


def test_capture_rejects_non_int_fee():
    with pytest.raises(TypeError):
        CaptureCharge(application_fee="5")