import pytest

from payresources.sources import (
    SourceRedirectFlowFailureReason,
    SourceRedirectFlowStatus,
    SourceStatus,
    SourceUsage,
)


def test_source_status_default():
    assert SourceStatus.default() is SourceStatus.PENDING


def test_failure_reason_default():
    assert SourceRedirectFlowFailureReason.default() is SourceRedirectFlowFailureReason.DECLINED


def test_redirect_status_default():
    assert SourceRedirectFlowStatus.default() is SourceRedirectFlowStatus.PENDING


def test_snake_case_wire_values():
    assert SourceUsage("single_use") is SourceUsage.SINGLE_USE
    assert (
        SourceRedirectFlowFailureReason("processing_error")
        is SourceRedirectFlowFailureReason.PROCESSING_ERROR
    )
    assert SourceRedirectFlowStatus("not_required") is SourceRedirectFlowStatus.NOT_REQUIRED
    assert str(SourceUsage.SINGLE_USE) == "single_use"


@pytest.mark.parametrize(
    "enum_cls",
    [SourceStatus, SourceUsage, SourceRedirectFlowFailureReason, SourceRedirectFlowStatus],
)
def test_round_trip_every_member(enum_cls):
    for member in enum_cls:
        assert enum_cls(str(member)) is member


def test_source_status_members():
    assert [m.value for m in SourceStatus] == [
        "canceled",
        "chargeable",
        "consumed",
        "failed",
        "pending",
    ]
    assert SourceStatus("chargeable") is SourceStatus.CHARGEABLE
    assert str(SourceStatus.default()) == "pending"


def test_unknown_usage_rejected():
    with pytest.raises(ValueError):
        SourceUsage("multi_use")