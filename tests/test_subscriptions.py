import pytest

from payresources.subscriptions import CancelSubscription, CreateUsageRecord, UsageRecordAction


def test_cancel_default_is_empty():
    assert CancelSubscription().to_params() == {}


@pytest.mark.parametrize("flag", [True, False])
def test_cancel_with_flag(flag):
    assert CancelSubscription(at_period_end=flag).to_params() == {"at_period_end": flag}


def test_cancel_rejects_non_bool():
    with pytest.raises(TypeError):
        CancelSubscription(at_period_end="yes")


def test_usage_record_action_values():
    assert UsageRecordAction("increment") is UsageRecordAction.INCREMENT
    assert UsageRecordAction("set") is UsageRecordAction.SET


def test_usage_record_default_quantity_only():
    assert CreateUsageRecord().to_params() == {"quantity": 0}


def test_usage_record_full():
    params = CreateUsageRecord(quantity=7, action="set", timestamp=1_600_000_000).to_params()
    assert params == {"quantity": 7, "action": "set", "timestamp": 1_600_000_000}


def test_usage_record_rejects_negative_quantity():
    with pytest.raises(ValueError):
        CreateUsageRecord(quantity=-1)


def test_usage_record_rejects_unknown_action():
    with pytest.raises(ValueError):
        CreateUsageRecord(quantity=1, action="decrement")