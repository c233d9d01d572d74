import json

import pytest

from payresources.api_types import (
    ApiVersion,
    DelayDays,
    DelayDaysOther,
    OffSessionOther,
    PaymentIntentOffSession,
    Scheduled,
    ScheduledOther,
    UpTo,
    UpToOther,
)


def test_api_version_string():
    assert str(ApiVersion.V2023_08_16) == "2023-08-16"
    assert ApiVersion("2020-08-27") is ApiVersion.V2020_08_27


def test_api_version_names_match_values():
    for version in ApiVersion:
        assert ApiVersion(version.name[1:].replace("_", "-")) is version


def test_api_versions_are_sorted_and_unique():
    values = [v.value for v in ApiVersion]
    assert values == sorted(values)
    assert len(set(values)) == len(values)
    assert [ApiVersion(v) for v in values] == list(ApiVersion)


def test_api_version_unknown():
    with pytest.raises(ValueError):
        ApiVersion("1999-01-01")


def test_delay_days():
    assert DelayDays.days(7).to_json() == 7
    assert DelayDays.minimum().to_json() == "minimum"
    assert DelayDays.minimum().value is DelayDaysOther.MINIMUM


@pytest.mark.parametrize("delay", [DelayDays.days(0), DelayDays.days(30), DelayDays.minimum()])
def test_delay_days_round_trip(delay):
    encoded = json.dumps(delay.to_json())
    assert DelayDays.from_json(json.loads(encoded)) == delay


@pytest.mark.parametrize("bad", ["maximum", True, 1.5, None, -1])
def test_delay_days_rejects(bad):
    with pytest.raises((ValueError, TypeError)):
        DelayDays.from_json(bad)


def test_delay_days_range():
    with pytest.raises(ValueError):
        DelayDays.days(2**32)


def test_scheduled():
    assert Scheduled.now().to_json() == "now"
    assert Scheduled.now().value is ScheduledOther.NOW
    assert Scheduled.at(1_600_000_000).to_json() == 1_600_000_000


@pytest.mark.parametrize("sched", [Scheduled.now(), Scheduled.at(1_600_000_000), Scheduled.at(-5)])
def test_scheduled_round_trip(sched):
    assert Scheduled.from_json(sched.to_json()) == sched


def test_scheduled_rejects():
    with pytest.raises(ValueError):
        Scheduled.from_json("later")
    with pytest.raises(ValueError):
        Scheduled.from_json(False)


def test_up_to():
    assert UpTo.now().to_json() == "inf"
    assert UpTo.now().value is UpToOther.INF
    assert UpTo.max(100).to_json() == 100


@pytest.mark.parametrize("bound", [UpTo.now(), UpTo.max(0), UpTo.max(2**64 - 1)])
def test_up_to_round_trip(bound):
    assert UpTo.from_json(bound.to_json()) == bound


def test_up_to_rejects():
    with pytest.raises(ValueError):
        UpTo.from_json("infinity")
    with pytest.raises(ValueError):
        UpTo.max(-1)
    with pytest.raises(ValueError):
        UpTo.max(2**64)


def test_off_session():
    assert PaymentIntentOffSession.exists(True).to_json() is True
    assert PaymentIntentOffSession.frequency(OffSessionOther.ONE_OFF).to_json() == "one_off"
    assert PaymentIntentOffSession.frequency(OffSessionOther.RECURRING).to_json() == "recurring"


@pytest.mark.parametrize(
    "value",
    [
        PaymentIntentOffSession.exists(False),
        PaymentIntentOffSession.exists(True),
        PaymentIntentOffSession.frequency(OffSessionOther.ONE_OFF),
        PaymentIntentOffSession.frequency(OffSessionOther.RECURRING),
    ],
)
def test_off_session_round_trip(value):
    assert PaymentIntentOffSession.from_json(json.loads(json.dumps(value.to_json()))) == value


def test_off_session_rejects():
    with pytest.raises(ValueError):
        PaymentIntentOffSession.from_json(1)
    with pytest.raises(ValueError):
        PaymentIntentOffSession.from_json("sometimes")
    with pytest.raises(ValueError):
        PaymentIntentOffSession.frequency("sometimes")