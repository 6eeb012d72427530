from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.clockwise.clockwise.clocking.recorder import ClockingEventRecorder
from src.clockwise.clockwise.core.exceptions import ClassificationError, NotFoundError, ValidationError


def _request(**overrides):
    data = {"employeeId": "1", "clockInTime": "2024-07-30T09:01:00", "clockOutTime": "2024-07-30T17:05:00"}
    data.update(overrides)
    return data


def test_normal_shift_produces_log_without_anomaly(directory, classifier):
    log = ClockingEventRecorder(directory, classifier).record(_request())

    assert log.log_id.startswith("log_")
    assert log.employee_name == "Alice Johnson"
    assert log.clock_in_time == datetime(2024, 7, 30, 9, 1, tzinfo=timezone.utc)
    assert log.anomaly is None
    assert log.to_dict()["clockOutTime"] == "2024-07-30T17:05:00.000Z"


def test_short_shift_attaches_anomaly(directory, classifier):
    log = ClockingEventRecorder(directory, classifier).record(
        _request(employeeId="2", clockInTime="2024-07-30T08:55:00", clockOutTime="2024-07-30T12:30:00")
    )

    assert log.anomaly is not None
    assert log.anomaly.anomaly_type == "Short Shift"
    assert log.to_dict()["anomaly"]["isAnomaly"] is True


def test_timestamps_normalized_to_utc_before_classification(directory, classifier):
    ClockingEventRecorder(directory, classifier).record(
        _request(clockInTime="2024-07-30T11:01:00+02:00", clockOutTime="2024-07-30T19:05:00+02:00")
    )

    shift = classifier.calls[0]
    assert shift.clock_in == datetime(2024, 7, 30, 9, 1, tzinfo=timezone.utc)
    assert shift.to_request()["clockOutTime"] == "2024-07-30T17:05:00.000Z"


def test_unknown_employee_is_not_found(directory, classifier):
    with pytest.raises(NotFoundError, match="Employee not found"):
        ClockingEventRecorder(directory, classifier).record(_request(employeeId="999"))
    assert classifier.calls == []


@pytest.mark.parametrize(
    "overrides",
    [
        {"clockInTime": ""},
        {"clockInTime": "yesterday morning"},
        {"clockInTime": "0001-01-01T00:30:00+01:00"},
        {"clockOutTime": None},
        {"clockOutTime": 1722357900},
        {"employeeId": ""},
        {"employeeId": "999", "clockInTime": ""},
    ],
)
def test_invalid_submission_never_reaches_classifier(directory, classifier, overrides):
    with pytest.raises(ValidationError):
        ClockingEventRecorder(directory, classifier).record(_request(**overrides))
    assert classifier.calls == []


def test_missing_field_is_validation_error(directory, classifier):
    data = _request()
    del data["clockOutTime"]

    with pytest.raises(ValidationError):
        ClockingEventRecorder(directory, classifier).record(data)


def test_non_mapping_request_is_validation_error(directory, classifier):
    with pytest.raises(ValidationError):
        ClockingEventRecorder(directory, classifier).record(["1", "09:00", "17:00"])


def test_classifier_failure_aborts_submission(directory, make_classifier):
    recorder = ClockingEventRecorder(directory, make_classifier(error=ClassificationError("model down")))

    with pytest.raises(ClassificationError, match="model down"):
        recorder.record(_request())


def test_unexpected_classifier_crash_becomes_classification_error(directory, make_classifier):
    recorder = ClockingEventRecorder(directory, make_classifier(error=RuntimeError("boom")))

    with pytest.raises(ClassificationError) as exc_info:
        recorder.record(_request())
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_same_input_twice_gives_distinct_ids_same_verdict(directory, classifier):
    recorder = ClockingEventRecorder(directory, classifier)
    data = _request(clockInTime="2024-07-29T09:00:00", clockOutTime="2024-07-29T21:00:00")

    first = recorder.record(data)
    second = recorder.record(data)

    assert first.log_id != second.log_id
    assert first.anomaly == second.anomaly


def test_employee_name_is_a_snapshot(directory, classifier):
    recorder = ClockingEventRecorder(directory, classifier)
    log = recorder.record(_request())

    directory.rename("1", "Alice Smith")

    assert log.employee_name == "Alice Johnson"
    assert recorder.record(_request()).employee_name == "Alice Smith"


def test_naive_timestamps_use_local_timezone(directory, classifier):
    recorder = ClockingEventRecorder(directory, classifier, local_tz=timezone(timedelta(hours=7)))
    log = recorder.record(_request())

    assert log.clock_in_time == datetime(2024, 7, 30, 2, 1, tzinfo=timezone.utc)


def test_custom_id_factory(directory, classifier):
    log = ClockingEventRecorder(directory, classifier, id_factory=lambda: "log_fixed").record(_request())

    assert log.log_id == "log_fixed"
