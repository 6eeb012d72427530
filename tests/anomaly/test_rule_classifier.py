from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.clockwise.clockwise.anomaly.classifier import RuleBasedClassifier
from src.clockwise.clockwise.anomaly.model import ShiftInput
from src.clockwise.clockwise.anomaly.rules.long_shift import LongShiftRule
from src.clockwise.clockwise.anomaly.rules.short_shift import ShortShiftRule


def _shift(clock_in: str, clock_out: str) -> ShiftInput:
    return ShiftInput(
        employee_id="1",
        clock_in=datetime.fromisoformat(clock_in).replace(tzinfo=timezone.utc),
        clock_out=datetime.fromisoformat(clock_out).replace(tzinfo=timezone.utc),
    )


def test_regular_shift_is_normal():
    verdict = RuleBasedClassifier().classify(_shift("2024-07-30T09:01:00", "2024-07-30T17:05:00"))

    assert verdict.is_anomaly is False
    assert verdict.anomaly_type is None
    assert "normal shift" in verdict.explanation


def test_short_shift_wins_over_early_finish():
    verdict = RuleBasedClassifier().classify(_shift("2024-07-30T08:55:00", "2024-07-30T12:30:00"))

    assert verdict.is_anomaly is True
    assert verdict.anomaly_type == "Short Shift"
    assert "3.6 hours" in verdict.explanation


def test_twelve_hour_shift_is_long():
    verdict = RuleBasedClassifier().classify(_shift("2024-07-29T09:00:00", "2024-07-29T21:00:00"))

    assert verdict.is_anomaly is True
    assert verdict.anomaly_type == "Long Shift"


def test_long_shift_wins_over_late_start():
    verdict = RuleBasedClassifier().classify(_shift("2024-07-30T10:00:00", "2024-07-30T20:00:00"))

    assert verdict.anomaly_type == "Long Shift"


def test_exactly_six_hours_does_not_trigger_short_shift_rule():
    shift = _shift("2024-07-30T11:00:00", "2024-07-30T17:00:00")

    assert ShortShiftRule().check(shift, local_tz=timezone.utc) is None
    # 11:00 start still fires the start-time rule on its own.
    assert RuleBasedClassifier().classify(shift).anomaly_type == "Late Start"


def test_exactly_nine_hours_is_normal():
    shift = _shift("2024-07-30T08:00:00", "2024-07-30T17:00:00")

    assert LongShiftRule().check(shift, local_tz=timezone.utc) is None
    assert RuleBasedClassifier().classify(shift).is_anomaly is False


def test_just_over_nine_hours_is_long():
    shift = _shift("2024-07-30T08:00:00", "2024-07-30T17:00:01")

    assert RuleBasedClassifier().classify(shift).anomaly_type == "Long Shift"


def test_late_start_after_half_past_nine():
    verdict = RuleBasedClassifier().classify(_shift("2024-07-30T09:45:00", "2024-07-30T17:45:00"))

    assert verdict.anomaly_type == "Late Start"
    assert "09:45" in verdict.explanation


def test_clock_in_at_half_past_nine_is_not_late():
    verdict = RuleBasedClassifier().classify(_shift("2024-07-30T09:30:00", "2024-07-30T17:30:00"))

    assert verdict.is_anomaly is False


def test_early_finish_before_five():
    verdict = RuleBasedClassifier().classify(_shift("2024-07-30T08:00:00", "2024-07-30T16:30:00"))

    assert verdict.anomaly_type == "Early Finish"


def test_late_start_ranks_above_early_finish():
    verdict = RuleBasedClassifier().classify(_shift("2024-07-30T10:00:00", "2024-07-30T16:30:00"))

    assert verdict.anomaly_type == "Late Start"


def test_time_of_day_rules_use_local_timezone():
    # 02:00Z-10:30Z is 09:00-17:30 at UTC+7.
    shift = _shift("2024-07-30T02:00:00", "2024-07-30T10:30:00")

    assert RuleBasedClassifier(local_tz=timezone(timedelta(hours=7))).classify(shift).is_anomaly is False
    assert RuleBasedClassifier().classify(shift).anomaly_type == "Early Finish"


@pytest.mark.parametrize(
    "clock_in, clock_out",
    [
        ("2024-07-30T09:01:00", "2024-07-30T17:05:00"),
        ("2024-07-30T08:55:00", "2024-07-30T12:30:00"),
        ("2024-07-29T09:00:00", "2024-07-29T21:00:00"),
        ("2024-07-30T09:45:00", "2024-07-30T17:45:00"),
        ("2024-07-30T08:00:00", "2024-07-30T16:30:00"),
    ],
)
def test_explanation_is_one_sentence(clock_in, clock_out):
    verdict = RuleBasedClassifier().classify(_shift(clock_in, clock_out))

    assert verdict.explanation
    assert verdict.explanation.endswith(".")
    assert ". " not in verdict.explanation
    if verdict.is_anomaly:
        assert 2 <= len(verdict.anomaly_type.split()) <= 3
