"""Tests for the progress state model and the daily rollover."""

import datetime as dt

import pytest
from pydantic import ValidationError

from draftcount.domain.progress import (
    NO_CHALLENGE_NAME,
    HistoryEntry,
    NewDayStarted,
    PendingEntry,
    ProjectState,
    roll_over,
)

TODAY = dt.date(2024, 3, 14)


class TestProjectState:
    """Tests for ProjectState defaults, projections and JSON shape."""

    def test_fresh_state_defaults(self) -> None:
        state = ProjectState.fresh(TODAY)

        assert state.goal == 0
        assert state.challenge_name == NO_CHALLENGE_NAME
        assert state.daily_count == 0
        assert state.last_update_date == TODAY
        assert state.history == []
        assert state.pending_chars == []
        assert state.tracking_paused is False
        assert state.has_challenge is False

    def test_totals(self) -> None:
        state = ProjectState(
            goal=500,
            daily_count=100,
            last_update_date=TODAY,
            history=[HistoryEntry(date=TODAY - dt.timedelta(days=1), count=400)],
            pending_chars=[PendingEntry(count=5, timestamp=1), PendingEntry(count=7, timestamp=2)],
        )

        assert state.pending_total == 12
        assert state.lifetime_total == 500

    def test_json_uses_camel_case_keys(self) -> None:
        state = ProjectState(
            goal=1000,
            challenge_name="Steady Writer",
            daily_count=42,
            last_update_date=TODAY,
            pending_chars=[PendingEntry(count=3, timestamp=1_700_000_000)],
            tracking_paused=True,
        )

        data = state.to_json_dict()

        assert data == {
            "goal": 1000,
            "challengeName": "Steady Writer",
            "dailyCount": 42,
            "lastUpdateDate": "2024-03-14",
            "history": [],
            "pendingChars": [{"count": 3, "timestamp": 1_700_000_000}],
            "trackingPaused": True,
        }

    def test_parses_persisted_document(self) -> None:
        state = ProjectState.model_validate(
            {
                "goal": 500,
                "challengeName": "Warm-up",
                "dailyCount": 10,
                "lastUpdateDate": "2024-03-13",
                "history": [{"date": "2024-03-12", "count": 321}],
                "pendingChars": [],
                "trackingPaused": False,
            }
        )

        assert state.challenge_name == "Warm-up"
        assert state.last_update_date == dt.date(2024, 3, 13)
        assert state.history[0].count == 321

    def test_missing_keys_take_defaults(self) -> None:
        state = ProjectState.model_validate({"goal": 500, "lastUpdateDate": "2024-03-14"})

        assert state.daily_count == 0
        assert state.pending_chars == []

    def test_rejects_negative_daily_count(self) -> None:
        with pytest.raises(ValidationError):
            ProjectState.model_validate({"dailyCount": -1})

    def test_rejects_empty_pending_entry(self) -> None:
        with pytest.raises(ValidationError):
            PendingEntry(count=0, timestamp=1)


class TestRollOver:
    """Tests for the new-day rule."""

    def test_same_day_is_noop(self) -> None:
        state = ProjectState(daily_count=50, last_update_date=TODAY)

        assert roll_over(state, TODAY) is None
        assert state.daily_count == 50
        assert state.history == []

    def test_new_day_archives_count(self) -> None:
        state = ProjectState(daily_count=450, last_update_date=TODAY)
        tomorrow = TODAY + dt.timedelta(days=1)

        event = roll_over(state, tomorrow)

        assert isinstance(event, NewDayStarted)
        assert event.previous_date == TODAY
        assert event.archived_count == 450
        assert state.history == [HistoryEntry(date=TODAY, count=450)]
        assert state.daily_count == 0
        assert state.last_update_date == tomorrow

    def test_empty_day_not_archived(self) -> None:
        state = ProjectState(daily_count=0, last_update_date=TODAY)

        event = roll_over(state, TODAY + dt.timedelta(days=3))

        assert event is not None
        assert event.archived_count == 0
        assert state.history == []

    def test_rollover_is_idempotent(self) -> None:
        state = ProjectState(daily_count=10, last_update_date=TODAY)
        tomorrow = TODAY + dt.timedelta(days=1)

        roll_over(state, tomorrow)
        assert roll_over(state, tomorrow) is None
        assert len(state.history) == 1

    def test_keeps_goal_and_pending(self) -> None:
        state = ProjectState(
            goal=500,
            challenge_name="Warm-up",
            daily_count=10,
            last_update_date=TODAY,
            pending_chars=[PendingEntry(count=4, timestamp=1)],
        )

        roll_over(state, TODAY + dt.timedelta(days=1))

        assert state.goal == 500
        assert state.challenge_name == "Warm-up"
        assert state.pending_total == 4
