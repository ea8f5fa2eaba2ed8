"""Tests for the stats module."""
import pytest
from speedread.stats import SessionStats, SessionSummary, format_summary


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


class TestSessionStats:
    """Tests for SessionStats class."""

    def test_no_pause(self):
        """Test a session without pauses."""
        clock = FakeClock()
        stats = SessionStats(clock=clock)
        for _ in range(30):
            stats.record_word()
        clock.now += 10.0
        summary = stats.finalize()

        assert summary.words_read == 30
        assert summary.total_seconds == pytest.approx(10.0)
        assert summary.paused_seconds == 0.0
        assert summary.actual_wpm == 180

    def test_pause_excluded(self):
        """Test that paused time is subtracted from active time."""
        clock = FakeClock()
        stats = SessionStats(clock=clock)
        clock.now += 10.0
        stats.begin_pause()
        assert stats.is_paused
        clock.now += 20.0
        stats.end_pause()
        clock.now += 10.0
        for _ in range(40):
            stats.record_word()
        summary = stats.finalize()

        assert summary.total_seconds == pytest.approx(40.0)
        assert summary.paused_seconds == pytest.approx(20.0)
        assert summary.active_seconds == pytest.approx(20.0)
        assert summary.actual_wpm == 120

    def test_repeated_begin_pause_ignored(self):
        """Test that nested pause starts keep the first timestamp."""
        clock = FakeClock()
        stats = SessionStats(clock=clock)
        stats.begin_pause()
        clock.now += 5.0
        stats.begin_pause()
        clock.now += 5.0
        stats.end_pause()
        assert stats.paused_seconds == pytest.approx(10.0)

    def test_finalize_closes_open_pause(self):
        """Test that an open pause is counted at finalize."""
        clock = FakeClock()
        stats = SessionStats(clock=clock)
        stats.begin_pause()
        clock.now += 3.0
        summary = stats.finalize()
        assert summary.paused_seconds == pytest.approx(3.0)
        assert summary.actual_wpm == 0

    def test_finalize_idempotent(self):
        """Test that finalize returns the same summary twice."""
        clock = FakeClock()
        stats = SessionStats(clock=clock)
        first = stats.finalize()
        clock.now += 60.0
        assert stats.finalize() is first


class TestFormatSummary:
    """Tests for format_summary function."""

    def test_summary_lines(self):
        """Test the report layout."""
        lines = format_summary(SessionSummary(
            words_read=500,
            total_seconds=185.0,
            paused_seconds=35.0,
            active_seconds=150.0,
            actual_wpm=200,
        ))
        assert lines[0] == "Session Complete!"
        assert "Words read:    500" in lines
        assert "Total time:    3:05" in lines
        assert "Time paused:   0:35" in lines
        assert "Active time:   2:30" in lines
        assert "Actual WPM:    200" in lines
