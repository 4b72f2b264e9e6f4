"""Tests for the safe riding window finder."""

from datetime import timedelta

from moto_forecast.forecast.windows import (
    RideWindowFinder,
    find_longest_bad_run,
    find_safe_riding_window,
    good_riding_hours_ahead,
    is_good_riding_hour,
    longest_run,
)


class TestIsGoodRidingHour:
    """Tests for the good-hour predicate."""

    def test_ideal_hour(self, ideal_observation):
        """Test ideal weather passes."""
        assert is_good_riding_hour(ideal_observation) is True

    def test_temperature_band_inclusive(self, make_observation):
        """Test 15°C and 30°C are both inside the band."""
        assert is_good_riding_hour(make_observation(temperature_c=15)) is True
        assert is_good_riding_hour(make_observation(temperature_c=30)) is True
        assert is_good_riding_hour(make_observation(temperature_c=14.9)) is False
        assert is_good_riding_hour(make_observation(temperature_c=30.1)) is False

    def test_precipitation_and_wind_exclusive(self, make_observation):
        """Test 30% rain or 30 km/h wind fail."""
        assert is_good_riding_hour(make_observation(precipitation_percent=29)) is True
        assert is_good_riding_hour(make_observation(precipitation_percent=30)) is False
        assert is_good_riding_hour(make_observation(wind_speed_kph=29.9)) is True
        assert is_good_riding_hour(make_observation(wind_speed_kph=30)) is False

    def test_ignores_visibility(self, make_observation):
        """Test the predicate does not look at visibility."""
        assert is_good_riding_hour(make_observation(visibility_km=None)) is True


class TestFindSafeRidingWindow:
    """Tests for find_safe_riding_window()."""

    def test_empty_series(self):
        """Test empty input returns no window."""
        assert find_safe_riding_window([]) is None

    def test_all_bad(self, make_series):
        """Test no passing hours returns no window."""
        assert find_safe_riding_window(make_series("BBBB")) is None

    def test_two_hour_run_is_too_short(self, make_series):
        """Test a run spanning exactly 2 hours is not reported."""
        assert find_safe_riding_window(make_series("BGGGBGGB")) is None

    def test_three_hour_run_is_reported(self, make_series):
        """Test a run spanning exactly 3 hours is reported."""
        series = make_series("BGGGGB")
        window = find_safe_riding_window(series)
        assert window is not None
        assert window.start == series[1].timestamp
        assert window.end == series[4].timestamp
        assert window.duration == timedelta(hours=3)
        assert window.observations == 4

    def test_tie_keeps_earliest(self, make_series):
        """Test equal-duration runs resolve to the first one."""
        series = make_series("GGGGGBGGGGG")
        window = find_safe_riding_window(series)
        assert window.start == series[0].timestamp
        assert window.end == series[4].timestamp

    def test_longer_later_run_wins(self, make_series):
        """Test a strictly longer later run replaces the earlier one."""
        series = make_series("GGGGBGGGGGG")
        window = find_safe_riding_window(series)
        assert window.start == series[5].timestamp
        assert window.duration == timedelta(hours=5)

    def test_run_open_at_end_is_flushed(self, make_series):
        """Test a run still open at the last element is considered."""
        series = make_series("GGBBGGGGG")
        window = find_safe_riding_window(series)
        assert window is not None
        assert window.start == series[4].timestamp
        assert window.end == series[-1].timestamp

    def test_whole_series_passes(self, make_series):
        """Test a series that never fails yields one full window."""
        series = make_series("GGGGGG")
        window = find_safe_riding_window(series)
        assert window.start == series[0].timestamp
        assert window.end == series[-1].timestamp

    def test_single_observation(self, make_series):
        """Test a single passing hour has zero duration and no window."""
        assert find_safe_riding_window(make_series("G")) is None

    def test_duration_uses_timestamps_not_counts(self, make_observation):
        """Test sparse samples spanning longer beat dense samples."""
        dense = [make_observation(h * 0.5) for h in range(6)]  # 0.0 .. 2.5 h
        gap = [make_observation(3.0, precipitation_percent=90)]
        sparse = [make_observation(4.0), make_observation(8.0)]  # 4 h span
        window = find_safe_riding_window(dense + gap + sparse)
        assert window.start == sparse[0].timestamp
        assert window.end == sparse[1].timestamp
        assert window.observations == 2

    def test_custom_min_duration(self, make_series):
        """Test the minimum duration is configurable."""
        series = make_series("GGGB")
        assert find_safe_riding_window(series) is None
        window = find_safe_riding_window(series, min_duration=timedelta(hours=2))
        assert window.duration == timedelta(hours=2)


class TestRideWindowFinder:
    """Tests for RideWindowFinder."""

    def test_default_min_duration(self):
        """Test the default minimum window is 3 hours."""
        assert RideWindowFinder().min_duration == timedelta(hours=3)

    def test_find_bad_run(self, make_series):
        """Test the longest non-Good run is found regardless of length."""
        series = make_series("GBBGBBBG")
        run = RideWindowFinder().find_bad_run(series)
        assert run.start == series[4].timestamp
        assert run.end == series[6].timestamp
        assert run.observations == 3

    def test_no_bad_run(self, make_series):
        """Test all-Good series has no bad run."""
        assert find_longest_bad_run(make_series("GGG")) is None


class TestLongestRun:
    """Tests for longest_run()."""

    def test_returns_zero_duration_run(self, make_series):
        """Test a lone matching observation is still a run."""
        series = make_series("BGB")
        run = longest_run(series, lambda o: o.precipitation_percent == 0)
        assert run.start == run.end == series[1].timestamp
        assert run.duration == timedelta(0)


class TestGoodRidingHoursAhead:
    """Tests for good_riding_hours_ahead()."""

    def test_until_first_bad_hour(self, make_series):
        """Test counting stops at the first bad hour."""
        series = make_series("GGGBGG")
        duration = good_riding_hours_ahead(series)
        assert duration.hours == 3
        assert duration.until == series[3].timestamp
        assert duration.describe() == "Good riding conditions for 3 hours (until 09:00)"

    def test_no_bad_hour(self, make_series):
        """Test open-ended duration when every hour is good."""
        duration = good_riding_hours_ahead(make_series("G"))
        assert duration.hours == 1
        assert duration.until is None
        assert duration.describe() == "Good riding conditions for at least 1 hour"

    def test_capped_at_max_hours(self, make_series):
        """Test counting stops after max_hours observations."""
        duration = good_riding_hours_ahead(make_series("G" * 30))
        assert duration.hours == 24
        assert duration.until is None

    def test_bad_start(self, make_series):
        """Test no duration when the first hour is bad."""
        assert good_riding_hours_ahead(make_series("BGGG")) is None
        assert good_riding_hours_ahead([]) is None
