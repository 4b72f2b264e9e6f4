"""Tests for best/worst day selection and the daily outlook."""

from moto_forecast.forecast.days import best_and_worst_day, daily_outlook
from moto_forecast.models.riding import DailyOutlook


class TestBestAndWorstDay:
    """Tests for best_and_worst_day()."""

    def test_empty(self):
        """Test empty series has no result."""
        assert best_and_worst_day([]) is None

    def test_single_day(self, make_observation):
        """Test one day is both best and worst."""
        day = make_observation(high_temp_c=24, low_temp_c=14)
        extremes = best_and_worst_day([day])
        assert extremes.best.observation == day
        assert extremes.worst.observation == day

    def test_selects_extremes(self, daily_series):
        """Test best and worst by confidence."""
        extremes = best_and_worst_day(daily_series)
        assert extremes.best.observation == daily_series[1]
        assert extremes.best.score.confidence == 100
        assert extremes.worst.observation == daily_series[3]
        assert extremes.worst.score.confidence == 0

    def test_best_tie_keeps_first(self, daily_series):
        """Test days 1 and 4 both score 100 and the first wins."""
        assert daily_series[4].high_temp_c == 25.0
        extremes = best_and_worst_day(daily_series)
        assert extremes.best.observation.timestamp == daily_series[1].timestamp

    def test_worst_tie_keeps_first(self, make_observation):
        """Test equal lowest scores resolve to the first day."""
        days = [
            make_observation(0, precipitation_percent=50),
            make_observation(24),
            make_observation(48, precipitation_percent=70),
        ]
        extremes = best_and_worst_day(days)
        assert extremes.worst.observation == days[0]
        assert extremes.best.observation == days[1]


class TestDailyOutlook:
    """Tests for daily_outlook()."""

    def test_empty(self):
        """Test empty series has no outlook."""
        assert daily_outlook([]) is None

    def test_excellent(self, make_series):
        """Test all-Good hours."""
        assert daily_outlook(make_series("GGGG")) == DailyOutlook.EXCELLENT

    def test_generally_good(self, make_observation):
        """Test short Moderate spells without Unsafe hours."""
        hours = [
            make_observation(0),
            make_observation(1, precipitation_percent=20),
            make_observation(2, precipitation_percent=20),
            make_observation(3),
        ]
        assert daily_outlook(hours) == DailyOutlook.GENERALLY_GOOD

    def test_watch_for_changes(self, make_series):
        """Test a short Unsafe spell."""
        assert daily_outlook(make_series("GBBG")) == DailyOutlook.WATCH_FOR_CHANGES

    def test_use_caution(self, make_observation):
        """Test three consecutive Moderate hours."""
        hours = [make_observation(h, precipitation_percent=20) for h in range(3)]
        assert daily_outlook(hours) == DailyOutlook.USE_CAUTION

    def test_poor_day(self, make_series):
        """Test a long bad period including Unsafe hours."""
        assert daily_outlook(make_series("GBBBG")) == DailyOutlook.POOR

    def test_mixed_bad_hours_count_together(self, make_observation, make_series):
        """Test Moderate and Unsafe hours form one bad period."""
        stormy = make_series("B")[0]
        hours = [
            make_observation(0, precipitation_percent=20),
            stormy.model_copy(update={"timestamp": make_observation(1).timestamp}),
            make_observation(2, precipitation_percent=20),
        ]
        assert daily_outlook(hours) == DailyOutlook.POOR
