"""Tests for the seasonal pattern classifier."""

from datetime import date, timedelta

import pytest

from profile3d.render.season import season_pattern_index


class TestSeasonPatternIndex:
    @pytest.mark.parametrize("day,expected", [
        (date(2024, 7, 15), 19),   # summer plateau
        (date(2024, 8, 31), 19),
        (date(2024, 9, 1), 0),     # Sunday, first band of September
        (date(2024, 9, 8), 1),
        (date(2024, 9, 15), 2),
        (date(2024, 9, 22), 3),
        (date(2024, 9, 29), 4),
        (date(2024, 10, 20), 4),   # autumn plateau
        (date(2024, 12, 1), 5),
        (date(2024, 12, 29), 9),
        (date(2024, 1, 10), 9),    # winter plateau
        (date(2024, 3, 3), 10),
        (date(2024, 3, 31), 14),
        (date(2024, 5, 5), 14),    # spring plateau
        (date(2024, 6, 2), 15),
        (date(2024, 6, 30), 19),
    ])
    def test_table(self, day, expected):
        assert season_pattern_index(day) == expected

    def test_anchors_on_previous_sunday(self):
        # Thursday 2024-10-03 belongs to the week of Sunday 2024-09-29
        assert season_pattern_index(date(2024, 10, 3)) == 4
        # Saturday 2024-03-02 belongs to the week of Sunday 2024-02-25
        assert season_pattern_index(date(2024, 3, 2)) == 9

    def test_same_for_whole_week(self):
        sunday = date(2024, 6, 9)
        values = {season_pattern_index(sunday + timedelta(days=i)) for i in range(7)}
        assert values == {16}

    def test_range(self):
        day = date(2023, 1, 1)
        while day < date(2025, 1, 1):
            assert 0 <= season_pattern_index(day) <= 19
            day += timedelta(days=1)

    def test_periodic(self):
        # 28 years later every date falls on the same weekday again
        day = date(2024, 1, 1)
        while day < date(2025, 1, 1):
            assert season_pattern_index(day) == season_pattern_index(day.replace(year=day.year + 28))
            day += timedelta(days=1)

    def test_monotonic_through_the_year(self):
        values = [season_pattern_index(date(2024, 9, 1) + timedelta(weeks=w)) for w in range(43)]
        assert values == sorted(values)
