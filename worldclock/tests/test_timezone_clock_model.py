"""
worldclock/tests/test_timezone_clock_model.py

Unit tests for TimezoneEntry, the static settings and TimezoneClockModel.
A fixed clock pins the instant so results do not depend on the wall clock.
"""

from __future__ import annotations

import re
import unittest
from datetime import datetime, timezone

from worldclock.exceptions.errors import UnknownTimezoneError
from worldclock.logic.timezone_clock_model import TimezoneClockModel, format_date
from worldclock.models.clock_snapshot import ClockSnapshot
from worldclock.models.timezone_entry import TimezoneEntry
from worldclock.models.world_clock_settings import DEFAULT_TIMEZONES, WorldClockSettings

NEW_YEAR_NOON = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d:[0-5]\d$")


class TestTimezoneEntry(unittest.TestCase):
    def test_display_city_replaces_underscores(self) -> None:
        self.assertEqual(TimezoneEntry("America/Los_Angeles").display_city, "Los Angeles")
        self.assertEqual(TimezoneEntry("America/New_York").display_city, "New York")

    def test_display_city_uses_last_segment(self) -> None:
        self.assertEqual(TimezoneEntry("America/Argentina/Buenos_Aires").display_city, "Buenos Aires")

    def test_region_uses_first_segment(self) -> None:
        self.assertEqual(TimezoneEntry("Asia/Tokyo").region, "Asia")
        self.assertEqual(TimezoneEntry("America/Argentina/Buenos_Aires").region, "America")

    def test_identifier_without_separator(self) -> None:
        entry = TimezoneEntry("UTC")
        self.assertEqual(entry.display_city, "UTC")
        self.assertEqual(entry.region, "UTC")

    def test_derived_fields_for_every_default(self) -> None:
        for tz in DEFAULT_TIMEZONES:
            entry = TimezoneEntry(tz)
            self.assertEqual(entry.display_city, tz[tz.rfind("/") + 1:].replace("_", " "))
            self.assertEqual(entry.region, tz[:tz.find("/")])


class TestWorldClockSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        s = WorldClockSettings()
        self.assertEqual(len(s.timezones), 9)
        self.assertEqual(s.timezones[0], "America/New_York")
        self.assertEqual(s.timezones[-1], "Pacific/Auckland")
        self.assertEqual(s.update_interval_ms, 1000)
        self.assertEqual(s.geometry(), "900x600")

    def test_grid_columns(self) -> None:
        self.assertEqual(WorldClockSettings().grid_columns(), 5)
        self.assertEqual(WorldClockSettings(grid_rows=3).grid_columns(), 3)
        self.assertEqual(WorldClockSettings().grid_columns(0), 1)
        self.assertEqual(WorldClockSettings(grid_rows=0).grid_columns(4), 4)


class TestTimezoneClockModel(unittest.TestCase):
    def setUp(self) -> None:
        self.model = TimezoneClockModel(clock=lambda: NEW_YEAR_NOON)

    def test_list_timezones_keeps_declaration_order(self) -> None:
        ids = [e.identifier for e in self.model.list_timezones()]
        self.assertEqual(ids, list(DEFAULT_TIMEZONES))

    def test_list_timezones_is_constant(self) -> None:
        self.assertIs(self.model.list_timezones(), self.model.list_timezones())

    def test_known_instant_london_and_tokyo(self) -> None:
        london = self.model.snapshot("Europe/London")
        tokyo = self.model.snapshot("Asia/Tokyo")
        self.assertEqual(london, ClockSnapshot("12:00:00", "Mon, Jan 01 2024"))
        self.assertEqual(tokyo, ClockSnapshot("21:00:00", "Mon, Jan 01 2024"))

    def test_date_rolls_over_per_zone(self) -> None:
        # Auckland is UTC+13 in January
        snap = self.model.snapshot("Pacific/Auckland")
        self.assertEqual(snap.time_text, "01:00:00")
        self.assertEqual(snap.date_text, "Tue, Jan 02 2024")

        # New York is UTC-5 in January
        self.assertEqual(self.model.snapshot("America/New_York").time_text, "07:00:00")

    def test_daylight_saving_is_applied(self) -> None:
        summer = datetime(2024, 7, 1, 12, 0, 0, tzinfo=timezone.utc)
        model = TimezoneClockModel(clock=lambda: summer)
        self.assertEqual(model.snapshot("Europe/London").time_text, "13:00:00")
        self.assertEqual(model.snapshot("America/Los_Angeles").time_text, "05:00:00")

    def test_time_text_is_zero_padded_24h(self) -> None:
        for tz in DEFAULT_TIMEZONES:
            self.assertRegex(self.model.snapshot(tz).time_text, TIME_RE)

    def test_system_clock_time_text_pattern(self) -> None:
        model = TimezoneClockModel()
        for entry in model.list_timezones():
            self.assertRegex(model.snapshot(entry.identifier).time_text, TIME_RE)

    def test_same_instant_is_idempotent(self) -> None:
        self.assertEqual(self.model.snapshot("Asia/Dubai"), self.model.snapshot("Asia/Dubai"))

    def test_now_localized_converts_instant(self) -> None:
        now = self.model.now_localized("Asia/Singapore")
        self.assertEqual(now, NEW_YEAR_NOON)
        self.assertEqual(now.hour, 20)

    def test_unknown_timezone_raises(self) -> None:
        with self.assertRaises(UnknownTimezoneError) as ctx:
            self.model.snapshot("Invalid/Zone")
        self.assertEqual(ctx.exception.identifier, "Invalid/Zone")
        self.assertIsInstance(ctx.exception, LookupError)

    def test_malformed_identifier_raises_unknown_timezone(self) -> None:
        with self.assertRaises(UnknownTimezoneError):
            self.model.snapshot("../etc/passwd")

    def test_tzdata_directory_name_raises_unknown_timezone(self) -> None:
        for identifier in ("America", "Asia"):
            with self.assertRaises(UnknownTimezoneError) as ctx:
                self.model.snapshot(identifier)
            self.assertEqual(ctx.exception.identifier, identifier)

    def test_invalid_entries_are_still_listed(self) -> None:
        model = TimezoneClockModel(["Europe/Paris", "Invalid/Zone"], clock=lambda: NEW_YEAR_NOON)
        self.assertEqual([e.display_city for e in model.list_timezones()], ["Paris", "Zone"])


class TestFormatDate(unittest.TestCase):
    def test_fixed_english_pattern(self) -> None:
        self.assertEqual(format_date(datetime(2024, 2, 29)), "Thu, Feb 29 2024")
        self.assertEqual(format_date(datetime(2023, 12, 31)), "Sun, Dec 31 2023")

    def test_year_is_four_digits(self) -> None:
        self.assertEqual(format_date(datetime(1, 1, 1)), "Mon, Jan 01 0001")


if __name__ == "__main__":
    unittest.main()
