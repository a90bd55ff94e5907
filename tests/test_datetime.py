"""Tests for the DateTime class.

This module tests DateTime: construction from strings, stdlib values and
timestamps, the derived calendar fields, week navigation, timezones,
named formats, the empty date, field changes and Period arithmetic.

Unless a test says otherwise the default timezone is Europe/Paris and
the clock is frozen at 2013-11-04 20:21:22 UTC (see conftest.py).
"""

import copy
import datetime
import pickle
import zoneinfo

import pytest

from conftest import FROZEN_AT
from wallclock import (
    DateTime,
    LocalDate,
    LocalDateTime,
    LocalizerNotConfigured,
    MutableDateTime,
    ParseError,
    Period,
    PropertyNotDefined,
    PropertyNotWritable,
    TimeZone,
    TimezoneError,
    localizer,
)
from wallclock.clock import FrozenClock, set_clock
from wallclock.config import set_default_timezone


@pytest.fixture
def paris_sunday():
    """A Sunday evening in winter time: 2013-02-03 21:03:45.123456 CET."""
    return DateTime("2013-02-03 21:03:45.123456", "Europe/Paris")


@pytest.fixture
def utc_monday():
    """The frozen clock instant, viewed in UTC."""
    return DateTime("2013-11-04 20:21:22", "UTC")


# =============================================================================
# Construction Tests
# =============================================================================


class TestDateTimeConstruction:
    """Tests for DateTime construction from strings."""

    def test_default_is_now_in_default_timezone(self):
        """Test DateTime() reads the clock in the default timezone."""
        dt = DateTime()
        assert dt.timestamp == FROZEN_AT
        assert dt.timezone.name == "Europe/Paris"
        assert dt.as_db == "2013-11-04 21:21:22"

    def test_none_means_now(self):
        """Test None is read as "now"."""
        assert DateTime(None).timestamp == FROZEN_AT

    def test_now_keyword_follows_live_clock(self, frozen_clock):
        """Test the "now" string reads the live clock, not the request time."""
        frozen_clock.advance(seconds=30)
        assert DateTime("now").timestamp == FROZEN_AT + 30

    @pytest.mark.parametrize(
        "keyword,expected",
        [
            ("today", "2013-11-04 00:00:00"),
            ("midnight", "2013-11-04 00:00:00"),
            ("tomorrow", "2013-11-05 00:00:00"),
            ("yesterday", "2013-11-03 00:00:00"),
            ("TODAY", "2013-11-04 00:00:00"),
        ],
    )
    def test_day_keywords(self, keyword, expected):
        """Test keywords give midnight of a day in the timezone."""
        assert DateTime(keyword).as_db == expected

    def test_today_depends_on_timezone(self):
        """Test "today" is the current day in the given zone."""
        # 2013-11-05 05:21 in Tokyo
        assert DateTime("today", "Asia/Tokyo").as_db == "2013-11-05 00:00:00"

    def test_time_only_is_today(self):
        """Test a bare time of day falls on the current date."""
        assert DateTime("14:30").as_db == "2013-11-04 14:30:00"

    def test_date_only_is_midnight(self):
        """Test a bare date is midnight."""
        assert DateTime("2013-02-03").as_time == "00:00:00"

    def test_fractional_seconds(self, paris_sunday):
        """Test the fraction is read as microseconds."""
        assert paris_sunday.microsecond == 123456

    def test_timezone_argument(self):
        """Test the string is read in the given zone."""
        dt = DateTime("2013-02-03 21:03:45", "UTC")
        assert dt.timezone is TimeZone.utc()
        assert dt.timestamp == 1359925425

    def test_zone_in_string_wins(self):
        """Test a zone written in the string overrides the argument."""
        dt = DateTime("2013-02-03 21:03:45 Asia/Tokyo", "UTC")
        assert dt.timezone.name == "Asia/Tokyo"
        assert dt.hour == 21

    @pytest.mark.parametrize(
        "text,zone",
        [
            ("2013-02-03T21:03:45Z", "UTC"),
            ("2013-02-03T21:03:45+09:00", "+09:00"),
            ("2013-02-03T21:03:45+0100", "+01:00"),
            ("Sun, 03 Feb 2013 21:03:45 +0100", "+01:00"),
        ],
    )
    def test_offset_suffixes(self, text, zone):
        """Test offset suffixes become fixed-offset zones."""
        dt = DateTime(text)
        assert dt.timezone.name == zone
        assert dt.hour == 21

    def test_timestamp_string_is_utc(self):
        """Test the @ form is an instant viewed in UTC."""
        dt = DateTime("@1359921825", "Europe/Paris")
        assert dt.timezone.name == "UTC"
        assert dt.as_db == "2013-02-03 20:03:45"

    def test_timezone_object_and_tzinfo(self):
        """Test the timezone may be a TimeZone or a tzinfo."""
        by_zone = DateTime("2013-02-03", TimeZone("Asia/Tokyo"))
        by_tzinfo = DateTime("2013-02-03", zoneinfo.ZoneInfo("Asia/Tokyo"))
        assert by_zone == by_tzinfo
        assert by_tzinfo.timezone.name == "Asia/Tokyo"

    def test_local_means_default_timezone(self):
        """Test the "local" timezone name is the default zone."""
        assert DateTime("2013-02-03", "local").timezone.name == "Europe/Paris"

    def test_negative_year(self):
        """Test years before the common era."""
        dt = DateTime("-4712-12-07 12:06:46", "UTC")
        assert (dt.year, dt.month, dt.day) == (-4712, 12, 7)
        assert dt.as_db == "-4712-12-07 12:06:46"

    def test_unparseable_string(self):
        """Test garbage raises ParseError."""
        with pytest.raises(ParseError):
            DateTime("next blue moon")

    def test_out_of_range_component(self):
        """Test impossible components raise ParseError."""
        with pytest.raises(ParseError, match="month 13"):
            DateTime("2013-13-01")

    def test_unknown_zone_in_string(self):
        """Test an unknown zone suffix is a ParseError."""
        with pytest.raises(ParseError, match="unknown timezone"):
            DateTime("2013-02-03 Mars/Olympus_Mons")

    def test_unknown_timezone_argument(self):
        """Test an unknown timezone argument is a TimezoneError."""
        with pytest.raises(TimezoneError):
            DateTime("2013-02-03", "Mars/Olympus_Mons")


class TestDateTimeFactories:
    """Tests for the DateTime class methods."""

    def test_from_value_aware_datetime(self):
        """Test an aware stdlib datetime keeps its instant and zone."""
        source = datetime.datetime(2013, 2, 3, 21, 3, 45, 5, tzinfo=zoneinfo.ZoneInfo("Europe/Paris"))
        dt = DateTime.from_value(source)
        assert dt.timestamp == 1359921825
        assert dt.microsecond == 5
        assert dt.timezone.name == "Europe/Paris"

    def test_from_value_fixed_offset_datetime(self):
        """Test a datetime.timezone offset becomes a named offset zone."""
        tz = datetime.timezone(datetime.timedelta(hours=-5))
        dt = DateTime.from_value(datetime.datetime(2013, 2, 3, 12, tzinfo=tz))
        assert dt.timezone.name == "-05:00"
        assert dt.utc.hour == 17

    def test_from_value_naive_datetime(self):
        """Test a naive datetime is read in the given zone."""
        dt = DateTime.from_value(datetime.datetime(2013, 2, 3, 21, 3, 45), "UTC")
        assert dt.timestamp == 1359925425

    def test_from_value_timestamp(self):
        """Test ints and floats are Unix timestamps."""
        assert DateTime.from_value(1359921825, "UTC").as_db == "2013-02-03 20:03:45"
        assert DateTime.from_value(1.5, "UTC").microsecond == 500000

    def test_from_value_string(self):
        """Test strings go through the parser."""
        assert DateTime.from_value("2013-02-03", "UTC") == DateTime("2013-02-03", "UTC")

    def test_from_value_copies_other_variant(self):
        """Test a MutableDateTime source keeps instant, zone and empty tag."""
        source = MutableDateTime.none("Asia/Tokyo")
        dt = DateTime.from_value(source)
        assert type(dt) is DateTime
        assert dt.is_empty
        assert dt.timezone.name == "Asia/Tokyo"

    @pytest.mark.parametrize("source", [[], True, object(), datetime.date(2013, 2, 3)])
    def test_from_value_rejects_other_types(self, source):
        """Test unsupported sources raise TypeError."""
        with pytest.raises(TypeError):
            DateTime.from_value(source)

    def test_from_components_carries(self):
        """Test out-of-range components carry."""
        assert DateTime.from_components(2013, 1, 32, timezone="UTC").as_date == "2013-02-01"
        assert DateTime.from_components(2013, 12, 31, 24, timezone="UTC").as_db == "2014-01-01 00:00:00"

    def test_from_timestamp(self):
        """Test from_timestamp views the instant in a zone."""
        dt = DateTime.from_timestamp(0, "Europe/Paris")
        assert dt.as_db == "1970-01-01 01:00:00"
        assert dt.timestamp == 0

    def test_copy_method(self, paris_sunday):
        """Test copy() returns an equal, distinct value."""
        other = paris_sunday.copy()
        assert other == paris_sunday
        assert other is not paris_sunday


# =============================================================================
# Field Tests
# =============================================================================


class TestDateTimeFields:
    """Tests for the basic and derived fields."""

    def test_wall_clock_fields(self, paris_sunday):
        """Test the wall-clock fields."""
        dt = paris_sunday
        assert (dt.year, dt.month, dt.day) == (2013, 2, 3)
        assert (dt.hour, dt.minute, dt.second, dt.microsecond) == (21, 3, 45, 123456)

    def test_timestamp(self, paris_sunday):
        """Test the timestamp is whole Unix seconds."""
        assert paris_sunday.timestamp == 1359921825

    def test_calendar_fields(self, paris_sunday):
        """Test quarter, week, weekday and year_day."""
        assert paris_sunday.quarter == 1
        assert paris_sunday.week == 5
        assert paris_sunday.weekday == 7
        assert paris_sunday.year_day == 34

    @pytest.mark.parametrize(
        "date,quarter",
        [("2013-01-01", 1), ("2013-03-31", 1), ("2013-04-01", 2), ("2013-09-30", 3), ("2013-12-31", 4)],
    )
    def test_quarter(self, date, quarter):
        """Test quarter boundaries."""
        assert DateTime(date).quarter == quarter

    def test_iso_week_at_year_boundary(self):
        """Test week numbers belong to the ISO week year."""
        assert DateTime("2012-01-01").week == 52
        assert DateTime("2014-12-29").week == 1
        assert DateTime("2015-12-31").week == 53

    def test_weekday_predicates(self):
        """Test is_monday through is_sunday on 2012-12-17..23."""
        names = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
        for offset, name in enumerate(names):
            dt = DateTime(f"2012-12-{17 + offset}")
            assert dt.weekday == offset + 1
            for other in names:
                assert getattr(dt, f"is_{other}") is (other == name)

    def test_is_today(self):
        """Test is_today compares dates in the value's own zone."""
        assert DateTime("2013-11-04 08:00").is_today
        assert not DateTime("2013-11-05 01:00").is_today
        # Already November 5th in Tokyo
        assert DateTime("2013-11-05 01:00", "Asia/Tokyo").is_today

    def test_is_past_and_is_future(self):
        """Test is_past and is_future against the frozen clock."""
        before = DateTime("2013-11-04 21:21:21")
        after = DateTime("2013-11-04 21:21:23")
        assert before.is_past and not before.is_future
        assert after.is_future and not after.is_past

    def test_is_future_follows_live_clock(self, frozen_clock):
        """Test the relative fields read the live clock."""
        later = DateTime("2013-11-04 21:21:23")
        frozen_clock.advance(seconds=10)
        assert later.is_past

    def test_deprecated_zone_aliases(self, paris_sunday):
        """Test zone and tz still work but warn."""
        with pytest.warns(DeprecationWarning, match="use timezone instead"):
            assert paris_sunday.zone is paris_sunday.timezone
        with pytest.warns(DeprecationWarning, match="use timezone instead"):
            assert paris_sunday.tz is paris_sunday.timezone


class TestDateTimeNavigation:
    """Tests for tomorrow, yesterday and the days of the week."""

    def test_tomorrow_and_yesterday(self):
        """Test neighbouring days at midnight."""
        dt = DateTime("2014-01-09 15:30")
        assert dt.tomorrow.as_db == "2014-01-10 00:00:00"
        assert dt.yesterday.as_db == "2014-01-08 00:00:00"

    def test_month_and_year_rollover(self):
        """Test tomorrow and yesterday across month and year ends."""
        assert DateTime("2013-12-31 23:00").tomorrow.as_db == "2014-01-01 00:00:00"
        assert DateTime("2013-03-01").yesterday.as_date == "2013-02-28"

    @pytest.mark.parametrize(
        "day,expected",
        [
            ("monday", "2014-01-06 00:00:00"),
            ("tuesday", "2014-01-07 00:00:00"),
            ("wednesday", "2014-01-08 00:00:00"),
            ("thursday", "2014-01-09 00:00:00"),
            ("friday", "2014-01-10 00:00:00"),
            ("saturday", "2014-01-11 00:00:00"),
            ("sunday", "2014-01-12 00:00:00"),
        ],
    )
    def test_days_of_this_week(self, day, expected):
        """Test each day of the ISO week of a Thursday."""
        assert getattr(DateTime("2014-01-09 15:30"), day).as_db == expected

    def test_week_runs_monday_to_sunday(self):
        """Test a Sunday belongs to the week that started the Monday before."""
        sunday = DateTime("2014-01-12 10:00")
        assert sunday.monday.as_date == "2014-01-06"
        assert sunday.sunday.as_date == "2014-01-12"

    def test_navigation_keeps_zone_and_type(self):
        """Test navigation results keep the zone and the variant."""
        result = MutableDateTime("2014-01-09 15:30", "Asia/Tokyo").monday
        assert type(result) is MutableDateTime
        assert result.timezone.name == "Asia/Tokyo"

    def test_navigation_is_read_only(self):
        """Test navigation fields cannot be assigned."""
        with pytest.raises(PropertyNotWritable):
            DateTime().tomorrow = DateTime()


# =============================================================================
# Timezone Tests
# =============================================================================


class TestDateTimeZones:
    """Tests for views in other timezones."""

    def test_utc(self):
        """Test utc keeps the instant and moves the wall clock."""
        dt = DateTime("2013-03-06 18:00")
        assert dt.utc.as_db == "2013-03-06 17:00:00"
        assert dt.utc == dt
        assert dt.utc.is_utc

    def test_local(self):
        """Test local views the instant in the default zone."""
        tokyo = DateTime("1977-06-06 12:00", "Asia/Tokyo")
        assert tokyo.local.as_iso8601 == "1977-06-06T05:00:00+0200"
        assert tokyo.local.is_local

    def test_local_follows_default_timezone(self):
        """Test local uses the default zone at the time of access."""
        dt = DateTime("2013-03-06 18:00", "UTC")
        set_default_timezone("Asia/Tokyo")
        assert dt.local.timezone.name == "Asia/Tokyo"

    def test_is_utc_and_is_local(self):
        """Test the zone predicates."""
        assert DateTime("now", "UTC").is_utc
        assert not DateTime("now", "UTC").is_local
        assert DateTime().is_local
        assert not DateTime().is_utc

    def test_is_dst(self):
        """Test daylight-saving time detection."""
        assert not DateTime("2013-02-03").is_dst
        assert DateTime("2013-08-03").is_dst
        assert not DateTime("2013-08-03", "UTC").is_dst

    def test_spring_forward_gap(self):
        """Test a wall time inside the gap lands after it."""
        dt = DateTime("2013-03-31 01:30").change(hour=2, minute=30)
        assert dt.as_time == "03:30:00"
        assert dt.is_dst

    def test_fall_back_takes_first_occurrence(self):
        """Test an ambiguous wall time is read with the summer offset."""
        dt = DateTime("2013-10-27 02:30")
        assert dt.is_dst
        assert dt.utc.as_time == "00:30:00"

    def test_add_across_dst_keeps_wall_time(self):
        """Test adding a day across the spring change keeps 12:00."""
        start = DateTime("2013-03-30 12:00")
        end = start + Period(days=1)
        assert end.as_db == "2013-03-31 12:00:00"
        assert end.timestamp - start.timestamp == 82800


# =============================================================================
# Formatting Tests
# =============================================================================


class TestDateTimeFormatting:
    """Tests for format(), format_as() and the as_* properties."""

    def test_format_tokens(self, paris_sunday):
        """Test a pattern mixing tokens and escaped literals."""
        assert paris_sunday.format("l jS \\o\\f F Y h:i:s A") == "Sunday 3rd of February 2013 09:03:45 PM"

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("atom", "2013-11-04T20:21:22+00:00"),
            ("cookie", "Monday, 04-Nov-2013 20:21:22 UTC"),
            ("iso8601", "2013-11-04T20:21:22Z"),
            ("rfc822", "Mon, 04 Nov 13 20:21:22 GMT"),
            ("rfc850", "Monday, 04-Nov-13 20:21:22 UTC"),
            ("rfc1036", "Mon, 04 Nov 13 20:21:22 +0000"),
            ("rfc1123", "Mon, 04 Nov 2013 20:21:22 GMT"),
            ("rfc2822", "Mon, 04 Nov 2013 20:21:22 +0000"),
            ("rfc3339", "2013-11-04T20:21:22+00:00"),
            ("rss", "Mon, 04 Nov 2013 20:21:22 +0000"),
            ("w3c", "2013-11-04T20:21:22+00:00"),
            ("db", "2013-11-04 20:21:22"),
            ("number", "20131104202122"),
            ("date", "2013-11-04"),
            ("time", "20:21:22"),
        ],
    )
    def test_named_formats_in_utc(self, utc_monday, name, expected):
        """Test every named format at a UTC instant."""
        assert utc_monday.format_as(name) == expected
        assert getattr(utc_monday, f"as_{name}") == expected

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("atom", "2013-11-04T21:21:22+01:00"),
            ("cookie", "Monday, 04-Nov-2013 21:21:22 CET"),
            ("iso8601", "2013-11-04T21:21:22+0100"),
            ("rfc822", "Mon, 04 Nov 13 21:21:22 +0100"),
            ("rfc1123", "Mon, 04 Nov 2013 21:21:22 +0100"),
            ("number", "20131104212122"),
        ],
    )
    def test_named_formats_with_offset(self, name, expected):
        """Test non-zero offsets are never spelled GMT or Z."""
        assert DateTime().format_as(name) == expected

    @pytest.mark.parametrize("name", ["cookie", "rfc850"])
    @pytest.mark.parametrize(
        "text,zone",
        [
            ("2013-07-04 20:21:22", "Europe/Paris"),
            ("2013-11-04 21:21:22", "Europe/Paris"),
            ("2013-07-04 14:21:22", "America/New_York"),
            ("2013-07-04 20:21:22", "UTC"),
        ],
    )
    def test_abbreviated_zone_formats_read_back(self, name, text, zone):
        """Test strings rendered with a zone abbreviation parse to the same instant."""
        dt = DateTime(text, zone)
        assert DateTime(dt.format_as(name)) == dt

    def test_format_as_is_case_insensitive(self, utc_monday):
        """Test format names are matched in any case."""
        assert utc_monday.format_as("RFC1123") == utc_monday.as_rfc1123

    def test_unknown_format_name(self, utc_monday):
        """Test an unknown format name is an undefined property."""
        with pytest.raises(PropertyNotDefined, match="as_nope"):
            utc_monday.format_as("nope")

    def test_str_and_repr(self, utc_monday):
        """Test the string forms."""
        assert str(utc_monday) == "2013-11-04T20:21:22Z"
        assert repr(utc_monday) == "DateTime(2013, 11, 4, 20, 21, 22, microsecond=0, timezone='UTC')"

    def test_to_json(self, paris_sunday):
        """Test the JSON form is the ISO-8601 string."""
        assert paris_sunday.to_json() == "2013-02-03T21:03:45+0100"


# =============================================================================
# Empty Date Tests
# =============================================================================


class TestDateTimeEmpty:
    """Tests for the empty date."""

    def test_none(self):
        """Test the empty date's renderings."""
        empty = DateTime.none()
        assert empty.is_empty
        assert empty.as_db == "0000-00-00 00:00:00"
        assert empty.as_date == "0000-00-00"
        assert str(empty) == ""
        assert empty.to_json() == ""
        assert repr(empty) == "DateTime.none('UTC')"

    def test_other_formats_render_normalized_fields(self):
        """Test patterns other than date and DB render -0001-11-30."""
        empty = DateTime.none()
        assert (empty.year, empty.month, empty.day) == (-1, 11, 30)
        assert empty.as_atom == "-0001-11-30T00:00:00+00:00"

    def test_zero_date_string(self):
        """Test parsing the zero date gives the empty date."""
        assert DateTime("0000-00-00").is_empty
        assert DateTime("0000-00-00 00:00:00", "UTC") == DateTime.none()

    def test_normal_values_are_not_empty(self):
        """Test ordinary values are not tagged empty."""
        assert not DateTime().is_empty
        assert not DateTime("-0001-11-30", "UTC").is_empty

    def test_zone_views_keep_tag(self):
        """Test utc and local keep the empty tag."""
        empty = DateTime.none("Asia/Tokyo")
        assert empty.utc.is_empty
        assert empty.local.is_empty
        assert empty.copy().is_empty

    def test_changes_clear_tag(self):
        """Test a real change or arithmetic clears the tag."""
        empty = DateTime.none()
        assert not empty.change(year=2013).is_empty
        assert not empty.add("P1D").is_empty

    def test_noop_change_keeps_tag(self):
        """Test a change with no recognized fields returns the value itself."""
        empty = DateTime.none()
        assert empty.change({"bogus": 1}) is empty


# =============================================================================
# Change Tests
# =============================================================================


class TestDateTimeChange:
    """Tests for change() and replace()."""

    @pytest.fixture
    def base(self):
        return DateTime("2001-01-01 01:01:01", "UTC")

    @pytest.mark.parametrize(
        "fields,cascade,expected",
        [
            ({"hour": 2}, False, "2001-01-01 02:01:01"),
            ({"hour": 2}, True, "2001-01-01 02:00:00"),
            ({"minute": 0}, True, "2001-01-01 01:00:00"),
            ({"hour": 2, "second": 5}, True, "2001-01-01 02:00:05"),
            ({"year": 2013, "day": 15}, False, "2013-01-15 01:01:01"),
            ({"hour": 25}, False, "2001-01-02 01:01:01"),
            ({"month": 13}, False, "2002-01-01 01:01:01"),
            ({"day": 0}, False, "2000-12-31 01:01:01"),
            ({"second": -1}, False, "2001-01-01 01:00:59"),
        ],
    )
    def test_change(self, base, fields, cascade, expected):
        """Test field changes, cascades and carries."""
        assert base.change(fields, cascade=cascade).as_db == expected

    def test_keywords_merge_over_mapping(self, base):
        """Test keyword fields override the mapping."""
        assert base.change({"hour": 3}, hour=4).hour == 4

    def test_change_returns_new_value(self, base):
        """Test the receiver is left alone."""
        changed = base.change(hour=5)
        assert changed is not base
        assert base.hour == 1

    @pytest.mark.parametrize("fields", [{}, {"bogus": 1}, {"hour": None}, {"microsecond": 5}])
    def test_noop_returns_self(self, base, fields):
        """Test nothing recognized means the receiver comes back."""
        assert base.change(fields) is base

    def test_time_change_resets_microseconds(self):
        """Test touching a time field clears the microseconds."""
        dt = DateTime("2001-01-01 01:01:01.5", "UTC")
        assert dt.change(second=2).microsecond == 0
        assert dt.change(day=2).microsecond == 500000

    def test_change_keeps_zone(self):
        """Test changes happen on the value's wall clock."""
        dt = DateTime("2013-02-03 21:00", "Asia/Tokyo").change(hour=9)
        assert dt.timezone.name == "Asia/Tokyo"
        assert dt.utc.as_db == "2013-02-03 00:00:00"

    def test_replace_always_returns_new_value(self, base):
        """Test replace() never returns the receiver."""
        same = base.replace({})
        assert same == base
        assert same is not base
        assert base.replace(hour=2, cascade=True).as_time == "02:00:00"


# =============================================================================
# Arithmetic Tests
# =============================================================================


class TestDateTimeArithmetic:
    """Tests for add(), sub(), diff() and the operators."""

    def test_add_period(self):
        """Test adding to the wall-clock fields."""
        dt = DateTime("2013-02-03 21:03:45", "UTC")
        assert dt.add(Period(years=1, hours=3)).as_db == "2014-02-04 00:03:45"

    def test_add_iso_string(self):
        """Test durations may be given as ISO-8601 strings."""
        assert DateTime("2013-01-31", "UTC").add("P1M").as_date == "2013-03-03"

    def test_sub(self):
        """Test subtracting a period."""
        dt = DateTime("2013-03-01", "UTC")
        assert dt.sub("P1D").as_date == "2013-02-28"
        assert dt.sub(Period(months=1)).as_date == "2013-02-01"

    def test_operators(self):
        """Test + and - with periods and strings."""
        dt = DateTime("2013-03-01", "UTC")
        assert (dt + Period(days=1)).as_date == "2013-03-02"
        assert (dt - "P1D").as_date == "2013-02-28"

    def test_add_leaves_receiver_alone(self):
        """Test DateTime arithmetic returns new values."""
        dt = DateTime("2013-03-01", "UTC")
        dt.add("P1D")
        assert dt.as_date == "2013-03-01"

    def test_add_rejects_other_types(self):
        """Test only periods and strings can be added."""
        with pytest.raises(TypeError):
            DateTime().add(5)
        with pytest.raises(TypeError):
            DateTime() + 5

    def test_add_invalid_duration(self):
        """Test a malformed duration string is a ParseError."""
        with pytest.raises(ParseError):
            DateTime().add("1 day")

    def test_diff_counts_months_first(self):
        """Test diff counts whole months, then the remainder."""
        start = DateTime("2013-01-01", "UTC")
        result = start.diff(DateTime("2013-02-02 03:00", "UTC"))
        assert result == Period(months=1, days=1, hours=3)

    def test_diff_month_end(self):
        """Test a month does not fit between January 31st and March 1st."""
        result = DateTime("2013-01-31", "UTC").diff(DateTime("2013-03-01", "UTC"))
        assert result == Period(days=29)
        assert result.total_days == 29

    def test_diff_total_days(self):
        """Test total_days counts every elapsed day."""
        result = DateTime("2013-01-01", "UTC").diff(DateTime("2013-03-01", "UTC"))
        assert result.months == 2
        assert result.total_days == 59

    def test_diff_negative_and_absolute(self):
        """Test a later receiver gives a negative period unless absolute."""
        early, late = DateTime("2013-01-31", "UTC"), DateTime("2013-03-01", "UTC")
        assert late.diff(early) == Period(days=-29)
        assert late.diff(early).total_days == -29
        assert late.diff(early, absolute=True) == Period(days=29)

    def test_diff_across_zones_uses_utc(self):
        """Test values in different zones are compared in UTC."""
        utc = DateTime("2013-01-01 00:00", "UTC")
        paris = DateTime("2013-01-01 02:00", "Europe/Paris")
        assert utc.diff(paris) == Period(hours=1)

    def test_diff_with_string(self):
        """Test diff accepts anything from_value does."""
        assert DateTime("2013-01-01", "UTC").diff("2013-01-02") == Period(days=1)

    def test_subtracting_datetimes(self):
        """Test a - b is the period from b to a."""
        a = DateTime("2013-02-02 03:00", "UTC")
        b = DateTime("2013-01-01", "UTC")
        assert a - b == Period(months=1, days=1, hours=3)
        assert b - a == Period(months=-1, days=-1, hours=-3)

    def test_add_diff_round_trip(self):
        """Test start plus start.diff(end) is end."""
        start = DateTime("2012-02-29 10:00", "UTC")
        end = DateTime("2013-02-28 09:59:59.999999", "UTC")
        assert start + start.diff(end) == end


# =============================================================================
# Comparison Tests
# =============================================================================


class TestDateTimeComparison:
    """Tests for equality, ordering and hashing."""

    def test_same_instant_in_other_zone_is_equal(self, paris_sunday):
        """Test equality compares instants."""
        utc = DateTime("2013-02-03 20:03:45.123456", "UTC")
        assert paris_sunday == utc
        assert hash(paris_sunday) == hash(utc)

    def test_equal_to_mutable_variant(self, paris_sunday):
        """Test a DateTime equals a MutableDateTime at the same instant."""
        assert paris_sunday == paris_sunday.mutable

    def test_microseconds_count(self):
        """Test values a microsecond apart differ."""
        assert DateTime("2013-01-01 00:00:00.000001", "UTC") > DateTime("2013-01-01", "UTC")

    def test_ordering(self):
        """Test the rich comparisons."""
        a = DateTime("2013-01-01", "UTC")
        b = DateTime("2013-01-02", "UTC")
        assert a < b <= b
        assert b > a >= a
        assert a != b
        assert sorted([b, a]) == [a, b]

    def test_usable_as_dict_key(self):
        """Test DateTime is hashable."""
        table = {DateTime("2013-01-01", "UTC"): "new year"}
        assert table[DateTime("2013-01-01 01:00", "Europe/Paris")] == "new year"

    def test_other_types(self):
        """Test comparisons with foreign types."""
        dt = DateTime("2013-01-01", "UTC")
        assert dt != "2013-01-01"
        with pytest.raises(TypeError):
            dt < "2013-01-02"


# =============================================================================
# Now Tests
# =============================================================================


class TestDateTimeNow:
    """Tests for now() and right_now()."""

    def test_now_is_request_time(self):
        """Test now() reads the request time in the default zone."""
        now = DateTime.now()
        assert now.timestamp == FROZEN_AT
        assert now.timezone.name == "Europe/Paris"

    def test_now_is_memoized(self, frozen_clock):
        """Test now() returns the same instance while the clock is unchanged."""
        first = DateTime.now()
        frozen_clock.advance(seconds=60)
        assert DateTime.now() is first
        assert DateTime.now().timestamp == FROZEN_AT

    def test_right_now_follows_live_clock(self, frozen_clock):
        """Test right_now() reads the live time on every call."""
        frozen_clock.advance(seconds=60)
        assert DateTime.right_now().timestamp == FROZEN_AT + 60

    def test_new_clock_refreshes_now(self):
        """Test installing a clock invalidates the memoized value."""
        first = DateTime.now()
        set_clock(FrozenClock.at_seconds(0))
        assert DateTime.now().timestamp == 0
        assert DateTime.now() is not first

    def test_default_timezone_change_refreshes_now(self):
        """Test a new default zone gives a value in that zone."""
        DateTime.now()
        set_default_timezone("UTC")
        assert DateTime.now().timezone.name == "UTC"

    def test_mutable_now_is_fresh(self):
        """Test MutableDateTime.now() never shares an instance."""
        assert MutableDateTime.now() is not MutableDateTime.now()
        assert MutableDateTime.now() == DateTime.now()


# =============================================================================
# Attribute Policy Tests
# =============================================================================


class TestDateTimeAttributes:
    """Tests for the closed, read-only field set."""

    @pytest.mark.parametrize("name", ["year", "timestamp", "timezone", "quarter", "is_monday", "as_db"])
    def test_fields_are_read_only(self, name):
        """Test assigning any field raises PropertyNotWritable."""
        with pytest.raises(PropertyNotWritable, match=f"DateTime.{name}"):
            setattr(DateTime(), name, 1)

    def test_unknown_field_read(self):
        """Test reading an unknown field raises PropertyNotDefined."""
        with pytest.raises(PropertyNotDefined, match="Property is not defined: DateTime.fortnight"):
            DateTime().fortnight

    def test_unknown_field_write(self):
        """Test writing an unknown field raises PropertyNotDefined."""
        with pytest.raises(PropertyNotDefined):
            DateTime().fortnight = 2

    def test_getattr_default_and_hasattr(self):
        """Test the errors are AttributeErrors."""
        dt = DateTime()
        assert not hasattr(dt, "fortnight")
        assert getattr(dt, "fortnight", None) is None
        assert hasattr(dt, "quarter")

    def test_delete_field(self):
        """Test deleting a field raises PropertyNotWritable."""
        with pytest.raises(PropertyNotWritable):
            del DateTime().year

    def test_read_only_field_set(self):
        """Test the published read-only names include the format accessors."""
        assert {"as_db", "as_rfc1123", "is_empty", "monday"} <= DateTime.READ_ONLY_FIELDS
        assert DateTime.WRITABLE_FIELDS == frozenset()


# =============================================================================
# Conversion Tests
# =============================================================================


class TestDateTimeConversions:
    """Tests for conversions, copies and localization."""

    def test_to_datetime(self, paris_sunday):
        """Test the aware stdlib datetime has the same instant and zone."""
        result = paris_sunday.to_datetime()
        expected = datetime.datetime(2013, 2, 3, 21, 3, 45, 123456, tzinfo=zoneinfo.ZoneInfo("Europe/Paris"))
        assert result == expected
        assert result.utcoffset() == datetime.timedelta(hours=1)

    def test_to_local_datetime(self, paris_sunday):
        """Test the wall-clock fields become a LocalDateTime."""
        assert paris_sunday.to_local_datetime() == LocalDateTime(2013, 2, 3, 21, 3, 45, 123456)

    def test_variants(self, paris_sunday):
        """Test mutable and immutable copies."""
        mutable = paris_sunday.mutable
        assert type(mutable) is MutableDateTime
        assert type(mutable.immutable) is DateTime
        mutable.hour = 5
        assert paris_sunday.hour == 21

    @pytest.mark.parametrize("protocol", range(pickle.HIGHEST_PROTOCOL + 1))
    def test_pickle(self, paris_sunday, protocol):
        """Test pickling keeps instant, zone and type."""
        restored = pickle.loads(pickle.dumps(paris_sunday, protocol))
        assert type(restored) is DateTime
        assert restored == paris_sunday
        assert restored.timezone is paris_sunday.timezone

    def test_pickle_empty(self):
        """Test pickling keeps the empty tag."""
        assert pickle.loads(pickle.dumps(DateTime.none())).is_empty

    def test_copy_module(self, paris_sunday):
        """Test copy.copy and copy.deepcopy."""
        assert copy.copy(paris_sunday) == paris_sunday
        deep = copy.deepcopy(paris_sunday)
        assert deep == paris_sunday
        assert deep.timezone is paris_sunday.timezone

    def test_localize_with_explicit_localizer(self, paris_sunday):
        """Test an explicit localizer is called with the value and locale."""
        result = paris_sunday.localize("fr", lambda value, locale: f"{locale}:{value.as_date}")
        assert result == "fr:2013-02-03"

    def test_localize_with_defined_localizer(self, paris_sunday):
        """Test the process-wide localizer is used when none is passed."""
        localizer.define(lambda value, locale: (locale, value.year))
        assert paris_sunday.localize() == ("en", 2013)

    def test_localize_without_localizer(self, paris_sunday):
        """Test localize() with no localizer anywhere."""
        with pytest.raises(LocalizerNotConfigured):
            paris_sunday.localize("fr")


# =============================================================================
# Property Tests
# =============================================================================


class TestDateTimeProperties:
    """Tests for relations that hold for any value."""

    INSTANTS = [
        "2013-02-03 21:03:45",
        "2012-12-31 23:59:59",
        "2014-01-06 00:00:00",
        "2013-03-31 03:00:00",
        "-0001-11-30 12:00:00",
    ]

    @pytest.mark.parametrize("text", INSTANTS)
    def test_empty_change_is_identity(self, text):
        """Test change({}) leaves the DB rendering unchanged."""
        dt = DateTime(text)
        assert dt.change({}).as_db == dt.as_db

    @pytest.mark.parametrize("text", INSTANTS)
    def test_monday_is_idempotent(self, text):
        """Test monday of a Monday is itself."""
        monday = DateTime(text).monday
        assert monday.monday == monday
        assert monday.weekday == 1

    @pytest.mark.parametrize("text", INSTANTS)
    def test_yesterday_before_tomorrow(self, text):
        """Test yesterday < value < tomorrow, and min/max agree."""
        dt = DateTime(text)
        assert dt.yesterday < dt < dt.tomorrow
        assert min([dt, dt.tomorrow, dt.yesterday]) == dt.yesterday
        assert max([dt.yesterday, dt.tomorrow, dt]) == dt.tomorrow

    @pytest.mark.parametrize("text", INSTANTS)
    def test_local_decompositions_agree(self, text):
        """Test LocalDateTime and LocalDate read the same date."""
        dt = DateTime(text)
        assert LocalDateTime.from_value(dt).to_date() == LocalDate.from_value(dt)
