"""Tests for the TimeValue class."""

from __future__ import annotations

import pytest

from temporis import (
    Calendar,
    CalendarDate,
    DateComponents,
    Precision,
    TimeOptions,
    TimeValue,
)
from temporis.convert import gregorian_to_julian_day

GREGORIAN_URI = "http://wikidata.org/id/Q1985727"
JULIAN_URI = "http://wikidata.org/id/Q1985786"


class TestTimeValueConstruction:
    """Tests for building TimeValue from text and structured fields."""

    def test_from_mapping(self) -> None:
        """A mapping of fields builds a TimeValue."""
        t = TimeValue({"year": 2016, "month": 2, "day": 29})
        assert (t.year, t.month, t.day) == (2016, 2, 29)
        assert t.calendarname == "Gregorian"
        assert t.is_valid()

    def test_from_components(self) -> None:
        """DateComponents build a TimeValue."""
        t = TimeValue(DateComponents(year=1850, month=7, precision=Precision.MONTH))
        assert (t.year, t.month, t.day) == (1850, 7, 1)
        assert t.precision == Precision.MONTH

    def test_from_text(self) -> None:
        """Text is read by the parser."""
        t = TimeValue("15 January 1850")
        assert (t.year, t.month, t.day) == (1850, 1, 15)
        assert t.precision == Precision.DAY

    def test_field_defaults(self) -> None:
        """Absent fields default to the first moment of the year, Gregorian."""
        t = TimeValue({"year": 1200})
        assert (t.month, t.day, t.hour, t.minute, t.second) == (1, 1, 0, 0, 0)
        assert t.calendarname == "Gregorian"

    @pytest.mark.parametrize(
        "fields, expected",
        [
            ({"year": 1}, Precision.YEAR),
            ({"year": 1, "month": 2}, Precision.MONTH),
            ({"year": 1, "month": 2, "day": 3}, Precision.DAY),
            ({"year": 1, "hour": 4}, Precision.HOUR),
            ({"year": 1, "minute": 5}, Precision.MINUTE),
            ({"year": 1, "second": 6}, Precision.SECOND),
            ({"month": 2}, None),
        ],
    )
    def test_default_precision_is_finest_field(self, fields: dict, expected: object) -> None:
        """Without a given precision, the finest present field decides it."""
        assert TimeValue(fields).precision == expected

    def test_precision_override(self) -> None:
        """An explicit precision overrules the detected one."""
        t = TimeValue("1985-01-01", TimeOptions(precision=Precision.YEAR))
        assert t.precision == Precision.YEAR

    def test_precision_override_gigayear(self) -> None:
        """A precision override of 0 is honoured."""
        t = TimeValue("1985-01-01", TimeOptions(precision=0))
        assert t.precision is Precision.GY

    def test_unknown_precision_code_is_kept(self) -> None:
        """A precision outside the scale is stored unchanged."""
        t = TimeValue({"year": 1985, "precision": 42})
        assert t.precision == 42
        assert t.precision_text == ""

    def test_calendar_override(self) -> None:
        """An explicit calendar overrules the detected one."""
        t = TimeValue("1850 Gregorian", TimeOptions(calendarname="Julian"))
        assert t.calendarname == "Julian"
        t = TimeValue("1850", TimeOptions(calendarname=Calendar.JULIAN))
        assert t.calendarname == "Julian"

    def test_calendar_from_text(self) -> None:
        """A calendar marker in the text is used when not overruled."""
        assert TimeValue("1850 Julian").calendar is Calendar.JULIAN

    def test_mapping_is_copied(self) -> None:
        """Mutating the source mapping afterwards does not affect the value."""
        fields = {"year": 2000, "month": 5}
        t = TimeValue(fields)
        fields["year"] = 1000
        fields["month"] = 1
        assert (t.year, t.month) == (2000, 5)

    def test_fields_are_read_only(self) -> None:
        """Accessors cannot be assigned."""
        t = TimeValue({"year": 2000})
        with pytest.raises(AttributeError):
            t.year = 1999  # type: ignore[misc]
        with pytest.raises(AttributeError):
            t.calendarname = "Julian"  # type: ignore[misc]

    def test_rejects_other_definitions(self) -> None:
        """Definitions that are neither text nor fields are a TypeError."""
        with pytest.raises(TypeError):
            TimeValue(1985)  # type: ignore[arg-type]

    def test_fixed_accessors(self) -> None:
        """utcoffset, before and after are fixed."""
        t = TimeValue("1985")
        assert t.utcoffset == "+00:00"
        assert t.before == 0
        assert t.after == 0


class TestTimeValueViews:
    """Tests for derived calendar views."""

    def test_gregorian_identity(self) -> None:
        """gregorian() of a Gregorian value is its own fields."""
        t = TimeValue({"year": 2016, "month": 2, "day": 29})
        assert t.gregorian() == CalendarDate(2016, 2, 29)
        assert t.gregorian() == (2016, 2, 29)

    def test_leap_day_jdn(self) -> None:
        """jdn() of Gregorian 2016-02-29 is fixed."""
        assert TimeValue({"year": 2016, "month": 2, "day": 29}).jdn() == 2457448

    def test_julian_of_gregorian(self) -> None:
        """julian() converts a Gregorian value."""
        t = TimeValue({"year": 2016, "month": 2, "day": 29})
        assert t.julian() == (2016, 2, 16)

    def test_julian_value_views(self) -> None:
        """A Julian value converts to Gregorian and keeps its own Julian view."""
        t = TimeValue("1582-10-05", TimeOptions(calendarname=Calendar.JULIAN))
        assert t.julian() == (1582, 10, 5)
        assert t.gregorian() == (1582, 10, 15)
        assert t.jdn() == 2299161
        assert t.iso8601() == "+00000001582-10-15T00:00:00Z"

    def test_same_day_in_both_calendars_shares_jdn(self) -> None:
        """Values for the same day in different calendars have the same JDN."""
        gregorian = TimeValue("1582-10-15")
        julian = TimeValue("1582-10-05 Julian")
        assert gregorian.jdn() == julian.jdn()
        assert gregorian != julian

    def test_out_of_range_fields_propagate(self) -> None:
        """Month 13 is stored as given and carried arithmetically."""
        t = TimeValue({"year": 2000, "month": 13, "day": 1})
        assert t.gregorian() == (2000, 13, 1)
        assert t.jdn() == gregorian_to_julian_day(2001, 1, 1)

    def test_calendar_uri(self) -> None:
        """calendar_uri is the fixed URI of the calendar."""
        assert TimeValue("1900").calendar_uri == GREGORIAN_URI
        assert TimeValue("1900 Julian").calendar_uri == JULIAN_URI

    def test_calendar_text(self) -> None:
        """calendar_text is the calendar name."""
        assert TimeValue("1900 Julian").calendar_text == "Julian"


class TestTimeValueIso8601:
    """Tests for iso8601() and new_from_iso8601()."""

    def test_iso8601_positive_year(self) -> None:
        """Positive years carry a '+' and 11 digits."""
        assert TimeValue("1985-01-01").iso8601() == "+00000001985-01-01T00:00:00Z"

    def test_iso8601_includes_time_of_day(self) -> None:
        """Hour, minute and second are rendered."""
        t = TimeValue({"year": 1985, "month": 3, "day": 7, "hour": 12, "minute": 30, "second": 5})
        assert t.iso8601() == "+00000001985-03-07T12:30:05Z"

    def test_iso8601_large_year(self) -> None:
        """Years in the billions fit the 11 digits."""
        t = TimeValue("13 billion years ago")
        assert t.iso8601() == "-13000000000-01-01T00:00:00Z"

    def test_new_from_iso8601_plus_sign(self) -> None:
        """'+1985-01-01' at DAY precision reads as 1985-01-01."""
        t = TimeValue.new_from_iso8601("+1985-01-01", Precision.DAY)
        assert (t.year, t.month, t.day) == (1985, 1, 1)
        assert t.precision == Precision.DAY

    def test_new_from_iso8601_negative_year(self) -> None:
        """'-0100-06-15' reads as year -100 and renders with a '-' sign."""
        t = TimeValue.new_from_iso8601("-0100-06-15", Precision.DAY)
        assert (t.year, t.month, t.day) == (-100, 6, 15)
        iso = t.iso8601()
        assert iso is not None
        assert iso.startswith("-")
        assert iso[1:12] == "00000000100"
        assert iso == "-00000000100-06-15T00:00:00Z"

    def test_new_from_iso8601_full_timestamp(self) -> None:
        """A full timestamp drops its time of day; precision defaults to DAY."""
        t = TimeValue.new_from_iso8601("+00000002016-02-29T10:11:12Z")
        assert (t.year, t.month, t.day, t.hour) == (2016, 2, 29, 0)
        assert t.precision == Precision.DAY

    def test_new_from_iso8601_year_zero(self) -> None:
        """Year zero keeps one digit."""
        t = TimeValue.new_from_iso8601("+0000-01-01")
        assert t.year == 0
        assert t.iso8601() == "+00000000000-01-01T00:00:00Z"

    def test_new_from_iso8601_unspecified_month_and_day(self) -> None:
        """Zero month and day read as unspecified."""
        t = TimeValue.new_from_iso8601("+00000002010-00-00T00:00:00Z", Precision.YEAR)
        assert (t.year, t.month, t.day) == (2010, 1, 1)
        assert t.precision == Precision.YEAR

    def test_new_from_iso8601_is_gregorian(self) -> None:
        """Timestamps are Gregorian."""
        assert TimeValue.new_from_iso8601("+1985-01-01").calendar is Calendar.GREGORIAN

    def test_new_from_iso8601_malformed(self) -> None:
        """Malformed input yields an invalid value."""
        t = TimeValue.new_from_iso8601("yesterday-ish", Precision.DAY)
        assert not t.is_valid()
        assert t.iso8601() is None


class TestTimeValueText:
    """Tests for display text views."""

    def test_text(self) -> None:
        """text() renders the stored date at its precision."""
        assert TimeValue("15 January 1850").text() == "15 January 1850"
        assert TimeValue("1980s").text() == "1980s"

    def test_str_is_text(self) -> None:
        """str() is the display text."""
        assert str(TimeValue("13th century")) == "13th century"

    def test_julian_and_gregorian_text(self) -> None:
        """Text views render the converted dates."""
        t = TimeValue("15 January 1850")
        assert t.gregorian_text() == "15 January 1850"
        assert t.julian_text() == "3 January 1850"

    def test_julian_value_text(self) -> None:
        """A Julian value's text() uses its own fields."""
        t = TimeValue("5 October 1582 Julian")
        assert t.text() == "5 October 1582"
        assert t.gregorian_text() == "15 October 1582"

    def test_day_before_common_era(self) -> None:
        """31 December 1 BCE is year 0, the day before 1 January 1."""
        last = TimeValue("31 December 1 BCE")
        first = TimeValue("1 January 1")
        assert last.year == 0
        assert first.jdn() - last.jdn() == 1
        assert first.jdn() == 1721426
        assert last.text() == "31 December 1 BCE"

    def test_before_common_era_text(self) -> None:
        """BCE text reads and renders in the same era numbering."""
        t = TimeValue("15 March 44 BCE Julian")
        assert t.year == -43
        assert t.text() == "15 March 44 BCE"
        assert t.gregorian_text() == "13 March 44 BCE"

    def test_precision_text(self) -> None:
        """precision_text names the precision."""
        assert TimeValue("1980s").precision_text == "decade"
        assert TimeValue("1985-01-01").precision_text == "day"


class TestInvalidTimeValue:
    """Tests for values representing no time."""

    @pytest.mark.parametrize("definition", [{}, None, "", "not a date", DateComponents()])
    def test_no_view_raises(self, definition: object) -> None:
        """Every view of an invalid value degrades without raising."""
        t = TimeValue(definition)  # type: ignore[arg-type]
        assert not t.is_valid()
        assert t.year is None
        assert t.gregorian() is None
        assert t.julian() is None
        assert t.jdn() is None
        assert t.iso8601() is None
        assert t.text() == ""
        assert t.gregorian_text() == ""
        assert t.julian_text() == ""
        assert t.to_json() is None

    def test_default_construction(self) -> None:
        """TimeValue() is the unknown time."""
        assert not TimeValue().is_valid()

    def test_invalid_julian_value(self) -> None:
        """An unknown year in the Julian calendar has no Gregorian view."""
        t = TimeValue({}, TimeOptions(calendarname="Julian"))
        assert t.gregorian() is None
        assert t.iso8601() is None
        assert t.gregorian_text() == ""
        assert t.calendar_uri == JULIAN_URI

    def test_is_valid_iff_year_known(self) -> None:
        """is_valid() tracks exactly whether a year is stored."""
        assert TimeValue({"year": 0}).is_valid()
        assert not TimeValue({"month": 5, "day": 3}).is_valid()


class TestUnsupportedCalendar:
    """Tests for values declared in an unsupported calendar."""

    def test_calendar_dependent_views_are_none(self) -> None:
        """Views needing the calendar return None; the name is kept."""
        t = TimeValue({"year": 2000, "month": 1, "day": 1}, TimeOptions(calendarname="Hebrew"))
        assert t.is_valid()
        assert t.calendar is None
        assert t.calendar_text == "Hebrew"
        assert t.calendar_uri is None
        assert t.gregorian() is None
        assert t.julian() is None
        assert t.jdn() is None
        assert t.iso8601() is None
        assert t.julian_text() == ""
        assert t.gregorian_text() == ""
        assert t.to_json() is None

    def test_text_still_renders(self) -> None:
        """text() renders the stored fields regardless of calendar."""
        t = TimeValue({"year": 2000, "month": 1, "day": 1}, TimeOptions(calendarname="Hebrew"))
        assert t.text() == "1 January 2000"


class TestTimeValueComparison:
    """Tests for equality, hashing and repr."""

    def test_equal_values(self) -> None:
        """Values with the same fields are equal and hash alike."""
        a = TimeValue("1985-01-01")
        b = TimeValue({"year": 1985, "month": 1, "day": 1, "precision": 11})
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_precision_distinguishes(self) -> None:
        """Values differing only in precision are not equal."""
        assert TimeValue("1985-01-01") != TimeValue("1985-01-01", TimeOptions(precision=9))

    def test_not_equal_to_other_types(self) -> None:
        """Comparing with a non-TimeValue is not equal."""
        assert TimeValue("1985") != "1985"

    def test_repr(self) -> None:
        """repr shows the stored fields."""
        assert repr(TimeValue()) == "TimeValue(invalid)"
        assert repr(TimeValue({"year": 1985})) == (
            "TimeValue(year=1985, month=1, day=1, hour=0, minute=0, second=0, "
            "precision=<Precision.YEAR: 9>, calendarname='Gregorian')"
        )
