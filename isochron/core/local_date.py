"""LocalDate class representing a calendar date.

This module provides the LocalDate class for representing dates in the
proleptic Gregorian (ISO) calendar, from year -999,999,999 to
999,999,999.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

from isochron._internal.arith import trunc_div
from isochron._internal.calendar import (
    days_before_month,
    days_in_month,
    days_in_year,
    epoch_day_to_day_of_week,
    epoch_day_to_ymd,
    is_leap_year,
    ymd_to_epoch_day,
)
from isochron._internal.constants import MAX_EPOCH_DAY, MAX_YEAR, MIN_EPOCH_DAY, SECONDS_PER_DAY
from isochron._internal.validation import validate_date, validate_leap_day
from isochron.errors import OverflowError, UnsupportedFieldError
from isochron.format.iso8601 import format_date, parse_date
from isochron.temporal.base import Temporal
from isochron.temporal.field import DATE_FIELDS, ChronoField
from isochron.temporal.unit import ChronoUnit
from isochron.temporal.value_range import ValueRange
from isochron.units.day_of_week import DayOfWeek
from isochron.units.era import IsoEra
from isochron.units.month import Month

if TYPE_CHECKING:
    from isochron.chrono.iso import IsoChronology
    from isochron.core.clock import Clock
    from isochron.core.local_date_time import LocalDateTime
    from isochron.core.local_time import LocalTime
    from isochron.core.period import Period
    from isochron.core.zoned_date_time import ZonedDateTime
    from isochron.temporal.base import TemporalUnit
    from isochron.zone.zone_id import ZoneId

_F = ChronoField
_U = ChronoUnit
_DATE_UNITS = frozenset(unit for unit in ChronoUnit if unit.is_date_based())


class LocalDate(Temporal):
    """A date without a time-zone in the ISO calendar, such as 2007-12-03.

    LocalDate uses the proleptic Gregorian calendar: the Gregorian leap
    year rules are applied to all years, including those before its
    adoption in 1582. Years use astronomical numbering, so year 0 exists
    and is 1 BCE.

    Internal representation is the epoch-day, the count of days from
    1970-01-01.

    Attributes:
        year: The proleptic year.
        month: The month-of-year (1-12).
        day: The day-of-month (1-31).

    Examples:
        >>> d = LocalDate(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)
        >>> d.day_of_week
        <DayOfWeek.MONDAY: 1>
        >>> LocalDate(2024, 2, 30)
        Traceback (most recent call last):
        ...
        InvalidDateError: Invalid date 'February 30'
    """

    __slots__ = ("_days",)

    _FIELDS = DATE_FIELDS
    _UNITS = _DATE_UNITS

    MIN: LocalDate
    MAX: LocalDate
    EPOCH: LocalDate

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a LocalDate from year, month and day.

        Raises:
            FieldOutOfRangeError: If a component is outside its range.
            InvalidDateError: If the day does not exist in the month.
        """
        validate_date(year, month, day)
        self._days = ymd_to_epoch_day(year, month, day)

    @classmethod
    def _from_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a LocalDate from an epoch-day already in range."""
        date = object.__new__(cls)
        date._days = epoch_day
        return date

    @classmethod
    def _resolve_previous_valid(cls, year: int, month: int, day: int) -> LocalDate:
        """Create a date, clamping the day to the end of the month."""
        return cls._from_epoch_day(
            ymd_to_epoch_day(year, month, min(day, days_in_month(year, month)))
        )

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a LocalDate from an epoch-day count.

        Raises:
            FieldOutOfRangeError: If the epoch-day is out of range.

        Examples:
            >>> LocalDate.of_epoch_day(0)
            LocalDate(1970, 1, 1)
        """
        _F.EPOCH_DAY.check_valid_value(epoch_day)
        return cls._from_epoch_day(epoch_day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> LocalDate:
        """Create a LocalDate from a year and day-of-year.

        Raises:
            FieldOutOfRangeError: If a component is outside its range.
            InvalidDateError: If day 366 is requested in a non-leap year.

        Examples:
            >>> LocalDate.of_year_day(2024, 60)
            LocalDate(2024, 2, 29)
        """
        _F.YEAR.check_valid_value(year)
        validate_leap_day(year, day_of_year)
        return cls._from_epoch_day(ymd_to_epoch_day(year, 1, 1) + day_of_year - 1)

    @classmethod
    def of_instant(cls, instant: Any, zone: ZoneId) -> LocalDate:
        """Return the date of an instant as seen in a zone."""
        offset = zone.rules.get_offset(instant)
        local_second = instant.epoch_second + offset.total_seconds
        return cls.of_epoch_day(local_second // SECONDS_PER_DAY)

    @classmethod
    def now(cls, clock: Clock | None = None) -> LocalDate:
        """Return the current date from the clock (system default zone if None)."""
        from isochron.core.clock import Clock

        clock = clock or Clock.system_default_zone()
        return cls.of_instant(clock.instant(), clock.zone)

    @classmethod
    def from_temporal(cls, temporal: Any) -> LocalDate:
        """Obtain a LocalDate from any value that supports EPOCH_DAY.

        Raises:
            UnsupportedFieldError: If the value has no date.
        """
        if isinstance(temporal, LocalDate):
            return temporal
        if not temporal.is_supported(_F.EPOCH_DAY):
            raise UnsupportedFieldError(
                f"Unable to obtain LocalDate from {type(temporal).__name__}"
            )
        return cls._from_epoch_day(temporal.get(_F.EPOCH_DAY))

    @classmethod
    def from_iso_format(cls, text: str) -> LocalDate:
        """Parse a date in the ISO 8601 form uuuu-MM-dd.

        Years outside 0000-9999 carry a sign: -0044-03-15, +10000-01-01.

        Raises:
            ParseError: If the text is not valid ISO 8601 format.
            FieldOutOfRangeError: If a component is outside its range.
            InvalidDateError: If the day does not exist in the month.

        Examples:
            >>> LocalDate.from_iso_format("2024-01-15")
            LocalDate(2024, 1, 15)
            >>> LocalDate.from_iso_format("-0044-03-15")
            LocalDate(-44, 3, 15)
        """
        return cls(*parse_date(text))

    @property
    def chronology(self) -> IsoChronology:
        """Return the ISO chronology."""
        from isochron.chrono.iso import IsoChronology

        return IsoChronology.INSTANCE

    @property
    def year(self) -> int:
        return epoch_day_to_ymd(self._days)[0]

    @property
    def month(self) -> int:
        """Return the month-of-year as an int (1-12)."""
        return epoch_day_to_ymd(self._days)[1]

    @property
    def month_of_year(self) -> Month:
        """Return the month-of-year as a Month enum."""
        return Month(self.month)

    @property
    def day(self) -> int:
        """Return the day-of-month (1-31)."""
        return epoch_day_to_ymd(self._days)[2]

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the day-of-week.

        Examples:
            >>> LocalDate(2024, 1, 21).day_of_week
            <DayOfWeek.SUNDAY: 7>
        """
        return DayOfWeek(epoch_day_to_day_of_week(self._days))

    @property
    def day_of_year(self) -> int:
        """Return the day-of-year (1-366)."""
        year, month, day = epoch_day_to_ymd(self._days)
        return days_before_month(year, month) + day

    @property
    def era(self) -> IsoEra:
        """Return the era; year 0 and earlier are BCE."""
        return IsoEra.CE if self.year >= 1 else IsoEra.BCE

    @property
    def is_leap_year(self) -> bool:
        """Return True if the year is a leap year.

        Examples:
            >>> LocalDate(2000, 1, 1).is_leap_year
            True
            >>> LocalDate(1900, 1, 1).is_leap_year
            False
        """
        return is_leap_year(self.year)

    def length_of_month(self) -> int:
        year, month, _ = epoch_day_to_ymd(self._days)
        return days_in_month(year, month)

    def length_of_year(self) -> int:
        return days_in_year(self.year)

    def to_epoch_day(self) -> int:
        return self._days

    @property
    def _proleptic_month(self) -> int:
        year, month, _ = epoch_day_to_ymd(self._days)
        return year * 12 + month - 1

    def _range_of(self, field: ChronoField) -> ValueRange:
        if field is _F.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if field is _F.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        if field is _F.ALIGNED_WEEK_OF_MONTH:
            short = self.month == 2 and not self.is_leap_year
            return ValueRange.of(1, 4 if short else 5)
        if field is _F.YEAR_OF_ERA:
            return ValueRange.of(1, MAX_YEAR + 1 if self.year <= 0 else MAX_YEAR)
        return field.range()

    def _get_field(self, field: ChronoField) -> int:
        year, month, day = epoch_day_to_ymd(self._days)
        if field is _F.DAY_OF_WEEK:
            return epoch_day_to_day_of_week(self._days)
        if field is _F.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return (day - 1) % 7 + 1
        if field is _F.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return (self.day_of_year - 1) % 7 + 1
        if field is _F.DAY_OF_MONTH:
            return day
        if field is _F.DAY_OF_YEAR:
            return self.day_of_year
        if field is _F.EPOCH_DAY:
            return self._days
        if field is _F.ALIGNED_WEEK_OF_MONTH:
            return (day - 1) // 7 + 1
        if field is _F.ALIGNED_WEEK_OF_YEAR:
            return (self.day_of_year - 1) // 7 + 1
        if field is _F.MONTH_OF_YEAR:
            return month
        if field is _F.PROLEPTIC_MONTH:
            return year * 12 + month - 1
        if field is _F.YEAR_OF_ERA:
            return year if year >= 1 else 1 - year
        if field is _F.YEAR:
            return year
        # ERA
        return 1 if year >= 1 else 0

    def _with_field(self, field: ChronoField, value: int) -> LocalDate:
        field.check_valid_value(value)
        if field is _F.DAY_OF_WEEK:
            return self.plus_days(value - self.day_of_week.value)
        if field in (_F.ALIGNED_DAY_OF_WEEK_IN_MONTH, _F.ALIGNED_DAY_OF_WEEK_IN_YEAR):
            return self.plus_days(value - self._get_field(field))
        if field is _F.DAY_OF_MONTH:
            return self.with_day_of_month(value)
        if field is _F.DAY_OF_YEAR:
            return self.with_day_of_year(value)
        if field is _F.EPOCH_DAY:
            return LocalDate.of_epoch_day(value)
        if field in (_F.ALIGNED_WEEK_OF_MONTH, _F.ALIGNED_WEEK_OF_YEAR):
            return self.plus_weeks(value - self._get_field(field))
        if field is _F.MONTH_OF_YEAR:
            return self.with_month(value)
        if field is _F.PROLEPTIC_MONTH:
            return self.plus_months(value - self._proleptic_month)
        if field is _F.YEAR_OF_ERA:
            return self.with_year(value if self.year >= 1 else 1 - value)
        if field is _F.YEAR:
            return self.with_year(value)
        # ERA
        return self if self._get_field(_F.ERA) == value else self.with_year(1 - self.year)

    def with_year(self, year: int) -> LocalDate:
        """Return a copy with the year changed; Feb 29 clamps to Feb 28."""
        _F.YEAR.check_valid_value(year)
        _, month, day = epoch_day_to_ymd(self._days)
        return LocalDate._resolve_previous_valid(year, month, day)

    def with_month(self, month: int) -> LocalDate:
        """Return a copy with the month changed, clamping the day."""
        _F.MONTH_OF_YEAR.check_valid_value(month)
        year, _, day = epoch_day_to_ymd(self._days)
        return LocalDate._resolve_previous_valid(year, month, day)

    def with_day_of_month(self, day: int) -> LocalDate:
        year, month, _ = epoch_day_to_ymd(self._days)
        return LocalDate(year, month, day)

    def with_day_of_year(self, day_of_year: int) -> LocalDate:
        return LocalDate.of_year_day(self.year, day_of_year)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> LocalDate:
        """Return a new LocalDate with specified components replaced.

        Unlike with_month and with_year, no clamping is applied.

        Raises:
            InvalidDateError: If the resulting date is invalid.

        Examples:
            >>> LocalDate(2024, 1, 15).replace(month=6)
            LocalDate(2024, 6, 15)
        """
        y, m, d = epoch_day_to_ymd(self._days)
        return LocalDate(
            y if year is None else year,
            m if month is None else month,
            d if day is None else day,
        )

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> LocalDate:
        if unit is _U.DAYS:
            return self.plus_days(amount)
        if unit is _U.WEEKS:
            return self.plus_weeks(amount)
        if unit is _U.MONTHS:
            return self.plus_months(amount)
        if unit is _U.YEARS:
            return self.plus_years(amount)
        if unit is _U.DECADES:
            return self.plus_years(amount * 10)
        if unit is _U.CENTURIES:
            return self.plus_years(amount * 100)
        if unit is _U.MILLENNIA:
            return self.plus_years(amount * 1000)
        # ERAS
        return self.with_field(_F.ERA, self._get_field(_F.ERA) + amount)

    def plus_days(self, days: int) -> LocalDate:
        """Return a copy with days added.

        Raises:
            OverflowError: If the result is outside the supported range.

        Examples:
            >>> LocalDate(2024, 1, 15).plus_days(20)
            LocalDate(2024, 2, 4)
        """
        if days == 0:
            return self
        epoch_day = self._days + days
        if epoch_day < MIN_EPOCH_DAY or epoch_day > MAX_EPOCH_DAY:
            raise OverflowError(f"LocalDate out of range: epoch-day {epoch_day}")
        return LocalDate._from_epoch_day(epoch_day)

    def plus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_days(weeks * 7)

    def plus_months(self, months: int) -> LocalDate:
        """Return a copy with months added, clamping the day-of-month.

        Examples:
            >>> LocalDate(2024, 1, 31).plus_months(1)
            LocalDate(2024, 2, 29)
        """
        if months == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)
        total = year * 12 + (month - 1) + months
        new_year, new_month = divmod(total, 12)
        _check_year_overflow(new_year)
        return LocalDate._resolve_previous_valid(new_year, new_month + 1, day)

    def plus_years(self, years: int) -> LocalDate:
        """Return a copy with years added; Feb 29 clamps to Feb 28."""
        if years == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)
        _check_year_overflow(year + years)
        return LocalDate._resolve_previous_valid(year + years, month, day)

    def minus_days(self, days: int) -> LocalDate:
        return self.plus_days(-days)

    def minus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_weeks(-weeks)

    def minus_months(self, months: int) -> LocalDate:
        return self.plus_months(-months)

    def minus_years(self, years: int) -> LocalDate:
        return self.plus_years(-years)

    def until(self, end: Any, unit: TemporalUnit | None = None) -> Any:
        """Return the amount of time until end.

        With a unit, returns the whole number of that unit, truncated
        toward zero. Without a unit, returns the Period between the two
        dates.

        Examples:
            >>> LocalDate(2024, 1, 31).until(LocalDate(2024, 3, 1))
            Period(years=0, months=1, days=1)
            >>> LocalDate(2024, 1, 31).until(LocalDate(2024, 2, 29), ChronoUnit.MONTHS)
            0
        """
        end = LocalDate.from_temporal(end)
        if unit is None:
            return self._period_until(end)
        if isinstance(unit, ChronoUnit):
            if unit is _U.DAYS:
                return end._days - self._days
            if unit is _U.WEEKS:
                return trunc_div(end._days - self._days, 7)
            if unit is _U.MONTHS:
                return self._months_until(end)
            if unit is _U.YEARS:
                return trunc_div(self._months_until(end), 12)
            if unit is _U.DECADES:
                return trunc_div(self._months_until(end), 120)
            if unit is _U.CENTURIES:
                return trunc_div(self._months_until(end), 1200)
            if unit is _U.MILLENNIA:
                return trunc_div(self._months_until(end), 12000)
            if unit is _U.ERAS:
                return end._get_field(_F.ERA) - self._get_field(_F.ERA)
            raise UnsupportedFieldError(f"Unsupported unit: {unit}")
        return unit.between(self, end)

    def _months_until(self, end: LocalDate) -> int:
        packed1 = self._proleptic_month * 32 + self.day
        packed2 = end._proleptic_month * 32 + end.day
        return trunc_div(packed2 - packed1, 32)

    def _period_until(self, end: LocalDate) -> Period:
        from isochron.core.period import Period

        total_months = end._proleptic_month - self._proleptic_month
        days = end.day - self.day
        if total_months > 0 and days < 0:
            total_months -= 1
            days = end._days - self.plus_months(total_months)._days
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month()
        years = trunc_div(total_months, 12)
        months = total_months - years * 12
        return Period(years, months, days)

    def dates_until(self, end: LocalDate, step: Period | None = None) -> Iterator[LocalDate]:
        """Iterate over dates from this date (inclusive) to end (exclusive).

        Args:
            end: The exclusive end date.
            step: A positive Period; defaults to one day.

        Raises:
            ValueError: If end is before this date or step is not positive.

        Examples:
            >>> [str(d) for d in LocalDate(2024, 1, 30).dates_until(LocalDate(2024, 2, 2))]
            ['2024-01-30', '2024-01-31', '2024-02-01']
        """
        if end < self:
            raise ValueError(f"{end} < {self}")
        if step is None:
            for epoch_day in range(self._days, end._days):
                yield LocalDate._from_epoch_day(epoch_day)
            return
        if step.is_zero or step.is_negative:
            raise ValueError("step must be positive")
        months = step.to_total_months()
        days = step.days
        index = 0
        current = self
        while current < end:
            yield current
            index += 1
            current = self.plus_months(months * index).plus_days(days * index)

    def at_time(self, time: LocalTime) -> LocalDateTime:
        """Combine this date with a time."""
        from isochron.core.local_date_time import LocalDateTime

        return LocalDateTime.of(self, time)

    def at_start_of_day(self, zone: ZoneId | None = None) -> Any:
        """Return midnight at the start of this date.

        Without a zone, returns a LocalDateTime. With a zone, returns the
        earliest valid ZonedDateTime on this date; if midnight falls in a
        gap the time after the gap is used.
        """
        from isochron.core.local_date_time import LocalDateTime
        from isochron.core.local_time import LocalTime
        from isochron.core.zoned_date_time import ZonedDateTime

        start = LocalDateTime.of(self, LocalTime.MIDNIGHT)
        if zone is None:
            return start
        transition = zone.rules.get_transition(start)
        if transition is not None and transition.is_gap:
            start = transition.date_time_after
        return ZonedDateTime.of_local(start, zone)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string.

        Examples:
            >>> LocalDate(2024, 1, 15).to_iso_format()
            '2024-01-15'
            >>> LocalDate(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        return format_date(*epoch_day_to_ymd(self._days))

    def is_before(self, other: Any) -> bool:
        """Compare positions on the time-line with a date of any chronology.

        Examples:
            >>> from isochron.chrono import JulianChronology
            >>> LocalDate(2024, 1, 10).is_before(JulianChronology.INSTANCE.date(2024, 1, 1))
            True
        """
        return self._days < other.get(_F.EPOCH_DAY)

    def is_after(self, other: Any) -> bool:
        return self._days > other.get(_F.EPOCH_DAY)

    def is_equal(self, other: Any) -> bool:
        return self._days == other.get(_F.EPOCH_DAY)

    def __add__(self, other: object) -> LocalDate:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Any:
        """Subtract a Period, or another LocalDate to get a Period."""
        from isochron.core.period import Period

        if isinstance(other, Period):
            return self.minus(other)
        if isinstance(other, LocalDate):
            return other.until(self)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        year, month, day = epoch_day_to_ymd(self._days)
        return f"LocalDate({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()


def _check_year_overflow(year: int) -> None:
    if year < -MAX_YEAR or year > MAX_YEAR:
        raise OverflowError(f"LocalDate out of range: year {year}")


LocalDate.MIN = LocalDate._from_epoch_day(MIN_EPOCH_DAY)
LocalDate.MAX = LocalDate._from_epoch_day(MAX_EPOCH_DAY)
LocalDate.EPOCH = LocalDate._from_epoch_day(0)


__all__ = ["LocalDate"]
