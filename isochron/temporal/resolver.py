"""Resolution of a map of field values into date, time and offset.

Given values such as ``{YEAR: 2024, MONTH_OF_YEAR: 2, DAY_OF_MONTH: 30}``
the resolver works out which combinations determine a date and a time,
validates them according to a ResolverStyle, and cross-checks any
fields left over against the result.

Date combinations, tried in order:
    EPOCH_DAY
    YEAR + MONTH_OF_YEAR + DAY_OF_MONTH
    YEAR + MONTH_OF_YEAR + ALIGNED_WEEK_OF_MONTH + ALIGNED_DAY_OF_WEEK_IN_MONTH
    YEAR + MONTH_OF_YEAR + ALIGNED_WEEK_OF_MONTH + DAY_OF_WEEK
    YEAR + DAY_OF_YEAR
    YEAR + ALIGNED_WEEK_OF_YEAR + ALIGNED_DAY_OF_WEEK_IN_YEAR
    YEAR + ALIGNED_WEEK_OF_YEAR + DAY_OF_WEEK

PROLEPTIC_MONTH is split into YEAR and MONTH_OF_YEAR, YEAR_OF_ERA and
ERA into YEAR. Other fields (IsoFields, JulianFields) resolve
themselves first through ``TemporalField.resolve``.

Time fields are reduced to HOUR_OF_DAY, MINUTE_OF_HOUR,
SECOND_OF_MINUTE and NANO_OF_SECOND; missing smaller fields default to
zero.

Examples:
    >>> F = ChronoField
    >>> resolve_fields({F.YEAR: 2024, F.MONTH_OF_YEAR: 2, F.DAY_OF_MONTH: 30}).date
    LocalDate(2024, 2, 29)
    >>> resolve_fields({F.CLOCK_HOUR_OF_AMPM: 12, F.AMPM_OF_DAY: 1}).time
    LocalTime(12, 0)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, NamedTuple

from isochron._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from isochron.errors import ValidationError
from isochron.temporal.field import ChronoField

if TYPE_CHECKING:
    from isochron.chrono.chronology import Chronology
    from isochron.core.local_time import LocalTime
    from isochron.core.period import Period
    from isochron.zone.offset import ZoneOffset

_F = ChronoField


class ResolverStyle(Enum):
    """How strictly field values are checked while resolving.

    STRICT: every value must be valid; 2024-02-30 is rejected.
    SMART: each value must be in its outer range, and a day-of-month
        past the end of the month is clamped; 2024-02-30 gives 02-29.
        Hour 24:00 becomes midnight of the next day.
    LENIENT: values may overflow; month 13 rolls into the next year.
    """

    STRICT = "strict"
    SMART = "smart"
    LENIENT = "lenient"


class ResolvedFields(NamedTuple):
    """The outcome of resolve_fields.

    Attributes:
        date: The resolved date, or None if the fields did not fix one.
        time: The resolved time, or None.
        offset: The offset from OFFSET_SECONDS, or None.
        excess_days: Days carried out of the time, such as one day for
            24:00 or for an overflowing lenient time. Zero once added to
            a resolved date.
        field_values: Fields that took no part in the result.
    """

    date: Any
    time: LocalTime | None
    offset: ZoneOffset | None
    excess_days: Period
    field_values: dict[Any, int]


def resolve_fields(
    field_values: Mapping[Any, int],
    style: ResolverStyle = ResolverStyle.SMART,
    chronology: Chronology | None = None,
) -> ResolvedFields:
    """Resolve field values into a date, a time and an offset.

    Args:
        field_values: Values keyed by TemporalField.
        style: How strictly to validate.
        chronology: Calendar for the date fields; ISO when None.

    Raises:
        FieldOutOfRangeError: If a value is outside its range.
        InvalidDateError: If STRICT values do not form a date.
        ValidationError: If two fields conflict.
    """
    if chronology is None:
        from isochron.chrono.iso import IsoChronology

        chronology = IsoChronology.INSTANCE
    return _Resolver(dict(field_values), style, chronology).resolve()


class _Resolver:
    """Mutable working state of one resolve_fields call."""

    def __init__(
        self, field_values: dict[Any, int], style: ResolverStyle, chronology: Any
    ) -> None:
        self.fields = field_values
        self.style = style
        self.chronology = chronology
        self.date: Any = None
        self.time: Any = None
        self.excess_days = 0

    def resolve(self) -> ResolvedFields:
        from isochron.core.period import Period
        from isochron.zone.offset import ZoneOffset

        self._resolve_custom_fields()
        self._resolve_date_fields()
        self._resolve_time_fields()
        self._resolve_time_lenient()
        self._cross_check()
        if self.date is not None and self.time is not None and self.excess_days:
            self.date = self.date.plus_days(self.excess_days)
            self.excess_days = 0
        offset = None
        if _F.OFFSET_SECONDS in self.fields:
            offset = ZoneOffset.of_total_seconds(self.fields.pop(_F.OFFSET_SECONDS))
        return ResolvedFields(
            self.date, self.time, offset, Period.of_days(self.excess_days), self.fields
        )

    def _resolve_custom_fields(self) -> None:
        # a field may need values that another field produces, so repeat
        for _ in range(50):
            for field in list(self.fields):
                if isinstance(field, ChronoField) or field not in self.fields:
                    continue
                resolved = field.resolve(self.fields, self.chronology, self.style)
                if resolved is not None:
                    self._update_date(resolved)
                    break
            else:
                return
        raise ValidationError("One of the fields failed to resolve")

    def _update_date(self, date: Any) -> None:
        date = self.chronology.date_from(date)
        if self.date is not None and self.date != date:
            raise ValidationError(
                f"Conflict found: Fields resolved to two different dates: {self.date} {date}"
            )
        self.date = date

    def _update_check_conflict(self, target: ChronoField, value: int, source: Any) -> None:
        old = self.fields.get(target)
        if old is not None and old != value:
            raise ValidationError(
                f"Conflict found: {target} {old} differs from {target} {value} "
                f"while resolving {source}"
            )
        self.fields[target] = value

    def _check(self, field: ChronoField, value: int) -> int:
        return self.chronology.range(field).check_valid_value(value, field)

    # Dates

    def _resolve_date_fields(self) -> None:
        fields = self.fields
        lenient = self.style is ResolverStyle.LENIENT
        if _F.EPOCH_DAY in fields:
            self._update_date(self.chronology.date_epoch_day(fields.pop(_F.EPOCH_DAY)))
            return
        if _F.PROLEPTIC_MONTH in fields:
            month = fields.pop(_F.PROLEPTIC_MONTH)
            if not lenient:
                self._check(_F.PROLEPTIC_MONTH, month)
            year, month0 = divmod(month, 12)
            self._update_check_conflict(_F.MONTH_OF_YEAR, month0 + 1, _F.PROLEPTIC_MONTH)
            self._update_check_conflict(_F.YEAR, year, _F.PROLEPTIC_MONTH)
        self._resolve_year_of_era()
        if _F.YEAR not in fields:
            return
        date = None
        if _F.MONTH_OF_YEAR in fields:
            if _F.DAY_OF_MONTH in fields:
                date = self._resolve_ymd()
            elif _F.ALIGNED_WEEK_OF_MONTH in fields:
                if _F.ALIGNED_DAY_OF_WEEK_IN_MONTH in fields:
                    date = self._resolve_aligned_month(_F.ALIGNED_DAY_OF_WEEK_IN_MONTH)
                elif _F.DAY_OF_WEEK in fields:
                    date = self._resolve_aligned_month(_F.DAY_OF_WEEK)
        if date is None and _F.DAY_OF_YEAR in fields:
            date = self._resolve_year_day()
        if date is None and _F.ALIGNED_WEEK_OF_YEAR in fields:
            if _F.ALIGNED_DAY_OF_WEEK_IN_YEAR in fields:
                date = self._resolve_aligned_year(_F.ALIGNED_DAY_OF_WEEK_IN_YEAR)
            elif _F.DAY_OF_WEEK in fields:
                date = self._resolve_aligned_year(_F.DAY_OF_WEEK)
        if date is not None:
            self._update_date(date)

    def _resolve_year_of_era(self) -> None:
        fields = self.fields
        if _F.YEAR_OF_ERA not in fields:
            if _F.ERA in fields:
                self._check(_F.ERA, fields[_F.ERA])
            return
        year_of_era = fields.pop(_F.YEAR_OF_ERA)
        if self.style is not ResolverStyle.LENIENT:
            self._check(_F.YEAR_OF_ERA, year_of_era)
        era = fields.pop(_F.ERA, None)
        if era is None:
            year = fields.get(_F.YEAR)
            if self.style is ResolverStyle.STRICT:
                # do not invent an era, but cross-check with YEAR if present
                if year is None:
                    fields[_F.YEAR_OF_ERA] = year_of_era
                    return
                proleptic = year_of_era if year > 0 else 1 - year_of_era
            else:
                proleptic = year_of_era if year is None or year > 0 else 1 - year_of_era
        else:
            proleptic = self.chronology.proleptic_year(
                self.chronology.era_of(era), year_of_era
            )
        self._update_check_conflict(_F.YEAR, proleptic, _F.YEAR_OF_ERA)

    def _pop_year(self) -> int:
        return self._check(_F.YEAR, self.fields.pop(_F.YEAR))

    def _resolve_ymd(self) -> Any:
        from isochron.temporal.unit import ChronoUnit

        chronology = self.chronology
        year = self._pop_year()
        month = self.fields.pop(_F.MONTH_OF_YEAR)
        day = self.fields.pop(_F.DAY_OF_MONTH)
        if self.style is ResolverStyle.LENIENT:
            date = chronology.date(year, 1, 1)
            return date.plus(month - 1, ChronoUnit.MONTHS).plus(day - 1, ChronoUnit.DAYS)
        self._check(_F.MONTH_OF_YEAR, month)
        self._check(_F.DAY_OF_MONTH, day)
        if self.style is ResolverStyle.SMART:
            return chronology._resolve_previous_valid(year, month, day)
        return chronology.date(year, month, day)

    def _resolve_year_day(self) -> Any:
        from isochron.temporal.unit import ChronoUnit

        year = self._pop_year()
        day_of_year = self.fields.pop(_F.DAY_OF_YEAR)
        if self.style is ResolverStyle.LENIENT:
            return self.chronology.date_year_day(year, 1).plus(day_of_year - 1, ChronoUnit.DAYS)
        self._check(_F.DAY_OF_YEAR, day_of_year)
        return self.chronology.date_year_day(year, day_of_year)

    def _resolve_aligned_month(self, day_field: ChronoField) -> Any:
        from isochron.temporal.unit import ChronoUnit

        year = self._pop_year()
        month = self.fields.pop(_F.MONTH_OF_YEAR)
        week = self.fields.pop(_F.ALIGNED_WEEK_OF_MONTH)
        day = self.fields.pop(day_field)
        if self.style is ResolverStyle.LENIENT:
            base = self.chronology.date(year, 1, 1).plus(month - 1, ChronoUnit.MONTHS)
            return _aligned(base, week, day, day_field)
        self._check(_F.MONTH_OF_YEAR, month)
        self._check(_F.ALIGNED_WEEK_OF_MONTH, week)
        self._check(day_field, day)
        date = _aligned(self.chronology.date(year, month, 1), week, day, day_field)
        if self.style is ResolverStyle.STRICT and date.get(_F.MONTH_OF_YEAR) != month:
            raise ValidationError(
                "Strict mode rejected resolved date as it is in a different month"
            )
        return date

    def _resolve_aligned_year(self, day_field: ChronoField) -> Any:
        year = self._pop_year()
        week = self.fields.pop(_F.ALIGNED_WEEK_OF_YEAR)
        day = self.fields.pop(day_field)
        base = self.chronology.date(year, 1, 1)
        if self.style is ResolverStyle.LENIENT:
            return _aligned(base, week, day, day_field)
        self._check(_F.ALIGNED_WEEK_OF_YEAR, week)
        self._check(day_field, day)
        date = _aligned(base, week, day, day_field)
        if self.style is ResolverStyle.STRICT and date.get(_F.YEAR) != year:
            raise ValidationError(
                "Strict mode rejected resolved date as it is in a different year"
            )
        return date

    # Times

    def _resolve_time_fields(self) -> None:
        fields = self.fields
        style = self.style
        if _F.CLOCK_HOUR_OF_DAY in fields:
            hour = fields.pop(_F.CLOCK_HOUR_OF_DAY)
            if style is ResolverStyle.STRICT or (style is ResolverStyle.SMART and hour != 0):
                _F.CLOCK_HOUR_OF_DAY.check_valid_value(hour)
            self._update_check_conflict(
                _F.HOUR_OF_DAY, 0 if hour == 24 else hour, _F.CLOCK_HOUR_OF_DAY
            )
        if _F.CLOCK_HOUR_OF_AMPM in fields:
            hour = fields.pop(_F.CLOCK_HOUR_OF_AMPM)
            if style is ResolverStyle.STRICT or (style is ResolverStyle.SMART and hour != 0):
                _F.CLOCK_HOUR_OF_AMPM.check_valid_value(hour)
            self._update_check_conflict(
                _F.HOUR_OF_AMPM, 0 if hour == 12 else hour, _F.CLOCK_HOUR_OF_AMPM
            )
        if _F.AMPM_OF_DAY in fields and _F.HOUR_OF_AMPM in fields:
            ampm = fields.pop(_F.AMPM_OF_DAY)
            hour = fields.pop(_F.HOUR_OF_AMPM)
            if style is not ResolverStyle.LENIENT:
                _F.AMPM_OF_DAY.check_valid_value(ampm)
                _F.HOUR_OF_AMPM.check_valid_value(hour)
            self._update_check_conflict(_F.HOUR_OF_DAY, ampm * 12 + hour, _F.AMPM_OF_DAY)
        self._split_of_day(_F.NANO_OF_DAY, NANOS_PER_SECOND, _F.NANO_OF_SECOND)
        self._split_of_day(_F.MICRO_OF_DAY, 1_000_000, _F.MICRO_OF_SECOND)
        self._split_of_day(_F.MILLI_OF_DAY, 1_000, _F.MILLI_OF_SECOND)
        if _F.SECOND_OF_DAY in fields:
            value = fields.pop(_F.SECOND_OF_DAY)
            if style is not ResolverStyle.LENIENT:
                _F.SECOND_OF_DAY.check_valid_value(value)
            self._update_check_conflict(_F.HOUR_OF_DAY, value // 3600, _F.SECOND_OF_DAY)
            self._update_check_conflict(_F.MINUTE_OF_HOUR, value // 60 % 60, _F.SECOND_OF_DAY)
            self._update_check_conflict(_F.SECOND_OF_MINUTE, value % 60, _F.SECOND_OF_DAY)
        if _F.MINUTE_OF_DAY in fields:
            value = fields.pop(_F.MINUTE_OF_DAY)
            if style is not ResolverStyle.LENIENT:
                _F.MINUTE_OF_DAY.check_valid_value(value)
            self._update_check_conflict(_F.HOUR_OF_DAY, value // 60, _F.MINUTE_OF_DAY)
            self._update_check_conflict(_F.MINUTE_OF_HOUR, value % 60, _F.MINUTE_OF_DAY)
        self._merge_sub_second_fields()
        if all(
            field in fields
            for field in (_F.HOUR_OF_DAY, _F.MINUTE_OF_HOUR, _F.SECOND_OF_MINUTE, _F.NANO_OF_SECOND)
        ):
            self._resolve_time(
                fields.pop(_F.HOUR_OF_DAY),
                fields.pop(_F.MINUTE_OF_HOUR),
                fields.pop(_F.SECOND_OF_MINUTE),
                fields.pop(_F.NANO_OF_SECOND),
            )

    def _split_of_day(self, field: ChronoField, per_second: int, part: ChronoField) -> None:
        if field not in self.fields:
            return
        value = self.fields.pop(field)
        if self.style is not ResolverStyle.LENIENT:
            field.check_valid_value(value)
        seconds, fraction = divmod(value, per_second)
        self._update_check_conflict(_F.SECOND_OF_DAY, seconds, field)
        self._update_check_conflict(part, fraction, field)

    def _merge_sub_second_fields(self) -> None:
        fields = self.fields
        lenient = self.style is ResolverStyle.LENIENT
        if _F.MILLI_OF_SECOND in fields:
            millis = fields.pop(_F.MILLI_OF_SECOND)
            if not lenient:
                _F.MILLI_OF_SECOND.check_valid_value(millis)
            if _F.MICRO_OF_SECOND in fields:
                micros = fields.pop(_F.MICRO_OF_SECOND)
                if not lenient:
                    _F.MICRO_OF_SECOND.check_valid_value(micros)
                if micros // 1_000 != millis:
                    raise ValidationError(
                        f"Conflict found: {_F.MICRO_OF_SECOND} {micros} differs from "
                        f"{_F.MILLI_OF_SECOND} {millis}"
                    )
                self._sub_second(micros * 1_000, 1_000, _F.MICRO_OF_SECOND)
            else:
                self._sub_second(millis * 1_000_000, 1_000_000, _F.MILLI_OF_SECOND)
        elif _F.MICRO_OF_SECOND in fields:
            micros = fields.pop(_F.MICRO_OF_SECOND)
            if not lenient:
                _F.MICRO_OF_SECOND.check_valid_value(micros)
            self._sub_second(micros * 1_000, 1_000, _F.MICRO_OF_SECOND)
        elif _F.NANO_OF_SECOND in fields and not lenient:
            _F.NANO_OF_SECOND.check_valid_value(fields[_F.NANO_OF_SECOND])

    def _sub_second(self, nanos: int, precision: int, source: ChronoField) -> None:
        """Merge a coarse fraction with NANO_OF_SECOND, keeping the finer digits."""
        existing = self.fields.get(_F.NANO_OF_SECOND)
        if existing is None:
            self.fields[_F.NANO_OF_SECOND] = nanos
            return
        if self.style is not ResolverStyle.LENIENT:
            _F.NANO_OF_SECOND.check_valid_value(existing)
        if existing // precision != nanos // precision:
            raise ValidationError(
                f"Conflict found: {_F.NANO_OF_SECOND} {existing} differs from {source}"
            )

    def _resolve_time_lenient(self) -> None:
        """Build a time from an hour and whatever smaller fields are present."""
        fields = self.fields
        if self.time is not None or _F.HOUR_OF_DAY not in fields:
            return
        minute = fields.get(_F.MINUTE_OF_HOUR)
        second = fields.get(_F.SECOND_OF_MINUTE)
        nano = fields.get(_F.NANO_OF_SECOND)
        if minute is None and (second is not None or nano is not None):
            return
        if minute is not None and second is None and nano is not None:
            return
        hour = fields.pop(_F.HOUR_OF_DAY)
        for field in (_F.MINUTE_OF_HOUR, _F.SECOND_OF_MINUTE, _F.NANO_OF_SECOND):
            fields.pop(field, None)
        self._resolve_time(hour, minute or 0, second or 0, nano or 0)

    def _resolve_time(self, hour: int, minute: int, second: int, nano: int) -> None:
        from isochron.core.local_time import LocalTime

        if self.style is ResolverStyle.LENIENT:
            total = hour * NANOS_PER_HOUR + minute * NANOS_PER_MINUTE
            total += second * NANOS_PER_SECOND + nano
            excess, nano_of_day = divmod(total, NANOS_PER_DAY)
            self._update_time(LocalTime._from_nanos(nano_of_day), excess)
            return
        _F.MINUTE_OF_HOUR.check_valid_value(minute)
        _F.NANO_OF_SECOND.check_valid_value(nano)
        if self.style is ResolverStyle.SMART and hour == 24 and minute == second == nano == 0:
            self._update_time(LocalTime.MIDNIGHT, 1)
            return
        _F.HOUR_OF_DAY.check_valid_value(hour)
        _F.SECOND_OF_MINUTE.check_valid_value(second)
        self._update_time(LocalTime(hour, minute, second, nano), 0)

    def _update_time(self, time: Any, excess_days: int) -> None:
        if self.time is not None and (self.time != time or self.excess_days != excess_days):
            raise ValidationError(
                f"Conflict found: Fields resolved to two different times: {self.time} {time}"
            )
        self.time = time
        self.excess_days = excess_days

    # Cross-checks

    def _cross_check(self) -> None:
        for resolved in (self.date, self.time):
            if resolved is None:
                continue
            for field in list(self.fields):
                if not resolved.is_supported(field):
                    continue
                expected = resolved.get(field)
                if self.fields[field] != expected:
                    raise ValidationError(
                        f"Conflict found: Field {field} {expected} differs from "
                        f"{field} {self.fields[field]} derived from {resolved}"
                    )
                del self.fields[field]


def _aligned(base: Any, week: int, day: int, day_field: ChronoField) -> Any:
    """Move base by whole aligned weeks, then to the day within the week.

    An aligned day counts from base; DAY_OF_WEEK moves to the next or
    same day of the week. A DAY_OF_WEEK outside 1-7 spills into
    neighbouring weeks.
    """
    from isochron.temporal.unit import ChronoUnit

    date = base.plus(week - 1, ChronoUnit.WEEKS)
    if day_field is not _F.DAY_OF_WEEK:
        return date.plus(day - 1, ChronoUnit.DAYS)
    extra_weeks, index = divmod(day - 1, 7)
    date = date.plus(extra_weeks, ChronoUnit.WEEKS)
    return date.plus((index + 1 - date.get(_F.DAY_OF_WEEK)) % 7, ChronoUnit.DAYS)


__all__ = ["ResolverStyle", "ResolvedFields", "resolve_fields"]
