"""Period arithmetic operations for temporal types.

This module provides the functions behind ``Period.add_to`` and
``Period.subtract_from``. They work on any temporal value that supports
the MONTHS and DAYS units: LocalDate, LocalDateTime, OffsetDateTime,
ZonedDateTime and the non-ISO ChronoDate.

Clamping behavior:
    Years and months are combined into one number of months before they
    are applied, so the day-of-month is clamped at most once. If the
    resulting day is invalid for the target month, it is clamped to the
    last valid day of that month. Days are applied last.

Examples:
    LocalDate(2024, 1, 31) + Period(months=1) -> LocalDate(2024, 2, 29)
    LocalDate(2023, 1, 31) + Period(months=1) -> LocalDate(2023, 2, 28)
    LocalDate(2024, 2, 29) + Period(years=1)  -> LocalDate(2025, 2, 28)
    LocalDate(2024, 1, 31) + Period(months=1, days=1) -> LocalDate(2024, 3, 1)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron.temporal.unit import ChronoUnit

if TYPE_CHECKING:
    from isochron.core.period import Period


def add_period(temporal: Any, period: Period) -> Any:
    """Add a Period to a temporal value, clamping the day if necessary.

    The components are applied in order:
    1. Years and months, as total months (or plain years when the
       period has no months, which lets Year and similar types that
       lack MONTHS accept a period of years)
    2. Days

    Args:
        temporal: The value to add to.
        period: The period to add.

    Returns:
        A new value offset by the period.

    Examples:
        >>> from isochron.core.local_date import LocalDate
        >>> from isochron.core.period import Period
        >>> add_period(LocalDate(2024, 1, 31), Period(months=1))
        LocalDate(2024, 2, 29)
    """
    if period.months == 0:
        if period.years != 0:
            temporal = temporal.plus(period.years, ChronoUnit.YEARS)
    else:
        total_months = period.to_total_months()
        if total_months != 0:
            temporal = temporal.plus(total_months, ChronoUnit.MONTHS)
    if period.days != 0:
        temporal = temporal.plus(period.days, ChronoUnit.DAYS)
    return temporal


def subtract_period(temporal: Any, period: Period) -> Any:
    """Subtract a Period from a temporal value.

    Months are subtracted before days, mirroring add_period, so
    subtraction is not always the exact inverse of addition.

    Examples:
        >>> from isochron.core.local_date import LocalDate
        >>> from isochron.core.period import Period
        >>> subtract_period(LocalDate(2024, 3, 31), Period(months=1))
        LocalDate(2024, 2, 29)
    """
    if period.months == 0:
        if period.years != 0:
            temporal = temporal.minus(period.years, ChronoUnit.YEARS)
    else:
        total_months = period.to_total_months()
        if total_months != 0:
            temporal = temporal.minus(total_months, ChronoUnit.MONTHS)
    if period.days != 0:
        temporal = temporal.minus(period.days, ChronoUnit.DAYS)
    return temporal


__all__ = ["add_period", "subtract_period"]
