"""Clocks: sources of the current instant and time-zone.

Every ``now()`` method takes an optional Clock. Passing a fixed clock
makes code that reads the current time deterministic under test.

Examples:
    >>> clock = Clock.fixed(Instant.EPOCH, ZoneOffset.UTC)
    >>> LocalDate.now(clock)
    LocalDate(1970, 1, 1)
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

from isochron._internal.constants import NANOS_PER_SECOND
from isochron.core.duration import Duration
from isochron.core.instant import Instant
from isochron.zone.offset import ZoneOffset
from isochron.zone.zone_id import ZoneId


class Clock(ABC):
    """Access to the current instant and the zone it is interpreted in."""

    __slots__ = ()

    @staticmethod
    def system_utc() -> Clock:
        """Return a clock reading the system time in UTC."""
        return SystemClock(ZoneOffset.UTC)

    @staticmethod
    def system_default_zone() -> Clock:
        """Return a clock reading the system time in the configured default zone."""
        return SystemClock(ZoneId.system_default())

    @staticmethod
    def system(zone: ZoneId) -> Clock:
        return SystemClock(zone)

    @staticmethod
    def fixed(instant: Instant, zone: ZoneId) -> Clock:
        """Return a clock that always reports the same instant."""
        return FixedClock(instant, zone)

    @staticmethod
    def offset(base: Clock, offset: Duration) -> Clock:
        """Return a clock that runs offset ahead of base.

        A zero offset returns base unchanged.
        """
        if offset.is_zero:
            return base
        return OffsetClock(base, offset)

    @staticmethod
    def tick(base: Clock, tick: Duration) -> Clock:
        """Return a clock whose instants are truncated to a multiple of tick.

        Raises:
            ValueError: If tick is not positive.
        """
        nanos = tick.to_nanos()
        if nanos <= 0:
            raise ValueError("tick must be positive")
        if nanos == 1:
            return base
        return TickClock(base, nanos)

    @property
    @abstractmethod
    def zone(self) -> ZoneId:
        """The zone used to interpret instants from this clock."""

    @abstractmethod
    def with_zone(self, zone: ZoneId) -> Clock:
        """Return a copy of this clock in a different zone."""

    @abstractmethod
    def instant(self) -> Instant:
        """Return the current instant."""

    def millis(self) -> int:
        """Return the current epoch-millisecond."""
        return self.instant().to_epoch_milli()


class SystemClock(Clock):
    """Clock backed by ``time.time_ns``."""

    __slots__ = ("_zone",)

    def __init__(self, zone: ZoneId) -> None:
        self._zone = zone

    @property
    def zone(self) -> ZoneId:
        return self._zone

    def with_zone(self, zone: ZoneId) -> Clock:
        if zone == self._zone:
            return self
        return SystemClock(zone)

    def instant(self) -> Instant:
        seconds, nanos = divmod(time.time_ns(), NANOS_PER_SECOND)
        return Instant.of_epoch_second(seconds, nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SystemClock):
            return NotImplemented
        return self._zone == other._zone

    def __hash__(self) -> int:
        return hash(self._zone) + 1

    def __repr__(self) -> str:
        return f"SystemClock[{self._zone}]"


class FixedClock(Clock):
    """Clock that always returns the same instant."""

    __slots__ = ("_instant", "_zone")

    def __init__(self, instant: Instant, zone: ZoneId) -> None:
        self._instant = instant
        self._zone = zone

    @property
    def zone(self) -> ZoneId:
        return self._zone

    def with_zone(self, zone: ZoneId) -> Clock:
        if zone == self._zone:
            return self
        return FixedClock(self._instant, zone)

    def instant(self) -> Instant:
        return self._instant

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedClock):
            return NotImplemented
        return self._instant == other._instant and self._zone == other._zone

    def __hash__(self) -> int:
        return hash((self._instant, self._zone))

    def __repr__(self) -> str:
        return f"FixedClock[{self._instant},{self._zone}]"


class OffsetClock(Clock):
    """Clock that adds a fixed duration to another clock."""

    __slots__ = ("_base", "_offset")

    def __init__(self, base: Clock, offset: Duration) -> None:
        self._base = base
        self._offset = offset

    @property
    def zone(self) -> ZoneId:
        return self._base.zone

    def with_zone(self, zone: ZoneId) -> Clock:
        if zone == self._base.zone:
            return self
        return OffsetClock(self._base.with_zone(zone), self._offset)

    def instant(self) -> Instant:
        return self._base.instant().plus(self._offset)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetClock):
            return NotImplemented
        return self._base == other._base and self._offset == other._offset

    def __hash__(self) -> int:
        return hash((self._base, self._offset))

    def __repr__(self) -> str:
        return f"OffsetClock[{self._base!r},{self._offset}]"


class TickClock(Clock):
    """Clock that truncates another clock to a whole number of ticks."""

    __slots__ = ("_base", "_tick_nanos")

    def __init__(self, base: Clock, tick_nanos: int) -> None:
        self._base = base
        self._tick_nanos = tick_nanos

    @property
    def zone(self) -> ZoneId:
        return self._base.zone

    def with_zone(self, zone: ZoneId) -> Clock:
        if zone == self._base.zone:
            return self
        return TickClock(self._base.with_zone(zone), self._tick_nanos)

    def instant(self) -> Instant:
        instant = self._base.instant()
        total = instant.epoch_second * NANOS_PER_SECOND + instant.nano
        total -= total % self._tick_nanos
        seconds, nanos = divmod(total, NANOS_PER_SECOND)
        return Instant.of_epoch_second(seconds, nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TickClock):
            return NotImplemented
        return self._base == other._base and self._tick_nanos == other._tick_nanos

    def __hash__(self) -> int:
        return hash((self._base, self._tick_nanos))

    def __repr__(self) -> str:
        return f"TickClock[{self._base!r},{Duration.of_nanos(self._tick_nanos)}]"


__all__ = ["Clock", "SystemClock", "FixedClock", "OffsetClock", "TickClock"]
