"""Rules describing how the offset of a zone changes over time.

ZoneRules holds the historic transitions of a zone plus an optional set
of annual rules that take over after the last historic transition. Both
directions of lookup are supported:

    instant -> offset: always exactly one answer.
    local date-time -> offsets: one answer normally, none in a gap and
        two in an overlap.
"""

from __future__ import annotations

import threading
from bisect import bisect_left, bisect_right
from typing import TYPE_CHECKING, Any, Sequence

from isochron._internal.calendar import epoch_day_to_ymd
from isochron._internal.constants import MAX_YEAR, SECONDS_PER_DAY
from isochron.zone.transition import ZoneOffsetTransition, ZoneOffsetTransitionRule

if TYPE_CHECKING:
    from isochron.core.duration import Duration
    from isochron.core.instant import Instant
    from isochron.core.local_date_time import LocalDateTime
    from isochron.zone.offset import ZoneOffset

# Years after this are not cached, they are rarely queried
_LAST_CACHED_YEAR = 2100


class ZoneRules:
    """The rules defining how the zone offset varies for a single time-zone.

    Rules for a fixed offset are created with ``ZoneRules.of(offset)``
    and answer every query without searching.

    Examples:
        >>> from isochron import ZoneOffset, Instant
        >>> rules = ZoneRules.of(ZoneOffset.of_hours(3))
        >>> rules.is_fixed_offset()
        True
        >>> rules.get_offset(Instant.EPOCH)
        ZoneOffset('+03:00')
    """

    __slots__ = (
        "_standard_transitions",
        "_standard_offsets",
        "_savings_instant_transitions",
        "_wall_offsets",
        "_savings_local_transitions",
        "_last_rules",
        "_last_rules_start",
        "_last_rules_local_start",
        "_last_rules_cache",
        "_cache_lock",
    )

    def __init__(
        self,
        base_standard_offset: ZoneOffset,
        base_wall_offset: ZoneOffset,
        standard_offset_transitions: Sequence[ZoneOffsetTransition] = (),
        transitions: Sequence[ZoneOffsetTransition] = (),
        last_rules: Sequence[ZoneOffsetTransitionRule] = (),
        last_rules_start: int | None = None,
    ) -> None:
        """Create rules from transitions in chronological order.

        Args:
            base_standard_offset: Standard offset before the first
                standard transition.
            base_wall_offset: Wall offset before the first transition.
            standard_offset_transitions: Changes of standard offset.
            transitions: Changes of wall offset.
            last_rules: Annual rules used after the last transition.
            last_rules_start: Epoch second after which the annual rules
                apply. Defaults to the last transition. It can be later
                when the data ends with changes that keep the offset.
        """
        self._standard_transitions = [t.epoch_second for t in standard_offset_transitions]
        self._standard_offsets = [base_standard_offset] + [
            t.offset_after for t in standard_offset_transitions
        ]
        local_transitions: list[LocalDateTime] = []
        wall_offsets = [base_wall_offset]
        for transition in transitions:
            if transition.is_gap:
                local_transitions.append(transition.date_time_before)
                local_transitions.append(transition.date_time_after)
            else:
                local_transitions.append(transition.date_time_after)
                local_transitions.append(transition.date_time_before)
            wall_offsets.append(transition.offset_after)
        self._savings_local_transitions = local_transitions
        self._savings_instant_transitions = [t.epoch_second for t in transitions]
        self._wall_offsets = wall_offsets
        self._last_rules = list(last_rules)
        if self._savings_instant_transitions:
            last_transition = self._savings_instant_transitions[-1]
            if last_rules_start is None or last_rules_start < last_transition:
                last_rules_start = last_transition
        self._last_rules_start = last_rules_start
        self._last_rules_local_start: LocalDateTime | None = None
        if self._last_rules and last_rules_start is not None:
            from isochron.core.local_date_time import LocalDateTime

            local_start = LocalDateTime.of_epoch_second(last_rules_start, 0, wall_offsets[-1])
            if local_transitions and local_transitions[-1] > local_start:
                local_start = local_transitions[-1]
            self._last_rules_local_start = local_start
        self._last_rules_cache: dict[int, list[ZoneOffsetTransition]] = {}
        self._cache_lock = threading.Lock()

    @classmethod
    def of(cls, offset: ZoneOffset) -> ZoneRules:
        """Return rules for a fixed offset."""
        return cls(offset, offset)

    def is_fixed_offset(self) -> bool:
        """Return True if the offset never changes."""
        return not self._savings_instant_transitions and not self._last_rules

    def _uses_last_rules(self, epoch_second: int) -> bool:
        if not self._last_rules:
            return False
        return self._last_rules_start is None or epoch_second > self._last_rules_start

    def _find_year(self, epoch_second: int, offset: ZoneOffset) -> int:
        local_second = epoch_second + offset.total_seconds
        return epoch_day_to_ymd(local_second // SECONDS_PER_DAY)[0]

    def _find_transition_array(self, year: int) -> list[ZoneOffsetTransition]:
        cached = self._last_rules_cache.get(year)
        if cached is not None:
            return cached
        transitions = sorted(
            (rule.create_transition(year) for rule in self._last_rules),
            key=lambda transition: transition.epoch_second,
        )
        if year < _LAST_CACHED_YEAR:
            with self._cache_lock:
                self._last_rules_cache[year] = transitions
        return transitions

    def get_offset(self, instant: Instant) -> ZoneOffset:
        """Return the offset in force at an instant."""
        if self.is_fixed_offset():
            return self._wall_offsets[0]
        epoch_second = instant.epoch_second
        if self._uses_last_rules(epoch_second):
            year = self._find_year(epoch_second, self._wall_offsets[-1])
            transition = None
            for transition in self._find_transition_array(year):
                if epoch_second < transition.epoch_second:
                    return transition.offset_before
            return transition.offset_after
        index = bisect_right(self._savings_instant_transitions, epoch_second)
        return self._wall_offsets[index]

    def _find_offset_info(
        self, local: LocalDateTime, transition: ZoneOffsetTransition
    ) -> ZoneOffset | ZoneOffsetTransition:
        before = transition.date_time_before
        if transition.is_gap:
            if local < before:
                return transition.offset_before
            if local < transition.date_time_after:
                return transition
            return transition.offset_after
        if not local < before:
            return transition.offset_after
        if local < transition.date_time_after:
            return transition.offset_before
        return transition

    def _get_offset_info(self, local: LocalDateTime) -> ZoneOffset | ZoneOffsetTransition:
        if self.is_fixed_offset():
            return self._wall_offsets[0]
        local_transitions = self._savings_local_transitions
        local_start = self._last_rules_local_start
        if self._last_rules and (local_start is None or local > local_start):
            info: Any = None
            for transition in self._find_transition_array(local.year):
                info = self._find_offset_info(local, transition)
                if isinstance(info, ZoneOffsetTransition) or info == transition.offset_before:
                    return info
            return info

        index = bisect_left(local_transitions, local)
        if index < len(local_transitions) and local_transitions[index] == local:
            # Overlap immediately following a gap
            if index < len(local_transitions) - 1 and local_transitions[index + 1] == local:
                index += 1
        elif index == 0:
            return self._wall_offsets[0]
        else:
            index -= 1
        if index % 2 == 0:
            offset_before = self._wall_offsets[index // 2]
            offset_after = self._wall_offsets[index // 2 + 1]
            if offset_after.total_seconds > offset_before.total_seconds:
                return ZoneOffsetTransition(local_transitions[index], offset_before, offset_after)
            return ZoneOffsetTransition(local_transitions[index + 1], offset_before, offset_after)
        return self._wall_offsets[index // 2 + 1]

    def get_valid_offsets(self, local: LocalDateTime) -> list[ZoneOffset]:
        """Return the offsets valid for a local date-time.

        Returns:
            One offset normally, an empty list in a gap and two offsets
            (earlier first) in an overlap.
        """
        info = self._get_offset_info(local)
        if isinstance(info, ZoneOffsetTransition):
            return info.valid_offsets
        return [info]

    def get_transition(self, local: LocalDateTime) -> ZoneOffsetTransition | None:
        """Return the transition a local date-time falls in, or None."""
        info = self._get_offset_info(local)
        return info if isinstance(info, ZoneOffsetTransition) else None

    def is_valid_offset(self, local: LocalDateTime, offset: ZoneOffset) -> bool:
        return offset in self.get_valid_offsets(local)

    def get_standard_offset(self, instant: Instant) -> ZoneOffset:
        """Return the standard (non daylight saving) offset at an instant."""
        epoch_second = instant.epoch_second
        if self._uses_last_rules(epoch_second):
            year = self._find_year(epoch_second, self._wall_offsets[-1])
            transition_rules = self._last_rules
            for rule, transition in zip(transition_rules, self._find_transition_array(year)):
                if epoch_second < transition.epoch_second:
                    return rule.standard_offset
            return transition_rules[-1].standard_offset
        index = bisect_right(self._standard_transitions, epoch_second)
        return self._standard_offsets[index]

    def get_daylight_savings(self, instant: Instant) -> Duration:
        """Return the amount of daylight saving in force at an instant."""
        from isochron.core.duration import Duration

        standard = self.get_standard_offset(instant)
        actual = self.get_offset(instant)
        return Duration.of_seconds(actual.total_seconds - standard.total_seconds)

    def is_daylight_savings(self, instant: Instant) -> bool:
        return self.get_standard_offset(instant) != self.get_offset(instant)

    def next_transition(self, instant: Instant) -> ZoneOffsetTransition | None:
        """Return the first transition strictly after an instant, or None."""
        if self.is_fixed_offset():
            return None
        epoch_second = instant.epoch_second
        instants = self._savings_instant_transitions
        index = bisect_right(instants, epoch_second)
        if index < len(instants):
            return ZoneOffsetTransition.of_epoch_second(
                instants[index], self._wall_offsets[index], self._wall_offsets[index + 1]
            )
        if not self._last_rules:
            return None
        start = self._last_rules_start
        if start is not None and epoch_second < start:
            epoch_second = start
        year = self._find_year(epoch_second, self._wall_offsets[-1])
        for transition in self._find_transition_array(year):
            if epoch_second < transition.epoch_second:
                return transition
        if year < MAX_YEAR:
            return self._find_transition_array(year + 1)[0]
        return None

    def previous_transition(self, instant: Instant) -> ZoneOffsetTransition | None:
        """Return the last transition strictly before an instant, or None."""
        if self.is_fixed_offset():
            return None
        epoch_second = instant.epoch_second
        if instant.nano > 0:
            epoch_second += 1
        instants = self._savings_instant_transitions
        if self._uses_last_rules(epoch_second):
            start = self._last_rules_start
            year = self._find_year(epoch_second, self._wall_offsets[-1])
            candidates = list(self._find_transition_array(year))
            candidates.insert(0, self._find_transition_array(year - 1)[-1])
            for transition in reversed(candidates):
                if epoch_second > transition.epoch_second:
                    if start is None or transition.epoch_second > start:
                        return transition
                    break
        index = bisect_left(instants, epoch_second)
        if index <= 0:
            return None
        return ZoneOffsetTransition.of_epoch_second(
            instants[index - 1], self._wall_offsets[index - 1], self._wall_offsets[index]
        )

    @property
    def transitions(self) -> list[ZoneOffsetTransition]:
        """The historic transitions, in chronological order."""
        return [
            ZoneOffsetTransition.of_epoch_second(
                epoch_second, self._wall_offsets[i], self._wall_offsets[i + 1]
            )
            for i, epoch_second in enumerate(self._savings_instant_transitions)
        ]

    @property
    def transition_rules(self) -> list[ZoneOffsetTransitionRule]:
        """The annual rules used after the last historic transition."""
        return list(self._last_rules)

    def _key(self) -> tuple:
        return (
            self._standard_transitions,
            self._standard_offsets,
            self._savings_instant_transitions,
            self._wall_offsets,
            self._last_rules,
            [self._last_rules_start],
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneRules):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(tuple(tuple(part) for part in self._key()))

    def __repr__(self) -> str:
        if self.is_fixed_offset():
            return f"ZoneRules(fixed_offset={self._wall_offsets[0]})"
        return f"ZoneRules(current_standard_offset={self._standard_offsets[-1]})"


__all__ = ["ZoneRules"]
