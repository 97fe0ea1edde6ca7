"""Policies for mapping a local date-time onto a zone.

Most local date-times have exactly one valid offset in a zone. Around a
transition a local date-time may have none (a gap, when clocks jump
forward) or two (an overlap, when clocks fall back). The policies here
decide what happens in those cases.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from isochron.errors import UnresolvedLocalTimeError

if TYPE_CHECKING:
    from isochron.core.local_date_time import LocalDateTime
    from isochron.zone.offset import ZoneOffset
    from isochron.zone.zone_id import ZoneId


class GapPolicy(Enum):
    """What to do with a local date-time that falls in a gap.

    SHIFT_FORWARD: move the local time later by the length of the gap
        and use the offset after the transition. 02:30 in a one hour
        gap becomes 03:30.
    RAISE: raise UnresolvedLocalTimeError.
    """

    SHIFT_FORWARD = "shift_forward"
    RAISE = "raise"


class OverlapPolicy(Enum):
    """What to do with a local date-time that falls in an overlap.

    EARLIER: use the offset before the transition (the earlier instant).
    LATER: use the offset after the transition (the later instant).
    RAISE: raise UnresolvedLocalTimeError.

    A preferred offset passed alongside the policy wins whenever it is
    one of the two valid offsets.
    """

    EARLIER = "earlier"
    LATER = "later"
    RAISE = "raise"


def resolve_local(
    local: LocalDateTime,
    zone: ZoneId,
    gap: GapPolicy = GapPolicy.SHIFT_FORWARD,
    overlap: OverlapPolicy = OverlapPolicy.EARLIER,
    preferred_offset: ZoneOffset | None = None,
) -> tuple[LocalDateTime, ZoneOffset]:
    """Resolve a local date-time in a zone to a local date-time and offset.

    The returned local date-time differs from the input only when a gap
    was shifted over.

    Args:
        local: The wall-clock date-time.
        zone: The zone to resolve in.
        gap: Policy for local times that do not exist.
        overlap: Policy for local times that occur twice.
        preferred_offset: Offset to keep in an overlap if it is valid.

    Raises:
        UnresolvedLocalTimeError: If a RAISE policy applies.

    Examples:
        >>> from isochron import LocalDateTime, ZoneOffset
        >>> resolve_local(LocalDateTime(2024, 6, 1, 12, 0), ZoneOffset.of_hours(2))
        (LocalDateTime(2024, 6, 1, 12, 0), ZoneOffset('+02:00'))
    """
    # Import here to avoid circular imports
    from isochron.zone.offset import ZoneOffset

    if isinstance(zone, ZoneOffset):
        return local, zone
    rules = zone.rules
    valid = rules.get_valid_offsets(local)
    if len(valid) == 1:
        return local, valid[0]
    if not valid:
        transition = rules.get_transition(local)
        if gap is GapPolicy.RAISE:
            raise UnresolvedLocalTimeError(
                f"Local date-time {local} does not exist in time-zone {zone} "
                f"due to a gap in the local time-line",
                transition,
            )
        return local.plus_seconds(transition.duration_seconds), transition.offset_after
    if preferred_offset is not None and preferred_offset in valid:
        return local, preferred_offset
    if overlap is OverlapPolicy.LATER:
        return local, valid[1]
    if overlap is OverlapPolicy.RAISE:
        raise UnresolvedLocalTimeError(
            f"Local date-time {local} is ambiguous in time-zone {zone}: "
            f"valid offsets are {valid[0]} and {valid[1]}",
            rules.get_transition(local),
        )
    return local, valid[0]


__all__ = ["GapPolicy", "OverlapPolicy", "resolve_local"]
