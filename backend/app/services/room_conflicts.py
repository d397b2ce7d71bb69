from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from app.schemas.conflict import BufferViolation, RoomConflict
from app.schemas.planner import Room
from app.services.schedule_index import ScheduleIndex, chronological
from app.services.time_intervals import format_block, gap, overlaps


@dataclass
class RoomAnalysis:
    room_conflicts: list[RoomConflict] = field(default_factory=list)
    buffer_violations: list[BufferViolation] = field(default_factory=list)


def detect_room_conflicts(index: ScheduleIndex, rooms: Iterable[Room], buffer_minutes: int) -> RoomAnalysis:
    """Find double-bookings per room and day, plus lab turnaround shortfalls.

    Every overlapping pair in a room/day group is a room conflict. Rooms that
    need turnaround time are additionally checked pair by pair in start-time
    order: a gap below ``buffer_minutes`` is a buffer violation, including
    negative gaps from overlapping bookings. The two categories are reported
    independently.
    """
    room_map = {room.id: room for room in rooms}
    result = RoomAnalysis()

    for (room_id, day), group in index.by_room_day.items():
        room = room_map.get(room_id)
        room_name = room.name if room is not None and room.name else room_id
        entries = chronological(group)
        n = len(entries)

        for i in range(n):
            a = entries[i]
            for j in range(i + 1, n):
                b = entries[j]
                if not overlaps(a.start, a.end, b.start, b.end):
                    continue
                result.room_conflicts.append(RoomConflict(
                    roomId=room_id,
                    roomName=room_name,
                    day=day,
                    sectionA=a.section,
                    sectionB=b.section,
                    occurrenceA=a.block,
                    occurrenceB=b.block,
                    description=(
                        f"Room overlap in {room_name}: {a.section.display_label} ({format_block(a.block)}) "
                        f"and {b.section.display_label} ({format_block(b.block)})"
                    ),
                ))

        # Unknown rooms have no type, so no turnaround rule applies.
        if room is None or not room.requires_turnaround:
            continue

        for current, following in zip(entries, entries[1:]):
            gap_minutes = gap(current.end, following.start)
            if gap_minutes >= buffer_minutes:
                continue
            result.buffer_violations.append(BufferViolation(
                roomId=room_id,
                roomName=room_name,
                day=day,
                firstSection=current.section,
                secondSection=following.section,
                firstOccurrence=current.block,
                secondOccurrence=following.block,
                gapMinutes=gap_minutes,
                description=(
                    f"Only {gap_minutes} min between {current.section.display_label} ending "
                    f"{current.block.endTime} and {following.section.display_label} starting "
                    f"{following.block.startTime} in {room_name} on {day.value} "
                    f"(needs {buffer_minutes})"
                ),
            ))

    return result
