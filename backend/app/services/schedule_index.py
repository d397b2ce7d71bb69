from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

from app.schemas.planner import DayOfWeek, MeetingBlock, Section
from app.services.time_intervals import block_minutes


@dataclass(frozen=True)
class ScheduledBlock:
    section: Section
    block: MeetingBlock
    start: int
    end: int

    @property
    def day(self) -> DayOfWeek:
        return self.block.day


@dataclass
class ScheduleIndex:
    by_instructor: dict[str, list[ScheduledBlock]] = field(default_factory=dict)
    by_room_day: dict[tuple[str, DayOfWeek], list[ScheduledBlock]] = field(default_factory=dict)


def section_entries(section: Section) -> list[ScheduledBlock]:
    """Parse a section's usable meeting blocks once, in block order."""
    entries: list[ScheduledBlock] = []
    for block in section.meetingBlocks:
        minutes = block_minutes(block)
        if minutes is None:
            continue
        entries.append(ScheduledBlock(section=section, block=block, start=minutes[0], end=minutes[1]))
    return entries


def build_schedule_index(sections: Iterable[Section]) -> ScheduleIndex:
    """Group every usable meeting block by instructor and by (room, day).

    Groups keep input order; detectors sort when they need chronology.
    Sections without blocks contribute nothing, and blocks without a room
    only appear in the instructor grouping.
    """
    by_instructor: dict[str, list[ScheduledBlock]] = defaultdict(list)
    by_room_day: dict[tuple[str, DayOfWeek], list[ScheduledBlock]] = defaultdict(list)

    for section in sections:
        for entry in section_entries(section):
            by_instructor[section.instructorId].append(entry)
            if entry.block.roomId:
                by_room_day[(entry.block.roomId, entry.day)].append(entry)

    return ScheduleIndex(by_instructor=dict(by_instructor), by_room_day=dict(by_room_day))


def chronological(entries: Iterable[ScheduledBlock]) -> list[ScheduledBlock]:
    # sorted() is stable, so equal start times keep input order.
    return sorted(entries, key=lambda entry: entry.start)
