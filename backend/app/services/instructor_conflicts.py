from __future__ import annotations

from collections.abc import Iterable

from app.schemas.conflict import InstructorConflict
from app.schemas.planner import Instructor
from app.services.schedule_index import ScheduleIndex
from app.services.time_intervals import overlaps


def detect_instructor_conflicts(index: ScheduleIndex, instructors: Iterable[Instructor]) -> list[InstructorConflict]:
    """Report every pair of overlapping blocks taught by the same instructor.

    Pairs are not merged: three mutually overlapping blocks produce three
    entries. Unknown instructor ids are reported under the raw id.
    """
    names = {instructor.id: instructor.name for instructor in instructors}
    conflicts: list[InstructorConflict] = []

    # O(N^2) per instructor; N is one person's weekly load.
    for instructor_id, entries in index.by_instructor.items():
        instructor_name = names.get(instructor_id) or instructor_id
        n = len(entries)
        for i in range(n):
            a = entries[i]
            for j in range(i + 1, n):
                b = entries[j]
                if a.day != b.day:
                    continue
                if not overlaps(a.start, a.end, b.start, b.end):
                    continue
                conflicts.append(InstructorConflict(
                    instructorId=instructor_id,
                    instructorName=instructor_name,
                    day=a.day,
                    sectionA=a.section,
                    sectionB=b.section,
                    occurrenceA=a.block,
                    occurrenceB=b.block,
                    description=(
                        f"{instructor_name} is double-booked on {a.day.value}: "
                        f"{a.section.display_label} {a.block.startTime}-{a.block.endTime} and "
                        f"{b.section.display_label} {b.block.startTime}-{b.block.endTime}"
                    ),
                ))

    return conflicts
