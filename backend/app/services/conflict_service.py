import logging
from typing import Iterable, List, Optional, Sequence

from app.schemas.conflict import BufferViolation, ConflictReport, InstructorConflict, RoomConflict
from app.schemas.planner import Instructor, Pathway, Room, Section
from app.services.instructor_conflicts import detect_instructor_conflicts
from app.services.pathway_feasibility import check_pathways
from app.services.room_conflicts import detect_room_conflicts
from app.services.schedule_index import build_schedule_index

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_MINUTES = 30


def sections_for_scenario(sections: Iterable[Section], scenario_id: Optional[str]) -> List[Section]:
    if scenario_id is None:
        return list(sections)
    return [section for section in sections if section.scenarioId == scenario_id]


def collect_conflicted_section_ids(
    instructor_conflicts: Iterable[InstructorConflict],
    room_conflicts: Iterable[RoomConflict],
    buffer_violations: Iterable[BufferViolation],
) -> List[str]:
    ids: List[str] = []
    seen = set()

    def add(section_id: str) -> None:
        if section_id not in seen:
            seen.add(section_id)
            ids.append(section_id)

    for item in instructor_conflicts:
        add(item.sectionA.id)
        add(item.sectionB.id)
    for item in room_conflicts:
        add(item.sectionA.id)
        add(item.sectionB.id)
    for item in buffer_violations:
        add(item.firstSection.id)
        add(item.secondSection.id)
    return ids


class ConflictService:
    """Runs every detector over one scenario's sections.

    The service keeps nothing between calls: each ``analyze`` builds its own
    index from the inputs and never mutates them.
    """

    def __init__(
        self,
        sections: Sequence[Section],
        instructors: Sequence[Instructor],
        rooms: Sequence[Room],
        pathways: Sequence[Pathway],
        buffer_minutes: int = DEFAULT_BUFFER_MINUTES,
    ):
        self.sections = list(sections)
        self.instructors = list(instructors)
        self.rooms = list(rooms)
        self.pathways = list(pathways)
        self.buffer_minutes = buffer_minutes

    def analyze(self) -> ConflictReport:
        index = build_schedule_index(self.sections)

        instructor_conflicts = detect_instructor_conflicts(index, self.instructors)
        room_analysis = detect_room_conflicts(index, self.rooms, self.buffer_minutes)
        pathway_issues = check_pathways(self.sections, self.pathways)

        report = ConflictReport(
            instructorConflicts=instructor_conflicts,
            roomConflicts=room_analysis.room_conflicts,
            bufferViolations=room_analysis.buffer_violations,
            pathwayIssues=pathway_issues,
            conflictedSectionIds=collect_conflicted_section_ids(
                instructor_conflicts,
                room_analysis.room_conflicts,
                room_analysis.buffer_violations,
            ),
        )
        logger.info(
            "Analyzed %d sections: %d instructor conflicts, %d room conflicts, "
            "%d buffer violations, %d pathway issues",
            len(self.sections),
            len(report.instructorConflicts),
            len(report.roomConflicts),
            len(report.bufferViolations),
            len(report.pathwayIssues),
        )
        return report


def analyze(
    sections: Sequence[Section],
    instructors: Sequence[Instructor],
    rooms: Sequence[Room],
    pathways: Sequence[Pathway],
    buffer_minutes: int = DEFAULT_BUFFER_MINUTES,
) -> ConflictReport:
    return ConflictService(sections, instructors, rooms, pathways, buffer_minutes).analyze()
