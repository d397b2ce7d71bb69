from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from app.schemas.planner import DayOfWeek, Instructor, MeetingBlock, Pathway, Room, Scenario, Section


class InstructorConflict(BaseModel):
    instructorId: str
    instructorName: str
    day: DayOfWeek
    sectionA: Section
    sectionB: Section
    occurrenceA: MeetingBlock
    occurrenceB: MeetingBlock
    description: str


class RoomConflict(BaseModel):
    roomId: str
    roomName: str
    day: DayOfWeek
    sectionA: Section
    sectionB: Section
    occurrenceA: MeetingBlock
    occurrenceB: MeetingBlock
    description: str


class BufferViolation(BaseModel):
    roomId: str
    roomName: str
    day: DayOfWeek
    firstSection: Section
    secondSection: Section
    firstOccurrence: MeetingBlock
    secondOccurrence: MeetingBlock
    gapMinutes: int  # negative when the two bookings overlap
    description: str


class PathwayIssue(BaseModel):
    pathwayId: str
    pathwayName: str
    kind: Literal["unavailable", "exhaustive_conflict"]
    courseCodes: List[str]
    message: str


class ConflictReport(BaseModel):
    instructorConflicts: List[InstructorConflict] = Field(default_factory=list)
    roomConflicts: List[RoomConflict] = Field(default_factory=list)
    bufferViolations: List[BufferViolation] = Field(default_factory=list)
    pathwayIssues: List[PathwayIssue] = Field(default_factory=list)
    # Distinct ids in first-appearance order; pathway issues never contribute.
    conflictedSectionIds: List[str] = Field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not (
            self.instructorConflicts or self.roomConflicts or self.bufferViolations or self.pathwayIssues
        )


class AnalysisRequest(BaseModel):
    sections: List[Section] = Field(default_factory=list)
    instructors: List[Instructor] = Field(default_factory=list)
    rooms: List[Room] = Field(default_factory=list)
    pathways: List[Pathway] = Field(default_factory=list)
    scenarios: List[Scenario] = Field(default_factory=list)
    scenarioId: Optional[str] = None
    bufferMinutes: Optional[int] = Field(default=None, ge=0)
