from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class DayOfWeek(str, Enum):
    mon = "Mon"
    tue = "Tue"
    wed = "Wed"
    thu = "Thu"
    fri = "Fri"
    sat = "Sat"
    sun = "Sun"


class SectionKind(str, Enum):
    lecture = "lecture"
    lab = "lab"
    combined = "combined"
    seminar = "seminar"
    online_only = "onlineOnly"
    other = "other"

    @property
    def label(self) -> str:
        return SECTION_KIND_LABELS[self]


SECTION_KIND_LABELS = {
    SectionKind.lecture: "Lecture",
    SectionKind.lab: "Lab",
    SectionKind.combined: "Combined Lecture",
    SectionKind.seminar: "Seminar",
    SectionKind.online_only: "Online",
    SectionKind.other: "Other",
}


class Modality(str, Enum):
    on_campus = "On Campus"
    online = "Online"
    hybrid = "Hybrid"


class RoomType(str, Enum):
    lab = "lab"
    lecture = "lecture"
    virtual = "virtual"
    other = "other"


TURNAROUND_ROOM_TYPES = frozenset({RoomType.lab})


class MeetingBlock(BaseModel):
    """One concrete day/time/room slot of a section.

    Times are kept as the raw "HH:MM" strings the planner stores. They are not
    validated here: the analysis skips blocks it cannot place on the clock.
    """

    day: DayOfWeek
    startTime: str = Field(max_length=16)
    endTime: str = Field(max_length=16)
    roomId: str | None = None


class Section(BaseModel):
    id: str = Field(min_length=1, max_length=64)
    scenarioId: str = Field(min_length=1, max_length=64)
    courseCode: str = Field(max_length=50)
    courseTitle: str = Field(default="", max_length=200)
    sectionNumber: str = Field(default="", max_length=20)
    kind: SectionKind = SectionKind.lecture
    modality: Modality = Modality.on_campus
    length: str = Field(default="", max_length=50)
    instructorId: str = Field(max_length=64)
    meetingBlocks: list[MeetingBlock] = Field(default_factory=list)
    notes: str | None = None

    @property
    def display_label(self) -> str:
        label = f"{self.courseCode} {self.kind.label}"
        if self.sectionNumber:
            return f"{label} ({self.sectionNumber})"
        return label


class Instructor(BaseModel):
    id: str = Field(min_length=1, max_length=64)
    name: str = Field(max_length=200)


class Room(BaseModel):
    id: str = Field(min_length=1, max_length=64)
    name: str = Field(max_length=100)
    roomType: RoomType = RoomType.lecture

    @property
    def requires_turnaround(self) -> bool:
        return self.roomType in TURNAROUND_ROOM_TYPES


class Pathway(BaseModel):
    id: str = Field(min_length=1, max_length=64)
    name: str = Field(max_length=200)
    requiredCourseCodes: list[str] = Field(default_factory=list)


class Scenario(BaseModel):
    id: str = Field(min_length=1, max_length=64)
    name: str = Field(max_length=200)
    term: str = Field(default="", max_length=100)
    description: str | None = None
