import pytest
from fastapi.testclient import TestClient #fake http client that calls the FastAPI routes without a real server

from app.main import app
from app.schemas.planner import Instructor, MeetingBlock, Pathway, Room, Section


def make_section(section_id, course_code, instructor_id, blocks, scenario_id="fall-draft-a", **extra):
    """Build a Section from (day, start, end[, room]) tuples."""
    meeting_blocks = []
    for block in blocks:
        day, start, end = block[:3]
        room_id = block[3] if len(block) > 3 else None
        meeting_blocks.append(MeetingBlock(day=day, startTime=start, endTime=end, roomId=room_id))
    return Section(
        id=section_id,
        scenarioId=scenario_id,
        courseCode=course_code,
        courseTitle=extra.pop("courseTitle", course_code),
        sectionNumber=extra.pop("sectionNumber", "01"),
        instructorId=instructor_id,
        meetingBlocks=meeting_blocks,
        **extra,
    )


@pytest.fixture()
def instructors():
    return [
        Instructor(id="chen", name="Dr. Chen"),
        Instructor(id="okafor", name="Dr. Okafor"),
    ]


@pytest.fixture()
def rooms():
    return [
        Room(id="SC-312", name="SC-312", roomType="lab"),
        Room(id="LH-100", name="Lecture Hall 100", roomType="lecture"),
        Room(id="ONLINE", name="Online / Asynchronous", roomType="virtual"),
    ]


@pytest.fixture()
def physics_pathway():
    return Pathway(id="physics-major", name="Physics Major Core", requiredCourseCodes=["PHYS 210", "PHYS 210L"])


@pytest.fixture() #test client
def client():
    with TestClient(app) as test_client:
        yield test_client
