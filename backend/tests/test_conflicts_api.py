def build_payload(**overrides):
    payload = {
        "scenarios": [{"id": "fall-2024-draft-a", "name": "Draft A", "term": "Fall 2024"}],
        "scenarioId": "fall-2024-draft-a",
        "instructors": [{"id": "chen", "name": "Dr. Chen"}],
        "rooms": [{"id": "SC-312", "name": "SC-312", "roomType": "lab"}],
        "pathways": [
            {"id": "physics-major", "name": "Physics Major Core", "requiredCourseCodes": ["PHYS 210", "PHYS 210L"]}
        ],
        "sections": [
            {
                "id": "X",
                "scenarioId": "fall-2024-draft-a",
                "courseCode": "PHYS 210",
                "courseTitle": "General Physics I",
                "sectionNumber": "01",
                "kind": "lecture",
                "modality": "On Campus",
                "instructorId": "chen",
                "meetingBlocks": [{"day": "Tue", "startTime": "13:00", "endTime": "15:00"}],
            },
            {
                "id": "Y",
                "scenarioId": "fall-2024-draft-a",
                "courseCode": "PHYS 210L",
                "courseTitle": "General Physics I Lab",
                "sectionNumber": "L1",
                "kind": "lab",
                "modality": "On Campus",
                "instructorId": "chen",
                "meetingBlocks": [{"day": "Tue", "startTime": "14:00", "endTime": "14:30", "roomId": "SC-312"}],
            },
            {
                "id": "other-draft",
                "scenarioId": "spring-2025-draft",
                "courseCode": "PHYS 211",
                "instructorId": "chen",
                "meetingBlocks": [{"day": "Tue", "startTime": "13:00", "endTime": "15:00", "roomId": "SC-312"}],
            },
        ],
    }
    payload.update(overrides)
    return payload


def test_analyze_endpoint_reports_conflicts(client):
    response = client.post("/api/conflicts/analyze", json=build_payload())
    assert response.status_code == 200
    report = response.json()

    assert len(report["instructorConflicts"]) == 1
    conflict = report["instructorConflicts"][0]
    assert conflict["instructorName"] == "Dr. Chen"
    assert conflict["day"] == "Tue"
    assert {conflict["sectionA"]["id"], conflict["sectionB"]["id"]} == {"X", "Y"}

    assert report["roomConflicts"] == []
    assert report["bufferViolations"] == []
    assert report["pathwayIssues"][0]["message"] == "PHYS 210 conflicts with PHYS 210L for all available sections"
    assert report["conflictedSectionIds"] == ["X", "Y"]


def test_analyze_endpoint_uses_default_buffer(client):
    payload = build_payload(
        scenarioId=None,
        scenarios=[],
        pathways=[],
        sections=[
            {
                "id": "lab-1",
                "scenarioId": "s",
                "courseCode": "PHYS 210L",
                "instructorId": "chen",
                "meetingBlocks": [{"day": "Mon", "startTime": "13:00", "endTime": "16:15", "roomId": "SC-312"}],
            },
            {
                "id": "lab-2",
                "scenarioId": "s",
                "courseCode": "PHYS 211L",
                "instructorId": "okafor",
                "meetingBlocks": [{"day": "Mon", "startTime": "16:25", "endTime": "19:25", "roomId": "SC-312"}],
            },
        ],
    )
    response = client.post("/api/conflicts/analyze", json=payload)
    assert response.status_code == 200
    violations = response.json()["bufferViolations"]
    assert [item["gapMinutes"] for item in violations] == [10]

    payload["bufferMinutes"] = 5
    response = client.post("/api/conflicts/analyze", json=payload)
    assert response.json()["bufferViolations"] == []


def test_analyze_endpoint_empty_payload(client):
    response = client.post("/api/conflicts/analyze", json={})
    assert response.status_code == 200
    assert response.json() == {
        "instructorConflicts": [],
        "roomConflicts": [],
        "bufferViolations": [],
        "pathwayIssues": [],
        "conflictedSectionIds": [],
    }


def test_unknown_scenario_is_not_found(client):
    response = client.post("/api/conflicts/analyze", json=build_payload(scenarioId="missing"))
    assert response.status_code == 404
    body = response.json()
    assert body["message"] == "Scenario with id missing not found"
    assert body["details"]["resource_id"] == "missing"


def test_buffer_above_limit_is_rejected(client):
    response = client.post("/api/conflicts/analyze", json=build_payload(bufferMinutes=10_000))
    assert response.status_code == 400
    assert response.json()["details"]["bufferMinutes"] == 10_000


def test_negative_buffer_fails_validation(client):
    response = client.post("/api/conflicts/analyze", json=build_payload(bufferMinutes=-5))
    assert response.status_code == 422


def test_unknown_day_fails_validation(client):
    payload = build_payload()
    payload["sections"][0]["meetingBlocks"][0]["day"] = "Funday"
    response = client.post("/api/conflicts/analyze", json=payload)
    assert response.status_code == 422


def test_sections_from_two_scenarios_need_a_scenario_id(client):
    block = {"day": "Mon", "startTime": "09:00", "endTime": "10:00", "roomId": "SC-312"}
    sections = [
        {"id": "fall", "scenarioId": "fall-draft", "courseCode": "PHYS 210", "instructorId": "chen", "meetingBlocks": [block]},
        {"id": "spring", "scenarioId": "spring-draft", "courseCode": "PHYS 211", "instructorId": "chen", "meetingBlocks": [block]},
    ]
    payload = build_payload(scenarioId=None, scenarios=[], pathways=[], sections=sections)

    response = client.post("/api/conflicts/analyze", json=payload)
    assert response.status_code == 400
    assert response.json()["details"]["scenarioIds"] == ["fall-draft", "spring-draft"]

    payload["scenarioId"] = "fall-draft"
    response = client.post("/api/conflicts/analyze", json=payload)
    assert response.status_code == 200
    report = response.json()
    assert report["instructorConflicts"] == []
    assert report["roomConflicts"] == []
