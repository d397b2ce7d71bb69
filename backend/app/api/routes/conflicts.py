import logging

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.core.exceptions import AnalysisInputError, ResourceNotFoundError
from app.schemas.conflict import AnalysisRequest, ConflictReport
from app.services.conflict_service import ConflictService, sections_for_scenario

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=ConflictReport)
def analyze_schedule(
    payload: AnalysisRequest,
    settings: Settings = Depends(get_settings),
) -> ConflictReport:
    buffer_minutes = settings.default_buffer_minutes if payload.bufferMinutes is None else payload.bufferMinutes
    if buffer_minutes > settings.max_buffer_minutes:
        raise AnalysisInputError(
            f"Buffer of {buffer_minutes} minutes exceeds the allowed maximum",
            details={"bufferMinutes": buffer_minutes, "maxBufferMinutes": settings.max_buffer_minutes},
        )

    if payload.scenarioId is not None and payload.scenarios:
        if not any(scenario.id == payload.scenarioId for scenario in payload.scenarios):
            raise ResourceNotFoundError("Scenario", payload.scenarioId)

    if payload.scenarioId is None:
        scenario_ids = sorted({section.scenarioId for section in payload.sections})
        if len(scenario_ids) > 1:
            raise AnalysisInputError(
                "Sections span more than one scenario; pass scenarioId to pick one",
                details={"scenarioIds": scenario_ids},
            )

    sections = sections_for_scenario(payload.sections, payload.scenarioId)
    if len(sections) != len(payload.sections):
        logger.debug(
            "Ignoring %d section(s) outside scenario %s",
            len(payload.sections) - len(sections),
            payload.scenarioId,
        )

    service = ConflictService(sections, payload.instructors, payload.rooms, payload.pathways, buffer_minutes)
    return service.analyze()
