"""Assessment API routes."""

from fastapi import APIRouter, status

from skillpath.api.dependencies import AssessmentServiceDep
from skillpath.modules.assessment.interface import AssessmentQuestion, AssessmentRecord

router = APIRouter()


@router.get(
    "",
    response_model=list[AssessmentQuestion],
    summary="Get assessment questions",
    description="Get the assessment question set in issue order.",
)
@router.get(
    "/questions",
    response_model=list[AssessmentQuestion],
    include_in_schema=False,
)
async def get_questions(assessment_service: AssessmentServiceDep) -> list[AssessmentQuestion]:
    """Get the question set.

    Args:
        assessment_service: Assessment service instance

    Returns:
        Questions with their options and correct answer indexes

    Raises:
        StorageUnavailableError: If storage cannot be reached (503)
    """
    return await assessment_service.get_questions()


@router.post(
    "/results",
    response_model=AssessmentRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Save assessment result",
    description="Persist a scored assessment. id and completedAt are filled in when absent.",
)
async def save_result(
    record: AssessmentRecord,
    assessment_service: AssessmentServiceDep,
) -> AssessmentRecord:
    return await assessment_service.save_result(record)


@router.get(
    "/results",
    response_model=list[AssessmentRecord],
    summary="List assessment results",
)
async def list_results(assessment_service: AssessmentServiceDep) -> list[AssessmentRecord]:
    return await assessment_service.list_results()
