"""Standalone content moderation check."""

from fastapi import APIRouter, Depends, HTTPException, status

from post_service.application.schemas import ErrorResponse, ModerationRequest, ModerationResponse
from post_service.application.services import ModerationService
from post_service.domain.exceptions import ModerationError
from post_service.infrastructure.dependencies import get_moderation_service

router = APIRouter(prefix="/moderation", tags=["Moderation"])


@router.post(
    "/check",
    response_model=ModerationResponse,
    responses={
        status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
    },
)
async def check_text(
    data: ModerationRequest,
    service: ModerationService = Depends(get_moderation_service),
) -> ModerationResponse:
    """Ask the moderation provider whether the text is flagged."""
    try:
        flagged = await service.is_flagged(data.text)
    except ModerationError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    return ModerationResponse(flagged=flagged)
