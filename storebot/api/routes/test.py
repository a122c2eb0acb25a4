"""Test endpoints for validating bot replies without sending anything."""

from fastapi import APIRouter, Depends

from storebot.api.dependencies import get_bot_service
from storebot.schemas.test_message import TestMessageRequest, TestMessageResponse
from storebot.services.bot_service import BotService

router = APIRouter()


@router.post("/test-message", response_model=TestMessageResponse)
async def test_message(
    payload: TestMessageRequest,
    bot_service: BotService = Depends(get_bot_service),
) -> TestMessageResponse:
    """Classify a message and show the reply and escalations it would trigger."""
    reply = await bot_service.preview(user=payload.user, message=payload.message)
    return TestMessageResponse(
        user=payload.user,
        intent=reply.intent,
        response=reply.text,
        escalations=[event.subject for event in reply.escalations],
    )
