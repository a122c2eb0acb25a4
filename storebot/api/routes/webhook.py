"""Webhook endpoints for inbound WhatsApp Cloud API events."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import PlainTextResponse

from storebot.api.dependencies import get_bot_service, get_verify_token
from storebot.models.message import InboundMessage
from storebot.services.bot_service import BotService

logger = logging.getLogger(__name__)

router = APIRouter()

WHATSAPP_OBJECT = "whatsapp_business_account"


@router.get("/webhook")
async def verify_webhook(
    mode: str | None = Query(default=None, alias="hub.mode"),
    token: str | None = Query(default=None, alias="hub.verify_token"),
    challenge: str | None = Query(default=None, alias="hub.challenge"),
    verify_token: str = Depends(get_verify_token),
) -> Response:
    """Answer the platform subscription handshake."""
    if mode == "subscribe" and token == verify_token:
        logger.info("Webhook verified.")
        return PlainTextResponse(content=challenge or "", status_code=200)
    logger.warning("Webhook verification rejected (mode=%s).", mode)
    return Response(status_code=403)


@router.post("/webhook")
async def receive_webhook(
    request: Request,
    bot_service: BotService = Depends(get_bot_service),
) -> dict[str, str]:
    """Process the first text message of the event; always acknowledged."""
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("Ignoring webhook with invalid JSON body.")
        return {"status": "accepted"}

    message = extract_inbound_message(payload)
    if message is None:
        logger.debug("Webhook event carries no text message.")
        return {"status": "accepted"}

    try:
        await bot_service.handle_message(message)
    except Exception:
        logger.exception("Failed to process message from %s.", message.sender_id)
    return {"status": "accepted"}


def extract_inbound_message(payload: Any) -> InboundMessage | None:
    """Return sender and text of the first message in the first populated change."""
    if not isinstance(payload, dict) or payload.get("object") != WHATSAPP_OBJECT:
        return None

    messages = _first_messages(payload.get("entry"))
    if not messages:
        return None

    message = messages[0]
    if not isinstance(message, dict):
        return None

    sender = message.get("from")
    text = _extract_text(message=message)
    if sender is None or not str(sender).strip() or text is None:
        return None

    message_id = message.get("id")
    return InboundMessage(
        sender_id=str(sender).strip(),
        text=text,
        message_id=str(message_id) if message_id is not None else None,
    )


def _first_messages(entries: Any) -> list[Any] | None:
    if not isinstance(entries, list):
        return None
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        changes = entry.get("changes")
        if not isinstance(changes, list):
            continue
        for change in changes:
            if not isinstance(change, dict):
                continue
            value = change.get("value")
            if not isinstance(value, dict):
                continue
            messages = value.get("messages")
            if isinstance(messages, list) and messages:
                return messages
    return None


def _extract_text(*, message: dict[str, Any]) -> str | None:
    text_payload = message.get("text")
    if isinstance(text_payload, dict):
        body = text_payload.get("body")
        if body is not None and str(body).strip():
            return str(body)
    return None
