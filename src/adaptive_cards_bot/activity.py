"""Conversion between Bot Framework Activity JSON and bot models."""

from __future__ import annotations

import logging
from typing import Any

from adaptive_cards_bot.models.actions import OutboundAction, SendAttachment, SendText
from adaptive_cards_bot.models.events import (
    ChannelAccount,
    InboundEvent,
    InstallationUpdateEvent,
    MembersAddedEvent,
    MessageEvent,
    TaskModuleFetchEvent,
)

logger = logging.getLogger("adaptive_cards_bot.activity")

TASK_FETCH_INVOKE = "task/fetch"


def parse_activity(payload: dict[str, Any]) -> InboundEvent | None:
    """Convert a Bot Framework Activity payload into an inbound event.

    Handled activities:

    * ``conversationUpdate`` with ``membersAdded``
    * ``installationUpdate``
    * ``message``
    * ``invoke`` named ``task/fetch``

    Anything else returns ``None``.
    """
    activity_type = payload.get("type", "")
    recipient = payload.get("recipient") or {}

    if activity_type == "conversationUpdate":
        members_added = payload.get("membersAdded") or []
        if not members_added:
            logger.debug("Ignoring conversationUpdate without membersAdded")
            return None
        return MembersAddedEvent(
            members=[
                ChannelAccount(id=m.get("id", ""), name=m.get("name") or "") for m in members_added
            ],
            recipient_id=recipient.get("id", ""),
        )

    if activity_type == "installationUpdate":
        return InstallationUpdateEvent(action=payload.get("action"))

    if activity_type == "message":
        sender = payload.get("from") or {}
        return MessageEvent(sender_id=sender.get("id", ""), text=payload.get("text") or "")

    if activity_type == "invoke" and payload.get("name") == TASK_FETCH_INVOKE:
        value = payload.get("value") or {}
        return TaskModuleFetchEvent(data=value.get("data") if isinstance(value, dict) else None)

    logger.debug("Ignoring activity type=%r name=%r", activity_type, payload.get("name"))
    return None


def render_action(action: OutboundAction) -> dict[str, Any]:
    """Render an outbound action as a Bot Framework message Activity dict."""
    if isinstance(action, SendText):
        return {"type": "message", "text": action.text}
    if isinstance(action, SendAttachment):
        return {
            "type": "message",
            "attachments": [action.attachment.model_dump(by_alias=True)],
        }
    raise TypeError(f"Unsupported action type: {type(action).__name__}")
