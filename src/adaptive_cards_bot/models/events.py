"""Inbound event models, one variant per handled activity kind."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class ChannelAccount(BaseModel):
    """A conversation member as reported by the channel."""

    id: str
    name: str = ""


class MembersAddedEvent(BaseModel):
    """Members joined the conversation (``conversationUpdate``)."""

    kind: Literal["members_added"] = "members_added"
    members: list[ChannelAccount] = Field(default_factory=list)
    recipient_id: str


class InstallationUpdateEvent(BaseModel):
    """The bot was installed into or removed from a scope."""

    kind: Literal["installation_update"] = "installation_update"
    action: str | None = None


class MessageEvent(BaseModel):
    """A user message."""

    kind: Literal["message"] = "message"
    sender_id: str = ""
    text: str = ""


class TaskModuleFetchEvent(BaseModel):
    """A ``task/fetch`` invoke asking the bot which task module to open."""

    kind: Literal["task_module_fetch"] = "task_module_fetch"
    data: Any = None


InboundEvent = Annotated[
    MembersAddedEvent | InstallationUpdateEvent | MessageEvent | TaskModuleFetchEvent,
    Field(discriminator="kind"),
]
