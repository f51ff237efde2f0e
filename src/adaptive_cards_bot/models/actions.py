"""Outbound actions and invoke responses produced for a turn."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ADAPTIVE_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class CardAttachment(_CamelModel):
    """An Adaptive Card wrapped in a Bot Framework attachment envelope."""

    content_type: str = ADAPTIVE_CARD_CONTENT_TYPE
    content: Any


class SendText(BaseModel):
    """Send a plain text message."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class SendAttachment(BaseModel):
    """Send a message carrying a single card attachment."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["attachment"] = "attachment"
    attachment: CardAttachment


OutboundAction = Annotated[SendText | SendAttachment, Field(discriminator="kind")]


class TaskModuleResponse(_CamelModel):
    """Task module to open in reply to a ``task/fetch`` invoke.

    Field names follow the Bot Framework ``TaskModuleTaskInfo`` schema when
    dumped with ``by_alias=True``.
    """

    url: str
    fallback_url: str
    height: int
    width: int
    title: str

    def to_payload(self) -> dict[str, Any]:
        """Return the ``task/continue`` envelope sent as the invoke body."""
        return {
            "task": {
                "type": "continue",
                "value": self.model_dump(by_alias=True),
            }
        }


class TurnResult(BaseModel):
    """Everything the bot emits for one inbound event, in send order."""

    model_config = ConfigDict(frozen=True)

    actions: list[OutboundAction] = Field(default_factory=list)
    invoke_response: TaskModuleResponse | None = None
