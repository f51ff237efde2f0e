"""Data models for inbound events and outbound actions."""

from adaptive_cards_bot.models.actions import (
    ADAPTIVE_CARD_CONTENT_TYPE,
    CardAttachment,
    OutboundAction,
    SendAttachment,
    SendText,
    TaskModuleResponse,
    TurnResult,
)
from adaptive_cards_bot.models.events import (
    ChannelAccount,
    InboundEvent,
    InstallationUpdateEvent,
    MembersAddedEvent,
    MessageEvent,
    TaskModuleFetchEvent,
)

__all__ = [
    "ADAPTIVE_CARD_CONTENT_TYPE",
    "CardAttachment",
    "ChannelAccount",
    "InboundEvent",
    "InstallationUpdateEvent",
    "MembersAddedEvent",
    "MessageEvent",
    "OutboundAction",
    "SendAttachment",
    "SendText",
    "TaskModuleFetchEvent",
    "TaskModuleResponse",
    "TurnResult",
]
