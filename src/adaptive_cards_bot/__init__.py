"""Adaptive Cards bot - replies to every message with an Adaptive Card."""

from adaptive_cards_bot._version import __version__
from adaptive_cards_bot.activity import parse_activity, render_action
from adaptive_cards_bot.cards import load_card
from adaptive_cards_bot.config import (
    WELCOME_TEXT,
    CardBotConfig,
    HostConfig,
    TaskModuleConfig,
    load_config_from_env,
)
from adaptive_cards_bot.dispatcher import EventDispatcher
from adaptive_cards_bot.errors import CardBotError, CardLoadError, ConfigurationError
from adaptive_cards_bot.host import CardBotHost, create_app
from adaptive_cards_bot.models import (
    ADAPTIVE_CARD_CONTENT_TYPE,
    CardAttachment,
    ChannelAccount,
    InboundEvent,
    InstallationUpdateEvent,
    MembersAddedEvent,
    MessageEvent,
    OutboundAction,
    SendAttachment,
    SendText,
    TaskModuleFetchEvent,
    TaskModuleResponse,
    TurnResult,
)

__all__ = [
    "ADAPTIVE_CARD_CONTENT_TYPE",
    "WELCOME_TEXT",
    "CardAttachment",
    "CardBotConfig",
    "CardBotError",
    "CardBotHost",
    "CardLoadError",
    "ChannelAccount",
    "ConfigurationError",
    "EventDispatcher",
    "HostConfig",
    "InboundEvent",
    "InstallationUpdateEvent",
    "MembersAddedEvent",
    "MessageEvent",
    "OutboundAction",
    "SendAttachment",
    "SendText",
    "TaskModuleConfig",
    "TaskModuleFetchEvent",
    "TaskModuleResponse",
    "TurnResult",
    "__version__",
    "create_app",
    "load_card",
    "load_config_from_env",
    "parse_activity",
    "render_action",
]
