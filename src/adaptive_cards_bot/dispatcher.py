"""Maps inbound events to the bot's canned responses."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from adaptive_cards_bot.cards import load_card
from adaptive_cards_bot.config import CardBotConfig
from adaptive_cards_bot.models.actions import (
    CardAttachment,
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

logger = logging.getLogger("adaptive_cards_bot.dispatcher")

INSTALL_WELCOME_TEXT = "Welcome message"
INSTALL_EXIT_TEXT = "Exit message"
FOLLOW_UP_TEXT = "Please enter any text to see another card."


class EventDispatcher:
    """Produces the responses for one turn from its inbound event.

    The dispatcher keeps no state between events; a single instance can be
    shared by concurrent turns. Card files are read on every message.
    """

    def __init__(self, config: CardBotConfig) -> None:
        self._config = config

    @property
    def config(self) -> CardBotConfig:
        return self._config

    def dispatch(self, event: InboundEvent) -> TurnResult:
        """Handle *event* and return its actions in send order.

        Raises:
            CardLoadError: If a message needs a card that cannot be loaded.
            TypeError: If *event* is not a known event type.
        """
        if isinstance(event, MembersAddedEvent):
            return TurnResult(actions=self.on_members_added(event.members, event.recipient_id))
        if isinstance(event, InstallationUpdateEvent):
            return TurnResult(actions=[self.on_installation_update(event.action)])
        if isinstance(event, MessageEvent):
            return TurnResult(actions=self.on_message(event))
        if isinstance(event, TaskModuleFetchEvent):
            return TurnResult(invoke_response=self.on_task_module_fetch(event.data))
        raise TypeError(f"Unsupported event type: {type(event).__name__}")

    def on_members_added(
        self,
        members: Sequence[ChannelAccount],
        recipient_id: str,
    ) -> list[SendText]:
        """Welcome every added member except the bot itself."""
        welcome_text = self._config.welcome_text
        actions = [
            SendText(text=f"Welcome to Adaptive Cards Bot {member.name}. {welcome_text}")
            for member in members
            if member.id != recipient_id
        ]
        logger.debug("Welcoming %d of %d added members", len(actions), len(members))
        return actions

    def on_installation_update(self, action: str | None) -> SendText:
        # casefold() is locale-independent
        if action is not None and action.casefold() == "add":
            return SendText(text=INSTALL_WELCOME_TEXT)
        return SendText(text=INSTALL_EXIT_TEXT)

    def on_message(self, event: MessageEvent | None = None) -> list[SendAttachment | SendText]:
        """Reply with the first configured card followed by a prompt.

        The reply does not depend on the message content.
        """
        if event is not None:
            logger.debug("Message from %s", event.sender_id or "<unknown>")
        return [
            SendAttachment(attachment=self.load_card(self._config.card_paths[0])),
            SendText(text=FOLLOW_UP_TEXT),
        ]

    def on_task_module_fetch(self, data: object = None) -> TaskModuleResponse:  # noqa: ARG002
        task_module = self._config.task_module
        return TaskModuleResponse(
            url=task_module.url,
            fallback_url=task_module.url,
            height=task_module.height,
            width=task_module.width,
            title=task_module.title,
        )

    def load_card(self, path: str) -> CardAttachment:
        """Load a card, resolving *path* against the resources directory."""
        return load_card(self._config.resolve_card_path(path))
