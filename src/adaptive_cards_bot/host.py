"""Bot Framework hosting: adapter wiring and the ``/api/messages`` endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from aiohttp import web

from adaptive_cards_bot.activity import parse_activity, render_action
from adaptive_cards_bot.config import HostConfig
from adaptive_cards_bot.dispatcher import EventDispatcher
from adaptive_cards_bot.errors import CardLoadError

if TYPE_CHECKING:
    from botbuilder.core import BotFrameworkAdapter, InvokeResponse, TurnContext

logger = logging.getLogger("adaptive_cards_bot.host")

TURN_ERROR_TEXT = "The bot encountered an error or bug."


class ActivityProcessor(Protocol):
    async def process_activity(self, payload: dict[str, Any], auth_header: str) -> Any: ...


class CardBotHost:
    """Runs the dispatcher behind a Bot Framework adapter.

    The adapter handles authentication and delivery; this class converts
    each turn's activity into an inbound event and sends the dispatcher's
    actions back in order.
    """

    def __init__(self, dispatcher: EventDispatcher, config: HostConfig | None = None) -> None:
        try:
            from botbuilder.core import BotFrameworkAdapter, BotFrameworkAdapterSettings
        except ImportError as exc:
            raise ImportError(
                "botbuilder-core is required for CardBotHost. "
                "Install it with: pip install adaptive-cards-bot[teams]"
            ) from exc

        self._dispatcher = dispatcher
        self._config = config or HostConfig()
        settings_kwargs: dict[str, Any] = {
            "app_id": self._config.app_id,
            "app_password": (
                self._config.app_password.get_secret_value() if self._config.app_password else ""
            ),
        }
        if self._config.tenant_id != "common":
            settings_kwargs["channel_auth_tenant"] = self._config.tenant_id
        self._adapter: BotFrameworkAdapter = BotFrameworkAdapter(
            BotFrameworkAdapterSettings(**settings_kwargs)
        )
        self._adapter.on_turn_error = self.on_turn_error

    @property
    def adapter(self) -> BotFrameworkAdapter:
        """The underlying Bot Framework adapter."""
        return self._adapter

    @property
    def dispatcher(self) -> EventDispatcher:
        return self._dispatcher

    async def process_activity(
        self, payload: dict[str, Any], auth_header: str
    ) -> InvokeResponse | None:
        """Authenticate and run one inbound Activity.

        Returns:
            The invoke response for ``invoke`` activities, otherwise ``None``.
        """
        from botbuilder.schema import Activity

        activity = Activity().deserialize(payload)
        return await self._adapter.process_activity(activity, auth_header, self.on_turn)

    async def on_turn(self, turn_context: TurnContext) -> None:
        from botbuilder.core import InvokeResponse
        from botbuilder.schema import Activity, ActivityTypes

        event = parse_activity(turn_context.activity.serialize())
        if event is None:
            return

        result = self._dispatcher.dispatch(event)
        for action in result.actions:
            await turn_context.send_activity(Activity().deserialize(render_action(action)))

        if result.invoke_response is not None:
            await turn_context.send_activity(
                Activity(
                    type=ActivityTypes.invoke_response,
                    value=InvokeResponse(status=200, body=result.invoke_response.to_payload()),
                )
            )

    async def on_turn_error(self, turn_context: TurnContext, error: Exception) -> None:
        """Log a failed turn and tell the user something went wrong."""
        if isinstance(error, CardLoadError):
            logger.exception(
                "Card %s failed to load: %s", error.path, error.reason, exc_info=error
            )
        else:
            logger.exception("Unhandled error during turn: %s", error, exc_info=error)
        await turn_context.send_activity(TURN_ERROR_TEXT)


def create_app(host: ActivityProcessor) -> web.Application:
    """Build the aiohttp application exposing ``POST /api/messages``."""

    async def messages(request: web.Request) -> web.Response:
        if "application/json" not in request.headers.get("Content-Type", ""):
            return web.Response(status=415)

        try:
            payload = await request.json()
        except ValueError:
            logger.warning("Rejected request with malformed JSON body")
            return web.Response(status=400)

        auth_header = request.headers.get("Authorization", "")
        try:
            response = await host.process_activity(payload, auth_header)
        except PermissionError as exc:
            logger.warning("Rejected unauthenticated request: %s", exc)
            return web.Response(status=401)
        if response is not None:
            return web.json_response(data=response.body, status=response.status)
        return web.Response(status=201)

    app = web.Application()
    app.router.add_post("/api/messages", messages)
    return app
