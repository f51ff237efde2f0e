"""Run the bot: ``python -m adaptive_cards_bot``.

Requires ``TASK_MODULE_URL``. Set ``MICROSOFT_APP_ID`` and
``MICROSOFT_APP_PASSWORD`` when running behind an Azure Bot registration;
leave them empty for the Bot Framework Emulator.
"""

from __future__ import annotations

import logging
import os
import sys

from aiohttp import web

from adaptive_cards_bot.config import load_config_from_env
from adaptive_cards_bot.dispatcher import EventDispatcher
from adaptive_cards_bot.errors import ConfigurationError
from adaptive_cards_bot.host import CardBotHost, create_app


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        bot_config, host_config = load_config_from_env()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(2)

    host = CardBotHost(EventDispatcher(bot_config), host_config)
    print(f"Bot listening on http://{host_config.host}:{host_config.port}/api/messages")
    web.run_app(create_app(host), host=host_config.host, port=host_config.port, print=None)


if __name__ == "__main__":
    main()
