"""Adaptive Card loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from adaptive_cards_bot.errors import CardLoadError
from adaptive_cards_bot.models.actions import ADAPTIVE_CARD_CONTENT_TYPE, CardAttachment

logger = logging.getLogger("adaptive_cards_bot.cards")


def load_card(path: str | Path) -> CardAttachment:
    """Read a card definition from disk and wrap it as an attachment.

    The file is re-read on every call; card content is not cached.

    Raises:
        CardLoadError: If the file is missing, unreadable, not UTF-8 or
            not valid JSON.
    """
    card_path = Path(path)
    try:
        raw = card_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CardLoadError(card_path, "file not found") from exc
    except UnicodeDecodeError as exc:
        raise CardLoadError(card_path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise CardLoadError(card_path, exc.strerror or str(exc)) from exc

    try:
        content = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CardLoadError(
            card_path, f"invalid JSON at line {exc.lineno} column {exc.colno}"
        ) from exc

    logger.debug("Loaded card %s (%d bytes)", card_path, len(raw))
    return CardAttachment(content_type=ADAPTIVE_CARD_CONTENT_TYPE, content=content)
