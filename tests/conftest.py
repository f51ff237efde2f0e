"""Shared test fixtures and helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from adaptive_cards_bot.config import CardBotConfig, TaskModuleConfig
from adaptive_cards_bot.dispatcher import EventDispatcher

TASK_MODULE_URL = "https://task.example.com/module"

SAMPLE_CARD: dict[str, Any] = {
    "$schema": "http://adaptivecards.io/schemas/adaptive-card.json",
    "type": "AdaptiveCard",
    "version": "1.2",
    "body": [{"type": "TextBlock", "text": "Hello, card"}],
}


@pytest.fixture
def card_dir(tmp_path: Path) -> Path:
    (tmp_path / "card.json").write_text(json.dumps(SAMPLE_CARD), encoding="utf-8")
    return tmp_path


@pytest.fixture
def config(card_dir: Path) -> CardBotConfig:
    return CardBotConfig(
        card_paths=["card.json"],
        resources_dir=card_dir,
        task_module=TaskModuleConfig(url=TASK_MODULE_URL),
    )


@pytest.fixture
def dispatcher(config: CardBotConfig) -> EventDispatcher:
    return EventDispatcher(config)


def make_activity(activity_type: str = "message", **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "type": activity_type,
        "id": "act-1",
        "from": {"id": "user-aad-1", "name": "Alice"},
        "recipient": {"id": "bot-aad-1", "name": "CardBot"},
        "conversation": {"id": "conv-1", "conversationType": "personal"},
        "serviceUrl": "https://smba.trafficmanager.net/teams/",
        "channelId": "msteams",
    }
    payload.update(overrides)
    return payload
