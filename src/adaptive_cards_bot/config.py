"""Bot configuration models."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from adaptive_cards_bot.errors import ConfigurationError

logger = logging.getLogger("adaptive_cards_bot.config")

RESOURCES_DIR = Path(__file__).parent / "resources"

WELCOME_TEXT = (
    "This bot will introduce you to AdaptiveCards.\n Type anything to see an AdaptiveCard."
)


class TaskModuleConfig(BaseModel):
    """Task module opened in response to ``task/fetch``."""

    url: str
    height: int = Field(default=1000, gt=0)
    width: int = Field(default=700, gt=0)
    title: str = "Task Module Title"

    @field_validator("url")
    @classmethod
    def _validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("Task module URL must start with http:// or https://")
        return v


class CardBotConfig(BaseModel):
    """Dispatcher configuration: card files, welcome text and task module.

    Card paths are resolved against ``resources_dir`` unless absolute::

        CardBotConfig(task_module=TaskModuleConfig(url="https://example.com/task"))
    """

    card_paths: list[str] = Field(default_factory=lambda: ["Adaptivecard1.json"], min_length=1)
    resources_dir: Path = RESOURCES_DIR
    welcome_text: str = WELCOME_TEXT
    task_module: TaskModuleConfig

    def resolve_card_path(self, path: str | Path) -> Path:
        """Return *path* joined onto ``resources_dir`` when it is relative."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.resources_dir / candidate


class HostConfig(BaseModel):
    """Bot Framework credentials and HTTP listener settings.

    Empty credentials are accepted so the bot can be run against the
    Bot Framework Emulator locally.
    """

    app_id: str = ""
    app_password: SecretStr | None = None
    tenant_id: str = "common"
    host: str = "0.0.0.0"  # nosec B104
    port: int = Field(default=3978, gt=0, lt=65536)


def load_config_from_env(
    environ: Mapping[str, str] | None = None,
) -> tuple[CardBotConfig, HostConfig]:
    """Build bot and host configuration from environment variables.

    ``TASK_MODULE_URL`` is required. ``CARD_PATHS`` is a comma-separated
    list of card files.

    Raises:
        ConfigurationError: If a required variable is missing or a value
            fails validation.
    """
    env = os.environ if environ is None else environ

    task_module_url = env.get("TASK_MODULE_URL", "").strip()
    if not task_module_url:
        raise ConfigurationError("TASK_MODULE_URL must be set")

    bot_kwargs: dict[str, object] = {"task_module": {"url": task_module_url}}
    card_paths = [p.strip() for p in env.get("CARD_PATHS", "").split(",") if p.strip()]
    if card_paths:
        bot_kwargs["card_paths"] = card_paths
    if env.get("CARD_RESOURCES_DIR"):
        bot_kwargs["resources_dir"] = env["CARD_RESOURCES_DIR"]

    host_kwargs: dict[str, object] = {
        "app_id": env.get("MICROSOFT_APP_ID", ""),
        "tenant_id": env.get("MICROSOFT_APP_TENANT_ID", "common"),
    }
    if env.get("MICROSOFT_APP_PASSWORD"):
        host_kwargs["app_password"] = env["MICROSOFT_APP_PASSWORD"]
    if env.get("HOST"):
        host_kwargs["host"] = env["HOST"]
    if env.get("PORT"):
        host_kwargs["port"] = env["PORT"]

    try:
        bot_config = CardBotConfig.model_validate(bot_kwargs)
        host_config = HostConfig.model_validate(host_kwargs)
    except ValidationError as exc:
        logger.warning("Invalid configuration from environment: %s", exc)
        raise ConfigurationError(str(exc)) from exc

    return bot_config, host_config
