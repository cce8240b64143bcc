"""
Конфигурация бота из переменных окружения
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from chatbot.core.base_command import DEFAULT_PREFIX

TOKEN_ENV = "DISCORD_BOT_TOKEN"
PREFIX_ENV = "COMMAND_PREFIX"
DEBUG_ENV = "BOT_DEBUG"


@dataclass(frozen=True)
class BotConfig:
    token: str
    command_prefix: str = DEFAULT_PREFIX
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BotConfig":
        """Прочитать настройки из окружения (по умолчанию os.environ)"""
        if environ is None:
            environ = os.environ
        return cls(
            token=environ.get(TOKEN_ENV, "").strip(),
            command_prefix=environ.get(PREFIX_ENV, "").strip() or DEFAULT_PREFIX,
            debug=environ.get(DEBUG_ENV, "false").strip().lower() in ("1", "true", "yes", "on"),
        )

    def validate(self) -> None:
        if not self.token:
            raise ValueError(f"{TOKEN_ENV} är inte satt!")
