"""
Команда справки
"""

from typing import Optional
import discord
from chatbot.core.base_command import DEFAULT_PREFIX, BaseCommand
from chatbot.core.interfaces import ICommandRegistry


class HelpCommand(BaseCommand):
    """Список всех зарегистрированных команд с описаниями"""

    def __init__(self, prefix: str = DEFAULT_PREFIX, registry: Optional[ICommandRegistry] = None, **kwargs):
        super().__init__(
            name="help",
            description="Visar alla kommandon",
            prefix=prefix
        )
        self._registry = registry

    def execute(self, message: discord.Message) -> str:
        """Собрать текст справки из реестра"""
        if self._registry is not None:
            commands = self._registry.get_all_commands()
        else:
            commands = {self.trigger: self}

        lines = ["📖 **Kommandon**", ""]
        for trigger in sorted(commands):
            lines.append(f"`{trigger}` - {commands[trigger].description}")
        return "\n".join(lines)
