from typing import Dict, List, Optional
from .interfaces import ICommand, ICommandRegistry
from .base_command import DEFAULT_PREFIX
from .command_factory import CommandFactory, create_default_factory


class CommandRegistry(ICommandRegistry):

    def __init__(self, prefix: str = DEFAULT_PREFIX, factory: Optional[CommandFactory] = None):
        self._prefix = prefix
        self._factory = factory if factory is not None else create_default_factory()
        self._commands: Dict[str, ICommand] = {}

    @staticmethod
    def normalize(text: str) -> str:
        return text.strip().lower()

    @property
    def prefix(self) -> str:
        return self._prefix

    def register_command(self, command: ICommand) -> None:
        trigger = self.normalize(command.trigger)
        if trigger in self._commands:
            raise ValueError(f"Trigger collision: {trigger} is already registered")
        self._commands[trigger] = command

    def get_command(self, trigger: str) -> Optional[ICommand]:
        return self._commands.get(self.normalize(trigger))

    def get_all_commands(self) -> Dict[str, ICommand]:
        return self._commands.copy()

    def setup_commands(self) -> "CommandRegistry":
        for command_type in self._factory.get_available_command_types():
            try:
                command = self._factory.create_command(command_type, prefix=self._prefix, registry=self)
                self.register_command(command)
            except Exception as e:
                print(f"❌ Ошибка создания команды {command_type}: {e}")
        return self

    def resolve(self, text: str) -> Optional[ICommand]:
        normalized = self.normalize(text)
        if not normalized:
            return None

        command = self._commands.get(normalized)
        if command is not None:
            return command

        # longest trigger wins when argument triggers share a prefix
        for trigger in sorted(self._commands, key=len, reverse=True):
            command = self._commands[trigger]
            if command.accepts_arguments and command.matches(normalized):
                return command
        return None

    def unregister_command(self, trigger: str) -> bool:
        trigger = self.normalize(trigger)
        if trigger in self._commands:
            del self._commands[trigger]
            print(f"🗑️ Команда {trigger} удалена")
            return True
        return False

    def get_command_count(self) -> int:
        return len(self._commands)

    def get_command_names(self) -> List[str]:
        return list(self._commands.keys())
