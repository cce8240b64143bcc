from typing import Dict, List, Type
from .interfaces import ICommand, ICommandFactory
from .base_command import BaseCommand


class CommandFactory(ICommandFactory):

    def __init__(self):
        self._command_types: Dict[str, Type[BaseCommand]] = {}

    def register_default_commands(self) -> "CommandFactory":
        from chatbot.commands.general import HelloCommand, PingCommand, InfoCommand, HelpCommand
        from chatbot.commands.games import DiceCommand, RollCommand
        from chatbot.commands.text import EchoCommand

        self.register_command_type("hello", HelloCommand)
        self.register_command_type("ping", PingCommand)
        self.register_command_type("info", InfoCommand)
        self.register_command_type("dice", DiceCommand)
        self.register_command_type("echo", EchoCommand)
        self.register_command_type("roll", RollCommand)
        self.register_command_type("help", HelpCommand)
        return self

    def register_command_type(self, command_type: str, command_class: Type[BaseCommand]) -> None:
        if not isinstance(command_class, type) or not issubclass(command_class, BaseCommand):
            raise TypeError(f"Command class {command_class} must inherit from BaseCommand")

        self._command_types[command_type] = command_class

    def create_command(self, command_type: str, **kwargs) -> ICommand:
        if command_type not in self._command_types:
            raise ValueError(f"Unknown command type: {command_type}")

        command_class = self._command_types[command_type]
        return command_class(**kwargs)

    def get_available_command_types(self) -> List[str]:
        return list(self._command_types.keys())

    def is_command_type_registered(self, command_type: str) -> bool:
        return command_type in self._command_types


def create_default_factory() -> CommandFactory:
    return CommandFactory().register_default_commands()
