"""
Модуль общих команд
"""

from .basic_commands import HelloCommand, PingCommand, InfoCommand
from .help_command import HelpCommand

__all__ = [
    'HelloCommand',
    'PingCommand',
    'InfoCommand',
    'HelpCommand'
]
