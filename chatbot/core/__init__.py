"""
Ядро системы команд бота
"""

from .interfaces import ICommand, ICommandFactory, ICommandRegistry, IMessageDispatcher
from .base_command import DEFAULT_PREFIX, BaseCommand, StaticReplyCommand, ArgumentCommand
from .command_factory import CommandFactory, create_default_factory
from .command_registry import CommandRegistry
from .dispatcher import MessageDispatcher, MAX_MESSAGE_LENGTH

__all__ = [
    'ICommand',
    'ICommandFactory',
    'ICommandRegistry',
    'IMessageDispatcher',
    'DEFAULT_PREFIX',
    'BaseCommand',
    'StaticReplyCommand',
    'ArgumentCommand',
    'CommandFactory',
    'create_default_factory',
    'CommandRegistry',
    'MessageDispatcher',
    'MAX_MESSAGE_LENGTH'
]
