"""
Discord-бот с командами по префиксу (!hello, !ping, !info, !dice, !echo, !roll, !help)
"""

__version__ = "1.0.0"

from .config import BotConfig
from .core import CommandRegistry, MessageDispatcher

__all__ = ["BotConfig", "CommandRegistry", "MessageDispatcher", "__version__"]
