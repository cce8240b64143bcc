from typing import Optional
import discord
from .interfaces import IMessageDispatcher, ICommandRegistry

MAX_MESSAGE_LENGTH = 2000


class MessageDispatcher(IMessageDispatcher):

    def __init__(self, registry: ICommandRegistry, debug: bool = False):
        self._registry = registry
        self._debug = debug

    @property
    def registry(self) -> ICommandRegistry:
        return self._registry

    async def dispatch(self, message: discord.Message) -> Optional[str]:
        # ignore every bot, including ourselves
        if message.author.bot:
            if self._debug:
                print(f"⚠️ Игнорируем сообщение бота {message.author}")
            return None

        command = self._registry.resolve(message.content)
        if command is None:
            return None

        reply = command.execute(message)
        if len(reply) > MAX_MESSAGE_LENGTH:
            reply = reply[:MAX_MESSAGE_LENGTH]

        if self._debug:
            print(f"✅ {command.trigger} -> {reply!r}")

        await message.channel.send(reply)
        return reply
