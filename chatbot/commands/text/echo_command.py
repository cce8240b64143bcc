import discord
from chatbot.core.base_command import DEFAULT_PREFIX, ArgumentCommand


class EchoCommand(ArgumentCommand):
    """Повторяет текст после триггера как есть, включая пробелы"""

    def __init__(self, prefix: str = DEFAULT_PREFIX, **kwargs):
        super().__init__(
            name="echo",
            description="Ger ett eko av användarens meddelande",
            prefix=prefix
        )

    def matches(self, text: str) -> bool:
        # `!echowhat` is echoed too, no separator required
        return text.startswith(self.trigger)

    def execute(self, message: discord.Message) -> str:
        return "Echo: " + self.get_arguments(message.content)
