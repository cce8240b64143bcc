import random
import discord
from chatbot.core.base_command import DEFAULT_PREFIX, BaseCommand


class DiceCommand(BaseCommand):

    sides = 6

    def __init__(self, prefix: str = DEFAULT_PREFIX, **kwargs):
        super().__init__(
            name="dice",
            description="Slår en tärning",
            prefix=prefix
        )

    def execute(self, message: discord.Message) -> str:
        return f"Du slog: {random.randint(1, self.sides)}"
