import discord
from chatbot.core.base_command import DEFAULT_PREFIX, ArgumentCommand
from .dice_notation import DiceExpression, parse_dice, roll_dice

DEFAULT_EXPRESSION = DiceExpression(count=1, sides=6)


class RollCommand(ArgumentCommand):

    def __init__(self, prefix: str = DEFAULT_PREFIX, **kwargs):
        super().__init__(
            name="roll",
            description=f"Roll dice (e.g. {prefix}roll d20, {prefix}roll 2d6)",
            prefix=prefix
        )

    def execute(self, message: discord.Message) -> str:
        notation = self.get_arguments(message.content).strip()
        if not notation:
            return roll_dice(DEFAULT_EXPRESSION).format_summary()

        try:
            expression = parse_dice(notation)
        except ValueError as e:
            return f"❌ {e}"

        if expression is None:
            return (
                f"❌ Ogiltig tärningsnotation: '{notation}'. "
                f"Använd t.ex. {self.trigger} d20 eller {self.trigger} 2d6"
            )

        return roll_dice(expression).format_summary()
