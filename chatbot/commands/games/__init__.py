from .dice_command import DiceCommand
from .roll_command import RollCommand
from .dice_notation import DiceExpression, DiceResult, parse_dice, roll_dice

__all__ = [
    'DiceCommand',
    'RollCommand',
    'DiceExpression',
    'DiceResult',
    'parse_dice',
    'roll_dice'
]
