"""
Разбор и бросок кубиков в нотации NdM

    d20   -> один кубик на 20 граней
    2d6   -> два кубика на 6 граней

Количество кубиков по умолчанию 1. Модификаторы (+/-) не поддерживаются.
"""

import random
import re
from dataclasses import dataclass
from typing import Optional, Tuple

_DICE_PATTERN = re.compile(r'^(\d*)d(\d+)$', re.IGNORECASE)

MAX_DICE = 100
MIN_SIDES = 2
MAX_SIDES = 1000


@dataclass(frozen=True)
class DiceExpression:
    """Что бросать: количество кубиков и число граней"""
    count: int
    sides: int

    def __str__(self) -> str:
        return f"{self.count}d{self.sides}"


@dataclass(frozen=True)
class DiceResult:
    """Результат броска с отдельными значениями кубиков"""
    expression: DiceExpression
    rolls: Tuple[int, ...]
    total: int

    def format_summary(self) -> str:
        rolls_str = ", ".join(str(r) for r in self.rolls)
        return f"🎲 Rullade {self.expression}: {rolls_str} = **{self.total}**"


def parse_dice(notation: str) -> Optional[DiceExpression]:
    """
    Разобрать нотацию в DiceExpression.

    Возвращает None, если строка вообще не похожа на нотацию кубиков.
    Бросает ValueError, если нотация корректна, но выходит за лимиты.
    """
    match = _DICE_PATTERN.match(notation.strip())
    if match is None:
        return None

    count_str, sides_str = match.groups()
    count = int(count_str) if count_str else 1
    sides = int(sides_str)

    if count < 1 or count > MAX_DICE:
        raise ValueError(f"Antal tärningar måste vara mellan 1 och {MAX_DICE}, fick {count}.")

    if sides < MIN_SIDES or sides > MAX_SIDES:
        raise ValueError(f"Antal sidor måste vara mellan {MIN_SIDES} och {MAX_SIDES}, fick {sides}.")

    return DiceExpression(count=count, sides=sides)


def roll_dice(expression: DiceExpression) -> DiceResult:
    rolls = tuple(random.randint(1, expression.sides) for _ in range(expression.count))
    return DiceResult(expression=expression, rolls=rolls, total=sum(rolls))
