"""
Базовые классы для системы команд
"""

import discord
from .interfaces import ICommand

DEFAULT_PREFIX = "!"


class BaseCommand(ICommand):
    """Базовый класс для команд бота"""

    def __init__(self, name: str, description: str = "no description", prefix: str = DEFAULT_PREFIX):
        self._name = name
        self._description = description
        self._prefix = prefix

    @property
    def name(self) -> str:
        """Имя команды"""
        return self._name

    @property
    def description(self) -> str:
        """Описание команды"""
        return self._description

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def trigger(self) -> str:
        """Триггер команды, например `!ping`"""
        return f"{self._prefix}{self._name}".lower()

    @property
    def accepts_arguments(self) -> bool:
        """Принимает ли команда текст после триггера"""
        return False

    def matches(self, text: str) -> bool:
        """Точное совпадение нормализованного текста с триггером"""
        return text == self.trigger

    def execute(self, message: discord.Message) -> str:
        """Выполнить команду - должно быть переопределено в наследниках"""
        raise NotImplementedError("Метод execute должен быть реализован в наследнике")


class StaticReplyCommand(BaseCommand):
    """Команда, которая всегда отвечает одним и тем же текстом"""

    reply = ""

    def execute(self, message: discord.Message) -> str:
        return self.reply


class ArgumentCommand(BaseCommand):
    """Команда, принимающая аргументы после триггера"""

    @property
    def accepts_arguments(self) -> bool:
        return True

    def matches(self, text: str) -> bool:
        """Триггер должен стоять в начале и отделяться пробелом от аргументов"""
        if text == self.trigger:
            return True
        return text.startswith(self.trigger) and text[len(self.trigger)].isspace()

    def get_arguments(self, content: str) -> str:
        """Вернуть текст после триггера без изменения исходного сообщения"""
        text = content.lstrip()
        if text[:len(self.trigger)].lower() == self.trigger:
            return text[len(self.trigger):]
        return text
