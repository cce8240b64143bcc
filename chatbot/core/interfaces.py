"""
Интерфейсы для системы команд бота
Обеспечивают расширяемость и соблюдение принципов ООП
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import discord


class ICommand(ABC):
    """Интерфейс команды бота"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Имя команды"""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Описание команды"""
        pass

    @property
    @abstractmethod
    def trigger(self) -> str:
        """Строка, вызывающая команду (префикс + имя)"""
        pass

    @property
    @abstractmethod
    def accepts_arguments(self) -> bool:
        """Принимает ли команда текст после триггера"""
        pass

    @abstractmethod
    def matches(self, text: str) -> bool:
        """Проверить, относится ли нормализованный текст к команде"""
        pass

    @abstractmethod
    def execute(self, message: discord.Message) -> str:
        """Выполнить команду и вернуть текст ответа"""
        pass


class ICommandRegistry(ABC):
    """Интерфейс реестра команд"""

    @abstractmethod
    def register_command(self, command: ICommand) -> None:
        """Зарегистрировать команду"""
        pass

    @abstractmethod
    def get_command(self, trigger: str) -> Optional[ICommand]:
        """Получить команду по триггеру"""
        pass

    @abstractmethod
    def get_all_commands(self) -> Dict[str, ICommand]:
        """Получить все команды"""
        pass

    @abstractmethod
    def resolve(self, text: str) -> Optional[ICommand]:
        """Найти команду для текста сообщения"""
        pass


class ICommandFactory(ABC):
    """Интерфейс фабрики команд"""

    @abstractmethod
    def create_command(self, command_type: str, **kwargs) -> ICommand:
        """Создать команду указанного типа"""
        pass

    @abstractmethod
    def register_command_type(self, command_type: str, command_class: type) -> None:
        """Зарегистрировать тип команды"""
        pass

    @abstractmethod
    def get_available_command_types(self) -> List[str]:
        """Получить список зарегистрированных типов"""
        pass


class IMessageDispatcher(ABC):
    """Интерфейс диспетчера сообщений"""

    @abstractmethod
    async def dispatch(self, message: discord.Message) -> Optional[str]:
        """Обработать входящее сообщение"""
        pass
