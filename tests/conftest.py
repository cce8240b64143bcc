import asyncio
from types import SimpleNamespace

import pytest

from chatbot.core import CommandRegistry, MessageDispatcher


class FakeChannel:
    def __init__(self):
        self.sent = []

    async def send(self, content):
        self.sent.append(content)


def make_message(content, bot=False):
    return SimpleNamespace(
        content=content,
        author=SimpleNamespace(bot=bot, name="tester"),
        channel=FakeChannel(),
    )


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def registry():
    return CommandRegistry().setup_commands()


@pytest.fixture
def dispatcher(registry):
    return MessageDispatcher(registry)
