import discord
import sys

from dotenv import load_dotenv
load_dotenv()

from chatbot.config import BotConfig, TOKEN_ENV
from chatbot.core import CommandRegistry, MessageDispatcher


class BotManager:
    def __init__(self, config: BotConfig):
        self.config = config
        self.intents = discord.Intents.default()
        self.intents.message_content = True
        self.bot = discord.Client(intents=self.intents)
        self.registry = CommandRegistry(prefix=config.command_prefix).setup_commands()
        self.dispatcher = MessageDispatcher(self.registry, debug=config.debug)
        self._setup_events()

    def _setup_events(self):
        @self.bot.event
        async def on_ready():
            await self._handle_ready()

        @self.bot.event
        async def on_message(message: discord.Message):
            await self.dispatcher.dispatch(message)

    async def _handle_ready(self):
        print(f"✅ Bot inloggad som: {self.bot.user.name}")
        print(f"📡 Bot är online och lyssnar på {self.registry.get_command_count()} kommandon!")
        print(f"💬 Testa: {self.config.command_prefix}hello")

    def run(self):
        print("🚀 Startar bot...")
        self.bot.run(self.config.token)


class Application:
    def __init__(self, config: BotConfig):
        self.bot_manager = BotManager(config)

    def run(self):
        self.bot_manager.run()


def main(environ=None):
    config = BotConfig.from_env(environ)
    try:
        config.validate()
    except ValueError as e:
        print(f"❌ {e}")
        print(f"Skapa en .env fil med: {TOKEN_ENV}=din_token")
        sys.exit(1)

    Application(config).run()


if __name__ == "__main__":
    main()
