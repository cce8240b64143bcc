import pytest

from chatbot.core import BaseCommand, CommandFactory, CommandRegistry, create_default_factory
from chatbot.commands.general import PingCommand, HelpCommand
from chatbot.commands.text import EchoCommand
from chatbot.commands.games import RollCommand


class TestCommandFactory:

    def test_default_command_types(self):
        factory = create_default_factory()
        assert sorted(factory.get_available_command_types()) == [
            "dice", "echo", "hello", "help", "info", "ping", "roll"
        ]

    def test_rejects_non_command_class(self):
        factory = CommandFactory()
        with pytest.raises(TypeError):
            factory.register_command_type("bad", dict)

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError, match="Unknown command type"):
            CommandFactory().create_command("nope")

    def test_create_command_with_prefix(self):
        factory = create_default_factory()
        command = factory.create_command("ping", prefix="?")
        assert command.trigger == "?ping"
        assert factory.is_command_type_registered("ping")
        assert not factory.is_command_type_registered("pong")


class TestCommandRegistry:

    def test_setup_registers_all_triggers(self, registry):
        assert sorted(registry.get_command_names()) == [
            "!dice", "!echo", "!hello", "!help", "!info", "!ping", "!roll"
        ]
        assert registry.get_command_count() == 7

    def test_trigger_collision_raises(self):
        registry = CommandRegistry(factory=CommandFactory())
        registry.register_command(PingCommand())
        with pytest.raises(ValueError, match="collision"):
            registry.register_command(PingCommand())

    def test_get_command_normalizes(self, registry):
        assert isinstance(registry.get_command("  !PING "), PingCommand)
        assert registry.get_command("!pong") is None

    def test_get_all_commands_is_a_copy(self, registry):
        commands = registry.get_all_commands()
        commands.clear()
        assert registry.get_command_count() == 7

    def test_unregister(self, registry, capsys):
        assert registry.unregister_command("!ping") is True
        assert registry.get_command("!ping") is None
        assert registry.unregister_command("!ping") is False
        assert "!ping" in capsys.readouterr().out

    def test_custom_prefix(self):
        registry = CommandRegistry(prefix="?").setup_commands()
        assert isinstance(registry.resolve("?ping"), PingCommand)
        assert registry.resolve("!ping") is None

    def test_failing_command_type_is_skipped(self, capsys):
        class NeedsArgument(BaseCommand):
            def __init__(self, required, **kwargs):
                super().__init__(name="needs")

        factory = CommandFactory()
        factory.register_command_type("needs", NeedsArgument)
        factory.register_command_type("ping", PingCommand)
        registry = CommandRegistry(factory=factory).setup_commands()

        assert registry.get_command_names() == ["!ping"]
        assert "needs" in capsys.readouterr().out


class TestResolve:

    def test_exact_match(self, registry):
        assert isinstance(registry.resolve("!help"), HelpCommand)

    def test_echo_prefix(self, registry):
        assert isinstance(registry.resolve("!echo anything at all"), EchoCommand)
        assert isinstance(registry.resolve("!echowhat"), EchoCommand)

    def test_roll_requires_separator(self, registry):
        assert isinstance(registry.resolve("!roll 2d6"), RollCommand)
        assert isinstance(registry.resolve("!roll"), RollCommand)
        assert registry.resolve("!rolling") is None

    def test_fixed_command_with_trailing_text(self, registry):
        assert registry.resolve("!hello world") is None

    def test_empty_text(self, registry):
        assert registry.resolve("") is None
        assert registry.resolve("   ") is None
