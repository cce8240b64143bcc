from chatbot.core.base_command import DEFAULT_PREFIX, StaticReplyCommand


class HelloCommand(StaticReplyCommand):

    reply = "Hello! I'm alive! 🤖"

    def __init__(self, prefix: str = DEFAULT_PREFIX, **kwargs):
        super().__init__(
            name="hello",
            description="Säger hej och visar att boten lever",
            prefix=prefix
        )


class PingCommand(StaticReplyCommand):

    reply = "Pong!"

    def __init__(self, prefix: str = DEFAULT_PREFIX, **kwargs):
        super().__init__(
            name="ping",
            description="svarar med pong",
            prefix=prefix
        )


class InfoCommand(StaticReplyCommand):

    reply = "Jag är en bot som hjälper denna server att fungera."

    def __init__(self, prefix: str = DEFAULT_PREFIX, **kwargs):
        super().__init__(
            name="info",
            description="Informerar om bot",
            prefix=prefix
        )
