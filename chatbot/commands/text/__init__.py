from .echo_command import EchoCommand

__all__ = [
    'EchoCommand'
]
