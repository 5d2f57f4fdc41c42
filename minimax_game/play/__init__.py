"""Interactive play: sessions and the command shell."""
from .session import Session, SessionStatus
from .shell import MinimaxShell, Command, CommandType, parse_command, parse_assignment

__all__ = [
    "Session",
    "SessionStatus",
    "MinimaxShell",
    "Command",
    "CommandType",
    "parse_command",
    "parse_assignment",
]
