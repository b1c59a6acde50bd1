"""Server command parsing and the client state those commands change."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_ATOI = re.compile(r"\s*([+-]?\d+)")


class Scale(Enum):
    """Temperature scale for reports."""

    FAHRENHEIT = "F"
    CELSIUS = "C"


@dataclass
class ClientState:
    """Settings the server may change while the client runs."""

    period: int = 1
    scale: Scale = Scale.FAHRENHEIT
    reporting: bool = True


class InvalidCommandError(ValueError):
    """Raised for a command the client does not understand."""


class ShutdownRequested(Exception):
    """Raised when the server sends OFF."""


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def parse_command(state: ClientState, command: str) -> None:
    """Apply one command line to the state."""
    if command == "SCALE=F":
        state.scale = Scale.FAHRENHEIT
    elif command == "SCALE=C":
        state.scale = Scale.CELSIUS
    elif command.startswith("PERIOD="):
        state.period = _atoi(command[len("PERIOD="):])
    elif command == "STOP":
        state.reporting = False
    elif command == "START":
        state.reporting = True
    elif command == "OFF":
        raise ShutdownRequested()
    elif command.startswith("LOG"):
        pass
    else:
        raise InvalidCommandError(f"Invalid command: {command!r}")


def _to_text(data: bytes | str) -> str:
    return data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data


def split_commands(data: bytes | str) -> list[str]:
    """Split one received chunk into commands; a trailing partial line counts as a command."""
    text = _to_text(data)
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return parts


class LineBuffer:
    """Accumulates received data and yields complete newline-terminated commands."""

    def __init__(self) -> None:
        self._pending = ""

    @property
    def pending(self) -> str:
        """Text received after the last newline."""
        return self._pending

    def feed(self, data: bytes | str) -> list[str]:
        """Add data and return every command completed by it."""
        self._pending += _to_text(data)
        *lines, self._pending = self._pending.split("\n")
        return lines