"""Networked temperature reporting client driven by server commands."""

from __future__ import annotations

import argparse
import math
import re
import selectors
import socket
import ssl
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Protocol, TextIO

from sensorlink.commands import (
    ClientState,
    LineBuffer,
    Scale,
    ShutdownRequested,
    parse_command,
)
from sensorlink.sensor import DummySensor, celsius_to_fahrenheit, reading_to_celsius

USAGE = (
    "Usage: sensorlink --period=seconds --scale=F/C --log=file_name "
    "--id=id_num --host=host_name [--tls] port"
)

_READ_SIZE = 256
_POLL_INTERVAL = 0.05
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _Sensor(Protocol):
    def read(self) -> int: ...


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Options:
    """Command-line settings for one client run."""

    period: int = 1
    scale: Scale = Scale.FAHRENHEIT
    log: Optional[str] = None
    id: str = ""
    host: str = ""
    port: int = 0
    use_tls: bool = False


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise ValueError(message)


def parse_args(argv: list[str]) -> Options:
    """Parse command-line arguments; raise ValueError on bad usage."""
    parser = _ArgumentParser(prog="sensorlink", add_help=False)
    parser.add_argument("--period")
    parser.add_argument("--scale")
    parser.add_argument("--log")
    parser.add_argument("--id", default="")
    parser.add_argument("--host", default="")
    parser.add_argument("--tls", action="store_true")
    parser.add_argument("port")
    args = parser.parse_args(argv)

    options = Options(
        log=args.log,
        id=args.id,
        host=args.host,
        port=_atoi(args.port),
        use_tls=args.tls,
    )
    if args.period is not None:
        options.period = _atoi(args.period)
    if args.scale is not None:
        if args.scale == "C":
            options.scale = Scale.CELSIUS
        elif args.scale != "F":
            raise ValueError("Invalid argument: scale either is F or C")
    return options


def connect(host: str, port: int, use_tls: bool) -> socket.socket:
    """Open an IPv4 TCP connection, optionally wrapped in TLS."""
    try:
        infos = socket.getaddrinfo(host, port, socket.AF_INET, socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as exc:
        raise ConnectionError("Could not find the host by the name") from exc
    if not infos:
        raise ConnectionError("Could not find the host by the name")
    family, kind, proto, _, address = infos[0]

    sock = socket.socket(family, kind, proto)
    try:
        sock.connect(address)
    except OSError as exc:
        sock.close()
        raise ConnectionError("Could not connect to the server") from exc

    if not use_tls:
        return sock

    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    try:
        return context.wrap_socket(sock, server_hostname=host or None)
    except (ssl.SSLError, OSError) as exc:
        sock.close()
        raise ConnectionError(
            "Initiate the TLS/SSL handshake with an TLS/SSL server fails"
        ) from exc


def format_report(when: datetime, temperature: float) -> str:
    """Format one temperature report line as sent to the server."""
    return f"{when:%H:%M:%S} {temperature:04.1f}\n"


def format_shutdown(when: datetime) -> str:
    """Format the shutdown notice line."""
    return f"{when:%H:%M:%S} SHUTDOWN\n"


def _whole_seconds(when: datetime) -> int:
    return math.floor(when.timestamp())


class SensorClient:
    """Sends periodic temperature reports and obeys commands from the server."""

    def __init__(
        self,
        stream: socket.socket,
        state: ClientState,
        sensor: _Sensor,
        log: Optional[TextIO],
        clock: Callable[[], datetime],
    ) -> None:
        self._stream = stream
        self.state = state
        self._sensor = sensor
        self._log = log
        self._clock = clock
        self._buffer = LineBuffer()
        self._last_report = _whole_seconds(clock())

    def _write_log(self, line: str) -> None:
        if self._log is not None:
            self._log.write(line)
            self._log.flush()

    def _shutdown(self) -> None:
        line = format_shutdown(self._clock())
        self._stream.sendall(line.encode())
        self._write_log(line)

    def handle_data(self, data: bytes | str) -> None:
        """Apply every complete command in the received data.

        Raises ShutdownRequested after sending the shutdown notice when the
        server sends OFF, and InvalidCommandError for unknown commands.
        """
        for command in self._buffer.feed(data):
            self._write_log(command + "\n")
            try:
                parse_command(self.state, command)
            except ShutdownRequested:
                self._shutdown()
                raise

    def tick(self) -> Optional[str]:
        """Send a report if one is due; return the line sent, if any."""
        now = self._clock()
        if not self.state.reporting:
            return None
        if _whole_seconds(now) < self._last_report + self.state.period:
            return None

        temperature = reading_to_celsius(self._sensor.read())
        if self.state.scale is Scale.FAHRENHEIT:
            temperature = celsius_to_fahrenheit(temperature)
        line = format_report(now, temperature)
        self._stream.sendall(line.encode())
        self._last_report = _whole_seconds(self._clock())
        self._write_log(f"{now:%H:%M:%S} {temperature:.1f}\n")
        return line

    def run(self) -> None:
        """Serve until the server sends OFF or closes the connection."""
        with selectors.DefaultSelector() as selector:
            selector.register(self._stream, selectors.EVENT_READ)
            while True:
                pending = getattr(self._stream, "pending", None)
                ready = (callable(pending) and pending() > 0) or bool(
                    selector.select(timeout=_POLL_INTERVAL)
                )
                if ready:
                    try:
                        data = self._stream.recv(_READ_SIZE)
                    except ssl.SSLWantReadError:
                        data = None
                    if data is not None:
                        if not data:
                            return
                        try:
                            self.handle_data(data)
                        except ShutdownRequested:
                            return
                self.tick()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the client from the command line and return its exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        options = parse_args(args)
    except ValueError as exc:
        message = str(exc)
        if message.startswith("Invalid argument"):
            print(message, file=sys.stderr)
        else:
            print(USAGE, file=sys.stderr)
        return 1

    log: Optional[TextIO] = None
    if options.log is not None:
        try:
            log = open(options.log, "w+", encoding="utf-8")
        except OSError:
            print("Could not open log file", file=sys.stderr)
            return 1

    try:
        try:
            stream = connect(options.host, options.port, options.use_tls)
        except ConnectionError as exc:
            print(exc, file=sys.stderr)
            return 2

        with stream:
            id_line = f"ID={options.id}\n"
            stream.sendall(id_line.encode())
            if log is not None:
                log.write(id_line)
                log.flush()

            state = ClientState(period=options.period, scale=options.scale)
            client = SensorClient(stream, state, DummySensor(), log, datetime.now)
            try:
                client.run()
            except ValueError as exc:
                print(exc, file=sys.stderr)
                return 1
            except OSError as exc:
                print(exc, file=sys.stderr)
                return 1
        return 0
    finally:
        if log is not None:
            log.close()


if __name__ == "__main__":
    sys.exit(main())