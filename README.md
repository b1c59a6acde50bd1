# sensorlink

`sensorlink` is a temperature reporting client. It connects to a server over plain TCP or TLS and sends its identifier. It then sends a timestamped temperature reading at a fixed interval and carries out the commands that the server sends back.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```
sensorlink --id=123456789 --host=server.example.com --period=2 --scale=C --log=run.log 18000
```

Options:

- `--period=SECONDS`: seconds between reports. The default is 1.
- `--scale=F|C`: report in Fahrenheit (`F`, the default) or Celsius (`C`). Any other value is an error.
- `--log=FILE`: also write the session to this file. The file is truncated first.
- `--id=ID`: the identifier sent first, as the line `ID=<id>`.
- `--host=HOST`: the server to connect to over IPv4.
- `--tls`: wrap the connection in TLS. The server certificate is not verified.
- `port`: the last argument, the server's port number.

Each report is a line of the form `HH:MM:SS TT.T`, in local time. When the server sends `OFF`, the client sends a final `HH:MM:SS SHUTDOWN` line and exits. It also exits when the server closes the connection.

The log file receives the `ID=` line, every command received, each report (`HH:MM:SS T.T`) and the shutdown line.

Exit status: 0 on a normal end. 1 for bad usage, an unwritable log file, an invalid command or a connection error after start-up. 2 when the host cannot be resolved or when the connection or the TLS handshake fails.

## Server commands

Commands arrive one per line:

| Command          | Effect                                        |
|------------------|-----------------------------------------------|
| `SCALE=F`        | report in Fahrenheit                          |
| `SCALE=C`        | report in Celsius                             |
| `PERIOD=<secs>`  | change the reporting interval                 |
| `STOP`           | pause reports                                 |
| `START`          | resume reports                                |
| `LOG...`         | any line starting with `LOG` is only logged   |
| `OFF`            | send the shutdown line and exit               |

Any other command ends the client with an error.

## Library use

The modules can also be used on their own:

- `sensorlink.sensor`: `DummySensor`, `reading_to_celsius` (thermistor conversion of a raw 10-bit reading, raising `ValueError` outside 1–1022), `celsius_to_fahrenheit`
- `sensorlink.commands`: `ClientState`, `Scale`, `parse_command`, `split_commands`, `LineBuffer`, `InvalidCommandError`, `ShutdownRequested`
- `sensorlink.client`: `SensorClient` (with `handle_data`, `tick` and `run`), `Options`, `parse_args`, `connect`, `format_report`, `format_shutdown`, `main`

```python
from sensorlink.commands import ClientState, Scale, parse_command

state = ClientState()
parse_command(state, "SCALE=C")
assert state.scale is Scale.CELSIUS
```

## Limitations

`sensorlink` does not read real sensor hardware. The command-line client always uses `DummySensor`, which returns a fixed raw reading of 650. Any object with a `read()` method that returns a raw reading can be passed to `SensorClient` in its place.