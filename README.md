# microserver

A small UDP server that listens for text payloads and runs them as a tiny
command language. Commands are separated by `;` and run in order. Each
payload is run in a fresh, empty variable environment.

## Commands

- `LED_ON` switches the LED on.
- `LED_OFF` switches the LED off.
- `LET <name> = <value>` stores a variable. Setting an existing name
  replaces its value. The environment holds at most 50 variables by default.
- `REPEAT <n> (<commands>)` runs the `;`-separated commands inside the
  brackets `n` times. `n` may be a number or the name of a variable whose
  value is a number.
- `BROADCAST ...` is accepted and does nothing.

Any other command, or a malformed one, is logged as a warning and the
remaining commands in the payload still run. At most 50 commands are taken
from one payload.

## Running the server

Install the package, then start the server:

```
pip install .
microserver
```

By default it binds to UDP port 1234 on all interfaces. Use `--port` and
`--host` to change that:

```
microserver --port 5000 --host 127.0.0.1
```

Send it a payload with any UDP client, for example:

```
LED_ON;LET x = 5;REPEAT x (LED_OFF;LED_ON)
```

Each received packet is logged, with the sender's address, before it is
evaluated. Only the first 1023 bytes of a datagram are used. If the port
cannot be bound, the command prints an error and exits with status 1.

## Using it from Python

```python
from microserver.evaluator import Evaluator
from microserver.server import Led

led = Led()
evaluator = Evaluator(led.set, 50)
evaluator.handle_payload("LED_ON;LET speed = 42")
print(led.on)                                  # True
print(evaluator.read_from_env("speed").value)  # "42"
```

`Evaluator` takes any callable that accepts a bool as its LED setter; with
none given it only logs the change. `execute_command` runs a single command
and raises `UnknownCommandError` (a subclass of `EvaluatorError`) for one it
does not know.

To serve packets from your own code, use `serve(port, evaluator, host)`.
`bind_to_port(port, host)` gives you the bound socket on its own, and
`on_receive(evaluator, data, addr)` handles one packet and returns its
decoded text.

The helpers in `microserver.utils` (`split_payload`, `start_matches`,
`part_of_string`, `remove_white_space`) are the string functions the
evaluator uses.

## What it does not do

- There is no physical LED: `Led` only keeps an on/off state and logs it.
- It does not join a Wi-Fi network; it uses whatever network the host has.
- `BROADCAST` sends nothing, and variables carry no type.
- The server sends no replies to the packets it receives.

## Tests

```
pip install .[test]
pytest
```