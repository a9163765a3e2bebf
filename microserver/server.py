"""UDP server that feeds received payloads to the command evaluator."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from typing import Optional, Sequence

from microserver.evaluator import Evaluator

logger = logging.getLogger(__name__)

DEFAULT_PORT = 1234
DEFAULT_HOST = "0.0.0.0"
# Receive buffer of 1024 bytes, one of which holds the terminator.
MAX_PAYLOAD = 1023


class Led:
    """The on-board LED, kept as a simple on/off state."""

    def __init__(self) -> None:
        self.on = False

    def set(self, on: bool) -> None:
        """Turn the LED on or off."""
        self.on = bool(on)
        logger.info("LED %s", "on" if self.on else "off")


def bind_to_port(port: int, host: str = DEFAULT_HOST) -> socket.socket:
    """Return a UDP socket bound to *host* and *port*.

    Raises OSError if the socket cannot be created or bound.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def on_receive(evaluator: Evaluator, data: bytes, addr: tuple) -> str:
    """Decode a received datagram, run it and return the payload text."""
    logger.info("Received packet from %s:%d", addr[0], addr[1])
    payload = data[:MAX_PAYLOAD].decode("utf-8", errors="replace")
    logger.info("Payload: %s", payload)
    evaluator.handle_payload(payload)
    return payload


def serve(
    port: int = DEFAULT_PORT,
    evaluator: Optional[Evaluator] = None,
    host: str = DEFAULT_HOST,
) -> None:
    """Listen on *port* forever, evaluating every datagram received."""
    if evaluator is None:
        evaluator = Evaluator(set_led=Led().set)
    with bind_to_port(port, host) as sock:
        while True:
            data, addr = sock.recvfrom(MAX_PAYLOAD + 1)
            on_receive(evaluator, data, addr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server from the command line."""
    parser = argparse.ArgumentParser(prog="microserver")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--host", default=DEFAULT_HOST)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    led = Led()
    evaluator = Evaluator(set_led=led.set)
    try:
        serve(args.port, evaluator, args.host)
    except OSError as exc:
        print(f"Failed to start listening on port: {args.port} ({exc})", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0