import socket
import threading
import time

import pytest

from microserver.evaluator import Evaluator
from microserver.server import (
    MAX_PAYLOAD,
    Led,
    bind_to_port,
    main,
    on_receive,
    serve,
)

ADDR = ("127.0.0.1", 40000)


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_led_set():
    led = Led()
    assert led.on is False
    led.set(True)
    assert led.on is True
    led.set(False)
    assert led.on is False


def test_on_receive_runs_payload():
    led = Led()
    evaluator = Evaluator(set_led=led.set)
    assert on_receive(evaluator, b"LED_ON", ADDR) == "LED_ON"
    assert led.on is True


def test_on_receive_truncates():
    evaluator = Evaluator()
    payload = on_receive(evaluator, b"B" * (MAX_PAYLOAD * 2), ADDR)
    assert len(payload) == MAX_PAYLOAD


def test_bind_to_port():
    port = _free_port()
    with bind_to_port(port, "127.0.0.1") as sock:
        assert sock.getsockname()[1] == port


def test_bind_to_port_in_use():
    with bind_to_port(0, "127.0.0.1") as taken:
        port = taken.getsockname()[1]
        with pytest.raises(OSError):
            bind_to_port(port, "127.0.0.1")


def test_main_reports_bind_failure():
    with bind_to_port(0, "127.0.0.1") as taken:
        port = taken.getsockname()[1]
        assert main(["--port", str(port), "--host", "127.0.0.1"]) == 1


def test_serve_handles_datagrams():
    led = Led()
    evaluator = Evaluator(set_led=led.set)
    port = _free_port()
    thread = threading.Thread(
        target=serve, args=(port, evaluator, "127.0.0.1"), daemon=True
    )
    thread.start()

    deadline = time.monotonic() + 5
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as client:
        while not led.on and time.monotonic() < deadline:
            client.sendto(b"LED_ON", ("127.0.0.1", port))
            time.sleep(0.05)
    assert led.on is True