"""Call state query tests."""

from __future__ import annotations

from mbtnd.clients.telephony import TelephonyClient


def test_no_command_means_idle() -> None:
    client = TelephonyClient([], 1.0)
    assert client.is_in_call() is False


def test_idle_and_active() -> None:
    assert TelephonyClient(["echo", "IDLE"], 3.0).is_in_call() is False
    assert TelephonyClient(["echo", "offhook"], 3.0).is_in_call() is True


def test_failures_read_as_idle() -> None:
    assert TelephonyClient(["false"], 3.0).is_in_call() is False
    assert TelephonyClient(["/nonexistent/mbtnd-call-state"], 3.0).is_in_call() is False
    assert TelephonyClient(["sleep", "5"], 0.1).is_in_call() is False
