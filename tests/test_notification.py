from config import IDLE_MESSAGE
from notification import Notification


def test_starts_idle():
    n = Notification()
    assert n.text == IDLE_MESSAGE == "Select a tool."
    assert n.is_idle


def test_show_then_expire():
    n = Notification()
    n.show("hello", now=1000)
    assert n.text == "hello"
    assert n.update(3999) is False
    assert n.text == "hello"
    assert n.update(4000) is True
    assert n.text == IDLE_MESSAGE
    assert n.update(5000) is False


def test_newer_message_wins():
    n = Notification()
    n.show("first", now=0)
    n.show("second", now=2000)
    # the first message's expiry no longer applies
    n.update(3000)
    assert n.text == "second"
    n.update(5000)
    assert n.text == IDLE_MESSAGE


def test_custom_duration():
    n = Notification()
    n.show("short", now=0, duration_ms=10)
    n.update(10)
    assert n.is_idle
