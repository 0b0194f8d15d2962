from __future__ import annotations

import logging

from admin_panel.services.notifications import (
    ERROR,
    SUCCESS,
    WARNING,
    Notification,
    Notifier,
)
from admin_panel.services.storage import InMemoryStorage


def test_notifier_buffers_and_drains():
    notifier = Notifier(maxlen=2)

    notifier.success("one")
    notifier.warning("two")
    notifier.error("three", title="Oops")

    drained = notifier.drain()
    assert [n.message for n in drained] == ["two", "three"]
    assert drained[-1].title == "Oops"
    assert drained[-1].level == ERROR
    assert notifier.drain() == []


def test_notifier_logs_at_matching_level(caplog):
    notifier = Notifier()

    with caplog.at_level(logging.INFO, logger="admin_panel.services.notifications"):
        notifier.success("saved")
        notifier.warning("careful")

    levels = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert (logging.INFO, "saved") in levels
    assert (logging.WARNING, "careful") in levels


def test_notification_dict_roundtrip():
    note = Notification(level=WARNING, message="Refresh discarded", title="Products")
    assert Notification.from_dict(note.to_dict()) == note


def test_notification_from_dict_rejects_empty_payloads():
    assert Notification.from_dict(None) is None
    assert Notification.from_dict({"level": SUCCESS}) is None
    assert Notification.from_dict({"message": "hi"}).level == "info"


def test_in_memory_storage_copies_values():
    storage = InMemoryStorage({"user": {"name": "A"}})

    value = storage.get("user")
    value["name"] = "B"

    assert storage.get("user") == {"name": "A"}
    assert "user" in storage
    assert storage.get("missing", 5) == 5


def test_in_memory_storage_set_remove_snapshot():
    storage = InMemoryStorage()
    payload = {"ids": [1, 2]}

    storage.set("k", payload)
    payload["ids"].append(3)
    snapshot = storage.snapshot()

    assert snapshot == {"k": {"ids": [1, 2]}}
    storage.remove("k")
    storage.remove("k")
    assert storage.keys() == []
    assert snapshot == {"k": {"ids": [1, 2]}}
