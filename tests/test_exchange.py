from __future__ import annotations

from datetime import datetime

import pytest

from caesarlab.audit import SEPARATOR, AuditLog
from caesarlab.exchange import Channel, Message, MisdirectedMessageError, User


def test_send_and_receive_with_shared_key():
    alice, bob = User("Alice", 13), User("Bob", 13)
    msg = alice.send("Meet at dawn", bob.name)
    assert msg.sender == "Alice"
    assert msg.receiver == "Bob"
    assert msg.encrypted
    assert msg.shift == 13
    assert msg.content == "Zrrg ng qnja"
    assert bob.receive(msg) == "Meet at dawn"


def test_message_shift_is_normalized():
    msg = User("Alice", 40).send("abc", "Bob")
    assert msg.shift == 14


def test_receive_rejects_message_for_someone_else():
    msg = User("Alice", 3).send("secret", "Bob")
    with pytest.raises(MisdirectedMessageError):
        User("Eve", 3).receive(msg)


def test_plain_message_passes_through():
    msg = Message(sender="Alice", receiver="Bob", content="hi there", shift=5, encrypted=False)
    assert User("Bob", 9).receive(msg) == "hi there"


def test_render():
    msg = Message("Alice", "Bob", "Khoor", 3, True, timestamp=datetime(2024, 1, 2, 3, 4, 5))
    assert msg.render() == "[2024-01-02 03:04:05] Alice -> Bob | Encrypted: true | Shift: 3\nContent: Khoor"
    assert msg.render("%d/%m/%Y").startswith("[02/01/2024] ")


def test_channel_transcript():
    channel = Channel()
    assert channel.latest() is None
    assert len(channel) == 0

    alice = User("Alice", 1)
    first = alice.send("one", "Bob")
    second = alice.send("two", "Bob")
    channel.send(first)
    channel.send(second)

    assert len(channel) == 2
    assert channel.latest() is second
    assert channel.transcript == (first, second)


def test_channel_records_to_audit_log(tmp_path):
    audit = AuditLog(tmp_path / "logs" / "cipher_log.txt")
    channel = Channel(audit=audit)
    alice = User("Alice", 13)
    for text in ("Rendezvous confirmed for midnight", "Agent has been compromised"):
        channel.send(alice.send(text, "Bob"))

    raw = audit.path.read_text(encoding="utf-8")
    assert raw.count(SEPARATOR) == 4

    entries = audit.entries()
    assert len(entries) == 2
    assert "Alice -> Bob | Encrypted: true | Shift: 13" in entries[0]
    assert entries[1].endswith("Content: Ntrag unf orra pbzcebzvfrq")


def test_audit_log_missing_file_has_no_entries(tmp_path):
    assert AuditLog(tmp_path / "nope.txt").entries() == []


def test_audit_log_survives_separator_lines_in_content(tmp_path):
    audit = AuditLog(tmp_path / "cipher_log.txt")
    channel = Channel(audit=audit)
    alice = User("Alice", 0)
    texts = ["one\n" + SEPARATOR + "\ntwo", "x\n\\" + SEPARATOR, "three"]
    for text in texts:
        channel.send(alice.send(text, "Bob"))

    entries = audit.entries()
    assert len(entries) == 3
    assert entries[0].endswith("Content: one\n" + SEPARATOR + "\ntwo")
    assert entries[1].endswith("Content: x\n\\" + SEPARATOR)
    assert entries[2].endswith("Content: three")
