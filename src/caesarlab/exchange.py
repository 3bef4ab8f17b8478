from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from caesarlab.classical.caesar import decode, encode
from caesarlab.classical.common import normalize_shift

if TYPE_CHECKING:
    from caesarlab.audit import AuditLog

logger = logging.getLogger(__name__)


class MisdirectedMessageError(ValueError):
    """A user tried to read a message addressed to someone else."""


@dataclass(frozen=True)
class Message:
    sender: str
    receiver: str
    content: str
    shift: int
    encrypted: bool
    timestamp: datetime = field(default_factory=datetime.now)

    def render(self, date_format: str = "%Y-%m-%d %H:%M:%S") -> str:
        return (
            f"[{self.timestamp.strftime(date_format)}] {self.sender} -> {self.receiver}"
            f" | Encrypted: {str(self.encrypted).lower()} | Shift: {self.shift}\n"
            f"Content: {self.content}"
        )


@dataclass(frozen=True)
class User:
    name: str
    secret_key: int

    def send(self, plaintext: str, receiver: str) -> Message:
        return Message(
            sender=self.name,
            receiver=receiver,
            content=encode(plaintext, self.secret_key),
            shift=normalize_shift(self.secret_key),
            encrypted=True,
        )

    def receive(self, message: Message) -> str:
        if message.receiver != self.name:
            raise MisdirectedMessageError(
                f"Message for {message.receiver!r} cannot be read by {self.name!r}."
            )
        if not message.encrypted:
            return message.content
        return decode(message.content, message.shift)


class Channel:
    """An insecure channel: every message is kept in a transcript anyone can read."""

    def __init__(self, audit: Optional[AuditLog] = None) -> None:
        self._messages: list[Message] = []
        self._audit = audit

    def send(self, message: Message) -> None:
        self._messages.append(message)
        if self._audit is not None:
            self._audit.record(message)
        logger.info("Transmitted %s -> %s (%d chars)", message.sender, message.receiver, len(message.content))

    def latest(self) -> Optional[Message]:
        if not self._messages:
            return None
        return self._messages[-1]

    @property
    def transcript(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)
