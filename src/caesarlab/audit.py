from __future__ import annotations

import logging
from pathlib import Path

from caesarlab.exchange import Message

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 80
ESCAPE = "\\"


def _escape(line: str) -> str:
    # Content may contain a separator line of its own; prefix it (and any
    # line already starting with the escape) so block boundaries stay unique.
    if line == SEPARATOR or line.startswith(ESCAPE):
        return ESCAPE + line
    return line


def _unescape(line: str) -> str:
    return line[1:] if line.startswith(ESCAPE) else line


class AuditLog:
    """Append-only text transcript of messages sent over a channel."""

    def __init__(self, path: str | Path, date_format: str = "%Y-%m-%d %H:%M:%S") -> None:
        self.path = Path(path)
        self.date_format = date_format

    def record(self, message: Message) -> None:
        body = "\n".join(_escape(line) for line in message.render(self.date_format).split("\n"))
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8", newline="") as fh:
            fh.write(f"{SEPARATOR}\n{body}\n{SEPARATOR}\n\n")
        logger.debug("Audit entry appended to %s", self.path)

    def entries(self) -> list[str]:
        """Rendered messages in the order they were recorded; empty if no log exists yet."""
        if not self.path.exists():
            return []
        out: list[str] = []
        block: list[str] | None = None
        with self.path.open("r", encoding="utf-8", newline="") as fh:
            raw = fh.read()
        for line in raw.split("\n"):
            if line == SEPARATOR:
                if block is None:
                    block = []
                else:
                    out.append("\n".join(block))
                    block = None
            elif block is not None:
                block.append(_unescape(line))
        return out
