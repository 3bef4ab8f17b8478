from __future__ import annotations

from typing import Iterable, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from caesarlab.core.results import FrequencyTable, SolveResult
from caesarlab.exchange import Message

BAR_CHAR = "█"


def frequency_bar(percentage: float, bar_width: int) -> str:
    return BAR_CHAR * int(percentage / 100.0 * bar_width)


def print_frequency(console: Console, table: FrequencyTable, *, bars: bool = True, bar_width: int = 50) -> None:
    if not table.entries:
        console.print("No letters to analyze.", highlight=False)
        return
    for e in table:
        line = f"{e.letter}: {e.count:3d} ({e.percentage:.2f}%)"
        if bars:
            line += f" {frequency_bar(e.percentage, bar_width)}"
        console.print(line, highlight=False, soft_wrap=True)
    console.print(f"Total letters: {table.total}", highlight=False)


def print_candidates(console: Console, candidates: Iterable[tuple[int, str]]) -> None:
    for shift, text in candidates:
        console.print(f"Shift {shift:2d}: {text}", highlight=False, markup=False, soft_wrap=True)


def print_ranked(console: Console, results: Sequence[SolveResult], top: int | None = None) -> None:
    shown = results if top is None else results[:top]
    t = Table(title="Ranked candidates (chi-squared vs. English)")
    t.add_column("#", justify="right")
    t.add_column("Shift", justify="right")
    t.add_column("Score", justify="right")
    t.add_column("Plaintext", overflow="fold")
    for i, r in enumerate(shown, start=1):
        t.add_row(str(i), str(r.key), f"{r.score:.2f}", r.plaintext)
    console.print(t)


def print_transcript(console: Console, messages: Sequence[Message], date_format: str) -> None:
    if not messages:
        console.print("No messages transmitted yet.")
        return
    for i, m in enumerate(messages, start=1):
        console.print(f"Message #{i}:", highlight=False)
        console.print(m.render(date_format), highlight=False, markup=False, soft_wrap=True)
        console.print()


def banner(console: Console, title: str, subtitle: str | None = None) -> None:
    console.print(Panel(title, subtitle=subtitle, expand=False))
