from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from caesarlab.audit import AuditLog
from caesarlab.classical.caesar import brute_force, crack, decode, encode
from caesarlab.config import CaesarConfig, ConfigError, load_config
from caesarlab.console import banner, print_candidates, print_frequency, print_ranked, print_transcript
from caesarlab.core.frequency import frequency_analysis, guess_shift
from caesarlab.exchange import Channel, MisdirectedMessageError, User
from caesarlab.files import SameFileError, decrypt_file, encrypt_file
from caesarlab.log import configure_logging

app = typer.Typer(help="caesarlab: Caesar cipher toolkit with brute-force and frequency-analysis attacks.")

logger = logging.getLogger(__name__)


def _config(ctx: typer.Context) -> CaesarConfig:
    return ctx.obj if isinstance(ctx.obj, CaesarConfig) else CaesarConfig()


def _shift(ctx: typer.Context, shift: Optional[int]) -> int:
    return _config(ctx).default_shift if shift is None else shift


@app.callback()
def _init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", help="TOML file with a [caesarlab] table."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    try:
        cfg = load_config(config)
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint="--config")
    configure_logging("DEBUG" if verbose else cfg.log_level)
    ctx.obj = cfg


@app.command()
def encrypt(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Plaintext to encrypt."),
    shift: Optional[int] = typer.Option(None, "--shift", "-s", help="Key; defaults to the configured shift."),
):
    """Encrypt TEXT with a Caesar shift."""
    typer.echo(encode(text, _shift(ctx, shift)))


@app.command()
def decrypt(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
    shift: Optional[int] = typer.Option(None, "--shift", "-s", help="Key used for encryption."),
):
    """Decrypt TEXT when you know the key."""
    typer.echo(decode(text, _shift(ctx, shift)))


@app.command()
def brute(
    text: str = typer.Argument(..., help="Ciphertext to attack."),
    rank: bool = typer.Option(False, "--rank", "-r", help="Sort candidates by English-likeness."),
    top: int = typer.Option(25, "--top", "-t", help="With --rank, how many candidates to show."),
):
    """Try every key from 1 to 25."""
    console = Console()
    if rank:
        print_ranked(console, crack(text), top=top)
    else:
        print_candidates(console, brute_force(text))


@app.command()
def freq(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to analyze."),
    bars: bool = typer.Option(True, "--bars/--no-bars", help="Draw a bar per letter."),
    reference: str = typer.Option("E", "--reference", help="Letter assumed to be most frequent in the plaintext."),
):
    """Letter frequency analysis with a shift guess."""
    console = Console()
    print_frequency(console, frequency_analysis(text), bars=bars, bar_width=_config(ctx).bar_width)
    try:
        guess = guess_shift(text, reference=reference)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--reference")
    if guess is not None:
        console.print(f"Likely shift (most frequent -> {reference.upper()}): {guess}", highlight=False)


def _run_file(fn, src: Path, dst: Path, shift: int, verb: str) -> None:
    try:
        n = fn(src, dst, shift)
    except SameFileError as e:
        raise typer.BadParameter(str(e), param_hint="DST")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error processing file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{verb} {n} line(s): {src} -> {dst} (shift {shift})")


@app.command("encrypt-file")
def encrypt_file_cmd(
    ctx: typer.Context,
    src: Path = typer.Argument(..., help="Plaintext input file."),
    dst: Path = typer.Argument(..., help="Ciphertext output file."),
    shift: Optional[int] = typer.Option(None, "--shift", "-s"),
):
    """Encrypt a text file line by line."""
    _run_file(encrypt_file, src, dst, _shift(ctx, shift), "Encrypted")


@app.command("decrypt-file")
def decrypt_file_cmd(
    ctx: typer.Context,
    src: Path = typer.Argument(..., help="Ciphertext input file."),
    dst: Path = typer.Argument(..., help="Plaintext output file."),
    shift: Optional[int] = typer.Option(None, "--shift", "-s"),
):
    """Decrypt a text file line by line."""
    _run_file(decrypt_file, src, dst, _shift(ctx, shift), "Decrypted")


@app.command()
def exchange(
    ctx: typer.Context,
    messages: List[str] = typer.Argument(..., help="One or more messages to send."),
    sender: str = typer.Option("Alice", "--sender"),
    receiver: str = typer.Option("Bob", "--receiver"),
    shift: Optional[int] = typer.Option(None, "--shift", "-s", help="Shared key; defaults to the configured shift."),
):
    """Send messages from SENDER to RECEIVER and record them in the audit log."""
    cfg = _config(ctx)
    key = _shift(ctx, shift)
    channel = Channel(audit=AuditLog(cfg.log_file, cfg.date_format))
    alice, bob = User(sender, key), User(receiver, key)

    for text in messages:
        try:
            channel.send(alice.send(text, bob.name))
        except OSError as e:
            typer.echo(f"Error writing to log file: {e}", err=True)
            raise typer.Exit(code=1)
        received = channel.latest()
        typer.echo(f"Sent: {text} -> {received.content}")
        decrypted = bob.receive(received)
        typer.echo(f"[{bob.name}] Received and decrypted: {decrypted} (match: {decrypted == text})")

    typer.echo(f"Logged {len(channel)} message(s) to {cfg.log_file}")


@app.command("log")
def show_log(ctx: typer.Context):
    """Print the audit log."""
    cfg = _config(ctx)
    entries = AuditLog(cfg.log_file, cfg.date_format).entries()
    if not entries:
        typer.echo("No messages transmitted yet.")
        return
    for i, entry in enumerate(entries, start=1):
        typer.echo(f"Message #{i}:\n{entry}\n")


@app.command()
def demo(
    ctx: typer.Context,
    record: bool = typer.Option(False, "--record/--no-record", help="Also write the exchange to the audit log."),
):
    """Narrated sender/receiver exchange followed by both attacks."""
    cfg = _config(ctx)
    console = Console()
    key = cfg.default_shift
    channel = Channel(audit=AuditLog(cfg.log_file, cfg.date_format) if record else None)
    alice, bob, eve = User("Alice", key), User("Bob", key), User("Eve", 0)

    banner(console, "CAESAR CIPHER - COMMUNICATION SYSTEM", "Classical cryptography demo")

    secret = "The package will be delivered at dawn. Use the north entrance."
    console.print(f"[Alice] Original message: {secret}", markup=False, highlight=False)
    channel.send(alice.send(secret, bob.name))
    msg = channel.latest()
    console.print(f"[Alice] Encrypted message: {msg.content}", markup=False, highlight=False)
    plain = bob.receive(msg)
    console.print(f"[Bob] Received and decrypted: {plain}", markup=False, highlight=False)
    console.print(f"Messages match: {plain == secret}", markup=False, highlight=False)

    try:
        eve.receive(msg)
    except MisdirectedMessageError as e:
        console.print(f"[Eve] {e}", markup=False, highlight=False)

    banner(console, "BRUTE FORCE ATTACK", "Only 25 possible keys")
    print_candidates(console, brute_force(msg.content))
    best = crack(msg.content)[0]
    console.print(f"Best-ranked key: {best.key}", highlight=False)

    banner(console, "FREQUENCY ANALYSIS")
    long_text = (
        "This is a longer message to demonstrate frequency analysis. "
        "The Caesar cipher is vulnerable to statistical attacks. "
        "Notice how letter patterns can reveal information."
    )
    long_encrypted = encode(long_text, 7)
    console.print(f"Encrypted text: {long_encrypted}", markup=False, highlight=False)
    print_frequency(console, frequency_analysis(long_encrypted), bar_width=cfg.bar_width)
    console.print(f"Likely shift (most frequent -> E): {guess_shift(long_encrypted)}", highlight=False)

    banner(console, "MESSAGE LOG")
    for text in ("Rendezvous confirmed for midnight", "Agent has been compromised", "Abort mission immediately"):
        channel.send(alice.send(text, bob.name))
    print_transcript(console, channel.transcript, cfg.date_format)

    console.print("Caesar cipher is NOT secure for production use.", highlight=False)
    logger.debug("Demo finished with %d message(s) on the channel", len(channel))


def main():
    app()


if __name__ == "__main__":
    main()
