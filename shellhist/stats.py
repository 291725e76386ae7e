"""Command usage statistics: the most used commands and command pipelines."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

import regex

from .history import History

_ASCII_WHITESPACE = " \t\n\x0c\r"

_RED = "\x1b[38;5;9m"
_YELLOW = "\x1b[38;5;11m"
_GREEN = "\x1b[38;5;10m"
_GREY = "\x1b[38;5;7m"
_BOLD = "\x1b[1m"
_RESET = "\x1b[0m"

_GRAPHEME = regex.compile(r"\X")


def _default_common_prefix() -> list[str]:
    return ["sudo"]


def _default_common_subcommands() -> list[str]:
    return [
        "apt",
        "cargo",
        "composer",
        "dnf",
        "docker",
        "git",
        "go",
        "ip",
        "kubectl",
        "nix",
        "nmcli",
        "npm",
        "pecl",
        "pnpm",
        "podman",
        "port",
        "systemctl",
        "tmux",
        "yarn",
    ]


@dataclass
class StatsSettings:
    """How commands are grouped and which are left out of the statistics."""

    common_prefix: list[str] = field(default_factory=_default_common_prefix)
    common_subcommands: list[str] = field(default_factory=_default_common_subcommands)
    ignored_commands: list[str] = field(default_factory=list)


@dataclass
class CommandStats:
    """The most used command n-grams with their counts, plus totals."""

    top: list[tuple[tuple[str, ...], int]]
    total: int
    unique: int


def split_at_pipe(command: str) -> list[str]:
    """Split a command line at unquoted, unescaped pipes."""
    result: list[str] = []
    quoted = False
    start = 0
    graphemes = _GRAPHEME.finditer(command)

    for match in graphemes:
        current = match.start()
        grapheme = match.group()
        if grapheme in ('"', "'"):
            if command[start:current] != grapheme:
                quoted = not quoted
        elif grapheme == "\\":
            next(graphemes, None)
        elif grapheme == "|" and not quoted:
            if command[start:].startswith("|"):
                start += 1
            result.append(command[start:current])
            start = current

    if command[start:].startswith("|"):
        start += 1
    result.append(command[start:])
    return result


def _first_non_whitespace(s: str) -> int | None:
    return next((i for i, c in enumerate(s) if c not in _ASCII_WHITESPACE), None)


def _first_whitespace(s: str) -> int:
    return next((i for i, c in enumerate(s) if c in _ASCII_WHITESPACE), len(s))


def interesting_command(settings: StatsSettings, command: str) -> str:
    """Reduce a command line to the part that identifies the command.

    A leading common prefix such as ``sudo`` is dropped, and a command with
    common subcommands keeps its next word (``cargo build``).
    """
    for prefix in sorted(settings.common_prefix, key=len, reverse=True):
        if command.startswith(prefix):
            kept = command[: len(prefix)]
            command = command[len(prefix) :].lstrip()
            if not command:
                return kept
            break

    for sub in sorted(settings.common_subcommands, key=len, reverse=True):
        if command.startswith(sub):
            if len(sub) == len(command):
                return command
            skip = _first_non_whitespace(command[len(sub) :]) or 0
            end = len(sub) + skip + _first_whitespace(command[len(sub) + skip :])
            return command[:end]

    return command[: _first_whitespace(command)]


def compute_stats(
    settings: StatsSettings,
    commands: Iterable[History | str],
    count: int = 10,
    ngram_size: int = 1,
) -> CommandStats:
    """Count the most used command n-grams over some history.

    ``commands`` holds history entries or plain command lines. The result
    lists at most ``count`` n-grams, most used first.
    """
    if ngram_size < 1:
        raise ValueError("ngram_size must be at least 1")

    seen: set[str] = set()
    total = 0
    prefixes: Counter[tuple[str, ...]] = Counter()

    for entry in commands:
        text = entry.command if isinstance(entry, History) else entry
        command = text.strip()
        if interesting_command(settings, command) in settings.ignored_commands:
            continue

        total += 1
        seen.add(command)

        parts = [part.strip() for part in split_at_pipe(command)]
        seen.update(parts)
        for start in range(len(parts) - ngram_size + 1):
            window = parts[start : start + ngram_size]
            prefixes[tuple(interesting_command(settings, p) for p in window)] += 1

    top = sorted(prefixes.items(), key=lambda item: item[1], reverse=True)[:count]
    if not top:
        return CommandStats(top=[], total=0, unique=0)
    return CommandStats(top=top, total=total, unique=len(seen))


def render_stats(stats: CommandStats) -> str:
    """Render statistics as coloured terminal text with bar gauges."""
    if not stats.top:
        return "No commands found"

    highest = max(n for _, n in stats.top)
    num_pad = len(str(highest))
    ngram_size = len(stats.top[0][0])
    widths = [0] * ngram_size
    for names, _ in stats.top:
        widths = [max(w, len(name)) for w, name in zip(widths, names)]

    lines = []
    for names, n in stats.top:
        in_ten = 10 * n // highest
        bar = [_RED]
        for i in range(in_ten):
            if i == 2:
                bar.append(_YELLOW)
            if i == 5:
                bar.append(_GREEN)
            bar.append("▮")
        bar.append(" " * (10 - in_ten))
        formatted = " | ".join(name.ljust(w) for name, w in zip(names, widths))
        lines.append(
            f"[{''.join(bar)}{_RESET}] {_GREY}{n:>{num_pad}}{_RESET} "
            f"{_BOLD}{formatted}{_RESET}"
        )
    lines.append(f"Total commands:   {stats.total}")
    lines.append(f"Unique commands:  {stats.unique}")
    return "\n".join(lines)