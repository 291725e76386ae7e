"""Command-line entry point: UUIDs and shell completion scripts."""

from __future__ import annotations

import argparse
import os
import secrets
import sys
import time
import uuid
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_PROG = "shellhist"
_SHELLS = ("bash", "fish", "zsh")


@dataclass(frozen=True)
class _Option:
    short: str
    long: str
    help: str
    choices: tuple[str, ...] = ()
    is_dir: bool = False


@dataclass(frozen=True)
class _Command:
    name: str
    help: str
    options: tuple[_Option, ...] = ()


_COMMANDS = (
    _Command("uuid", "Generate a UUID"),
    _Command(
        "gen-completions",
        "Generate shell completions",
        (
            _Option("-s", "--shell", "Set the shell for generating completions", _SHELLS),
            _Option("-o", "--out-dir", "Set the output directory", is_dir=True),
        ),
    ),
)

_GLOBAL_FLAGS = ("-h", "--help", "-V", "--version")


def _version() -> str:
    try:
        return version(_PROG)
    except PackageNotFoundError:
        return "0.0.0"


def uuid_v7() -> uuid.UUID:
    """A time-ordered UUID (version 7) from the current time and random bits."""
    millis = time.time_ns() // 1_000_000 & ((1 << 48) - 1)
    value = (
        millis << 80
        | 0x7 << 76
        | secrets.randbits(12) << 64
        | 0b10 << 62
        | secrets.randbits(62)
    )
    return uuid.UUID(int=value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=_PROG, description="Magical shell history")
    parser.add_argument("-V", "--version", action="version", version=f"{_PROG} {_version()}")
    sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
    for command in _COMMANDS:
        cmd_parser = sub.add_parser(command.name, help=command.help)
        for option in command.options:
            kwargs: dict = {"help": option.help}
            if option.choices:
                kwargs["choices"] = option.choices
                kwargs["required"] = True
            cmd_parser.add_argument(option.short, option.long, **kwargs)
    return parser


def _infer_subcommand(args: list[str]) -> list[str]:
    """Expand an unambiguous prefix of a subcommand name."""
    if not args or args[0].startswith("-"):
        return args
    names = [c.name for c in _COMMANDS]
    if args[0] in names:
        return args
    matches = [name for name in names if name.startswith(args[0])]
    if len(matches) == 1:
        return [matches[0], *args[1:]]
    return args


def _bash_completion() -> str:
    top = " ".join([*(c.name for c in _COMMANDS), *_GLOBAL_FLAGS])
    lines = [
        f"_{_PROG}() {{",
        '    local cur="${COMP_WORDS[COMP_CWORD]}"',
        '    local prev="${COMP_WORDS[COMP_CWORD-1]}"',
        '    if [ "$COMP_CWORD" -eq 1 ]; then',
        f'        COMPREPLY=( $(compgen -W "{top}" -- "$cur") )',
        "        return 0",
        "    fi",
        '    case "$prev" in',
    ]
    for command in _COMMANDS:
        for option in command.options:
            if option.choices:
                words = " ".join(option.choices)
                lines.append(
                    f'        {option.short}|{option.long}) '
                    f'COMPREPLY=( $(compgen -W "{words}" -- "$cur") ); return 0 ;;'
                )
            elif option.is_dir:
                lines.append(
                    f'        {option.short}|{option.long}) '
                    f'COMPREPLY=( $(compgen -d -- "$cur") ); return 0 ;;'
                )
    lines += ["    esac", '    case "${COMP_WORDS[1]}" in']
    for command in _COMMANDS:
        words = " ".join(
            [*(f for o in command.options for f in (o.short, o.long)), "-h", "--help"]
        )
        lines.append(
            f'        {command.name}) COMPREPLY=( $(compgen -W "{words}" -- "$cur") ) ;;'
        )
    lines += ["    esac", "}", f"complete -F _{_PROG} {_PROG}", ""]
    return "\n".join(lines)


def _fish_completion() -> str:
    lines = []
    for command in _COMMANDS:
        lines.append(
            f'complete -c {_PROG} -n "__fish_use_subcommand" -f '
            f'-a "{command.name}" -d "{command.help}"'
        )
    for command in _COMMANDS:
        for option in command.options:
            line = (
                f'complete -c {_PROG} -n "__fish_seen_subcommand_from {command.name}" '
                f"-s {option.short[1:]} -l {option.long[2:]} -r"
            )
            if option.choices:
                line += f' -f -a "{" ".join(option.choices)}"'
            lines.append(f'{line} -d "{option.help}"')
    lines.append("")
    return "\n".join(lines)


def _zsh_completion() -> str:
    described = " ".join(f"'{c.name}:{c.help}'" for c in _COMMANDS)
    lines = [
        f"#compdef {_PROG}",
        "",
        f"_{_PROG}() {{",
        "    local -a commands",
        f"    commands=({described})",
        "    if (( CURRENT == 2 )); then",
        "        _describe 'command' commands",
        "        return",
        "    fi",
        "    case $words[2] in",
    ]
    for command in _COMMANDS:
        specs = []
        for option in command.options:
            if option.choices:
                action = f"({' '.join(option.choices)})"
            elif option.is_dir:
                action = "_files -/"
            else:
                action = ""
            for flag in (option.short, option.long):
                specs.append(f"'{flag}[{option.help}]:{option.long[2:]}:{action}'")
        specs.append("'(-h --help)'{-h,--help}'[Print help]'")
        lines.append(f"        {command.name}) _arguments {' '.join(specs)} ;;")
    lines += ["    esac", "}", "", f'_{_PROG} "$@"', ""]
    return "\n".join(lines)


_GENERATORS = {
    "bash": (_bash_completion, f"{_PROG}.bash"),
    "fish": (_fish_completion, f"{_PROG}.fish"),
    "zsh": (_zsh_completion, f"_{_PROG}"),
}


def main(argv: list[str] | None = None) -> int:
    args_list = _infer_subcommand(list(sys.argv[1:] if argv is None else argv))
    args = build_parser().parse_args(args_list)

    if os.name != "nt":
        # Nothing created from here on is readable by group or others.
        os.umask(0o077)

    if args.command == "uuid":
        print(uuid_v7().hex)
        return 0

    generator, filename = _GENERATORS[args.shell]
    script = generator()
    if args.out_dir is None:
        sys.stdout.write(script)
        return 0
    try:
        (Path(args.out_dir) / filename).write_text(script, encoding="utf-8")
    except OSError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())