# shellhist

A small toolkit for working with shell history. It provides:

- **Command statistics** (`shellhist.stats`). Find your most-used commands and n-grams of piped commands. Common prefixes such as `sudo` are removed, and commands with common subcommands are grouped by their next word (`cargo build`, `git commit`). `render_stats` draws the result as coloured bar gauges for a terminal.
- **Search filtering and ranking** (`shellhist.ranking`). `matches_filter` restricts entries to the current host, session, directory or workspace (`FilterMode`). `RankedResults` keeps the best-scored distinct commands, up to 200 by default, and `path_dist` measures how far apart two directories are.
- **A line-editing cursor** (`shellhist.cursor`). `Cursor` moves and deletes by character or by word, with Emacs-style or Sublime-style word jumps (`WordJumpMode`).
- **Compact durations** (`shellhist.duration`). `format_duration` shows only the most significant unit, such as `3ms`, `2h` or `1y`. It takes nanoseconds or a `timedelta`.
- **List and inspector helpers** (`shellhist.history_list`, `shellhist.inspector`). These lay out the rows of a scrolling history list as plain text (`render_rows`, `items_bounds`, `ListState`). They also give per-command figures such as weekday names, durations ordered by date and the label/value rows of a stats table.
- **Records** (`shellhist.history`). These are `History`, `HistoryStats`, `Context` and `FilterMode`.

## Installation

```
pip install .
```

To install it with the test dependencies:

```
pip install ".[test]"
```

## Command line

```
shellhist uuid
```

prints a new time-ordered (version 7) UUID as 32 hex digits.

```
shellhist gen-completions --shell bash
```

writes a completion script for `bash`, `fish` or `zsh` to standard output. With `--out-dir DIR` (`-o DIR`), the script is written into that directory instead, as `shellhist.bash`, `shellhist.fish` or `_shellhist`.

You may shorten a subcommand to any unambiguous prefix, as in `shellhist u` or `shellhist gen`. The command sets the process umask to `077` before doing anything else, except on Windows.

Run `shellhist --help` to list the subcommands, and `shellhist --version` to see the installed version.

## Library use

```python
from shellhist.stats import StatsSettings, compute_stats, render_stats, split_at_pipe
from shellhist.duration import format_duration
from shellhist.cursor import Cursor, WordJumpMode

split_at_pipe("kubectl | jq | rg")
# ['kubectl ', ' jq ', ' rg']

settings = StatsSettings()
stats = compute_stats(settings, ["cargo build", "git status", "cd src"], 10, 1)
print(render_stats(stats))

format_duration(1_500_000)   # '1ms'

cur = Cursor("hello world")
cur.end()
cur.prev_word("abcdefghijklmnopqrstuvwxyz", WordJumpMode.EMACS)
cur.substring()              # 'hello '
```

## What it does not do

shellhist does not record, store or sync shell history. It has no database, no server and no shell hooks. It also has no interactive full-screen search window. The statistics, ranking and list helpers work on `History` records or command strings that you supply.

## Tests

```
pytest
```