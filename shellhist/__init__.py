"""Shell history tools: statistics, search ranking, line editing, duration formatting and completions."""

__version__ = "0.1.0"