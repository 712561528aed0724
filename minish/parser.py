"""Turning an input line into words: tilde and variable expansion, splitting."""

from __future__ import annotations

from .environment import Environment
from .transform import replace_first, split_words


def expand_tilde(line: str, env: Environment) -> str:
    """Replace the first "~" in line with the value of HOME.

    The line is unchanged when it has no tilde or HOME is not set.
    """
    replaced = replace_first(line, "~", env.get("HOME"))
    return line if replaced is None else replaced


def _longest_key(text: str, env: Environment) -> str | None:
    """Return the longest variable name that text starts with, if any."""
    best: str | None = None
    for key, _ in env.items():
        if key and text.startswith(key) and len(key) > len(best or ""):
            best = key
    return best


def expand_dollars(line: str, env: Environment) -> str:
    """Expand "$NAME" references to variable values.

    At every "$" the longest variable name that follows it is chosen, and
    the first "$NAME" in the line is replaced by the value. Names that match
    no variable are left as they are.
    """
    pos = 0
    while pos < len(line):
        if line[pos] == "$" and pos + 1 < len(line):
            key = _longest_key(line[pos + 1 :], env)
            if key is not None:
                replaced = replace_first(line, "$" + key, env.get(key))
                if replaced is not None:
                    line = replaced
        pos += 1
    return line


def parse_input(line: str, env: Environment) -> list[str]:
    """Expand a command line and split it into words on spaces and tabs."""
    line = line.replace("\t", " ")
    line = expand_tilde(line, env)
    line = expand_dollars(line, env)
    return split_words(line, " ")