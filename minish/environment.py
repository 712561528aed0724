"""The shell's ordered table of environment variables."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from .chars import atoi, itoa
from .transform import split_words


class Environment:
    """Environment variables kept in the order they were first defined.

    New variables go to the end. Overwriting a variable keeps its place.
    """

    def __init__(self) -> None:
        self._vars: dict[str, str] = {}

    @classmethod
    def from_environ(cls, entries: Iterable[str] | Mapping[str, str]) -> "Environment":
        """Build an environment from "KEY=VALUE" strings or from a mapping.

        Each entry is split on "=" with empty pieces dropped. The first piece
        is the key and the second the value. Entries with no value are
        skipped.
        """
        if isinstance(entries, Mapping):
            entries = [f"{key}={value}" for key, value in entries.items()]
        env = cls()
        for entry in entries:
            parts = split_words(entry, "=")
            if len(parts) < 2:
                continue
            key, value = parts[0], parts[1]
            if key not in env._vars:
                env._vars[key] = value
        return env

    def get(self, key: str) -> str | None:
        """Return the value of key, or None if it is not set."""
        return self._vars.get(key)

    def set(self, key: str | None, value: str | None, overwrite: bool = True) -> None:
        """Define key; an existing key changes only when overwrite is true.

        A missing key or value leaves the environment unchanged.
        """
        if key is None or value is None:
            return
        if key in self._vars and not overwrite:
            return
        self._vars[key] = value

    def unset(self, key: str) -> bool:
        """Remove key; return True if it was set."""
        return self._vars.pop(key, None) is not None

    def items(self) -> list[tuple[str, str]]:
        """Return the (key, value) pairs in order."""
        return list(self._vars.items())

    def to_environ(self) -> list[str]:
        """Return the variables as "KEY=VALUE" strings, in order."""
        return [f"{key}={value}" for key, value in self._vars.items()]

    def increase_shlvl(self) -> None:
        """Add one to SHLVL, defining it as 1 when it is not set."""
        current = self._vars.get("SHLVL")
        if current is None:
            self._vars["SHLVL"] = "1"
        else:
            self._vars["SHLVL"] = itoa(atoi(current) + 1)

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"Environment({self.items()!r})"