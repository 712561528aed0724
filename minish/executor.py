"""Finding external commands and running them."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Sequence, TextIO

from .environment import Environment
from .transform import split_words


def find_executable(name: str, env: Environment) -> str | None:
    """Locate a command.

    A name that exists as given is returned unchanged. Otherwise each PATH
    directory is tried in order and the first existing "dir/name" is
    returned. None when nothing is found or PATH is not set.
    """
    if os.path.exists(name):
        return name
    path = env.get("PATH")
    if not path:
        return None
    for directory in split_words(path, ":"):
        candidate = f"{directory}/{name}"
        if os.path.exists(candidate):
            return candidate
    return None


def launch(executable: str, args: Sequence[str], env: Environment) -> int:
    """Run executable with args and env, wait for it and return its exit status.

    A program that cannot be started is reported on standard error and
    counts as exit status 0. A program killed by a signal also gives 0.
    """
    try:
        completed = subprocess.run(
            list(args), executable=executable, env=dict(env.items())
        )
    except OSError:
        sys.stderr.write("SHELL : execve : Unable to execute\n")
        return 0
    if completed.returncode < 0:
        return 0
    return completed.returncode & 0xFF


def run_external(
    args: Sequence[str], env: Environment, stderr: TextIO | None = None
) -> int:
    """Find and run the command named by args[0]; return its exit status.

    An unknown command is reported on stderr and gives status 127.
    """
    if not args:
        raise ValueError("no command given")
    executable = find_executable(args[0], env)
    if executable is None:
        out = sys.stderr if stderr is None else stderr
        out.write(f"SHELL: command not found: {args[0]}\n")
        return 127
    return launch(executable, args, env)