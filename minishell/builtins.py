"""Commands the shell handles itself or runs from /bin."""

from __future__ import annotations

import os
import subprocess
import sys

from minishell.parser import Command
from minishell.redirect import RedirectError, Stream, open_redirections

BUILTINS = frozenset({"pwd", "cd", "ls", "cat", "path", "echo"})
BIN_DIR = "/bin/"


def is_builtin(command: str) -> bool:
    """Return True if the command name is handled as a builtin."""
    return command in BUILTINS


def _change_directory(args: list[str]) -> None:
    if not args:
        print("cd: no path given", file=sys.stderr)
        return
    try:
        os.chdir(args[0])
    except OSError as exc:
        print(f"cd: {exc.strerror}", file=sys.stderr)


def _extend_path(args: list[str]) -> None:
    if not args:
        print("path: no path given", file=sys.stderr)
        return
    old_path = os.environ.get("PATH", "")
    os.environ["PATH"] = f"{old_path}{os.pathsep}{args[0]}" if old_path else args[0]


def run_builtin(
    command: Command, stdin: Stream = None, stdout: Stream = None
) -> subprocess.Popen | None:
    """Run a builtin; return the started process, or None if none was started."""
    name, *args = command.argv
    if name == "cd":
        _change_directory(args)
        return None
    if name == "path":
        _extend_path(args)
        return None
    try:
        with open_redirections(command, stdin, stdout) as (child_in, child_out):
            return subprocess.Popen(
                [BIN_DIR + name, *args], stdin=child_in, stdout=child_out
            )
    except RedirectError as exc:
        print(exc, file=sys.stderr)
    except OSError as exc:
        print(f"execvp: {exc.strerror}", file=sys.stderr)
    return None