"""Interactive shell loop: reads lines, starts pipelines and waits for them."""

from __future__ import annotations

import os
import subprocess
import sys

from minishell.builtins import is_builtin, run_builtin
from minishell.parser import Command, parse
from minishell.redirect import RedirectError, Stream, open_redirections

PROMPT = "> "


def execute_command(
    command: Command, stdin: Stream = None, stdout: Stream = None
) -> subprocess.Popen | None:
    """Start one command; return its process, or None if none was started."""
    if not command.argv:
        return None
    if is_builtin(command.argv[0]):
        return run_builtin(command, stdin, stdout)
    try:
        with open_redirections(command, stdin, stdout) as (child_in, child_out):
            return subprocess.Popen(command.argv, stdin=child_in, stdout=child_out)
    except RedirectError as exc:
        print(exc, file=sys.stderr)
    except OSError as exc:
        print(f"execvp: {exc.strerror}", file=sys.stderr)
    return None


def _start_pipeline(pipeline: list[Command]) -> list[subprocess.Popen | None]:
    pipes = [os.pipe() for _ in pipeline[1:]]
    started = []
    try:
        for index, command in enumerate(pipeline):
            name = command.argv[0] if command.argv else ""
            print(f"Executing command {name}", flush=True)
            stdin = pipes[index - 1][0] if index > 0 else None
            stdout = pipes[index][1] if index < len(pipes) else None
            started.append(execute_command(command, stdin, stdout))
    finally:
        for read_end, write_end in pipes:
            os.close(read_end)
            os.close(write_end)
    return started


def run_line(line: str) -> list[int]:
    """Run every pipeline on the line and return the exit codes of started processes.

    Raises SystemExit(0) when the line starts with "exit".
    """
    parsed = parse(line)
    if not parsed.commands:
        return []
    first = parsed.commands[0].pipeline
    if first and first[0].argv and first[0].argv[0] == "exit":
        raise SystemExit(0)

    processes = []
    for group in parsed.commands:
        processes.extend(_start_pipeline(group.pipeline))
    return [process.wait() for process in processes if process is not None]


def main(argv: list[str] | None = None) -> int:
    """Read and run lines from standard input until "exit" or end of input."""
    while True:
        print(PROMPT, end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print("getline: end of input", file=sys.stderr)
            return 1
        try:
            run_line(line.split("\n", 1)[0])
        except SystemExit:
            return 0


if __name__ == "__main__":
    sys.exit(main())