"""Opening of the standard streams a command runs with."""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from typing import IO, Iterator, Union

from minishell.parser import Command

Stream = Union[int, IO[bytes], None]


class RedirectError(Exception):
    """A redirection file could not be opened."""


def _open_input(path: str) -> IO[bytes]:
    try:
        return open(path, "rb")
    except OSError as exc:
        raise RedirectError(f"open input_file: {exc.strerror}") from exc


def _open_output(path: str, append: bool) -> IO[bytes]:
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        fd = os.open(path, flags, 0o644)
    except OSError as exc:
        raise RedirectError(f"open output_file: {exc.strerror}") from exc
    return open(fd, "wb")


@contextmanager
def open_redirections(
    command: Command, piped_input: Stream = None, piped_output: Stream = None
) -> Iterator[tuple[Stream, Stream]]:
    """Yield (stdin, stdout) for a command; pipes take precedence over files.

    Files opened here are closed when the block exits.
    """
    with ExitStack() as stack:
        stdin = piped_input
        if stdin is None and command.input_file is not None:
            stdin = stack.enter_context(_open_input(command.input_file))
        stdout = piped_output
        if stdout is None and command.output_file is not None:
            stdout = stack.enter_context(
                _open_output(command.output_file, command.append)
            )
        yield stdin, stdout