"""Parsing of command lines into parallel groups, pipelines and commands."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

MAX_ARGS = 16
MAX_PIPE_CMDS = 8
MAX_PARALLEL = 8

_WHITESPACE = " \t\n"


@dataclass
class Command:
    """A single program invocation with optional file redirections."""

    argv: list[str] = field(default_factory=list)
    input_file: str | None = None
    output_file: str | None = None
    append: bool = False


@dataclass
class ParallelCommand:
    """A pipeline of commands connected stdout to stdin."""

    pipeline: list[Command] = field(default_factory=list)


@dataclass
class ParsedLine:
    """Pipelines that run side by side, separated by '&' on the line."""

    commands: list[ParallelCommand] = field(default_factory=list)


def _tokens(text: str, delimiters: str) -> list[str]:
    """Split on runs of any delimiter character, dropping empty pieces."""
    pattern = "[" + re.escape(delimiters) + "]+"
    return [piece for piece in re.split(pattern, text) if piece]


def _parse_command(text: str) -> Command:
    command = Command()
    tokens = iter(_tokens(text, _WHITESPACE))
    for token in tokens:
        if len(command.argv) >= MAX_ARGS - 1:
            break
        if token == "<":
            command.input_file = next(tokens, None)
        elif token == ">":
            command.output_file = next(tokens, None)
            command.append = False
        elif token == ">>":
            command.output_file = next(tokens, None)
            command.append = True
        else:
            command.argv.append(token)
    return command


def parse(line: str | None) -> ParsedLine:
    """Parse a command line; blank input yields an empty ParsedLine."""
    if not line or not line.strip(_WHITESPACE):
        return ParsedLine()

    groups = []
    for part in _tokens(line, "&")[:MAX_PARALLEL]:
        part = part.lstrip(" ")
        pipeline = [
            _parse_command(segment.lstrip(" "))
            for segment in _tokens(part, "|")[:MAX_PIPE_CMDS]
        ]
        groups.append(ParallelCommand(pipeline))
    return ParsedLine(groups)