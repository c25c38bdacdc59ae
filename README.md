# minishell

A small interactive command shell. It reads one line at a time, starts every
command on the line and waits for all of them to finish before asking for the
next one.

## Installing

```
pip install .
```

## Running

```
minishell
```

The prompt is `> `. Before each command is started the shell prints
`Executing command NAME`. Type `exit` as the first word of a line to leave
(exit status 0). Reaching end of input also ends the shell, after printing
`getline: end of input` to standard error (exit status 1).

## What a line may contain

- **Parallel commands** are separated by `&`. All parts are started, and the
  shell then waits for all of them together.
- **Pipelines** are separated by `|`. The output of each command feeds the
  input of the next one.
- **Redirection**: `< file` reads standard input from a file, `> file`
  overwrites a file with standard output, and `>> file` appends to it (files
  are created with mode 0644). A pipe takes precedence over a file
  redirection on the same side of a command.

Words are separated by spaces, tabs or newlines. A line holds at most 8
parallel commands, each pipeline at most 8 commands, and each command at most
15 words; anything beyond those limits is ignored.

Example:

```
> ls -l | grep py > listing.txt & echo done
```

If a redirection file cannot be opened or a program cannot be started, an
error is printed to standard error and the rest of the line still runs.

## Built-in commands

- `cd DIR` changes the shell's working directory.
- `path DIR` appends `DIR` to the `PATH` environment variable.
- `pwd`, `ls`, `cat` and `echo` always run the programs of the same name from
  `/bin`.

`cd` and `path` without an argument print an error. Any other word is run as
an external program and looked up on `PATH`.

## Using it from Python

```python
from minishell.parser import parse
from minishell.shell import run_line

line = parse("cat < notes.txt | wc -l")
print(line.commands[0].pipeline[1].argv)   # ['wc', '-l']

codes = run_line("echo hello > out.txt")   # exit codes, e.g. [0]
```

- `minishell.parser.parse(line)` returns a `ParsedLine` whose `commands` are
  `ParallelCommand` objects; each has a `pipeline` of `Command` objects with
  `argv`, `input_file`, `output_file` and `append`. Blank input gives an empty
  `ParsedLine`.
- `minishell.builtins.is_builtin(command)` reports whether a name is handled
  as a built-in; `run_builtin(command, stdin, stdout)` runs one and returns
  the started process, or `None`.
- `minishell.redirect.open_redirections(command, piped_input, piped_output)`
  is a context manager yielding `(stdin, stdout)` for a command; it raises
  `RedirectError` when a file cannot be opened and closes opened files on
  exit.
- `minishell.shell.execute_command(command, stdin, stdout)` starts one
  command; `run_line(line)` runs a whole line and returns the exit codes of
  the processes it started, raising `SystemExit(0)` on `exit`;
  `main(argv=None)` is the interactive loop.

## What it does not do

There is no quoting, escaping, globbing, variable expansion or job control,
and the exit status of commands is not reported at the prompt.