import io
from pathlib import Path

import pytest

from minishell.parser import Command
from minishell.shell import execute_command, main, run_line


def test_execute_empty_command():
    assert execute_command(Command()) is None


def test_execute_external_command_exit_code():
    process = execute_command(Command(["sh", "-c", "exit 3"]))
    assert process.wait() == 3


def test_execute_missing_program(capsys):
    assert execute_command(Command(["no-such-program-here"])) is None
    assert capsys.readouterr().err.startswith("execvp:")


def test_execute_builtin_cd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    sub = tmp_path / "d"
    sub.mkdir()
    assert execute_command(Command(["cd", "d"])) is None
    assert Path.cwd().resolve() == sub.resolve()


def test_run_blank_line():
    assert run_line("   ") == []


def test_run_exit():
    with pytest.raises(SystemExit) as info:
        run_line("exit")
    assert info.value.code == 0


def test_run_with_output_redirection(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert run_line("echo hello > out.txt") == [0]
    assert (tmp_path / "out.txt").read_text() == "hello\n"


def test_run_announces_commands(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    run_line("echo hi > out.txt")
    assert "Executing command echo" in capsys.readouterr().out


def test_run_pipeline(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert run_line("echo hello | cat > out.txt") == [0, 0]
    assert (tmp_path / "out.txt").read_text() == "hello\n"


def test_run_three_stage_pipeline(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    codes = run_line("printf abc | cat | cat > out.txt")
    assert codes == [0, 0, 0]
    assert (tmp_path / "out.txt").read_text() == "abc"


def test_run_parallel_commands(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert run_line("echo a > one.txt & echo b > two.txt") == [0, 0]
    assert (tmp_path / "one.txt").read_text() == "a\n"
    assert (tmp_path / "two.txt").read_text() == "b\n"


def test_run_append(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert run_line("echo a >> log.txt") == [0]
    assert run_line("echo b >> log.txt") == [0]
    assert (tmp_path / "log.txt").read_text() == "a\nb\n"


def test_run_input_redirection(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "in.txt").write_text("data")
    assert run_line("cat < in.txt > out.txt") == [0]
    assert (tmp_path / "out.txt").read_text() == "data"


def test_run_cd_starts_no_process(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "sub").mkdir()
    assert run_line("cd sub") == []
    assert Path.cwd().resolve() == (tmp_path / "sub").resolve()


def test_main_runs_until_exit(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("echo hi > out.txt\nexit\n"))
    assert main() == 0
    assert (tmp_path / "out.txt").read_text() == "hi\n"
    assert capsys.readouterr().out.startswith("> ")


def test_main_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main() == 1
    assert capsys.readouterr().err.startswith("getline")