import io
import shlex
import sys

import pytest

from structkit.shell import main, run_command


def python_command(code):
    return shlex.join([sys.executable, "-c", code])


def test_exit_raises_system_exit():
    with pytest.raises(SystemExit) as info:
        run_command("exit", True)
    assert info.value.code == 0


def test_exit_with_arguments_also_exits():
    with pytest.raises(SystemExit):
        run_command("exit now", False)


def test_child_status_is_returned(capsys):
    status = run_command(python_command("import sys; sys.exit(3)"), True)
    assert status == 3
    assert "Process exited with status 3" in capsys.readouterr().out


def test_shell_status_is_returned(capsys):
    status = run_command(python_command("import sys; sys.exit(4)"), False)
    assert status == 4
    assert "Process exited with status 4" in capsys.readouterr().out


def test_success_status_zero():
    assert run_command(python_command("pass"), True) == 0


def test_missing_program_reports_failure(capsys):
    status = run_command("no-such-program-for-structkit-tests", True)
    assert status == 1
    assert "Process exited with status 1" in capsys.readouterr().out


def test_main_runs_until_exit(monkeypatch, capsys):
    script = python_command("pass") + "\n\nexit\n" + python_command("import sys; sys.exit(7)") + "\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Process exited with status 0" in out
    assert "status 7" not in out


def test_main_without_exit_ends_at_eof(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(python_command("import sys; sys.exit(2)") + "\n"))
    assert main(["--system"]) == 0
    assert "Process exited with status 2" in capsys.readouterr().out