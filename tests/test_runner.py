import os

import pytest

from pipex.runner import CommandNotFound, PipexError, main, run_pipeline


@pytest.fixture
def env():
    return {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello world\nsecond line\n")
    return path


def test_pipeline_passes_data_through(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    statuses = run_pipeline(str(infile), "cat", "tr a-z A-Z", str(out), env)
    assert statuses == (0, 0)
    assert out.read_text() == "HELLO WORLD\nSECOND LINE\n"


def test_pipeline_round_trip_with_cat(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    run_pipeline(str(infile), "cat", "cat", str(out), env)
    assert out.read_text() == infile.read_text()


def test_pipeline_command_arguments(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    run_pipeline(str(infile), "grep second", "wc -l", str(out), env)
    assert out.read_text().strip() == "1"


def test_pipeline_reports_exit_statuses(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    assert run_pipeline(str(infile), "cat", "false", str(out), env) == (0, 1)


def test_outfile_is_truncated(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    out.write_text("x" * 500)
    run_pipeline(str(infile), "cat", "cat", str(out), env)
    assert out.read_text() == infile.read_text()


def test_outfile_permissions(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    old = os.umask(0o022)
    try:
        run_pipeline(str(infile), "cat", "cat", str(out), env)
    finally:
        os.umask(old)
    assert out.stat().st_mode & 0o777 == 0o644


def test_missing_infile_still_runs_second(tmp_path, env):
    out = tmp_path / "out.txt"
    with pytest.raises(PipexError, match="Infile open error"):
        run_pipeline(str(tmp_path / "missing"), "cat", "wc -l", str(out), env)
    assert out.read_text().strip() == "0"


def test_unknown_first_command(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    with pytest.raises(CommandNotFound, match="no-such-command"):
        run_pipeline(str(infile), "no-such-command -x", "cat", str(out), env)
    assert out.read_text() == ""


def test_unknown_second_command_creates_outfile(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    with pytest.raises(CommandNotFound):
        run_pipeline(str(infile), "cat", "no-such-command", str(out), env)
    assert out.exists()
    assert out.read_text() == ""


def test_empty_command_is_not_found(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    with pytest.raises(CommandNotFound):
        run_pipeline(str(infile), "   ", "cat", str(out), env)


def test_command_not_found_is_pipex_error(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    with pytest.raises(PipexError) as excinfo:
        run_pipeline(str(infile), "no-such-command", "cat", str(out), env)
    assert isinstance(excinfo.value, CommandNotFound)


def test_unwritable_outfile(tmp_path, infile, env):
    with pytest.raises(PipexError, match="Outfile open error"):
        run_pipeline(
            str(infile), "cat", "cat", str(tmp_path / "no" / "out.txt"), env
        )


def test_main_wrong_argument_count(capsys):
    assert main(["only", "three", "args"]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_runs_pipeline(tmp_path, infile):
    out = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(out)]) == 0
    assert out.read_text() == infile.read_text()


def test_main_reports_open_error(tmp_path, capsys):
    out = tmp_path / "out.txt"
    assert main([str(tmp_path / "missing"), "cat", "cat", str(out)]) == 0
    assert "Infile open error" in capsys.readouterr().err
    assert out.read_text() == ""