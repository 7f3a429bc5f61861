import io
import sys

from pipex.cli import main


def test_runs_pipeline_from_infile(tmp_path):
    infile = tmp_path / "in"
    infile.write_text("hello\n")
    out = tmp_path / "out"
    assert main([str(infile), "cat", "tr a-z A-Z", str(out)]) == 0
    assert out.read_text() == "HELLO\n"


def test_outfile_is_truncated(tmp_path):
    infile = tmp_path / "in"
    infile.write_text("new\n")
    out = tmp_path / "out"
    out.write_text("previous content that is longer\n")
    main([str(infile), "cat", "cat", str(out)])
    assert out.read_text() == "new\n"


def test_here_doc_appends(tmp_path, monkeypatch, capsys):
    out = tmp_path / "out"
    out.write_text("old\n")
    monkeypatch.setattr(sys, "stdin", io.StringIO("abc\nEND\nzzz\n"))
    assert main(["here_doc", "END", "cat", str(out)]) == 0
    assert out.read_text() == "old\nabc\n"
    assert "heredoc> " in capsys.readouterr().err


def test_too_few_arguments_do_nothing(tmp_path):
    infile = tmp_path / "in"
    infile.write_text("x\n")
    out = tmp_path / "out"
    assert main([str(infile), "cat", str(out)]) == 0
    assert not out.exists()


def test_missing_path_returns_error(tmp_path, monkeypatch):
    infile = tmp_path / "in"
    infile.write_text("x\n")
    monkeypatch.delenv("PATH", raising=False)
    monkeypatch.setenv("PIPEX_TEST_MARKER", "1")
    assert main([str(infile), "cat", "cat", str(tmp_path / "out")]) == 1


def test_unknown_command_leaves_empty_output(tmp_path, capsys):
    infile = tmp_path / "in"
    infile.write_text("text\n")
    out = tmp_path / "out"
    assert main([str(infile), "cat", "no_such_command_here", str(out)]) == 0
    assert out.read_text() == ""
    assert "no_such_command_here" in capsys.readouterr().err