import io
import sys

import pytest

from pipex.cli import check_arguments, main, main_pair
from pipex.resolve import PipexError


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("hello\nworld\n")
    return path


@pytest.mark.parametrize(
    "args, exact",
    [
        (["a", "b", "c"], True),
        (["a", "b", "c", "d", "e"], True),
        (["a", "b", "c"], False),
    ],
)
def test_wrong_argument_count(args, exact):
    with pytest.raises(PipexError) as info:
        check_arguments(args, {"PATH": "/bin"}, exact)
    assert info.value.exit_code == 1
    assert info.value.message == "Error: wrong number of arguments"


def test_empty_environment_rejected():
    with pytest.raises(PipexError) as info:
        check_arguments(["in", "cat", "cat", "out"], {}, True)
    assert info.value.exit_code == 9


@pytest.mark.parametrize("exact, code", [(True, 8), (False, 100)])
def test_same_files_rejected(exact, code):
    with pytest.raises(PipexError) as info:
        check_arguments(["file", "cat", "cat", "file"], {"PATH": "/bin"}, exact)
    assert info.value.exit_code == code


def test_output_starting_with_input_name_rejected():
    with pytest.raises(PipexError) as info:
        check_arguments(["in", "cat", "cat", "in.out"], {"PATH": "/bin"}, False)
    assert info.value.exit_code == 100


def test_main_runs_pipeline(infile, tmp_path):
    out = tmp_path / "output.txt"
    status = main([str(infile), "cat", "tr a-z A-Z", "cat", str(out)])
    assert status == 0
    assert out.read_text() == infile.read_text().upper()


def test_main_here_doc(tmp_path, monkeypatch, capsys):
    out = tmp_path / "output.txt"
    out.write_text("first\n")
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"second\nEOF\n")))
    status = main(["here_doc", "EOF", "cat", "cat", str(out)])
    assert status == 0
    assert out.read_text() == "first\n" + "second\n"
    assert "heredoc> " in capsys.readouterr().out


def test_main_too_few_arguments(capsys):
    assert main(["a", "b", "c"]) == 1
    assert "Error: wrong number of arguments" in capsys.readouterr().err


def test_main_missing_input(tmp_path, capsys):
    status = main([str(tmp_path / "missing"), "cat", "cat", str(tmp_path / "out")])
    assert status == 2
    assert "Error: could not open input file" in capsys.readouterr().err


def test_main_pair_runs_two_commands(infile, tmp_path):
    out = tmp_path / "output.txt"
    assert main_pair([str(infile), "cat", "tr a-z A-Z", str(out)]) == 0
    assert out.read_text() == infile.read_text().upper()


def test_main_pair_wrong_count():
    assert main_pair(["a", "b", "c", "d", "e"]) == 1


def test_main_pair_missing_input_still_runs_second(tmp_path, capsys):
    out = tmp_path / "output.txt"
    status = main_pair([str(tmp_path / "missing"), "cat", "echo hi", str(out)])
    assert status == 0
    assert out.read_text() == "hi\n"
    assert "Error: could not open input file" in capsys.readouterr().err