import pytest

from pipex.resolve import PipexError, compare_prefix, resolve_command, search_path


def test_error_carries_message_and_code():
    error = PipexError("Error: pipe failed", 5)
    assert error.message == "Error: pipe failed"
    assert error.exit_code == 5
    assert str(error) == "Error: pipe failed"


def test_error_without_message():
    error = PipexError(None, 8)
    assert error.message is None
    assert error.exit_code == 8


def test_compare_prefix_matches_path_entry():
    assert compare_prefix("PATH=/usr/bin", "PATH=", 5) == 0


def test_compare_prefix_only_looks_at_n_bytes():
    assert compare_prefix("in", "in.txt", len("in")) == 0
    assert compare_prefix("in.txt", "in", len("in.txt")) > 0


def test_compare_prefix_sign():
    assert compare_prefix("abc", "abd", 3) < 0
    assert compare_prefix("abd", "abc", 3) > 0


def test_compare_prefix_zero_length():
    assert compare_prefix("x", "y", 0) == 0


def test_compare_prefix_stops_at_common_end():
    assert compare_prefix("here_doc", "here_doc", 100) == 0


def test_search_path_plain():
    env = {"HOME": "/home/user", "PATH": "/usr/bin::/bin"}
    assert search_path(env, False) == ["/usr/bin", "/bin"]


def test_search_path_quoted_strips_quotes():
    env = {"PATH": "'/opt/my dir':/bin"}
    assert search_path(env, True) == ["/opt/my dir", "/bin"]


def test_search_path_missing():
    assert search_path({"HOME": "/home/user"}, False) == []


def test_resolve_existing_path_is_returned_as_is(tmp_path):
    tool = tmp_path / "tool"
    tool.write_text("")
    assert resolve_command(str(tool), []) == str(tool)


def test_resolve_searches_directories_in_order(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    third = tmp_path / "third"
    for directory in (first, second, third):
        directory.mkdir()
    (second / "tool").write_text("")
    (third / "tool").write_text("")
    found = resolve_command("tool", [str(first), str(second), str(third)])
    assert found == f"{second}/tool"


def test_resolve_not_found(tmp_path):
    with pytest.raises(PipexError) as info:
        resolve_command("no-such-tool-here", [str(tmp_path)])
    assert info.value.exit_code == 127
    assert info.value.message == "Error: command not found"


def test_resolve_empty_name_not_found(tmp_path):
    with pytest.raises(PipexError) as info:
        resolve_command(None, [str(tmp_path)])
    assert info.value.exit_code == 127