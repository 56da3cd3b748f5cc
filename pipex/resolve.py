"""Command lookup along the search path, and the error raised on failure."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from typing import Optional

from pipex.split import split_plain, split_quoted


class PipexError(Exception):
    """A fatal error carrying the message to print and the exit status."""

    def __init__(self, message: Optional[str], exit_code: int) -> None:
        super().__init__(message or "")
        self.message = message
        self.exit_code = exit_code


def _byte_at(data: bytes, index: int) -> int:
    return data[index] if index < len(data) else 0


def compare_prefix(a, b, n: int) -> int:
    """Compare at most ``n`` bytes of ``a`` and ``b``, strncmp style.

    Returns zero when they match, otherwise the difference of the first
    differing bytes.
    """
    if n <= 0:
        return 0
    left, right = os.fsencode(a), os.fsencode(b)
    index = 0
    while (
        index < n
        and _byte_at(left, index) == _byte_at(right, index)
        and (_byte_at(left, index) or _byte_at(right, index))
    ):
        index += 1
    if index == n:
        index -= 1
    return _byte_at(left, index) - _byte_at(right, index)


def search_path(env: Mapping[str, str], quoted: bool = False) -> list[str]:
    """Return the directories listed in ``PATH`` of ``env``.

    With ``quoted`` set, quoting in the value is honoured when splitting.
    Returns an empty list when ``PATH`` is not set.
    """
    value = env.get("PATH")
    if value is None:
        return []
    return split_quoted(value, ":") if quoted else split_plain(value, ":")


def resolve_command(name: Optional[str], directories: Sequence[str]) -> str:
    """Return the path to run for ``name``.

    ``name`` itself is used when it exists; otherwise the first existing
    ``directory/name`` is returned.
    """
    if not name:
        raise PipexError("Error: command not found", 127)
    if os.access(name, os.F_OK):
        return name
    for directory in directories:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK):
            return candidate
    raise PipexError("Error: command not found", 127)