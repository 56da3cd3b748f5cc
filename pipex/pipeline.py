"""Running commands joined by pipes between an input and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping, Sequence
from typing import IO, Any, Optional, Union

from pipex.lines import LineReader
from pipex.resolve import PipexError, compare_prefix, resolve_command, search_path
from pipex.split import split_quoted

PROMPT = "heredoc> "
DEPTH_PROMPT = "pipe "
OUTPUT_MODE = 0o644
EXEC_FAILED = 7


def _report(error: PipexError) -> None:
    if error.message:
        text = error.message
    elif isinstance(error.__cause__, OSError) and error.__cause__.strerror:
        text = f"Error: {error.__cause__.strerror}"
    else:
        text = "Error"
    print(text, file=sys.stderr, flush=True)


def _open_output(path: str, append: bool) -> int:
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        return os.open(path, flags, OUTPUT_MODE)
    except OSError as exc:
        raise PipexError("Error: could not open output file", 3) from exc


def _spawn(
    command: str,
    directories: Sequence[str],
    environment: dict[str, str],
    source: Any,
    target: Any,
    exec_status: int,
) -> subprocess.Popen:
    words = split_quoted(command, " ")
    path = resolve_command(words[0] if words else None, directories)
    if os.sep not in path:
        path = os.path.join(os.curdir, path)
    try:
        return subprocess.Popen(
            words, executable=path, stdin=source, stdout=target, env=environment
        )
    except OSError as exc:
        raise PipexError("Error: execve failed", exec_status) from exc


def _run_commands(
    stdin: Any,
    commands: Sequence[str],
    stdout: Any,
    env: Mapping[str, str],
    *,
    quoted: bool = False,
    exec_status: int = EXEC_FAILED,
) -> list[int]:
    """Start ``commands`` as a chain and return their exit statuses.

    A command that cannot be started is reported on standard error and
    takes the status of that failure; the next command then reads nothing.
    """
    directories = search_path(env, quoted)
    environment = dict(env)
    children: list[Union[subprocess.Popen, int]] = []
    previous: Optional[IO[bytes]] = None
    last = len(commands) - 1
    try:
        for index, command in enumerate(commands):
            if index == 0:
                source = subprocess.DEVNULL if stdin is None else stdin
            else:
                source = subprocess.DEVNULL if previous is None else previous
            target = stdout if index == last else subprocess.PIPE
            child: Optional[subprocess.Popen] = None
            try:
                child = _spawn(command, directories, environment, source, target, exec_status)
            except PipexError as error:
                _report(error)
                children.append(error.exit_code)
            else:
                children.append(child)
            if previous is not None:
                previous.close()
            previous = child.stdout if child is not None and index != last else None
    finally:
        if previous is not None:
            previous.close()
    return [child if isinstance(child, int) else child.wait() for child in children]


def run_pipeline(
    infile: str, commands: Sequence[str], outfile: str, env: Mapping[str, str]
) -> list[int]:
    """Run ``commands`` from ``infile`` into ``outfile``, truncating it first.

    Returns the exit status of each command, in order.
    """
    if not commands:
        raise ValueError("at least one command is required")
    try:
        source = open(infile, "rb")
    except OSError as exc:
        raise PipexError("Error: could not open input file", 2) from exc
    with source:
        output = _open_output(outfile, append=False)
        try:
            return _run_commands(source, commands, output, env)
        finally:
            os.close(output)


def read_heredoc(
    limiter: str, stream: IO[Any], sink: IO[Any], prompt_out: IO[str], depth: int = 0
) -> int:
    """Copy lines from ``stream`` to ``sink`` until a line starts with ``limiter``.

    A prompt is written to ``prompt_out`` before each line is read. Returns
    the number of lines copied.
    """
    reader = LineReader(stream)
    prompt = DEPTH_PROMPT * depth + PROMPT
    length = len(os.fsencode(limiter))
    copied = 0
    while True:
        prompt_out.write(prompt)
        prompt_out.flush()
        line = reader.readline()
        if line is None or compare_prefix(line, limiter, length) == 0:
            break
        sink.write(line)
        copied += 1
    reader.reset()
    return copied


def run_heredoc(
    limiter: str,
    commands: Sequence[str],
    outfile: str,
    env: Mapping[str, str],
    stdin: Optional[IO[bytes]] = None,
    prompt_out: Optional[IO[str]] = None,
) -> list[int]:
    """Read a document from ``stdin`` and feed it through ``commands``.

    The result is appended to ``outfile``. Returns the exit status of each
    command, in order.
    """
    if len(commands) < 2:
        raise PipexError("Error: invalid number of arguments", 8)
    stream = sys.stdin.buffer if stdin is None else stdin
    prompt = sys.stdout if prompt_out is None else prompt_out
    with tempfile.TemporaryFile() as document:
        read_heredoc(limiter, stream, document, prompt, len(commands) - 1)
        document.seek(0)
        output = _open_output(outfile, append=True)
        try:
            return _run_commands(document, commands, output, env)
        finally:
            os.close(output)