"""Command-line entry points."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import Optional

from pipex.pipeline import _open_output, _report, _run_commands, run_heredoc, run_pipeline
from pipex.resolve import PipexError, compare_prefix

HERE_DOC = "here_doc"


def _length(text: str) -> int:
    return len(os.fsencode(text))


def check_arguments(args: Sequence[str], env: Mapping[str, str], exact: bool = False) -> None:
    """Validate the arguments that follow the program name.

    With ``exact`` set, exactly an input, two commands and an output are
    required; otherwise at least that many.
    """
    wrong_count = len(args) != 4 if exact else len(args) < 4
    if wrong_count:
        raise PipexError("Error: wrong number of arguments", 1)
    if not env:
        raise PipexError("Error: envp not found", 9)
    first = args[0]
    if compare_prefix(first, args[-1], _length(first)) == 0:
        raise PipexError("Error: input and output files must differ", 8 if exact else 100)


def main_pair(argv: Optional[Sequence[str]] = None) -> int:
    """Run ``infile cmd1 cmd2 outfile``: two commands joined by one pipe."""
    args = list(sys.argv[1:] if argv is None else argv)
    env = os.environ
    try:
        check_arguments(args, env, exact=True)
    except PipexError as error:
        _report(error)
        return error.exit_code
    infile, first, second, outfile = args
    source = None
    try:
        source = open(infile, "rb")
    except OSError:
        _report(PipexError("Error: could not open input file", 4))
    try:
        output: Optional[int] = None
        try:
            output = _open_output(outfile, append=False)
        except PipexError as error:
            _report(error)
        try:
            options = {"quoted": True, "exec_status": 5}
            if source is not None and output is not None:
                _run_commands(source, [first, second], output, env, **options)
            elif source is not None:
                _run_commands(source, [first], subprocess.DEVNULL, env, **options)
            elif output is not None:
                _run_commands(None, [second], output, env, **options)
        finally:
            if output is not None:
                os.close(output)
    finally:
        if source is not None:
            source.close()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run ``infile cmd... outfile`` or ``here_doc LIMITER cmd... outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    env = os.environ
    try:
        check_arguments(args, env, exact=False)
        if compare_prefix(args[0], HERE_DOC, _length(args[0])) == 0:
            run_heredoc(args[1], args[2:-1], args[-1], env)
        else:
            run_pipeline(args[0], args[1:-1], args[-1], env)
    except PipexError as error:
        _report(error)
        return error.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())