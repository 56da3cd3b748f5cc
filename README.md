# pipex

`pipex` runs a chain of commands the way a shell pipeline does. It reads
from one file and writes to another:

```sh
pipex infile "grep foo" "sort -r" "wc -l" outfile
```

behaves like

```sh
< infile grep foo | sort -r | wc -l > outfile
```

## Installation

```sh
pip install .
```

This installs two commands, `pipex` and `pipex-pair`. The same entry
point is also available as `python -m pipex.cli`.

## Usage

### Pipelines of any length

```sh
pipex INFILE CMD1 CMD2 [CMD3 ...] OUTFILE
```

The first command reads `INFILE`. Each command feeds the next one. The
last command writes `OUTFILE`, which is created with mode `0644` if
needed and is truncated first. At least two commands are required.

If the first argument is `here_doc`, or any prefix of it, the command
runs in here-document mode.

### Here-documents

```sh
pipex here_doc LIMITER CMD1 CMD2 [CMD3 ...] OUTFILE
```

Input is read from standard input at a `heredoc> ` prompt. The prompt is
preceded by `pipe ` once for every command after the first. Reading stops
at end of input or at the first line that starts with `LIMITER`. The text
read is fed to the pipeline, and the result is **appended** to `OUTFILE`,
as with

```sh
CMD1 << LIMITER | CMD2 >> OUTFILE
```

Here-document mode needs at least two commands.

### Exactly two commands

```sh
pipex-pair INFILE CMD1 CMD2 OUTFILE
```

This is the strict form and accepts exactly four arguments. If `INFILE`
cannot be opened, the error is reported and `CMD2` still runs, with empty
input. If `OUTFILE` cannot be opened, the error is reported and `CMD1`
still runs, with its output discarded.

## Command words

Each command is split on spaces. A word that opens with a single or
double quote runs up to the matching quote, and only the text inside the
quotes is kept. So

```sh
pipex infile "awk '{print \$1}'" "tr a-z A-Z" outfile
```

passes `{print $1}` to `awk` as one argument.

A command name is used as given if that path exists. Otherwise it is
looked up in each directory of `PATH`, in order. The command runs with
the current environment.

## Errors

Errors are printed on standard error with a message such as
`Error: could not open input file`. The following errors stop `pipex`
with a non-zero exit code:

| Situation                                              | Exit code |
|--------------------------------------------------------|-----------|
| too few arguments (fewer than four)                    | 1         |
| input file cannot be opened                            | 2         |
| output file cannot be opened                           | 3         |
| `here_doc` mode with fewer than two commands           | 8         |
| environment is empty                                   | 9         |
| output file name begins with the input file name       | 100       |

`pipex-pair` exits with 1 when it is not given exactly four arguments,
with 9 when the environment is empty, and with 8 when the output file
name begins with the input file name.

A command that cannot be found (`Error: command not found`) or cannot be
started (`Error: execve failed`) is reported, and the rest of the
pipeline still runs. The command after it reads empty input.

## Using it from Python

```python
import os
from pipex.pipeline import run_pipeline, run_heredoc

statuses = run_pipeline("in.txt", ["grep foo", "wc -l"], "out.txt", os.environ)
```

- `pipex.pipeline.run_pipeline(infile, commands, outfile, env)` returns
  one exit status per command, in order. A command that could not be
  found gets status 127. A command that could not be started gets
  status 7. It raises `ValueError` if `commands` is empty.
- `pipex.pipeline.run_heredoc(limiter, commands, outfile, env, stdin=None, prompt_out=None)`
  reads the document from `stdin` (standard input by default) and appends
  the result to `outfile`.
- `pipex.pipeline.read_heredoc(limiter, stream, sink, prompt_out, depth=0)`
  copies lines up to the limiter and returns how many were copied.
- `pipex.split.split_quoted(s, sep)` and `pipex.split.split_plain(s, sep)`
  do the word splitting.
- `pipex.resolve.search_path(env, quoted=False)` lists the `PATH`
  directories.
- `pipex.resolve.resolve_command(name, directories)` finds a command.
- `pipex.resolve.compare_prefix(a, b, n)` compares byte prefixes.
- `pipex.lines.LineReader(stream, buffer_size=42)` reads lines in
  fixed-size chunks. It can be used as an iterator.
- Fatal errors are raised as `pipex.resolve.PipexError`, which carries
  `message` and `exit_code`.

## What it does not do

Commands are not passed through a shell. There is no globbing, no
variable expansion, no backslash escaping, and no redirection inside a
command string. The exit status of `pipex` reflects only the errors
listed above. It does not reflect the exit status of the commands it ran.