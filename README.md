# pipex

`pipex` runs two commands joined by a pipe. The first command reads from one
file and the second command writes to another. It does the same job as this
shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installing

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

- `infile` becomes the standard input of the first command. If it is missing
  or cannot be read, `infile: <reason>` is printed to standard error and that
  stage ends with status 127.
- The first command's standard output goes through a pipe to the second
  command's standard input.
- `outfile` is created or truncated with mode `0644`. It receives the second
  command's output.
- Each command string is split on spaces, and runs of spaces count as one
  separator. If the first word contains a `/`, it is used as a path and must
  be executable. The program name passed to the command is the last part of
  that path. In every other case the directories listed in `PATH` are
  searched in order.
- A command that cannot be found prints `name: command not found` to standard
  error, and its stage ends with status 127. If one stage fails, the other
  stage still runs.
- The exit status is that of the second command.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

If the number of arguments is wrong, this is printed to standard error and the
exit status is 1:

```
Use: ./pipex infile cmd1 cmd2 outfile
```

If the environment is empty, the exit status is also 1.

## Library

```python
import os
from pipex.pipeline import run_pipeline

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", dict(os.environ))
```

`run_pipeline` returns the second command's exit status. It raises
`pipex.pipeline.PipexError` when the environment is empty. `main(argv=None)`
is the command-line entry point.

Other modules:

- `pipex.command` turns a command string into something that can be run:
  - `resolve_command(cmd, env)` returns a `Command` holding `path` and `args`.
  - `find_executable(name, env)` searches `env["PATH"]`.
  - `parse_explicit(cmd)` handles commands given as a path.
  - `CommandNotFoundError` is raised when no executable is found. Its
    `exit_status` is 127.
- `pipex.linereader`: `LineReader(fd, buffer_size=10)` reads a file descriptor
  in chunks of `buffer_size` bytes.
  - `read_line()` returns one line as `bytes`, with its trailing newline, and
    returns `None` at end of input.
  - Iterating over the reader yields every remaining line.
- `pipex.formatting`: `format_string(fmt, *args)` and
  `print_formatted(fmt, *args, stream=None)` handle the conversions
  `%c %s %d %i %u %p %x %X %%`. `print_formatted` returns the number of
  characters written. `FormatError` is raised for any of these:
  - an unknown conversion
  - a `%` at the end of the format string
  - a missing argument
  - an argument of the wrong kind
- `pipex.text`: small string helpers.
  - `split_words(text, sep)` splits `text` on `sep`.
  - `parse_int(text)` reads a leading integer the way `atoi` does.
  - `int_to_text(n)` converts an integer to text.
  - `trim(text, chars)` strips the given characters from both ends.
  - `find_within(haystack, needle, limit)` searches within the first `limit`
    characters.

## What it does not do

- It runs exactly two commands. Longer pipelines are not supported, and
  neither is a here-document in place of the input file.
- Command strings are split on spaces only. Quotes, escapes, globbing and
  variable expansion are not interpreted.
- The output file is always truncated. There is no append mode.

## Tests

```sh
pip install ".[test]"
pytest
```