# pipework

`pipework` runs two commands joined by a pipe. The first command reads from an
input file. The second command writes to an output file. It behaves like this
shell line:

```
< infile cmd1 | cmd2 > outfile
```

## Installation

```
pip install .
```

## Command line

```
pipework <infile> <cmd1> <cmd2> <outfile>
```

Example:

```
pipework input.txt "grep error" "wc -l" count.txt
```

Each command is split on spaces, and empty words are dropped. Quotes are not
interpreted. The program name is joined to each directory of the first
environment variable whose name begins with `PATH`. The first path that exists
is used. The output file is created with mode `0777` (subject to the umask) if
it is missing, and truncated if it exists.

The first command runs to completion before the output file is opened. Its
output is then passed to the second command as input.

Exit status and messages:

- **Wrong number of arguments.** A red `Error: Bad arguments` line goes to
  standard error and a usage line goes to standard output. The exit status is 3.
- **Input file cannot be opened, or the first command cannot be found or
  started.** The error is written to standard error, and the second command
  still runs, with empty input.
- **Output file cannot be opened.** The error is reported under the file's name
  and the exit status is 1.
- **Second command cannot be found.** `<name>: command not found` is written to
  standard error and the exit status is 127.
- **Second command cannot be started.** The exit status is 1.
- **Otherwise.** The exit status is that of the second command. If the command
  was killed by a signal, the status is 128 plus the signal number.

## Library use

```python
from pipework.cli import run_pipeline

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
```

`run_pipeline(infile, first, second, outfile, env=None)` returns the exit
status described above. `env` is a mapping used both for command lookup and as
the commands' environment. It defaults to `os.environ`. `pipework.cli.main(argv=None)`
is the command-line entry point and returns the exit status. `UsageError` is
the exception it uses for a bad argument count.

Command lookup, in `pipework.paths`:

- `search_dirs(env=None)` returns the non-empty directories listed in the
  first variable whose name starts with `PATH`, or an empty list if there is
  no such variable.
- `resolve_command(name, env=None)` returns `dir/name` for the first directory
  where that path exists.
- `parse_command(command, env=None)` splits `command` on spaces. It returns the
  resolved program path and the argument list, with the program name first.

`resolve_command` and `parse_command` raise `CommandNotFoundError`, a subclass
of `LookupError`, when the program cannot be found.

## Text and byte helpers

These helpers follow C string conventions. Text is read up to its first NUL
character, and positions are returned as indices, with `None` meaning "not
found".

- `pipework.chars`
  - Predicates: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`.
  - Converters: `to_upper`, `to_lower`.
  - All of them accept an integer code or a one-character string.
- `pipework.memory`
  - Filling: `fill`, `zero`, `allocate_zeroed` (raises `OverflowError` past a
    64-bit size).
  - Searching and comparing: `find_byte`, `compare`.
  - Copying: `copy_into`, and `move` for an overlap-safe copy within one buffer.
- `pipework.cstr`
  - Length and search: `length`, `find_char`, `rfind_char`, `find_bounded`.
  - Comparison: `compare_prefix`.
  - Copying: `duplicate`, `bounded_copy` and `bounded_concat`. The last two
    return the text and the attempted length.
  - Numbers: `parse_int` (atoi-style) and `format_int` (32-bit signed integers
    only).
- `pipework.words`
  - Cutting and building: `substring`, `join`, `trim`.
  - Splitting: `split_words`, which splits on one character and drops empty
    words.
  - Per-character functions: `map_indexed`, and `each_indexed`, which works in
    place on a mutable sequence of characters.
- `pipework.output`
  - `put_char`, `put_str`, `put_line`, `put_number`. Each writes to a given
    text stream, or to standard output when none is given.

## Limits

Only two commands can be chained. There is no here-document mode and no
support for appending to the output file. The commands are not run
concurrently: the first command's whole output is collected in memory before
the second command starts.