# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file. The second command writes to an output file. It does the same job
as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

You can also run it as `python -m pipex.runner` with the same arguments.

`pipex` takes exactly four arguments. With any other number it prints a usage
line on standard error and exits with status 1.

- Each command string is split on spaces into a program name and its
  arguments. Empty pieces are dropped.
- A name that contains `/` is used as given if that file is executable.
  Otherwise each directory listed in `PATH` is tried in order.
- The output file is created with mode `0644` if it does not exist. If it
  exists, it is truncated.

For example, to count the lines in `input.txt` that contain `error`:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

The two halves of the pipeline are set up independently. If the input file
cannot be opened, the second command still runs, and the same holds the other
way round. The same is true when a command cannot be found. Any such failure is
printed on standard error as `pipex: <message>`. The command still exits with
status 0 in that case. It exits with status 1 only for a wrong argument count
or an unexpected system error.

## Library use

```python
from pipex.runner import run_pipeline, PipexError, CommandNotFound

try:
    first_status, second_status = run_pipeline(
        "input.txt", "grep error", "wc -l", "count.txt"
    )
except CommandNotFound as exc:
    print("missing command:", exc)
except PipexError as exc:
    print(exc)
```

`run_pipeline` takes an optional `env` mapping. It uses that mapping both for
the `PATH` lookup and as the environment of the commands. It returns the exit
statuses of the two commands. If a half could not be started, the first such
error is raised, but only after the other half has finished.

The functions in `pipex.paths` resolve commands in the same way:

- `parse_command(cmd_str)` splits a command string.
- `search_dirs(env)` lists the `PATH` directories.
- `find_command(name, env)` returns the path of the executable, or `None`.

### Helper modules

- `pipex.chars`: ASCII classification and case conversion: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
- `pipex.text`: string helpers: `split_words`, `parse_int` (atoi-style, wraps
  to 32 bits), `to_decimal`, `trim`, `substring`, `join`, `map_chars`,
  `iter_chars`.
- `pipex.search`: `find_char`, `find_last_char`, `find_within`,
  `compare_prefix`, `bounded_copy`, `bounded_concat`.
- `pipex.memory`: byte-buffer helpers: `fill`, `zero`, `allocate_zeroed`,
  `find_byte`, `compare_bytes`, `copy_bytes`, `move_bytes`.
- `pipex.output`: writing to file descriptors: `put_char`, `put_str`,
  `put_line`, `put_number`.
- `pipex.linked`: `Node` and `LinkedList`, a singly linked list with
  `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`.

## What it does not do

`pipex` is not a shell. It runs exactly two commands. It has none of the
following:

- quoting or escaping in command strings
- globbing or variable expansion
- here-documents
- appending to the output file
- pipelines of more than two commands

## Tests

```sh
pip install -e ".[test]"
pytest
```