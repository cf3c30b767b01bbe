# minishell

Building blocks of a minimal shell. It has the builtin commands (`echo`,
`cd`, `pwd`, `env`, `export`, `unset`, `exit`) and an ordered environment
store. It also has checks for empty commands and redirection targets, a
small `printf`-style formatter, and the string helpers these parts use.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install .[test]
pytest
```

## Modules

### `minishell.libft`

String helpers with the shell's exact semantics:

- `atoi(text)` reads a leading decimal integer. Leading whitespace and one
  sign are allowed. On overflow it returns `-1` for positive input and `0`
  for negative input. The result is truncated to 32 bits.
- `itoa(n)` renders a 32-bit signed integer.
- `split(text, sep)` returns the non-empty words between runs of `sep`.
- `strtrim(text, charset)` strips characters of `charset` from both ends.
- `strncmp(s1, s2, n)` compares at most `n` bytes and returns the
  difference of the first unequal pair. If either operand is `None` it
  returns `1`.
- `substr(text, start, length)` returns at most `length` characters
  starting at `start`.
- `strnstr(haystack, needle, length)` searches only within the first
  `length` characters. It returns the rest of `haystack` from the match,
  or `None` when there is no match.

### `minishell.printf`

Supports the conversions `%c %s %p %d %i %u %x %X %%`.

- A `None` string prints as `(null)`, and a zero pointer as `(nil)`.
- An unknown conversion is dropped.
- `format_printf(fmt, *args)` returns the text.
- `printf(fmt, *args, stream=None)` writes the text to `stream`, or to
  standard output, and returns the number of characters written.

### `minishell.errors`

- `ShellError` carries a `message` and a `status`.
- `ShellSyntaxError` is a `ShellError` for malformed input.
- `ShellExit` asks the caller to leave the shell with `status`.
- `check_empty_cmd(command)` rejects an empty command. Otherwise it returns
  the count of non-blank characters.
- `empty_heredoc(text)` returns the delimiter after the leading `<`
  characters.
- `check_empty_redir(text)` returns what follows the first redirection
  operator.

Both `empty_heredoc` and `check_empty_redir` raise `ShellSyntaxError` when
nothing follows.

### `minishell.environment`

`Environment` is an ordered store of variables. A value of `None` marks a
variable that was declared without a value. It provides:

- `from_strings` to build it from `NAME=VALUE` entries;
- `set` and `remove`;
- `names`, `items`, `get_value` and `get_name` to look variables up;
- `to_array` to produce `NAME=VALUE` strings, or bare names for variables
  without a value;
- `update_error_code(code)`, which writes `code` into every variable whose
  name starts with `?`.

### `minishell.builtins`

- `echo(args, out)` prints its arguments. Leading `-n` style options
  (checked with `is_n_option`) suppress the newline.
- `env(environment, out)` prints the variables that have a value. Entries
  whose name starts with `?` are left out.
- `pwd(out)` prints the current directory.
- `cd(environment, args, out)` changes to the given directory, or to `$HOME`
  when there is no argument or the argument is `~`. On success it updates
  `OLDPWD` and `PWD`. It returns `1` and prints a message when the
  directory cannot be entered. It raises `ShellError` when `HOME` is unset.
- `exit_shell(args, pipeline_length, out, err)` raises `ShellExit` with the
  requested status. A non-numeric argument gives status 2. With too many
  arguments it returns `1` when it is the only command of the pipeline, and
  raises `ShellExit(1)` otherwise.

### `minishell.exports`

- `export(environment, args, out)` sets `NAME=VALUE` arguments and declares
  bare names. With no arguments it calls `print_exported`.
- `print_exported(environment, out)` writes `declare -x NAME="VALUE"` lines
  in sorted order. It leaves out `?` entries and `_`.
- `unset(environment, args, out)` removes the named variables.
- `check_identifier(kind, arg, out)` validates a name for an
  `IdentifierKind` (`EXPORT` or `UNSET`). It reports invalid ones on `out`.

Both `export` and `unset` return `1` if any argument was rejected.

## Example

```python
import io
from minishell.environment import Environment
from minishell.builtins import echo
from minishell.exports import export, print_exported

env = Environment.from_strings(["HOME=/home/user", "PATH=/usr/bin"])
out = io.StringIO()
export(env, ["GREETING=hello", "EMPTY"], out)
print_exported(env, out)
echo(["-n", "hello", "world"], out)
print(out.getvalue())
```

Each builtin returns the exit status that the shell would report.

## What this package does not do

There is no interactive prompt and no command to run. The package does not
do any of the following:

- tokenize or parse command lines;
- expand variables or `~`;
- run external programs, pipelines, redirections or here-documents;
- handle signals.

It provides the pieces listed above, for a caller that does those things
itself.