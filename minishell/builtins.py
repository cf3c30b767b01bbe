"""Built-in commands that need no parsing support: echo, env, pwd, cd and exit."""

from __future__ import annotations

import os
from itertools import dropwhile
from typing import Sequence, TextIO

from minishell.environment import Environment
from minishell.errors import ShellError, ShellExit
from minishell.libft import atoi, strncmp
from minishell.printf import format_printf

NO_PATH_MESSAGE = "Error, no path found\n"
_ZERO_SPELLINGS = ("0", "+0", "-0")


def is_n_option(arg: str | None) -> bool:
    """Whether ``arg`` is an ``echo`` newline-suppressing option: ``-`` followed only by ``n``."""
    if not arg or not arg.startswith("-"):
        return False
    return all(char == "n" for char in arg[1:])


def echo(args: Sequence[str], out: TextIO) -> int:
    """Write the arguments separated by spaces; leading ``-n`` options drop the newline."""
    words = list(dropwhile(is_n_option, args))
    out.write(" ".join(words))
    if not (args and is_n_option(args[0])):
        out.write("\n")
    return 0


def env(environment: Environment, out: TextIO) -> int:
    """Write every variable that has a value, skipping the ``?`` status entries."""
    for entry in environment.to_array():
        if entry.startswith("?"):
            continue
        if "=" in entry:
            out.write(entry + "\n")
    return 0


def _current_directory(out: TextIO) -> str:
    try:
        return os.getcwd()
    except OSError as exc:
        out.write(NO_PATH_MESSAGE)
        raise ShellError("no path found") from exc


def pwd(out: TextIO) -> int:
    """Write the current working directory."""
    out.write(_current_directory(out) + "\n")
    return 0


def _store_old_pwd(environment: Environment, old_pwd: str) -> None:
    for name in environment.names():
        if strncmp(name, "OLDPWD", 4) == 0:
            environment.set(name, old_pwd)


def _store_pwd(environment: Environment) -> None:
    try:
        current = os.getcwd()
    except OSError as exc:
        raise ShellError("no path found") from exc
    # Keeps its place when present, otherwise appended at the end.
    environment.set("PWD", current)


def _change_directory(environment: Environment, path: str, out: TextIO) -> bool:
    old_pwd = _current_directory(out)
    try:
        os.chdir(path)
    except OSError:
        return False
    _store_old_pwd(environment, old_pwd)
    _store_pwd(environment)
    return True


def cd(environment: Environment, args: Sequence[str], out: TextIO) -> int:
    """Change directory to ``args[0]``, or to ``$HOME`` when it is missing or ``~``.

    On success ``OLDPWD`` and ``PWD`` are updated and 0 is returned; a directory
    that cannot be entered prints a message and returns 1.
    """
    target = args[0] if args else None
    if target is None or target == "~":
        home = os.environ.get("HOME")
        if home is None:
            out.write(NO_PATH_MESSAGE)
            raise ShellError("HOME not set")
        changed = _change_directory(environment, home, out)
    else:
        changed = _change_directory(environment, target, out)
    if changed:
        return 0
    out.write(format_printf("minishell: cd: %s: No such file or directory\n", target))
    return 1


def _is_numeric(arg: str) -> bool:
    return atoi(arg) != 0 or arg in _ZERO_SPELLINGS


def exit_shell(
    args: Sequence[str], pipeline_length: int, out: TextIO, err: TextIO
) -> int:
    """Leave the shell by raising :class:`ShellExit`.

    ``exit`` is announced only when it is the single command of the pipeline.
    A non-numeric argument exits with status 2. With too many arguments the
    shell stays and 1 is returned, except inside a pipeline, where the command's
    own process ends with status 1.
    """
    alone = pipeline_length == 1
    if not args:
        if alone:
            out.write("exit\n")
        raise ShellExit(0)

    first = args[0]
    if not _is_numeric(first):
        if alone:
            out.write(f"exit\nminishell: exit: {first}: numeric argument required\n")
        else:
            err.write(f"minishell: exit: {first}: numeric argument required\n")
        raise ShellExit(2)

    if len(args) == 1:
        status = atoi(first) & 0xFF
        if alone:
            out.write("exit\n")
        raise ShellExit(status)

    if alone:
        out.write("exit\nminishell: exit: too many arguments\n")
        return 1
    err.write("minishell: exit: too many arguments\n")
    raise ShellExit(1)