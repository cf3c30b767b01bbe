"""The ``export`` and ``unset`` built-ins and the identifiers they accept."""

from __future__ import annotations

import enum
from typing import Sequence, TextIO

from minishell.environment import Environment
from minishell.libft import strncmp
from minishell.printf import format_printf


class IdentifierKind(enum.Enum):
    """Which built-in is checking an identifier."""

    EXPORT = "export"
    UNSET = "unset"


def _is_identifier_char(char: str) -> bool:
    return char == "_" or ("0" <= char <= "9") or ("A" <= char <= "Z") or ("a" <= char <= "z")


def _report(kind: IdentifierKind, arg: str, out: TextIO) -> bool:
    out.write(
        format_printf("minishell: %s: '%s': not a valid identifier\n", kind.value, arg)
    )
    return False


def check_identifier(kind: IdentifierKind, arg: str, out: TextIO) -> bool:
    """Whether ``arg`` is acceptable to ``export`` or ``unset``; report it on ``out`` if not.

    A name must not start with a digit and may hold only letters, digits and
    ``_``. For ``export`` the check stops at the first ``=``, which must not be
    the first character.
    """
    if arg[:1].isdigit() and "0" <= arg[0] <= "9":
        return _report(kind, arg, out)
    if kind is IdentifierKind.EXPORT and arg.startswith("="):
        return _report(kind, arg, out)
    for char in arg:
        if char == "=" and kind is IdentifierKind.EXPORT:
            return True
        if not _is_identifier_char(char):
            return _report(kind, arg, out)
    return True


def export(environment: Environment, args: Sequence[str], out: TextIO) -> int:
    """Set or declare variables; with no arguments list them.

    ``NAME=VALUE`` sets the variable, a bare ``NAME`` declares it without a value
    unless it already exists. Returns 1 if any argument was rejected, else 0.
    """
    if not args:
        print_exported(environment, out)
        return 0
    status = 0
    for arg in args:
        if not check_identifier(IdentifierKind.EXPORT, arg, out):
            status = 1
            continue
        name, sep, value = arg.partition("=")
        if sep:
            environment.set(name, value)
        elif arg not in environment:
            environment.set(arg, None)
    return status


def _precedes(candidate: str, current: str) -> bool:
    return strncmp(current, candidate, len(candidate.encode("utf-8"))) > 0


def _sorted_entries(entries: list[str]) -> list[str]:
    remaining = list(entries)
    ordered: list[str] = []
    while remaining:
        chosen = 0
        restart = True
        while restart:
            restart = False
            for index, entry in enumerate(remaining):
                if index != chosen and _precedes(entry, remaining[chosen]):
                    chosen = index
                    restart = True
                    break
        ordered.append(remaining.pop(chosen))
    return ordered


def print_exported(environment: Environment, out: TextIO) -> None:
    """Write every variable as ``declare -x NAME="VALUE"`` in sorted order.

    The ``?`` status entries and the ``_`` variable are left out.
    """
    for entry in _sorted_entries(environment.to_array()):
        if entry.startswith("?") or entry.startswith("_="):
            continue
        name = entry.partition("=")[0]
        value = environment.get_value(name)
        line = f"declare -x {name}"
        if value is not None:
            line += f'="{value}"'
        out.write(line + "\n")


def unset(environment: Environment, args: Sequence[str], out: TextIO) -> int:
    """Remove the named variables; empty arguments are ignored.

    Returns 1 if any argument was rejected, else 0.
    """
    status = 0
    for arg in args:
        if not arg:
            continue
        if not check_identifier(IdentifierKind.UNSET, arg, out):
            status = 1
            continue
        if arg in environment:
            environment.remove(arg)
    return status