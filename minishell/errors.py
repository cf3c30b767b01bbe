"""Shell error types and checks for empty commands and redirections."""

from __future__ import annotations

SPACES = " \t\n\v\f\r"
SYNTAX_ERROR = "syntax error"
NO_COMMAND = "No command"


class ShellError(Exception):
    """An error that ends the current command with an exit status."""

    def __init__(self, message: str = "", status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class ShellSyntaxError(ShellError):
    """The command line is malformed."""

    def __init__(self, message: str = SYNTAX_ERROR, status: int = 1) -> None:
        super().__init__(message, status)


class ShellExit(Exception):
    """Request to leave the shell with the given status."""

    def __init__(self, status: int = 0, message: str = "") -> None:
        super().__init__(message or f"exit {status}")
        self.status = status
        self.message = message


def check_empty_cmd(command: str) -> int:
    """Reject an empty command; return the number of non-blank characters."""
    if not command:
        raise ShellError(NO_COMMAND)
    return sum(1 for char in command if char not in SPACES)


def empty_heredoc(text: str) -> str:
    """Return the delimiter after the leading ``<`` characters; reject a missing one."""
    delimiter = text.lstrip("<")
    if not delimiter:
        raise ShellSyntaxError()
    return delimiter


def check_empty_redir(text: str) -> str:
    """Return what follows the first redirection operator; reject a missing target."""
    index = 0
    length = len(text)
    while index < length and text[index] not in "<>":
        index += 1
    while index < length and text[index] in "<>":
        index += 1
    while index < length and text[index] in SPACES:
        index += 1
    if index >= length:
        raise ShellSyntaxError()
    return text[index:]