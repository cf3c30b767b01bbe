import pytest

from minishell.errors import (
    ShellError,
    ShellExit,
    ShellSyntaxError,
    check_empty_cmd,
    check_empty_redir,
    empty_heredoc,
)


def test_empty_command_is_rejected():
    with pytest.raises(ShellError) as info:
        check_empty_cmd("")
    assert info.value.status == 1


def test_command_counts_non_blank_characters():
    assert check_empty_cmd("ls") == len("ls")
    assert check_empty_cmd("   ") == 0


def test_blank_padding_is_not_counted():
    assert check_empty_cmd("  ls  ") == check_empty_cmd("ls")


def test_heredoc_without_delimiter():
    with pytest.raises(ShellSyntaxError):
        empty_heredoc("<<")


def test_heredoc_delimiter_returned():
    assert empty_heredoc("<<EOF") == "EOF"


def test_redirection_without_target():
    with pytest.raises(ShellSyntaxError):
        check_empty_redir("cat >   ")


def test_text_without_redirection_is_rejected():
    with pytest.raises(ShellSyntaxError):
        check_empty_redir("cat")


def test_redirection_target_returned():
    assert check_empty_redir("cat >>  out") == "out"
    assert check_empty_redir("<in") == "in"


def test_syntax_error_is_a_shell_error():
    with pytest.raises(ShellError) as info:
        check_empty_redir(">")
    assert isinstance(info.value, ShellSyntaxError)
    assert info.value.status == 1


@pytest.mark.parametrize("status", [0, 1, 2, 255])
def test_shell_exit_carries_status(status):
    exit_request = ShellExit(status)
    assert exit_request.status == status