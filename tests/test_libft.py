import pytest

from minishell.libft import atoi, itoa, split, strncmp, strnstr, strtrim, substr


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [0, 1, -1, 42, -987654, 2147483647, -2147483648])
def test_itoa_matches_decimal_rendering(n):
    assert itoa(n) == str(n)


def test_itoa_minimum():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_plus():
    assert atoi(" \t\n\v\f\r+99xyz") == atoi("99")


def test_atoi_stops_at_non_digit():
    assert atoi("12ab34") == atoi("12")


def test_atoi_no_digits():
    assert atoi("abc") == 0


def test_atoi_single_sign_only():
    assert atoi("+-5") == 0


def test_atoi_truncates_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_atoi_positive_64bit_overflow():
    assert atoi("99999999999999999999") == -1


def test_atoi_negative_64bit_overflow():
    assert atoi("-99999999999999999999") == 0


def test_split_words():
    assert split("hello world", " ") == ["hello", "world"]


def test_split_collapses_separator_runs():
    assert split("  a  bb   ccc  ", " ") == ["a", "bb", "ccc"]


@pytest.mark.parametrize("text", ["", " ", "    "])
def test_split_only_separators(text):
    assert split(text, " ") == []


def test_split_single_character_yields_nothing():
    assert split("x", " ") == []


def test_split_single_character_with_separator():
    assert split("x ", " ") == ["x"]


def test_split_join_round_trip():
    words = ["echo", "foo", "bar", "baz"]
    assert split(" ".join(words), " ") == words


def test_split_none():
    assert split(None, " ") is None


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("abc", "") == "abc"


def test_strtrim_no_set():
    assert strtrim("abc", None) == "abc"


def test_strtrim_none_text():
    assert strtrim(None, "x") is None


def test_strncmp_equal():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_limited():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_ordering():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("b", "a", 1) > 0


def test_strncmp_prefix_is_smaller():
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("abc", "ab", 3) > 0


def test_strncmp_antisymmetric():
    assert strncmp("PWD", "OLDPWD", 4) == -strncmp("OLDPWD", "PWD", 4)


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_missing_operand():
    assert strncmp(None, "a", 1) == 1
    assert strncmp("a", None, 1) == 1


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_whole():
    assert substr("hello", 0, 5) == "hello"


def test_substr_clamps_length():
    assert substr("hello", 3, 100) + substr("hello", 0, 3) == substr("hello", 3, 2) + "hel"


def test_substr_start_past_end():
    assert substr("hello", 10, 2) == ""


def test_substr_none():
    assert substr(None, 0, 1) is None


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_found():
    assert strnstr("hello world", "world", 11) == "world"


def test_strnstr_outside_limit():
    assert strnstr("hello world", "world", 10) is None


def test_strnstr_absent():
    assert strnstr("hello", "xyz", 5) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == "abc"


def test_strnstr_both_missing():
    assert strnstr(None, None, 3) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "b", -1)