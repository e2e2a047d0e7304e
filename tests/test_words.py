import pytest

from pipework.chars import to_upper
from pipework.words import (
    each_indexed,
    join,
    map_indexed,
    split_words,
    substring,
    trim,
)


def test_substring_middle():
    assert substring("hello", 1, 3) == "ell"


def test_substring_size_past_end_is_clamped():
    assert substring("hello", 2, 100) == "hello"[2:]


def test_substring_start_past_end_is_empty():
    assert substring("hello", 5, 3) == ""
    assert substring("hello", 50, 3) == ""


def test_substring_stops_at_nul():
    assert substring("ab\0cd", 0, 10) == "ab"


def test_substring_rejects_negative():
    with pytest.raises(ValueError):
        substring("hello", -1, 2)
    with pytest.raises(ValueError):
        substring("hello", 0, -2)


def test_join_concatenates():
    assert join("PATH", "=/bin") == "PATH=/bin"
    assert join("", "") == ""


def test_trim_both_ends():
    assert trim("  xx  ", " ") == "xx"
    assert trim("--a-b--", "-") == "a-b"


def test_trim_everything_removed():
    assert trim("aaa", "a") == ""
    assert trim("", "a") == ""


def test_trim_empty_set_keeps_text():
    assert trim("  keep ", "") == "  keep "


def test_split_words_drops_empty():
    assert split_words("  ls   -l  -a ", " ") == ["ls", "-l", "-a"]


def test_split_words_only_separators():
    assert split_words("::::", ":") == []
    assert split_words("", ":") == []


def test_split_words_round_trip():
    words = ["/usr/bin", "/bin", "/sbin"]
    assert split_words(":".join(words), ":") == words


def test_split_words_rejects_long_separator():
    with pytest.raises(ValueError):
        split_words("a b", "  ")


def test_map_indexed_upper():
    assert map_indexed("abc", lambda i, c: to_upper(c)) == "ABC"


def test_map_indexed_sees_indices():
    seen = []

    def record(i, c):
        seen.append(i)
        return c

    assert map_indexed("xyz", record) == "xyz"
    assert seen == [0, 1, 2]


def test_each_indexed_replaces_in_place():
    chars = list("abc")
    each_indexed(chars, lambda i, c: to_upper(c) if i % 2 == 0 else None)
    assert chars == ["A", "b", "C"]


def test_each_indexed_stops_at_nul():
    chars = ["a", "\0", "b"]
    each_indexed(chars, lambda i, c: "z")
    assert chars == ["z", "\0", "b"]