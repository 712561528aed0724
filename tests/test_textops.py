import pytest

from minish.textops import (
    bounded_concat,
    concat_n,
    copy_n,
    duplicate,
    duplicate_n,
    join,
    join3,
    length,
    substring,
    trim,
)


def test_length_of_text_and_missing():
    text = "minishell"
    assert length(text) == len(text)
    assert length(None) == 0
    assert length("") == 0


def test_join_keeps_both_parts_in_order():
    a, b = "left", "right"
    result = join(a, b)
    assert result.startswith(a)
    assert result.endswith(b)
    assert len(result) == len(a) + len(b)


@pytest.mark.parametrize("a, b", [(None, "x"), ("x", None), (None, None)])
def test_join_with_missing_part_is_none(a, b):
    assert join(a, b) is None


def test_join3_builds_path_like_text():
    assert join3("/bin", "/", "ls") == "/bin/ls"


def test_join3_matches_nested_join():
    a, b, c = "KEY", "=", "value"
    assert join3(a, b, c) == join(a, join(b, c))


@pytest.mark.parametrize(
    "a, b, c", [(None, "b", "c"), ("a", None, "c"), ("a", "b", None)]
)
def test_join3_with_missing_part_is_none(a, b, c):
    assert join3(a, b, c) is None


def test_concat_n_takes_only_n_characters():
    dest, src = "abc", "defgh"
    result = concat_n(dest, src, 2)
    assert result.startswith(dest)
    assert len(result) == len(dest) + 2
    assert result[len(dest):] == src[:2]


def test_concat_n_larger_than_source_appends_all():
    dest, src = "abc", "de"
    assert concat_n(dest, src, 100) == join(dest, src)


def test_concat_n_negative_count_raises():
    with pytest.raises(ValueError):
        concat_n("a", "b", -1)


def test_bounded_concat_with_room_appends_everything():
    dest, src = "abc", "defg"
    result, total = bounded_concat(dest, src, 10)
    assert result == join(dest, src)
    assert total == len(dest) + len(src)


def test_bounded_concat_truncates_to_size_minus_one():
    dest, src = "abc", "defg"
    size = 5
    result, total = bounded_concat(dest, src, size)
    assert len(result) == size - 1
    assert result.startswith(dest)
    assert total == len(dest) + len(src)


def test_bounded_concat_dest_longer_than_size_is_unchanged():
    dest, src = "abcdef", "xyz"
    size = 3
    result, total = bounded_concat(dest, src, size)
    assert result == dest
    assert total == size + len(src)


def test_bounded_concat_zero_size_reports_dest_length():
    dest = "abc"
    result, total = bounded_concat(dest, "zzz", 0)
    assert result == dest
    assert total == len(dest)


def test_copy_n_pads_with_nul():
    src = "ab"
    result = copy_n(src, 5)
    assert len(result) == 5
    assert result.startswith(src)
    assert set(result[len(src):]) == {"\0"}


def test_copy_n_truncates_long_source():
    src = "abcdef"
    assert copy_n(src, 3) == src[:3]


def test_copy_n_zero_is_empty():
    assert copy_n("abc", 0) == ""


def test_duplicate_returns_equal_text():
    text = "hello"
    assert duplicate(text) == text


@pytest.mark.parametrize("text", ["", None])
def test_duplicate_of_empty_or_missing_is_none(text):
    assert duplicate(text) is None


def test_duplicate_n_short_count_truncates():
    text = "abcdef"
    assert duplicate_n(text, 4) == text[:4]


def test_duplicate_n_large_count_copies_whole():
    text = "abc"
    assert duplicate_n(text, 10) == text


@pytest.mark.parametrize("text, n", [("", 3), (None, 3), ("abc", 0)])
def test_duplicate_n_gives_none(text, n):
    assert duplicate_n(text, n) is None


def test_substring_takes_requested_range():
    text = "environment"
    assert substring(text, 3, 4) == text[3:7]


def test_substring_of_missing_text_is_none():
    assert substring(None, 0, 1) is None


def test_substring_past_end_raises():
    with pytest.raises(IndexError):
        substring("abc", 2, 5)


def test_substring_negative_start_raises():
    with pytest.raises(ValueError):
        substring("abc", -1, 1)


def test_trim_strips_spaces_tabs_newlines():
    word = "hi there"
    assert trim(" \t\n" + word + "\n\t ") == word


def test_trim_keeps_other_whitespace():
    text = "\rword\r"
    assert trim(text) == text


@pytest.mark.parametrize("text", [None, "", " \t\n "])
def test_trim_empty_result_is_none(text):
    assert trim(text) is None