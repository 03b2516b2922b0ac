import pytest

from solong.chars import to_upper
from solong.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_matches_len():
    assert strlen("") == 0
    text = "so_long map"
    assert strlen(text) == len(text)


def test_strlen_rejects_non_string():
    with pytest.raises(TypeError):
        strlen(None)


@pytest.mark.parametrize("text,ch", [("hello", "l"), ("banana", "a"), ("abc", "a")])
def test_strchr_finds_first(text, ch):
    index = strchr(text, ch)
    assert text[index] == ch
    assert ch not in text[:index]


def test_strchr_missing_and_terminator():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strchr_accepts_integer_code():
    assert strchr("hello", ord("e")) == strchr("hello", "e")


def test_strchr_rejects_long_needle():
    with pytest.raises(ValueError):
        strchr("hello", "he")


@pytest.mark.parametrize("text,ch", [("hello", "l"), ("banana", "a"), ("abc", "c")])
def test_strrchr_finds_last(text, ch):
    index = strrchr(text, ch)
    assert text[index] == ch
    assert ch not in text[index + 1:]


def test_strrchr_missing_and_terminator():
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")


def test_strncmp_equal_and_limited():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("a", "b", 0) == 0


def test_strncmp_difference_of_codes():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_shorter_string_counts_as_zero():
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 3) == ord("c")


def test_strncmp_negative_n_raises():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_found_within_length():
    big, little = "lorem ipsum dolor", "ipsum"
    index = strnstr(big, little, len(big))
    assert big[index:index + len(little)] == little


def test_strnstr_match_must_fit_inside_length():
    big, little = "lorem ipsum dolor", "ipsum"
    start = big.index(little)
    assert strnstr(big, little, start + len(little) - 1) is None
    assert strnstr(big, little, start + len(little)) == start


def test_strnstr_missing():
    assert strnstr("abc", "xyz", 3) is None


def test_substr_slices_and_clips():
    text = "hello world"
    assert substr(text, 2, 100) == text[2:]
    assert substr(text, 0, 5) == text[:5]
    assert substr(text, len(text), 3) == ""
    assert substr(text, 50, 3) == ""


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("so_", "long") == "so_long"
    assert strjoin("", "") == ""


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyx", "xy") == ""


def test_strtrim_empty_charset_keeps_text():
    text = "  spaced  "
    assert strtrim(text, "") == text


def test_strtrim_keeps_inner_characters():
    text = "-a-b-"
    result = strtrim(text, "-")
    assert result[0] != "-" and result[-1] != "-"
    assert result in text


@pytest.mark.parametrize("text,sep", [("a,,b,c,", ","), ("  two  words ", " "), ("none", ",")])
def test_split_drops_empty_words(text, sep):
    words = split(text, sep)
    assert all(words)
    assert all(sep not in word for word in words)
    assert "".join(words) == text.replace(sep, "")


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a::b", "::")


def test_strlcpy_fits_and_truncates():
    src = "abcdef"
    copied, total = strlcpy(src, 100)
    assert (copied, total) == (src, len(src))
    copied, total = strlcpy(src, 4)
    assert len(copied) == 3 and src.startswith(copied)
    assert total == len(src)


def test_strlcpy_size_zero():
    assert strlcpy("abc", 0) == ("", len("abc"))


def test_strlcat_room_too_small_leaves_dst():
    result, total = strlcat("hello", "xyz", 3)
    assert result == "hello"
    assert total == 3 + len("xyz")


def test_strlcat_fits():
    result, total = strlcat("foo", "bar", 100)
    assert result == "foo" + "bar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates_to_size_minus_one():
    result, total = strlcat("foo", "barbaz", 6)
    assert len(result) == 5
    assert result.startswith("foo")
    assert total == len("foo") + len("barbaz")


def test_strmapi_applies_function_with_index():
    assert strmapi("abc", lambda i, ch: to_upper(ch)) == "ABC"
    indices = []
    strmapi("xyz", lambda i, ch: indices.append(i) or ch)
    assert indices == [0, 1, 2]


def test_strmapi_identity_is_copy():
    text = "map"
    assert strmapi(text, lambda i, ch: ch) == text


def test_striteri_in_place():
    chars = list("abcd")
    returned = striteri(chars, lambda i, ch: to_upper(ch) if i % 2 == 0 else None)
    assert returned is chars
    assert chars == ["A", "b", "C", "d"]


def test_striteri_requires_callable():
    with pytest.raises(TypeError):
        striteri(list("ab"), None)