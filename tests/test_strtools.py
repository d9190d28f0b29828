import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.chars import toupper
from libft.strtools import (
    split,
    strchr,
    strdup,
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

text = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=126))
small = st.integers(min_value=0, max_value=40)


def test_strlen_empty():
    assert strlen("") == 0


@given(text, text)
def test_strlen_is_additive(a, b):
    assert strlen(a + b) == strlen(a) + strlen(b)


def test_strlen_rejects_non_string():
    with pytest.raises(TypeError):
        strlen(None)


def test_strlcpy_truncates():
    result, length = strlcpy("hello", 3)
    assert result == "he"
    assert length == len("hello")


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


@given(text, st.integers(min_value=1, max_value=40))
def test_strlcpy_prefix(src, size):
    result, length = strlcpy(src, size)
    assert src.startswith(result)
    assert len(result) == min(len(src), size - 1)
    assert length == len(src)


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_fits():
    assert strlcat("ab", "cd", 10) == ("abcd", len("abcd"))


def test_strlcat_no_room_left():
    result, length = strlcat("ab", "cd", 3)
    assert result == "ab"
    assert length == len("ab") + len("cd")


def test_strlcat_size_not_above_dst():
    result, length = strlcat("ab", "cd", 1)
    assert result == "ab"
    assert length == 1 + len("cd")


@given(text, text, small)
def test_strlcat_result_is_bounded_prefix(dst, src, size):
    result, _ = strlcat(dst, src, size)
    full = dst + src
    assert full.startswith(result)
    assert len(result) >= len(dst)
    if len(dst) < size:
        assert len(result) <= size - 1


def test_strchr_finds_first():
    s = "banana"
    idx = strchr(s, "a")
    assert s[idx] == "a"
    assert "a" not in s[:idx]


def test_strchr_nul_is_end():
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", 0) == len("abc")


def test_strchr_missing():
    assert strchr("abc", "z") is None


def test_strchr_int_matches_str():
    assert strchr("abc", ord("b")) == strchr("abc", "b")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@given(text, st.characters(min_codepoint=1, max_codepoint=126))
def test_strrchr_finds_last(s, c):
    idx = strrchr(s, c)
    if c in s:
        assert s[idx] == c
        assert c not in s[idx + 1 :]
    else:
        assert idx is None


def test_strrchr_nul_is_end():
    assert strrchr("abc", 0) == len("abc")


@given(text, small)
def test_strncmp_equal_is_zero(s, n):
    assert strncmp(s, s, n) == 0


def test_strncmp_ordering():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 3) == -ord("c")


def test_strncmp_zero_length():
    assert strncmp("x", "y", 0) == 0


@given(text, text, small)
def test_strncmp_antisymmetric(a, b, n):
    assert strncmp(a, b, n) == -strncmp(b, a, n)


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_found_within_limit():
    big = "foo bar"
    idx = strnstr(big, "bar", len(big))
    assert big[idx : idx + len("bar")] == "bar"


def test_strnstr_beyond_limit():
    assert strnstr("foo bar", "bar", len("foo bar") - 1) is None


@given(text, text, small)
def test_strnstr_match_within_limit(big, little, n):
    idx = strnstr(big, little, n)
    if idx is not None:
        assert big[idx : idx + len(little)] == little
        assert idx + len(little) <= max(n, len(little) if not little else n)


@given(text)
def test_strdup_equal(s):
    assert strdup(s) == s


@given(text, text)
def test_strjoin_parts(a, b):
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end():
    assert substr("hello", 10, 3) == ""


@given(text, small, small)
def test_substr_length_bound(s, start, length):
    part = substr(s, start, length)
    assert len(part) <= length
    assert part in s


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strtrim_example():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_all_trimmed():
    assert strtrim("xxxx", "x") == ""


@given(text, text)
def test_strtrim_ends_clean(s, charset):
    trimmed = strtrim(s, charset)
    assert trimmed in s
    if trimmed:
        assert trimmed[0] not in charset
        assert trimmed[-1] not in charset


def test_strtrim_rejects_none():
    with pytest.raises(TypeError):
        strtrim(None, "x")


def test_split_drops_empty_words():
    assert split("  a  b ", " ") == ["a", "b"]


def test_split_empty():
    assert split("", ",") == []


@given(text, st.characters(min_codepoint=1, max_codepoint=126))
def test_split_invariants(s, sep):
    words = split(s, sep)
    assert all(words)
    assert all(sep not in w for w in words)
    assert "".join(words) == s.replace(sep, "")


def test_split_rejects_none():
    with pytest.raises(TypeError):
        split(None, " ")


def test_strmapi_upper():
    assert strmapi("abc", lambda i, ch: toupper(ch)) == "ABC"


@given(text)
def test_strmapi_sees_indices(s):
    seen = []

    def record(i, ch):
        seen.append((i, ch))
        return ch

    assert strmapi(s, record) == s
    assert seen == list(enumerate(s))


def test_strmapi_rejects_none():
    with pytest.raises(TypeError):
        strmapi("abc", None)


def test_striteri_in_place():
    chars = list("abc")
    result = striteri(chars, lambda i, ch: toupper(ch) if i == 1 else ch)
    assert result is chars
    assert chars == ["a", toupper("b"), "c"]


@given(text)
def test_striteri_identity(s):
    chars = list(s)
    assert striteri(chars, lambda i, ch: ch) == list(s)