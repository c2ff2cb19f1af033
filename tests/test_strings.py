import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.strings import (
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

ascii_text = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=127))


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@given(ascii_text)
def test_split_words_contain_no_separator(s):
    words = split(s, " ")
    assert all(word and " " not in word for word in words)
    assert "".join(words) == s.replace(" ", "")


def test_strchr_finds_first():
    s = "banana"
    assert strchr(s, "a") == s.index("a")
    assert strchr(s, ord("n")) == s.index("n")


def test_strchr_missing_and_terminator():
    assert strchr("abc", "z") is None
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", 0) == len("abc")


def test_strrchr_finds_last():
    s = "banana"
    assert strrchr(s, "a") == s.rindex("a")
    assert strrchr(s, "z") is None
    assert strrchr(s, "\0") == len(s)


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")
    with pytest.raises(TypeError):
        strchr("abc", 1.5)


def test_striteri_replaces_in_place():
    chars = list("abcd")
    seen = []

    def upper_odd(index, ch):
        seen.append(index)
        return ch.upper() if index % 2 else None

    striteri(chars, upper_odd)
    assert chars == ["a", "B", "c", "D"]
    assert seen == [0, 1, 2, 3]


def test_strmapi_passes_index():
    result = strmapi("abc", lambda i, ch: ch * (i + 1))
    assert result == "a" + "bb" + "ccc"


@given(ascii_text)
def test_strmapi_identity(s):
    assert strmapi(s, lambda i, ch: ch) == s


@given(ascii_text, ascii_text)
def test_strjoin_concatenates(a, b):
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined[len(a):] == b


def test_strlcat_fits():
    assert strlcat("foo", "bar", 10) == ("foobar", len("foobar"))


def test_strlcat_truncates():
    text, length = strlcat("foo", "bar", 5)
    assert text == "foob"
    assert length == len("foo") + len("bar")


def test_strlcat_no_room():
    assert strlcat("foo", "bar", 0) == ("foo", len("bar"))
    assert strlcat("foo", "bar", 2) == ("foo", len("bar") + 2)


@given(ascii_text, ascii_text, st.integers(min_value=0, max_value=300))
def test_strlcat_bounded(dest, src, size):
    text, _ = strlcat(dest, src, size)
    assert text.startswith(dest)
    assert len(text) <= max(len(dest), size - 1)


def test_strlcpy():
    assert strlcpy("hello", 3) == ("he", len("hello"))
    assert strlcpy("hello", 0) == ("", len("hello"))
    assert strlcpy("hello", 100) == ("hello", len("hello"))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


@given(ascii_text)
def test_strlen_matches_len(s):
    assert strlen(s) == len(s)


def test_strncmp_equal_prefix():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


@given(ascii_text, ascii_text, st.integers(min_value=0, max_value=50))
def test_strncmp_antisymmetric(a, b, n):
    assert strncmp(a, b, n) == -strncmp(b, a, n)


def test_strnstr():
    hay = "Foo Bar Baz"
    assert strnstr(hay, "Bar", len(hay)) == hay.index("Bar")
    assert strnstr(hay, "Bar", 6) is None
    assert strnstr(hay, "Bar", 7) == hay.index("Bar")
    assert strnstr(hay, "", 0) == 0
    assert strnstr(hay, "Qux", len(hay)) is None


def test_strtrim():
    assert strtrim("xxhixyx", "xy") == "hi"
    assert strtrim("xyx", "xy") == ""
    assert strtrim("  keep  ", "") == "  keep  "


@given(ascii_text)
def test_strtrim_ends_clean(s):
    trimmed = strtrim(s, "ab")
    assert trimmed in s
    if trimmed:
        assert trimmed[0] not in "ab" and trimmed[-1] not in "ab"


def test_substr():
    s = "hello world"
    assert substr(s, 6, 5) == "world"
    assert substr(s, 6, 100) == "world"
    assert substr(s, 20, 3) == ""
    assert substr(s, 0, 0) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)