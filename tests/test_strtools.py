import pytest

from pushswap.chars import tolower
from pushswap.strtools import split, strchr, strdup, striteri, strjoin, strlcat, strlcpy


def test_split_only_separators_gives_nothing():
    assert split("             ", " ") == []


def test_split_drops_empty_words():
    assert split("  12 -4   7 ", " ") == ["12", "-4", "7"]


@pytest.mark.parametrize("text", ["a b c", "  lead", "trail  ", "one", ""])
def test_split_words_have_no_separator(text):
    words = split(text, " ")
    assert all(word and " " not in word for word in words)
    assert " ".join(words) == " ".join(text.split())


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strchr_finds_first():
    s = "Bonjour"
    index = strchr(s, "o")
    assert s[index] == "o"
    assert "o" not in s[:index]


def test_strchr_missing():
    assert strchr("Bonjour", "d") is None


def test_strchr_nul_is_end():
    assert strchr("Bonjour", "\0") == len("Bonjour")


def test_strdup_equal_copy():
    assert strdup("sdfgh") == "sdfgh"


def test_strdup_rejects_none():
    with pytest.raises(TypeError):
        strdup(None)


def test_striteri_lowercases_in_place():
    chars = list("BJR")
    striteri(chars, lambda index, ch: tolower(ch))
    assert "".join(chars) == "bjr"


def test_striteri_passes_indices():
    seen = []
    chars = list("abcd")
    striteri(chars, lambda index, ch: seen.append(index) or ch)
    assert seen == list(range(len(chars)))
    assert chars == list("abcd")


def test_strjoin_concatenates():
    assert strjoin("Bonjour", "demain") == "Bonjourdemain"


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin("a", None)


def test_strlcat_with_room():
    text, needed = strlcat("42", "Cursus", 50)
    assert text == "42" + "Cursus"
    assert needed == len("42") + len("Cursus")


def test_strlcat_truncates_to_size():
    text, needed = strlcat("ab", "cdefgh", 5)
    assert len(text) == 5 - 1
    assert text.startswith("ab")
    assert "cdefgh".startswith(text[2:])
    assert needed == len("ab") + len("cdefgh")


def test_strlcat_full_destination_unchanged():
    text, needed = strlcat("abcd", "xy", 2)
    assert text == "abcd"
    assert needed == 2 + len("xy")


def test_strlcpy_truncates():
    src = "hello, world."
    copied, length = strlcpy(src, 5)
    assert len(copied) == 5 - 1
    assert src.startswith(copied)
    assert length == len(src)


def test_strlcpy_whole_when_room():
    src = "hello"
    assert strlcpy(src, 50) == (src, len(src))


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcpy_rejects_negative_size():
    with pytest.raises(ValueError):
        strlcpy("hello", -1)