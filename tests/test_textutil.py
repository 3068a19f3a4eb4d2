import pytest

from pushswap.textutil import (
    bounded_concat,
    bounded_copy,
    cat,
    itoa,
    memcmp,
    remove_chars,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("first,second", [("", ""), ("0x", "ff"), ("-", "42")])
def test_cat_joins_in_order(first, second):
    result = cat(first, second)
    assert result.startswith(first)
    assert result.endswith(second)
    assert len(result) == len(first) + len(second)


def test_cat_prefix_example():
    assert cat("0x", "1a") == "0x1a"


def test_cat_missing_string():
    with pytest.raises(TypeError):
        cat(None, "a")


def test_remove_chars_drops_all_listed():
    result = remove_chars("-12-3-", "-")
    assert "-" not in result
    assert result == "123"


def test_remove_chars_keeps_unlisted_text():
    assert remove_chars("abc", "xyz") == "abc"


@pytest.mark.parametrize("number", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trip(number):
    assert int(itoa(number)) == number


def test_itoa_minimum():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)


def test_substr_is_part_of_text():
    text = "(null)"
    result = substr(text, 1, 3)
    assert len(result) == 3
    assert result in text
    assert text.index(result) == 1


def test_substr_start_past_end():
    assert substr("(null)", 10, 3) == ""


def test_substr_length_clipped():
    assert substr("(null)", 0, 100) == "(null)"


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strtrim_removes_ends_only():
    text = "  a b  "
    result = strtrim(text, " ")
    assert not result.startswith(" ")
    assert not result.endswith(" ")
    assert result in text
    assert " " in result


def test_strtrim_all_removed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_charset():
    assert strtrim(" a ", "") == " a "


def test_strnstr_limited_search():
    assert strnstr("Foo Bar Baz", "Bar", 4) is None


def test_strnstr_finds_match():
    big = "Foo Bar Baz"
    index = strnstr(big, "Bar", len(big))
    assert index is not None
    assert big[index:index + 3] == "Bar"


def test_strnstr_empty_little():
    assert strnstr("Foo", "", 0) == 0


def test_strncmp_orders():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("same", "same", 10) == 0


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_bounded_copy_fits():
    copied, length = bounded_copy("0x", 10)
    assert copied == "0x"
    assert length == 2


def test_bounded_copy_truncates():
    src = "abcdef"
    copied, length = bounded_copy(src, 4)
    assert len(copied) == 3
    assert src.startswith(copied)
    assert length == len(src)


def test_bounded_copy_zero_size():
    assert bounded_copy("abc", 0) == ("", 3)


def test_bounded_concat_fits():
    result, length = bounded_concat("0x", "ff", 5)
    assert result == "0xff"
    assert length == 4


def test_bounded_concat_truncates():
    dst, src = "ab", "cdef"
    result, length = bounded_concat(dst, src, 4)
    assert len(result) == 3
    assert (dst + src).startswith(result)
    assert length == len(dst) + len(src)


def test_bounded_concat_full_buffer():
    result, length = bounded_concat("abcd", "ef", 2)
    assert result == "abcd"
    assert length == 2 + len("ef")


def test_memcmp_equal_prefix():
    assert memcmp(b"(null)", b"(null)x", 6) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcmp_too_short():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)