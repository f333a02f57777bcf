import pytest

from cstrkit.strings import (
    Tokenizer,
    strcat,
    strchr,
    strcmp,
    strcpy,
    strcspn,
    strlen,
    strncat,
    strncmp,
    strncpy,
    strpbrk,
    strrchr,
    strspn,
    strstr,
    tokens,
)


def _sign(value):
    return (value > 0) - (value < 0)


@pytest.mark.parametrize(
    "text, expected", [("\0", 0), ("aboba\0test", 5), ("aboba", 5)]
)
def test_strlen(text, expected):
    assert strlen(text) == expected


def test_strcat_basic():
    assert strcat("OK", " TEST!!") == "OK TEST!!"


def test_strcat_empty_dest():
    assert strcat("", " aboba!!!") == " aboba!!!"


def test_strcat_long():
    src = "RTHKJI ouhdfoidfoi dfjpgnfg fdfgfgdfn gr"
    assert strcat("Hello", src) == "Hello" + src


def test_strncat_two():
    assert strncat("123", " boba", 2) == "123 b"


def test_strncat_zero():
    assert strncat("", "", 0) == ""


def test_strncat_five():
    assert strncat("qw", "abboba", 5) == "qwabbob"


def test_strncat_negative():
    with pytest.raises(ValueError):
        strncat("a", "b", -1)


def test_strchr_space():
    assert strchr("Hello world", " ") == 5


def test_strchr_last_char():
    assert strchr("abobaA1", "1") == 6


def test_strchr_empty():
    assert strchr("", "3") is None


def test_strchr_nul_is_terminator():
    assert strchr("abc", 0) == 3


def test_strrchr_nul_in_empty():
    assert strrchr("", "\0") == 0


def test_strrchr_absent():
    assert strrchr("123456789", "0") is None


def test_strrchr_found():
    assert strrchr("boba qwer", "w") == 6


def test_strrchr_last_of_many():
    assert strrchr("abcabc", ord("b")) == 4


def test_strcmp_longer_first():
    assert _sign(strcmp("Heloboba", "")) == 1


def test_strcmp_both_empty():
    assert strcmp("", "") == 0


def test_strcmp_equal():
    assert strcmp("1234567890", "1234567890") == 0


def test_strcmp_less():
    assert strcmp("abc", "abd") < 0


def test_strncmp_zero_count():
    assert strncmp("", "boba", 0) == 0


def test_strncmp_one():
    assert strncmp("boba", "boba", 1) == 0


def test_strncmp_empty():
    assert strncmp("", "", 0) == 0


def test_strncmp_difference_beyond_limit():
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abcx", "abcy", 4) < 0


def test_strcpy_empty_src():
    result = strcpy("abobas", "")
    assert strlen(result) == 0
    assert result == "\0bobas"


def test_strcpy_longer_src():
    assert strcpy("aboba ", " floppa!!!") == " floppa!!!"


def test_strcpy_embedded_nul():
    result = strcpy("tes\0t", "ab\0ba")
    assert result.partition("\0")[0] == "ab"


def test_strncpy_prefix():
    assert strncpy("1111111111", "123\0", 3) == "1231111111"


def test_strncpy_zero():
    assert strncpy("123", "123", 0) == "123"


def test_strncpy_empty():
    assert strncpy("", "", 0) == ""


def test_strncpy_pads_with_nul():
    assert strncpy("abcdef", "ab", 4) == "ab\0\0ef"


@pytest.mark.parametrize(
    "text, reject, expected",
    [("this is a test", "ab", 8), ("123", "123", 0), ("123", "1A2A3A4A5A", 0)],
)
def test_strcspn(text, reject, expected):
    assert strcspn(text, reject) == expected


@pytest.mark.parametrize(
    "text, accept, expected",
    [("", "", 0), ("123", "123", 3), ("0987654321", "1234567890", 10)],
)
def test_strspn(text, accept, expected):
    assert strspn(text, accept) == expected


def test_strpbrk_empty():
    assert strpbrk("", "") is None


def test_strpbrk_found():
    assert strpbrk("boba qwer", "w") == 6


def test_strpbrk_absent():
    assert strpbrk("this_is_boba_", "369") is None


def test_strstr_both_empty():
    assert strstr("", "") == 0


def test_strstr_empty_needle():
    assert strstr("routorituyiortuyIGIGUIGiuhouigiugIUG", "") == 0


def test_strstr_found():
    assert strstr("22 321 123", "123") == 7


def test_strstr_absent():
    assert strstr("abc", "abcd") is None


def test_tokens_slashes():
    assert list(tokens("/testing/with/original/string.h/", "/")) == [
        "testing",
        "with",
        "original",
        "string.h",
    ]


def test_tokenizer_only_delimiters():
    assert Tokenizer("++++++++").next_token("+_! =") is None


def test_tokenizer_sequence_then_none():
    tokenizer = Tokenizer("Aboba_Floppa_test")
    results = [tokenizer.next_token("+_! =") for _ in range(6)]
    assert results == ["Aboba", "Floppa", "test", None, None, None]


def test_tokenizer_changing_delimiters():
    tokenizer = Tokenizer("a,b;c")
    assert tokenizer.next_token(",") == "a"
    assert tokenizer.next_token(";") == "b"
    assert tokenizer.next_token(";") == "c"