import pytest

from cstrkit.errors import strerror


def test_linux_success():
    assert strerror(0, "linux") == "Success"


def test_linux_known_codes():
    assert strerror(2, "linux") == "No such file or directory"
    assert strerror(41, "linux") == "Unknown error 41"
    assert strerror(133, "linux") == "Memory page has hardware error"


def test_linux_negative():
    assert strerror(-1, "linux") == "Unknown error -1"


def test_linux_large():
    assert strerror(404, "linux") == "Unknown error 404"


def test_linux_first_unknown():
    assert strerror(134, "linux") == "Unknown error 134"


def test_linux_range_has_no_empty_messages():
    for code in range(-1000, 150):
        message = strerror(code, "linux")
        assert message
        if code < 0 or code >= 134:
            assert message == f"Unknown error {code}"


def test_darwin_known_codes():
    assert strerror(0, "darwin") == "Undefined error: 0"
    assert strerror(35, "darwin") == "Resource temporarily unavailable"
    assert strerror(106, "darwin") == "Interface output queue is full"


def test_darwin_unknown():
    assert strerror(-1, "darwin") == "Unknown error: -1"
    assert strerror(107, "darwin") == "Unknown error: 107"
    assert strerror(404, "darwin") == "Unknown error: 404"


def test_unsupported_platform():
    with pytest.raises(ValueError):
        strerror(1, "plan9")