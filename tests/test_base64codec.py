import base64

import pytest

from avantutil.base64codec import Base64Error, decode, encode, encode_mime, encode_pem


SAMPLES = [b"", b"M", b"Ma", b"Man", b"hello world", bytes(range(256))]


@pytest.mark.parametrize("data", SAMPLES)
def test_encode_matches_standard_alphabet(data):
    assert encode(data) == base64.b64encode(data).decode("ascii")


def test_encode_pinned_value():
    assert encode(b"Man") == "TWFu"


def test_encode_accepts_text_as_utf8():
    assert encode("héllo") == encode("héllo".encode("utf-8"))


def test_url_encoding_uses_url_alphabet_and_dot_padding():
    data = b"\xfb\xff"
    result = encode(data, url=True)
    assert result == "-_8."
    assert "+" not in result and "/" not in result and "=" not in result


def test_url_encoding_without_padding_matches_urlsafe():
    data = bytes(range(255))
    assert encode(data, url=True) == base64.urlsafe_b64encode(data).decode("ascii")


@pytest.mark.parametrize("data", SAMPLES)
def test_round_trip(data):
    assert decode(encode(data)) == data


@pytest.mark.parametrize("data", SAMPLES)
def test_round_trip_url(data):
    assert decode(encode(data, url=True)) == data


@pytest.mark.parametrize("data", [b"M", b"Ma", b"Man", b"hello"])
def test_decode_accepts_missing_padding(data):
    assert decode(encode(data).rstrip("=")) == data


def test_decode_empty():
    assert decode("") == b""


def test_decode_accepts_bytes_input():
    data = b"some bytes here"
    assert decode(encode(data).encode("ascii")) == data


def test_decode_rejects_invalid_character():
    with pytest.raises(Base64Error):
        decode("TW*u")


def test_decode_rejects_dangling_character():
    with pytest.raises(Base64Error):
        decode(encode(b"Man") + "T")


def test_decode_rejects_newline_unless_removed():
    data = bytes(range(200))
    wrapped = encode_pem(data)
    assert "\n" in wrapped
    with pytest.raises(Base64Error):
        decode(wrapped)
    assert decode(wrapped, remove_linebreaks=True) == data


def test_error_is_value_error():
    with pytest.raises(ValueError):
        decode("@@@@")


def test_pem_lines_are_64_wide():
    data = bytes(range(256)) * 2
    lines = encode_pem(data).split("\n")
    assert all(len(line) == 64 for line in lines[:-1])
    assert 0 < len(lines[-1]) <= 64
    assert "".join(lines) == encode(data)


def test_mime_lines_are_76_wide():
    data = bytes(range(256)) * 2
    lines = encode_mime(data).split("\n")
    assert all(len(line) == 76 for line in lines[:-1])
    assert 0 < len(lines[-1]) <= 76
    assert "".join(lines) == encode(data)


def test_wrapping_exact_multiple_has_no_trailing_newline():
    data = b"x" * 48  # encodes to exactly 64 characters
    result = encode_pem(data)
    assert not result.endswith("\n")
    assert result == encode(data)


def test_wrapping_empty():
    assert encode_pem(b"") == ""
    assert encode_mime(b"") == ""