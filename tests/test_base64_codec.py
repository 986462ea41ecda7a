import base64
import os

import pytest

from cubes.base64_codec import decode, encode, encode_mime, encode_pem


def test_encode_worked_example():
    assert encode(b"Man") == "TWFu"


def test_encode_url_alphabet_and_padding():
    assert encode(b"\xfb\xff", url=True) == "-_8."
    assert encode(b"\xfb\xff") == "+/8="


@pytest.mark.parametrize("size", [0, 1, 2, 3, 4, 5, 31, 100])
def test_encode_matches_standard_library(size):
    data = os.urandom(size)
    assert encode(data) == base64.b64encode(data).decode("ascii")


def test_encode_accepts_text_as_utf8():
    assert encode("héllo") == encode("héllo".encode("utf-8"))


@pytest.mark.parametrize("size", [0, 1, 2, 3, 10, 257])
@pytest.mark.parametrize("url", [False, True])
def test_round_trip(size, url):
    data = os.urandom(size)
    assert decode(encode(data, url=url)) == data


def test_decode_empty():
    assert decode("") == b""


def test_decode_without_padding_equals_padded():
    assert decode(encode(b"M").rstrip("=")) == b"M"
    assert decode(encode(b"Ma").rstrip("=")) == b"Ma"


def test_decode_accepts_mixed_alphabets():
    data = bytes(range(256))
    standard = encode(data)
    url_safe = encode(data, url=True)
    assert decode(standard) == decode(url_safe) == data


def test_decode_accepts_bytes_input():
    data = b"some bytes"
    assert decode(encode(data).encode("ascii")) == data


@pytest.mark.parametrize("bad", ["TW!u", "T", "TWFuT", "=AAA"])
def test_decode_rejects_invalid(bad):
    with pytest.raises(ValueError):
        decode(bad)


def test_decode_linebreaks_are_invalid_unless_removed():
    data = os.urandom(200)
    wrapped = encode_pem(data)
    with pytest.raises(ValueError):
        decode(wrapped)
    assert decode(wrapped, remove_linebreaks=True) == data


def test_pem_lines():
    data = os.urandom(500)
    text = encode_pem(data)
    lines = text.split("\n")
    assert all(len(line) == 64 for line in lines[:-1])
    assert 0 < len(lines[-1]) <= 64
    assert "".join(lines) == encode(data)


def test_mime_lines():
    data = os.urandom(500)
    text = encode_mime(data)
    lines = text.split("\n")
    assert all(len(line) == 76 for line in lines[:-1])
    assert 0 < len(lines[-1]) <= 76
    assert decode(text, remove_linebreaks=True) == data


def test_line_break_variants_of_empty_input():
    assert encode_pem(b"") == ""
    assert encode_mime(b"") == ""