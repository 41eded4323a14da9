import os

import pytest

from cipherkit.encoding import (
    b64decode,
    b64encode,
    decode_text,
    encode_text,
    encode_text_lenient,
)
from cipherkit.errors import InvalidEncoding


def test_b64_round_trip_bytes():
    for data in (b"", b"\x00", b"foobar", os.urandom(64), bytes(range(256))):
        assert b64decode(b64encode(data)) == data


def test_b64_round_trip_string():
    for text in ("", "Zm9vYmFy", "Zm9vYg==", "Zm9vYmE="):
        assert b64encode(b64decode(text)) == text


def test_b64encode_uses_standard_padded_alphabet():
    assert b64encode(b"\xfb\xff") == "+/8="


@pytest.mark.parametrize("bad", ["Zm9vYg", "Zm9v YmFy", "-_8=", "not base64!", "ÿÿÿÿ"])
def test_b64decode_rejects_malformed_input(bad):
    with pytest.raises(InvalidEncoding):
        b64decode(bad)


def test_invalid_encoding_is_value_error():
    with pytest.raises(ValueError):
        b64decode("%%%")


def test_text_codec_is_utf8():
    assert encode_text("héllo") == "héllo".encode("utf-8")
    assert decode_text("héllo".encode("utf-8")) == "héllo"
    with pytest.raises(InvalidEncoding):
        decode_text(b"\xff\xfe")


@pytest.mark.parametrize("non_canonical", ["Zm9=", "Zh==", "Zm9vYmF="])
def test_b64decode_rejects_non_canonical_padding_bits(non_canonical):
    with pytest.raises(InvalidEncoding):
        b64decode(non_canonical)


def test_lenient_text_encoding_replaces_lone_surrogates():
    assert encode_text_lenient("a\ud800b") == "a\ufffdb".encode("utf-8")
    assert encode_text_lenient("\ud83d\ude00") == "\U0001f600".encode("utf-8")
    assert encode_text_lenient("héllo") == encode_text("héllo")


def test_strict_text_encoding_rejects_lone_surrogates():
    with pytest.raises(UnicodeEncodeError):
        encode_text("\ud800")
