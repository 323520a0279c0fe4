import datetime

import pytest

from gapirest.transcoding import (FieldKind, TranscodingError, decode_base64, decode_date, decode_int64,
                                  decode_timestamp, decode_value, encode_base64, encode_date, encode_int64,
                                  encode_timestamp, encode_value)

UTC = datetime.timezone.utc

def test_base64_lengths():
    for b in [b"", b"\x00", b"ab", b"abc", b"abcd", b"abcde", bytes(range(256))]:
        assert(decode_base64(encode_base64(b)) == b)

def test_base64_padding():
    assert(encode_base64(b"") == "")
    assert(encode_base64(b"f") == "Zg==")
    assert(encode_base64(b"fo") == "Zm8=")
    assert(encode_base64(b"foo") == "Zm9v")
    assert(encode_base64(bytes([0xDE, 0xAD, 0xBE, 0xEF])) == "3q2+7w==")
    assert(decode_base64("3q2+7w==") == bytes([0xDE, 0xAD, 0xBE, 0xEF]))

def test_base64_high_bytes():
    # every byte value survives, not just the latin-1 printable range
    b = bytes([0x80, 0xFF, 0x00, 0xC3, 0xA9])
    assert(decode_base64(encode_base64(b)) == b)

def test_base64_malformed():
    for bad in ["3q2+7w=", "@@@@", "3q2-7w==", "Zg", "Zg=\n="]:
        with pytest.raises(TranscodingError) as e:
            decode_base64(bad)
        assert(e.value.kind == FieldKind.BYTES)
        assert(e.value.value == bad)

def test_base64_non_ascii():
    with pytest.raises(TranscodingError):
        decode_base64("3q2é7w==")

def test_base64_wrong_type():
    with pytest.raises(TranscodingError):
        encode_base64("not bytes")
    with pytest.raises(TranscodingError):
        decode_base64(1234)

def test_base64_passthrough():
    assert(decode_base64(b"\x01\x02") == b"\x01\x02")
    assert(encode_base64(bytearray(b"foo")) == "Zm9v")

def test_int64():
    for n in [0, 1, -1, 2**53 - 1, 2**53 + 1, 9007199254740993, 2**63 - 1, -(2**63)]:
        assert(encode_int64(n) == str(n))
        assert(decode_int64(encode_int64(n)) == n)
    assert(decode_int64("+42") == 42)
    assert(decode_int64(42) == 42)

def test_int64_malformed():
    for bad in ["", "12a", "1.5", " 12", "1_000", "0x10", "abc", "12\n", "-3\n"]:
        with pytest.raises(TranscodingError) as e:
            decode_int64(bad)
        assert(e.value.kind == FieldKind.INT64)
    with pytest.raises(TranscodingError):
        decode_int64(True)
    with pytest.raises(TranscodingError):
        encode_int64(False)
    with pytest.raises(TranscodingError):
        encode_int64("12")

def test_timestamp_encode():
    t = datetime.datetime(2024, 1, 15, 10, 30, tzinfo=UTC)
    assert(encode_timestamp(t) == "2024-01-15T10:30:00.000Z")
    # naive is taken as UTC
    assert(encode_timestamp(datetime.datetime(2024, 1, 15, 10, 30)) == "2024-01-15T10:30:00.000Z")
    # other offsets are normalised to UTC
    t = datetime.datetime(2024, 1, 15, 12, 30, 0, 123000, tzinfo=datetime.timezone(datetime.timedelta(hours=2)))
    assert(encode_timestamp(t) == "2024-01-15T10:30:00.123Z")

def test_timestamp_decode():
    t = decode_timestamp("2024-01-15T10:30:00.000Z")
    assert(t == datetime.datetime(2024, 1, 15, 10, 30, tzinfo=UTC))
    assert(t.tzinfo is not None)
    assert(decode_timestamp("2024-01-15T12:30:00+02:00") == t)
    assert(decode_timestamp("2024-01-15T10:30:00") == t)
    assert(decode_timestamp(t) is t)

def test_timestamp_roundtrip():
    for s in ["2024-01-15T10:30:00.000Z", "1970-01-01T00:00:00.000Z", "2999-12-31T23:59:59.999Z"]:
        assert(encode_timestamp(decode_timestamp(s)) == s)
    t = datetime.datetime(2023, 6, 1, 8, 0, 0, 250000, tzinfo=UTC)
    assert(decode_timestamp(encode_timestamp(t)) == t)

def test_timestamp_malformed():
    for bad in ["", "yesterday", "2024-13-01T00:00:00Z", "2024-01-15T25:00:00Z"]:
        with pytest.raises(TranscodingError) as e:
            decode_timestamp(bad)
        assert(e.value.kind == FieldKind.TIMESTAMP)
    with pytest.raises(TranscodingError):
        decode_timestamp(1705314600)
    with pytest.raises(TranscodingError):
        encode_timestamp("2024-01-15T10:30:00.000Z")

def test_date():
    d = datetime.date(2024, 2, 29)
    assert(encode_date(d) == "2024-02-29")
    assert(decode_date("2024-02-29") == d)
    assert(encode_date(datetime.datetime(2024, 2, 29, 23, 0)) == "2024-02-29")
    with pytest.raises(TranscodingError):
        decode_date("2023-02-29")

def test_value_shapes():
    assert(encode_value(FieldKind.INT64, None) is None)
    assert(decode_value(FieldKind.INT64, None, repeated=True) is None)
    assert(encode_value(FieldKind.INT64, [1, 2**60], repeated=True) == ["1", str(2**60)])
    assert(decode_value(FieldKind.INT64, {"a": "5", "b": "-7"}, mapped=True) == {"a": 5, "b": -7})
    assert(decode_value(FieldKind.BYTES, [], repeated=True) == [])
    with pytest.raises(TypeError):
        decode_value(FieldKind.INT64, "5", repeated=True)
    with pytest.raises(TypeError):
        decode_value(FieldKind.INT64, ["5"], mapped=True)

def test_null_elements_pass_through():
    assert(decode_value(FieldKind.INT64, ["5", None], repeated=True) == [5, None])
    assert(encode_value(FieldKind.INT64, [None, 7], repeated=True) == [None, "7"])
    assert(decode_value(FieldKind.BYTES, {"a": None}, mapped=True) == {"a": None})

def test_error_message():
    e = TranscodingError(FieldKind.INT64, "abc", "expected decimal string", "file.size")
    assert(isinstance(e, ValueError))
    assert("file.size" in str(e))
    assert("int64" in str(e))
