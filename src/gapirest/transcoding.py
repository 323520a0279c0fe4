"""
Field transcoding between the JSON wire form used by the Google REST APIs and
the richer Python values held by the resource dataclasses.

The APIs push a handful of value kinds through JSON as strings:
  - timestamps as RFC 3339 strings -> datetime.datetime (UTC aware)
  - calendar dates as YYYY-MM-DD -> datetime.date
  - 64-bit integers as decimal strings -> int (JSON numbers lose precision past 2^53)
  - binary blobs as standard base64 -> bytes

Each kind has an encode (python -> wire) and decode (wire -> python) function.
Decoders are lenient about input that is already decoded so the resource
fixup() can call them on anything a caller hands in.
"""

from collections.abc import Mapping
import base64
import binascii
import datetime
import enum
import re

class TranscodingError(ValueError):
    """A wire value could not be converted for the field it was found in."""

    def __init__(self, kind: "FieldKind", value, reason: str = "", field: str = "") -> None:
        self.kind = kind
        self.value = value
        self.reason = reason
        self.field = field
        super().__init__(str(self))

    def __str__(self) -> str:
        where = f" for field '{self.field}'" if self.field else ""
        msg = f"invalid {self.kind.value} value{where}: {self.value!r}"
        if self.reason:
            msg += f" ({self.reason})"
        return msg

class FieldKind(enum.Enum):
    TIMESTAMP = "timestamp"
    DATE = "date"
    INT64 = "int64"
    BYTES = "bytes"

_INT64_RE = re.compile(r"[+-]?[0-9]+")

def encode_timestamp(value: datetime.datetime) -> str:
    """
    ISO-8601 in UTC with millisecond precision and a 'Z' suffix, which is what
    the APIs hand back and what JS Date.toISOString() produces.
    Naive datetimes are treated as UTC.
    """
    if not isinstance(value, datetime.datetime):
        raise TranscodingError(FieldKind.TIMESTAMP, value, "expected datetime.datetime")
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    utc = value.astimezone(datetime.timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")

def decode_timestamp(value: str|datetime.datetime) -> datetime.datetime:
    """
    Parse an RFC 3339 string.  fromisoformat() handles the 'Z' suffix and
    arbitrary fractional precision (truncated to microseconds) on 3.11+.
    Offset-less strings are taken to be UTC.
    """
    if isinstance(value, datetime.datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=datetime.timezone.utc)
    if not isinstance(value, str):
        raise TranscodingError(FieldKind.TIMESTAMP, value, "expected string")
    try:
        dt = datetime.datetime.fromisoformat(value)
    except ValueError as e:
        raise TranscodingError(FieldKind.TIMESTAMP, value, str(e)) from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=datetime.timezone.utc)
    return dt

def encode_date(value: datetime.date) -> str:
    # datetime is a subclass of date, only the date part goes on the wire
    if isinstance(value, datetime.datetime):
        value = value.date()
    if not isinstance(value, datetime.date):
        raise TranscodingError(FieldKind.DATE, value, "expected datetime.date")
    return value.isoformat()

def decode_date(value: str|datetime.date) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str):
        raise TranscodingError(FieldKind.DATE, value, "expected string")
    try:
        return datetime.date.fromisoformat(value)
    except ValueError as e:
        raise TranscodingError(FieldKind.DATE, value, str(e)) from e

def encode_int64(value: int) -> str:
    # bool is an int subclass but never a valid int64 value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TranscodingError(FieldKind.INT64, value, "expected int")
    return str(value)

def decode_int64(value: str|int) -> int:
    """
    Only plain optionally signed decimal digits are accepted, int() on its own
    would also let through whitespace and '_' separators.
    """
    if isinstance(value, bool):
        raise TranscodingError(FieldKind.INT64, value, "expected decimal string")
    if isinstance(value, int):
        return value
    if not isinstance(value, str) or not _INT64_RE.fullmatch(value):
        raise TranscodingError(FieldKind.INT64, value, "expected decimal string")
    return int(value)

def encode_base64(value: bytes|bytearray|memoryview) -> str:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TranscodingError(FieldKind.BYTES, value, "expected bytes")
    return base64.b64encode(bytes(value)).decode("ascii")

def decode_base64(value: str|bytes) -> bytes:
    """
    Strict RFC 4648 decode: characters outside the standard alphabet or bad
    padding raise rather than being silently dropped.
    Values already held as bytes are passed through.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if not isinstance(value, str):
        raise TranscodingError(FieldKind.BYTES, value, "expected base64 string")
    try:
        return base64.b64decode(value.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise TranscodingError(FieldKind.BYTES, value, str(e)) from e

ENCODERS = {
    FieldKind.TIMESTAMP: encode_timestamp,
    FieldKind.DATE: encode_date,
    FieldKind.INT64: encode_int64,
    FieldKind.BYTES: encode_base64,
}

DECODERS = {
    FieldKind.TIMESTAMP: decode_timestamp,
    FieldKind.DATE: decode_date,
    FieldKind.INT64: decode_int64,
    FieldKind.BYTES: decode_base64,
}

def _apply(func, value, repeated: bool, mapped: bool):
    if value is None:
        return None
    if repeated:
        if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
            raise TypeError(f"expected a list, got {type(value).__name__}")
        return [None if v is None else func(v) for v in value]
    if mapped:
        if not isinstance(value, Mapping):
            raise TypeError(f"expected a mapping, got {type(value).__name__}")
        return {k: None if v is None else func(v) for k, v in value.items()}
    return func(value)

def encode_value(kind: FieldKind, value, repeated: bool = False, mapped: bool = False):
    """
    Encode a python value of the given kind, element-wise for lists and
    value-wise for string keyed maps.  None stays None.
    """
    return _apply(ENCODERS[kind], value, repeated, mapped)

def decode_value(kind: FieldKind, value, repeated: bool = False, mapped: bool = False):
    """Inverse of encode_value()."""
    return _apply(DECODERS[kind], value, repeated, mapped)
