"""
Common base for the resource dataclasses of every API module.

Fields whose wire form differs from their python form are declared with one
of the *_field() helpers below, which tag the dataclass field metadata with
the transcoding kind.  The base class then does the conversions generically:
fixup() brings any wire values into python form (so Resource(**response_dict)
works as well as Resource.from_base()), and to_base() produces the dict to be
JSON encoded for a request.

None is the 'absent' value everywhere.  Absent fields are left out of
to_base() and keys a resource does not declare are carried through untouched.
"""
from collections.abc import Mapping
from dataclasses import field, fields, is_dataclass
from typing import Self
import copy
import sys

from .transcoding import FieldKind, TranscodingError, decode_value, encode_value

_KIND = "gapirest.kind"
_RESOURCE = "gapirest.resource"
_REPEATED = "gapirest.repeated"
_MAPPED = "gapirest.mapped"

# kind tag for nested resources, the scalar kinds come from FieldKind
NESTED = "resource"

def _tagged(kind, repeated: bool, mapped: bool, resource=None):
    if repeated and mapped:
        raise ValueError("a field can be repeated or mapped, not both")
    metadata = {_KIND: kind, _REPEATED: repeated, _MAPPED: mapped}
    if resource is not None:
        metadata[_RESOURCE] = resource
    return field(default=None, metadata=metadata)

def timestamp_field(repeated: bool = False, mapped: bool = False):
    """RFC 3339 string on the wire, datetime.datetime in python."""
    return _tagged(FieldKind.TIMESTAMP, repeated, mapped)

def date_field(repeated: bool = False, mapped: bool = False):
    """YYYY-MM-DD on the wire, datetime.date in python."""
    return _tagged(FieldKind.DATE, repeated, mapped)

def int64_field(repeated: bool = False, mapped: bool = False):
    """Decimal string on the wire, int in python."""
    return _tagged(FieldKind.INT64, repeated, mapped)

def bytes_field(repeated: bool = False, mapped: bool = False):
    """Base64 string on the wire, bytes in python."""
    return _tagged(FieldKind.BYTES, repeated, mapped)

def resource_field(resource: type|str, repeated: bool = False, mapped: bool = False):
    """
    Nested resource.  A class name string can be given for classes defined
    further down the same module.
    """
    return _tagged(NESTED, repeated, mapped, resource)

def _each(func, value, repeated: bool, mapped: bool):
    if repeated:
        if not isinstance(value, (list, tuple)):
            raise TypeError(f"expected a list, got {type(value).__name__}")
        return [None if v is None else func(v) for v in value]
    if mapped:
        if not isinstance(value, Mapping):
            raise TypeError(f"expected a mapping, got {type(value).__name__}")
        return {k: None if v is None else func(v) for k, v in value.items()}
    return func(value)

class GoogleResourceBase():
    """
    Intended to be subclassed by a dataclass but isnt actually a dataclass.
    Subclasses only declare fields, the base __post_init__ runs fixup()
    """

    def __post_init__(self) -> None:
        if not hasattr(self, "_extra"):
            self._extra = {}
        self.fixup()

    @property
    def extra(self) -> dict:
        """Wire keys received that this resource does not declare."""
        return self._extra

    @classmethod
    def _resolve(cls, ref: type|str) -> type:
        if isinstance(ref, str):
            return getattr(sys.modules[cls.__module__], ref)
        return ref

    @classmethod
    def from_base(cls, data: Mapping|None) -> Self:
        """
        Build from a decoded JSON dict as returned by the API.
        Unknown keys are kept aside and written back out by to_base().
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__} expects a mapping, got {type(data).__name__}")
        names = {f.name for f in fields(cls)}
        known = {k: v for k, v in data.items() if k in names}
        obj = cls(**known)
        obj._extra = {k: copy.deepcopy(v) for k, v in data.items() if k not in names}
        return obj

    def fixup(self) -> None:
        """
        Convert any tagged field still holding its wire form into the python
        form.  Values already converted are left as they are.
        """
        for f in fields(self):
            kind = f.metadata.get(_KIND)
            value = getattr(self, f.name)
            if kind is None or value is None:
                continue
            repeated = f.metadata[_REPEATED]
            mapped = f.metadata[_MAPPED]
            try:
                if kind == NESTED:
                    rcls = self._resolve(f.metadata[_RESOURCE])
                    value = _each(lambda v: v if isinstance(v, rcls) else rcls.from_base(v),
                                  value, repeated, mapped)
                else:
                    value = decode_value(kind, value, repeated, mapped)
            except TranscodingError as e:
                e.field = f"{f.name}.{e.field}" if e.field else f.name
                raise
            setattr(self, f.name, value)

    def to_base(self) -> dict:
        """
        The dict representation of the object as needed on the wire.
        Calls fixup() first to ensure all fields are in correct format.
        """
        self.fixup()
        b = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            kind = f.metadata.get(_KIND)
            repeated = f.metadata.get(_REPEATED, False)
            mapped = f.metadata.get(_MAPPED, False)
            try:
                if kind is None:
                    b[f.name] = copy.deepcopy(value)
                elif kind == NESTED:
                    b[f.name] = _each(lambda v: v.to_base(), value, repeated, mapped)
                else:
                    b[f.name] = encode_value(kind, value, repeated, mapped)
            except TranscodingError as e:
                e.field = f"{f.name}.{e.field}" if e.field else f.name
                raise
        for k, v in self._extra.items():
            if k not in b:
                b[k] = copy.deepcopy(v)
        return b

def serialize(resource: GoogleResourceBase|Mapping|None) -> dict|None:
    """
    Wire form of a resource for a request body.
    Plain dicts are taken to be in wire form already and copied as-is.
    """
    if resource is None:
        return None
    if isinstance(resource, GoogleResourceBase) and is_dataclass(resource):
        return resource.to_base()
    if isinstance(resource, Mapping):
        return copy.deepcopy(dict(resource))
    raise TypeError(f"cannot serialize {type(resource).__name__}")

def deserialize(cls: type, data: Mapping|None):
    """Typed resource of class cls from a decoded JSON response."""
    return cls.from_base(data)
