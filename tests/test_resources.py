from dataclasses import dataclass, field
import datetime

import pytest

from gapirest.drive.resources import About, File, FileList, Label, LabelFieldModification, User
from gapirest.resources import (GoogleResourceBase, bytes_field, deserialize, int64_field, resource_field,
                                serialize, timestamp_field)
from gapirest.transcoding import FieldKind, TranscodingError

UTC = datetime.timezone.utc

@dataclass
class Outer(GoogleResourceBase):
    name: str|None = field(default=None)
    inners: list["Inner"]|None = resource_field("Inner", repeated=True)
    byKey: dict[str, "Inner"]|None = resource_field("Inner", mapped=True)
    stamps: list[datetime.datetime]|None = timestamp_field(repeated=True)

@dataclass
class Inner(GoogleResourceBase):
    blob: bytes|None = bytes_field()
    count: int|None = int64_field()

def test_big_int_scenario():
    f = File(size=9007199254740993)
    wire = f.to_base()
    assert(wire == {"size": "9007199254740993"})
    back = File.from_base(wire)
    assert(back.size == 9007199254740993)
    assert(isinstance(back.size, int))

def test_bytes_scenario():
    wire = {"contentHints": {"thumbnail": {"image": "3q2+7w==", "mimeType": "image/png"}}}
    f = File.from_base(wire)
    assert(f.contentHints.thumbnail.image == bytes([0xDE, 0xAD, 0xBE, 0xEF]))
    assert(f.contentHints.thumbnail.mimeType == "image/png")
    assert(f.to_base() == wire)

def test_timestamp_scenario():
    wire = {"id": "abc", "createdTime": "2024-01-15T10:30:00.000Z"}
    f = File.from_base(wire)
    assert(f.createdTime == datetime.datetime(2024, 1, 15, 10, 30, tzinfo=UTC))
    assert(f.to_base() == wire)

def test_absent_stays_absent():
    f = File.from_base({"name": "report.pdf"})
    assert(f.size is None)
    assert(f.createdTime is None)
    wire = f.to_base()
    assert(wire == {"name": "report.pdf"})
    assert("size" not in wire)
    assert(File.from_base(wire).size is None)
    assert(File().to_base() == {})

def test_null_is_absent():
    f = File.from_base({"name": "x", "size": None})
    assert(f.size is None)
    assert(f.to_base() == {"name": "x"})

def test_unknown_keys_kept():
    wire = {"id": "abc", "someNewField": {"nested": [1, 2]}, "size": "10"}
    f = File.from_base(wire)
    assert(f.extra == {"someNewField": {"nested": [1, 2]}})
    out = f.to_base()
    assert(out == wire)
    # extras are copies, not shared with the input
    out["someNewField"]["nested"].append(3)
    assert(wire["someNewField"]["nested"] == [1, 2])

def test_nested_and_repeated():
    wire = {
        "files": [
            {"id": "a", "size": "1", "owners": [{"displayName": "Ann", "emailAddress": "ann@example.com"}]},
            {"id": "b", "modifiedTime": "2023-03-04T05:06:07.000Z"},
        ],
        "nextPageToken": "tok",
    }
    fl = FileList.from_base(wire)
    assert(len(fl.files) == 2)
    assert(fl.files[0].size == 1)
    assert(isinstance(fl.files[0].owners[0], User))
    assert(str(fl.files[0].owners[0]) == "Ann<ann@example.com>")
    assert(fl.files[1].modifiedTime.year == 2023)
    assert(fl.nextPageToken == "tok")
    assert(fl.to_base() == wire)

def test_null_in_repeated_resources():
    fl = FileList.from_base({"files": [None, {"id": "a"}]})
    assert(fl.files[0] is None)
    assert(fl.files[1].id == "a")
    assert(fl.to_base() == {"files": [None, {"id": "a"}]})

def test_mapped_fields():
    wire = {"maxImportSizes": {"application/pdf": "10485760", "text/plain": "9007199254740993"},
            "storageQuota": {"limit": "16106127360", "usage": "1024"},
            "user": {"displayName": "Ann", "me": True}}
    a = About.from_base(wire)
    assert(a.maxImportSizes["text/plain"] == 9007199254740993)
    assert(a.storageQuota.limit == 16106127360)
    assert(a.storageQuota.usageInDrive is None)
    assert(a.user.me)
    assert(a.to_base() == wire)

    label = Label.from_base({"id": "L1", "fields": {"f1": {"integer": ["5", "-6"], "valueType": "integer"},
                                                   "f2": {"dateString": ["2024-02-29"]}}})
    assert(label.fields["f1"].integer == [5, -6])
    assert(label.fields["f2"].dateString == [datetime.date(2024, 2, 29)])

def test_python_values_in_constructor():
    mod = LabelFieldModification(fieldId="f1", setIntegerValues=[2**62], setDateValues=[datetime.date(2024, 1, 2)])
    assert(mod.to_base() == {"fieldId": "f1", "setIntegerValues": [str(2**62)], "setDateValues": ["2024-01-02"]})

def test_wire_values_in_constructor():
    f = File(size="42", createdTime="2024-01-15T10:30:00Z")
    assert(f.size == 42)
    assert(f.createdTime == datetime.datetime(2024, 1, 15, 10, 30, tzinfo=UTC))

def test_fixup_idempotent():
    f = File.from_base({"size": "5", "createdTime": "2024-01-15T10:30:00.000Z",
                        "contentHints": {"thumbnail": {"image": "Zm9v"}}})
    before = f.to_base()
    f.fixup()
    f.fixup()
    assert(f.size == 5)
    assert(f.contentHints.thumbnail.image == b"foo")
    assert(f.to_base() == before)

def test_assigned_later():
    f = File()
    f.size = "77"
    f.modifiedTime = datetime.datetime(2024, 1, 15, 10, 30)
    assert(f.to_base() == {"modifiedTime": "2024-01-15T10:30:00.000Z", "size": "77"})
    f.size = "seventy"
    with pytest.raises(TranscodingError) as e:
        f.to_base()
    assert(e.value.field == "size")

def test_error_field_path():
    with pytest.raises(TranscodingError) as e:
        File.from_base({"contentHints": {"thumbnail": {"image": "@@@@"}}})
    assert(e.value.field == "contentHints.thumbnail.image")
    assert(e.value.kind == FieldKind.BYTES)
    assert("contentHints.thumbnail.image" in str(e.value))

    with pytest.raises(TranscodingError) as e:
        Outer.from_base({"inners": [{"count": "1"}, {"count": "two"}]})
    assert(e.value.field == "inners.count")

    with pytest.raises(TranscodingError) as e:
        FileList.from_base({"files": [{"createdTime": "not a time"}]})
    assert(e.value.field == "files.createdTime")

def test_forward_reference():
    o = Outer.from_base({"name": "o", "inners": [{"blob": "AAE="}], "byKey": {"k": {"count": "-3"}},
                         "stamps": ["2024-01-15T10:30:00.000Z"]})
    assert(isinstance(o.inners[0], Inner))
    assert(o.inners[0].blob == b"\x00\x01")
    assert(o.byKey["k"].count == -3)
    assert(o.stamps[0].hour == 10)
    assert(o.to_base()["byKey"] == {"k": {"count": "-3"}})

def test_shape_errors():
    with pytest.raises(TypeError):
        Outer.from_base({"inners": {"count": "1"}})
    with pytest.raises(TypeError):
        File.from_base(["not", "a", "dict"])

def test_from_base_none():
    f = File.from_base(None)
    assert(not f)
    assert(f.to_base() == {})

def test_serialize():
    assert(serialize(None) is None)
    assert(serialize(File(name="n", size=3)) == {"name": "n", "size": "3"})
    raw = {"size": "3"}
    out = serialize(raw)
    assert(out == raw and out is not raw)
    with pytest.raises(TypeError):
        serialize(42)
    f = deserialize(File, {"size": "3"})
    assert(isinstance(f, File) and f.size == 3)
