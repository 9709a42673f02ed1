import pytest

from order_browser.core.exceptions import RecordSchemaError
from order_browser.core.record import STATUSES, Record, Status, records_from_document, status_class


def test_from_dict_splits_core_fields_and_payload():
    raw = {
        "id": "00001",
        "name": "Christine Brooks",
        "address": "089 Kutch Green Apt. 448",
        "date": "2024-09-04",
        "type": "Electric",
        "status": "Completed",
    }

    record = Record.from_dict(raw)

    assert record.id == "00001"
    assert record.type == "Electric"
    assert record.status == "Completed"
    assert record.date == "2024-09-04"
    assert dict(record.payload) == {"name": "Christine Brooks", "address": "089 Kutch Green Apt. 448"}
    assert record.get("name") == "Christine Brooks"
    assert record.get("type") == "Electric"
    assert record.get("missing", "-") == "-"
    assert record.to_dict() == raw


def test_from_dict_requires_an_id():
    with pytest.raises(RecordSchemaError, match="id"):
        Record.from_dict({"type": "Book"})

    with pytest.raises(RecordSchemaError):
        Record.from_dict(["not", "a", "mapping"])


def test_records_are_hashable_despite_payload():
    record = Record.from_dict({"id": 1, "type": "Book", "name": "x"})

    assert record in {record}


def test_records_from_document_accepts_both_shapes():
    rows = [{"id": "1", "type": "Book"}, {"id": "2", "type": "Watch"}]

    from_list = records_from_document(rows)
    from_object = records_from_document({"orders": rows})

    assert from_list == from_object
    assert [r.id for r in from_list] == ["1", "2"]


def test_records_from_document_empty_inputs():
    assert records_from_document(None) == ()
    assert records_from_document({}) == ()
    assert records_from_document({"orders": None}) == ()

    with pytest.raises(RecordSchemaError):
        records_from_document({"orders": "nope"})


def test_status_vocabulary_and_classes():
    assert STATUSES == ("Completed", "Processing", "Rejected", "On Hold", "In Transit")
    assert Status.ON_HOLD == "On Hold"

    classes = [status_class(s) for s in STATUSES]
    assert classes == ["completed", "processing", "rejected", "on-hold", "in-transit"]
    assert status_class(Status.IN_TRANSIT.value) == "in-transit"
    assert status_class(None) == ""
