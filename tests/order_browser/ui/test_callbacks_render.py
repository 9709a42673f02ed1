import json
import os

from order_browser.config.model import GlobalConfig
from order_browser.core.record import Record
from order_browser.core.source import RecordSource
from order_browser.services.order_store import OrderStore
from order_browser.services.storage import LocalFileSystemStorage
from order_browser.ui.callbacks.callbacks_render import poll_source, snapshot_for
from order_browser.ui.config import AppConfig


def _make_orders():
    rows = [
        {"id": "1", "date": "2024-05-01", "type": "Book", "status": "Completed"},
        {"id": "2", "date": "2024-01-01", "type": "Mobile", "status": "Processing"},
        {"id": "3", "date": "2024-03-01", "type": "Book", "status": "Rejected"},
    ]
    return tuple(Record.from_dict(r) for r in rows)


def _write_orders(path, rows) -> None:
    existed = path.exists()
    before = path.stat().st_mtime_ns if existed else 0
    path.write_text(json.dumps({"orders": rows}))
    if existed:
        # Make sure the edit is visible even on coarse-mtime filesystems
        st = path.stat()
        os.utime(path, ns=(st.st_atime_ns, max(st.st_mtime_ns, before) + 1_000_000_000))


def _make_ctx(tmp_path) -> AppConfig:
    orders_path = tmp_path / "orders.json"
    _write_orders(orders_path, [{"id": "1", "type": "Book", "date": "2024-01-01"}])

    source = RecordSource()
    order_store = OrderStore(LocalFileSystemStorage(tmp_path), source)
    order_store.load()

    return AppConfig(
        config_root=tmp_path,
        global_config=GlobalConfig(orders_path=orders_path),
        source=source,
        order_store=order_store,
    )


def test_snapshot_for_applies_stored_criteria():
    data = {"type": "Book", "date_mode": "oldest", "current_page": 1, "page_size": 1}

    snapshot = snapshot_for(_make_orders(), data, page_size=9)

    assert [r.id for r in snapshot.filtered_view] == ["3", "1"]
    assert [r.id for r in snapshot.page_view] == ["3"]
    assert snapshot.page.page_count == 2


def test_snapshot_for_defaults_and_empty_source():
    assert snapshot_for(_make_orders(), None, page_size=2).page_view == _make_orders()[:2]

    empty = snapshot_for((), {"current_page": 3}, page_size=2)
    assert empty.page_view == ()
    assert (empty.start_index, empty.end_index) == (0, 0)


def test_poll_without_file_change_does_not_rerender(tmp_path):
    ctx = _make_ctx(tmp_path)

    assert poll_source(ctx, ctx.source.version) is False


def test_poll_redelivers_after_file_edit(tmp_path):
    ctx = _make_ctx(tmp_path)
    known_version = ctx.source.version

    _write_orders(
        tmp_path / "orders.json",
        [
            {"id": "1", "type": "Book", "date": "2024-01-01"},
            {"id": "2", "type": "Watch", "date": "2024-02-01"},
        ],
    )

    assert poll_source(ctx, known_version) is True
    assert ctx.source.version == known_version + 1

    snapshot = snapshot_for(ctx.source.records, {"type": "Watch"}, page_size=9)
    assert [r.id for r in snapshot.page_view] == ["2"]


def test_poll_keeps_last_good_records_when_file_is_invalid(tmp_path):
    ctx = _make_ctx(tmp_path)
    known_version = ctx.source.version

    _write_orders(tmp_path / "orders.json", [{"id": "1"}, {"id": "1"}])

    assert poll_source(ctx, known_version) is False
    assert [r.id for r in ctx.source.records] == ["1"]
    assert ctx.source.records[0].type == "Book"
