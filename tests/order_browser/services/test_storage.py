import pytest

from order_browser.services.storage import LocalFileSystemStorage


def test_json_roundtrip_creates_parent_dirs(tmp_path):
    storage = LocalFileSystemStorage(tmp_path / "data")

    storage.write_json("nested/orders.json", {"orders": [{"id": "1"}]})

    assert storage.exists("nested/orders.json")
    assert storage.read_json("nested/orders.json") == {"orders": [{"id": "1"}]}
    assert (tmp_path / "data" / "nested" / "orders.json").is_file()


def test_missing_file(tmp_path):
    storage = LocalFileSystemStorage(tmp_path)

    assert storage.exists("orders.json") is False
    with pytest.raises(FileNotFoundError):
        storage.read_bytes("orders.json")


def test_paths_cannot_escape_root(tmp_path):
    storage = LocalFileSystemStorage(tmp_path / "root")

    with pytest.raises(ValueError, match="Access denied"):
        storage.write_bytes("../outside.json", b"{}")

    with pytest.raises(ValueError):
        storage.exists("/etc/passwd")


def test_modified_at_tracks_writes(tmp_path):
    storage = LocalFileSystemStorage(tmp_path)

    assert storage.modified_at("orders.json") is None

    storage.write_json("orders.json", [])

    assert storage.modified_at("orders.json") == (tmp_path / "orders.json").stat().st_mtime_ns
