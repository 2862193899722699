from pathlib import Path
import json
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from commonlib.storage import ListStore, StoreError, StoreParseError


def test_load_missing_file_returns_empty(tmp_path):
    store = ListStore(tmp_path / "missing" / "products.json")
    assert store.load() == []
    assert not (tmp_path / "missing").exists()


def test_load_empty_file_returns_empty(tmp_path):
    path = tmp_path / "products.json"
    path.write_text("", encoding="utf-8")
    assert ListStore(path).load() == []


def test_save_writes_compact_json_and_creates_parent(tmp_path):
    path = tmp_path / "data" / "products.json"
    store = ListStore(path)
    items = [{"id": 1, "title": "Pen", "price": 1.5}]

    store.save(items)

    assert path.read_text(encoding="utf-8") == '[{"id":1,"title":"Pen","price":1.5}]'
    assert not path.with_suffix(".json.tmp").exists()


def test_save_then_load_preserves_order(tmp_path):
    store = ListStore(tmp_path / "products.json")
    items = [
        {"id": 3, "title": "Pad", "price": 3},
        {"id": 1, "title": "Pen", "price": 1.5},
    ]
    store.save(items)
    assert store.load() == items


def test_save_overwrites_previous_content(tmp_path):
    path = tmp_path / "products.json"
    store = ListStore(path)
    store.save([{"id": 1}, {"id": 2}])
    store.save([{"id": 2}])
    assert json.loads(path.read_text(encoding="utf-8")) == [{"id": 2}]


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "products.json"
    path.write_text("{corrupt", encoding="utf-8")
    with pytest.raises(StoreParseError):
        ListStore(path).load()


def test_load_non_list_raises(tmp_path):
    path = tmp_path / "products.json"
    path.write_text('{"bad": true}', encoding="utf-8")
    with pytest.raises(StoreParseError, match="JSON array"):
        ListStore(path).load()


def test_load_directory_raises_store_error(tmp_path):
    path = tmp_path / "products.json"
    path.mkdir()
    with pytest.raises(StoreError):
        ListStore(path).load()


def test_save_into_file_parent_raises_store_error(tmp_path):
    blocker = tmp_path / "data"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(StoreError):
        ListStore(blocker / "products.json").save([])


def test_load_invalid_utf8_raises_parse_error(tmp_path):
    path = tmp_path / "products.json"
    path.write_bytes(b'[{"id":1,"title":"\xff\xfe","price":1}]')
    with pytest.raises(StoreParseError, match="UTF-8"):
        ListStore(path).load()
