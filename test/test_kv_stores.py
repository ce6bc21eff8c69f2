from unittest.mock import MagicMock

from pymongo.errors import PyMongoError

from recipe_nutrition.infrastructure.kv_stores import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    MongoKeyValueStore,
)


class TestInMemoryStore:
    def test_set_get_remove(self):
        s = InMemoryKeyValueStore()
        assert s.get("k") is None
        assert s.set("k", {"a": [1, 2]})
        assert s.get("k") == {"a": [1, 2]}
        s.remove("k")
        assert s.get("k") is None

    def test_values_are_copies(self):
        s = InMemoryKeyValueStore()
        v = {"a": 1}
        s.set("k", v)
        v["a"] = 2
        assert s.get("k") == {"a": 1}


class TestJsonFileStore:
    def test_persists_across_instances(self, tmp_path):
        path = str(tmp_path / "sub" / "store.json")
        JsonFileKeyValueStore(path).set("nutrition_cache", {"x": {"value": 1}})
        assert JsonFileKeyValueStore(path).get("nutrition_cache") == {"x": {"value": 1}}

    def test_set_none_deletes(self, tmp_path):
        s = JsonFileKeyValueStore(str(tmp_path / "store.json"))
        s.set("a", 1)
        s.set("b", 2)
        s.remove("a")
        assert s.get("a") is None
        assert s.get("b") == 2

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        s = JsonFileKeyValueStore(str(path))
        assert s.get("a") is None
        assert s.set("a", 1)
        assert s.get("a") == 1


class TestMongoStore:
    def test_get(self):
        col = MagicMock()
        col.find_one.return_value = {"_id": "k", "value": {"a": 1}}
        assert MongoKeyValueStore(col).get("k") == {"a": 1}
        col.find_one.assert_called_once_with({"_id": "k"})

    def test_get_missing(self):
        col = MagicMock()
        col.find_one.return_value = None
        assert MongoKeyValueStore(col).get("k") is None

    def test_set_upserts(self):
        col = MagicMock()
        assert MongoKeyValueStore(col).set("k", [1, 2])
        col.replace_one.assert_called_once_with({"_id": "k"}, {"_id": "k", "value": [1, 2]}, upsert=True)

    def test_remove(self):
        col = MagicMock()
        assert MongoKeyValueStore(col).remove("k")
        col.delete_one.assert_called_once_with({"_id": "k"})

    def test_errors_are_logged_not_raised(self):
        col = MagicMock()
        col.find_one.side_effect = PyMongoError("down")
        col.replace_one.side_effect = PyMongoError("down")
        s = MongoKeyValueStore(col)
        assert s.get("k") is None
        assert s.set("k", 1) is False
