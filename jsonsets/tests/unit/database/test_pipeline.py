import asyncio
import json

import pytest

from jsonsets.database import Database
from jsonsets.errors import ProductionFileMissingError, SetsListingError, SetsReplaceError
from jsonsets.logs import SEED_CONTENT
from jsonsets.models import PointerMode
from jsonsets.state.working import WorkingRegistry


def _read_json(path):
    return json.loads(path.read_text(encoding="utf-8"))


def _track_writes(db, monkeypatch):
    writes = []
    sets = db.synchronizer.sets
    real_write = sets.write

    def _write(name, value):
        writes.append(name)
        real_write(name, value)

    monkeypatch.setattr(sets, "write", _write)
    return writes


def test_construction_compiles_missing_production_file(store_root):
    db = Database(root=store_root)

    prod = store_root / ".prod" / "dbj.json"
    assert prod.exists()
    assert _read_json(prod) == {"fruits": {"list": ["a", "b"]}, "settings": {"theme": "dark", "size": 12}}
    assert db.original == db.get_pointer()
    assert db.original is not db.get_pointer()
    assert db.pointer_mode is PointerMode.INNER


def test_construction_creates_seeded_log(store_root):
    Database(root=store_root)

    assert (store_root / "jsonsets.log").read_text(encoding="utf-8") == SEED_CONTENT


def test_construction_loads_existing_production_file(store_root):
    prod = store_root / ".prod" / "dbj.json"
    prod.parent.mkdir(parents=True)
    prod.write_text(json.dumps({"cached": {"value": 1}}), encoding="utf-8")

    db = Database(root=store_root)

    assert db.get() == {"cached": {"value": 1}}


def test_name_argument_overrides_config(store_root):
    (store_root / "config.txt").write_text("prodname=from_config", encoding="utf-8")

    assert Database(root=store_root).name == "from_config"
    db = Database("explicit", root=store_root)

    assert db.name == "explicit"
    assert (store_root / ".prod" / "explicit.json").exists()


def test_save_flushes_changed_sets_only(store_root, monkeypatch):
    db = Database(root=store_root)
    settings_before = (store_root / ".sets" / "settings.json").read_bytes()
    writes = _track_writes(db, monkeypatch)

    db.push("fruits.list", "c")
    asyncio.run(db.save())

    assert writes == ["fruits"]
    assert _read_json(store_root / ".sets" / "fruits.json") == {"list": ["a", "b", "c"]}
    assert (store_root / ".sets" / "settings.json").read_bytes() == settings_before
    assert _read_json(store_root / ".prod" / "dbj.json")["fruits"] == {"list": ["a", "b", "c"]}


def test_save_leaves_original_working_and_files_equal(store_root):
    db = Database(root=store_root)
    db.set("settings.theme", "light")
    db.set("vegetables", ["leek"])
    db.delete("fruits")

    asyncio.run(db.save())

    assert db.original == db.get_pointer()
    assert db.original is not db.get_pointer()
    assert db.original == _read_json(store_root / ".prod" / "dbj.json")
    for name, value in db.original.items():
        assert _read_json(store_root / ".sets" / f"{name}.json") == value
    assert "fruits" not in db.original
    assert (store_root / ".sets" / "fruits.json").exists()


def test_delete_root_then_save_keeps_every_set(store_root):
    db = Database(root=store_root)

    db.delete()
    asyncio.run(db.save())

    assert sorted(path.name for path in (store_root / ".sets").iterdir()) == ["fruits.json", "settings.json"]
    assert db.get("fruits.list") == ["a", "b"]


def test_save_without_mutation_writes_no_set(store_root, monkeypatch):
    db = Database(root=store_root)
    writes = _track_writes(db, monkeypatch)

    asyncio.run(db.save())

    assert writes == []


def test_save_is_idempotent(store_root):
    db = Database(root=store_root)
    db.push("fruits.list", "c")
    prod = store_root / ".prod" / "dbj.json"

    asyncio.run(db.save())
    first = prod.read_bytes()
    asyncio.run(db.save())

    assert prod.read_bytes() == first


def test_compile_then_replace_leaves_set_files_untouched(store_root, monkeypatch):
    db = Database(root=store_root)
    before = {path.name: path.read_bytes() for path in (store_root / ".sets").iterdir()}
    writes = _track_writes(db, monkeypatch)

    asyncio.run(db.prod_compile(True))
    touched = asyncio.run(db.sets_replace())

    assert touched == []
    assert writes == []
    assert {path.name: path.read_bytes() for path in (store_root / ".sets").iterdir()} == before


def test_sets_list_records_names(store_root):
    db = Database(root=store_root)

    names = asyncio.run(db.sets_list())

    assert names == ["fruits", "settings"]
    assert db.sets == names


def test_prod_load_reports_pointer_mode(store_root):
    db = Database(root=store_root)

    assert asyncio.run(db.prod_load()) is PointerMode.INNER


def test_prod_load_without_production_file_rejects(store_root):
    db = Database(root=store_root)
    (store_root / ".prod" / "dbj.json").unlink()

    with pytest.raises(ProductionFileMissingError, match="unable to get file prod"):
        asyncio.run(db.prod_load())


def test_prod_compile_without_override_needs_production_file(store_root):
    db = Database(root=store_root)
    prod = store_root / ".prod" / "dbj.json"
    prod.unlink()

    with pytest.raises(ProductionFileMissingError):
        asyncio.run(db.prod_compile(False))

    assert not prod.exists()
    assert "unable to get file prod" in (store_root / "jsonsets.log").read_text(encoding="utf-8")


def test_save_replace_failure_is_logged_and_stops(store_root, monkeypatch):
    db = Database(root=store_root)
    prod = store_root / ".prod" / "dbj.json"
    prod_before = prod.read_bytes()

    def _fail(name, value):
        raise OSError("disk full")

    monkeypatch.setattr(db.synchronizer.sets, "write", _fail)
    db.push("fruits.list", "c")

    with pytest.raises(SetsReplaceError):
        asyncio.run(db.save())

    assert prod.read_bytes() == prod_before
    log = (store_root / "jsonsets.log").read_text(encoding="utf-8")
    assert "Unable to replace dbj sets - disk full" in log


def test_manu_picks_up_external_edits(store_root, write_set):
    db = Database(root=store_root)
    write_set(store_root / ".sets", "fruits", {"list": ["z"]})
    write_set(store_root / ".sets", "tools", ["hammer"])

    assert asyncio.run(db.manu()) is True

    assert db.get("fruits.list") == ["z"]
    assert db.get("tools") == ["hammer"]
    assert _read_json(store_root / ".prod" / "dbj.json")["tools"] == ["hammer"]


def test_manu_logs_and_swallows_errors(store_root):
    db = Database(root=store_root)
    (store_root / ".sets" / "fruits.json").write_text("{broken", encoding="utf-8")

    assert asyncio.run(db.manu()) is False

    assert "manu : unable to recompile dbj" in (store_root / "jsonsets.log").read_text(encoding="utf-8")
    assert db.get("fruits.list") == ["a", "b"]


def test_sets_listing_failure_rejects_compile(store_root):
    db = Database(root=store_root)
    for path in (store_root / ".sets").iterdir():
        path.unlink()
    (store_root / ".sets").rmdir()

    with pytest.raises(SetsListingError):
        asyncio.run(db.prod_compile(True))


def test_global_mode_publishes_working_copy(store_root):
    (store_root / "config.txt").write_text("pointer=global_var\n", encoding="utf-8")
    registry = WorkingRegistry()

    db = Database(root=store_root, registry=registry)

    assert db.pointer_mode is PointerMode.GLOBAL
    assert registry["dbj"] is db.get_pointer()
    assert registry["dbj"] == db.original

    registry["dbj"]["fruits"]["list"].append("c")
    assert db.get("fruits.list") == ["a", "b", "c"]

    asyncio.run(db.save())

    assert registry["dbj"] is db.get_pointer()
    assert _read_json(store_root / ".sets" / "fruits.json") == {"list": ["a", "b", "c"]}


def test_errors_are_logged_only_under_their_own_root(tmp_path, write_set):
    first_root = tmp_path / "first"
    second_root = tmp_path / "second"
    write_set(first_root / ".sets", "fruits", ["a"])
    write_set(second_root / ".sets", "fruits", ["b"])
    first = Database(root=first_root)
    Database(root=second_root)
    (first_root / ".prod" / "dbj.json").unlink()

    with pytest.raises(ProductionFileMissingError):
        asyncio.run(first.prod_load())

    assert "unable to get file prod" in (first_root / "jsonsets.log").read_text(encoding="utf-8")
    assert (second_root / "jsonsets.log").read_text(encoding="utf-8") == SEED_CONTENT


def test_manu_reads_sets_differing_only_in_case(store_root, write_set):
    if (store_root / ".sets" / "Fruits.json").exists():
        pytest.skip("case-insensitive filesystem")
    db = Database(root=store_root)
    db.set("Fruits", ["upper"])
    asyncio.run(db.save())
    write_set(store_root / ".sets", "fruits", {"list": ["z"]})

    assert asyncio.run(db.manu()) is True

    assert db.get("fruits.list") == ["z"]
    assert db.get("Fruits") == ["upper"]
    assert "duplicata" not in (store_root / "jsonsets.log").read_text(encoding="utf-8")
