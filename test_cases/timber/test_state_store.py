from src.timber.state_store import StateStore


def test_values_survive_reopen(tmp_path) -> None:
    path = tmp_path / "nested" / "defaults.json"
    StateStore(path).set("current", "/logs/a.log")
    assert StateStore(path).get("current") == "/logs/a.log"


def test_missing_key_and_remove(tmp_path) -> None:
    store = StateStore(tmp_path / "defaults.json")
    assert store.get("nope") is None
    assert store.get("nope", "fallback") == "fallback"
    store.set("k", [1, 2])
    store.remove("k")
    store.remove("never-set")
    assert store.get("k") is None


def test_corrupt_file_reads_as_empty(tmp_path) -> None:
    path = tmp_path / "defaults.json"
    path.write_text("[1, 2, 3]")
    store = StateStore(path)
    assert store.get("k") is None
    store.set("k", "v")
    assert store.get("k") == "v"


def test_unwritable_location_is_absorbed(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not dir")
    store = StateStore(blocker / "defaults.json")
    store.set("k", "v")
    assert store.get("k") is None
