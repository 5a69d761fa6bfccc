import json

from app.core.session_store import SessionStore


def test_save_load_clear(tmp_path):
    store = SessionStore(tmp_path / "session.json")
    assert store.load() is None

    store.save({"id": "1", "name": "Admin", "email": "admin@x.com", "role": "Gerente"})
    raw = json.loads((tmp_path / "session.json").read_text(encoding="utf-8"))
    assert raw["rh_user"]["email"] == "admin@x.com"
    assert store.load()["name"] == "Admin"

    store.clear()
    assert store.load() is None
    store.clear()  # already gone


def test_unreadable_file_is_ignored(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json", encoding="utf-8")
    assert SessionStore(path).load() is None


def test_other_key_is_not_read(tmp_path):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"someone_else": {"id": "1"}}), encoding="utf-8")
    assert SessionStore(path).load() is None
