import json
from pathlib import Path

from solver import storage


def _configure_tmp_db(monkeypatch, tmp_path: Path) -> Path:
    data_dir = tmp_path / "data"
    data_file = data_dir / "computor.json"
    monkeypatch.setattr(storage, "_DATA_DIR", str(data_dir))
    monkeypatch.setattr(storage, "_DATA_FILE", str(data_file))
    return data_file


def test_settings_get_and_save(monkeypatch, tmp_path: Path) -> None:
    _configure_tmp_db(monkeypatch, tmp_path)

    settings = storage.get_settings()
    assert settings == storage.DEFAULT_SETTINGS

    storage.save_settings({"log_level": "DEBUG", "unknown": 1})
    saved = storage.get_settings()
    assert saved["log_level"] == "DEBUG"
    assert saved["save_history"] is True
    assert "unknown" not in saved


def test_history_add_get_clear_and_limit(monkeypatch, tmp_path: Path) -> None:
    _configure_tmp_db(monkeypatch, tmp_path)

    for i in range(205):
        storage.add_history(f"{i} * X^0 = 0", "No solution exists.")

    history = storage.get_history()
    assert len(history) == storage.HISTORY_LIMIT
    assert history[0]["equation"] == "204 * X^0 = 0"
    assert "id" in history[0]

    storage.clear_history()
    assert storage.get_history() == []


def test_corrupt_file_falls_back_to_defaults(monkeypatch, tmp_path: Path) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)
    data_file.parent.mkdir(parents=True)
    data_file.write_text("{not json", encoding="utf-8")

    assert storage.get_settings() == storage.DEFAULT_SETTINGS
    assert storage.get_history() == []

    storage.add_history("1 * X^1 = 0", "The solution is: 0.000000")
    assert json.loads(data_file.read_text(encoding="utf-8"))["history"][0]["equation"] == "1 * X^1 = 0"


def test_non_object_file_falls_back_to_defaults(monkeypatch, tmp_path: Path) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)
    data_file.parent.mkdir(parents=True)
    data_file.write_text("[1, 2, 3]", encoding="utf-8")

    assert storage.get_settings() == storage.DEFAULT_SETTINGS
    assert storage.get_history() == []

    data_file.write_text('{"settings": "loud", "history": {}}', encoding="utf-8")
    assert storage.get_settings() == storage.DEFAULT_SETTINGS
    assert storage.get_history() == []

    storage.save_settings({"save_history": False})
    storage.add_history("1 * X^1 = 0", "The solution is: 0.000000")
    db = json.loads(data_file.read_text(encoding="utf-8"))
    assert db["settings"]["save_history"] is False
    assert len(db["history"]) == 1
