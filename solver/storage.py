"""
Computor — Local JSON storage for settings and solve history.

Data is persisted in ``<project>/data/computor.json``.
"""

import json
import logging
import os
import time
import uuid
from datetime import datetime

logger = logging.getLogger(__name__)

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data")
_DATA_FILE = os.path.join(_DATA_DIR, "computor.json")

HISTORY_LIMIT = 200

# ── Default settings ────────────────────────────────────────────────────
DEFAULT_SETTINGS = {
    "log_level": "WARNING",   # any logging level name
    "save_history": True,
    "plot_window": 5.0,       # half-width of the plotted X range around the roots
}


def _ensure_dir() -> None:
    os.makedirs(_DATA_DIR, exist_ok=True)


def _load_db() -> dict:
    _ensure_dir()
    if os.path.exists(_DATA_FILE):
        try:
            with open(_DATA_FILE, "r", encoding="utf-8") as f:
                db = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("ignoring unreadable store %s: %s", _DATA_FILE, e)
        else:
            if isinstance(db, dict):
                return db
            logger.warning("ignoring store %s: not a JSON object", _DATA_FILE)
    return {"settings": dict(DEFAULT_SETTINGS), "history": []}


def _save_db(db: dict) -> None:
    _ensure_dir()
    with open(_DATA_FILE, "w", encoding="utf-8") as f:
        json.dump(db, f, indent=2, ensure_ascii=False)


# ── Settings ─────────────────────────────────────────────────────────────

def get_settings() -> dict:
    """Return the stored settings merged over the defaults."""
    merged = dict(DEFAULT_SETTINGS)
    stored = _load_db().get("settings", {})
    if isinstance(stored, dict):
        merged.update(stored)
    return merged


def save_settings(settings: dict) -> None:
    """Persist the known keys of *settings*; unknown keys are dropped."""
    db = _load_db()
    current = get_settings()
    current.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})
    db["settings"] = current
    _save_db(db)


# ── History ──────────────────────────────────────────────────────────────

def add_history(equation: str, answer: str) -> str:
    """Prepend a solve record and return its id."""
    db = _load_db()
    record = {
        "id": uuid.uuid4().hex[:12],
        "equation": equation,
        "answer": answer,
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "epoch": time.time(),
    }
    history = get_history()
    history.insert(0, record)  # newest first
    db["history"] = history[:HISTORY_LIMIT]
    _save_db(db)
    return record["id"]


def get_history() -> list[dict]:
    """Return the history list (newest first)."""
    history = _load_db().get("history", [])
    return history if isinstance(history, list) else []


def clear_history() -> None:
    db = _load_db()
    db["history"] = []
    _save_db(db)
