"""
randompass.storage
File helpers for saved settings and exported password lists.
"""

import json
import os
from typing import Any


def data_dir() -> str:
    """
    Per-user settings directory: %APPDATA%/RandomPass on Windows,
    ~/.randompass elsewhere.
    """
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "RandomPass")
    return os.path.join(os.path.expanduser("~"), ".randompass")


def atomic_write_text(path: str, text: str) -> None:
    """
    Replace `path` with `text` (UTF-8) in one rename. The sibling temp file
    never outlives a failed write.
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    tmp = path + ".tmp"
    try:
        with open(tmp, "w", encoding="utf-8", newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    finally:
        if os.path.exists(tmp):
            os.remove(tmp)


def read_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: str, obj: Any) -> None:
    atomic_write_text(path, json.dumps(obj, ensure_ascii=False, indent=2) + "\n")
