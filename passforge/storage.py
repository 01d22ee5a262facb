import os
import json
from typing import Any


def ensure_dir_exists(path: str) -> None:
    d = os.path.dirname(path)
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)

def atomic_write_bytes(path: str, data: bytes) -> None:
    """
    Atomically write bytes to 'path' by writing to a temp file and renaming.
    """
    ensure_dir_exists(path)
    tmp = path + ".tmp"
    with open(tmp, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path)

def atomic_read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def data_dir() -> str:
    """
    PASSFORGE_HOME if set, else %APPDATA%/Passforge, else ~/.passforge.
    """
    override = os.getenv("PASSFORGE_HOME")
    if override:
        return override
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "Passforge")
    return os.path.join(os.path.expanduser("~"), ".passforge")

def default_history_path() -> str:
    return os.path.join(data_dir(), "history.json")

def read_json_bytes(b: bytes) -> Any:
    return json.loads(b.decode("utf-8"))

def dump_json_bytes(obj: Any) -> bytes:
    return json.dumps(obj, ensure_ascii=False, indent=2).encode("utf-8")
