"""
passforge.history
Bounded, newest-first record of generated passwords.

The history belongs to whoever drives the generator (the CLI here); the
generator itself keeps no state between calls.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

from .storage import atomic_read_bytes, atomic_write_bytes, default_history_path, dump_json_bytes, read_json_bytes

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 10


@dataclass(frozen=True)
class HistoryEntry:
    password: str
    timestamp: str


class PasswordHistory:
    def __init__(self, max_size: int = DEFAULT_HISTORY_SIZE, entries: Optional[List[HistoryEntry]] = None):
        if max_size < 1:
            raise ValueError("history size must be at least 1")
        self.max_size = max_size
        self._entries: List[HistoryEntry] = list(entries or [])[:max_size]

    def add(self, password: str, timestamp: Optional[datetime] = None) -> HistoryEntry:
        when = (timestamp or datetime.now()).isoformat(timespec="seconds")
        entry = HistoryEntry(password=password, timestamp=when)
        self._entries.insert(0, entry)
        del self._entries[self.max_size:]
        return entry

    def clear(self) -> None:
        self._entries = []

    @property
    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_size": self.max_size,
            "entries": [{"password": e.password, "timestamp": e.timestamp} for e in self._entries],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], max_size: Optional[int] = None) -> "PasswordHistory":
        size = max_size or int(data.get("max_size", DEFAULT_HISTORY_SIZE))
        entries = [HistoryEntry(password=e["password"], timestamp=e["timestamp"]) for e in data.get("entries", [])]
        return cls(max_size=size, entries=entries)


def load_history(path: Optional[str] = None, max_size: Optional[int] = None) -> PasswordHistory:
    """
    Read history from disk. A missing or damaged file gives an empty history.
    """
    p = path or default_history_path()
    try:
        data = read_json_bytes(atomic_read_bytes(p))
    except FileNotFoundError:
        return PasswordHistory(max_size or DEFAULT_HISTORY_SIZE)
    except (OSError, ValueError) as e:
        logger.warning("could not read history from %s: %s", p, e)
        return PasswordHistory(max_size or DEFAULT_HISTORY_SIZE)
    try:
        return PasswordHistory.from_dict(data, max_size)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.warning("history file %s is malformed: %s", p, e)
        return PasswordHistory(max_size or DEFAULT_HISTORY_SIZE)


def save_history(history: PasswordHistory, path: Optional[str] = None) -> None:
    atomic_write_bytes(path or default_history_path(), dump_json_bytes(history.to_dict()))
