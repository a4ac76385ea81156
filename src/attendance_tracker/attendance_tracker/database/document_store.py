from __future__ import annotations

import copy
import json
import os
import threading
from pathlib import Path
from typing import Any, Iterable, List, Optional

Document = List[dict[str, Any]]


class MemoryDocument:
    """A JSON-shaped array kept in process memory. Lost at restart."""

    def __init__(self, items: Optional[Iterable[dict[str, Any]]] = None):
        self._items: Document = [copy.deepcopy(i) for i in (items or [])]
        self.lock = threading.RLock()

    def exists(self) -> bool:
        return True

    def read(self) -> Document:
        with self.lock:
            return copy.deepcopy(self._items)

    def write(self, items: Document) -> None:
        with self.lock:
            self._items = copy.deepcopy(items)


class JsonFileDocument:
    """A JSON array stored in one file, read in full and rewritten in full.

    Note: a corrupt or unreadable file is not repaired; the decode error propagates.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.lock = threading.RLock()

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> Document:
        with self.lock:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, list):
                raise ValueError(f"{self.path} does not contain a JSON array")
            return data

    def write(self, items: Document) -> None:
        with self.lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(items, indent=2, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self.path)

    def ensure(self, default: Document) -> bool:
        """Create the file with `default` content if missing. Returns True if created."""
        with self.lock:
            if self.path.exists():
                return False
            self.write(default)
            return True
