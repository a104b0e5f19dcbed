"""Key/value stores backing locale context and the term registry.

The store is a minimal string-to-string map in the shape of browser local
storage. Any object with the same methods can be passed to LocaleContext,
TermRegistry or VocabTerm; the two implementations here cover in-memory
use and persistence to a JSON file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    """The store capability consumed by this package."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def clear(self) -> None: ...

    @property
    def size(self) -> int: ...

    def key(self, index: int) -> str | None: ...


class MemoryStore:
    """In-memory store; keys are reported in insertion order."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    @property
    def size(self) -> int:
        return len(self._items)

    def key(self, index: int) -> str | None:
        """The key at position ``index``, or None when out of range."""
        if index < 0 or index >= len(self._items):
            return None
        for position, key in enumerate(self._items):
            if position == index:
                return key
        return None

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.size} items)"


class JsonFileStore(MemoryStore):
    """Store persisted as a single JSON object, rewritten on every mutation.

    An existing file is loaded on construction; a missing file starts empty
    and is created on the first write.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        initial: dict[str, str] = {}
        if self.path.exists():
            with open(self.path, "r", encoding="utf-8") as f:
                initial = json.load(f)
            logger.debug(f"Loaded {len(initial)} entries from {self.path}")
        super().__init__(initial)

    def set(self, key: str, value: str) -> None:
        super().set(key, value)
        self._persist()

    def remove(self, key: str) -> None:
        super().remove(key)
        self._persist()

    def clear(self) -> None:
        super().clear()
        self._persist()

    def _persist(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._items, f, indent=2, ensure_ascii=False)

    def __repr__(self) -> str:
        return f"JsonFileStore({self.path}, {self.size} items)"


def build_store() -> MemoryStore:
    """A fresh, empty in-memory store."""
    return MemoryStore()


def get_local_store(path: str | Path | None = None) -> KeyValueStore:
    """A persistent store at ``path`` if given, else an in-memory one."""
    if path is not None:
        return JsonFileStore(path)
    return build_store()
