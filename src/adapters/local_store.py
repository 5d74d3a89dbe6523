"""Local key-by-unique-field stores (recent searches, saved companies).

Entries are kept most-recent-first and bounded; re-adding an existing key
moves it to the front instead of duplicating it.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Generic, Hashable, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from core.domain.models import RecentSearchTerm, SavedCompany

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class KeyedJsonStore(Generic[M]):
    """JSON-file list of models unique by their `key` property.

    `path=None` keeps the entries in memory only.
    """

    def __init__(self, model: type[M], path: Path | None = None, *, limit: int = 10) -> None:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self._model = model
        self._adapter = TypeAdapter(list[model])  # type: ignore[valid-type]
        self.path = Path(path) if path else None
        self.limit = limit
        self._lock = threading.Lock()
        self._items: list[M] = self._load()

    def _load(self) -> list[M]:
        if self.path is None or not self.path.exists():
            return []
        try:
            items = self._adapter.validate_json(self.path.read_bytes())
        except (OSError, ValidationError) as exc:
            logger.warning("Ignoring unreadable store %s: %s", self.path, exc)
            return []
        return list(items)[: self.limit]

    def _flush(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data: list[dict[str, Any]] = [item.model_dump(mode="json") for item in self._items]
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.stem}-", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def entries(self) -> list[M]:
        with self._lock:
            return list(self._items)

    def get(self, key: Hashable) -> M | None:
        with self._lock:
            return next((item for item in self._items if item.key == key), None)

    def upsert(self, item: M) -> M:
        with self._lock:
            self._items = [item] + [i for i in self._items if i.key != item.key]
            del self._items[self.limit :]
            self._flush()
        return item

    def remove(self, key: Hashable) -> bool:
        with self._lock:
            before = len(self._items)
            self._items = [i for i in self._items if i.key != key]
            removed = len(self._items) != before
            if removed:
                self._flush()
        return removed

    def clear(self) -> None:
        with self._lock:
            self._items = []
            self._flush()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class RecentSearchStore(KeyedJsonStore[RecentSearchTerm]):
    def __init__(self, path: Path | None = None, *, limit: int = 10) -> None:
        super().__init__(RecentSearchTerm, path, limit=limit)

    def add(self, term: str, *, searched_at: datetime | None = None) -> RecentSearchTerm:
        term = term.strip()
        if not term:
            raise ValueError("search term must not be empty")
        entry = RecentSearchTerm(search_term=term, searched_at=searched_at or datetime.now())
        return self.upsert(entry)

    def terms(self) -> list[str]:
        return [entry.search_term for entry in self.entries()]


class SavedCompanyStore(KeyedJsonStore[SavedCompany]):
    def __init__(self, path: Path | None = None, *, limit: int = 10) -> None:
        super().__init__(SavedCompany, path, limit=limit)

    def add(self, company_id: int, name: str, address: str = "", *, saved_at: datetime | None = None) -> SavedCompany:
        entry = SavedCompany(id=company_id, name=name, address=address, saved_at=saved_at or datetime.now())
        return self.upsert(entry)
