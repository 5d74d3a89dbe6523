"""Secure token store.

Why a dedicated adapter:
- One explicitly owned object holds the current `TokenPair`; it is built once
  in the composition root and passed to every session and facade.
- Reads and writes are serialized by a lock, and the in-memory pair is
  swapped as a whole, so readers see either the old or the new pair.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from pydantic import ValidationError

from core.domain.models import TokenPair
from core.interfaces.session import TokenBackend

logger = logging.getLogger(__name__)


class MemoryTokenBackend:
    """Process-local backend (tests, previews)."""

    def __init__(self, pair: TokenPair | None = None) -> None:
        self._pair = pair

    def load(self) -> TokenPair | None:
        return self._pair

    def store(self, pair: TokenPair) -> None:
        self._pair = pair

    def delete(self) -> None:
        self._pair = None


class FileTokenBackend:
    """JSON file backend, written atomically with owner-only permissions."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> TokenPair | None:
        if not self.path.exists():
            return None
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return TokenPair.model_validate(raw)
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning("Ignoring unreadable token file %s: %s", self.path, exc)
            return None

    def store(self, pair: TokenPair) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(pair.model_dump(), ensure_ascii=False)

        fd, tmp_name = tempfile.mkstemp(prefix=".tokens-", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self) -> None:
        self.path.unlink(missing_ok=True)


class SecureTokenStore:
    """Single source of truth for the current access/refresh token pair.

    Persisted tokens are loaded at construction, so they survive restarts.
    `save` writes the durable backend first and only then publishes the new
    pair: a failed write leaves the previous pair current.
    """

    def __init__(self, backend: TokenBackend | None = None) -> None:
        self._backend: TokenBackend = backend or MemoryTokenBackend()
        self._lock = threading.Lock()
        self._pair: TokenPair | None = self._backend.load()

    def get_access_token(self) -> str | None:
        pair = self.get_tokens()
        return pair.access_token if pair else None

    def get_refresh_token(self) -> str | None:
        pair = self.get_tokens()
        return pair.refresh_token if pair else None

    def get_tokens(self) -> TokenPair | None:
        with self._lock:
            return self._pair

    @property
    def has_tokens(self) -> bool:
        return self.get_tokens() is not None

    def save(self, pair: TokenPair) -> None:
        with self._lock:
            self._backend.store(pair)
            self._pair = pair
        logger.debug("Token pair updated")

    def clear(self) -> None:
        with self._lock:
            self._backend.delete()
            self._pair = None
        logger.info("Token pair cleared")
