import json
import logging
from pathlib import Path

from config import settings

logger = logging.getLogger(__name__)


class PreferenceStore:
    """Durable string key-value slots backed by a JSON file."""

    def __init__(self, path: str | Path | None = None):
        self._path = Path(path or settings.preferences_path)
        self._store: dict[str, str] = self._read()

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self._store, indent=2), encoding="utf-8")
