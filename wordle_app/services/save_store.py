"""
Save Store

Persistence adapters for the single local save slot. Stores hand back plain
snapshot dictionaries; they never raise on I/O problems, a failed load means
"no saved game" and a failed save is logged and ignored.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.game_settings import SAVE_KEY
from ..utils.game_logger import game_logger


class SaveStore:
    """Interface for a key-value save slot."""

    def load(self) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def save(self, snapshot: Dict[str, Any]) -> None:
        raise NotImplementedError


class MemoryStore(SaveStore):
    """In-memory save slot, used in tests and when persistence is disabled."""

    def __init__(self, initial: Optional[Any] = None):
        self.records: Dict[str, str] = {}
        if initial is not None:
            self.records[SAVE_KEY] = json.dumps(initial)
        self.save_count = 0

    def load(self) -> Optional[Dict[str, Any]]:
        raw = self.records.get(SAVE_KEY)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            return None

    def save(self, snapshot: Dict[str, Any]) -> None:
        self.records[SAVE_KEY] = json.dumps(snapshot)
        self.save_count += 1


class JsonFileStore(SaveStore):
    """
    Save slot backed by a JSON file on disk.

    The file holds an object of named records so the slot name can be
    changed without touching the file format.
    """

    def __init__(self, path, key: str = SAVE_KEY):
        self.path = Path(path)
        self.key = key

    def _read_records(self) -> Dict[str, Any]:
        with open(self.path, 'r', encoding='utf-8') as f:
            records = json.load(f)
        if not isinstance(records, dict):
            raise ValueError("Save file must contain an object")
        return records

    def load(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            return self._read_records().get(self.key)
        except (OSError, ValueError, RecursionError) as e:
            game_logger.logger.warning(f"Could not read save file {self.path}: {e}")
            return None

    def save(self, snapshot: Dict[str, Any]) -> None:
        tmp_path = self.path.with_name(self.path.name + '.tmp')
        try:
            try:
                records = self._read_records() if self.path.exists() else {}
            except (ValueError, RecursionError):
                records = {}
            records[self.key] = snapshot

            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(records, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            game_logger.logger.warning(f"Could not write save file {self.path}: {e}")
        finally:
            if tmp_path.is_file():
                tmp_path.unlink()


def build_store(config) -> SaveStore:
    """
    Creates the save store selected by the configuration.

    Args:
        config: Mapping or config class exposing SAVE_BACKEND and SAVE_FILE
    """
    get = config.get if isinstance(config, dict) else lambda name, default=None: getattr(config, name, default)
    backend = (get('SAVE_BACKEND', 'file') or 'file').lower()

    if backend == 'memory':
        return MemoryStore()
    if backend == 'file':
        return JsonFileStore(get('SAVE_FILE', 'wordle-state.json'))
    raise ValueError(f"Unknown save backend: {backend}")
