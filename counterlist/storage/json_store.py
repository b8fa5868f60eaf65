# coding: utf-8
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from pydantic import ValidationError

from counterlist.core.errors import StorageError
from counterlist.core.models import Counter
from counterlist.storage.engine import CounterStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(CounterStorage):
    """A JSON file holding the counter collection as an array."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load_raw(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, list):
            raise StorageError(f"Expected a JSON array in {self.path}, got {type(data).__name__}")
        return data

    def read(self) -> List[Counter]:
        counters = []
        for i, record in enumerate(self.load_raw()):
            try:
                counters.append(Counter.from_record(record))
            except ValidationError as e:
                raise StorageError(f"Invalid counter at index {i} in {self.path}: {e}") from e
        logger.debug(f"Read {len(counters)} counters from {self.path}")
        return counters

    def write(self, records: Sequence[Dict[str, Any]]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(list(records), ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e
        logger.debug(f"Wrote {len(records)} counters to {self.path}")
