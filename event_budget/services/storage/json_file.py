"""
JSON File Storage Backend

Each named record lives in its own file: <data_dir>/<name>.json.

DESIGN DECISION: Plain JSON files on the local device because:
1. The whole data set is one person's single event (tens to low
   thousands of records)
2. The files are human readable and trivially backed up
3. No database setup required

TRADEOFFS:
- Every save rewrites the whole record (fine at this size)
- No cross-record transactions (items and guests are independent)

Writes go to a temporary file first and are then moved into place, so
a crash mid-write leaves the previous version intact.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from event_budget.config import get_settings
from event_budget.logs import get_logger
from event_budget.services.storage.interface import StorageBackend, StorageError


logger = get_logger(__name__)


class JsonFileBackend(StorageBackend):
    """File-per-record JSON storage."""

    def __init__(
        self,
        data_dir: Optional[Union[str, Path]] = None,
        write_retries: Optional[int] = None,
    ):
        storage_settings = get_settings().storage
        self._data_dir = Path(data_dir) if data_dir is not None else storage_settings.data_dir
        self._write_retries = write_retries or storage_settings.write_retries

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def record_path(self, name: str) -> Path:
        return self._data_dir / f"{name}.json"

    def load_record(self, name: str) -> Optional[Any]:
        """Load a record. Missing or undecodable files load as None."""
        path = self.record_path(name)
        if not path.exists():
            return None

        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning(
                "record_unreadable",
                record=name,
                path=str(path),
                error=str(e),
            )
            return None

    def save_record(self, name: str, data: Any) -> None:
        """Atomically replace a record, retrying transient OS errors."""
        path = self.record_path(name)
        payload = json.dumps(data, ensure_ascii=False, indent=2)

        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self._write_retries),
                wait=wait_exponential(multiplier=0.1, max=1),
                retry=retry_if_exception_type(OSError),
                reraise=True,
            ):
                with attempt:
                    self._write_atomic(path, payload)
        except OSError as e:
            raise StorageError(f"Failed to save record {name}: {e}") from e

    def _write_atomic(self, path: Path, payload: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.stem}-",
            suffix=".tmp",
            dir=path.parent,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            Path(tmp_name).replace(path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
