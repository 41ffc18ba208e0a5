"""
Export Service

Builds the downloadable backup of both collections:

    {"items": [...], "guests": [...], "exportDate": "<ISO-8601>"}

The document is write-only. Nothing reads it back into the store.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from event_budget.config import get_settings
from event_budget.logs import get_logger
from event_budget.models.views import ExportDocument
from event_budget.services.storage.interface import RecordStoreInterface, StorageError


logger = get_logger(__name__)


def build_export(
    store: RecordStoreInterface,
    now: Optional[datetime] = None,
) -> ExportDocument:
    """
    Snapshot both collections into an export document.

    Args:
        store: Where the collections come from
        now: Generation timestamp. Defaults to the current UTC time.
    """
    return ExportDocument(
        items=list(store.get_all_items()),
        guests=list(store.get_all_guests()),
        export_date=now or datetime.now(timezone.utc),
    )


def default_export_path(directory: Optional[Union[str, Path]] = None) -> Path:
    filename = get_settings().app.export_filename
    return Path(directory or ".") / filename


def write_export(
    document: ExportDocument,
    path: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Write an export document as indented JSON.

    Returns:
        The path written to

    Raises:
        StorageError: If the file cannot be written
    """
    target = Path(path) if path is not None else default_export_path()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(document.to_json(), encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Failed to write export to {target}: {e}") from e

    logger.info(
        "export_written",
        path=str(target),
        items=len(document.items),
        guests=len(document.guests),
    )
    return target
