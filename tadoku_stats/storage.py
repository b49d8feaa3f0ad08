"""
Persistence for extracted records.

A run's records are saved as a JSON list so they can be re-rendered
later without fetching again. Floats may pick up noise in the last
digits on the way through; everything downstream rounds to two places.
"""

import json
from pathlib import Path
from typing import IO, Union

import structlog

from .core.errors import StatsError
from .core.models import UserRecord

logger = structlog.get_logger(__name__)


PathOrStream = Union[str, Path, IO[str]]


def dump_records(records: list[UserRecord]) -> str:
    """Serialize records to a JSON string."""
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False)


def parse_records(text: str) -> list[UserRecord]:
    """
    Deserialize records from a JSON string.

    Raises:
        json.JSONDecodeError: If the text is not JSON
        StatsError: If the JSON is not a list of records
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise StatsError("Saved records must be a JSON list")
    return [UserRecord.from_dict(item) for item in data]


def save_records(records: list[UserRecord], target: PathOrStream) -> None:
    """
    Write records to a file path or an open text stream.

    Args:
        records: Records to save
        target: Path or writable text stream
    """
    text = dump_records(records)

    if isinstance(target, (str, Path)):
        with open(target, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("saved_records", path=str(target), records=len(records))
    else:
        target.write(text)
        logger.info("saved_records", path="<stream>", records=len(records))


def load_records(source: PathOrStream) -> list[UserRecord]:
    """
    Read records from a file path or an open text stream.

    Args:
        source: Path or readable text stream

    Returns:
        Records in saved order
    """
    if isinstance(source, (str, Path)):
        with open(source, "r", encoding="utf-8") as f:
            text = f.read()
        label = str(source)
    else:
        text = source.read()
        label = "<stream>"

    records = parse_records(text)
    logger.info("loaded_records", path=label, records=len(records))
    return records
