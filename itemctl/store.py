import logging
import os
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError
from .models import Record

logger = logging.getLogger(__name__)

_record_adapter = TypeAdapter(Record | None)
_records_adapter = TypeAdapter(list[Record | None] | None)
_encode_adapter = TypeAdapter(list[Record])


def read_bytes(path: Path) -> bytes:
    return Path(path).read_bytes()


def decode_record(data: str | bytes) -> Record:
    """Decode one item. A JSON null decodes to an all-zero record."""
    try:
        record = _record_adapter.validate_json(data)
    except ValidationError as e:
        raise DecodeError(str(e)) from e
    return Record() if record is None else record


def decode_records(data: bytes) -> list[Record]:
    """Decode the backing file content.

    Empty content and a JSON null both mean "no records yet"; null
    elements decode to all-zero records.
    """
    if not data.strip():
        return []
    try:
        records = _records_adapter.validate_json(data)
    except ValidationError as e:
        raise DecodeError(str(e)) from e
    return [Record() if record is None else record for record in records or []]


def encode_record(record: Record) -> bytes:
    return record.model_dump_json().encode()


def encode_records(records: list[Record]) -> bytes:
    return _encode_adapter.dump_json(list(records))


class RecordFile:
    """Read/write handle on a backing file, created if absent."""

    def __init__(self, path: Path, mode: int = 0o666):
        self.path = Path(path)
        self.mode = mode
        self._file = None

    def __enter__(self) -> "RecordFile":
        fd = os.open(self.path, os.O_RDWR | os.O_CREAT, self.mode)
        self._file = os.fdopen(fd, "r+b")
        logger.debug(f"Opened {self.path}")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._file.close()
        self._file = None

    def read_records(self) -> list[Record]:
        self._file.seek(0)
        records = decode_records(self._file.read())
        logger.debug(f"Read {len(records)} records from {self.path}")
        return records

    def write_records(self, records: list[Record]) -> None:
        data = encode_records(records)
        self._file.truncate(0)
        self._file.seek(0)
        self._file.write(data)
        self._file.flush()
        logger.debug(f"Wrote {len(records)} records ({len(data)} bytes) to {self.path}")
