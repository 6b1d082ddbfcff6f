import logging
from pathlib import Path
from typing import BinaryIO

from .models import Record
from .store import RecordFile, decode_record, decode_records, encode_record, read_bytes

logger = logging.getLogger(__name__)


def find_record(records: list[Record], record_id: str) -> Record | None:
    for record in records:
        if record.id == record_id:
            return record
    return None


def find_last_index(records: list[Record], record_id: str) -> int | None:
    found = None
    for i, record in enumerate(records):
        if record.id == record_id:
            found = i
    return found


def list_records(file_name: str | Path, out: BinaryIO) -> None:
    out.write(read_bytes(file_name))


def add_record(file_name: str | Path, item: str, out: BinaryIO) -> None:
    """Append ITEM to the backing file unless its id is already taken.

    The item is decoded before the file is opened, so a malformed item
    never creates or touches the file.
    """
    record = decode_record(item)

    with RecordFile(file_name) as f:
        records = f.read_records()
        if find_record(records, record.id) is not None:
            out.write(f"Item with id {record.id} already exists".encode())
            return

        records.append(record)
        f.write_records(records)

    logger.info(f"Added item {record.id} to {file_name}")


def find_by_id(file_name: str | Path, record_id: str, out: BinaryIO) -> None:
    records = decode_records(read_bytes(file_name))
    record = find_record(records, record_id)
    if record is not None:
        out.write(encode_record(record))
    else:
        logger.debug(f"No item {record_id} in {file_name}")


def remove_record(file_name: str | Path, record_id: str, out: BinaryIO) -> None:
    """Remove the item with RECORD_ID from the backing file.

    If the id occurs more than once, the last occurrence is removed.
    """
    with RecordFile(file_name) as f:
        records = f.read_records()
        index = find_last_index(records, record_id)
        if index is None:
            out.write(f"Item with id {record_id} not found".encode())
            return

        del records[index]
        f.write_records(records)

    logger.info(f"Removed item {record_id} from {file_name}")
