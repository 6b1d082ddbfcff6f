import logging
from typing import BinaryIO, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidOperationError, MissingFlagError
from .operations import add_record, find_by_id, list_records, remove_record

logger = logging.getLogger(__name__)

OPERATION_FLAG = "operation"
ITEM_FLAG = "item"
ID_FLAG = "id"
FILE_NAME_FLAG = "fileName"

LIST_OPERATION = "list"
ADD_OPERATION = "add"
FIND_BY_ID_OPERATION = "findById"
REMOVE_OPERATION = "remove"

OPERATIONS = [LIST_OPERATION, ADD_OPERATION, FIND_BY_ID_OPERATION, REMOVE_OPERATION]


class Arguments(BaseModel):
    """Flag values for a single invocation."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    operation: str = ""
    item: str = ""
    id: str = ""
    file_name: str = Field(default="", alias=FILE_NAME_FLAG)

    @classmethod
    def from_flags(cls, flags: Mapping[str, str | None]) -> "Arguments":
        known = (OPERATION_FLAG, ITEM_FLAG, ID_FLAG, FILE_NAME_FLAG)
        return cls.model_validate({k: flags.get(k) or "" for k in known})

    def value(self, flag: str) -> str:
        if flag == FILE_NAME_FLAG:
            return self.file_name
        return getattr(self, flag)

    def require(self, flag: str) -> str:
        value = self.value(flag)
        if not value:
            raise MissingFlagError(flag)
        return value


def perform(args: Arguments, out: BinaryIO) -> None:
    file_name = args.require(FILE_NAME_FLAG)
    operation = args.require(OPERATION_FLAG)

    logger.debug(f"Performing {operation} on {file_name}")

    if operation == LIST_OPERATION:
        list_records(file_name, out)
    elif operation == ADD_OPERATION:
        add_record(file_name, args.require(ITEM_FLAG), out)
    elif operation == FIND_BY_ID_OPERATION:
        find_by_id(file_name, args.require(ID_FLAG), out)
    elif operation == REMOVE_OPERATION:
        remove_record(file_name, args.require(ID_FLAG), out)
    else:
        raise InvalidOperationError(operation)
