"""Bulk write operations for MongoDB collections.

Operations are self-describing mappings with exactly one key naming the
operation type, in the driver's wire shape:

    {"insertOne": {"document": {...}}}
    {"updateOne": {"filter": {...}, "update": {...}, "upsert": false}}
    {"updateMany": {"filter": {...}, "update": {...}, "upsert": false}}
    {"replaceOne": {"filter": {...}, "replacement": {...}, "upsert": false}}
    {"deleteOne": {"filter": {...}}}
    {"deleteMany": {"filter": {...}}}

snake_case spellings (insert_one, update_many, ...) are accepted as well.
"""

import logging
from typing import Any

from pymongo import DeleteMany, DeleteOne, InsertOne, ReplaceOne, UpdateMany, UpdateOne
from pymongo.results import BulkWriteResult

from ...exceptions import InvalidArgumentsError
from ..base_tool import BaseTool
from ..utils import handle_mongo_errors

logger = logging.getLogger(__name__)

# Operation type -> (driver request class, required keys, optional keys)
BULK_OPERATION_TYPES: dict[str, tuple[type, tuple[str, ...], tuple[str, ...]]] = {
    "insertOne": (InsertOne, ("document",), ()),
    "updateOne": (UpdateOne, ("filter", "update"), ("upsert",)),
    "updateMany": (UpdateMany, ("filter", "update"), ("upsert",)),
    "replaceOne": (ReplaceOne, ("filter", "replacement"), ("upsert",)),
    "deleteOne": (DeleteOne, ("filter",), ()),
    "deleteMany": (DeleteMany, ("filter",), ()),
}

_SNAKE_CASE_ALIASES = {
    "insert_one": "insertOne",
    "update_one": "updateOne",
    "update_many": "updateMany",
    "replace_one": "replaceOne",
    "delete_one": "deleteOne",
    "delete_many": "deleteMany",
}


def normalize_operation_type(name: str) -> str | None:
    """Return the canonical camelCase operation type, or None if unknown."""
    if name in BULK_OPERATION_TYPES:
        return name
    return _SNAKE_CASE_ALIASES.get(name)


def describe_operation_error(operation: Any) -> str | None:
    """Explain why a bulk operation descriptor is malformed, or None if it is valid."""
    if not isinstance(operation, dict) or len(operation) != 1:
        return "each operation must be an object with exactly one operation key"

    (raw_type, body), = operation.items()
    op_type = normalize_operation_type(raw_type)
    if op_type is None:
        allowed = ", ".join(BULK_OPERATION_TYPES)
        return f"unknown operation '{raw_type}' (expected one of: {allowed})"

    if not isinstance(body, dict):
        return f"'{raw_type}' must map to an object"

    _, required, optional = BULK_OPERATION_TYPES[op_type]
    missing = [key for key in required if key not in body]
    if missing:
        return f"'{raw_type}' is missing required key(s): {', '.join(missing)}"

    unexpected = [key for key in body if key not in required + optional]
    if unexpected:
        return f"'{raw_type}' has unsupported key(s): {', '.join(unexpected)}"

    return None


def build_write_model(operation: dict[str, Any]) -> Any:
    """Convert one descriptor into a pymongo write model (InsertOne, UpdateMany, ...).

    Raises:
        InvalidArgumentsError: If the descriptor is malformed
    """
    problem = describe_operation_error(operation)
    if problem is not None:
        raise InvalidArgumentsError(
            message=f"Invalid bulk operation: {problem}",
            details={"fields": ["operations"], "operation": operation},
        )

    (raw_type, body), = operation.items()
    model_cls, required, optional = BULK_OPERATION_TYPES[normalize_operation_type(raw_type)]
    kwargs = {key: body[key] for key in required + optional if key in body}
    return model_cls(**kwargs)


class BulkOperations(BaseTool):
    """Facade over the driver's bulk_write primitive."""

    @handle_mongo_errors
    async def bulk_write(
        self,
        db_name: str,
        collection_name: str,
        operations: list[dict[str, Any]],
        ordered: bool = True,
    ) -> BulkWriteResult:
        """Execute a batch of insert/update/replace/delete operations.

        Args:
            db_name: Database name
            collection_name: Collection name
            operations: Self-describing operation descriptors, executed in order
            ordered: Stop at the first failing operation when True

        Returns:
            BulkWriteResult with inserted, matched, modified, deleted and upserted counts
        """
        collection = self.get_collection(db_name, collection_name)
        requests = [build_write_model(operation) for operation in operations]

        logger.info(
            f"Executing bulk write on '{db_name}.{collection_name}': "
            f"{len(requests)} operation(s), ordered={ordered}"
        )
        return await collection.bulk_write(requests, ordered=ordered)
