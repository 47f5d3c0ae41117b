"""Shared utilities for the MongoDB operation facades and tool responses.

This module provides:
- handle_mongo_errors: decorator converting driver errors into StoreOperationError
- to_jsonable / dumps_pretty: serialization of driver results for tool responses
"""

import base64
import inspect
import json
import logging
from collections.abc import Callable, Mapping
from datetime import date, datetime
from decimal import Decimal
from functools import wraps
from typing import Any
from uuid import UUID

from bson import ObjectId
from bson.decimal128 import Decimal128
from bson.errors import BSONError
from bson.timestamp import Timestamp
from pymongo.errors import PyMongoError
from pymongo.results import (
    BulkWriteResult,
    DeleteResult,
    InsertManyResult,
    InsertOneResult,
    UpdateResult,
)

from ..exceptions import wrap_store_error

logger = logging.getLogger(__name__)


def handle_mongo_errors(func: Callable) -> Callable:
    """Decorator for consistent error handling across facade operations.

    Driver failures are re-raised as StoreOperationError carrying the operation
    name and the target database/collection, read from the ``db_name`` and
    ``collection_name`` arguments of the decorated method. TypeError and
    ValueError are included because pymongo raises them when it rejects an
    argument client-side (e.g. an update document without $ operators).
    Server errors such as NotConnectedError pass through unchanged. No retries.

    Example:
        @handle_mongo_errors
        async def count_documents(self, db_name, collection_name, filter=None):
            ...
    """
    signature = inspect.signature(func)

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (PyMongoError, BSONError, TypeError, ValueError) as e:
            bound = signature.bind_partial(*args, **kwargs)
            database = bound.arguments.get("db_name")
            collection = bound.arguments.get("collection_name")
            logger.error(
                f"MongoDB operation {func.__name__} failed on "
                f"{database or '-'}.{collection or '-'}: {e}"
            )
            raise wrap_store_error(
                e, operation=func.__name__, database=database, collection=collection
            ) from e

    return wrapper


def _write_result_to_dict(result: Any) -> dict[str, Any]:
    if isinstance(result, InsertOneResult):
        return {"acknowledged": result.acknowledged, "inserted_id": result.inserted_id}

    if isinstance(result, InsertManyResult):
        return {
            "acknowledged": result.acknowledged,
            "inserted_count": len(result.inserted_ids),
            "inserted_ids": result.inserted_ids,
        }

    if isinstance(result, UpdateResult):
        return {
            "acknowledged": result.acknowledged,
            "matched_count": result.matched_count,
            "modified_count": result.modified_count,
            "upserted_id": result.upserted_id,
        }

    if isinstance(result, DeleteResult):
        return {"acknowledged": result.acknowledged, "deleted_count": result.deleted_count}

    # BulkWriteResult
    return {
        "acknowledged": result.acknowledged,
        "inserted_count": result.inserted_count,
        "matched_count": result.matched_count,
        "modified_count": result.modified_count,
        "deleted_count": result.deleted_count,
        "upserted_count": result.upserted_count,
        "upserted_ids": {str(index): _id for index, _id in (result.upserted_ids or {}).items()},
    }


_WRITE_RESULTS = (InsertOneResult, InsertManyResult, UpdateResult, DeleteResult, BulkWriteResult)


def to_jsonable(value: Any) -> Any:
    """Convert MongoDB documents and driver results to JSON-compatible values.

    MongoDB results contain types (ObjectId, datetime, Decimal128, write result
    objects) that aren't JSON serializable. Nested documents and arrays are
    converted recursively.

    Example:
        >>> to_jsonable({"_id": ObjectId("65a..."), "at": datetime(2024, 1, 1)})
        {'_id': '65a...', 'at': '2024-01-01T00:00:00'}
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value

    if isinstance(value, _WRITE_RESULTS):
        return to_jsonable(_write_result_to_dict(value))

    if isinstance(value, Mapping):
        return {str(key): to_jsonable(item) for key, item in value.items()}

    if isinstance(value, (list, tuple, set)):
        return [to_jsonable(item) for item in value]

    if isinstance(value, (ObjectId, UUID)):
        return str(value)

    if isinstance(value, (datetime, date)):
        return value.isoformat()

    if isinstance(value, Decimal128):
        return str(value.to_decimal())

    if isinstance(value, Decimal):
        return str(value)

    if isinstance(value, Timestamp):
        return {"t": value.time, "i": value.inc}

    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")

    # Remaining BSON types (Regex, Code, MinKey, ...) have readable reprs
    return str(value)


def dumps_pretty(value: Any) -> str:
    """Serialize a result as pretty-printed JSON (2-space indent)."""
    return json.dumps(to_jsonable(value), indent=2, ensure_ascii=False)
