"""Document CRUD operations on a named collection.

Filters, documents and update payloads are opaque mappings handed to the
driver verbatim. The one exception is update_one, whose ``new_value`` holds
plain field values and is wrapped in ``$set``; update_many expects a complete
update-operator document from the caller.
"""

import logging
from typing import Any

from pymongo.results import DeleteResult, InsertManyResult, InsertOneResult, UpdateResult

from ..base_tool import BaseTool
from ..utils import handle_mongo_errors

logger = logging.getLogger(__name__)


class DocumentOperations(BaseTool):
    """Facade over single- and multi-document CRUD primitives."""

    @handle_mongo_errors
    async def insert_one(
        self, db_name: str, collection_name: str, document: dict[str, Any]
    ) -> InsertOneResult:
        """Insert a single document. The caller's mapping is not mutated."""
        collection = self.get_collection(db_name, collection_name)
        return await collection.insert_one(dict(document))

    @handle_mongo_errors
    async def insert_many(
        self, db_name: str, collection_name: str, documents: list[dict[str, Any]]
    ) -> InsertManyResult:
        """Insert several documents in order."""
        collection = self.get_collection(db_name, collection_name)
        return await collection.insert_many([dict(document) for document in documents])

    @handle_mongo_errors
    async def find_one(
        self, db_name: str, collection_name: str, filter: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Return the first document matching the filter, or None."""
        collection = self.get_collection(db_name, collection_name)
        return await collection.find_one(filter)

    @handle_mongo_errors
    async def find(
        self, db_name: str, collection_name: str, filter: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Return every document matching the filter (all documents when omitted)."""
        collection = self.get_collection(db_name, collection_name)
        return await collection.find(filter or {}).to_list(length=None)

    @handle_mongo_errors
    async def update_one(
        self,
        db_name: str,
        collection_name: str,
        filter: dict[str, Any],
        new_value: dict[str, Any],
    ) -> UpdateResult:
        """Set the given fields on the first matching document.

        Other fields of the document are left untouched.
        """
        collection = self.get_collection(db_name, collection_name)
        return await collection.update_one(filter, {"$set": new_value})

    @handle_mongo_errors
    async def update_many(
        self,
        db_name: str,
        collection_name: str,
        filter: dict[str, Any],
        update: dict[str, Any],
    ) -> UpdateResult:
        """Apply an update-operator document (e.g. {"$inc": {"n": 1}}) to every match."""
        collection = self.get_collection(db_name, collection_name)
        return await collection.update_many(filter, update)

    @handle_mongo_errors
    async def delete_one(
        self, db_name: str, collection_name: str, filter: dict[str, Any]
    ) -> DeleteResult:
        collection = self.get_collection(db_name, collection_name)
        return await collection.delete_one(filter)

    @handle_mongo_errors
    async def delete_many(
        self, db_name: str, collection_name: str, filter: dict[str, Any]
    ) -> DeleteResult:
        collection = self.get_collection(db_name, collection_name)
        return await collection.delete_many(filter)

    @handle_mongo_errors
    async def count_documents(
        self, db_name: str, collection_name: str, filter: dict[str, Any] | None = None
    ) -> int:
        """Count documents matching the filter (all documents when omitted)."""
        collection = self.get_collection(db_name, collection_name)
        return await collection.count_documents(filter or {})
