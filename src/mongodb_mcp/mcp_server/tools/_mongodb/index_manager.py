"""Index management operations for MongoDB collections.

Index keys arrive as a mapping of field name to direction or type
(1, -1, "text", "2dsphere", "hashed", ...) and keep their insertion order,
which MongoDB uses as the key order of compound indexes.
"""

import logging
from typing import Any

from ..base_tool import BaseTool
from ..utils import handle_mongo_errors

logger = logging.getLogger(__name__)


class IndexOperations(BaseTool):
    """Facade over index creation, removal and listing."""

    @handle_mongo_errors
    async def create_index(
        self,
        db_name: str,
        collection_name: str,
        keys: dict[str, Any],
        options: dict[str, Any] | None = None,
    ) -> str:
        """Create an index.

        Args:
            db_name: Database name
            collection_name: Collection name
            keys: Field to direction mapping, e.g. {"email": 1, "created_at": -1}
            options: Driver index options such as unique, name, sparse, expireAfterSeconds

        Returns:
            The name of the created index
        """
        collection = self.get_collection(db_name, collection_name)
        name = await collection.create_index(list(keys.items()), **(options or {}))
        logger.info(f"Created index '{name}' on '{db_name}.{collection_name}'")
        return name

    @handle_mongo_errors
    async def drop_index(
        self, db_name: str, collection_name: str, index_name: str
    ) -> dict[str, Any]:
        """Drop an index by name.

        Returns:
            Confirmation record naming the dropped index and its namespace
        """
        collection = self.get_collection(db_name, collection_name)
        await collection.drop_index(index_name)
        logger.info(f"Dropped index '{index_name}' from '{db_name}.{collection_name}'")
        return {
            "message": f"Index '{index_name}' dropped from '{db_name}.{collection_name}'.",
            "database": db_name,
            "collection": collection_name,
            "index": index_name,
        }

    @handle_mongo_errors
    async def list_indexes(self, db_name: str, collection_name: str) -> list[dict[str, Any]]:
        """List index descriptors (v, key, name and options) of a collection."""
        collection = self.get_collection(db_name, collection_name)
        indexes = await collection.list_indexes().to_list(length=None)
        return [dict(index) for index in indexes]
