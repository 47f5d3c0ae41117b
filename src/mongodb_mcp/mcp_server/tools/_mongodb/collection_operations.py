"""Collection management operations: listing, creation and removal."""

import logging
from typing import Any

from ..base_tool import BaseTool
from ..utils import handle_mongo_errors

logger = logging.getLogger(__name__)


class CollectionOperations(BaseTool):
    """Facade over collection-level administrative commands."""

    @handle_mongo_errors
    async def list_collections(self, db_name: str) -> list[dict[str, Any]]:
        """List collection descriptors (name, type, options, info, idIndex)."""
        cursor = await self.get_database(db_name).list_collections()
        return await cursor.to_list(length=None)

    @handle_mongo_errors
    async def create_collection(self, db_name: str, collection_name: str) -> dict[str, Any]:
        """Create a collection.

        Returns:
            Confirmation record with the collection and database names
        """
        await self.get_database(db_name).create_collection(collection_name)
        logger.info(f"Created collection '{db_name}.{collection_name}'")
        return {
            "message": f"Collection '{collection_name}' created in database '{db_name}'.",
            "database": db_name,
            "collection": collection_name,
        }

    @handle_mongo_errors
    async def drop_collection(self, db_name: str, collection_name: str) -> bool:
        """Drop a collection. Dropping a missing collection also returns True."""
        await self.get_database(db_name).drop_collection(collection_name)
        logger.info(f"Dropped collection '{db_name}.{collection_name}'")
        return True
