"""Database management operations: info, listing, creation and removal."""

import logging
from datetime import datetime, timezone
from typing import Any

from ..base_tool import BaseTool
from ..utils import handle_mongo_errors

logger = logging.getLogger(__name__)

# MongoDB creates databases lazily, so creation writes a marker document here
DEFAULT_COLLECTION = "default_collection"


class DatabaseOperations(BaseTool):
    """Facade over database-level administrative commands."""

    @handle_mongo_errors
    async def get_database_info(self, db_name: str) -> dict[str, Any]:
        """Get information about a database.

        Args:
            db_name: Database name

        Returns:
            Dict containing:
                - name: The database name
                - collections: Collection descriptors from listCollections
                - stats: The dbStats command reply
        """
        db = self.get_database(db_name)
        cursor = await db.list_collections()
        collections = await cursor.to_list(length=None)
        stats = await db.command("dbStats")
        return {"name": db_name, "collections": collections, "stats": stats}

    @handle_mongo_errors
    async def list_databases(self) -> dict[str, Any]:
        """List all databases on the server.

        Returns:
            The listDatabases command reply (databases, totalSize, ok)
        """
        client = self.get_client()
        return await client.admin.command("listDatabases")

    @handle_mongo_errors
    async def create_database(self, db_name: str) -> dict[str, Any]:
        """Create a database by inserting a marker document into DEFAULT_COLLECTION.

        Args:
            db_name: Database name

        Returns:
            Confirmation record with the database name
        """
        collection = self.get_collection(db_name, DEFAULT_COLLECTION)
        await collection.insert_one({"created_at": datetime.now(timezone.utc)})
        logger.info(f"Created database '{db_name}'")
        return {"message": f"Database '{db_name}' created.", "database": db_name}

    @handle_mongo_errors
    async def drop_database(self, db_name: str) -> bool:
        """Drop a database.

        Args:
            db_name: Database name

        Returns:
            True once the server acknowledged the drop
        """
        await self.get_client().drop_database(db_name)
        logger.info(f"Dropped database '{db_name}'")
        return True
