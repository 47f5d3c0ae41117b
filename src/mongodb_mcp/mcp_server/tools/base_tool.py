"""Base class for the MongoDB operation facades.

Every facade receives the process-wide ConnectionManager at construction time
and resolves databases and collections through it on each call. A facade never
opens, closes or otherwise changes the connection.

Example:
    >>> from mongodb_mcp.mcp_server.tools.base_tool import BaseTool
    >>> class MyOperations(BaseTool):
    ...     async def count(self, db_name, collection_name):
    ...         collection = self.get_collection(db_name, collection_name)
    ...         return await collection.count_documents({})
"""

import logging

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from ..database.connection import ConnectionManager

logger = logging.getLogger(__name__)


class BaseTool:
    """Base class for all operation facades.

    Attributes:
        connection: The shared ConnectionManager (read-only use)
    """

    def __init__(self, connection: ConnectionManager) -> None:
        self.connection = connection
        logger.debug(f"Initialized {self.__class__.__name__}")

    def get_client(self) -> AsyncIOMotorClient:
        """Borrow the live client.

        Raises:
            NotConnectedError: If the connection manager is not connected
        """
        return self.connection.get_client()

    def get_database(self, db_name: str) -> AsyncIOMotorDatabase:
        """Resolve a database by name on the live client."""
        return self.get_client()[db_name]

    def get_collection(self, db_name: str, collection_name: str) -> AsyncIOMotorCollection:
        """Resolve a collection by database and collection name."""
        return self.get_database(db_name)[collection_name]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.connection!r})"
