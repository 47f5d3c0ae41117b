"""MongoDB connection manager owning the single Motor client of the process.

The manager is the only component allowed to open or close the physical
connection. Facades receive it at construction time and borrow the client per
call through get_client(), which fails fast with NotConnectedError while the
manager is DISCONNECTED. There is no implicit connect.

State machine:
    DISCONNECTED --connect()--> CONNECTED --disconnect()--> DISCONNECTED

Example:
    >>> from mongodb_mcp.mcp_server.database.connection import ConnectionManager
    >>> manager = ConnectionManager("mongodb://localhost:27017")
    >>> await manager.connect()
    >>> client = manager.get_client()
    >>> await manager.disconnect()
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from ..exceptions import DatabaseConnectionError, DatabaseDisconnectionError, NotConnectedError

if TYPE_CHECKING:
    from mongodb_mcp.config.settings import Settings

logger = logging.getLogger(__name__)


class ConnectionState(str, Enum):
    """Lifecycle state of the store connection."""

    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


class ConnectionManager:
    """Owns the Motor client and its connection state.

    Attributes:
        connection_string: MongoDB URI the client connects to
        timeout_seconds: Server selection and connect timeout
        min_pool_size: Minimum connections kept in the driver pool
        max_pool_size: Maximum connections allowed in the driver pool
    """

    def __init__(
        self,
        connection_string: str,
        *,
        timeout_seconds: int = 30,
        min_pool_size: int = 0,
        max_pool_size: int = 50,
        client_factory: Callable[..., AsyncIOMotorClient] = AsyncIOMotorClient,
    ) -> None:
        self.connection_string = connection_string
        self.timeout_seconds = timeout_seconds
        self.min_pool_size = min_pool_size
        self.max_pool_size = max_pool_size
        self._client_factory = client_factory
        self._client: AsyncIOMotorClient | None = None
        self._state = ConnectionState.DISCONNECTED

        logger.debug("ConnectionManager initialized")

    @classmethod
    def from_settings(cls, settings: "Settings", **kwargs: Any) -> "ConnectionManager":
        """Build a manager from application settings.

        Args:
            settings: Loaded application settings
            **kwargs: Overrides forwarded to the constructor (e.g. client_factory)

        Returns:
            A DISCONNECTED ConnectionManager
        """
        options = {
            "timeout_seconds": settings.mongodb_timeout,
            "min_pool_size": settings.mongodb_min_pool_size,
            "max_pool_size": settings.mongodb_max_pool_size,
        }
        options.update(kwargs)
        return cls(settings.mongodb_connection_string, **options)

    @property
    def state(self) -> ConnectionState:
        return self._state

    def is_connected(self) -> bool:
        """Check if the manager is in the CONNECTED state."""
        return self._state is ConnectionState.CONNECTED

    async def connect(self) -> None:
        """Open the connection and verify it with a ping.

        On failure the half-built client is closed and the state stays
        DISCONNECTED, so the caller may retry.

        Raises:
            DatabaseConnectionError: If the client cannot be created or the ping fails
        """
        logger.info("Attempting to connect to MongoDB...")
        client = None

        try:
            client = self._client_factory(
                self.connection_string,
                serverSelectionTimeoutMS=self.timeout_seconds * 1000,
                connectTimeoutMS=self.timeout_seconds * 1000,
                minPoolSize=self.min_pool_size,
                maxPoolSize=self.max_pool_size,
            )
            await client.admin.command("ping")

        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            self._discard(client)
            raise DatabaseConnectionError(
                message=f"Error connecting to MongoDB: {e}",
                details={"timeout_ms": self.timeout_seconds * 1000},
                original_exception=e,
            ) from e

        except Exception as e:
            logger.error(f"Unexpected error during MongoDB connection: {e}", exc_info=True)
            self._discard(client)
            raise DatabaseConnectionError(
                message=f"Unexpected error connecting to MongoDB: {e}",
                original_exception=e,
            ) from e

        self._client = client
        self._state = ConnectionState.CONNECTED
        logger.info("Successfully connected to MongoDB")

    async def disconnect(self) -> None:
        """Close the connection. No-op when already disconnected.

        Raises:
            DatabaseDisconnectionError: If the driver fails to close the client
        """
        if self._state is ConnectionState.DISCONNECTED or self._client is None:
            logger.debug("Not connected to MongoDB, nothing to disconnect")
            return

        logger.info("Disconnecting from MongoDB...")
        try:
            self._client.close()
        except Exception as e:
            logger.error(f"Error during MongoDB disconnection: {e}")
            raise DatabaseDisconnectionError(
                message=f"Error disconnecting from MongoDB: {e}",
                original_exception=e,
            ) from e

        self._client = None
        self._state = ConnectionState.DISCONNECTED
        logger.info("Successfully disconnected from MongoDB")

    def get_client(self) -> AsyncIOMotorClient:
        """Return the live client.

        Raises:
            NotConnectedError: If connect() has not succeeded, or disconnect() ran since
        """
        if self._state is not ConnectionState.CONNECTED or self._client is None:
            raise NotConnectedError()
        return self._client

    async def health_check(self) -> bool:
        """Ping the server. Returns False instead of raising."""
        if not self.is_connected():
            return False

        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            logger.warning(f"MongoDB health check failed: {e}")
            return False

        logger.debug("MongoDB health check passed")
        return True

    @staticmethod
    def _discard(client: AsyncIOMotorClient | None) -> None:
        if client is None:
            return
        try:
            client.close()
        except Exception as e:
            logger.debug(f"Ignoring error while closing failed client: {e}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(state={self._state.value})"
