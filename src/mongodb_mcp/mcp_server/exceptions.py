"""Exception hierarchy for the MongoDB MCP server.

Every error raised by the server inherits from MCPServerError so callers at the
transport boundary can catch server failures with a single except clause while
still telling the failure domains apart:

    MCPServerError
    ├── DatabaseError
    │   ├── DatabaseConnectionError      connect() failed
    │   ├── DatabaseDisconnectionError   disconnect() failed
    │   ├── NotConnectedError            client used before connect()
    │   └── StoreOperationError          driver rejected a facade operation
    ├── ValidationError
    │   └── InvalidArgumentsError        tool arguments do not match the schema
    ├── ToolRegistryError
    │   ├── UnknownToolError             no tool registered under that name
    │   └── DuplicateToolError           tool name registered twice
    └── ConfigurationError

Each exception carries structured context:
    - error_code: machine-readable identifier (e.g. "DB_NOT_CONNECTED")
    - message: human-readable description
    - details: extra context (database, collection, tool, fields, ...)
    - timestamp / request_id: for correlating log lines
    - original_exception: the driver exception that caused the failure

Usage Example:
--------------
```python
try:
    await collection.insert_one(document)
except PyMongoError as e:
    raise wrap_store_error(
        e, operation="insert_one", database="shop", collection="orders"
    ) from e
```
"""

import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

# =============================================================================
# BASE EXCEPTION CLASS
# =============================================================================


@dataclass(eq=False)
class MCPServerError(Exception):
    """Base exception for all MCP server errors.

    Attributes:
    -----------
    message : str
        Human-readable error description for clients and logs
    error_code : str
        Machine-readable error identifier (e.g. "STORE_OPERATION_FAILED")
    details : dict
        Additional context about the error
    timestamp : str
        ISO 8601 timestamp when the error occurred
    request_id : str
        Unique identifier for correlating log lines of one failure
    original_exception : Optional[Exception]
        The underlying exception that caused this error

    Example:
    --------
    >>> raise MCPServerError(
    ...     message="Something failed",
    ...     error_code="INTERNAL_ERROR",
    ...     details={"tool": "find_document"},
    ... )
    """

    message: str
    error_code: str
    details: dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    request_id: str = field(default_factory=lambda: str(uuid4()))
    original_exception: Exception | None = None

    def __str__(self) -> str:
        """``[CODE] message | Details: {...} | Caused by: Type: text`` for logs and tool responses."""
        parts = [f"[{self.error_code}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.original_exception is not None:
            cause = self.original_exception
            parts.append(f"Caused by: {type(cause).__name__}: {cause}")
        return " | ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(error_code={self.error_code!r}, message={self.message!r}, "
            f"request_id={self.request_id!r}, timestamp={self.timestamp!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Structured form for logging and error payloads.

        Returns:
        --------
        dict with keys error, error_code, details, timestamp and request_id,
        plus original_error (type, message, traceback lines) when a cause is attached.
        """
        payload: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "timestamp": self.timestamp,
            "request_id": self.request_id,
        }

        cause = self.original_exception
        if cause is not None:
            payload["original_error"] = {
                "type": type(cause).__name__,
                "message": str(cause),
                "traceback": traceback.format_exception(type(cause), cause, cause.__traceback__),
            }

        return payload


# =============================================================================
# DATABASE EXCEPTIONS
# =============================================================================


@dataclass(eq=False)
class DatabaseError(MCPServerError):
    """Base class for connection lifecycle and store failures."""

    error_code: str = "DATABASE_ERROR"


@dataclass(eq=False)
class DatabaseConnectionError(DatabaseError):
    """Opening the store connection failed.

    The connection manager stays DISCONNECTED, so connect() may be called again.

    Example:
    --------
    >>> raise DatabaseConnectionError(
    ...     message="Failed to connect to MongoDB",
    ...     details={"timeout_ms": 5000},
    ... )
    """

    error_code: str = "DB_CONNECTION_FAILED"


@dataclass(eq=False)
class DatabaseDisconnectionError(DatabaseError):
    """Closing the store connection failed."""

    error_code: str = "DB_DISCONNECTION_FAILED"


@dataclass(eq=False)
class NotConnectedError(DatabaseError):
    """The client was requested while the manager is DISCONNECTED.

    Raised by ConnectionManager.get_client() before any I/O takes place.
    """

    message: str = "MongoDB client is not connected. Call connect() first."
    error_code: str = "DB_NOT_CONNECTED"


@dataclass(eq=False)
class StoreOperationError(DatabaseError):
    """A facade operation was rejected by the store.

    Covers network failures, duplicate keys, invalid update documents and any
    other error reported by the driver.

    Example:
    --------
    >>> raise StoreOperationError(
    ...     message="E11000 duplicate key error",
    ...     operation="insert_one",
    ...     database="shop",
    ...     collection="orders",
    ... )
    """

    error_code: str = "STORE_OPERATION_FAILED"
    operation: str | None = None
    database: str | None = None
    collection: str | None = None

    def __post_init__(self) -> None:
        context = {
            "operation": self.operation,
            "database": self.database,
            "collection": self.collection,
        }
        for key, value in context.items():
            if value is not None:
                self.details.setdefault(key, value)


# =============================================================================
# VALIDATION EXCEPTIONS
# =============================================================================


@dataclass(eq=False)
class ValidationError(MCPServerError):
    """Client input did not pass validation."""

    error_code: str = "VALIDATION_ERROR"


@dataclass(eq=False)
class InvalidArgumentsError(ValidationError):
    """Tool arguments were rejected before the handler ran.

    details["fields"] lists every offending argument using its wire name.

    Example:
    --------
    >>> raise InvalidArgumentsError(
    ...     message="Invalid arguments for tool 'find_document'",
    ...     details={"tool": "find_document", "fields": ["dbName"]},
    ... )
    """

    error_code: str = "INVALID_ARGUMENTS"

    @property
    def fields(self) -> list[str]:
        return list(self.details.get("fields", []))


# =============================================================================
# TOOL REGISTRY EXCEPTIONS
# =============================================================================


@dataclass(eq=False)
class ToolRegistryError(MCPServerError):
    """Base class for registry misuse."""

    error_code: str = "TOOL_REGISTRY_ERROR"


@dataclass(eq=False)
class UnknownToolError(ToolRegistryError):
    """No tool is registered under the requested name."""

    error_code: str = "UNKNOWN_TOOL"


@dataclass(eq=False)
class DuplicateToolError(ToolRegistryError):
    """A tool name was registered twice."""

    error_code: str = "DUPLICATE_TOOL"


# =============================================================================
# CONFIGURATION EXCEPTIONS
# =============================================================================


@dataclass(eq=False)
class ConfigurationError(MCPServerError):
    """Invalid configuration detected at startup.

    These should crash the process at startup rather than being handled.
    """

    error_code: str = "CONFIGURATION_ERROR"


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def wrap_store_error(
    exception: Exception,
    operation: str,
    database: str | None = None,
    collection: str | None = None,
) -> MCPServerError:
    """Convert a driver exception into a StoreOperationError.

    Server errors are returned unchanged so that NotConnectedError and friends
    keep their identity when they pass through a facade.

    Args:
    -----
    exception : Exception
        The exception raised while talking to the store
    operation : str
        Facade operation name (e.g. "update_many")
    database, collection : str, optional
        Target namespace of the operation

    Returns:
    --------
    MCPServerError
    """
    if isinstance(exception, MCPServerError):
        return exception

    return StoreOperationError(
        message=str(exception) or type(exception).__name__,
        operation=operation,
        database=database,
        collection=collection,
        original_exception=exception,
    )
