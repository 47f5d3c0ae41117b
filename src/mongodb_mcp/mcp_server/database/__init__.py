"""Store connection lifecycle."""

from .connection import ConnectionManager, ConnectionState

__all__ = ["ConnectionManager", "ConnectionState"]
