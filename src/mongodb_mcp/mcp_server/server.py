"""MongoDB MCP Server using FastMCP.

This module wires the server together and runs it:

    ConnectionManager -> operation facades -> ToolRegistry -> FastMCP transport

The connection is opened when the FastMCP lifespan starts and closed when it
ends, so exactly one Motor client exists for the lifetime of the process.

Tool groups:
    - Database: get_database_info, get_database_list, create_database, drop_database
    - Collection: list_collections, create_collection, drop_collection
    - Document: create_document, find_document, find_one_document, update_one_document,
      update_many_documents, insert_many_documents, delete_document,
      delete_many_documents, count_documents
    - Index: create_index, drop_index, list_indexes
    - Bulk: bulk_write

Usage:
    mongodb-mcp-server            # stdio transport, configured via MONGODB_URI
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from mongodb_mcp.config.settings import Settings, settings

from .database.connection import ConnectionManager
from .tools import (
    ToolRegistry,
    bulk_tool_specs,
    collection_tool_specs,
    database_tool_specs,
    document_tool_specs,
    index_tool_specs,
)
from .tools._mongodb import (
    BulkOperations,
    CollectionOperations,
    DatabaseOperations,
    DocumentOperations,
    IndexOperations,
)
from .tools.fastmcp_bridge import register_tools

logger = logging.getLogger(__name__)

SERVER_INSTRUCTIONS = (
    "Administer a MongoDB deployment: inspect, create and drop databases and "
    "collections, insert, query, update and delete documents, manage indexes and "
    "run bulk writes. Filters and documents are passed to MongoDB as-is. "
    "update_one_document sets plain field values; update_many_documents expects "
    "update operators such as $set or $inc."
)


def build_registry(connection: ConnectionManager) -> ToolRegistry:
    """Create the five facades around one connection and register their tools.

    Args:
        connection: The process-wide connection manager

    Returns:
        A fully populated ToolRegistry
    """
    registry = ToolRegistry()
    registry.register_all(database_tool_specs(DatabaseOperations(connection)))
    registry.register_all(collection_tool_specs(CollectionOperations(connection)))
    registry.register_all(document_tool_specs(DocumentOperations(connection)))
    registry.register_all(index_tool_specs(IndexOperations(connection)))
    registry.register_all(bulk_tool_specs(BulkOperations(connection)))
    return registry


def create_server(
    app_settings: Settings | None = None,
    connection: ConnectionManager | None = None,
) -> FastMCP:
    """Create and configure the FastMCP server with all MongoDB tools.

    Args:
        app_settings: Settings to use (defaults to the global settings)
        connection: Pre-built connection manager (defaults to one built from settings)

    Returns:
        Configured FastMCP server instance
    """
    app_settings = app_settings or settings
    connection = connection or ConnectionManager.from_settings(app_settings)

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[None]:
        logger.info(f"Connecting to MongoDB at {app_settings.masked_connection_string}")
        await connection.connect()
        try:
            yield
        finally:
            await connection.disconnect()

    server = FastMCP(
        name=app_settings.mcp_server_name,
        version=app_settings.mcp_server_version,
        instructions=SERVER_INSTRUCTIONS,
        lifespan=lifespan,
    )

    registry = build_registry(connection)
    tool_names = register_tools(server, registry)
    logger.info(f"Available tools: {', '.join(tool_names)}")

    return server


def main() -> None:
    """Main entry point for the MCP server."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        logger.info("Starting MongoDB MCP Server...")
        settings.validate_configuration()

        server = create_server(settings)

        if settings.mcp_transport == "http":
            server.run(
                transport="http",
                host=settings.mcp_server_host,
                port=settings.mcp_server_port,
            )
        else:
            server.run(transport="stdio")

    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        raise


if __name__ == "__main__":
    main()
