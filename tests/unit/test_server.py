"""Unit tests for server wiring and the FastMCP bridge."""

from unittest.mock import MagicMock

import pytest
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from mongodb_mcp.config.settings import Settings
from mongodb_mcp.mcp_server.server import build_registry, create_server
from mongodb_mcp.mcp_server.tools.fastmcp_bridge import DispatchedTool, register_tools

EXPECTED_TOOLS = {
    "get_database_info",
    "get_database_list",
    "create_database",
    "drop_database",
    "list_collections",
    "create_collection",
    "drop_collection",
    "create_document",
    "delete_document",
    "find_document",
    "find_one_document",
    "update_one_document",
    "insert_many_documents",
    "update_many_documents",
    "delete_many_documents",
    "count_documents",
    "create_index",
    "drop_index",
    "list_indexes",
    "bulk_write",
}


@pytest.mark.unit
class TestBuildRegistry:
    def test_registers_every_tool_once(self, connection_manager):
        registry = build_registry(connection_manager)

        assert set(registry.names()) == EXPECTED_TOOLS
        assert len(registry) == len(EXPECTED_TOOLS)

    def test_every_tool_has_description_and_object_schema(self, connection_manager):
        for spec in build_registry(connection_manager):
            schema = spec.input_schema()
            assert spec.description
            assert schema["type"] == "object"

    def test_get_database_list_takes_no_arguments(self, connection_manager):
        spec = build_registry(connection_manager).get("get_database_list")

        assert spec.input_schema().get("required", []) == []

    async def test_dispatch_through_real_facade(
        self, connected_manager, mock_collection
    ):
        mock_collection.count_documents.return_value = 4
        registry = build_registry(connected_manager)

        response = await registry.dispatch(
            "count_documents",
            {"dbName": "shop", "collectionName": "orders", "filter": {"status": "open"}},
        )

        mock_collection.count_documents.assert_awaited_once_with({"status": "open"})
        assert response.text == "Count result: 4"

    async def test_dispatch_before_connect_is_error_response(self, connection_manager):
        registry = build_registry(connection_manager)

        response = await registry.dispatch("get_database_list", {})

        assert response.is_error is True
        assert "DB_NOT_CONNECTED" in response.text


@pytest.mark.unit
class TestFastMCPBridge:
    async def test_run_returns_text_content(self, connected_manager):
        registry = build_registry(connected_manager)
        tool = DispatchedTool.from_spec(registry.get("drop_database"), registry)

        result = await tool.run({"dbName": "inventory"})

        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text == 'Database "inventory" dropped. Result: true'

    async def test_run_raises_tool_error_on_failure(self, connection_manager):
        registry = build_registry(connection_manager)
        tool = DispatchedTool.from_spec(registry.get("drop_database"), registry)

        with pytest.raises(ToolError, match="DB_NOT_CONNECTED"):
            await tool.run({"dbName": "inventory"})

    async def test_run_raises_tool_error_on_invalid_arguments(self, connected_manager):
        registry = build_registry(connected_manager)
        tool = DispatchedTool.from_spec(registry.get("drop_database"), registry)

        with pytest.raises(ToolError, match="INVALID_ARGUMENTS"):
            await tool.run({})

    def test_from_spec_copies_metadata(self, connection_manager):
        registry = build_registry(connection_manager)
        spec = registry.get("bulk_write")

        tool = DispatchedTool.from_spec(spec, registry)

        assert tool.name == "bulk_write"
        assert tool.description == spec.description
        assert tool.parameters == spec.input_schema()

    def test_register_tools_adds_every_tool(self, connection_manager):
        registry = build_registry(connection_manager)
        server = MagicMock()

        names = register_tools(server, registry)

        assert set(names) == EXPECTED_TOOLS
        assert server.add_tool.call_count == len(EXPECTED_TOOLS)


@pytest.mark.unit
class TestCreateServer:
    def test_create_server_uses_settings(self, connection_manager):
        app_settings = Settings(mcp_server_name="test-mongodb-mcp")

        server = create_server(app_settings, connection=connection_manager)

        assert isinstance(server, FastMCP)
        assert server.name == "test-mongodb-mcp"

    def test_create_server_does_not_connect(self, connection_manager, client_factory):
        create_server(Settings(), connection=connection_manager)

        client_factory.assert_not_called()
        assert connection_manager.is_connected() is False
