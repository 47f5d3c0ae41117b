"""Database management tools: info, list, create and drop."""

from ._mongodb.database_operations import DatabaseOperations
from .models import DatabaseRequest, ToolRequest
from .registry import ToolSpec


def database_tool_specs(database_ops: DatabaseOperations) -> list[ToolSpec]:
    """Build the command table entries bound to a DatabaseOperations instance."""
    return [
        ToolSpec(
            name="get_database_info",
            title="Get database info",
            description="Get information about a specific database by name.",
            request_model=DatabaseRequest,
            handler=database_ops.get_database_info,
        ),
        ToolSpec(
            name="get_database_list",
            title="Get list database",
            description="Get a list of all databases.",
            request_model=ToolRequest,
            handler=database_ops.list_databases,
        ),
        ToolSpec(
            name="create_database",
            title="Create database",
            description="Create a new database by name.",
            request_model=DatabaseRequest,
            handler=database_ops.create_database,
            label='Database "{db_name}" created. Result: ',
        ),
        ToolSpec(
            name="drop_database",
            title="Drop database",
            description="Drop a database by name.",
            request_model=DatabaseRequest,
            handler=database_ops.drop_database,
            label='Database "{db_name}" dropped. Result: ',
        ),
    ]
