"""Index management tools: create, drop and list."""

from ._mongodb.index_manager import IndexOperations
from .models import CollectionRequest, CreateIndexRequest, DropIndexRequest
from .registry import ToolSpec


def index_tool_specs(index_ops: IndexOperations) -> list[ToolSpec]:
    """Build the command table entries bound to an IndexOperations instance."""
    return [
        ToolSpec(
            name="create_index",
            title="Create index",
            description="Create an index on a collection.",
            request_model=CreateIndexRequest,
            handler=index_ops.create_index,
            label="Index created: ",
        ),
        ToolSpec(
            name="drop_index",
            title="Drop index",
            description="Drop an index from a collection.",
            request_model=DropIndexRequest,
            handler=index_ops.drop_index,
            label="Index dropped: ",
        ),
        ToolSpec(
            name="list_indexes",
            title="List indexes",
            description="List all indexes on a collection.",
            request_model=CollectionRequest,
            handler=index_ops.list_indexes,
            label="Indexes: ",
        ),
    ]
