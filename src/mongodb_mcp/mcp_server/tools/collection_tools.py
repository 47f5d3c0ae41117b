"""Collection management tools: list, create and drop."""

from ._mongodb.collection_operations import CollectionOperations
from .models import CollectionRequest, DatabaseRequest
from .registry import ToolSpec


def collection_tool_specs(collection_ops: CollectionOperations) -> list[ToolSpec]:
    """Build the command table entries bound to a CollectionOperations instance."""
    return [
        ToolSpec(
            name="list_collections",
            title="List collections",
            description="List collections in a database.",
            request_model=DatabaseRequest,
            handler=collection_ops.list_collections,
        ),
        ToolSpec(
            name="create_collection",
            title="Create collection",
            description="Create a new collection in a specified database.",
            request_model=CollectionRequest,
            handler=collection_ops.create_collection,
            label='Collection "{collection_name}" created in database "{db_name}". Result: ',
        ),
        ToolSpec(
            name="drop_collection",
            title="Drop collection",
            description="Drop a collection from a specified database.",
            request_model=CollectionRequest,
            handler=collection_ops.drop_collection,
            label='Collection "{collection_name}" dropped from database "{db_name}". Result: ',
        ),
    ]
