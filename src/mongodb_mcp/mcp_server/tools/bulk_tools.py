"""Bulk write tool."""

from ._mongodb.bulk_operations import BulkOperations
from .models import BulkWriteRequest
from .registry import ToolSpec


def bulk_tool_specs(bulk_ops: BulkOperations) -> list[ToolSpec]:
    """Build the command table entries bound to a BulkOperations instance."""
    return [
        ToolSpec(
            name="bulk_write",
            title="Bulk write",
            description="Perform bulk write operations on a collection.",
            request_model=BulkWriteRequest,
            handler=bulk_ops.bulk_write,
            label="Bulk write result: ",
        ),
    ]
