"""Document management tools: insert, find, update, delete and count."""

from ._mongodb.document_operations import DocumentOperations
from .models import (
    CountDocumentsRequest,
    FilterRequest,
    FindDocumentsRequest,
    InsertDocumentRequest,
    InsertManyDocumentsRequest,
    UpdateManyDocumentsRequest,
    UpdateOneDocumentRequest,
)
from .registry import ToolSpec


def document_tool_specs(document_ops: DocumentOperations) -> list[ToolSpec]:
    """Build the command table entries bound to a DocumentOperations instance."""
    return [
        ToolSpec(
            name="create_document",
            title="Create document",
            description="Insert a new document into a specified collection in a database.",
            request_model=InsertDocumentRequest,
            handler=document_ops.insert_one,
            label='Document inserted into "{collection_name}" in database "{db_name}". Result: ',
        ),
        ToolSpec(
            name="delete_document",
            title="Delete document",
            description="Delete a document from a collection in a database.",
            request_model=FilterRequest,
            handler=document_ops.delete_one,
            label='Document(s) deleted from "{collection_name}" in database "{db_name}". Result: ',
        ),
        ToolSpec(
            name="find_document",
            title="Find documents",
            description="Find documents in a collection with an optional filter.",
            request_model=FindDocumentsRequest,
            handler=document_ops.find,
            label="Documents found: ",
        ),
        ToolSpec(
            name="find_one_document",
            title="Find one document",
            description="Find a single document in a collection by filter.",
            request_model=FilterRequest,
            handler=document_ops.find_one,
            label="Document found: ",
        ),
        ToolSpec(
            name="update_one_document",
            title="Update one document",
            description=(
                "Update a single document in a collection by filter. "
                "newValue holds plain field values, which are set on the matched document."
            ),
            request_model=UpdateOneDocumentRequest,
            handler=document_ops.update_one,
            label="Update result: ",
        ),
        ToolSpec(
            name="insert_many_documents",
            title="Insert many documents",
            description="Insert multiple documents into a collection.",
            request_model=InsertManyDocumentsRequest,
            handler=document_ops.insert_many,
            label="Insert many result: ",
        ),
        ToolSpec(
            name="update_many_documents",
            title="Update many documents",
            description=(
                "Update multiple documents in a collection by filter. "
                "update must be an update operator document such as {\"$set\": {...}}."
            ),
            request_model=UpdateManyDocumentsRequest,
            handler=document_ops.update_many,
            label="Update many result: ",
        ),
        ToolSpec(
            name="delete_many_documents",
            title="Delete many documents",
            description="Delete multiple documents from a collection by filter.",
            request_model=FilterRequest,
            handler=document_ops.delete_many,
            label="Delete many result: ",
        ),
        ToolSpec(
            name="count_documents",
            title="Count documents",
            description="Count documents in a collection with an optional filter.",
            request_model=CountDocumentsRequest,
            handler=document_ops.count_documents,
            label="Count result: ",
        ),
    ]
