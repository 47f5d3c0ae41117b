"""Pydantic request models for the MongoDB MCP tools.

Each tool's parameter schema is one of these models. Wire names are camelCase
(dbName, collectionName, newValue, indexName); the Python field names equal the
keyword arguments of the facade method the tool is bound to, so a validated
request can be passed on with ``handler(**request.model_dump())``.

Filters, documents and update payloads are typed as ``dict[str, Any]``: only
the top-level shape is validated here, nested contents stay opaque.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._mongodb.bulk_operations import describe_operation_error


class ToolRequest(BaseModel):
    """Base class for tool argument models."""

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# DATABASE / COLLECTION SCOPED REQUESTS
# =============================================================================


class DatabaseRequest(ToolRequest):
    """Arguments naming a database."""

    db_name: str = Field(..., alias="dbName", min_length=1, description="Database name")


class CollectionRequest(DatabaseRequest):
    """Arguments naming a collection inside a database."""

    collection_name: str = Field(
        ..., alias="collectionName", min_length=1, description="Collection name"
    )


# =============================================================================
# DOCUMENT TOOLS MODELS
# =============================================================================


class InsertDocumentRequest(CollectionRequest):
    document: dict[str, Any] = Field(..., description="Document to insert")


class InsertManyDocumentsRequest(CollectionRequest):
    documents: list[dict[str, Any]] = Field(
        ..., min_length=1, description="Documents to insert"
    )


class FindDocumentsRequest(CollectionRequest):
    filter: dict[str, Any] | None = Field(
        None, description="Filter to match documents (all documents when omitted)"
    )


class FilterRequest(CollectionRequest):
    """Arguments for tools that require a filter (find one, delete)."""

    filter: dict[str, Any] = Field(..., description="Filter to match document(s)")


class UpdateOneDocumentRequest(FilterRequest):
    new_value: dict[str, Any] = Field(
        ...,
        alias="newValue",
        min_length=1,
        description="Field values to set on the matched document (plain values, no operators)",
    )


class UpdateManyDocumentsRequest(FilterRequest):
    update: dict[str, Any] = Field(
        ...,
        min_length=1,
        description='Update operator document, e.g. {"$set": {"status": "archived"}}',
    )

    @field_validator("update")
    @classmethod
    def validate_update_operators(cls, value: dict[str, Any]) -> dict[str, Any]:
        """Require update-operator syntax ($set, $inc, ...) at the top level."""
        plain_fields = [key for key in value if not key.startswith("$")]
        if plain_fields:
            raise ValueError(
                f"update must only contain update operators, got plain field(s): "
                f"{', '.join(plain_fields)}"
            )
        return value


class CountDocumentsRequest(CollectionRequest):
    filter: dict[str, Any] | None = Field(
        None, description="Filter to match documents (all documents when omitted)"
    )


# =============================================================================
# INDEX TOOLS MODELS
# =============================================================================


class CreateIndexRequest(CollectionRequest):
    keys: dict[str, Any] = Field(
        ...,
        min_length=1,
        description='Index keys mapping field to direction or type, e.g. {"email": 1}',
    )
    options: dict[str, Any] | None = Field(
        None, description='Index options, e.g. {"unique": true, "name": "email_idx"}'
    )


class DropIndexRequest(CollectionRequest):
    index_name: str = Field(..., alias="indexName", min_length=1, description="Index name")


# =============================================================================
# BULK TOOLS MODELS
# =============================================================================


class BulkWriteRequest(CollectionRequest):
    operations: list[dict[str, Any]] = Field(
        ...,
        min_length=1,
        description=(
            "Bulk operations array, each with exactly one of insertOne, updateOne, "
            "updateMany, replaceOne, deleteOne or deleteMany"
        ),
    )
    ordered: bool = Field(True, description="Stop at the first failing operation")

    @field_validator("operations")
    @classmethod
    def validate_operations(cls, value: list[dict[str, Any]]) -> list[dict[str, Any]]:
        problems = []
        for position, operation in enumerate(value):
            problem = describe_operation_error(operation)
            if problem is not None:
                problems.append(f"operations[{position}]: {problem}")
        if problems:
            raise ValueError("; ".join(problems))
        return value
