"""MongoDB MCP tools package.

Tool groups, one per facade:
    - database_tool_specs: get_database_info, get_database_list, create_database, drop_database
    - collection_tool_specs: list_collections, create_collection, drop_collection
    - document_tool_specs: create_document, find_document, find_one_document,
      update_one_document, update_many_documents, insert_many_documents,
      delete_document, delete_many_documents, count_documents
    - index_tool_specs: create_index, drop_index, list_indexes
    - bulk_tool_specs: bulk_write
"""

from .bulk_tools import bulk_tool_specs
from .collection_tools import collection_tool_specs
from .database_tools import database_tool_specs
from .document_tools import document_tool_specs
from .index_tools import index_tool_specs
from .registry import ToolRegistry, ToolResponse, ToolSpec

__all__ = [
    "ToolRegistry",
    "ToolResponse",
    "ToolSpec",
    "bulk_tool_specs",
    "collection_tool_specs",
    "database_tool_specs",
    "document_tool_specs",
    "index_tool_specs",
]
