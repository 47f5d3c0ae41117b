"""MongoDB operation facades.

One facade per functional area, each built around the shared ConnectionManager.
"""

from .bulk_operations import BulkOperations
from .collection_operations import CollectionOperations
from .database_operations import DatabaseOperations
from .document_operations import DocumentOperations
from .index_manager import IndexOperations

__all__ = [
    "BulkOperations",
    "CollectionOperations",
    "DatabaseOperations",
    "DocumentOperations",
    "IndexOperations",
]
