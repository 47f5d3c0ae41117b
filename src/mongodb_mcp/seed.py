"""Populate a database with sample records.

One-off utility for development and demos. Records go through the same
ConnectionManager and DocumentOperations facade the server uses.

Usage:
    python -m mongodb_mcp.seed --database company
    python -m mongodb_mcp.seed --database company --collection customers --file customers.json
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from mongodb_mcp.config.settings import settings
from mongodb_mcp.mcp_server.database.connection import ConnectionManager
from mongodb_mcp.mcp_server.exceptions import MCPServerError
from mongodb_mcp.mcp_server.tools._mongodb.document_operations import DocumentOperations

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {"name": "Juan", "email": "juan@example.com", "role": "engineer"},
    {"name": "Ana", "email": "ana@example.com", "role": "manager"},
]

SAMPLE_PAYROLL = [
    {"employee": "Juan", "salary": 1000, "currency": "USD"},
    {"employee": "Ana", "salary": 1500, "currency": "USD"},
]


class DatabaseSeeder:
    """Insert sample records into a database.

    The connection is owned by the caller; the seeder only borrows it.
    """

    def __init__(self, connection: ConnectionManager, db_name: str) -> None:
        self.db_name = db_name
        self.documents = DocumentOperations(connection)

    async def seed_collection(self, collection_name: str, records: list[dict[str, Any]]) -> int:
        """Insert records into a collection and return how many were inserted."""
        if not records:
            logger.info(f"No records to seed into '{self.db_name}.{collection_name}'")
            return 0
        result = await self.documents.insert_many(self.db_name, collection_name, records)
        inserted = len(result.inserted_ids)
        logger.info(f"Seeded {inserted} record(s) into '{self.db_name}.{collection_name}'")
        return inserted

    async def seed_users(self, users: list[dict[str, Any]]) -> int:
        return await self.seed_collection("users", users)

    async def seed_payroll(self, payroll: list[dict[str, Any]]) -> int:
        return await self.seed_collection("payroll", payroll)


def load_records(path: Path) -> list[dict[str, Any]]:
    """Load a JSON array of objects from a file."""
    records = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise ValueError(f"{path} must contain a JSON array of objects")
    return records


async def run(args: argparse.Namespace) -> int:
    connection = ConnectionManager.from_settings(settings)
    await connection.connect()
    try:
        seeder = DatabaseSeeder(connection, args.database)
        if args.file:
            return await seeder.seed_collection(args.collection, load_records(args.file))
        return await seeder.seed_users(SAMPLE_USERS) + await seeder.seed_payroll(SAMPLE_PAYROLL)
    finally:
        await connection.disconnect()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seed a MongoDB database with sample records")
    parser.add_argument("--database", "-d", required=True, help="Target database name")
    parser.add_argument(
        "--collection",
        "-c",
        default="users",
        help="Target collection when loading from --file (default: users)",
    )
    parser.add_argument(
        "--file",
        "-f",
        type=Path,
        help="JSON file with an array of records; built-in users/payroll samples when omitted",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        inserted = asyncio.run(run(args))
    except (MCPServerError, ValueError, OSError) as e:
        logger.error(f"Seeding failed: {e}")
        return 1

    logger.info(f"Seeding complete: {inserted} record(s) inserted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
