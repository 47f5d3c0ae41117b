"""Unit tests for the sample-data seeder."""

import json

import pytest

from mongodb_mcp.seed import (
    SAMPLE_PAYROLL,
    SAMPLE_USERS,
    DatabaseSeeder,
    build_parser,
    load_records,
)


@pytest.mark.unit
class TestDatabaseSeeder:
    async def test_seed_users_and_payroll(self, connected_manager, mock_database, mock_collection):
        seeder = DatabaseSeeder(connected_manager, "company")

        await seeder.seed_users(SAMPLE_USERS)
        await seeder.seed_payroll(SAMPLE_PAYROLL)

        requested = [call.args[0] for call in mock_database.__getitem__.call_args_list]
        assert requested == ["users", "payroll"]
        assert mock_collection.insert_many.await_count == 2

    async def test_empty_records_skip_the_store(self, connected_manager, mock_collection):
        inserted = await DatabaseSeeder(connected_manager, "company").seed_collection("users", [])

        assert inserted == 0
        mock_collection.insert_many.assert_not_awaited()


@pytest.mark.unit
class TestLoadRecords:
    def test_loads_json_array(self, tmp_path):
        path = tmp_path / "customers.json"
        path.write_text(json.dumps([{"name": "Ana"}]), encoding="utf-8")

        assert load_records(path) == [{"name": "Ana"}]

    def test_rejects_non_array(self, tmp_path):
        path = tmp_path / "customers.json"
        path.write_text(json.dumps({"name": "Ana"}), encoding="utf-8")

        with pytest.raises(ValueError, match="JSON array of objects"):
            load_records(path)


@pytest.mark.unit
def test_parser_defaults():
    args = build_parser().parse_args(["--database", "company"])

    assert args.database == "company"
    assert args.collection == "users"
    assert args.file is None
