"""
People API · Bootstrap and Seeding Tests
==========================================

What:  Tests for the lifespan, bootstrap_store(), seed_people() and the
       required-settings check.
How:   The store is mocked or left unconfigured; logging setup is patched
       out so pytest's log capture stays attached.
"""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from pymongo.errors import BulkWriteError

from people_api import main
from people_api.config import Settings
from people_api.database import MongoStore
from people_api.seed import SAMPLE_PEOPLE, seed_people


class TestLifespan:

    @pytest.mark.asyncio
    async def test_missing_uri_does_not_stop_startup(self, monkeypatch):
        monkeypatch.setattr(main, "setup_logging", lambda: None)
        monkeypatch.setattr(main.settings, "mongo_uri", "")
        app = main.create_app()

        async with main.lifespan(app):
            await asyncio.sleep(0)
            store = app.state.store
            assert isinstance(store, MongoStore)
            assert store.connected is False

        assert store.client is None

    @pytest.mark.asyncio
    async def test_unexpected_bootstrap_error_is_logged(self, monkeypatch, caplog):
        monkeypatch.setattr(main, "setup_logging", lambda: None)
        monkeypatch.setattr(
            main, "bootstrap_store", AsyncMock(side_effect=RuntimeError("boom"))
        )
        app = main.create_app()

        with caplog.at_level(logging.ERROR, logger="people_api.main"):
            async with main.lifespan(app):
                for _ in range(3):
                    await asyncio.sleep(0)

        assert "Store bootstrap failed: boom" in caplog.text

    def test_cancelled_task_is_not_reported(self, caplog):
        task = MagicMock()
        task.cancelled.return_value = True

        with caplog.at_level(logging.ERROR, logger="people_api.main"):
            main.log_bootstrap_failure(task)

        task.exception.assert_not_called()
        assert caplog.text == ""


class TestValidateRequired:

    def test_blank_uri_raises(self):
        with pytest.raises(ValueError, match="MONGO_URI is not set"):
            Settings(mongo_uri="   ").validate_required()

    def test_configured_uri_passes(self):
        Settings(mongo_uri="mongodb://db:27017/people").validate_required()


class TestBootstrapStore:

    @pytest.mark.asyncio
    async def test_seeds_only_when_connected_and_enabled(self):
        store = MagicMock()
        store.connect = AsyncMock(return_value=True)

        with patch("people_api.main.seed_people", new=AsyncMock()) as seed:
            await main.bootstrap_store(store, seed=True)
            seed.assert_awaited_once_with(store)

    @pytest.mark.asyncio
    async def test_no_seed_when_connection_failed(self):
        store = MagicMock()
        store.connect = AsyncMock(return_value=False)

        with patch("people_api.main.seed_people", new=AsyncMock()) as seed:
            await main.bootstrap_store(store, seed=True)
            seed.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_seeding_off_by_default(self):
        store = MagicMock()
        store.connect = AsyncMock(return_value=True)

        with patch("people_api.main.seed_people", new=AsyncMock()) as seed:
            await main.bootstrap_store(store)
            seed.assert_not_awaited()


class TestSeedPeople:

    @pytest.mark.asyncio
    async def test_inserts_sample_people(self, mock_collection):
        mock_collection.insert_many.return_value = MagicMock(
            inserted_ids=[ObjectId() for _ in SAMPLE_PEOPLE]
        )
        store = MagicMock(people=mock_collection)

        inserted = await seed_people(store)

        assert inserted == 4
        documents = mock_collection.insert_many.await_args.args[0]
        assert [d["name"] for d in documents] == ["John", "Jane", "Alice", "Bob"]

    @pytest.mark.asyncio
    async def test_batch_failure_is_logged_not_raised(self, mock_collection, caplog):
        mock_collection.insert_many.side_effect = BulkWriteError(
            {"writeErrors": [{"code": 11000, "errmsg": "duplicate key"}]}
        )
        store = MagicMock(people=mock_collection)

        with caplog.at_level(logging.ERROR):
            inserted = await seed_people(store)

        assert inserted == 0
        assert "Error adding people" in caplog.text
