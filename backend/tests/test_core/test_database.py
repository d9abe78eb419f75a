"""
Unit tests for Database connection handling
"""
from unittest.mock import MagicMock, patch

import psycopg2
import pytest

import catalog.models  # noqa: F401  (register tables on the real Base first)
from catalog.core.database import Database


class TestDatabase:

    def test_requires_url(self):
        with pytest.raises(ValueError, match="DATABASE_URL not configured"):
            Database("")

    def test_from_settings(self, settings):
        database = Database.from_settings(settings)

        assert database.database_url == settings.get_database_url()
        assert database.max_retries == settings.DB_CONNECT_RETRIES

    @patch('catalog.core.database.time.sleep')
    @patch('catalog.core.database.psycopg2.connect')
    def test_connect_retries_operational_errors(self, mock_connect, mock_sleep):
        conn = MagicMock()
        mock_connect.side_effect = [psycopg2.OperationalError("SSL connection has been closed unexpectedly"), conn]

        result = Database("postgresql://x", max_retries=3, retry_delay=0.5).connect()

        assert result is conn
        assert mock_connect.call_count == 2
        mock_sleep.assert_called_once_with(0.5)

    @patch('catalog.core.database.time.sleep')
    @patch('catalog.core.database.psycopg2.connect')
    def test_connect_gives_up_after_max_retries(self, mock_connect, mock_sleep):
        mock_connect.side_effect = psycopg2.OperationalError("refused")

        with pytest.raises(psycopg2.OperationalError):
            Database("postgresql://x", max_retries=3, retry_delay=1.0).connect()

        assert mock_connect.call_count == 3
        # Exponential backoff between attempts
        assert [c.args[0] for c in mock_sleep.call_args_list] == [1.0, 2.0]

    @pytest.mark.parametrize("configured, override", [(0, None), (3, 0)])
    @patch('catalog.core.database.psycopg2.connect')
    def test_connect_always_tries_once(self, mock_connect, configured, override):
        mock_connect.side_effect = psycopg2.OperationalError("refused")

        with pytest.raises(psycopg2.OperationalError):
            Database("postgresql://x", max_retries=configured).connect(max_retries=override)

        assert mock_connect.call_count == 1

    @patch('catalog.core.database.psycopg2.connect')
    def test_connect_does_not_retry_other_errors(self, mock_connect):
        mock_connect.side_effect = psycopg2.ProgrammingError("bad dsn")

        with pytest.raises(psycopg2.ProgrammingError):
            Database("postgresql://x", max_retries=3).connect()

        assert mock_connect.call_count == 1

    @patch('catalog.core.database.psycopg2.connect')
    def test_ping_runs_select_one(self, mock_connect):
        conn = mock_connect.return_value
        cursor = conn.cursor.return_value

        latency = Database("postgresql://x").ping()

        cursor.execute.assert_called_once_with("SELECT 1")
        conn.close.assert_called_once()
        assert latency >= 0

    @patch('catalog.core.database.create_engine')
    def test_engine_is_created_lazily(self, mock_create_engine):
        database = Database("postgresql://x")
        mock_create_engine.assert_not_called()

        assert database.engine is mock_create_engine.return_value
        assert database.engine is mock_create_engine.return_value
        mock_create_engine.assert_called_once()

        database.dispose()
        mock_create_engine.return_value.dispose.assert_called_once()

    @patch('catalog.core.database.Base')
    @patch('catalog.core.database.create_engine')
    def test_create_schema(self, mock_create_engine, mock_base):
        Database("postgresql://x").create_schema()

        mock_base.metadata.create_all.assert_called_once_with(mock_create_engine.return_value)
        mock_base.metadata.drop_all.assert_not_called()
