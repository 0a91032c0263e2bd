"""
Integration tests for application startup behavior.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from evently.main import app

def test_app_startup():
    """Test that the application startup initializes and closes the database."""
    mock_init_db = AsyncMock()
    mock_close_db = AsyncMock()

    with patch("evently.main.init_db", mock_init_db), patch("evently.main.close_db", mock_close_db):
        with TestClient(app) as client:
            response = client.get("/health")

            assert response.status_code == 200
            assert response.json() == {"status": "healthy"}
            mock_init_db.assert_called_once()

    mock_close_db.assert_called_once()

def test_app_startup_database_error():
    """Test that a database failure aborts startup."""
    mock_init_db = AsyncMock(side_effect=Exception("Database error"))

    with patch("evently.main.init_db", mock_init_db):
        with pytest.raises(Exception) as exc_info:
            with TestClient(app):
                pass

    assert str(exc_info.value) == "Database error"
    mock_init_db.assert_called_once()
